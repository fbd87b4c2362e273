"""Toggle bookmark / star use cases."""

from pydantic import BaseModel

from forum.domain.service import CollectionService
from forum.domain.value import PostId


class ToggleRequest(BaseModel):
    """Toggle bookmark or star request."""

    post_id: str


class ToggleResponse(BaseModel):
    """Toggle response.

    ``member`` is None when the post does not exist and nothing changed.
    """

    post_id: str
    member: bool | None


class ToggleBookmarkUseCase:
    """Use case for saving or unsaving a post."""

    def __init__(self, collection_service: CollectionService) -> None:
        self.collection_service = collection_service

    async def execute(self, request: ToggleRequest) -> ToggleResponse:
        member = await self.collection_service.toggle_bookmark(PostId(request.post_id))
        return ToggleResponse(post_id=request.post_id, member=member)


class ToggleStarUseCase:
    """Use case for starring or unstarring a post."""

    def __init__(self, collection_service: CollectionService) -> None:
        self.collection_service = collection_service

    async def execute(self, request: ToggleRequest) -> ToggleResponse:
        member = await self.collection_service.toggle_star(PostId(request.post_id))
        return ToggleResponse(post_id=request.post_id, member=member)
