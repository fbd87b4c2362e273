"""List posts use case."""

from pydantic import BaseModel

from forum.domain.model.post import Post
from forum.domain.service import PostService


class ListPostsRequest(BaseModel):
    """List posts request."""

    tag: str | None = None  # Filter by tag


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[Post]
    total: int


class ListPostsUseCase:
    """Use case for listing the feed, newest first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request

        Returns:
            Posts in store order
        """
        posts = await self.post_service.list_posts(tag=request.tag)
        return ListPostsResponse(posts=posts, total=len(posts))
