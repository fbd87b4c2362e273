"""List bookmarked and starred posts use case."""

from pydantic import BaseModel

from forum.domain.model.post import Post
from forum.domain.service import CollectionService


class ListCollectionsResponse(BaseModel):
    """Bookmarked and starred posts, each in toggle order."""

    bookmarked: list[Post]
    starred: list[Post]


class ListCollectionsUseCase:
    """Use case for reading the actor's collections."""

    def __init__(self, collection_service: CollectionService) -> None:
        """Initialize list collections use case.

        Args:
            collection_service: Collection domain service
        """
        self.collection_service = collection_service

    async def execute(self) -> ListCollectionsResponse:
        """Execute list collections flow.

        Posts reflect their current state (e.g. comment counts), not the
        state at toggle time.
        """
        return ListCollectionsResponse(
            bookmarked=await self.collection_service.list_bookmarked_posts(),
            starred=await self.collection_service.list_starred_posts(),
        )
