"""Persistence infrastructure providers."""

from dishka import Scope, provide

from forum.config import Settings
from forum.domain.model.flag import UserTrustLevel
from forum.domain.repository import (
    BookmarkRepository,
    CommentRepository,
    FlagRepository,
    PostRepository,
    StarRepository,
    TrustRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryBookmarkRepository,
    InMemoryCommentRepository,
    InMemoryFlagRepository,
    InMemoryPostRepository,
    InMemoryStarRepository,
    InMemoryTrustRepository,
)
from forum.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """In-memory persistence provider - concrete, no mocks needed.

    Repositories are APP-scoped: the store lives as long as the container,
    and every request sees the same collections.
    """

    scope = Scope.APP

    @provide
    def get_post_repository(self) -> PostRepository:
        """Provide Post repository."""
        return InMemoryPostRepository()

    @provide
    def get_comment_repository(self) -> CommentRepository:
        """Provide Comment repository."""
        return InMemoryCommentRepository()

    @provide
    def get_bookmark_repository(self) -> BookmarkRepository:
        """Provide Bookmark repository."""
        return InMemoryBookmarkRepository()

    @provide
    def get_star_repository(self) -> StarRepository:
        """Provide Star repository."""
        return InMemoryStarRepository()

    @provide
    def get_flag_repository(self) -> FlagRepository:
        """Provide Flag repository."""
        return InMemoryFlagRepository()

    @provide
    def get_trust_repository(self, settings: Settings) -> TrustRepository:
        """Provide Trust repository seeded from settings."""
        return InMemoryTrustRepository(
            seed=[
                UserTrustLevel.model_validate(record.model_dump())
                for record in settings.trust_seed()
            ]
        )
