"""Per-user post collection repository interfaces (bookmarks, stars)."""

from abc import ABC, abstractmethod
from typing import List

from forum.domain.value import PostId


class PostCollectionRepository(ABC):
    """A set of post IDs kept in insertion order."""

    @abstractmethod
    async def toggle(self, post_id: PostId) -> bool:
        """Atomically flip membership of ``post_id``.

        Args:
            post_id: The post ID

        Returns:
            True if the post is a member after the toggle
        """
        pass

    @abstractmethod
    async def contains(self, post_id: PostId) -> bool:
        """Check membership of ``post_id``."""
        pass

    @abstractmethod
    async def list_ids(self) -> List[PostId]:
        """Return member IDs in the order they were added."""
        pass


class BookmarkRepository(PostCollectionRepository):
    """Posts saved by the actor."""


class StarRepository(PostCollectionRepository):
    """Posts starred by the actor."""
