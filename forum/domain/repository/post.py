"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.post import Post
from forum.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Posts are kept newest first; that order is preserved across updates.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, tag: Optional[str] = None) -> List[Post]:
        """Return a snapshot of posts, newest first.

        Args:
            tag: Only return posts carrying this tag (None for all)

        Returns:
            List of posts in store order
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: List[PostId]) -> List[Post]:
        """Find posts by ID, in the order of ``post_ids``.

        Unknown IDs are skipped.

        Args:
            post_ids: Post IDs to resolve

        Returns:
            The posts that exist
        """
        pass

    @abstractmethod
    async def add(self, post: Post) -> Post:
        """Insert a new post at the front of the collection.

        Args:
            post: The post to add

        Returns:
            The stored post
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment a post's comment count by 1.

        Args:
            post_id: The post ID

        Returns:
            The updated post, or None if the post does not exist
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count stored posts."""
        pass
