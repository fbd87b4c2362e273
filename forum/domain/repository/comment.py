"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for threaded comments.

    Top-level comments are kept newest first; replies are nested inside
    their parent, oldest first.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment anywhere in the stored threads.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment (with its replies) if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find the top-level comments of a post in store order.

        Args:
            post_id: The post ID

        Returns:
            Top-level comments with replies nested
        """
        pass

    @abstractmethod
    async def add_top_level(self, comment: Comment) -> Comment:
        """Insert a comment at the front of the top-level collection.

        Args:
            comment: The comment to add

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def add_reply(self, parent_id: CommentId, reply: Comment) -> bool:
        """Append a reply to the end of a parent's replies.

        Args:
            parent_id: The parent comment ID (any depth)
            reply: The reply to add

        Returns:
            True if the parent was found and the reply stored, False otherwise
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count every comment of a post, replies included.

        Args:
            post_id: The post ID

        Returns:
            Number of comments in the post's threads
        """
        pass
