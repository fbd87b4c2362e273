"""In-memory comment repository."""

import asyncio
from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """Process-lifetime implementation of CommentRepository.

    Only top-level comments are held directly; replies live inside them.
    Lock bodies never await, so each mutation is applied in one step.
    """

    def __init__(self) -> None:
        self._comments: list[Comment] = []
        self._lock = asyncio.Lock()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment at any depth."""
        for comment in self._comments:
            found = comment.find(comment_id)
            if found is not None:
                return found
        return None

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Top-level comments of a post in store order."""
        return [c for c in self._comments if c.post_id == post_id]

    async def add_top_level(self, comment: Comment) -> Comment:
        """Prepend a top-level comment."""
        async with self._lock:
            self._comments.insert(0, comment)
        return comment

    async def add_reply(self, parent_id: CommentId, reply: Comment) -> bool:
        """Append a reply under its parent, searching every thread."""
        async with self._lock:
            for index, root in enumerate(self._comments):
                updated = root.with_reply(parent_id, reply)
                if updated is not None:
                    self._comments[index] = updated
                    return True
            return False

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments of a post, replies included."""
        return sum(c.thread_size for c in self._comments if c.post_id == post_id)
