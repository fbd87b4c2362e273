"""In-memory bookmark and star repositories."""

import asyncio

from forum.domain.repository.collection import (
    BookmarkRepository,
    PostCollectionRepository,
    StarRepository,
)
from forum.domain.value import PostId


class InMemoryPostCollection(PostCollectionRepository):
    """Insertion-ordered set of post IDs guarded by its own lock."""

    def __init__(self) -> None:
        # dict keys give set semantics with insertion order
        self._members: dict[PostId, None] = {}
        self._lock = asyncio.Lock()

    async def toggle(self, post_id: PostId) -> bool:
        """Flip membership."""
        async with self._lock:
            if post_id in self._members:
                del self._members[post_id]
                return False
            self._members[post_id] = None
            return True

    async def contains(self, post_id: PostId) -> bool:
        """Check membership."""
        return post_id in self._members

    async def list_ids(self) -> list[PostId]:
        """Members in insertion order."""
        return list(self._members)


class InMemoryBookmarkRepository(InMemoryPostCollection, BookmarkRepository):
    """In-memory bookmarks."""


class InMemoryStarRepository(InMemoryPostCollection, StarRepository):
    """In-memory stars."""
