"""In-memory post repository."""

import asyncio
from typing import Optional

from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """Process-lifetime implementation of PostRepository.

    Posts are held in a list, newest first. Mutations hold the repository's
    own lock so read-modify-write never interleaves.
    """

    def __init__(self) -> None:
        self._posts: list[Post] = []
        self._lock = asyncio.Lock()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        for post in self._posts:
            if post.id == post_id:
                return post
        return None

    async def find_all(self, tag: Optional[str] = None) -> list[Post]:
        """Return posts newest first."""
        if tag is None:
            return list(self._posts)
        return [p for p in self._posts if tag in p.tags]

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Resolve IDs to posts, skipping unknown IDs."""
        by_id = {post.id: post for post in self._posts}
        return [by_id[pid] for pid in post_ids if pid in by_id]

    async def add(self, post: Post) -> Post:
        """Prepend a post."""
        async with self._lock:
            self._posts.insert(0, post)
        return post

    async def increment_comment_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment comment count by 1."""
        async with self._lock:
            for index, post in enumerate(self._posts):
                if post.id == post_id:
                    # Posts are immutable; replace in place to keep order
                    updated = post.model_copy(
                        update={"comment_count": post.comment_count + 1}
                    )
                    self._posts[index] = updated
                    return updated
            return None

    async def count(self) -> int:
        """Count stored posts."""
        return len(self._posts)
