"""Bookmark and star domain service."""

import logfire

from forum.domain.model.post import Post
from forum.domain.repository import (
    BookmarkRepository,
    PostCollectionRepository,
    PostRepository,
    StarRepository,
)
from forum.domain.value import PostId

from .base import Service


class CollectionService(Service):
    """Domain service for the actor's bookmarks and stars.

    Toggling an unknown post is a no-op, so stale references from the UI
    never raise.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        bookmark_repository: BookmarkRepository,
        star_repository: StarRepository,
    ) -> None:
        """Initialize collection service.

        Args:
            post_repository: Post repository (existence checks, resolution)
            bookmark_repository: Bookmark set
            star_repository: Star set
        """
        self.post_repository = post_repository
        self.bookmark_repository = bookmark_repository
        self.star_repository = star_repository

    async def toggle_bookmark(self, post_id: PostId) -> bool | None:
        """Flip bookmark membership of a post.

        Args:
            post_id: Post ID

        Returns:
            New membership, or None if the post does not exist
        """
        return await self._toggle("bookmark", self.bookmark_repository, post_id)

    async def toggle_star(self, post_id: PostId) -> bool | None:
        """Flip star membership of a post.

        Args:
            post_id: Post ID

        Returns:
            New membership, or None if the post does not exist
        """
        return await self._toggle("star", self.star_repository, post_id)

    async def is_bookmarked(self, post_id: PostId) -> bool:
        return await self.bookmark_repository.contains(post_id)

    async def is_starred(self, post_id: PostId) -> bool:
        return await self.star_repository.contains(post_id)

    async def list_bookmarked_posts(self) -> list[Post]:
        """Bookmarked posts in the order they were bookmarked."""
        ids = await self.bookmark_repository.list_ids()
        return await self.post_repository.find_by_ids(ids)

    async def list_starred_posts(self) -> list[Post]:
        """Starred posts in the order they were starred."""
        ids = await self.star_repository.list_ids()
        return await self.post_repository.find_by_ids(ids)

    async def _toggle(
        self, kind: str, repository: PostCollectionRepository, post_id: PostId
    ) -> bool | None:
        with logfire.span(f"collection_service.toggle_{kind}", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn(f"Toggle {kind} on unknown post, ignoring", post_id=post_id)
                return None

            member = await repository.toggle(post_id)
            logfire.info(f"Toggled {kind}", post_id=post_id, member=member)
            return member
