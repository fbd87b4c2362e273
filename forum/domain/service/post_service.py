"""Post domain service."""

from datetime import datetime

import logfire

from forum.domain.model.post import Post, PostDraft
from forum.domain.repository import PostRepository
from forum.domain.value import Author, IdGenerator, PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        id_generator: IdGenerator,
        default_author: Author,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            id_generator: Source of post IDs
            default_author: Author used when a draft names none
        """
        self.post_repository = post_repository
        self.id_generator = id_generator
        self.default_author = default_author

    async def create_post(self, draft: PostDraft) -> Post:
        """Create a post from a draft and put it at the front of the feed.

        Posts are not moderated; only comments go through the gate.

        Args:
            draft: Caller-supplied post content

        Returns:
            Created post with ID, timestamp and zeroed counters
        """
        with logfire.span(
            "post_service.create_post", title=draft.title, type=draft.type.value
        ):
            post = Post(
                id=PostId(self.id_generator.next_id()),
                title=draft.title,
                content=draft.content,
                code=draft.code,
                language=draft.language,
                author=draft.author or self.default_author,
                votes=0,
                comment_count=0,
                tags=draft.tags,
                created_at=datetime.now(),
                type=draft.type,
                views=0,
                difficulty=draft.difficulty,
            )

            saved = await self.post_repository.add(post)
            logfire.info("Post created", post_id=saved.id, tags=saved.tags)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=post_id, title=post.title)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def list_posts(self, tag: str | None = None) -> list[Post]:
        """Snapshot of posts, newest first.

        Args:
            tag: Only posts carrying this tag (None for all)

        Returns:
            Posts in store order
        """
        with logfire.span("post_service.list_posts", tag=tag):
            posts = await self.post_repository.find_all(tag=tag)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def increment_comment_count(self, post_id: PostId) -> Post | None:
        """Increment a post's comment count.

        An unknown post is tolerated: the increment is skipped.

        Args:
            post_id: Post ID

        Returns:
            Updated post, or None if the post does not exist
        """
        with logfire.span("post_service.increment_comment_count", post_id=post_id):
            updated = await self.post_repository.increment_comment_count(post_id)
            if updated is None:
                logfire.warn(
                    "Post not found for comment count increment, skipping",
                    post_id=post_id,
                )
                return None

            logfire.info(
                "Comment count incremented",
                post_id=post_id,
                new_count=updated.comment_count,
            )
            return updated
