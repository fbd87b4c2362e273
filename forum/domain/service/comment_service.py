"""Comment domain service."""

from datetime import datetime

import logfire

from forum.domain.model.comment import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import Author, CommentId, IdGenerator, PostId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    This service does not moderate. Callers run the moderation gate first
    and only create comments it did not block.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        id_generator: IdGenerator,
        actor: Author,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            id_generator: Source of comment IDs
            actor: Author of comments created by this process
        """
        self.comment_repository = comment_repository
        self.id_generator = id_generator
        self.actor = actor

    async def create_comment(
        self,
        post_id: PostId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        A reply is appended to its parent's replies. The parent is looked up
        at any depth; if it is unknown or belongs to another post, the comment
        is placed top-level instead so that nothing is lost.

        Args:
            post_id: Post ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            parent_id=parent_id,
            content_length=len(content),
        ):
            parent = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None or parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment not found on post, placing top-level",
                        parent_id=parent_id,
                        post_id=post_id,
                    )
                    parent = None

            comment = Comment(
                id=CommentId(self.id_generator.next_id()),
                post_id=post_id,
                author=self.actor,
                content=content,
                created_at=datetime.now(),
                votes=0,
                parent_id=parent.id if parent else None,
                depth=parent.depth + 1 if parent else 0,
                replies=[],
            )

            if parent is not None and await self.comment_repository.add_reply(
                parent.id, comment
            ):
                logfire.info(
                    "Reply created",
                    comment_id=comment.id,
                    post_id=post_id,
                    parent_id=parent.id,
                    depth=comment.depth,
                )
                return comment

            if parent is not None:
                # Parent vanished between lookup and insert
                comment = comment.model_copy(update={"parent_id": None, "depth": 0})

            await self.comment_repository.add_top_level(comment)
            logfire.info("Comment created", comment_id=comment.id, post_id=post_id)
            return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get the top-level comments of a post, replies nested.

        Args:
            post_id: Post ID

        Returns:
            Top-level comments in store order (newest first)
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID, at any depth.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=comment_id)
            else:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def count_comments_for_post(self, post_id: PostId) -> int:
        """Count every comment of a post, replies included."""
        return await self.comment_repository.count_by_post(post_id)
