"""Add comment use case (store only)."""

from pydantic import BaseModel

from forum.domain.model.comment import Comment
from forum.domain.model.post import Post
from forum.domain.service import CommentService, PostService
from forum.domain.value import CommentId, PostId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment: Comment
    post: Post | None  # Updated post, None if the post is unknown


class AddCommentUseCase:
    """Use case for writing a comment to the store.

    Precondition: the moderation gate did not block ``content``. This use case
    does not re-check; SubmitCommentUseCase is the gated entry point.
    """

    def __init__(self, comment_service: CommentService, post_service: PostService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Steps:
        1. Create the comment (top-level, or appended to its parent's replies)
        2. Increment the post's comment count (skipped for an unknown post)

        Store locks only guard synchronous mutations, so both writes land
        before any other task runs and readers never see one without the other.

        Args:
            request: Add comment request

        Returns:
            Created comment and the updated post
        """
        post_id = PostId(request.post_id)
        comment = await self.comment_service.create_comment(
            post_id=post_id,
            content=request.content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )
        # No suspension point between the insert and the increment
        post = await self.post_service.increment_comment_count(post_id)
        return AddCommentResponse(comment=comment, post=post)
