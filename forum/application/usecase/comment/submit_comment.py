"""Submit comment use case (moderation gate, then store)."""

import logfire
from pydantic import BaseModel

from forum.domain.model.comment import Comment
from forum.domain.model.moderation import GateDecision
from forum.domain.model.post import Post
from forum.domain.service import CommentService, ModerationService, PostService
from forum.domain.value import CommentId, ModerationAction, PostId


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    post_id: str
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class SubmitCommentResponse(BaseModel):
    """Submit comment response.

    ``message`` is the advisory (warn) or rejection reason (block) for the
    presentation layer to surface.
    """

    admitted: bool
    action: ModerationAction
    message: str | None
    decision: GateDecision
    comment: Comment | None = None
    post: Post | None = None


class SubmitCommentUseCase:
    """Use case for posting a comment through the moderation gate."""

    def __init__(
        self,
        moderation_service: ModerationService,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize submit comment use case.

        Args:
            moderation_service: Moderation gate
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.moderation_service = moderation_service
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Steps:
        1. Run the moderation gate (may suspend; nothing is written yet)
        2. On block, return the decision without touching the store
        3. Otherwise create the comment and increment the post's count

        Args:
            request: Submit comment request

        Returns:
            Gate decision, plus the comment and updated post when admitted
        """
        post_id = PostId(request.post_id)

        with logfire.span("submit_comment.execute", post_id=post_id):
            decision = await self.moderation_service.moderate(request.content)

            if not decision.admitted:
                logfire.info("Comment withheld by moderation", post_id=post_id)
                return SubmitCommentResponse(
                    admitted=False,
                    action=decision.action,
                    message=decision.message,
                    decision=decision,
                )

            comment = await self.comment_service.create_comment(
                post_id=post_id,
                content=request.content,
                parent_id=CommentId(request.parent_id) if request.parent_id else None,
            )
            # No suspension point between the insert and the increment
            post = await self.post_service.increment_comment_count(post_id)

            return SubmitCommentResponse(
                admitted=True,
                action=decision.action,
                message=decision.message,
                decision=decision,
                comment=comment,
                post=post,
            )
