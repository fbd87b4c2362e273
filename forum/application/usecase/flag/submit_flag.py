"""Submit flag use case."""

from pydantic import BaseModel

from forum.domain.model.flag import FlagDraft, ModerationFlag
from forum.domain.service import FlagService
from forum.domain.value import CommentId, FlagReason, PostId


class SubmitFlagRequest(BaseModel):
    """Submit flag request."""

    reporter_id: str
    reason: FlagReason
    description: str = ""
    post_id: str | None = None
    comment_id: str | None = None


class SubmitFlagResponse(BaseModel):
    """Submit flag response."""

    flag: ModerationFlag


class SubmitFlagUseCase:
    """Use case for reporting a post or comment."""

    def __init__(self, flag_service: FlagService) -> None:
        """Initialize submit flag use case.

        Args:
            flag_service: Flag domain service
        """
        self.flag_service = flag_service

    async def execute(self, request: SubmitFlagRequest) -> SubmitFlagResponse:
        """Execute submit flag flow.

        Raises:
            ValueError: If neither a post nor a comment is targeted
        """
        if not request.post_id and not request.comment_id:
            raise ValueError("A flag must target a post or a comment")

        flag = await self.flag_service.submit_flag(
            FlagDraft(
                post_id=PostId(request.post_id) if request.post_id else None,
                comment_id=CommentId(request.comment_id) if request.comment_id else None,
                reporter_id=request.reporter_id,
                reason=request.reason,
                description=request.description,
            )
        )
        return SubmitFlagResponse(flag=flag)
