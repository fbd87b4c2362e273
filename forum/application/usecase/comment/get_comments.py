"""Get comments use case."""

from pydantic import BaseModel

from forum.domain.model.comment import Comment
from forum.domain.service import CommentService
from forum.domain.value import PostId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[Comment]  # Top-level, replies nested
    total: int  # Every comment in the threads, replies included


class GetCommentsUseCase:
    """Use case for getting the comment threads of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request

        Returns:
            Top-level comments, newest first, with nested replies
        """
        comments = await self.comment_service.get_comments_for_post(
            PostId(request.post_id)
        )
        return GetCommentsResponse(
            post_id=request.post_id,
            comments=comments,
            total=sum(c.thread_size for c in comments),
        )
