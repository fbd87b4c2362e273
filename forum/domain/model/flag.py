"""Community moderation flags and user trust levels.

Members flag posts or comments; moderators resolve or dismiss the flags.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, FlagId, FlagReason, FlagStatus, PostId, TrustLevel


class FlagDraft(DomainModel):
    """Caller-supplied content of a new flag."""

    post_id: Optional[PostId] = None
    comment_id: Optional[CommentId] = None
    reporter_id: str
    reason: FlagReason
    description: str = ""


class ModerationFlag(DomainModel):
    """A report against a post or comment."""

    id: FlagId
    post_id: Optional[PostId] = None
    comment_id: Optional[CommentId] = None
    reporter_id: str
    reason: FlagReason
    description: str = ""
    status: FlagStatus = FlagStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[str] = None


class UserTrustLevel(DomainModel):
    """Trust record of a community member."""

    user_id: str
    level: TrustLevel = TrustLevel.NEW
    reputation: int = Field(default=0, ge=0)
    flags_submitted: int = Field(default=0, ge=0)
    flags_accurate: int = Field(default=0, ge=0)
    moderation_actions: int = Field(default=0, ge=0)
