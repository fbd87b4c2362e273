"""Domain value objects for the forum."""

from forum.domain.value.identifiers import CommentId, FlagId, IdGenerator, PostId
from forum.domain.value.types import (
    Author,
    Difficulty,
    EngagementTier,
    FlagReason,
    FlagStatus,
    ModerationAction,
    PostType,
    TrustLevel,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "FlagId",
    "IdGenerator",
    # Types
    "Author",
    "Difficulty",
    "EngagementTier",
    "FlagReason",
    "FlagStatus",
    "ModerationAction",
    "PostType",
    "TrustLevel",
]
