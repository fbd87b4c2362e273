"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from forum.domain.value.common import ValueObject


class PostType(str, Enum):
    """Kind of post."""

    QUESTION = "question"
    DISCUSSION = "discussion"
    CODE_REVIEW = "code-review"


class Difficulty(str, Enum):
    """Self-declared difficulty of a post."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ModerationAction(str, Enum):
    """Outcome of the moderation gate."""

    ALLOW = "allow"
    WARN = "warn"  # Admitted, with an advisory
    BLOCK = "block"  # Not admitted


class EngagementTier(str, Enum):
    """Bucket for a per-post engagement rate."""

    HIGH = "high"
    GOOD = "good"
    FAIR = "fair"
    LOW = "low"


class FlagReason(str, Enum):
    """Why a community member flagged content."""

    SPAM = "spam"
    OFFENSIVE = "offensive"
    OFF_TOPIC = "off-topic"
    COPYRIGHT = "copyright"
    OTHER = "other"


class FlagStatus(str, Enum):
    """Lifecycle of a moderation flag."""

    PENDING = "pending"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


class TrustLevel(str, Enum):
    """Community trust level of a user."""

    NEW = "new"
    TRUSTED = "trusted"
    MODERATOR = "moderator"
    ADMIN = "admin"


class Author(ValueObject):
    """Author details embedded by value in posts and comments."""

    name: str
    avatar: Optional[str] = None
    reputation: int = Field(default=0, ge=0)
