"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.export import ContentExport
from forum.domain.model.flag import FlagDraft, ModerationFlag, UserTrustLevel
from forum.domain.model.insights import InsightsSummary, PostInsights
from forum.domain.model.moderation import GateDecision, ToxicityResult
from forum.domain.model.post import Post, PostDraft
from forum.domain.model.trending import TrendingTopic

__all__ = [
    "Post",
    "PostDraft",
    "Comment",
    "ToxicityResult",
    "GateDecision",
    "PostInsights",
    "InsightsSummary",
    "TrendingTopic",
    "ContentExport",
    "FlagDraft",
    "ModerationFlag",
    "UserTrustLevel",
]
