"""Engagement analytics inputs and outputs."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import EngagementTier, PostId


class PostInsights(DomainModel):
    """Per-post interaction counters.

    ``engagement_rate`` is supplied by the caller; the aggregator only
    consumes and ranks it.
    """

    post_id: PostId
    title: str
    views: int = Field(default=0, ge=0)
    upvotes: int = 0
    comments: int = Field(default=0, ge=0)
    saves: int = Field(default=0, ge=0)
    shares: int = Field(default=0, ge=0)
    engagement_rate: float = 0.0
    created_at: datetime = Field(default_factory=datetime.now)


class InsightsSummary(DomainModel):
    """Aggregated engagement over a snapshot of posts."""

    total_views: int = 0
    total_upvotes: int = 0
    total_comments: int = 0
    total_saves: int = 0
    total_shares: int = 0
    average_engagement_rate: float = 0.0
    average_engagement_tier: EngagementTier = EngagementTier.LOW
    top_posts: list[PostInsights] = Field(default_factory=list)
