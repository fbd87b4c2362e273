"""Engagement analytics domain service."""

from collections.abc import Sequence

import logfire

from forum.config import AnalyticsSettings
from forum.domain.model.insights import InsightsSummary, PostInsights
from forum.domain.value import EngagementTier

from .base import Service


class AnalyticsService(Service):
    """Derives engagement statistics from a snapshot of posts.

    Stateless over its input: the snapshot is never mutated and the store
    is never touched.
    """

    def __init__(self, settings: AnalyticsSettings) -> None:
        """Initialize analytics service.

        Args:
            settings: Ranking limit and tier thresholds
        """
        self.settings = settings

    def compute_insights(self, posts: Sequence[PostInsights]) -> InsightsSummary:
        """Aggregate totals, average engagement and the most viewed posts.

        Args:
            posts: Snapshot of per-post counters

        Returns:
            Summary; all zeros for an empty snapshot
        """
        with logfire.span("analytics_service.compute_insights", post_count=len(posts)):
            average = (
                sum(p.engagement_rate for p in posts) / len(posts) if posts else 0.0
            )

            # sorted() is stable, so equal views keep store order
            top_posts = sorted(posts, key=lambda p: p.views, reverse=True)[
                : self.settings.top_posts_limit
            ]

            summary = InsightsSummary(
                total_views=sum(p.views for p in posts),
                total_upvotes=sum(p.upvotes for p in posts),
                total_comments=sum(p.comments for p in posts),
                total_saves=sum(p.saves for p in posts),
                total_shares=sum(p.shares for p in posts),
                average_engagement_rate=average,
                average_engagement_tier=self.engagement_tier(average),
                top_posts=top_posts,
            )
            logfire.info(
                "Insights computed",
                total_views=summary.total_views,
                average_engagement_rate=average,
            )
            return summary

    def engagement_tier(self, rate: float) -> EngagementTier:
        """Bucket an engagement rate.

        Total over the reals: anything below the fair bound (including
        negatives and NaN) is low.
        """
        if rate >= self.settings.high_tier_rate:
            return EngagementTier.HIGH
        if rate >= self.settings.good_tier_rate:
            return EngagementTier.GOOD
        if rate >= self.settings.fair_tier_rate:
            return EngagementTier.FAIR
        return EngagementTier.LOW
