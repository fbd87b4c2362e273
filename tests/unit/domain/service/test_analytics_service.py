"""Unit tests for AnalyticsService."""

import math

import pytest

from forum.config import AnalyticsSettings
from forum.domain.service import AnalyticsService
from forum.domain.value import EngagementTier
from tests.conftest import make_insights
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestComputeInsights:
    """Tests for compute_insights method."""

    @pytest.mark.asyncio
    async def test_top_posts_ranked_by_views(self, unit_env):
        """Most viewed posts come first."""
        # Arrange
        analytics_service = await unit_env.get(AnalyticsService)
        posts = [
            make_insights("1", views=100),
            make_insights("2", views=50),
            make_insights("3", views=75),
        ]

        # Act
        summary = analytics_service.compute_insights(posts)

        # Assert
        assert [p.views for p in summary.top_posts] == [100, 75, 50]
        assert summary.total_views == 225

    @pytest.mark.asyncio
    async def test_empty_snapshot_gives_zero_summary(self, unit_env):
        """No posts means zeros everywhere and the low tier."""
        # Arrange
        analytics_service = await unit_env.get(AnalyticsService)

        # Act
        summary = analytics_service.compute_insights([])

        # Assert
        assert summary.total_views == 0
        assert summary.total_upvotes == 0
        assert summary.total_comments == 0
        assert summary.total_saves == 0
        assert summary.total_shares == 0
        assert summary.average_engagement_rate == 0.0
        assert summary.average_engagement_tier == EngagementTier.LOW
        assert summary.top_posts == []

    def test_totals_and_average(self):
        """Totals are summed and the engagement rate is averaged."""
        # Arrange
        analytics_service = AnalyticsService(settings=AnalyticsSettings())
        posts = [
            make_insights("1", views=10, upvotes=3, comments=2, saves=1, shares=4,
                          engagement_rate=90),
            make_insights("2", views=20, upvotes=-1, comments=5, saves=0, shares=1,
                          engagement_rate=70.5),
        ]

        # Act
        summary = analytics_service.compute_insights(posts)

        # Assert
        assert summary.total_views == 30
        assert summary.total_upvotes == 2
        assert summary.total_comments == 7
        assert summary.total_saves == 1
        assert summary.total_shares == 5
        assert summary.average_engagement_rate == pytest.approx(80.25)
        assert summary.average_engagement_tier == EngagementTier.HIGH

    def test_top_posts_limited_and_stable(self):
        """At most three posts are ranked; ties keep snapshot order."""
        # Arrange
        analytics_service = AnalyticsService(settings=AnalyticsSettings())
        posts = [make_insights(str(i), views=10) for i in range(5)]

        # Act
        summary = analytics_service.compute_insights(posts)

        # Assert
        assert [p.post_id for p in summary.top_posts] == ["0", "1", "2"]

    def test_snapshot_not_mutated(self):
        """The input sequence is left as it was."""
        # Arrange
        analytics_service = AnalyticsService(settings=AnalyticsSettings())
        posts = [make_insights("a", views=1), make_insights("b", views=2)]
        before = list(posts)

        # Act
        analytics_service.compute_insights(posts)

        # Assert
        assert posts == before


class TestEngagementTier:
    """Tests for engagement_tier method."""

    @pytest.mark.parametrize(
        "rate,tier",
        [
            (100, EngagementTier.HIGH),
            (80, EngagementTier.HIGH),
            (79.99, EngagementTier.GOOD),
            (60, EngagementTier.GOOD),
            (59.99, EngagementTier.FAIR),
            (40, EngagementTier.FAIR),
            (39.99, EngagementTier.LOW),
            (0, EngagementTier.LOW),
            (-5, EngagementTier.LOW),
            (math.nan, EngagementTier.LOW),
        ],
    )
    def test_tier_boundaries(self, rate, tier):
        """Lower bounds are inclusive and every rate maps to a tier."""
        analytics_service = AnalyticsService(settings=AnalyticsSettings())

        assert analytics_service.engagement_tier(rate) == tier
