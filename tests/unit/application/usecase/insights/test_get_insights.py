"""Unit tests for GetInsightsUseCase."""

import pytest

from forum.application.usecase.insights import GetInsightsRequest, GetInsightsUseCase
from forum.domain.model import PostDraft
from forum.domain.repository import PostRepository
from forum.domain.service import CollectionService, PostService
from forum.domain.value import EngagementTier
from tests.conftest import make_insights, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetInsightsUseCase:
    """Tests for GetInsightsUseCase."""

    @pytest.mark.asyncio
    async def test_supplied_snapshot_is_aggregated(self, unit_env):
        """A caller snapshot is used as is."""
        # Arrange
        use_case = await unit_env.get(GetInsightsUseCase)
        posts = [
            make_insights("1", views=100, engagement_rate=50),
            make_insights("2", views=50, engagement_rate=30),
        ]

        # Act
        response = await use_case.execute(GetInsightsRequest(posts=posts))

        # Assert
        assert response.posts == posts
        assert response.summary.total_views == 150
        assert response.summary.average_engagement_rate == pytest.approx(40.0)
        assert response.summary.average_engagement_tier == EngagementTier.FAIR

    @pytest.mark.asyncio
    async def test_snapshot_built_from_store(self, unit_env):
        """Store posts map to views, votes, comment counts and bookmarks."""
        # Arrange
        use_case = await unit_env.get(GetInsightsUseCase)
        post_repo = await unit_env.get(PostRepository)
        post_service = await unit_env.get(PostService)
        collection_service = await unit_env.get(CollectionService)
        await post_repo.add(make_post("a", views=30, votes=4))
        await post_repo.add(make_post("b", views=90, votes=-2))
        await post_service.increment_comment_count("a")
        await collection_service.toggle_bookmark("b")

        # Act
        response = await use_case.execute(
            GetInsightsRequest(engagement_rates={"a": 70.0})
        )

        # Assert
        summary = response.summary
        assert summary.total_views == 120
        assert summary.total_upvotes == 2
        assert summary.total_comments == 1
        assert summary.total_saves == 1
        assert summary.total_shares == 0
        assert summary.average_engagement_rate == pytest.approx(35.0)
        assert [p.post_id for p in summary.top_posts] == ["b", "a"]

    @pytest.mark.asyncio
    async def test_empty_store(self, unit_env):
        """No posts yields the zero summary."""
        use_case = await unit_env.get(GetInsightsUseCase)

        response = await use_case.execute(GetInsightsRequest())

        assert response.posts == []
        assert response.summary.total_views == 0
        assert response.summary.top_posts == []

    @pytest.mark.asyncio
    async def test_tag_filter(self, unit_env):
        """Only posts with the tag are aggregated."""
        # Arrange
        use_case = await unit_env.get(GetInsightsUseCase)
        post_service = await unit_env.get(PostService)
        await post_service.create_post(PostDraft(title="py", content="c", tags=["python"]))
        await post_service.create_post(PostDraft(title="go", content="c", tags=["go"]))

        # Act
        response = await use_case.execute(GetInsightsRequest(tag="go"))

        # Assert
        assert [p.title for p in response.posts] == ["go"]
