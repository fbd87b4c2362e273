"""Get insights use case."""

import logfire
from pydantic import BaseModel

from forum.domain.model.insights import InsightsSummary, PostInsights
from forum.domain.model.post import Post
from forum.domain.service import AnalyticsService, CollectionService, PostService


class GetInsightsRequest(BaseModel):
    """Get insights request.

    Either aggregate a caller-supplied snapshot (``posts``), or build one
    from the store, taking engagement rates from ``engagement_rates``
    (post ID -> rate, missing posts rate 0).
    """

    posts: list[PostInsights] | None = None
    engagement_rates: dict[str, float] = {}
    tag: str | None = None


class GetInsightsResponse(BaseModel):
    """Get insights response."""

    summary: InsightsSummary
    posts: list[PostInsights]


class GetInsightsUseCase:
    """Use case for the content insights view."""

    def __init__(
        self,
        analytics_service: AnalyticsService,
        post_service: PostService,
        collection_service: CollectionService,
    ) -> None:
        """Initialize get insights use case.

        Args:
            analytics_service: Analytics aggregator
            post_service: Post domain service (snapshot source)
            collection_service: Collection service (saves)
        """
        self.analytics_service = analytics_service
        self.post_service = post_service
        self.collection_service = collection_service

    async def execute(self, request: GetInsightsRequest) -> GetInsightsResponse:
        """Execute get insights flow.

        Args:
            request: Get insights request

        Returns:
            Summary and the snapshot it was computed from
        """
        with logfire.span("get_insights.execute", supplied=request.posts is not None):
            if request.posts is not None:
                snapshot = list(request.posts)
            else:
                posts = await self.post_service.list_posts(tag=request.tag)
                snapshot = [
                    await self._to_insights(post, request.engagement_rates)
                    for post in posts
                ]

            summary = self.analytics_service.compute_insights(snapshot)
            return GetInsightsResponse(summary=summary, posts=snapshot)

    async def _to_insights(self, post: Post, rates: dict[str, float]) -> PostInsights:
        saved = await self.collection_service.is_bookmarked(post.id)
        return PostInsights(
            post_id=post.id,
            title=post.title,
            views=post.views,
            upvotes=post.votes,
            comments=post.comment_count,
            saves=1 if saved else 0,
            shares=0,
            engagement_rate=rates.get(post.id, 0.0),
            created_at=post.created_at,
        )
