"""List trending topics use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model.trending import TrendingTopic
from forum.domain.service import TrendingService


class ListTrendingTopicsRequest(BaseModel):
    """List trending topics request."""

    now: datetime | None = None  # Reference time for growth windows


class ListTrendingTopicsResponse(BaseModel):
    """List trending topics response."""

    topics: list[TrendingTopic]


class ListTrendingTopicsUseCase:
    """Use case for the trending topics panel."""

    def __init__(self, trending_service: TrendingService) -> None:
        """Initialize list trending topics use case.

        Args:
            trending_service: Trending domain service
        """
        self.trending_service = trending_service

    async def execute(
        self, request: ListTrendingTopicsRequest
    ) -> ListTrendingTopicsResponse:
        """Execute list trending topics flow."""
        topics = await self.trending_service.list_trending_topics(now=request.now)
        return ListTrendingTopicsResponse(topics=topics)
