"""Insights use cases."""

from .get_insights import GetInsightsRequest, GetInsightsResponse, GetInsightsUseCase

__all__ = [
    "GetInsightsRequest",
    "GetInsightsResponse",
    "GetInsightsUseCase",
]
