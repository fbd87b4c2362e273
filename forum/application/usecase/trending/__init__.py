"""Trending use cases."""

from .list_trending_topics import (
    ListTrendingTopicsRequest,
    ListTrendingTopicsResponse,
    ListTrendingTopicsUseCase,
)

__all__ = [
    "ListTrendingTopicsRequest",
    "ListTrendingTopicsResponse",
    "ListTrendingTopicsUseCase",
]
