"""Bookmark and star use cases."""

from .list_collections import ListCollectionsResponse, ListCollectionsUseCase
from .toggle import (
    ToggleBookmarkUseCase,
    ToggleRequest,
    ToggleResponse,
    ToggleStarUseCase,
)

__all__ = [
    "ListCollectionsResponse",
    "ListCollectionsUseCase",
    "ToggleBookmarkUseCase",
    "ToggleRequest",
    "ToggleResponse",
    "ToggleStarUseCase",
]
