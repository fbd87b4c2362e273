"""Domain services."""

from .analytics_service import AnalyticsService
from .base import Service
from .collection_service import CollectionService
from .comment_service import CommentService
from .export_service import ExportService, FileDelivery
from .flag_service import FlagService
from .moderation_service import ModerationService, ToxicityClassifier
from .post_service import PostService
from .trending_service import TrendingService

__all__ = [
    "AnalyticsService",
    "CollectionService",
    "CommentService",
    "ExportService",
    "FileDelivery",
    "FlagService",
    "ModerationService",
    "PostService",
    "Service",
    "ToxicityClassifier",
    "TrendingService",
]
