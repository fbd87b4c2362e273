"""In-memory repository implementations.

The store is process-lifetime by design; these are the only repositories.
"""

from .collection import InMemoryBookmarkRepository, InMemoryStarRepository
from .comment import InMemoryCommentRepository
from .flag import InMemoryFlagRepository, InMemoryTrustRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryBookmarkRepository",
    "InMemoryCommentRepository",
    "InMemoryFlagRepository",
    "InMemoryPostRepository",
    "InMemoryStarRepository",
    "InMemoryTrustRepository",
]
