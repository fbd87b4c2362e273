"""Repository interfaces."""

from forum.domain.repository.collection import (
    BookmarkRepository,
    PostCollectionRepository,
    StarRepository,
)
from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.flag import FlagRepository, TrustRepository
from forum.domain.repository.post import PostRepository

__all__ = [
    "BookmarkRepository",
    "CommentRepository",
    "FlagRepository",
    "PostCollectionRepository",
    "PostRepository",
    "StarRepository",
    "TrustRepository",
]
