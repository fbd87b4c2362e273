"""Trending topic view."""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.model.post import Post


class TrendingTopic(DomainModel):
    """Read-only view of a tag, recomputed from the post collection."""

    tag: str
    count: int = Field(ge=0)
    growth_percent: float = 0.0
    posts: list[Post] = Field(default_factory=list)
