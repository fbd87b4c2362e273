"""Test configuration and fixtures."""

from datetime import datetime

import logfire

from forum.domain.model import Post, PostInsights
from forum.domain.value import Author, PostId

# Keep spans and logs local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    post_id: str,
    title: str = "Test Post",
    tags: list[str] | None = None,
    created_at: datetime | None = None,
    views: int = 0,
    votes: int = 0,
) -> Post:
    """Helper to build a stored post directly, bypassing the service."""
    return Post(
        id=PostId(post_id),
        title=title,
        content="Test content",
        author=Author(name="Test Author", reputation=10),
        votes=votes,
        comment_count=0,
        tags=tags or [],
        created_at=created_at or datetime.now(),
        views=views,
    )


def make_insights(
    post_id: str,
    views: int = 0,
    upvotes: int = 0,
    comments: int = 0,
    saves: int = 0,
    shares: int = 0,
    engagement_rate: float = 0.0,
) -> PostInsights:
    """Helper to build per-post analytics input."""
    return PostInsights(
        post_id=PostId(post_id),
        title=f"Post {post_id}",
        views=views,
        upvotes=upvotes,
        comments=comments,
        saves=saves,
        shares=shares,
        engagement_rate=engagement_rate,
    )
