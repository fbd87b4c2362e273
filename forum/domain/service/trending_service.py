"""Trending topic domain service."""

from datetime import datetime, timedelta

import logfire

from forum.config import TrendingSettings
from forum.domain.model.post import Post
from forum.domain.model.trending import TrendingTopic
from forum.domain.repository import PostRepository

from .base import Service


class TrendingService(Service):
    """Derives trending topics from the tags of stored posts."""

    def __init__(self, post_repository: PostRepository, settings: TrendingSettings) -> None:
        """Initialize trending service.

        Args:
            post_repository: Post repository
            settings: Growth window and result limit
        """
        self.post_repository = post_repository
        self.settings = settings

    async def list_trending_topics(self, now: datetime | None = None) -> list[TrendingTopic]:
        """List tags by popularity.

        ``count`` is the number of posts carrying the tag. ``growth_percent``
        compares posts created in the last window with the window before it.
        Topics are ordered by count then growth, ties kept in first-seen order.

        Args:
            now: Reference time (defaults to the current time)

        Returns:
            Up to ``limit`` topics
        """
        with logfire.span("trending_service.list_trending_topics"):
            now = now or datetime.now()
            posts = await self.post_repository.find_all()

            by_tag: dict[str, list[Post]] = {}
            for post in posts:
                for tag in post.tags:
                    by_tag.setdefault(tag, []).append(post)

            topics = [
                TrendingTopic(
                    tag=tag,
                    count=len(tagged),
                    growth_percent=self._growth(tagged, now),
                    posts=tagged,
                )
                for tag, tagged in by_tag.items()
            ]
            topics.sort(key=lambda t: (t.count, t.growth_percent), reverse=True)
            topics = topics[: self.settings.limit]

            logfire.info("Trending topics computed", tags=[t.tag for t in topics])
            return topics

    def _growth(self, posts: list[Post], now: datetime) -> float:
        window = timedelta(hours=self.settings.window_hours)
        recent = sum(1 for p in posts if now - window < p.created_at <= now)
        previous = sum(
            1 for p in posts if now - 2 * window < p.created_at <= now - window
        )
        return round((recent - previous) / max(previous, 1) * 100, 1)
