#!/usr/bin/env python3
"""Run a short forum session with Logfire error tracking.

Seeds a few posts, pushes comments through the moderation gate and prints
the resulting insights and trending topics.
"""

import asyncio
import sys

import logfire

from forum.config import Settings
from forum.domain.value import Difficulty, PostType
from forum.interface.client import ForumClient
from forum.util.logging import get_logger, setup_logging
from forum.util.observability import configure_logfire

logger = get_logger("forum.scripts.start_app")


async def run_session() -> None:
    """Seed the store and report what the forum derives from it."""
    async with ForumClient() as forum:
        question = await forum.create_post(
            "Why does my asyncio task never finish?",
            "It hangs on await queue.get()",
            code="await queue.get()",
            language="python",
            tags=["python", "asyncio"],
            type=PostType.QUESTION,
            difficulty=Difficulty.INTERMEDIATE,
        )
        await forum.create_post(
            "Review my Rust parser",
            "Looking for feedback on error handling",
            tags=["rust", "parsing"],
            type=PostType.CODE_REVIEW,
        )

        for text in (
            "You need a sentinel value to stop the consumer.",
            "this code is terrible and useless",
            "Worst question of the week.",
        ):
            outcome = await forum.submit_comment(question.id, text)
            logger.info(f"{outcome.action.value}: {text!r} ({outcome.message or 'ok'})")

        await forum.toggle_bookmark(question.id)

        insights = await forum.get_insights(engagement_rates={question.id: 72.5})
        summary = insights.summary
        logger.info(
            f"views={summary.total_views} comments={summary.total_comments} "
            f"saves={summary.total_saves} tier={summary.average_engagement_tier.value}"
        )

        for topic in await forum.list_trending_topics():
            logger.info(f"#{topic.tag}: {topic.count} posts, {topic.growth_percent}%")


def main() -> int:
    """Run the session and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting forum session")
        asyncio.run(run_session())
        return 0

    except Exception as e:
        logfire.error(
            "Forum session failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
