"""In-process client for the forum core.

Each call opens a request scope on the DI container, resolves the matching
use case and runs it. Repositories and the moderation gate are APP-scoped,
so all calls made through one client share a single store.

Usage:
    async with ForumClient() as forum:
        post = await forum.create_post(title="Hello", content="...")
        outcome = await forum.submit_comment(post.id, "Nice post")
"""

from datetime import datetime
from typing import Any, Literal, Sequence, Type, TypeVar

from dishka import AsyncContainer

from forum.application.usecase.collection import (
    ListCollectionsUseCase,
    ToggleBookmarkUseCase,
    ToggleRequest,
    ToggleStarUseCase,
)
from forum.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)
from forum.application.usecase.export import (
    ExportContentRequest,
    ExportContentResponse,
    ExportContentUseCase,
)
from forum.application.usecase.flag import (
    GetTrustLevelRequest,
    GetTrustLevelUseCase,
    ResolveFlagRequest,
    ResolveFlagUseCase,
    SubmitFlagRequest,
    SubmitFlagUseCase,
)
from forum.application.usecase.insights import (
    GetInsightsRequest,
    GetInsightsResponse,
    GetInsightsUseCase,
)
from forum.application.usecase.moderation import (
    ModerateContentRequest,
    ModerateContentUseCase,
)
from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from forum.application.usecase.trending import (
    ListTrendingTopicsRequest,
    ListTrendingTopicsUseCase,
)
from forum.domain.model import (
    Comment,
    GateDecision,
    InsightsSummary,
    ModerationFlag,
    Post,
    PostInsights,
    ToxicityResult,
    TrendingTopic,
    UserTrustLevel,
)
from forum.domain.service import ModerationService
from forum.domain.value import Author, Difficulty, FlagReason, PostType
from forum.util.di.container import create_container

UseCaseT = TypeVar("UseCaseT")


class ForumClient:
    """Async facade over the forum use cases."""

    def __init__(self, container: AsyncContainer | None = None):
        """Initialize client.

        Args:
            container: DI container to use. When omitted a production container
                is built and closed with the client.
        """
        self._owns_container = container is None
        self.container = container if container is not None else create_container()
        self._moderation: ModerationService | None = None

    async def __aenter__(self) -> "ForumClient":
        self._moderation = await self.container.get(ModerationService)
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        if self._owns_container:
            await self.container.close()

    async def _run(self, use_case_type: Type[UseCaseT], *args: Any) -> Any:
        async with self.container() as request_container:
            use_case = await request_container.get(use_case_type)
            return await use_case.execute(*args)

    @property
    def is_checking(self) -> bool:
        """Whether a toxicity check is in flight."""
        if self._moderation is None:
            raise RuntimeError("ForumClient must be entered before use")
        return self._moderation.is_checking

    # Posts

    async def create_post(
        self,
        title: str,
        content: str,
        *,
        code: str | None = None,
        language: str | None = None,
        author: Author | None = None,
        tags: Sequence[str] = (),
        type: PostType = PostType.DISCUSSION,
        difficulty: Difficulty | None = None,
    ) -> Post:
        """Create a post at the top of the feed."""
        response = await self._run(
            CreatePostUseCase,
            CreatePostRequest(
                title=title,
                content=content,
                code=code,
                language=language,
                author=author,
                tags=list(tags),
                type=type,
                difficulty=difficulty,
            ),
        )
        return response.post

    async def list_posts(self, tag: str | None = None) -> list[Post]:
        """List posts newest first, optionally filtered by tag."""
        response = await self._run(ListPostsUseCase, ListPostsRequest(tag=tag))
        return response.posts

    # Moderation

    async def check_toxicity(self, text: str) -> ToxicityResult:
        """Classify text without applying thresholds."""
        if self._moderation is None:
            raise RuntimeError("ForumClient must be entered before use")
        return await self._moderation.check_toxicity(text)

    async def moderate(self, text: str) -> GateDecision:
        """Classify text and decide allow/warn/block."""
        response = await self._run(
            ModerateContentUseCase, ModerateContentRequest(text=text)
        )
        return response.decision

    # Comments

    async def submit_comment(
        self, post_id: str, content: str, parent_id: str | None = None
    ) -> SubmitCommentResponse:
        """Run the moderation gate, then store the comment unless blocked."""
        return await self._run(
            SubmitCommentUseCase,
            SubmitCommentRequest(post_id=post_id, content=content, parent_id=parent_id),
        )

    async def add_comment(
        self, post_id: str, content: str, parent_id: str | None = None
    ) -> AddCommentResponse:
        """Store a comment without consulting the moderation gate."""
        return await self._run(
            AddCommentUseCase,
            AddCommentRequest(post_id=post_id, content=content, parent_id=parent_id),
        )

    async def get_comments_for_post(self, post_id: str) -> list[Comment]:
        """Top-level comments for a post, newest first, replies nested."""
        response = await self._run(
            GetCommentsUseCase, GetCommentsRequest(post_id=post_id)
        )
        return response.comments

    # Bookmarks and stars

    async def toggle_bookmark(self, post_id: str) -> bool | None:
        """Flip bookmark membership. None if the post does not exist."""
        response = await self._run(ToggleBookmarkUseCase, ToggleRequest(post_id=post_id))
        return response.member

    async def toggle_star(self, post_id: str) -> bool | None:
        """Flip star membership. None if the post does not exist."""
        response = await self._run(ToggleStarUseCase, ToggleRequest(post_id=post_id))
        return response.member

    async def list_bookmarked_posts(self) -> list[Post]:
        response = await self._run(ListCollectionsUseCase)
        return response.bookmarked

    async def list_starred_posts(self) -> list[Post]:
        response = await self._run(ListCollectionsUseCase)
        return response.starred

    # Analytics

    async def list_trending_topics(
        self, now: datetime | None = None
    ) -> list[TrendingTopic]:
        """Tags ranked by post count, then growth."""
        response = await self._run(
            ListTrendingTopicsUseCase, ListTrendingTopicsRequest(now=now)
        )
        return response.topics

    async def compute_insights(self, posts: Sequence[PostInsights]) -> InsightsSummary:
        """Aggregate a caller-supplied snapshot."""
        response = await self._run(
            GetInsightsUseCase, GetInsightsRequest(posts=list(posts))
        )
        return response.summary

    async def get_insights(
        self,
        engagement_rates: dict[str, float] | None = None,
        tag: str | None = None,
    ) -> GetInsightsResponse:
        """Aggregate a snapshot of the current store."""
        return await self._run(
            GetInsightsUseCase,
            GetInsightsRequest(engagement_rates=engagement_rates or {}, tag=tag),
        )

    # Export

    async def export_content(
        self, text: str, filename: str | None = None, deliver: bool = False
    ) -> ExportContentResponse:
        """Package text as a downloadable file, optionally delivering it."""
        return await self._run(
            ExportContentUseCase,
            ExportContentRequest(text=text, filename=filename, deliver=deliver),
        )

    # Flags and trust

    async def submit_flag(
        self,
        reporter_id: str,
        reason: FlagReason,
        description: str = "",
        *,
        post_id: str | None = None,
        comment_id: str | None = None,
    ) -> ModerationFlag:
        """Report a post or comment for review."""
        response = await self._run(
            SubmitFlagUseCase,
            SubmitFlagRequest(
                reporter_id=reporter_id,
                reason=reason,
                description=description,
                post_id=post_id,
                comment_id=comment_id,
            ),
        )
        return response.flag

    async def resolve_flag(
        self,
        flag_id: str,
        action: Literal["resolved", "dismissed"],
        resolver_id: str,
    ) -> ModerationFlag:
        """Close a pending flag.

        Raises:
            NotAuthorizedError: If the resolver cannot moderate
            NotFoundError: If the flag does not exist
        """
        response = await self._run(
            ResolveFlagUseCase,
            ResolveFlagRequest(flag_id=flag_id, action=action, resolver_id=resolver_id),
        )
        return response.flag

    async def get_user_trust_level(self, user_id: str) -> UserTrustLevel:
        response = await self._run(
            GetTrustLevelUseCase, GetTrustLevelRequest(user_id=user_id)
        )
        return response.trust

    async def can_moderate(self, user_id: str) -> bool:
        response = await self._run(
            GetTrustLevelUseCase, GetTrustLevelRequest(user_id=user_id)
        )
        return response.can_moderate
