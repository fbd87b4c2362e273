"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.collection import (
    ListCollectionsUseCase,
    ToggleBookmarkUseCase,
    ToggleStarUseCase,
)
from forum.application.usecase.comment import (
    AddCommentUseCase,
    GetCommentsUseCase,
    SubmitCommentUseCase,
)
from forum.application.usecase.export import ExportContentUseCase
from forum.application.usecase.flag import (
    GetTrustLevelUseCase,
    ResolveFlagUseCase,
    SubmitFlagUseCase,
)
from forum.application.usecase.insights import GetInsightsUseCase
from forum.application.usecase.moderation import ModerateContentUseCase
from forum.application.usecase.post import CreatePostUseCase, ListPostsUseCase
from forum.application.usecase.trending import ListTrendingTopicsUseCase
from forum.domain.service import (
    AnalyticsService,
    CollectionService,
    CommentService,
    ExportService,
    FlagService,
    ModerationService,
    PostService,
    TrendingService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_submit_comment_use_case(
        self,
        moderation_service: ModerationService,
        comment_service: CommentService,
        post_service: PostService,
    ) -> SubmitCommentUseCase:
        """Provide moderated comment submission use case."""
        return SubmitCommentUseCase(
            moderation_service=moderation_service,
            comment_service=comment_service,
            post_service=post_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    # Collection use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_bookmark_use_case(
        self, collection_service: CollectionService
    ) -> ToggleBookmarkUseCase:
        """Provide toggle bookmark use case."""
        return ToggleBookmarkUseCase(collection_service=collection_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_star_use_case(
        self, collection_service: CollectionService
    ) -> ToggleStarUseCase:
        """Provide toggle star use case."""
        return ToggleStarUseCase(collection_service=collection_service)

    @provide(scope=Scope.REQUEST)
    def get_list_collections_use_case(
        self, collection_service: CollectionService
    ) -> ListCollectionsUseCase:
        """Provide list bookmarked/starred posts use case."""
        return ListCollectionsUseCase(collection_service=collection_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_moderate_content_use_case(
        self, moderation_service: ModerationService
    ) -> ModerateContentUseCase:
        """Provide moderate content use case."""
        return ModerateContentUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_submit_flag_use_case(self, flag_service: FlagService) -> SubmitFlagUseCase:
        """Provide submit flag use case."""
        return SubmitFlagUseCase(flag_service=flag_service)

    @provide(scope=Scope.REQUEST)
    def get_resolve_flag_use_case(
        self, flag_service: FlagService
    ) -> ResolveFlagUseCase:
        """Provide resolve flag use case."""
        return ResolveFlagUseCase(flag_service=flag_service)

    @provide(scope=Scope.REQUEST)
    def get_get_trust_level_use_case(
        self, flag_service: FlagService
    ) -> GetTrustLevelUseCase:
        """Provide trust level use case."""
        return GetTrustLevelUseCase(flag_service=flag_service)

    # Analytics use cases
    @provide(scope=Scope.REQUEST)
    def get_get_insights_use_case(
        self,
        analytics_service: AnalyticsService,
        post_service: PostService,
        collection_service: CollectionService,
    ) -> GetInsightsUseCase:
        """Provide insights use case."""
        return GetInsightsUseCase(
            analytics_service=analytics_service,
            post_service=post_service,
            collection_service=collection_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_trending_topics_use_case(
        self, trending_service: TrendingService
    ) -> ListTrendingTopicsUseCase:
        """Provide trending topics use case."""
        return ListTrendingTopicsUseCase(trending_service=trending_service)

    # Export use cases
    @provide(scope=Scope.REQUEST)
    def get_export_content_use_case(
        self, export_service: ExportService
    ) -> ExportContentUseCase:
        """Provide export content use case."""
        return ExportContentUseCase(export_service=export_service)
