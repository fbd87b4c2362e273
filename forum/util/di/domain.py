"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import (
    AnalyticsSettings,
    ExportSettings,
    ModerationSettings,
    TrendingSettings,
)
from forum.domain.repository import (
    BookmarkRepository,
    CommentRepository,
    FlagRepository,
    PostRepository,
    StarRepository,
    TrustRepository,
)
from forum.domain.service import (
    AnalyticsService,
    CollectionService,
    CommentService,
    ExportService,
    FileDelivery,
    FlagService,
    ModerationService,
    PostService,
    ToxicityClassifier,
    TrendingService,
)
from forum.domain.value import Author, IdGenerator
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; the repositories they wrap are shared.
    The moderation service is APP-scoped so its in-flight state is visible
    across requests.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_moderation_service(
        self, classifier: ToxicityClassifier, settings: ModerationSettings
    ) -> ModerationService:
        """Provide moderation gate."""
        return ModerationService(classifier=classifier, settings=settings)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        id_generator: IdGenerator,
        actor: Author,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            id_generator=id_generator,
            default_author=actor,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        id_generator: IdGenerator,
        actor: Author,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            id_generator=id_generator,
            actor=actor,
        )

    @provide
    def get_collection_service(
        self,
        post_repository: PostRepository,
        bookmark_repository: BookmarkRepository,
        star_repository: StarRepository,
    ) -> CollectionService:
        """Provide bookmark/star domain service."""
        return CollectionService(
            post_repository=post_repository,
            bookmark_repository=bookmark_repository,
            star_repository=star_repository,
        )

    @provide
    def get_analytics_service(self, settings: AnalyticsSettings) -> AnalyticsService:
        """Provide analytics domain service."""
        return AnalyticsService(settings=settings)

    @provide
    def get_trending_service(
        self, post_repository: PostRepository, settings: TrendingSettings
    ) -> TrendingService:
        """Provide trending domain service."""
        return TrendingService(post_repository=post_repository, settings=settings)

    @provide
    def get_export_service(
        self, delivery: FileDelivery, settings: ExportSettings
    ) -> ExportService:
        """Provide export domain service."""
        return ExportService(delivery=delivery, settings=settings)

    @provide
    def get_flag_service(
        self,
        flag_repository: FlagRepository,
        trust_repository: TrustRepository,
        id_generator: IdGenerator,
        settings: ModerationSettings,
    ) -> FlagService:
        """Provide flag domain service."""
        return FlagService(
            flag_repository=flag_repository,
            trust_repository=trust_repository,
            id_generator=id_generator,
            settings=settings,
        )
