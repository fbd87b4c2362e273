"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import (
    AnalyticsSettings,
    ExportSettings,
    ModerationSettings,
    Settings,
    TrendingSettings,
)
from forum.domain.value import Author, IdGenerator
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        """Provide moderation settings."""
        return settings.moderation

    @provide
    def provide_analytics_settings(self, settings: Settings) -> AnalyticsSettings:
        """Provide analytics settings."""
        return settings.analytics

    @provide
    def provide_trending_settings(self, settings: Settings) -> TrendingSettings:
        """Provide trending settings."""
        return settings.trending

    @provide
    def provide_export_settings(self, settings: Settings) -> ExportSettings:
        """Provide export settings."""
        return settings.export

    @provide
    def provide_actor(self, settings: Settings) -> Author:
        """Provide the author of content created by this process."""
        return Author(
            name=settings.actor.name,
            avatar=settings.actor.avatar,
            reputation=settings.actor.reputation,
        )

    @provide
    def provide_id_generator(self) -> IdGenerator:
        """Provide the process-wide ID source."""
        return IdGenerator()
