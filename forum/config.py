"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from forum.domain.value import TrustLevel


class ActorSettings(BaseModel):
    """The single logical actor operating this process."""

    user_id: str = "current"
    name: str = "Current User"
    avatar: str | None = None
    reputation: int = Field(default=1250, ge=0)


class TrustRecordSettings(BaseModel):
    """Trust record the store starts with."""

    user_id: str
    level: TrustLevel = TrustLevel.NEW
    reputation: int = Field(default=0, ge=0)
    flags_submitted: int = Field(default=0, ge=0)
    flags_accurate: int = Field(default=0, ge=0)
    moderation_actions: int = Field(default=0, ge=0)


class TrustSettings(BaseModel):
    """Community trust records loaded at startup.

    The actor's record takes its user ID and reputation from ActorSettings.
    """

    actor_level: TrustLevel = TrustLevel.TRUSTED
    actor_flags_submitted: int = Field(default=5, ge=0)
    actor_flags_accurate: int = Field(default=4, ge=0)
    actor_moderation_actions: int = Field(default=2, ge=0)

    members: list[TrustRecordSettings] = [
        TrustRecordSettings(
            user_id="1",
            level=TrustLevel.MODERATOR,
            reputation=2890,
            flags_submitted=15,
            flags_accurate=14,
            moderation_actions=25,
        ),
        TrustRecordSettings(
            user_id="2",
            level=TrustLevel.ADMIN,
            reputation=3200,
            flags_submitted=8,
            flags_accurate=8,
            moderation_actions=50,
        ),
    ]


class ModerationSettings(BaseModel):
    """Toxicity classifier and moderation gate configuration."""

    # Terms matched case-insensitively as substrings of the submitted text
    lexicon: list[str] = [
        "spam",
        "stupid",
        "idiot",
        "hate",
        "terrible",
        "worst",
        "garbage",
        "useless",
        "pointless",
        "dumb",
        "moron",
        "pathetic",
    ]

    # confidence = min(base + per_match * matches, max) for toxic text
    base_confidence: float = Field(default=0.4, ge=0, le=1)
    per_match_confidence: float = Field(default=0.3, ge=0, le=1)
    max_confidence: float = Field(default=0.95, ge=0, le=1)
    clean_confidence: float = Field(default=0.1, ge=0, le=1)

    # Gate thresholds (strictly greater than)
    block_threshold: float = Field(default=0.7, ge=0, le=1)
    warn_threshold: float = Field(default=0.4, ge=0, le=1)

    categories: list[str] = ["offensive-language", "unconstructive"]
    suggestion: str = (
        "Consider rephrasing your comment to be more constructive and helpful."
    )
    block_message: str = "This comment contains potentially offensive content."
    warn_message: str = "Please consider making your comment more constructive."

    # Simulated round-trip of a remote classifier (0 disables the delay)
    classifier_latency_seconds: float = Field(default=0.5, ge=0)

    # Trusted users above this reputation may resolve flags
    trusted_reputation_threshold: int = 1000

    @model_validator(mode="after")
    def validate_thresholds(self) -> "ModerationSettings":
        """Keep the gate monotone: block must sit above warn."""
        if self.block_threshold <= self.warn_threshold:
            raise ValueError("block_threshold must be greater than warn_threshold")
        return self


class AnalyticsSettings(BaseModel):
    """Engagement analytics configuration."""

    top_posts_limit: int = Field(default=3, ge=0)

    # Engagement tier lower bounds (inclusive)
    high_tier_rate: float = 80
    good_tier_rate: float = 60
    fair_tier_rate: float = 40


class TrendingSettings(BaseModel):
    """Trending topic configuration."""

    # Growth compares the last window against the one before it
    window_hours: float = Field(default=24, gt=0)
    limit: int = Field(default=10, ge=1)


class ExportSettings(BaseModel):
    """Content export configuration."""

    default_filename: str = "code.txt"
    media_type: str = "text/plain"
    encoding: str = "utf-8"
    directory: Path = Path("exports")


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends only when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Values come from the environment (and an optional .env file), using
    ``__`` for nested sections:

        ENVIRONMENT=production
        MODERATION__BLOCK_THRESHOLD=0.8
        MODERATION__CLASSIFIER_LATENCY_SECONDS=0
        TRENDING__WINDOW_HOURS=12
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows MODERATION__LEXICON syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    actor: ActorSettings = ActorSettings()
    trust: TrustSettings = TrustSettings()
    moderation: ModerationSettings = ModerationSettings()
    analytics: AnalyticsSettings = AnalyticsSettings()
    trending: TrendingSettings = TrendingSettings()
    export: ExportSettings = ExportSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    def trust_seed(self) -> list[TrustRecordSettings]:
        """Trust records to load at startup, the actor's first.

        A member entry with the actor's user ID is ignored.
        """
        actor = TrustRecordSettings(
            user_id=self.actor.user_id,
            level=self.trust.actor_level,
            reputation=self.actor.reputation,
            flags_submitted=self.trust.actor_flags_submitted,
            flags_accurate=self.trust.actor_flags_accurate,
            moderation_actions=self.trust.actor_moderation_actions,
        )
        members = [m for m in self.trust.members if m.user_id != actor.user_id]
        return [actor, *members]
