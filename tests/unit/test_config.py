"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from forum.config import ActorSettings, ModerationSettings, Settings, TrustSettings
from forum.domain.value import TrustLevel


class TestModerationSettings:
    """Tests for moderation threshold validation."""

    def test_defaults(self):
        settings = ModerationSettings()

        assert settings.block_threshold == pytest.approx(0.7)
        assert settings.warn_threshold == pytest.approx(0.4)
        assert len(settings.lexicon) == 12

    def test_block_must_exceed_warn(self):
        with pytest.raises(ValidationError, match="block_threshold"):
            ModerationSettings(block_threshold=0.4, warn_threshold=0.4)


class TestSettings:
    """Tests for environment loading."""

    def test_nested_environment_override(self, monkeypatch):
        monkeypatch.setenv("MODERATION__BLOCK_THRESHOLD", "0.8")
        monkeypatch.setenv("TRENDING__WINDOW_HOURS", "12")

        settings = Settings()

        assert settings.moderation.block_threshold == pytest.approx(0.8)
        assert settings.trending.window_hours == pytest.approx(12)


class TestTrustSeed:
    """Tests for the startup trust records."""

    def test_default_seed(self):
        seed = Settings().trust_seed()

        assert [(r.user_id, r.level) for r in seed] == [
            ("current", TrustLevel.TRUSTED),
            ("1", TrustLevel.MODERATOR),
            ("2", TrustLevel.ADMIN),
        ]
        assert seed[0].reputation == 1250

    def test_actor_record_follows_actor_settings(self):
        settings = Settings(
            actor=ActorSettings(user_id="1", reputation=10),
            trust=TrustSettings(actor_level=TrustLevel.NEW),
        )

        seed = settings.trust_seed()

        assert [r.user_id for r in seed] == ["1", "2"]
        assert seed[0].level == TrustLevel.NEW
        assert seed[0].reputation == 10
