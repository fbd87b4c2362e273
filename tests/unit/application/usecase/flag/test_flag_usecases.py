"""Unit tests for flag use cases."""

import pytest

from forum.application.usecase.flag import (
    GetTrustLevelRequest,
    GetTrustLevelUseCase,
    ResolveFlagRequest,
    ResolveFlagUseCase,
    SubmitFlagRequest,
    SubmitFlagUseCase,
)
from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model import UserTrustLevel
from forum.domain.repository import TrustRepository
from forum.domain.value import FlagReason, FlagStatus, TrustLevel
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitFlagUseCase:
    """Tests for SubmitFlagUseCase."""

    @pytest.mark.asyncio
    async def test_flag_requires_target(self, unit_env):
        """A flag with neither post nor comment is rejected."""
        use_case = await unit_env.get(SubmitFlagUseCase)

        with pytest.raises(ValueError, match="post or a comment"):
            await use_case.execute(
                SubmitFlagRequest(reporter_id="u", reason=FlagReason.SPAM)
            )

    @pytest.mark.asyncio
    async def test_flag_comment(self, unit_env):
        use_case = await unit_env.get(SubmitFlagUseCase)

        response = await use_case.execute(
            SubmitFlagRequest(
                reporter_id="u",
                reason=FlagReason.OFF_TOPIC,
                description="unrelated",
                comment_id="c1",
            )
        )

        assert response.flag.comment_id == "c1"
        assert response.flag.post_id is None
        assert response.flag.status == FlagStatus.PENDING


class TestResolveFlagUseCase:
    """Tests for ResolveFlagUseCase."""

    @pytest.mark.asyncio
    async def test_non_moderator_cannot_resolve(self, unit_env):
        """Users without moderation rights are refused."""
        # Arrange
        submit = await unit_env.get(SubmitFlagUseCase)
        resolve = await unit_env.get(ResolveFlagUseCase)
        flag = (
            await submit.execute(
                SubmitFlagRequest(reporter_id="u", reason=FlagReason.SPAM, post_id="p")
            )
        ).flag

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await resolve.execute(
                ResolveFlagRequest(flag_id=flag.id, action="resolved", resolver_id="u")
            )

    @pytest.mark.asyncio
    async def test_moderator_resolves_and_is_credited(self, unit_env):
        """A moderator closes the flag and gains a moderation action."""
        # Arrange
        submit = await unit_env.get(SubmitFlagUseCase)
        resolve = await unit_env.get(ResolveFlagUseCase)
        trust = await unit_env.get(GetTrustLevelUseCase)
        trust_repo = await unit_env.get(TrustRepository)
        await trust_repo.save(UserTrustLevel(user_id="mod", level=TrustLevel.MODERATOR))
        flag = (
            await submit.execute(
                SubmitFlagRequest(reporter_id="u", reason=FlagReason.SPAM, post_id="p")
            )
        ).flag

        # Act
        response = await resolve.execute(
            ResolveFlagRequest(flag_id=flag.id, action="resolved", resolver_id="mod")
        )

        # Assert
        assert response.flag.status == FlagStatus.RESOLVED
        assert response.flag.resolved_by == "mod"
        mod = await trust.execute(GetTrustLevelRequest(user_id="mod"))
        assert mod.trust.moderation_actions == 1
        assert mod.can_moderate

    @pytest.mark.asyncio
    async def test_unknown_flag_not_found(self, unit_env):
        """Resolving a missing flag raises NotFoundError."""
        # Arrange
        resolve = await unit_env.get(ResolveFlagUseCase)
        trust_repo = await unit_env.get(TrustRepository)
        await trust_repo.save(UserTrustLevel(user_id="admin", level=TrustLevel.ADMIN))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await resolve.execute(
                ResolveFlagRequest(flag_id="nope", action="dismissed", resolver_id="admin")
            )
