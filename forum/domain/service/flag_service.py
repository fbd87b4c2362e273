"""Community moderation flag domain service."""

from datetime import datetime

import logfire

from forum.config import ModerationSettings
from forum.domain.model.flag import FlagDraft, ModerationFlag, UserTrustLevel
from forum.domain.repository import FlagRepository, TrustRepository
from forum.domain.value import FlagId, FlagStatus, IdGenerator, TrustLevel

from .base import Service


class FlagService(Service):
    """Domain service for community flags and trust levels."""

    def __init__(
        self,
        flag_repository: FlagRepository,
        trust_repository: TrustRepository,
        id_generator: IdGenerator,
        settings: ModerationSettings,
    ) -> None:
        """Initialize flag service.

        Args:
            flag_repository: Flag repository
            trust_repository: Trust repository
            id_generator: Source of flag IDs
            settings: Moderation settings (trusted reputation threshold)
        """
        self.flag_repository = flag_repository
        self.trust_repository = trust_repository
        self.id_generator = id_generator
        self.settings = settings

    async def submit_flag(self, draft: FlagDraft) -> ModerationFlag:
        """File a pending flag and credit the reporter.

        Args:
            draft: Flag target, reporter and reason

        Returns:
            Created flag
        """
        with logfire.span(
            "flag_service.submit_flag",
            reporter_id=draft.reporter_id,
            reason=draft.reason.value,
        ):
            flag = ModerationFlag(
                id=FlagId(self.id_generator.next_id()),
                post_id=draft.post_id,
                comment_id=draft.comment_id,
                reporter_id=draft.reporter_id,
                reason=draft.reason,
                description=draft.description,
                status=FlagStatus.PENDING,
                created_at=datetime.now(),
            )
            await self.flag_repository.add(flag)

            # Only reporters with a trust record are credited
            await self.trust_repository.update(
                draft.reporter_id,
                lambda t: t.model_copy(update={"flags_submitted": t.flags_submitted + 1}),
            )

            logfire.info("Flag submitted", flag_id=flag.id, reason=flag.reason.value)
            return flag

    async def resolve_flag(
        self, flag_id: FlagId, status: FlagStatus, resolver_id: str
    ) -> ModerationFlag | None:
        """Close a flag as resolved or dismissed.

        Args:
            flag_id: Flag ID
            status: RESOLVED or DISMISSED
            resolver_id: User closing the flag

        Returns:
            Updated flag, or None if the flag does not exist

        Raises:
            ValueError: If ``status`` is PENDING
        """
        if status == FlagStatus.PENDING:
            raise ValueError("A flag can only be resolved or dismissed")

        with logfire.span(
            "flag_service.resolve_flag", flag_id=flag_id, status=status.value
        ):
            flag = await self.flag_repository.find_by_id(flag_id)
            if flag is None:
                logfire.warn("Flag not found", flag_id=flag_id)
                return None

            resolved = await self.flag_repository.save(
                flag.model_copy(
                    update={
                        "status": status,
                        "resolved_at": datetime.now(),
                        "resolved_by": resolver_id,
                    }
                )
            )
            await self.trust_repository.update(
                resolver_id,
                lambda t: t.model_copy(
                    update={"moderation_actions": t.moderation_actions + 1}
                ),
            )

            logfire.info("Flag resolved", flag_id=flag_id, status=status.value)
            return resolved

    async def list_flags(self, status: FlagStatus | None = None) -> list[ModerationFlag]:
        """Flags newest first, optionally filtered by status."""
        return await self.flag_repository.find_all(status=status)

    async def get_user_trust_level(self, user_id: str) -> UserTrustLevel:
        """Trust record of a user, or a fresh ``new`` record.

        Args:
            user_id: User ID

        Returns:
            Stored or default trust record
        """
        trust = await self.trust_repository.find_by_user(user_id)
        return trust or UserTrustLevel(user_id=user_id)

    async def can_moderate(self, user_id: str) -> bool:
        """Moderators, admins and well-reputed trusted users may moderate."""
        trust = await self.get_user_trust_level(user_id)
        if trust.level in (TrustLevel.MODERATOR, TrustLevel.ADMIN):
            return True
        return (
            trust.level == TrustLevel.TRUSTED
            and trust.reputation > self.settings.trusted_reputation_threshold
        )
