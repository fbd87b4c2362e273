"""Moderation flag and trust repository interfaces."""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from forum.domain.model.flag import ModerationFlag, UserTrustLevel
from forum.domain.value import FlagId, FlagStatus


class FlagRepository(ABC):
    """Repository for moderation flags, newest first."""

    @abstractmethod
    async def find_by_id(self, flag_id: FlagId) -> Optional[ModerationFlag]:
        """Find a flag by ID."""
        pass

    @abstractmethod
    async def find_all(self, status: Optional[FlagStatus] = None) -> List[ModerationFlag]:
        """Return flags, newest first, optionally filtered by status."""
        pass

    @abstractmethod
    async def add(self, flag: ModerationFlag) -> ModerationFlag:
        """Insert a flag at the front of the collection."""
        pass

    @abstractmethod
    async def save(self, flag: ModerationFlag) -> Optional[ModerationFlag]:
        """Replace an existing flag in place.

        Returns:
            The saved flag, or None if no flag with that ID exists
        """
        pass


class TrustRepository(ABC):
    """Repository for user trust records."""

    @abstractmethod
    async def find_by_user(self, user_id: str) -> Optional[UserTrustLevel]:
        """Find the trust record of a user."""
        pass

    @abstractmethod
    async def save(self, trust: UserTrustLevel) -> UserTrustLevel:
        """Create or replace a trust record."""
        pass

    @abstractmethod
    async def update(
        self, user_id: str, change: Callable[[UserTrustLevel], UserTrustLevel]
    ) -> Optional[UserTrustLevel]:
        """Atomically apply ``change`` to an existing trust record.

        Returns:
            The updated record, or None if the user has no record
        """
        pass
