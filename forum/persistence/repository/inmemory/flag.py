"""In-memory moderation flag and trust repositories."""

import asyncio
from typing import Callable, Optional

from forum.domain.model.flag import ModerationFlag, UserTrustLevel
from forum.domain.repository.flag import FlagRepository, TrustRepository
from forum.domain.value import FlagId, FlagStatus


class InMemoryFlagRepository(FlagRepository):
    """Process-lifetime implementation of FlagRepository."""

    def __init__(self) -> None:
        self._flags: list[ModerationFlag] = []
        self._lock = asyncio.Lock()

    async def find_by_id(self, flag_id: FlagId) -> Optional[ModerationFlag]:
        """Find a flag by ID."""
        for flag in self._flags:
            if flag.id == flag_id:
                return flag
        return None

    async def find_all(self, status: Optional[FlagStatus] = None) -> list[ModerationFlag]:
        """Flags newest first."""
        if status is None:
            return list(self._flags)
        return [f for f in self._flags if f.status == status]

    async def add(self, flag: ModerationFlag) -> ModerationFlag:
        """Prepend a flag."""
        async with self._lock:
            self._flags.insert(0, flag)
        return flag

    async def save(self, flag: ModerationFlag) -> Optional[ModerationFlag]:
        """Replace an existing flag."""
        async with self._lock:
            for index, existing in enumerate(self._flags):
                if existing.id == flag.id:
                    self._flags[index] = flag
                    return flag
            return None


class InMemoryTrustRepository(TrustRepository):
    """Process-lifetime implementation of TrustRepository."""

    def __init__(self, seed: list[UserTrustLevel] | None = None) -> None:
        self._trust: dict[str, UserTrustLevel] = {t.user_id: t for t in seed or []}
        self._lock = asyncio.Lock()

    async def find_by_user(self, user_id: str) -> Optional[UserTrustLevel]:
        """Find a trust record."""
        return self._trust.get(user_id)

    async def save(self, trust: UserTrustLevel) -> UserTrustLevel:
        """Create or replace a trust record."""
        async with self._lock:
            self._trust[trust.user_id] = trust
        return trust

    async def update(
        self, user_id: str, change: Callable[[UserTrustLevel], UserTrustLevel]
    ) -> Optional[UserTrustLevel]:
        """Apply ``change`` under the lock."""
        async with self._lock:
            current = self._trust.get(user_id)
            if current is None:
                return None
            updated = change(current)
            self._trust[user_id] = updated
            return updated
