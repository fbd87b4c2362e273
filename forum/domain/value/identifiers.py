"""Strongly typed identifiers for forum entities.

Identifiers are strings minted by the store, never by callers. They come from
a time-seeded counter so that later ids always sort after earlier ones.
"""

import threading
import time
from typing import NewType

PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
FlagId = NewType("FlagId", str)


class IdGenerator:
    """Strictly increasing id source.

    Each id is the current wall clock in milliseconds, bumped past the
    previous id when two ids are requested within the same millisecond.
    """

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        """Return the next id as a decimal string."""
        with self._lock:
            now_ms = time.time_ns() // 1_000_000
            self._last = max(self._last + 1, now_ms)
            return str(self._last)
