"""
In-process cache of resolved author identities.
"""

import threading
import time
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from ...core.entities import DiscordUser


class UserCache:
    """
    Thread-safe identity cache keyed by user id.

    Real identities and fallback identities are both cached. With a
    ``capacity`` the least recently used entry is evicted first; with a
    ``fallback_ttl_seconds`` fallback entries expire so the directory is
    asked again later. Without either, entries live for the process lifetime.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        fallback_ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        if capacity is not None and capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.fallback_ttl_seconds = fallback_ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[DiscordUser, Optional[float]]]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[DiscordUser]:
        """
        Return the cached identity, or None on a miss or an expired fallback.
        """
        with self._lock:
            entry = self._entries.get(user_id)
            if entry is None:
                return None
            user, expires_at = entry
            if expires_at is not None and self._clock() >= expires_at:
                del self._entries[user_id]
                return None
            self._entries.move_to_end(user_id)
            return user

    def put(self, user: DiscordUser, is_fallback: bool = False) -> None:
        """
        Store an identity.

        Args:
            user: Identity to cache
            is_fallback: Whether the identity was synthesized after a failed lookup
        """
        expires_at = None
        if is_fallback and self.fallback_ttl_seconds is not None:
            expires_at = self._clock() + self.fallback_ttl_seconds

        with self._lock:
            self._entries[user.id] = (user, expires_at)
            self._entries.move_to_end(user.id)
            if self.capacity is not None:
                while len(self._entries) > self.capacity:
                    self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._entries
