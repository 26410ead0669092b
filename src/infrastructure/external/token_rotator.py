"""
Round-robin rotation over the configured bot tokens.
"""

import threading
from typing import List, Optional, Sequence


class TokenRotator:
    """
    Hands out bot tokens in round-robin order.

    Safe to share between request threads; two concurrent callers never
    receive the same rotation slot.
    """

    def __init__(self, tokens: Sequence[str]):
        self._tokens: List[str] = [token for token in tokens if token]
        self._index = 0
        self._lock = threading.Lock()

    def next_token(self) -> Optional[str]:
        """
        Return the next token, or None when no token is configured.
        """
        if not self._tokens:
            return None
        with self._lock:
            token = self._tokens[self._index]
            self._index = (self._index + 1) % len(self._tokens)
        return token

    def __len__(self) -> int:
        return len(self._tokens)
