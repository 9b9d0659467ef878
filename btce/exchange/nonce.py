"""Monotonic request counter for authenticated calls"""

import logging
import time
from threading import Lock
from typing import Optional


logger = logging.getLogger("btce.exchange")


class NonceSource:
    """
    Strictly increasing nonce sequence.

    Seeded from the current Unix time unless an explicit seed is given.
    The server rejects any nonce not greater than the last one it accepted
    for the API key, so ``next`` and ``resync`` are serialized.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize NonceSource.

        Args:
            seed: Starting counter value (None = current Unix time)
        """
        self._lock = Lock()
        self._value: int = int(time.time()) if seed is None else int(seed)

    @property
    def current(self) -> int:
        """Last value handed out (or the seed/resync value)"""
        with self._lock:
            return self._value

    def next(self) -> int:
        """Increment the counter and return the new value"""
        with self._lock:
            self._value += 1
            return self._value

    def resync(self, server_nonce: int) -> None:
        """
        Overwrite the counter with a server-reported value.

        The next call to ``next`` returns ``server_nonce + 1``. No bounds
        check is applied; the server is the authority.
        """
        with self._lock:
            previous = self._value
            self._value = int(server_nonce)

        logger.debug(f"Nonce resynced: {previous} -> {server_nonce}")
