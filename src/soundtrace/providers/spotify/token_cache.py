"""Access-token cache shared by concurrent Spotify calls."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

logger = logging.getLogger("soundtrace.providers.spotify")

TokenFetcher = Callable[[], Awaitable[tuple[str, float]]]
"""Returns ``(access_token, expires_in_seconds)``."""


class TokenCache:
    """Holds one bearer token and refreshes it when it runs out.

    Expiry is checked on every :meth:`get`.  A refresh happens under a lock,
    so callers racing on an expired token share a single fetch.
    """

    def __init__(
        self,
        *,
        expiry_buffer: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._expiry_buffer = expiry_buffer
        self._clock = clock
        self._token: str | None = None
        self._expires_at = 0.0
        self._lock = asyncio.Lock()

    @property
    def valid(self) -> bool:
        return self._token is not None and self._expires_at > self._clock()

    async def get(self, fetch: TokenFetcher) -> str:
        if self.valid:
            return self._token  # type: ignore[return-value]
        async with self._lock:
            # Another caller may have refreshed while we waited.
            if self.valid:
                return self._token  # type: ignore[return-value]
            token, expires_in = await fetch()
            self._token = token
            self._expires_at = self._clock() + expires_in - self._expiry_buffer
            logger.debug("Spotify token refreshed, valid for %.0fs", expires_in - self._expiry_buffer)
            return token

    def invalidate(self) -> None:
        self._token = None
        self._expires_at = 0.0
