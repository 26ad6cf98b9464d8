"""Mock audio decoder for testing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from soundtrace.audio.decoder.base import AudioDecoder, ContextState, DecodingContext

if TYPE_CHECKING:
    from soundtrace.audio.buffer import DecodedAudio


class MockDecodingContext(DecodingContext):
    """Context handed out by :class:`MockAudioDecoder`."""

    def __init__(self, decoder: MockAudioDecoder) -> None:
        self._decoder = decoder
        self._state: ContextState = "running"
        self.close_calls: int = 0

    @property
    def state(self) -> ContextState:
        return self._state

    async def decode(self, data: bytes) -> DecodedAudio:
        self._decoder.calls.append(data)
        if self._decoder.error is not None:
            raise self._decoder.error
        if self._decoder.audio is None:
            raise RuntimeError("MockAudioDecoder has no audio configured")
        return self._decoder.audio

    async def close(self) -> None:
        self.close_calls += 1
        if self._decoder.close_error is not None:
            raise self._decoder.close_error
        self._state = "closed"


class MockAudioDecoder(AudioDecoder):
    """Mock decoder that returns a fixed buffer and records calls.

    Args:
        audio: Buffer returned by every ``decode()`` call.
        error: Raised by ``decode()`` instead of returning *audio*.
        close_error: Raised by ``close()`` on every context.
    """

    def __init__(
        self,
        audio: DecodedAudio | None = None,
        *,
        error: Exception | None = None,
        close_error: Exception | None = None,
    ) -> None:
        self.audio = audio
        self.error = error
        self.close_error = close_error
        self.calls: list[bytes] = []
        self.contexts: list[MockDecodingContext] = []

    @property
    def name(self) -> str:
        return "mock"

    def open(self) -> MockDecodingContext:
        ctx = MockDecodingContext(self)
        self.contexts.append(ctx)
        return ctx
