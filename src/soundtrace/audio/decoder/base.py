"""Audio decoder ABC and decoding context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from soundtrace.audio.buffer import DecodedAudio

ContextState = Literal["running", "closed"]


class DecodingContext(ABC):
    """A scoped decoding resource obtained from :meth:`AudioDecoder.open`.

    Contexts are a limited resource: whoever opens one must call
    :meth:`close` on every exit path.
    """

    @property
    @abstractmethod
    def state(self) -> ContextState:
        """``"running"`` until :meth:`close` has completed."""
        ...

    @abstractmethod
    async def decode(self, data: bytes) -> DecodedAudio:
        """Decode a complete encoded file into PCM.

        Raises:
            DecodeFailure: The bytes are not a supported or intact audio file.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the context."""
        ...


class AudioDecoder(ABC):
    """Abstract base class for audio decoding providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g. 'soundfile')."""
        ...

    @abstractmethod
    def open(self) -> DecodingContext:
        """Acquire a new decoding context."""
        ...
