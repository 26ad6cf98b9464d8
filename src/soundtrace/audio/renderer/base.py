"""Offline audio renderer ABC."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from soundtrace.audio.buffer import DecodedAudio
    from soundtrace.snippets.models import SnippetRequest


class AudioRenderer(ABC):
    """Abstract base class for offline rendering providers.

    A renderer performs time-window extraction, channel mixing and sample
    rate conversion in a single pass, the way an offline audio graph with a
    fixed output format would.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g. 'offline')."""
        ...

    @abstractmethod
    async def render(self, source: DecodedAudio, request: SnippetRequest) -> DecodedAudio:
        """Render the requested window of *source*.

        The returned buffer has exactly ``request.target_sample_rate`` and
        ``request.target_channels`` and ``ceil(duration * target_rate)``
        frames.

        Args:
            source: Decoded source audio.
            request: Window offset/duration and target format.

        Returns:
            A new DecodedAudio in the target format.
        """
        ...
