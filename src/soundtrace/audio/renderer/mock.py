"""Mock renderer for testing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from soundtrace.audio.buffer import DecodedAudio
from soundtrace.audio.renderer.base import AudioRenderer
from soundtrace.audio.renderer.offline import rendered_length

if TYPE_CHECKING:
    from soundtrace.snippets.models import SnippetRequest


@dataclass
class RenderCall:
    """Record of a single render() invocation."""

    source: DecodedAudio
    request: SnippetRequest


class MockAudioRenderer(AudioRenderer):
    """Mock renderer that emits silence in the requested format.

    Args:
        error: Raised by ``render()`` instead of producing output.
    """

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[RenderCall] = []

    @property
    def name(self) -> str:
        return "mock"

    async def render(self, source: DecodedAudio, request: SnippetRequest) -> DecodedAudio:
        self.calls.append(RenderCall(source=source, request=request))
        if self.error is not None:
            raise self.error
        frames = rendered_length(request.duration, request.target_sample_rate)
        return DecodedAudio(
            samples=np.zeros((request.target_channels, frames), dtype=np.float32),
            sample_rate=request.target_sample_rate,
        )
