"""Snippet renderer: window policy, offline render and WAV packaging."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from soundtrace.audio.buffer import DecodedAudio
from soundtrace.audio.renderer.base import AudioRenderer
from soundtrace.audio.wav import WAV_MEDIA_TYPE, encode_wav
from soundtrace.snippets.config import SnippetConfig
from soundtrace.snippets.models import EncodedSnippet
from soundtrace.snippets.naming import snippet_file_name

logger = logging.getLogger("soundtrace.snippets")


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class SnippetRenderer:
    """Produces a time-windowed, resampled WAV snippet from decoded audio.

    Args:
        renderer: Offline renderer that performs windowing, mixing and
            resampling.
        config: Snippet policy; defaults to :class:`SnippetConfig`.
        clock: Millisecond wall clock used for the file name timestamp.
    """

    def __init__(
        self,
        renderer: AudioRenderer,
        config: SnippetConfig | None = None,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._renderer = renderer
        self._config = config or SnippetConfig()
        self._clock = clock

    @property
    def config(self) -> SnippetConfig:
        return self._config

    def window_duration(self, source_duration: float, start_offset: float) -> float | None:
        """Return the duration to extract, or ``None`` when no viable window exists."""
        start = max(0.0, start_offset)
        if start >= source_duration:
            return None
        duration = min(self._config.snippet_duration_seconds, source_duration - start)
        if duration < self._config.min_snippet_seconds:
            return None
        return duration

    async def render_snippet(
        self,
        source: DecodedAudio,
        start_offset: float,
        original_file_name: str,
        segment_index: int,
    ) -> EncodedSnippet | None:
        """Render one snippet starting at *start_offset* seconds.

        Returns ``None`` when the window starts past the end of the source,
        when it would be shorter than the minimum viable duration, or when
        rendering fails for any reason.
        """
        start = max(0.0, start_offset)
        duration = self.window_duration(source.duration, start)
        if duration is None:
            logger.debug(
                "No viable window in %s at %.3fs (source %.3fs)",
                original_file_name,
                start,
                source.duration,
            )
            return None

        request = self._config.request_for(start, duration)
        try:
            rendered = await self._renderer.render(source, request)
            data = encode_wav(rendered)
        except Exception:
            logger.warning(
                "Snippet render failed for %s (segment %d)",
                original_file_name,
                segment_index,
                exc_info=True,
            )
            return None

        return EncodedSnippet(
            data=data,
            file_name=snippet_file_name(original_file_name, segment_index, start, self._clock()),
            sample_rate=rendered.sample_rate,
            channels=rendered.channels,
            duration=rendered.duration,
            start_offset=start,
            segment_index=segment_index,
            media_type=WAV_MEDIA_TYPE,
        )
