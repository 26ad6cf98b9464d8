"""Offline renderer: window extraction, channel mixing and resampling."""

from __future__ import annotations

import asyncio
import logging
import math
from typing import TYPE_CHECKING

import numpy as np
import resampy

from soundtrace.audio.buffer import DecodedAudio
from soundtrace.audio.mixing import mix_channels
from soundtrace.audio.renderer.base import AudioRenderer

if TYPE_CHECKING:
    from soundtrace.snippets.models import SnippetRequest

logger = logging.getLogger(__name__)

_FILTERS = ("kaiser_best", "kaiser_fast", "sinc_window")


def rendered_length(duration: float, sample_rate: int) -> int:
    """Number of frames an offline render of *duration* seconds produces."""
    return max(0, math.ceil(duration * sample_rate))


def _fit_length(samples: np.ndarray, frames: int) -> np.ndarray:
    current = samples.shape[1]
    if current == frames:
        return samples
    if current > frames:
        return samples[:, :frames]
    pad = np.zeros((samples.shape[0], frames - current), dtype=samples.dtype)
    return np.hstack([samples, pad])


class OfflineRenderer(AudioRenderer):
    """Band-limited renderer built on ``resampy``.

    The requested window is cut from the source at the source rate, mixed to
    the target channel count with speaker mixing rules, then resampled.  The
    result is padded with silence or trimmed so its length always matches
    ``ceil(duration * target_rate)``.

    Args:
        resample_filter: resampy filter name.  ``"kaiser_best"`` gives the highest
            quality; ``"kaiser_fast"`` is several times faster.
    """

    def __init__(self, resample_filter: str = "kaiser_best") -> None:
        if resample_filter not in _FILTERS:
            raise ValueError(
                f"resample_filter must be one of {_FILTERS}, got {resample_filter!r}"
            )
        self._filter = resample_filter

    @property
    def name(self) -> str:
        return "offline"

    async def render(self, source: DecodedAudio, request: SnippetRequest) -> DecodedAudio:
        return await asyncio.to_thread(self._render_sync, source, request)

    def _render_sync(self, source: DecodedAudio, request: SnippetRequest) -> DecodedAudio:
        src_rate = source.sample_rate
        start = min(source.length, max(0, int(round(request.start_offset * src_rate))))
        stop = min(source.length, start + math.ceil(request.duration * src_rate))
        window = np.asarray(source.samples[:, start:stop], dtype=np.float32)

        mixed = mix_channels(window, request.target_channels)

        target_rate = request.target_sample_rate
        if src_rate != target_rate and mixed.shape[1] > 0:
            resampled = resampy.resample(
                mixed,
                src_rate,
                target_rate,
                filter=self._filter,
                axis=-1,
            ).astype(np.float32)
        else:
            resampled = mixed

        frames = rendered_length(request.duration, target_rate)
        out = _fit_length(resampled, frames)
        logger.debug(
            "Rendered %.3fs window at %.3fs: %d ch @ %d Hz -> %d ch @ %d Hz (%d frames)",
            request.duration,
            request.start_offset,
            source.channels,
            src_rate,
            request.target_channels,
            target_rate,
            frames,
        )
        return DecodedAudio(samples=out, sample_rate=target_rate)
