"""DecodedAudio data model for in-memory PCM audio."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class DecodedAudio:
    """Decoded floating-point PCM audio.

    Samples are stored per channel with shape ``(channels, frames)`` and are
    nominally in ``[-1.0, 1.0]``.  A 1-D input array is treated as mono.

    The sample array is copied on construction and marked read-only, so a
    ``DecodedAudio`` never changes after it has been produced by a decoder
    or renderer.
    """

    samples: np.ndarray
    """Float32 samples, shape ``(channels, frames)``."""

    sample_rate: int
    """Sample rate in Hz."""

    def __post_init__(self) -> None:
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        arr = np.array(self.samples, dtype=np.float32, ndmin=2)
        if arr.ndim != 2:
            raise ValueError(f"samples must be 1-D or 2-D, got {arr.ndim} dimensions")
        if arr.shape[0] < 1:
            raise ValueError("samples must contain at least one channel")
        arr.setflags(write=False)
        object.__setattr__(self, "samples", arr)

    @classmethod
    def from_interleaved(cls, frames: Any, sample_rate: int) -> DecodedAudio:
        """Build from a ``(frames, channels)`` array as returned by most decoders."""
        arr = np.asarray(frames, dtype=np.float32)
        if arr.ndim == 1:
            arr = arr[:, None]
        return cls(samples=arr.T, sample_rate=sample_rate)

    @classmethod
    def silence(cls, duration: float, sample_rate: int, channels: int = 1) -> DecodedAudio:
        frames = max(0, int(round(duration * sample_rate)))
        return cls(samples=np.zeros((channels, frames), dtype=np.float32), sample_rate=sample_rate)

    @property
    def channels(self) -> int:
        return int(self.samples.shape[0])

    @property
    def length(self) -> int:
        """Number of sample frames per channel."""
        return int(self.samples.shape[1])

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return self.length / self.sample_rate

    def channel_data(self, index: int) -> np.ndarray:
        if not 0 <= index < self.channels:
            raise IndexError(f"channel {index} out of range for {self.channels} channel(s)")
        return self.samples[index]
