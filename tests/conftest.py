"""Shared test fixtures and helpers."""

from __future__ import annotations

import io
from collections.abc import Callable

import numpy as np
import pytest
import soundfile as sf

from soundtrace.audio.buffer import DecodedAudio

FIXED_TIMESTAMP_MS = 1_700_000_000_000

SineFactory = Callable[..., DecodedAudio]
EncodeFactory = Callable[..., bytes]


def make_sine(
    duration: float,
    sample_rate: int = 44100,
    channels: int = 1,
    frequency: float = 440.0,
    amplitude: float = 0.5,
) -> DecodedAudio:
    frames = int(round(duration * sample_rate))
    t = np.arange(frames, dtype=np.float64) / sample_rate
    tone = (amplitude * np.sin(2 * np.pi * frequency * t)).astype(np.float32)
    return DecodedAudio(samples=np.tile(tone, (channels, 1)), sample_rate=sample_rate)


def encode_file(audio: DecodedAudio, fmt: str = "WAV", subtype: str = "PCM_16") -> bytes:
    """Write *audio* to an in-memory audio file with libsndfile."""
    buf = io.BytesIO()
    sf.write(buf, audio.samples.T, audio.sample_rate, format=fmt, subtype=subtype)
    return buf.getvalue()


@pytest.fixture
def sine() -> SineFactory:
    return make_sine


@pytest.fixture
def encode() -> EncodeFactory:
    return encode_file


@pytest.fixture
def fixed_clock() -> Callable[[], int]:
    return lambda: FIXED_TIMESTAMP_MS
