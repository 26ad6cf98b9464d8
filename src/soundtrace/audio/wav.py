"""16-bit PCM WAV encoding for decoded audio buffers."""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from soundtrace.audio.buffer import DecodedAudio

WAV_MEDIA_TYPE = "audio/wav"
WAV_HEADER_SIZE = 44

_BYTES_PER_SAMPLE = 2
_BITS_PER_SAMPLE = 16
_PCM_FORMAT_CHUNK_SIZE = 16
_PCM_FORMAT_TAG = 1

# RIFF, size, WAVE, "fmt ", chunk size, format tag, channels, rate,
# byte rate, block align, bits per sample, "data", data length
_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


def quantize_samples(samples: np.ndarray) -> np.ndarray:
    """Convert float samples to int16 with asymmetric full-scale scaling.

    NaN becomes silence.  Samples are clamped to ``[-1, 1]``; negative values
    are scaled by 32768 and the rest by 32767, then truncated toward zero.
    """
    values = np.nan_to_num(np.asarray(samples, dtype=np.float64), nan=0.0)
    clamped = np.clip(values, -1.0, 1.0)
    scaled = np.where(clamped < 0, clamped * 32768.0, clamped * 32767.0)
    return np.trunc(scaled).astype(np.int16)


def wav_header(frames: int, channels: int, sample_rate: int) -> bytes:
    """Build the 44-byte canonical PCM WAV header."""
    data_length = frames * channels * _BYTES_PER_SAMPLE
    return _HEADER.pack(
        b"RIFF",
        WAV_HEADER_SIZE + data_length - 8,
        b"WAVE",
        b"fmt ",
        _PCM_FORMAT_CHUNK_SIZE,
        _PCM_FORMAT_TAG,
        channels,
        sample_rate,
        sample_rate * channels * _BYTES_PER_SAMPLE,
        channels * _BYTES_PER_SAMPLE,
        _BITS_PER_SAMPLE,
        b"data",
        data_length,
    )


def encode_wav(audio: DecodedAudio) -> bytes:
    """Serialize *audio* into a complete 16-bit PCM WAV byte stream.

    Samples are interleaved per frame (L, R, L, R, ... for stereo).  An empty
    buffer yields a header-only file with a zero data length.
    """
    header = wav_header(audio.length, audio.channels, audio.sample_rate)
    if audio.length == 0:
        return header
    # (channels, frames) -> frame-major interleave
    interleaved = quantize_samples(audio.samples).T.reshape(-1)
    return header + interleaved.astype("<i2").tobytes()
