"""libsndfile-backed audio decoder."""

from __future__ import annotations

import asyncio
import io
import logging

import soundfile as sf

from soundtrace.audio.buffer import DecodedAudio
from soundtrace.audio.decoder.base import AudioDecoder, ContextState, DecodingContext
from soundtrace.errors import DecodeFailure

logger = logging.getLogger(__name__)


def _decode_bytes(data: bytes) -> DecodedAudio:
    try:
        frames, sample_rate = sf.read(io.BytesIO(data), dtype="float32", always_2d=True)
    except Exception as exc:
        raise DecodeFailure(f"unsupported or corrupt audio data: {exc}") from exc
    return DecodedAudio.from_interleaved(frames, int(sample_rate))


class SoundFileDecodingContext(DecodingContext):
    """Decoding context that runs libsndfile in a worker thread."""

    def __init__(self) -> None:
        self._state: ContextState = "running"

    @property
    def state(self) -> ContextState:
        return self._state

    async def decode(self, data: bytes) -> DecodedAudio:
        if self._state == "closed":
            raise RuntimeError("decoding context is closed")
        if not data:
            raise DecodeFailure("empty audio payload")
        audio = await asyncio.to_thread(_decode_bytes, data)
        logger.debug(
            "Decoded %d frames (%d ch @ %d Hz)",
            audio.length,
            audio.channels,
            audio.sample_rate,
        )
        return audio

    async def close(self) -> None:
        self._state = "closed"


class SoundFileDecoder(AudioDecoder):
    """Decoder for WAV, FLAC, OGG/Vorbis, Opus and MP3 via ``soundfile``.

    Which containers are readable depends on the libsndfile build bundled
    with ``soundfile`` (MP3 requires libsndfile 1.1 or later).
    """

    @property
    def name(self) -> str:
        return "soundfile"

    def open(self) -> SoundFileDecodingContext:
        return SoundFileDecodingContext()
