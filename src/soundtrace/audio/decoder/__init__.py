"""Audio decoder providers."""

from soundtrace.audio.decoder.base import AudioDecoder, DecodingContext
from soundtrace.audio.decoder.mock import MockAudioDecoder, MockDecodingContext
from soundtrace.audio.decoder.soundfile import SoundFileDecoder, SoundFileDecodingContext

__all__ = [
    "AudioDecoder",
    "DecodingContext",
    "MockAudioDecoder",
    "MockDecodingContext",
    "SoundFileDecoder",
    "SoundFileDecodingContext",
]
