"""Audio decoding, rendering and WAV encoding."""

from soundtrace.audio.buffer import DecodedAudio
from soundtrace.audio.decoder import (
    AudioDecoder,
    DecodingContext,
    MockAudioDecoder,
    SoundFileDecoder,
)
from soundtrace.audio.mixing import mix_channels
from soundtrace.audio.renderer import (
    AudioRenderer,
    MockAudioRenderer,
    OfflineRenderer,
    rendered_length,
)
from soundtrace.audio.wav import WAV_HEADER_SIZE, WAV_MEDIA_TYPE, encode_wav

__all__ = [
    "WAV_HEADER_SIZE",
    "WAV_MEDIA_TYPE",
    "AudioDecoder",
    "AudioRenderer",
    "DecodedAudio",
    "DecodingContext",
    "MockAudioDecoder",
    "MockAudioRenderer",
    "OfflineRenderer",
    "SoundFileDecoder",
    "encode_wav",
    "mix_channels",
    "rendered_length",
]
