"""Offline renderer providers."""

from soundtrace.audio.renderer.base import AudioRenderer
from soundtrace.audio.renderer.mock import MockAudioRenderer
from soundtrace.audio.renderer.offline import OfflineRenderer, rendered_length

__all__ = [
    "AudioRenderer",
    "MockAudioRenderer",
    "OfflineRenderer",
    "rendered_length",
]
