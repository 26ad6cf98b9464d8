"""Data models for snippet extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, unique
from pathlib import Path

from soundtrace.audio.wav import WAV_MEDIA_TYPE
from soundtrace.errors import DecodeFailure, ExtractionFailure, SnippetError


@dataclass(frozen=True)
class SnippetRequest:
    """A window to render from a decoded source."""

    start_offset: float
    """Start of the window in seconds (>= 0)."""

    duration: float
    """Window length in seconds."""

    target_sample_rate: int
    """Output sample rate in Hz."""

    target_channels: int
    """Output channel count."""

    def __post_init__(self) -> None:
        if self.start_offset < 0:
            raise ValueError(f"start_offset must be >= 0, got {self.start_offset}")
        if self.duration < 0:
            raise ValueError(f"duration must be >= 0, got {self.duration}")


@dataclass(frozen=True)
class EncodedSnippet:
    """A WAV-encoded snippet ready for upload.

    Ownership passes to the caller on return; nothing in the extraction
    path keeps a reference.
    """

    data: bytes
    file_name: str
    sample_rate: int
    channels: int
    duration: float
    start_offset: float
    segment_index: int
    media_type: str = WAV_MEDIA_TYPE

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class AudioUpload:
    """A raw file selected by the user."""

    name: str
    data: bytes = field(repr=False)
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: str | Path, content_type: str | None = None) -> AudioUpload:
        """Read a file from disk, guessing ``audio/<ext>`` when no type is given."""
        p = Path(path)
        if content_type is None:
            suffix = p.suffix.lower().lstrip(".")
            content_type = _AUDIO_TYPES.get(suffix, "application/octet-stream")
        return cls(name=p.name, data=p.read_bytes(), content_type=content_type)


_AUDIO_TYPES = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "aac": "audio/aac",
    "ogg": "audio/ogg",
    "flac": "audio/flac",
    "m4a": "audio/mp4",
}


@unique
class SnippetFailure(StrEnum):
    """Why a file could not be prepared for scanning."""

    DECODE = "decode_failure"
    """The bytes could not be decoded as audio."""

    EXTRACTION = "extraction_failure"
    """Decoding succeeded but no viable window exists."""


_FAILURE_ERRORS: dict[SnippetFailure, type[SnippetError]] = {
    SnippetFailure.DECODE: DecodeFailure,
    SnippetFailure.EXTRACTION: ExtractionFailure,
}


@dataclass(frozen=True)
class SnippetResult:
    """Outcome of preparing one file: a snippet or a failure kind."""

    file_name: str
    snippet: EncodedSnippet | None = None
    failure: SnippetFailure | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.snippet is not None

    @classmethod
    def success(cls, file_name: str, snippet: EncodedSnippet) -> SnippetResult:
        return cls(file_name=file_name, snippet=snippet)

    @classmethod
    def failed(cls, file_name: str, failure: SnippetFailure, message: str) -> SnippetResult:
        return cls(file_name=file_name, failure=failure, message=message)

    def unwrap(self) -> EncodedSnippet:
        """Return the snippet, or raise the exception matching the failure."""
        if self.snippet is not None:
            return self.snippet
        error_cls = _FAILURE_ERRORS.get(self.failure or SnippetFailure.EXTRACTION, SnippetError)
        raise error_cls(self.message or f"{self.file_name} could not be prepared for scanning")
