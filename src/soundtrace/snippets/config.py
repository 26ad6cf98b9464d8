"""Snippet extraction configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from soundtrace.snippets.models import SnippetRequest

SNIPPET_DURATION_SECONDS = 21.0
TARGET_SAMPLE_RATE = 44100
TARGET_CHANNELS = 2
MIN_SNIPPET_SECONDS = 1.0
MAX_FILE_SIZE_BYTES = 50 * 1024 * 1024


class SnippetConfig(BaseModel):
    """Fixed parameters of the snippet extraction policy.

    Attributes:
        snippet_duration_seconds: Length of the window taken from each file.
        target_sample_rate: Sample rate of every produced snippet.
        target_channels: Channel count of every produced snippet.
        min_snippet_seconds: Windows shorter than this are never produced.
        max_file_size_bytes: Ceiling applied to original uploads before
            extraction is attempted.
    """

    model_config = ConfigDict(frozen=True)

    snippet_duration_seconds: float = Field(default=SNIPPET_DURATION_SECONDS, gt=0)
    target_sample_rate: int = Field(default=TARGET_SAMPLE_RATE, gt=0, le=384_000)
    target_channels: int = Field(default=TARGET_CHANNELS, ge=1, le=32)
    min_snippet_seconds: float = Field(default=MIN_SNIPPET_SECONDS, ge=0)
    max_file_size_bytes: int = Field(default=MAX_FILE_SIZE_BYTES, gt=0)

    @model_validator(mode="after")
    def _check_floor(self) -> SnippetConfig:
        if self.min_snippet_seconds > self.snippet_duration_seconds:
            raise ValueError("min_snippet_seconds must not exceed snippet_duration_seconds")
        return self

    def request_for(self, start_offset: float, duration: float) -> SnippetRequest:
        """Build a render request for a window in this config's target format."""
        return SnippetRequest(
            start_offset=start_offset,
            duration=duration,
            target_sample_rate=self.target_sample_rate,
            target_channels=self.target_channels,
        )
