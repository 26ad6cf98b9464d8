"""Exception hierarchy for SoundTrace."""

from __future__ import annotations


class SoundTraceError(Exception):
    """Base exception for all SoundTrace errors."""


class SnippetError(SoundTraceError):
    """A file could not be prepared for scanning."""


class DecodeFailure(SnippetError):
    """Input bytes could not be interpreted as audio."""


class ExtractionFailure(SnippetError):
    """Audio decoded fine but no viable snippet window exists."""


class ScanServiceError(SoundTraceError):
    """The SoundTrace backend rejected a request or could not be reached.

    ``status_code`` is ``0`` for transport failures.  Status 499 is used
    for requests the caller cancelled.
    """

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def category(self) -> str:
        code = self.status_code
        if code == 0:
            return "network_error"
        if code == 400:
            return "bad_request"
        if code in (401, 403):
            return "unauthorized"
        if code == 413:
            return "payload_too_large"
        if code == 499:
            return "cancelled"
        if code >= 500:
            return "upstream_error"
        return "http_error"


class SpotifyError(SoundTraceError):
    """A Spotify Web API call failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SpotifyAuthError(SpotifyError):
    """Client-credentials token could not be obtained."""
