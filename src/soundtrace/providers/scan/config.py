"""SoundTrace backend client configuration."""

from __future__ import annotations

from pydantic import BaseModel, SecretStr, field_validator

DEFAULT_API_BASE_URL = "https://api.soundtrace.uk"


class ScanServiceConfig(BaseModel):
    """Configuration for :class:`ScanServiceClient`."""

    base_url: str = DEFAULT_API_BASE_URL
    auth_token: SecretStr | None = None
    timeout: float = 60.0
    scan_path: str = "/api/scan-track"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    @field_validator("scan_path")
    @classmethod
    def _leading_slash(cls, v: str) -> str:
        return v if v.startswith("/") else f"/{v}"
