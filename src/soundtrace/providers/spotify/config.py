"""Spotify Web API client configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr


class SpotifyConfig(BaseModel):
    """Client-credentials configuration for the Spotify Web API."""

    client_id: str = Field(min_length=1)
    client_secret: SecretStr
    token_url: str = "https://accounts.spotify.com/api/token"
    api_base_url: str = "https://api.spotify.com/v1"
    timeout: float = 15.0
    expiry_buffer_seconds: float = Field(default=300.0, ge=0)
    """Tokens are treated as expired this long before Spotify says they are."""
