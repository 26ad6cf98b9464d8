"""Spotify Web API artist lookups."""

from soundtrace.errors import SpotifyAuthError, SpotifyError
from soundtrace.providers.spotify.client import SpotifyClient
from soundtrace.providers.spotify.config import SpotifyConfig
from soundtrace.providers.spotify.token_cache import TokenCache, TokenFetcher

__all__ = [
    "SpotifyAuthError",
    "SpotifyClient",
    "SpotifyConfig",
    "SpotifyError",
    "TokenCache",
    "TokenFetcher",
]
