"""HTTP clients for the SoundTrace backend and Spotify."""

from soundtrace.providers.scan import ScanServiceClient, ScanServiceConfig
from soundtrace.providers.spotify import SpotifyClient, SpotifyConfig, TokenCache

__all__ = [
    "ScanServiceClient",
    "ScanServiceConfig",
    "SpotifyClient",
    "SpotifyConfig",
    "TokenCache",
]
