"""SoundTrace backend scan and job API."""

from soundtrace.errors import ScanServiceError
from soundtrace.providers.scan.client import ScanServiceClient
from soundtrace.providers.scan.config import DEFAULT_API_BASE_URL, ScanServiceConfig

__all__ = [
    "DEFAULT_API_BASE_URL",
    "ScanServiceClient",
    "ScanServiceConfig",
    "ScanServiceError",
]
