"""Pydantic models for backend payloads and analytics."""

from soundtrace.models.analytics import (
    AggregatedSong,
    ArtistLeaderboardEntry,
    BarConfig,
    BeatStatsEntry,
    ForecastPoint,
    HistoryPoint,
    SongRevenue,
    StreamHistoryPoint,
    TrackHistory,
    WeeklyGrowth,
)
from soundtrace.models.enums import (
    MATCHED_LOG_STATUSES,
    FollowerStatus,
    JobFileStatus,
    PlatformSource,
    TrackScanLogStatus,
)
from soundtrace.models.scan import (
    FileUploadResponse,
    JobFileState,
    PlatformLinks,
    ScanJob,
    ScanMatch,
    SnippetScanResult,
    TrackScanLog,
)
from soundtrace.models.spotify import ArtistDetails, FollowerResult

__all__ = [
    "MATCHED_LOG_STATUSES",
    "AggregatedSong",
    "ArtistDetails",
    "ArtistLeaderboardEntry",
    "BarConfig",
    "BeatStatsEntry",
    "FileUploadResponse",
    "FollowerResult",
    "FollowerStatus",
    "ForecastPoint",
    "HistoryPoint",
    "JobFileState",
    "JobFileStatus",
    "PlatformLinks",
    "PlatformSource",
    "ScanJob",
    "ScanMatch",
    "SnippetScanResult",
    "SongRevenue",
    "StreamHistoryPoint",
    "TrackHistory",
    "TrackScanLog",
    "TrackScanLogStatus",
    "WeeklyGrowth",
]
