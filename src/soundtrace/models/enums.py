"""String enums shared by the SoundTrace models."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class TrackScanLogStatus(StrEnum):
    PENDING_PROCESSING = "pending_processing"
    PROCESSING_ACR_SCAN = "processing_acr_scan"
    COMPLETED_MATCH_FOUND = "completed_match_found"
    COMPLETED_NO_MATCH = "completed_no_match"
    ERROR_ACR_SCAN = "error_acr_scan"
    ERROR_ACR_CREDITS_ITEM = "error_acr_credits_item"
    PENDING_SCAN = "pending_scan"
    PROCESSING_SCAN = "processing_scan"
    SCANNED_MATCH_FOUND = "scanned_match_found"
    SCANNED_NO_MATCH = "scanned_no_match"
    SKIPPED_PREVIOUSLY_SCANNED = "skipped_previously_scanned"
    IMPORTED_SPOTIFY_TRACK = "imported_spotify_track"
    ABORTED_ITEM = "aborted_item"
    ERROR_PROCESSING_ITEM = "error_processing_item"


MATCHED_LOG_STATUSES = frozenset(
    {
        TrackScanLogStatus.COMPLETED_MATCH_FOUND,
        TrackScanLogStatus.SCANNED_MATCH_FOUND,
        TrackScanLogStatus.IMPORTED_SPOTIFY_TRACK,
    }
)


@unique
class PlatformSource(StrEnum):
    FILE_UPLOAD_BATCH_ITEM = "file_upload_batch_item"
    SPOTIFY_PLAYLIST_IMPORT_ITEM = "spotify_playlist_import_item"


@unique
class JobFileStatus(StrEnum):
    """Per-file status reported by the backend for a file-upload job."""

    PENDING = "pending"
    UPLOADING = "uploading"
    UPLOADED = "uploaded"
    PROCESSING = "processing"
    COMPLETED_MATCH = "completed_match"
    COMPLETED_NO_MATCH = "completed_no_match"
    ERROR_UPLOAD = "error_upload"
    ERROR_PROCESSING = "error_processing"
    ERROR_ACR_CREDITS_ITEM = "error_acr_credits_item"


@unique
class FollowerStatus(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    LOADING = "loading"
    CANCELLED = "cancelled"
