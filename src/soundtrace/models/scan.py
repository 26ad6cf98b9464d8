"""Scan, job and scan-log models exchanged with the SoundTrace backend."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from soundtrace.models.enums import JobFileStatus, PlatformSource, TrackScanLogStatus


class CamelModel(BaseModel):
    """Base for backend payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PlatformLinks(CamelModel):
    spotify: str | None = None
    apple_music: str | None = None
    youtube: str | None = None


class ScanMatch(CamelModel):
    """A single fingerprint match, enriched with stream data by the backend."""

    id: str
    title: str = "Unknown Title"
    artist: str = "Unknown Artist"
    album: str = "Unknown Album"
    release_date: str = "N/A"
    match_confidence: float = 0
    platform_links: PlatformLinks | None = None
    spotify_artist_id: str | None = None
    spotify_track_id: str | None = None
    stream_count: int | None = None
    stream_count_timestamp: datetime | None = None
    cover_art_url: str | None = None
    stream_clout_album_id: str | None = None
    stream_clout_track_id: str | None = None


class SnippetScanResult(CamelModel):
    """Result of scanning one snippet."""

    scan_id: str
    instrumental_name: str
    instrumental_size: int
    scan_date: datetime
    matches: list[ScanMatch] = Field(default_factory=list)
    error_message: str | None = None


class TrackScanLog(CamelModel):
    """A persisted scan log entry for one uploaded or imported track."""

    log_id: str
    scan_job_id: str | None = None
    original_file_name: str
    original_file_size: int = 0
    scan_date: datetime | None = None
    matches: list[ScanMatch] = Field(default_factory=list)
    status: TrackScanLogStatus
    platform_source: PlatformSource = PlatformSource.FILE_UPLOAD_BATCH_ITEM
    source_url: str | None = None
    acr_response_details: str | None = None
    last_attempted_at: datetime | None = None


class JobFileState(CamelModel):
    original_file_name: str
    original_file_size: int
    status: JobFileStatus = JobFileStatus.PENDING
    error_message: str | None = None
    uploaded_bytes: int | None = None
    matches: list[str] | None = None


class LastProcessedItem(CamelModel):
    item_name: str | None = None
    status: str | None = None


class ScanJob(CamelModel):
    """A backend scan job.

    ``job_type`` and ``status`` are kept as plain strings: the backend owns
    their vocabularies and adds values over time.
    """

    id: str
    job_name: str = ""
    job_type: str = "file_upload_batch"
    status: str = "pending_setup"
    original_input_url: str | None = None
    total_items: int = 0
    items_processed: int = 0
    items_with_matches: int = 0
    items_failed: int = 0
    files: list[JobFileState] | None = None
    last_error_message: str | None = None
    last_processed_item_info: LastProcessedItem | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FileUploadResponse(CamelModel):
    message: str = ""
    file_state: JobFileState
    job_update: ScanJob | None = None
