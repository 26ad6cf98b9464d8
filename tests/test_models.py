"""Tests for backend payload models."""

from __future__ import annotations

import datetime as dt

import pytest
from pydantic import ValidationError

from soundtrace.models import (
    MATCHED_LOG_STATUSES,
    ArtistDetails,
    FollowerResult,
    FollowerStatus,
    HistoryPoint,
    PlatformSource,
    ScanJob,
    ScanMatch,
    TrackScanLog,
    TrackScanLogStatus,
)


class TestScanMatch:
    def test_defaults(self):
        match = ScanMatch(id="m1")
        assert match.title == "Unknown Title"
        assert match.artist == "Unknown Artist"
        assert match.release_date == "N/A"

    def test_camel_case_wire_format(self):
        match = ScanMatch.model_validate(
            {
                "id": "m1",
                "spotifyTrackId": "t1",
                "streamCount": 42,
                "streamCountTimestamp": "2024-01-02T03:04:05Z",
            }
        )
        assert match.spotify_track_id == "t1"
        assert match.stream_count_timestamp == dt.datetime(2024, 1, 2, 3, 4, 5, tzinfo=dt.UTC)
        wire = match.to_wire()
        assert wire["spotifyTrackId"] == "t1"
        assert wire["streamCount"] == 42
        assert "coverArtUrl" not in wire


class TestTrackScanLog:
    def test_parses_backend_log(self):
        log = TrackScanLog.model_validate(
            {
                "logId": "l1",
                "scanJobId": "job-1",
                "originalFileName": "beat.mp3",
                "originalFileSize": 1234,
                "status": "scanned_match_found",
                "platformSource": "spotify_playlist_import_item",
                "matches": [{"id": "m1", "title": "Song"}],
            }
        )
        assert log.status in MATCHED_LOG_STATUSES
        assert log.platform_source == PlatformSource.SPOTIFY_PLAYLIST_IMPORT_ITEM
        assert log.matches[0].title == "Song"

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            TrackScanLog(log_id="l", original_file_name="x", status="exploded")

    def test_matched_statuses(self):
        assert TrackScanLogStatus.COMPLETED_NO_MATCH not in MATCHED_LOG_STATUSES
        assert TrackScanLogStatus.IMPORTED_SPOTIFY_TRACK in MATCHED_LOG_STATUSES


class TestScanJob:
    def test_unknown_status_kept_as_string(self):
        job = ScanJob.model_validate({"id": "j", "status": "some_new_state", "jobType": "x"})
        assert job.status == "some_new_state"
        assert job.files is None


class TestSpotifyModels:
    def test_popularity_bounds(self):
        with pytest.raises(ValidationError):
            ArtistDetails(artist_id="a", popularity=101)

    def test_follower_result_from_details(self):
        details = ArtistDetails(artist_id="a", followers=10, popularity=5, genres=["lofi"])
        result = FollowerResult.from_details(details)
        assert result.status == FollowerStatus.SUCCESS
        assert result.followers == 10
        assert result.genres == ["lofi"]

    def test_follower_error(self):
        result = FollowerResult.error("a", "boom")
        assert result.status == FollowerStatus.ERROR
        assert result.followers is None
        assert result.reason == "boom"


class TestHistoryPoint:
    def test_negative_streams_rejected(self):
        with pytest.raises(ValidationError):
            HistoryPoint(date="2024-01-01", streams=-1)

    def test_datetime_is_truncated_to_day(self):
        point = HistoryPoint(date=dt.datetime(2024, 1, 1, 18, 30), streams=1)
        assert point.date == dt.date(2024, 1, 1)
