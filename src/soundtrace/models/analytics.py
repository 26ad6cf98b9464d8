"""Models for stream history, forecasts and leaderboards."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field, field_validator

from soundtrace.models.scan import ScanMatch


def _to_day(value: Any) -> Any:
    # Stream points arrive as "YYYY-MM-DD" or full ISO timestamps.
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        return value[:10]
    return value


class HistoryPoint(BaseModel):
    """Cumulative stream count of a track on a given day."""

    date: dt.date
    streams: int = Field(ge=0)

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> Any:
        return _to_day(value)


class ForecastPoint(BaseModel):
    date: dt.date
    predicted_streams: int


class TrackHistory(BaseModel):
    track_id: str
    track_name: str = ""
    artist_name: str = ""
    stream_history: list[HistoryPoint] = Field(default_factory=list)


class StreamHistoryPoint(BaseModel):
    """Aggregate for one day across all tracks."""

    date: dt.date
    total_streams: int
    daily_streams: int


class AggregatedSong(BaseModel):
    """Latest known stream count of one Spotify track."""

    spotify_track_id: str
    title: str
    artist: str
    album_name: str | None = None
    cover_art_url: str | None = None
    latest_stream_count: int = 0
    latest_stream_count_timestamp: dt.datetime | None = None
    spotify_artist_id: str | None = None

    @property
    def artist_key(self) -> str:
        return self.spotify_artist_id or self.artist


class ArtistLeaderboardEntry(BaseModel):
    key: str
    artist_name: str
    spotify_artist_id: str | None = None
    matched_tracks_count: int
    spotify_followers: int | None = None
    is_followers_loading: bool = False
    followers_error: str | None = None
    follower_bar_percent: float = 0.0
    most_recent_match_date: dt.date | None = None
    spotify_popularity: int | None = None
    genres: list[str] | None = None
    total_artist_streams: int = 0


class BeatStatsEntry(BaseModel):
    """Distinct songs matched against one uploaded beat."""

    beat_name: str
    total_matches: int
    matched_songs: list[ScanMatch] = Field(default_factory=list)


class BarConfig(BaseModel):
    bar_unit: int
    number_of_bars_to_activate: int
    unit_label: str


class SongRevenue(BaseModel):
    song: AggregatedSong
    estimated_revenue: float


class WeeklyGrowth(BaseModel):
    """New streams in the last seven days against the seven days before."""

    this_week_streams: int
    last_week_streams: int
    percentage_change: float
