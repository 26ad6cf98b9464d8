"""Per-song, per-artist and per-beat views over scan logs."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping, Sequence

from soundtrace.models.analytics import AggregatedSong, ArtistLeaderboardEntry, BeatStatsEntry
from soundtrace.models.enums import MATCHED_LOG_STATUSES, FollowerStatus, TrackScanLogStatus
from soundtrace.models.scan import ScanMatch, TrackScanLog
from soundtrace.models.spotify import FollowerResult


def parse_release_date(value: str | None) -> dt.date | None:
    """Parse ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD`` release dates."""
    if not value:
        return None
    text = value.strip()[:10]
    parts = text.split("-")
    try:
        numbers = [int(p) for p in parts]
        if len(numbers) == 1:
            return dt.date(numbers[0], 1, 1)
        if len(numbers) == 2:
            return dt.date(numbers[0], numbers[1], 1)
        if len(numbers) == 3:
            return dt.date(*numbers)
    except ValueError:
        return None
    return None


def _timestamp(value: dt.datetime | None) -> float:
    return value.timestamp() if value is not None else 0.0


def unique_songs(logs: Iterable[TrackScanLog]) -> list[AggregatedSong]:
    """Latest stream count per Spotify track among matched logs.

    The match with the newest ``stream_count_timestamp`` wins; on a tie the
    higher count wins.  Sorted by stream count, highest first.
    """
    songs: dict[str, AggregatedSong] = {}
    for log in logs:
        if log.status not in MATCHED_LOG_STATUSES:
            continue
        for match in log.matches:
            track_id = match.spotify_track_id
            if not track_id:
                continue
            existing = songs.get(track_id)
            count = match.stream_count or 0
            current_ts = _timestamp(match.stream_count_timestamp)
            if existing is None or current_ts > _timestamp(existing.latest_stream_count_timestamp):
                songs[track_id] = AggregatedSong(
                    spotify_track_id=track_id,
                    title=match.title,
                    artist=match.artist,
                    album_name=match.album,
                    cover_art_url=match.cover_art_url,
                    latest_stream_count=count,
                    latest_stream_count_timestamp=match.stream_count_timestamp,
                    spotify_artist_id=match.spotify_artist_id,
                )
            elif current_ts == _timestamp(existing.latest_stream_count_timestamp) and count > existing.latest_stream_count:
                songs[track_id] = existing.model_copy(
                    update={
                        "latest_stream_count": count,
                        "cover_art_url": match.cover_art_url or existing.cover_art_url,
                        "spotify_artist_id": match.spotify_artist_id or existing.spotify_artist_id,
                    }
                )
    return sorted(songs.values(), key=lambda s: s.latest_stream_count, reverse=True)


def artist_leaderboard(
    logs: Iterable[TrackScanLog],
    followers: Mapping[str, FollowerResult] | None = None,
    songs: Sequence[AggregatedSong] | None = None,
) -> list[ArtistLeaderboardEntry]:
    """Group every match by artist, in first-seen order.

    Artists are keyed by Spotify artist id, falling back to the artist name.
    Follower state comes from *followers*; an artist with an id but no entry
    there is reported as still loading.
    """
    logs = list(logs)
    followers = followers or {}
    if songs is None:
        songs = unique_songs(logs)

    groups: dict[str, tuple[str, str | None, list[ScanMatch]]] = {}
    for log in logs:
        for match in log.matches:
            key = match.spotify_artist_id or match.artist
            if key not in groups:
                groups[key] = (match.artist, match.spotify_artist_id, [])
            groups[key][2].append(match)

    stream_totals: dict[str, int] = {}
    for song in songs:
        stream_totals[song.artist_key] = stream_totals.get(song.artist_key, 0) + song.latest_stream_count

    entries: list[ArtistLeaderboardEntry] = []
    for index, (name, artist_id, matches) in enumerate(groups.values()):
        info = followers.get(artist_id) if artist_id else None
        follower_count: int | None = None
        loading = False
        error: str | None = None
        popularity: int | None = None
        genres: list[str] | None = None
        if info is not None:
            if info.status == FollowerStatus.SUCCESS:
                follower_count = info.followers
                popularity = info.popularity
                genres = info.genres
            elif info.status == FollowerStatus.ERROR:
                error = info.reason
            elif info.status == FollowerStatus.LOADING:
                loading = True
        elif artist_id:
            loading = True

        release_dates = [d for d in (parse_release_date(m.release_date) for m in matches) if d]
        entries.append(
            ArtistLeaderboardEntry(
                key=artist_id or f"{name}-{index}",
                artist_name=name,
                spotify_artist_id=artist_id,
                matched_tracks_count=len(matches),
                spotify_followers=follower_count,
                is_followers_loading=loading,
                followers_error=error,
                most_recent_match_date=max(release_dates) if release_dates else None,
                spotify_popularity=popularity,
                genres=genres,
                total_artist_streams=stream_totals.get(artist_id or name, 0),
            )
        )

    max_followers = max((e.spotify_followers or 0 for e in entries), default=0)
    if max_followers > 0:
        for entry in entries:
            if entry.spotify_followers is not None:
                entry.follower_bar_percent = entry.spotify_followers / max_followers * 100
    return entries


def beat_stats(logs: Iterable[TrackScanLog]) -> list[BeatStatsEntry]:
    """Distinct matched songs per uploaded beat, newest release first.

    Spotify imports are not beats and are skipped.
    """
    beats: dict[str, list[ScanMatch]] = {}
    for log in logs:
        if log.status == TrackScanLogStatus.IMPORTED_SPOTIFY_TRACK:
            continue
        matches = beats.setdefault(log.original_file_name, [])
        seen = {m.id for m in matches}
        for match in log.matches:
            if match.id not in seen:
                seen.add(match.id)
                matches.append(match)

    def newest_first(match: ScanMatch) -> dt.date:
        return parse_release_date(match.release_date) or dt.date.min

    return [
        BeatStatsEntry(
            beat_name=name,
            total_matches=len(matches),
            matched_songs=sorted(matches, key=newest_first, reverse=True),
        )
        for name, matches in beats.items()
    ]
