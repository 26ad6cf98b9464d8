"""Aggregate stream history across tracks."""

from __future__ import annotations

import datetime as dt
import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence

from soundtrace.models.analytics import StreamHistoryPoint, TrackHistory, WeeklyGrowth

logger = logging.getLogger(__name__)

# Day-over-day jumps above this are almost always a data glitch upstream.
_SUSPICIOUS_DAILY_STREAMS = 1_000_000


def _track_key(history: TrackHistory) -> str:
    return history.track_id or f"{history.artist_name}-{history.track_name}"


def aggregate_stream_histories(
    histories: Iterable[TrackHistory],
    today: dt.date | None = None,
) -> list[StreamHistoryPoint]:
    """Combine per-track cumulative histories into one daily series.

    Points dated *today* are incomplete and dropped.  ``daily_streams`` sums
    each track's day-over-day increase (a track's first point contributes
    nothing); ``total_streams`` sums the cumulative counts.  Days where both
    are zero are omitted.
    """
    today = today or dt.date.today()
    per_track: dict[str, list[tuple[dt.date, int]]] = defaultdict(list)
    for history in histories:
        points = per_track[_track_key(history)]
        points.extend((p.date, p.streams) for p in history.stream_history if p.date != today)

    daily: dict[dt.date, int] = defaultdict(int)
    totals: dict[dt.date, int] = defaultdict(int)
    for key, points in per_track.items():
        points.sort(key=lambda p: p[0])
        for (_, prev), (day, cur) in zip(points, points[1:]):
            increase = max(0, cur - prev)
            if increase > _SUSPICIOUS_DAILY_STREAMS:
                logger.warning(
                    "Extreme daily streams for %s on %s: %d -> %d",
                    key,
                    day,
                    prev,
                    cur,
                )
            daily[day] += increase
        for day, streams in points:
            totals[day] += streams

    result = [
        StreamHistoryPoint(date=day, total_streams=totals[day], daily_streams=daily[day])
        for day in sorted(daily.keys() | totals.keys())
    ]
    return [p for p in result if p.total_streams > 0 or p.daily_streams > 0]


def drop_leading_artifact(points: Sequence[StreamHistoryPoint]) -> list[StreamHistoryPoint]:
    """Remove a first point whose daily count equals its (non-zero) total.

    That shape means the provider reported the whole lifetime count as one
    day's growth.
    """
    if points and points[0].total_streams > 0 and points[0].daily_streams == points[0].total_streams:
        return list(points[1:])
    return list(points)


def since(points: Iterable[StreamHistoryPoint], days: int, today: dt.date | None = None) -> list[StreamHistoryPoint]:
    cutoff = (today or dt.date.today()) - dt.timedelta(days=days)
    return [p for p in points if p.date >= cutoff]


def weekly_growth(points: Sequence[StreamHistoryPoint], today: dt.date | None = None) -> WeeklyGrowth:
    """Compare new streams over the last 7 days with the 7 days before."""
    today = today or dt.date.today()
    week_start = today - dt.timedelta(days=7)
    prev_start = today - dt.timedelta(days=14)
    points = drop_leading_artifact(points)

    this_week = sum(p.daily_streams for p in points if p.date >= week_start)
    last_week = sum(p.daily_streams for p in points if prev_start <= p.date < week_start)

    if last_week > 0:
        change = (this_week - last_week) / last_week * 100
    elif this_week > 0:
        change = 100.0
    else:
        change = 0.0
    return WeeklyGrowth(
        this_week_streams=this_week,
        last_week_streams=last_week,
        percentage_change=change,
    )
