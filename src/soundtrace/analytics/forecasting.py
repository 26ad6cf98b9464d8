"""Stream forecasts projected from cumulative per-track history.

Both forecasts turn the cumulative counts into daily increments (negative
steps count as zero), average the most recent ones and project that average
flat across the requested horizon.
"""

from __future__ import annotations

import datetime as dt
from collections import defaultdict
from collections.abc import Iterable, Sequence

from soundtrace.models.analytics import ForecastPoint, HistoryPoint
from soundtrace.utils import round_half_up

DEFAULT_WINDOW = 7

LINEAR_DAMPING = 0.8
"""Scales the linear trend down; an empirical tuning constant."""


def daily_increments(history: Sequence[HistoryPoint]) -> list[int]:
    """Non-negative day-over-day differences of a cumulative series."""
    ordered = sorted(history, key=lambda p: p.date)
    return [max(0, cur.streams - prev.streams) for prev, cur in zip(ordered, ordered[1:])]


def _project(start: dt.date, days: int, value: int) -> list[ForecastPoint]:
    return [
        ForecastPoint(date=start + dt.timedelta(days=i), predicted_streams=value)
        for i in range(1, days + 1)
    ]


def _average_forecast(
    history: Sequence[HistoryPoint],
    days: int,
    window: int,
    damping: float,
    today: dt.date | None,
) -> list[ForecastPoint]:
    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}")
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    if len(history) < 2:
        start = history[0].date if history else (today or dt.date.today())
        return _project(start, days, 0)

    increments = daily_increments(history)
    recent = increments[-window:]
    average = sum(recent) / len(recent)
    last_date = max(p.date for p in history)
    return _project(last_date, days, round_half_up(max(0.0, average * damping)))


def linear_forecast(
    history: Sequence[HistoryPoint],
    days: int,
    window: int = DEFAULT_WINDOW,
    damping: float = LINEAR_DAMPING,
    *,
    today: dt.date | None = None,
) -> list[ForecastPoint]:
    """Damped recent-trend forecast, one point per day after the last sample.

    With fewer than two samples there is no trend; the result is zeros
    starting after the only sample's date, or after *today*.
    """
    return _average_forecast(history, days, window, damping, today)


def moving_average_forecast(
    history: Sequence[HistoryPoint],
    days: int,
    window: int = DEFAULT_WINDOW,
    *,
    today: dt.date | None = None,
) -> list[ForecastPoint]:
    """Undamped moving average of the last *window* daily increments."""
    return _average_forecast(history, days, window, 1.0, today)


def aggregate_forecasts(forecasts: Iterable[Iterable[ForecastPoint]]) -> list[ForecastPoint]:
    """Sum per-track forecasts by date."""
    totals: dict[dt.date, int] = defaultdict(int)
    for track in forecasts:
        for point in track:
            totals[point.date] += point.predicted_streams
    return [ForecastPoint(date=d, predicted_streams=totals[d]) for d in sorted(totals)]
