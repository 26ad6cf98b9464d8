"""Reach meter scaling, follower formatting and revenue estimates."""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from soundtrace.models.analytics import AggregatedSong, BarConfig, SongRevenue
from soundtrace.utils import round_half_up

MAX_BAR_SLOTS = 30
ARTIST_LEVEL_THRESHOLDS = (100, 500, 1000, 5000, 10000)
BAR_UNIT_MULTIPLIERS = (10, 100, 1000)
DEFAULT_PAYOUT_RATE = 0.0035
"""Average USD paid per stream."""


def _fixed(value: float, digits: int) -> str:
    # Half-up on the exact binary value, unlike format()'s half-even.
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_artist_level(artist_count: int) -> int:
    """Level 1 plus one per threshold reached."""
    level = 1
    for threshold in ARTIST_LEVEL_THRESHOLDS:
        if artist_count < threshold:
            break
        level += 1
    return level


def _unit_label(bar_unit: int) -> str:
    for scale, suffix in ((1_000_000_000, "B"), (1_000_000, "M"), (1_000, "K")):
        if bar_unit >= scale:
            return f"{_fixed(bar_unit / scale, 0 if bar_unit % scale == 0 else 1)}{suffix}"
    return str(bar_unit)


def calculate_bar_config(followers: int | None, level: int) -> BarConfig:
    """Pick the follower count one meter bar represents at *level*.

    The base unit grows 1.5x per level.  It is scaled up by 10, 100 or 1000
    to keep large follower counts within :data:`MAX_BAR_SLOTS` bars.
    """
    if followers is None or followers <= 0:
        return BarConfig(bar_unit=0, number_of_bars_to_activate=0, unit_label="")

    base = 1000 * 1.5 ** (level - 1) if level > 1 else 1000
    base_unit = max(100, round_half_up(base / 100) * 100)

    bar_unit = base_unit
    for i, multiplier in enumerate(BAR_UNIT_MULTIPLIERS):
        if followers < base_unit * multiplier:
            bar_unit = base_unit * (BAR_UNIT_MULTIPLIERS[i - 1] if i > 0 else 1)
            break
        bar_unit = base_unit * multiplier
    bar_unit = max(base_unit, bar_unit)

    bars = min(MAX_BAR_SLOTS, math.ceil(followers / bar_unit))
    return BarConfig(
        bar_unit=bar_unit,
        number_of_bars_to_activate=bars,
        unit_label=_unit_label(bar_unit),
    )


def format_followers(count: int | None, *, loading: bool = False) -> str:
    """Compact display form: ``1.2B``, ``3.4M``, ``56K`` or the raw number.

    ``None`` reads as "N/A" unless the count is still loading.
    """
    if count is None:
        return "Loading..." if loading else "N/A"
    if count >= 1_000_000_000:
        return f"{_fixed(count / 1_000_000_000, 1)}B"
    if count >= 1_000_000:
        return f"{_fixed(count / 1_000_000, 1)}M"
    if count >= 1_000:
        return f"{_fixed(count / 1_000, 0)}K"
    return str(count)


def _check_rate(payout_rate: float) -> None:
    if math.isnan(payout_rate) or payout_rate < 0:
        raise ValueError(f"payout_rate must be a non-negative number, got {payout_rate}")


def total_revenue(total_streams: int, payout_rate: float = DEFAULT_PAYOUT_RATE) -> float:
    _check_rate(payout_rate)
    return total_streams * payout_rate


def estimate_revenue(
    songs: Iterable[AggregatedSong],
    payout_rate: float = DEFAULT_PAYOUT_RATE,
) -> list[SongRevenue]:
    """Revenue per song at *payout_rate*, highest first."""
    _check_rate(payout_rate)
    revenue = [
        SongRevenue(song=song, estimated_revenue=song.latest_stream_count * payout_rate)
        for song in songs
    ]
    return sorted(revenue, key=lambda r: r.estimated_revenue, reverse=True)
