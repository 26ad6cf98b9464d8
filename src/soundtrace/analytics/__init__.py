"""Analytics over scan logs and stream history."""

from soundtrace.analytics.forecasting import (
    LINEAR_DAMPING,
    aggregate_forecasts,
    daily_increments,
    linear_forecast,
    moving_average_forecast,
)
from soundtrace.analytics.history import (
    aggregate_stream_histories,
    drop_leading_artifact,
    since,
    weekly_growth,
)
from soundtrace.analytics.leaderboard import (
    artist_leaderboard,
    beat_stats,
    parse_release_date,
    unique_songs,
)
from soundtrace.analytics.reach import (
    DEFAULT_PAYOUT_RATE,
    MAX_BAR_SLOTS,
    calculate_artist_level,
    calculate_bar_config,
    estimate_revenue,
    format_followers,
    total_revenue,
)

__all__ = [
    "DEFAULT_PAYOUT_RATE",
    "LINEAR_DAMPING",
    "MAX_BAR_SLOTS",
    "aggregate_forecasts",
    "aggregate_stream_histories",
    "artist_leaderboard",
    "beat_stats",
    "calculate_artist_level",
    "calculate_bar_config",
    "daily_increments",
    "drop_leading_artifact",
    "estimate_revenue",
    "format_followers",
    "linear_forecast",
    "moving_average_forecast",
    "parse_release_date",
    "since",
    "total_revenue",
    "unique_songs",
    "weekly_growth",
]
