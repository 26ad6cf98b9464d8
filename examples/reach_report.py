"""Print an artist reach report from your scan logs.

Fetches scan logs from the SoundTrace backend, looks up Spotify followers for
every matched artist and prints the leaderboard with reach meters and an
estimated revenue total.

Run with:
    SOUNDTRACE_TOKEN=... SPOTIFY_CLIENT_ID=... SPOTIFY_CLIENT_SECRET=... \
        uv run python examples/reach_report.py
"""

from __future__ import annotations

import asyncio
import logging
import os

from soundtrace import ScanServiceClient, ScanServiceConfig, SpotifyClient, SpotifyConfig
from soundtrace.analytics import (
    artist_leaderboard,
    calculate_artist_level,
    calculate_bar_config,
    estimate_revenue,
    format_followers,
    unique_songs,
)

logging.basicConfig(level=logging.WARNING)


async def main() -> None:
    async with ScanServiceClient(ScanServiceConfig(auth_token=os.environ["SOUNDTRACE_TOKEN"])) as scan:
        logs = await scan.list_scan_logs()

    spotify_config = SpotifyConfig(
        client_id=os.environ["SPOTIFY_CLIENT_ID"],
        client_secret=os.environ["SPOTIFY_CLIENT_SECRET"],
    )
    songs = unique_songs(logs)
    artist_ids = {m.spotify_artist_id for log in logs for m in log.matches if m.spotify_artist_id}
    async with SpotifyClient(spotify_config) as spotify:
        followers = await spotify.get_follower_results(artist_ids)

    board = artist_leaderboard(logs, followers, songs)
    level = calculate_artist_level(len(board))
    print(f"{len(board)} artists (level {level})\n")
    for entry in sorted(board, key=lambda e: e.spotify_followers or 0, reverse=True):
        bar = calculate_bar_config(entry.spotify_followers, level)
        meter = "#" * bar.number_of_bars_to_activate
        followers_text = format_followers(entry.spotify_followers, loading=entry.is_followers_loading)
        print(f"{entry.artist_name:<30} {followers_text:>8}  {meter} ({bar.unit_label}/bar)")

    revenue = sum(r.estimated_revenue for r in estimate_revenue(songs))
    print(f"\nEstimated revenue across {len(songs)} songs: ${revenue:,.2f}")


if __name__ == "__main__":
    asyncio.run(main())
