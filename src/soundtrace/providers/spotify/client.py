"""Spotify artist lookups using the client-credentials flow."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

import httpx

from soundtrace.errors import SpotifyAuthError, SpotifyError
from soundtrace.models.spotify import ArtistDetails, FollowerResult
from soundtrace.providers.spotify.config import SpotifyConfig
from soundtrace.providers.spotify.token_cache import TokenCache

logger = logging.getLogger("soundtrace.providers.spotify")


class SpotifyClient:
    """Fetches follower counts, popularity and genres for Spotify artists."""

    def __init__(self, config: SpotifyConfig, token_cache: TokenCache | None = None) -> None:
        self._config = config
        self._tokens = token_cache or TokenCache(expiry_buffer=config.expiry_buffer_seconds)
        self._client: httpx.AsyncClient = httpx.AsyncClient(timeout=config.timeout)

    @property
    def name(self) -> str:
        return "SpotifyClient"

    async def __aenter__(self) -> SpotifyClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def get_artist_details(self, artist_id: str) -> ArtistDetails:
        if not artist_id:
            raise ValueError("Spotify artist ID is required")

        token = await self._tokens.get(self._fetch_token)
        try:
            resp = await self._client.get(
                f"{self._config.api_base_url}/artists/{artist_id}",
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as exc:
            raise SpotifyError(f"Failed to reach Spotify: {exc}") from exc

        if resp.status_code == 401:
            # Token revoked early; the next call fetches a fresh one.
            self._tokens.invalidate()
        if resp.status_code == 404:
            raise SpotifyError(f"Artist with ID '{artist_id}' not found on Spotify.", 404)
        if resp.is_error:
            raise SpotifyError(_spotify_error_message(resp), resp.status_code)

        data: dict[str, Any] = resp.json()
        return ArtistDetails(
            artist_id=data.get("id") or artist_id,
            name=data.get("name"),
            followers=(data.get("followers") or {}).get("total"),
            popularity=data.get("popularity"),
            genres=data.get("genres") or [],
        )

    async def get_follower_results(self, artist_ids: Iterable[str]) -> dict[str, FollowerResult]:
        """Look up several artists concurrently.

        Failures are reported per artist instead of raised.
        """
        ids = list(dict.fromkeys(a for a in artist_ids if a))
        outcomes = await asyncio.gather(
            *(self.get_artist_details(a) for a in ids),
            return_exceptions=True,
        )
        results: dict[str, FollowerResult] = {}
        for artist_id, outcome in zip(ids, outcomes, strict=True):
            if isinstance(outcome, ArtistDetails):
                results[artist_id] = FollowerResult.from_details(outcome)
            elif isinstance(outcome, SpotifyError):
                logger.warning("Follower lookup failed for %s: %s", artist_id, outcome)
                results[artist_id] = FollowerResult.error(artist_id, str(outcome))
            else:
                raise outcome
        return results

    async def close(self) -> None:
        await self._client.aclose()

    async def _fetch_token(self) -> tuple[str, float]:
        try:
            resp = await self._client.post(
                self._config.token_url,
                data={"grant_type": "client_credentials"},
                auth=(self._config.client_id, self._config.client_secret.get_secret_value()),
            )
        except httpx.HTTPError as exc:
            raise SpotifyAuthError(f"Spotify authentication failed: {exc}") from exc
        if resp.is_error:
            raise SpotifyAuthError(
                f"Spotify authentication failed: {resp.reason_phrase}", resp.status_code
            )
        payload = resp.json()
        return payload["access_token"], float(payload.get("expires_in", 3600))


def _spotify_error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return f"Spotify API: {error['message']}"
    return f"Failed to fetch artist details from Spotify: {resp.reason_phrase}"
