"""Tests for Spotify artist lookups and the token cache."""

from __future__ import annotations

import asyncio
import base64
from collections.abc import Callable

import httpx
import pytest

from soundtrace.errors import SpotifyAuthError, SpotifyError
from soundtrace.models.enums import FollowerStatus
from soundtrace.providers.spotify import SpotifyClient, SpotifyConfig, TokenCache

Handler = Callable[[httpx.Request], httpx.Response]

_ARTIST = {
    "id": "artist-1",
    "name": "Producer",
    "followers": {"href": None, "total": 12345},
    "popularity": 61,
    "genres": ["trap", "drill"],
}


class _FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class _SpotifyBackend:
    """Routes token and artist requests, counting token fetches."""

    def __init__(self, artists: dict[str, httpx.Response] | None = None) -> None:
        self.token_requests: list[httpx.Request] = []
        self.artist_requests: list[httpx.Request] = []
        self.artists = artists or {}
        self.token_response = httpx.Response(
            200, json={"access_token": "tok-1", "token_type": "Bearer", "expires_in": 3600}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "accounts.spotify.com":
            self.token_requests.append(request)
            return self.token_response
        self.artist_requests.append(request)
        artist_id = request.url.path.rsplit("/", 1)[-1]
        return self.artists.get(artist_id, httpx.Response(200, json={**_ARTIST, "id": artist_id}))


def _client(handler: Handler, cache: TokenCache | None = None) -> SpotifyClient:
    client = SpotifyClient(SpotifyConfig(client_id="cid", client_secret="csecret"), cache)
    client._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return client


class TestTokenCache:
    async def test_fetches_once_while_valid(self):
        clock = _FakeClock()
        cache = TokenCache(expiry_buffer=300, clock=clock)
        calls = 0

        async def fetch() -> tuple[str, float]:
            nonlocal calls
            calls += 1
            return f"tok-{calls}", 3600

        assert await cache.get(fetch) == "tok-1"
        clock.now += 3299
        assert await cache.get(fetch) == "tok-1"
        assert calls == 1

    async def test_refreshes_after_buffered_expiry(self):
        clock = _FakeClock()
        cache = TokenCache(expiry_buffer=300, clock=clock)
        tokens = iter(["a", "b"])

        async def fetch() -> tuple[str, float]:
            return next(tokens), 3600

        assert await cache.get(fetch) == "a"
        clock.now += 3300
        assert not cache.valid
        assert await cache.get(fetch) == "b"

    async def test_concurrent_callers_share_one_fetch(self):
        cache = TokenCache()
        calls = 0

        async def fetch() -> tuple[str, float]:
            nonlocal calls
            calls += 1
            await asyncio.sleep(0)
            return "shared", 3600

        tokens = await asyncio.gather(*(cache.get(fetch) for _ in range(5)))
        assert tokens == ["shared"] * 5
        assert calls == 1

    async def test_invalidate(self):
        cache = TokenCache()

        async def fetch() -> tuple[str, float]:
            return "t", 3600

        await cache.get(fetch)
        assert cache.valid
        cache.invalidate()
        assert not cache.valid

    async def test_fetch_error_leaves_cache_empty(self):
        cache = TokenCache()

        async def fetch() -> tuple[str, float]:
            raise SpotifyAuthError("Spotify authentication failed")

        with pytest.raises(SpotifyAuthError):
            await cache.get(fetch)
        assert not cache.valid


class TestGetArtistDetails:
    async def test_success(self):
        backend = _SpotifyBackend()
        details = await _client(backend).get_artist_details("artist-1")

        assert details.artist_id == "artist-1"
        assert details.followers == 12345
        assert details.popularity == 61
        assert details.genres == ["trap", "drill"]

        token_req = backend.token_requests[0]
        expected = base64.b64encode(b"cid:csecret").decode()
        assert token_req.headers["authorization"] == f"Basic {expected}"
        assert token_req.content == b"grant_type=client_credentials"
        assert backend.artist_requests[0].headers["authorization"] == "Bearer tok-1"
        assert backend.artist_requests[0].url.path == "/v1/artists/artist-1"

    async def test_token_is_reused(self):
        backend = _SpotifyBackend()
        client = _client(backend)
        await client.get_artist_details("a")
        await client.get_artist_details("b")
        assert len(backend.token_requests) == 1
        assert len(backend.artist_requests) == 2

    async def test_empty_id(self):
        with pytest.raises(ValueError, match="artist ID"):
            await _client(_SpotifyBackend()).get_artist_details("")

    async def test_not_found(self):
        backend = _SpotifyBackend({"missing": httpx.Response(404, json={})})
        with pytest.raises(SpotifyError, match="Artist with ID 'missing' not found on Spotify.") as exc_info:
            await _client(backend).get_artist_details("missing")
        assert exc_info.value.status_code == 404

    async def test_spotify_error_message(self):
        backend = _SpotifyBackend(
            {"x": httpx.Response(429, json={"error": {"status": 429, "message": "API rate limit exceeded"}})}
        )
        with pytest.raises(SpotifyError, match="Spotify API: API rate limit exceeded"):
            await _client(backend).get_artist_details("x")

    async def test_unauthorized_invalidates_token(self):
        backend = _SpotifyBackend({"x": httpx.Response(401, json={"error": {"message": "expired"}})})
        cache = TokenCache()
        with pytest.raises(SpotifyError):
            await _client(backend, cache).get_artist_details("x")
        assert not cache.valid

    async def test_token_failure(self):
        backend = _SpotifyBackend()
        backend.token_response = httpx.Response(400, json={"error": "invalid_client"})
        with pytest.raises(SpotifyAuthError, match="Spotify authentication failed"):
            await _client(backend).get_artist_details("artist-1")
        assert backend.artist_requests == []


class TestFollowerResults:
    async def test_mixed_outcomes(self):
        backend = _SpotifyBackend({"gone": httpx.Response(404, json={})})
        results = await _client(backend).get_follower_results(["a1", "gone", "a1", ""])

        assert set(results) == {"a1", "gone"}
        assert results["a1"].status == FollowerStatus.SUCCESS
        assert results["a1"].followers == 12345
        assert results["gone"].status == FollowerStatus.ERROR
        assert "not found" in results["gone"].reason
        assert len(backend.artist_requests) == 2
