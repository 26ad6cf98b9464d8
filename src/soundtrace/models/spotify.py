"""Spotify artist models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from soundtrace.models.enums import FollowerStatus


class ArtistDetails(BaseModel):
    """Follower count, popularity and genres of a Spotify artist."""

    artist_id: str
    name: str | None = None
    followers: int | None = None
    popularity: int | None = Field(default=None, ge=0, le=100)
    genres: list[str] = Field(default_factory=list)


class FollowerResult(BaseModel):
    """State of a follower lookup for one artist, as shown on leaderboards."""

    artist_id: str
    status: FollowerStatus
    followers: int | None = None
    popularity: int | None = None
    genres: list[str] | None = None
    reason: str | None = None

    @classmethod
    def from_details(cls, details: ArtistDetails) -> FollowerResult:
        return cls(
            artist_id=details.artist_id,
            status=FollowerStatus.SUCCESS,
            followers=details.followers,
            popularity=details.popularity,
            genres=list(details.genres),
        )

    @classmethod
    def error(cls, artist_id: str, reason: str) -> FollowerResult:
        return cls(artist_id=artist_id, status=FollowerStatus.ERROR, reason=reason)
