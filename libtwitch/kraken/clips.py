"""Kraken /clips endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from libtwitch.models import Clip, TopClips


if TYPE_CHECKING:
    from libtwitch.core import TwitchClient


Period = Literal["day", "week", "month", "all"]


async def get(client: TwitchClient, slug: str) -> Clip:
    return await client.get(f"/clips/{slug}", model=Clip)


async def get_top(
    client: TwitchClient,
    *,
    channel: list[str] | None = None,
    game: list[str] | None = None,
    language: list[str] | None = None,
    period: Period | None = None,
    trending: bool | None = None,
    limit: int | None = None,
    cursor: str | None = None,
) -> TopClips:
    """
    Get the most viewed clips, optionally narrowed to channels, games or languages.

    Pass the ``cursor`` of the previous page to fetch the next one.
    """
    params = {
        "channel": channel,
        "game": game,
        "language": language,
        "period": period,
        "trending": trending,
        "limit": limit,
        "cursor": cursor,
    }
    return await client.get("/clips/top", params, model=TopClips)


async def get_followed(
    client: TwitchClient,
    *,
    trending: bool | None = None,
    limit: int | None = None,
    cursor: str | None = None,
) -> TopClips:
    """Get clips from the games the authenticated user follows."""
    params = {"trending": trending, "limit": limit, "cursor": cursor}
    return await client.get("/clips/followed", params, model=TopClips, authenticated=True)
