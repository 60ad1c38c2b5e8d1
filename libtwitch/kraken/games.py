"""Kraken /games endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libtwitch.models import TopGames


if TYPE_CHECKING:
    from libtwitch.core import TwitchClient


async def get_top(
    client: TwitchClient, *, limit: int | None = None, offset: int | None = None
) -> TopGames:
    """Get the games with the most viewers right now."""
    return await client.get("/games/top", {"limit": limit, "offset": offset}, model=TopGames)
