"""Kraken /channels endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from libtwitch.models import Channel, ChannelFollowers


if TYPE_CHECKING:
    from libtwitch.config import JsonType
    from libtwitch.core import TwitchClient


async def get_current(client: TwitchClient) -> Channel:
    """Get the channel of the authenticated user, including its stream key."""
    return await client.get("/channel", model=Channel, authenticated=True)


async def get_by_id(client: TwitchClient, channel_id: int | str) -> Channel:
    return await client.get(f"/channels/{channel_id}", model=Channel)


async def update(
    client: TwitchClient,
    channel_id: int | str,
    *,
    status: str | None = None,
    game: str | None = None,
    delay: int | None = None,
    channel_feed_enabled: bool | None = None,
) -> Channel:
    """
    Update the title, game, delay or feed setting of a channel.

    Only the given fields are sent. Requires the channel_editor scope.
    """
    changes: JsonType = {
        key: value
        for key, value in (
            ("status", status),
            ("game", game),
            ("delay", delay),
            ("channel_feed_enabled", channel_feed_enabled),
        )
        if value is not None
    }
    if not changes:
        raise ValueError("No channel fields to update")
    return await client.put(f"/channels/{channel_id}", {"channel": changes}, model=Channel)


async def get_followers(
    client: TwitchClient,
    channel_id: int | str,
    *,
    limit: int | None = None,
    offset: int | None = None,
    cursor: str | None = None,
    direction: Literal["asc", "desc"] | None = None,
) -> ChannelFollowers:
    params = {"limit": limit, "offset": offset, "cursor": cursor, "direction": direction}
    return await client.get(f"/channels/{channel_id}/follows", params, model=ChannelFollowers)
