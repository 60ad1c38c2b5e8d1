"""Kraken /streams endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from libtwitch.models import FeaturedStreams, Stream, StreamEnvelope, Streams, StreamSummary


if TYPE_CHECKING:
    from libtwitch.core import TwitchClient


StreamType = Literal["live", "playlist", "all"]


async def get_by_user(
    client: TwitchClient,
    channel_id: int | str,
    *,
    stream_type: StreamType | None = None,
) -> Stream | None:
    """Get the stream of a channel, or None if the channel is offline."""
    envelope = await client.get(
        f"/streams/{channel_id}", {"stream_type": stream_type}, model=StreamEnvelope
    )
    return envelope.stream


async def get_live(
    client: TwitchClient,
    *,
    channel: list[int | str] | None = None,
    game: str | None = None,
    language: str | None = None,
    stream_type: StreamType | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> Streams:
    params = {
        "channel": channel,
        "game": game,
        "language": language,
        "stream_type": stream_type,
        "limit": limit,
        "offset": offset,
    }
    return await client.get("/streams", params, model=Streams)


async def get_featured(
    client: TwitchClient, *, limit: int | None = None, offset: int | None = None
) -> FeaturedStreams:
    return await client.get(
        "/streams/featured", {"limit": limit, "offset": offset}, model=FeaturedStreams
    )


async def get_summary(client: TwitchClient, *, game: str | None = None) -> StreamSummary:
    return await client.get("/streams/summary", {"game": game}, model=StreamSummary)
