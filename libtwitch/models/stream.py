from __future__ import annotations

from datetime import datetime

from pydantic import Field

from libtwitch.models.base import KrakenModel, id_field
from libtwitch.models.channel import Channel


class Stream(KrakenModel):
    """A live stream, along with the channel broadcasting it."""

    id: int | None = id_field()
    game: str | None = None
    viewers: int | None = None
    video_height: int | None = None
    average_fps: float | None = None
    delay: int | None = None
    is_playlist: bool | None = None
    stream_type: str | None = None
    created_at: datetime | None = None
    preview: dict[str, str] = Field(default_factory=dict)
    channel: Channel | None = None


class StreamEnvelope(KrakenModel):
    # /streams/<channel ID> wraps the stream, and sends null while offline
    stream: Stream | None = None


class Streams(KrakenModel):
    total: int = Field(default=0, alias="_total")
    streams: list[Stream] = Field(default_factory=list)


class FeaturedStream(KrakenModel):
    title: str | None = None
    text: str | None = None
    image: str | None = None
    priority: int | None = None
    scheduled: bool | None = None
    sponsored: bool | None = None
    stream: Stream | None = None


class FeaturedStreams(KrakenModel):
    featured: list[FeaturedStream] = Field(default_factory=list)


class StreamSummary(KrakenModel):
    channels: int = 0
    viewers: int = 0
