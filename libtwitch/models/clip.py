from __future__ import annotations

from datetime import datetime

from pydantic import Field

from libtwitch.models.base import KrakenModel, id_field


class ClipUser(KrakenModel):
    """Broadcaster or curator of a clip."""

    id: int | None = id_field()
    name: str | None = None
    display_name: str | None = None
    channel_url: str | None = None
    logo: str | None = None


class ClipVod(KrakenModel):
    id: int | None = id_field()
    url: str | None = None
    offset: int | None = None
    preview_image_url: str | None = None


class Clip(KrakenModel):
    slug: str
    tracking_id: str | None = None
    url: str | None = None
    embed_url: str | None = None
    embed_html: str | None = None
    broadcaster: ClipUser | None = None
    curator: ClipUser | None = None
    vod: ClipVod | None = None
    broadcast_id: int | None = None
    game: str | None = None
    language: str | None = None
    title: str | None = None
    views: int | None = None
    duration: float | None = None
    created_at: datetime | None = None
    thumbnails: dict[str, str] = Field(default_factory=dict)


class TopClips(KrakenModel):
    clips: list[Clip] = Field(default_factory=list)
    cursor: str | None = Field(default=None, alias="_cursor")
