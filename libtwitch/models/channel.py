from __future__ import annotations

from datetime import datetime

from libtwitch.models.base import KrakenModel, id_field


class Channel(KrakenModel):
    """
    A Twitch channel.

    ``email`` and ``stream_key`` are only returned by the authenticated
    /channel endpoint.
    """

    id: int | None = id_field()
    name: str | None = None
    display_name: str | None = None
    status: str | None = None
    game: str | None = None
    broadcaster_language: str | None = None
    language: str | None = None
    broadcaster_type: str | None = None
    mature: bool | None = None
    partner: bool | None = None
    logo: str | None = None
    video_banner: str | None = None
    profile_banner: str | None = None
    url: str | None = None
    followers: int | None = None
    views: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    email: str | None = None
    stream_key: str | None = None

    def __str__(self) -> str:
        return self.display_name or self.name or str(self.id)
