from __future__ import annotations

from datetime import datetime

from pydantic import Field

from libtwitch.models.base import KrakenModel, id_field
from libtwitch.models.channel import Channel


class User(KrakenModel):
    """A Twitch user. Only the authenticated /user endpoint includes the e-mail fields."""

    id: int | None = id_field()
    name: str | None = None
    display_name: str | None = None
    type: str | None = None
    bio: str | None = None
    logo: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    email: str | None = None
    email_verified: bool | None = None
    partnered: bool | None = None
    twitter_connected: bool | None = None

    def __str__(self) -> str:
        return self.display_name or self.name or str(self.id)


class Users(KrakenModel):
    total: int = Field(default=0, alias="_total")
    users: list[User] = Field(default_factory=list)


class UserFollow(KrakenModel):
    """A channel followed by a user."""

    created_at: datetime | None = None
    notifications: bool = False
    channel: Channel


class UserFollows(KrakenModel):
    total: int = Field(default=0, alias="_total")
    follows: list[UserFollow] = Field(default_factory=list)


class ChannelFollow(KrakenModel):
    """A user following a channel."""

    created_at: datetime | None = None
    notifications: bool = False
    user: User


class ChannelFollowers(KrakenModel):
    total: int = Field(default=0, alias="_total")
    cursor: str | None = Field(default=None, alias="_cursor")
    follows: list[ChannelFollow] = Field(default_factory=list)
