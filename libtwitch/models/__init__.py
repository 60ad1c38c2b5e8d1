"""Typed response models for Kraken resources."""

from libtwitch.models.base import KrakenModel
from libtwitch.models.channel import Channel
from libtwitch.models.clip import Clip, ClipUser, ClipVod, TopClips
from libtwitch.models.game import Game, TopGame, TopGames
from libtwitch.models.stream import (
    FeaturedStream,
    FeaturedStreams,
    Stream,
    StreamEnvelope,
    Streams,
    StreamSummary,
)
from libtwitch.models.user import (
    ChannelFollow,
    ChannelFollowers,
    User,
    UserFollow,
    UserFollows,
    Users,
)


__all__ = [
    "KrakenModel",
    "User",
    "Users",
    "UserFollow",
    "UserFollows",
    "ChannelFollow",
    "ChannelFollowers",
    "Channel",
    "Stream",
    "StreamEnvelope",
    "Streams",
    "FeaturedStream",
    "FeaturedStreams",
    "StreamSummary",
    "Game",
    "TopGame",
    "TopGames",
    "Clip",
    "ClipUser",
    "ClipVod",
    "TopClips",
]
