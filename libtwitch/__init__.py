"""
libtwitch - asyncio client for the Twitch Kraken (v5) API.

    from libtwitch import TwitchClient
    from libtwitch.kraken import games

    async with TwitchClient.from_env() as client:
        for entry in await games.get_top(client, limit=20):
            print(f"{entry.game.name}: {entry.viewers}")
"""

from __future__ import annotations

from libtwitch.config import Credentials
from libtwitch.core import TwitchClient
from libtwitch.exceptions import (
    CredentialsError,
    DecodeError,
    EmptyResponseError,
    RequestError,
    StatusError,
    TokenRequired,
    TransportError,
    TwitchException,
)
from libtwitch.version import __version__


__all__ = [
    "__version__",
    "TwitchClient",
    "Credentials",
    "TwitchException",
    "CredentialsError",
    "TokenRequired",
    "RequestError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "EmptyResponseError",
]
