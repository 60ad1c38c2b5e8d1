"""
Endpoint wrappers for the Kraken API.

Each module covers one resource family and defers to `TwitchClient` for
headers, authentication and decoding:
    from libtwitch.kraken import users
    user = await users.get_by_id(client, 44322889)
"""

from __future__ import annotations

from libtwitch.kraken import channels, clips, games, streams, users


__all__ = [
    "channels",
    "clips",
    "games",
    "streams",
    "users",
]
