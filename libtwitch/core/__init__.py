"""Core Kraken client."""

from __future__ import annotations

from libtwitch.core.client import TwitchClient


__all__ = [
    "TwitchClient",
]
