"""Configuration package for libtwitch."""

from __future__ import annotations

from .constants import (
    ACCEPT_HEADER,
    AUTHORIZATION_HEADER,
    AUTHORIZE_URL,
    CLIENT_ID_HEADER,
    CONNECT_TIMEOUT,
    ENV_CLIENT_ID,
    ENV_OAUTH_TOKEN,
    KRAKEN_ACCEPT,
    KRAKEN_URL,
    LOG_BODY_LIMIT,
    REQUEST_TIMEOUT,
    USER_AGENT,
    JsonType,
)
from .credentials import Credentials


__all__ = [
    # constants.py
    "JsonType",
    "KRAKEN_URL",
    "AUTHORIZE_URL",
    "KRAKEN_ACCEPT",
    "USER_AGENT",
    "CLIENT_ID_HEADER",
    "AUTHORIZATION_HEADER",
    "ACCEPT_HEADER",
    "REQUEST_TIMEOUT",
    "CONNECT_TIMEOUT",
    "ENV_CLIENT_ID",
    "ENV_OAUTH_TOKEN",
    "LOG_BODY_LIMIT",
    # credentials.py
    "Credentials",
]
