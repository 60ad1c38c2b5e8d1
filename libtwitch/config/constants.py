"""Core constants and type definitions for the Kraken client."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from yarl import URL

from libtwitch.version import __version__


# Type aliases
JsonType = dict[str, Any]

# Kraken endpoints
KRAKEN_URL = URL("https://api.twitch.tv/kraken")
AUTHORIZE_URL = KRAKEN_URL / "oauth2" / "authorize"

# Kraken picks the API version from the Accept header, not from the URL
KRAKEN_ACCEPT = "application/vnd.twitchtv.v5+json"
USER_AGENT = f"libtwitch/{__version__}"

# Header names
CLIENT_ID_HEADER = "Client-ID"
AUTHORIZATION_HEADER = "Authorization"
ACCEPT_HEADER = "Accept"

# Timeouts
REQUEST_TIMEOUT = timedelta(seconds=30)
CONNECT_TIMEOUT = timedelta(seconds=10)

# Environment variables read by Credentials.from_env
ENV_CLIENT_ID = "TWITCH_CLIENT_ID"
ENV_OAUTH_TOKEN = "TWITCH_OAUTH_TOKEN"

# Maximum number of body characters included in log messages
LOG_BODY_LIMIT = 500
