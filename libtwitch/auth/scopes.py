"""OAuth scopes and authorize URLs for the Kraken API."""

from __future__ import annotations

from collections import abc
from enum import Enum
from typing import TYPE_CHECKING, Literal

from yarl import URL

from libtwitch.config import AUTHORIZE_URL


if TYPE_CHECKING:
    from libtwitch.core import TwitchClient


class Scope(str, Enum):
    """Kraken OAuth scopes."""

    CHANNEL_CHECK_SUBSCRIPTION = "channel_check_subscription"
    CHANNEL_COMMERCIAL = "channel_commercial"
    CHANNEL_EDITOR = "channel_editor"
    CHANNEL_FEED_EDIT = "channel_feed_edit"
    CHANNEL_FEED_READ = "channel_feed_read"
    CHANNEL_READ = "channel_read"
    CHANNEL_STREAM = "channel_stream"
    CHANNEL_SUBSCRIPTIONS = "channel_subscriptions"
    CHAT_LOGIN = "chat_login"
    USER_BLOCKS_EDIT = "user_blocks_edit"
    USER_BLOCKS_READ = "user_blocks_read"
    USER_FOLLOWS_EDIT = "user_follows_edit"
    USER_READ = "user_read"
    USER_SUBSCRIPTIONS = "user_subscriptions"
    VIEWING_ACTIVITY_READ = "viewing_activity_read"

    def __str__(self) -> str:
        return self.value


def format_scopes(scopes: abc.Iterable[Scope | str]) -> str:
    """Join scopes with spaces, which end up as '+' in the query string."""
    return " ".join(str(scope) for scope in scopes)


def _authorize_url(
    client: TwitchClient,
    response_type: Literal["code", "token"],
    redirect_url: URL | str,
    scopes: abc.Iterable[Scope | str],
    state: str,
) -> URL:
    return AUTHORIZE_URL.with_query(
        {
            "response_type": response_type,
            "client_id": client.client_id,
            "redirect_uri": str(redirect_url),
            "scope": format_scopes(scopes),
            "state": state,
        }
    )


def auth_code_flow(
    client: TwitchClient,
    redirect_url: URL | str,
    scopes: abc.Iterable[Scope | str],
    state: str,
) -> URL:
    """
    Build the authorize URL for the OAuth authorization code flow.

    After the user approves, Twitch redirects to ``redirect_url`` with a ``code``
    query parameter, which the application exchanges for a token server-side.
    """
    return _authorize_url(client, "code", redirect_url, scopes, state)


def imp_grant_flow(
    client: TwitchClient,
    redirect_url: URL | str,
    scopes: abc.Iterable[Scope | str],
    state: str,
) -> URL:
    """
    Build the authorize URL for the OAuth implicit grant flow.

    The access token is returned in the fragment of the redirect URL.
    """
    return _authorize_url(client, "token", redirect_url, scopes, state)
