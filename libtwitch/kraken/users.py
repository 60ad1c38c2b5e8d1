"""Kraken /users endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from libtwitch.models import User, UserFollow, UserFollows, Users


if TYPE_CHECKING:
    from libtwitch.core import TwitchClient


async def get_current(client: TwitchClient) -> User:
    """Get the user the OAuth token belongs to. Requires the user_read scope."""
    return await client.get("/user", model=User, authenticated=True)


async def get_by_id(client: TwitchClient, user_id: int | str) -> User:
    return await client.get(f"/users/{user_id}", model=User)


async def get_by_login(client: TwitchClient, *logins: str) -> list[User]:
    """Translate login names into user records. Unknown logins are left out."""
    if not logins:
        return []
    users = await client.get("/users", {"login": logins}, model=Users)
    return users.users


async def get_follows(
    client: TwitchClient,
    user_id: int | str,
    *,
    limit: int | None = None,
    offset: int | None = None,
    direction: Literal["asc", "desc"] | None = None,
    sortby: Literal["created_at", "last_broadcast", "login"] | None = None,
) -> UserFollows:
    params = {"limit": limit, "offset": offset, "direction": direction, "sortby": sortby}
    return await client.get(f"/users/{user_id}/follows/channels", params, model=UserFollows)


async def follow_channel(
    client: TwitchClient,
    user_id: int | str,
    channel_id: int | str,
    *,
    notifications: bool = False,
) -> UserFollow:
    """Follow a channel. Requires the user_follows_edit scope."""
    return await client.put(
        f"/users/{user_id}/follows/channels/{channel_id}",
        params={"notifications": notifications},
        model=UserFollow,
    )


async def unfollow_channel(
    client: TwitchClient, user_id: int | str, channel_id: int | str
) -> None:
    """Unfollow a channel. Requires the user_follows_edit scope."""
    await client.delete(f"/users/{user_id}/follows/channels/{channel_id}")
