"""Client credentials: the client ID and an optional OAuth token."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from libtwitch.config.constants import ENV_CLIENT_ID, ENV_OAUTH_TOKEN
from libtwitch.exceptions import CredentialsError
from libtwitch.utils import json_load, json_save


logger = logging.getLogger("libtwitch")


@dataclass(frozen=True)
class Credentials:
    """
    Immutable pair of client ID and OAuth token.

    Replacing the token produces a new instance, so a reader holding a reference
    always sees a consistent pair.
    """

    client_id: str
    token: str | None = None

    def __repr__(self) -> str:
        # never leak the token into logs
        token = "<set>" if self.token else None
        return f"Credentials(client_id={self.client_id!r}, token={token})"

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    def with_token(self, token: str | None) -> Credentials:
        return replace(self, token=token or None)

    @classmethod
    def from_env(cls) -> Credentials:
        """
        Read credentials from the TWITCH_CLIENT_ID and TWITCH_OAUTH_TOKEN variables.

        Raises
        ------
        CredentialsError
            If TWITCH_CLIENT_ID is not set
        """
        client_id = os.environ.get(ENV_CLIENT_ID)
        if client_id is None:
            raise CredentialsError(f"{ENV_CLIENT_ID} is not set")
        return cls(client_id, os.environ.get(ENV_OAUTH_TOKEN) or None)

    @classmethod
    def from_file(cls, path: Path | str) -> Credentials:
        """
        Load credentials from a JSON file with "client_id" and "token" keys.

        Raises
        ------
        CredentialsError
            If the file is missing, malformed or lacks a client ID
        """
        path = Path(path)
        if not path.exists():
            raise CredentialsError(f"Credentials file not found: {path}")
        try:
            data = json_load(path, {"client_id": None, "token": None})
        except (OSError, ValueError) as exc:
            raise CredentialsError(f"Unable to read credentials from {path}") from exc
        client_id = data.get("client_id")
        if not isinstance(client_id, str) or not client_id:
            raise CredentialsError(f"{path} doesn't contain a client_id")
        token = data.get("token")
        if token is not None and not isinstance(token, str):
            raise CredentialsError(f"{path} contains an invalid token")
        logger.debug(f"Loaded credentials from {path}")
        return cls(client_id, token or None)

    def save(self, path: Path | str) -> None:
        """Write the credentials to a JSON file readable by `from_file`."""
        json_save(Path(path), {"client_id": self.client_id, "token": self.token}, sort=True)
