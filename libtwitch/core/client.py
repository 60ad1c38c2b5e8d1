from __future__ import annotations

import json
import logging
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, overload

from pydantic import TypeAdapter, ValidationError
from yarl import URL

from libtwitch.api import HTTPClient
from libtwitch.config import (
    ACCEPT_HEADER,
    AUTHORIZATION_HEADER,
    CLIENT_ID_HEADER,
    CONNECT_TIMEOUT,
    KRAKEN_ACCEPT,
    KRAKEN_URL,
    LOG_BODY_LIMIT,
    REQUEST_TIMEOUT,
    Credentials,
)
from libtwitch.exceptions import (
    DecodeError,
    EmptyResponseError,
    StatusError,
    TokenRequired,
)
from libtwitch.utils import normalize_params


if TYPE_CHECKING:
    from collections import abc

    from libtwitch.config import JsonType


logger = logging.getLogger("libtwitch")

_T = TypeVar("_T")


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def _truncate(body: str) -> str:
    if len(body) > LOG_BODY_LIMIT:
        return f"{body[:LOG_BODY_LIMIT]}..."
    return body


def _decode_text(raw_body: bytes, encoding: str, errors: str = "strict") -> str:
    try:
        return raw_body.decode(encoding, errors)
    except LookupError:
        # unknown charset announced by the server
        return raw_body.decode("utf-8", errors)


class TwitchClient:
    """
    Gateway for all HTTP interaction with the Twitch Kraken API.

    Every request carries the Client-ID and the v5 Accept header,
    plus an OAuth Authorization header once a token is set.
    Endpoint wrappers in `libtwitch.kraken` only supply a path and a model.

    Usage:
        async with TwitchClient("<client id>") as client:
            user = await client.get("/users/44322889", model=User)
    """

    def __init__(
        self,
        client_id: str,
        *,
        oauth_token: str | None = None,
        base_url: URL | str = KRAKEN_URL,
        timeout: timedelta = REQUEST_TIMEOUT,
        connect_timeout: timedelta = CONNECT_TIMEOUT,
    ):
        # credentials are swapped as a whole, never mutated in place
        self._credentials: Credentials = Credentials(client_id, oauth_token or None)
        self._base_url: URL = URL(base_url)
        self._http_client = HTTPClient(timeout=timeout, connect_timeout=connect_timeout)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._credentials!r}, base_url={self._base_url})"

    @classmethod
    def from_credentials(cls, credentials: Credentials, **kwargs: Any) -> TwitchClient:
        return cls(credentials.client_id, oauth_token=credentials.token, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> TwitchClient:
        """Create a client from the TWITCH_CLIENT_ID and TWITCH_OAUTH_TOKEN variables."""
        return cls.from_credentials(Credentials.from_env(), **kwargs)

    @classmethod
    def from_file(cls, path: Path | str, **kwargs: Any) -> TwitchClient:
        """Create a client from a JSON credentials file."""
        return cls.from_credentials(Credentials.from_file(path), **kwargs)

    async def __aenter__(self) -> TwitchClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def client_id(self) -> str:
        return self._credentials.client_id

    @property
    def oauth_token(self) -> str | None:
        return self._credentials.token

    @property
    def base_url(self) -> URL:
        return self._base_url

    def set_oauth_token(self, token: str | None) -> None:
        """
        Replace the OAuth token used for subsequent requests.

        Passing None or an empty string removes the token.
        """
        self._credentials = self._credentials.with_token(token)
        logger.debug("OAuth token " + ("set" if token else "cleared"))

    async def close(self) -> None:
        await self._http_client.close()

    def _headers(self, credentials: Credentials) -> dict[str, str]:
        headers = {
            ACCEPT_HEADER: KRAKEN_ACCEPT,
            CLIENT_ID_HEADER: credentials.client_id,
        }
        if credentials.has_token:
            headers[AUTHORIZATION_HEADER] = f"OAuth {credentials.token}"
        return headers

    def _url(self, path: str) -> URL:
        path = path.strip("/")
        if not path:
            return self._base_url
        return self._base_url / path

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: abc.Mapping[str, Any] | None = None,
        data: Any = None,
        model: Any = None,
        authenticated: bool = False,
    ) -> Any:
        """
        Issue a request against the API and decode its JSON body.

        Parameters
        ----------
        method : str
            HTTP method (GET, POST, PUT, DELETE)
        path : str
            Endpoint path, relative to the Kraken base URL
        params : Mapping[str, Any] | None, optional
            Query parameters, see `normalize_params`
        data : Any, optional
            JSON-serializable request body
        model : Any, optional
            Type to validate the decoded body into. The raw JSON is returned if omitted.
        authenticated : bool
            Whether the endpoint is scoped to a user and needs an OAuth token

        Returns
        -------
        Any
            An instance of ``model``, the decoded JSON, or None for empty bodies
            when no model was requested

        Raises
        ------
        TokenRequired
            If ``authenticated`` is set, but no OAuth token is available
        TransportError
            If the request couldn't be completed
        StatusError
            If the response status is outside of the 2xx range
        DecodeError
            If the body isn't JSON or doesn't match ``model``
        """
        # take a single snapshot, so the token can't change mid-request
        credentials = self._credentials
        if authenticated and not credentials.has_token:
            raise TokenRequired(path)

        url = self._url(path)
        kwargs: JsonType = {"headers": self._headers(credentials)}
        if params:
            kwargs["params"] = normalize_params(params)
        if data is not None:
            kwargs["json"] = data

        async with self._http_client.request(method, url, **kwargs) as response:
            status = response.status
            raw_body = await response.read()
            encoding = response.get_encoding()

        if not 200 <= status < 300:
            raise self._status_error(status, _decode_text(raw_body, encoding, errors="replace"))
        try:
            body = _decode_text(raw_body, encoding)
        except UnicodeDecodeError as exc:
            text = _decode_text(raw_body, encoding, errors="replace")
            logger.error(f"Response is not valid {encoding}: {_truncate(text)}")
            raise DecodeError(f"Response is not valid {encoding}", text) from exc
        return self._decode(body, model)

    @staticmethod
    def _status_error(status: int, body: str) -> StatusError:
        error: str | None = None
        message: str | None = None
        try:
            error_json = json.loads(body)
        except ValueError:
            error_json = None
        if isinstance(error_json, dict):
            if isinstance(error_json.get("error"), str):
                error = error_json["error"]
            if isinstance(error_json.get("message"), str):
                message = error_json["message"]
        logger.debug(f"Status error {status}: {_truncate(body)}")
        return StatusError(status, body, error=error, message=message)

    @staticmethod
    def _decode(body: str, model: Any) -> Any:
        if not body.strip():
            if model is None:
                return None
            raise EmptyResponseError()
        try:
            response_json = json.loads(body)
        except ValueError as exc:
            logger.error(f"Response is not valid JSON: {_truncate(body)}")
            raise DecodeError("Response is not valid JSON", body) from exc
        if model is None:
            return response_json
        try:
            return _adapter(model).validate_python(response_json)
        except ValidationError as exc:
            logger.error(f"Response doesn't match {model}: {_truncate(body)}")
            raise DecodeError(f"Response doesn't match {model}: {exc}", body) from exc

    @overload
    async def get(
        self,
        path: str,
        params: abc.Mapping[str, Any] | None = ...,
        *,
        model: type[_T],
        authenticated: bool = ...,
    ) -> _T:
        ...

    @overload
    async def get(
        self,
        path: str,
        params: abc.Mapping[str, Any] | None = ...,
        *,
        model: None = ...,
        authenticated: bool = ...,
    ) -> Any:
        ...

    async def get(
        self,
        path: str,
        params: abc.Mapping[str, Any] | None = None,
        *,
        model: Any = None,
        authenticated: bool = False,
    ) -> Any:
        return await self.request(
            "GET", path, params=params, model=model, authenticated=authenticated
        )

    async def post(
        self,
        path: str,
        data: Any = None,
        *,
        params: abc.Mapping[str, Any] | None = None,
        model: Any = None,
        authenticated: bool = True,
    ) -> Any:
        return await self.request(
            "POST", path, params=params, data=data, model=model, authenticated=authenticated
        )

    async def put(
        self,
        path: str,
        data: Any = None,
        *,
        params: abc.Mapping[str, Any] | None = None,
        model: Any = None,
        authenticated: bool = True,
    ) -> Any:
        return await self.request(
            "PUT", path, params=params, data=data, model=model, authenticated=authenticated
        )

    async def delete(
        self,
        path: str,
        *,
        params: abc.Mapping[str, Any] | None = None,
        model: Any = None,
        authenticated: bool = True,
    ) -> Any:
        return await self.request(
            "DELETE", path, params=params, model=model, authenticated=authenticated
        )
