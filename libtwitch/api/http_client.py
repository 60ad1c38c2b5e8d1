"""
HTTP client for Kraken API requests.

Handles HTTP session management, timeouts and transport error mapping.
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from collections import abc
from contextlib import asynccontextmanager
from datetime import timedelta

import aiohttp
import truststore
from yarl import URL

from libtwitch.config import CONNECT_TIMEOUT, REQUEST_TIMEOUT, USER_AGENT
from libtwitch.exceptions import TransportError


logger = logging.getLogger("libtwitch.http")


class HTTPClient:
    """
    Owns the aiohttp session used for talking to the API.

    This client provides:
    - Lazy session creation, so constructing a client performs no I/O
    - A conservative default timeout
    - TLS verification against the operating system's trust store
    - Mapping of connection problems onto TransportError

    Requests are never retried.
    """

    def __init__(
        self,
        *,
        timeout: timedelta = REQUEST_TIMEOUT,
        connect_timeout: timedelta = CONNECT_TIMEOUT,
    ):
        """
        Initialize the HTTP client.

        Parameters
        ----------
        timeout : timedelta
            Total time allowed for a single request, including reading the body
        connect_timeout : timedelta
            Time allowed for establishing the connection
        """
        self.timeout = timeout
        self.connect_timeout = min(connect_timeout, timeout)
        self._session: aiohttp.ClientSession | None = None
        self._closed: bool = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Get or create the HTTP session.

        Returns
        -------
        aiohttp.ClientSession
            The active HTTP session

        Raises
        ------
        RuntimeError
            If the client was closed
        """
        if self._closed:
            raise RuntimeError("Session is closed")
        if (session := self._session) is not None and not session.closed:
            return session

        timeout = aiohttp.ClientTimeout(
            sock_connect=self.connect_timeout.total_seconds(),
            total=self.timeout.total_seconds(),
        )
        ssl_context = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        connector = aiohttp.TCPConnector(limit=50, ssl=ssl_context)
        self._session = aiohttp.ClientSession(
            timeout=timeout,
            connector=connector,
            headers={"User-Agent": USER_AGENT},
        )
        return self._session

    @asynccontextmanager
    async def request(
        self, method: str, url: URL | str, **kwargs
    ) -> abc.AsyncIterator[aiohttp.ClientResponse]:
        """
        Make a single HTTP request.

        Parameters
        ----------
        method : str
            HTTP method (GET, POST, etc.)
        url : URL | str
            Request URL
        **kwargs
            Additional arguments passed to aiohttp.ClientSession.request

        Yields
        ------
        aiohttp.ClientResponse
            The HTTP response, with its body already read

        Raises
        ------
        TransportError
            If the connection fails or the request times out
        RuntimeError
            If the client was closed
        """
        session = await self.get_session()
        method = method.upper()
        logger.debug(f"Request: ({method=}, {url=})")

        response: aiohttp.ClientResponse | None = None
        try:
            try:
                response = await session.request(method, url, **kwargs)
                # Pre-read the response to avoid getting errors outside the context manager
                await response.read()
            except asyncio.TimeoutError as exc:
                raise TransportError(f"{method} {url} timed out") from exc
            except aiohttp.ClientError as exc:
                raise TransportError(f"{method} {url} failed: {exc}") from exc
            logger.debug(f"Response: {response.status}: {method} {url}")
            yield response
        finally:
            if response is not None:
                response.release()

    async def close(self) -> None:
        """
        Close the HTTP session.

        The client can't be used afterwards.
        """
        self._closed = True
        if self._session is not None:
            await self._session.close()
            self._session = None
