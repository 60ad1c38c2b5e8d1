"""Local stand-in for the Kraken API, served by aiohttp's test server."""

from __future__ import annotations

import asyncio
import json
import unittest
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from aiohttp import web
from aiohttp.test_utils import TestServer

from libtwitch import TwitchClient


_MISSING = object()


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: Mapping[str, str]
    query: Mapping[str, str]
    body: str

    def json(self) -> Any:
        return json.loads(self.body)


@dataclass
class CannedResponse:
    status: int
    body: str | bytes
    delay: float


class FakeKraken:
    """
    Records every request under /kraken and replies with canned responses.

    Unregistered paths get a Kraken style 404 error document.
    """

    def __init__(self):
        self.requests: list[RecordedRequest] = []
        self._responses: dict[tuple[str, str], CannedResponse] = {}
        app = web.Application()
        app.router.add_route("*", "/kraken/{tail:.*}", self._handle)
        app.router.add_route("*", "/kraken", self._handle)
        self.server = TestServer(app)

    @property
    def base_url(self):
        return self.server.make_url("/kraken")

    async def start(self) -> None:
        await self.server.start_server()

    async def close(self) -> None:
        await self.server.close()

    def respond(
        self,
        method: str,
        path: str,
        json_body: Any = _MISSING,
        *,
        body: str | bytes = "",
        status: int = 200,
        delay: float = 0,
    ) -> None:
        if json_body is not _MISSING:
            body = json.dumps(json_body)
        self._responses[(method.upper(), path)] = CannedResponse(status, body, delay)

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    async def _handle(self, request: web.Request) -> web.Response:
        path = request.path[len("/kraken"):] or "/"
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                headers=request.headers,
                query=request.query,
                body=await request.text(),
            )
        )
        canned = self._responses.get((request.method, path))
        if canned is None:
            canned = CannedResponse(
                404,
                json.dumps({"error": "Not Found", "status": 404, "message": "no route"}),
                0,
            )
        if canned.delay:
            await asyncio.sleep(canned.delay)
        if not canned.body:
            return web.Response(status=canned.status)
        if isinstance(canned.body, bytes):
            return web.Response(
                status=canned.status, body=canned.body, content_type="application/json"
            )
        return web.Response(
            status=canned.status, text=canned.body, content_type="application/json"
        )


class KrakenTestCase(unittest.IsolatedAsyncioTestCase):
    """Starts a FakeKraken server and a client pointed at it for every test."""

    client_id = "uo6dggojyb8d6soh92zknwmi5ej1q2"

    async def asyncSetUp(self):
        self.kraken = FakeKraken()
        await self.kraken.start()
        self.client = TwitchClient(self.client_id, base_url=self.kraken.base_url)

    async def asyncTearDown(self):
        await self.client.close()
        await self.kraken.close()
