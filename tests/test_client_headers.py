import asyncio
import unittest

import kraken_server

from libtwitch.config import KRAKEN_ACCEPT, USER_AGENT


class TestClientHeaders(kraken_server.KrakenTestCase):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.kraken.respond("GET", "/users/44322889", {"_id": "44322889", "name": "dallas"})
        self.kraken.respond("GET", "/games/top", {"_total": 0, "top": []})

    async def test_client_id_sent_verbatim(self):
        await self.client.get("/users/44322889")
        await self.client.get("/games/top")
        self.assertEqual(len(self.kraken.requests), 2)
        for request in self.kraken.requests:
            self.assertEqual(request.headers["Client-ID"], self.client_id)

    async def test_accept_and_user_agent(self):
        await self.client.get("/users/44322889")
        headers = self.kraken.last_request.headers
        self.assertEqual(headers["Accept"], KRAKEN_ACCEPT)
        self.assertEqual(headers["User-Agent"], USER_AGENT)

    async def test_no_authorization_without_token(self):
        await self.client.get("/users/44322889")
        self.assertNotIn("Authorization", self.kraken.last_request.headers)

    async def test_authorization_follows_token(self):
        self.client.set_oauth_token("cfabdegwdoklmawdzdo98xt2fo512y")
        await self.client.get("/users/44322889")
        await self.client.get("/games/top")
        for request in self.kraken.requests:
            self.assertEqual(
                request.headers["Authorization"], "OAuth cfabdegwdoklmawdzdo98xt2fo512y"
            )

        self.client.set_oauth_token("replacement")
        await self.client.get("/games/top")
        self.assertEqual(self.kraken.last_request.headers["Authorization"], "OAuth replacement")

        self.client.set_oauth_token(None)
        await self.client.get("/games/top")
        self.assertNotIn("Authorization", self.kraken.last_request.headers)

    async def test_token_from_constructor(self):
        from libtwitch import TwitchClient

        async with TwitchClient(
            "abc", oauth_token="token", base_url=self.kraken.base_url
        ) as client:
            await client.get("/games/top")
        headers = self.kraken.last_request.headers
        self.assertEqual(headers["Client-ID"], "abc")
        self.assertEqual(headers["Authorization"], "OAuth token")

    async def test_set_token_keeps_client_id(self):
        credentials = self.client.credentials
        self.client.set_oauth_token("token")
        self.assertEqual(self.client.client_id, self.client_id)
        self.assertEqual(self.client.oauth_token, "token")
        # the previous snapshot is left untouched
        self.assertIsNone(credentials.token)

    async def test_query_params_normalized(self):
        await self.client.get(
            "/games/top",
            {"limit": 10, "offset": None, "trending": True, "login": ["a", "b"]},
        )
        query = self.kraken.last_request.query
        self.assertEqual(query["limit"], "10")
        self.assertEqual(query["trending"], "true")
        self.assertEqual(query["login"], "a,b")
        self.assertNotIn("offset", query)

    async def test_json_body_sent(self):
        self.client.set_oauth_token("token")
        self.kraken.respond("POST", "/feed/1/posts", {"post": {}})
        await self.client.post("/feed/1/posts", {"content": "hello"})
        request = self.kraken.last_request
        self.assertEqual(request.method, "POST")
        self.assertEqual(request.json(), {"content": "hello"})
        self.assertEqual(request.headers["Content-Type"], "application/json")


    async def test_token_swap_during_concurrent_requests(self):
        self.kraken.respond("GET", "/games/top", {"_total": 0, "top": []}, delay=0.2)
        self.client.set_oauth_token("old")
        in_flight = asyncio.gather(*(self.client.get("/games/top") for _ in range(5)))

        async def all_sent():
            while len(self.kraken.requests) < 5:
                await asyncio.sleep(0.01)

        await asyncio.wait_for(all_sent(), timeout=5)
        self.client.set_oauth_token("new")
        await asyncio.gather(*(self.client.get("/users/44322889") for _ in range(3)))
        await in_flight

        self.assertEqual(len(self.kraken.requests), 8)
        for request in self.kraken.requests:
            self.assertEqual(request.headers["Client-ID"], self.client_id)
            self.assertIn(
                request.headers.getall("Authorization"), (["OAuth old"], ["OAuth new"])
            )
        before, after = self.kraken.requests[:5], self.kraken.requests[5:]
        self.assertTrue(all(r.path == "/games/top" for r in before))
        self.assertEqual(
            [r.headers["Authorization"] for r in before], ["OAuth old"] * 5
        )
        self.assertEqual(
            [r.headers["Authorization"] for r in after], ["OAuth new"] * 3
        )


if __name__ == "__main__":
    unittest.main()
