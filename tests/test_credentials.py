import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from libtwitch import Credentials, CredentialsError, TwitchClient


class TestCredentials(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp_dir.name, "credentials.json")

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_from_env(self):
        env = {"TWITCH_CLIENT_ID": "client", "TWITCH_OAUTH_TOKEN": "token"}
        with patch.dict(os.environ, env, clear=True):
            credentials = Credentials.from_env()
        self.assertEqual(credentials, Credentials("client", "token"))

    def test_from_env_empty_token(self):
        with patch.dict(os.environ, {"TWITCH_CLIENT_ID": "client", "TWITCH_OAUTH_TOKEN": ""}, clear=True):
            credentials = Credentials.from_env()
        self.assertIsNone(credentials.token)
        self.assertFalse(credentials.has_token)

    def test_from_env_missing_client_id(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(CredentialsError):
                Credentials.from_env()

    def test_save_and_load(self):
        Credentials("client", "token").save(self.path)
        with open(self.path, encoding="utf8") as file:
            self.assertEqual(json.load(file), {"client_id": "client", "token": "token"})
        self.assertEqual(Credentials.from_file(self.path), Credentials("client", "token"))

    def test_load_without_token(self):
        self.path.write_text(json.dumps({"client_id": "client"}), encoding="utf8")
        self.assertEqual(Credentials.from_file(self.path), Credentials("client"))

    def test_load_errors(self):
        with self.assertRaises(CredentialsError):
            Credentials.from_file(self.path)
        self.path.write_text("{broken", encoding="utf8")
        with self.assertRaises(CredentialsError):
            Credentials.from_file(self.path)
        self.path.write_text(json.dumps(["client"]), encoding="utf8")
        with self.assertRaises(CredentialsError):
            Credentials.from_file(self.path)
        self.path.write_text(json.dumps({"token": "token"}), encoding="utf8")
        with self.assertRaises(CredentialsError):
            Credentials.from_file(self.path)
        self.path.write_text(json.dumps({"client_id": "client", "token": 5}), encoding="utf8")
        with self.assertRaises(CredentialsError):
            Credentials.from_file(self.path)

    def test_with_token(self):
        credentials = Credentials("client")
        updated = credentials.with_token("token")
        self.assertIsNone(credentials.token)
        self.assertEqual(updated.token, "token")
        self.assertIsNone(updated.with_token("").token)

    def test_repr_hides_token(self):
        self.assertNotIn("secret", repr(Credentials("client", "secret")))

    def test_client_from_file(self):
        Credentials("client", "token").save(self.path)
        client = TwitchClient.from_file(self.path)
        self.assertEqual(client.client_id, "client")
        self.assertEqual(client.oauth_token, "token")

    def test_client_from_env(self):
        with patch.dict(os.environ, {"TWITCH_CLIENT_ID": "client"}, clear=True):
            client = TwitchClient.from_env()
        self.assertEqual(client.client_id, "client")
        self.assertIsNone(client.oauth_token)


if __name__ == "__main__":
    unittest.main()
