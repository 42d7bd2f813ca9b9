"""Tests for HttpSynthesisClient."""
from __future__ import annotations

import json
import unittest

import httpx

from poetic_tts.application.errors import NetworkError
from poetic_tts.infrastructure.http.synthesis_client import HttpSynthesisClient


def _client(handler) -> HttpSynthesisClient:
    return HttpSynthesisClient(
        base_url="http://tts.local/prod/",
        transport=httpx.MockTransport(handler),
    )


class TestHttpSynthesisClient(unittest.TestCase):
    """Test cases for HttpSynthesisClient."""

    def test_posts_text_and_voice_and_returns_url(self):
        """Test the request shape and the success path."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.read().decode("utf-8"))
            return httpx.Response(200, json={"url": "https://host/a.mp3"})

        url = _client(handler).synthesize("hi", "Joanna")

        self.assertEqual(url, "https://host/a.mp3")
        self.assertEqual(seen["method"], "POST")
        self.assertEqual(seen["url"], "http://tts.local/prod/synthesize")
        self.assertEqual(seen["body"], {"text": "hi", "voice": "Joanna"})

    def test_error_field_is_used_as_reason(self):
        """Test that the body's error field becomes the message."""
        def handler(_: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": "bad voice"})

        with self.assertRaises(NetworkError) as ctx:
            _client(handler).synthesize("hi", "Nobody")

        self.assertEqual(str(ctx.exception), "bad voice")

    def test_body_without_error_field_is_serialized(self):
        """Test the fallback to the serialized body."""
        def handler(_: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "boom"})

        with self.assertRaises(NetworkError) as ctx:
            _client(handler).synthesize("hi", "Joanna")

        self.assertEqual(str(ctx.exception), '{"message":"boom"}')

    def test_non_json_error_body_uses_raw_text(self):
        """Test that a plain-text error page is passed through."""
        def handler(_: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        with self.assertRaises(NetworkError) as ctx:
            _client(handler).synthesize("hi", "Joanna")

        self.assertEqual(str(ctx.exception), "Bad Gateway")

    def test_transport_failure_is_network_error(self):
        """Test that connection errors become NetworkError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("offline", request=request)

        with self.assertRaises(NetworkError) as ctx:
            _client(handler).synthesize("hi", "Joanna")

        self.assertIn("offline", str(ctx.exception))
        self.assertTrue(str(ctx.exception).startswith("Network error"))

    def test_malformed_success_body_is_network_error(self):
        """Test that a 200 without JSON fails."""
        def handler(_: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        with self.assertRaises(NetworkError):
            _client(handler).synthesize("hi", "Joanna")

    def test_missing_url_is_network_error(self):
        """Test that a 200 without a url fails."""
        def handler(_: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "ok"})

        with self.assertRaises(NetworkError):
            _client(handler).synthesize("hi", "Joanna")

    def test_invalid_url_is_network_error(self):
        """Test that a URL httpx refuses to build is reported as NetworkError."""
        def handler(_: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"url": "https://host/a.mp3"})

        client = HttpSynthesisClient(
            base_url="https://host/a\x01b",
            transport=httpx.MockTransport(handler),
        )

        with self.assertRaises(NetworkError) as ctx:
            client.synthesize("hi", "Joanna")

        self.assertTrue(str(ctx.exception).startswith("Network error"))

    def test_base_url_is_required(self):
        """Test that an empty base URL fails fast."""
        with self.assertRaises(ValueError):
            HttpSynthesisClient(base_url="")


if __name__ == "__main__":
    unittest.main()
