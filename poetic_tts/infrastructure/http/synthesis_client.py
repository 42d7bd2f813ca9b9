from __future__ import annotations

import json

import httpx

from poetic_tts.application.errors import NetworkError


class HttpSynthesisClient:
    """Blocking client for `POST {base_url}/synthesize`.

    Holds no per-request state; each call opens its own connection so calls
    made from different worker threads never share a session.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        if not base_url:
            raise ValueError("base_url is required.")
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def synthesize(self, text: str, voice: str) -> str:
        try:
            with httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.post("/synthesize", json={"text": text, "voice": voice})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            msg = str(e).strip() or e.__class__.__name__
            raise NetworkError(f"Network error: {msg}") from e

        if not response.is_success:
            raise NetworkError(self._extract_error(response))

        try:
            body = response.json()
        except ValueError as e:
            raise NetworkError("Network error: invalid JSON response from /synthesize") from e

        url = body.get("url") if isinstance(body, dict) else None
        if not isinstance(url, str) or not url.strip():
            raise NetworkError("Network error: response from /synthesize has no audio url")
        return url

    @staticmethod
    def _extract_error(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            text = response.text.strip()
            return text or f"HTTP {response.status_code}"

        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, str) and error:
                return error
        return json.dumps(data, separators=(",", ":"))
