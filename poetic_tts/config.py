from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

from poetic_tts.domain.vo.voice import Voice

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_DIR = "logs"


@dataclass(frozen=True)
class SynthesisConfig:
    base_url: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class AppConfig:
    synthesis: SynthesisConfig
    default_voice: Voice = Voice.default()
    log_dir: Path = Path(DEFAULT_LOG_DIR)

    @staticmethod
    def from_env() -> "AppConfig":
        base_url = (os.getenv("POETIC_TTS_API_BASE") or "").strip()
        if not base_url:
            raise ValueError(
                "POETIC_TTS_API_BASE is required. Set it to the synthesis service base URL."
            )

        if any(ch.isspace() or not ch.isprintable() for ch in base_url):
            raise ValueError(
                "POETIC_TTS_API_BASE must not contain whitespace or control characters."
            )

        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(
                f"POETIC_TTS_API_BASE must be an http(s) URL (got '{base_url}')."
            )

        timeout_raw = os.getenv("POETIC_TTS_TIMEOUT_SECONDS")
        timeout_seconds = DEFAULT_TIMEOUT_SECONDS
        if timeout_raw:
            try:
                timeout_seconds = float(timeout_raw)
            except ValueError as exc:
                raise ValueError(
                    "POETIC_TTS_TIMEOUT_SECONDS must be a number (seconds)."
                ) from exc
            if timeout_seconds <= 0:
                raise ValueError("POETIC_TTS_TIMEOUT_SECONDS must be positive.")

        voice_raw = os.getenv("POETIC_TTS_DEFAULT_VOICE")
        default_voice = Voice.parse(voice_raw) if voice_raw else Voice.default()

        log_dir = Path(os.getenv("POETIC_TTS_LOG_DIR") or DEFAULT_LOG_DIR)

        return AppConfig(
            synthesis=SynthesisConfig(
                base_url=base_url.rstrip("/"),
                timeout_seconds=timeout_seconds,
            ),
            default_voice=default_voice,
            log_dir=log_dir,
        )
