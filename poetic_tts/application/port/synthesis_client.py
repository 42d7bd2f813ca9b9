from __future__ import annotations

from typing import Protocol


class SynthesisClient(Protocol):
    def synthesize(self, text: str, voice: str) -> str:
        """Synthesize `text` with `voice` and return the audio location (URL)."""
        ...
