from __future__ import annotations

from typing import Protocol


class AudioSink(Protocol):
    def set_source(self, location: str | None) -> None:
        """Point the sink at an audio location, or release it with None."""
        ...

    def play(self) -> None:
        """Start playback of the current source."""
        ...

    def stop(self) -> None:
        """Halt playback."""
        ...
