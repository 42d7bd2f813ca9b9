from __future__ import annotations

from poetic_tts.utils.logger import Logger


class ConsoleAudioSink:
    """Headless sink: announces the audio location instead of playing it."""

    def __init__(self, logger: Logger):
        self.logger = logger
        self.source: str | None = None

    def set_source(self, location: str | None) -> None:
        self.source = location

    def play(self) -> None:
        if self.source:
            self.logger.log(f"Audio available at {self.source}")

    def stop(self) -> None:
        pass
