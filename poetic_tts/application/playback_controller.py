from __future__ import annotations

from threading import Lock

from poetic_tts.application.errors import PlaybackError
from poetic_tts.application.port.audio_sink import AudioSink


class PlaybackController:
    """Binds audio locations to a sink; only one source plays at a time."""

    def __init__(self, sink: AudioSink):
        self._sink = sink
        self._lock = Lock()
        self._current: str | None = None

    @property
    def current_source(self) -> str | None:
        with self._lock:
            return self._current

    def bind(self, location: str) -> None:
        """Stop whatever is playing, switch to `location` and start it.

        Raises PlaybackError when the sink cannot start.
        """
        with self._lock:
            self._release_unsafe()
            try:
                self._sink.set_source(location)
                self._sink.play()
            except PlaybackError:
                self._current = None
                raise
            except (OSError, RuntimeError, ValueError) as e:
                self._current = None
                raise PlaybackError(f"Playback failed: {e}") from e
            self._current = location

    def stop(self) -> None:
        with self._lock:
            self._release_unsafe()

    def _release_unsafe(self) -> None:
        # Assumes _lock is held.
        self._sink.stop()
        self._sink.set_source(None)
        self._current = None
