from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock

from poetic_tts.application.errors import (
    ExternalServiceError,
    PlaybackError,
    RequestInFlightError,
    ValidationError,
)
from poetic_tts.application.playback_controller import PlaybackController
from poetic_tts.application.poem_generator import (
    DEFAULT_LINE_COUNT,
    QUICK_SAMPLES,
    SAMPLE_LINES,
    pick_poem,
)
from poetic_tts.application.port.synthesis_client import SynthesisClient
from poetic_tts.domain.vo.request_state import (
    Error,
    Idle,
    InFlight,
    RequestState,
    Success,
    Validating,
)
from poetic_tts.domain.vo.voice import Voice
from poetic_tts.utils.logger import Logger

INITIAL_TEXT = "Hello — type or generate a poem!"
BLANK_TEXT_MESSAGE = "please provide text"

STATUS_IN_FLIGHT = "Generating audio..."
STATUS_PLAYING = "Playing audio — enjoy!"
STATUS_POEM_READY = "Poem generated — click Speak to hear it."


@dataclass(frozen=True)
class SessionSnapshot:
    text: str
    voice: Voice
    state: RequestState
    audio_handle: str | None
    status: str

    @property
    def is_busy(self) -> bool:
        return isinstance(self.state, InFlight)


class RequestController:
    """Owns the speak workflow: text buffer, voice, request state and audio handle.

    Every mutation happens under one lock, so a result that arrives from a
    worker thread is applied atomically with respect to user actions. Each
    submission is tagged with a generation number; `clear()` starts a new
    generation and results from older generations are dropped.
    """

    def __init__(
        self,
        *,
        synthesis_client: SynthesisClient,
        playback: PlaybackController,
        logger: Logger | None = None,
        voice: Voice = Voice.default(),
        text: str = INITIAL_TEXT,
        lines: tuple[str, ...] = SAMPLE_LINES,
        rng: random.Random | None = None,
    ) -> None:
        self.synthesis_client = synthesis_client
        self.playback = playback
        self.logger = logger
        self.lines = lines
        self._rng = rng

        self._lock = RLock()
        self._text = text
        self._voice = voice
        self._state: RequestState = Idle()
        self._audio_handle: str | None = None
        self._status = ""
        self._generation = 0

        # Optional hook for UI/observers; called with the lock held.
        self.on_change: Callable[[SessionSnapshot], None] | None = None

    @property
    def state(self) -> RequestState:
        with self._lock:
            return self._state

    @property
    def audio_handle(self) -> str | None:
        with self._lock:
            return self._audio_handle

    @property
    def text(self) -> str:
        with self._lock:
            return self._text

    @property
    def voice(self) -> Voice:
        with self._lock:
            return self._voice

    @property
    def status(self) -> str:
        with self._lock:
            return self._status

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                text=self._text,
                voice=self._voice,
                state=self._state,
                audio_handle=self._audio_handle,
                status=self._status,
            )

    def set_text(self, text: str) -> None:
        with self._lock:
            if text == self._text:
                return
            self._text = text
            self._notify()

    def select_voice(self, voice: Voice | str) -> Voice:
        try:
            selected = Voice.parse(voice)
        except ValueError as e:
            self._log(f"Voice rejected: {e}")
            raise ValidationError(str(e)) from e

        with self._lock:
            if selected != self._voice:
                self._voice = selected
                self._log(f"Voice: {selected.value}")
                self._notify()
        return selected

    def generate_poem(self, count: int = DEFAULT_LINE_COUNT) -> str:
        poem = pick_poem(self.lines, count, rng=self._rng)
        with self._lock:
            self._text = poem
            self._status = STATUS_POEM_READY
            self._log("Poem generated.")
            self._notify()
        return poem

    def use_sample(self, index: int) -> str:
        if not 0 <= index < len(QUICK_SAMPLES):
            raise ValidationError(
                f"Quick sample index must be between 0 and {len(QUICK_SAMPLES) - 1}."
            )
        sample = QUICK_SAMPLES[index]
        self.set_text(sample)
        return sample

    def speak(self) -> RequestState:
        with self._lock:
            text, voice = self._text, self._voice
        return self.submit(text, voice)

    def submit(self, text: str, voice: Voice | str) -> RequestState:
        """Synthesize `text` and start playback of the result.

        Blocks until the synthesis call resolves, so callers with a UI run it
        on a worker thread. Raises RequestInFlightError, without touching any
        state, when another submission is still outstanding.
        """
        with self._lock:
            if isinstance(self._state, InFlight):
                self._log("Speak ignored: a request is already in flight.")
                raise RequestInFlightError("A synthesis request is already in flight.")

            self._state = Validating()
            message = self._validate(text, voice)
            if message is not None:
                self._state = Error(message)
                self._status = f"Error: {message}"
                self._log(f"Validation error: {message}")
                self._notify()
                return self._state

            selected = Voice.parse(voice)
            self._generation += 1
            generation = self._generation
            self._state = InFlight()
            self._status = STATUS_IN_FLIGHT
            self._log(f"Synthesizing {len(text)} chars with voice {selected.value}...")
            self._notify()

        try:
            location = self.synthesis_client.synthesize(text, selected.value)
        except ExternalServiceError as e:
            return self._resolve_failure(generation, str(e) or "Synthesis request failed.")
        except Exception as e:
            # Any other fault must still move the request out of InFlight.
            return self._resolve_failure(generation, f"Network error: {e}")

        return self._resolve_success(generation, location)

    def clear(self) -> None:
        with self._lock:
            self._generation += 1
            self._text = ""
            self._state = Idle()
            self._audio_handle = None
            self._status = ""
            self.playback.stop()
            self._log("Cleared.")
            self._notify()

    def report_playback_error(self, message: str) -> None:
        """Surface a failure reported asynchronously by the audio sink."""
        with self._lock:
            self._status = f"Playback error: {message}"
            self._log(self._status)
            self._notify()

    def _validate(self, text: str, voice: Voice | str) -> str | None:
        if not isinstance(text, str) or not text.strip():
            return BLANK_TEXT_MESSAGE
        try:
            Voice.parse(voice)
        except ValueError as e:
            return str(e)
        return None

    def _resolve_success(self, generation: int, location: str) -> RequestState:
        with self._lock:
            if generation != self._generation:
                self._log("Discarded audio from a superseded request.")
                return self._state

            self._audio_handle = location
            self._state = Success(location)
            self._status = STATUS_PLAYING
            self._log(f"Audio ready: {location}")

            try:
                self.playback.bind(location)
            except PlaybackError as e:
                self._status = f"Playback error: {e}"
                self._log(self._status)

            self._notify()
            return self._state

    def _resolve_failure(self, generation: int, message: str) -> RequestState:
        with self._lock:
            if generation != self._generation:
                self._log(f"Discarded error from a superseded request: {message}")
                return self._state

            self._state = Error(message)
            self._status = f"Error: {message}"
            self._log(self._status)
            self._notify()
            return self._state

    def _notify(self) -> None:
        # Assumes _lock is held so observers see transitions in order.
        if self.on_change:
            self.on_change(self.snapshot())

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.log(message)
