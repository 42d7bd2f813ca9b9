from __future__ import annotations

from dataclasses import dataclass

from poetic_tts.application.playback_controller import PlaybackController
from poetic_tts.application.port.audio_sink import AudioSink
from poetic_tts.application.port.synthesis_client import SynthesisClient
from poetic_tts.application.request_controller import RequestController
from poetic_tts.config import AppConfig
from poetic_tts.infrastructure.http.synthesis_client import HttpSynthesisClient
from poetic_tts.utils.logger import Logger


@dataclass(frozen=True)
class AppContainer:
    config: AppConfig
    logger: Logger
    synthesis_client: SynthesisClient
    audio_sink: AudioSink
    playback: PlaybackController
    request_controller: RequestController


def build_container(
    config: AppConfig,
    *,
    logger: Logger | None = None,
    synthesis_client: SynthesisClient | None = None,
    audio_sink: AudioSink | None = None,
) -> AppContainer:
    logger = logger or Logger(log_dir=config.log_dir)

    synthesis_client = synthesis_client or HttpSynthesisClient(
        base_url=config.synthesis.base_url,
        timeout_seconds=config.synthesis.timeout_seconds,
    )

    if audio_sink is None:
        # Needs a QApplication; imported lazily so headless callers can inject a sink.
        from poetic_tts.infrastructure.qt.audio_sink import QtAudioSink

        audio_sink = QtAudioSink()

    playback = PlaybackController(audio_sink)

    request_controller = RequestController(
        synthesis_client=synthesis_client,
        playback=playback,
        logger=logger,
        voice=config.default_voice,
    )

    if hasattr(audio_sink, "on_error"):
        audio_sink.on_error = request_controller.report_playback_error

    return AppContainer(
        config=config,
        logger=logger,
        synthesis_client=synthesis_client,
        audio_sink=audio_sink,
        playback=playback,
        request_controller=request_controller,
    )
