from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, Qt, QUrl, Signal
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer

from poetic_tts.application.errors import PlaybackError


class QtAudioSink(QObject):
    """Plays remote audio locations through Qt Multimedia.

    Calls may come from worker threads. They are forwarded to the thread that
    owns this object through queued signals, so they run in call order.
    """

    playback_finished = Signal()

    _source_requested = Signal(str)
    _play_requested = Signal()
    _stop_requested = Signal()

    def __init__(
        self,
        *,
        volume: float = 1.0,
        on_error: Callable[[str], None] | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self.on_error = on_error

        self._audio_output = QAudioOutput(self)
        self._audio_output.setVolume(max(0.0, min(1.0, volume)))
        self._player = QMediaPlayer(self)
        self._player.setAudioOutput(self._audio_output)
        self._player.errorOccurred.connect(self._on_player_error)
        self._player.mediaStatusChanged.connect(self._on_media_status)

        queued = Qt.ConnectionType.QueuedConnection
        self._source_requested.connect(self._apply_source, queued)
        self._play_requested.connect(self._player.play, queued)
        self._stop_requested.connect(self._player.stop, queued)

    def set_source(self, location: str | None) -> None:
        if location:
            url = QUrl(location)
            if not url.isValid() or not url.scheme():
                raise PlaybackError(f"Invalid audio location: {location}")
        self._source_requested.emit(location or "")

    def play(self) -> None:
        self._play_requested.emit()

    def stop(self) -> None:
        self._stop_requested.emit()

    def _apply_source(self, location: str) -> None:
        self._player.setSource(QUrl(location) if location else QUrl())

    def _on_media_status(self, status: QMediaPlayer.MediaStatus) -> None:
        if status == QMediaPlayer.MediaStatus.EndOfMedia:
            self.playback_finished.emit()

    def _on_player_error(self, error: QMediaPlayer.Error, error_string: str) -> None:
        if error == QMediaPlayer.Error.NoError:
            return
        if self.on_error:
            self.on_error(error_string or str(error))
        self.playback_finished.emit()
