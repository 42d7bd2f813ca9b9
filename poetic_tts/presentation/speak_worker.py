from PySide6.QtCore import QObject, QThread, Signal

from poetic_tts.application.errors import RequestInFlightError
from poetic_tts.application.request_controller import RequestController, SessionSnapshot


class ControllerBridge(QObject):
    """Re-emits controller and logger callbacks as Qt signals for the GUI thread."""

    changed = Signal(object)
    log = Signal(str)

    def __init__(self, controller: RequestController):
        super().__init__()
        controller.on_change = self._on_change
        if controller.logger is not None:
            controller.logger.on_emit = self.log.emit

    def _on_change(self, snapshot: SessionSnapshot) -> None:
        self.changed.emit(snapshot)


class SpeakWorker(QThread):
    failed = Signal(str)

    def __init__(self, controller: RequestController):
        super().__init__()
        self.controller = controller

    def run(self) -> None:
        try:
            self.controller.speak()
        except RequestInFlightError as e:
            self.failed.emit(str(e))
        except Exception as e:
            self.failed.emit(f"Unexpected error: {e}")
