from PySide6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from poetic_tts.application.errors import ValidationError
from poetic_tts.application.request_controller import RequestController, SessionSnapshot
from poetic_tts.presentation.speak_worker import ControllerBridge, SpeakWorker
from poetic_tts.presentation.view_model import ViewModel, project


class MainWindow(QMainWindow):
    def __init__(self, controller: RequestController):
        super().__init__()
        self.controller = controller
        self.bridge = ControllerBridge(controller)
        self._workers: set[SpeakWorker] = set()
        self._rendering = False

        self.setWindowTitle("Poetic TTS")
        self.resize(820, 520)

        self._build_widgets()

        self.bridge.changed.connect(self.render_snapshot)
        self.bridge.log.connect(self.append_log)
        self.render_snapshot(controller.snapshot())

    def _build_widgets(self) -> None:
        view = project(self.controller.snapshot())

        self.text_edit = QPlainTextEdit()
        self.text_edit.textChanged.connect(self.on_text_changed)

        self.generate_button = QPushButton("🎨 Generate Poem")
        self.generate_button.clicked.connect(self.on_generate)
        self.speak_button = QPushButton(view.speak_label)
        self.speak_button.clicked.connect(self.on_speak)
        self.clear_button = QPushButton("❌ Clear")
        self.clear_button.clicked.connect(self.on_clear)

        buttons = QHBoxLayout()
        buttons.addWidget(self.generate_button)
        buttons.addWidget(self.speak_button)
        buttons.addStretch(1)
        buttons.addWidget(self.clear_button)

        self.status_label = QLabel()

        left = QVBoxLayout()
        left.addWidget(QLabel("Text to speak"))
        left.addWidget(self.text_edit)
        left.addLayout(buttons)
        left.addWidget(self.status_label)

        self.voice_combo = QComboBox()
        self.voice_combo.addItems(list(view.voices))
        self.voice_combo.currentTextChanged.connect(self.on_voice_changed)

        right = QVBoxLayout()
        right.addWidget(QLabel("Voice"))
        right.addWidget(self.voice_combo)
        right.addWidget(QLabel("Quick samples"))
        for index, sample in enumerate(view.quick_samples):
            button = QPushButton(sample)
            button.clicked.connect(lambda _=False, i=index: self.on_sample(i))
            right.addWidget(button)

        self.last_audio_label = QLabel()
        self.last_audio_label.setOpenExternalLinks(True)
        right.addWidget(self.last_audio_label)
        right.addStretch(1)

        self.log_view = QTextEdit()
        self.log_view.setReadOnly(True)

        grid = QGridLayout()
        grid.addLayout(left, 0, 0)
        grid.addLayout(right, 0, 1)
        grid.addWidget(self.log_view, 1, 0, 1, 2)
        grid.setColumnStretch(0, 2)
        grid.setColumnStretch(1, 1)

        central = QWidget()
        central.setLayout(grid)
        self.setCentralWidget(central)

    def render_snapshot(self, snapshot: SessionSnapshot) -> None:
        # Snapshots from worker threads arrive queued and may be older than
        # edits made since; always draw the controller's current state.
        self.render(project(self.controller.snapshot()))

    def render(self, view: ViewModel) -> None:
        self._rendering = True
        try:
            if self.text_edit.toPlainText() != view.text:
                self.text_edit.setPlainText(view.text)
            if self.voice_combo.currentText() != view.voice:
                self.voice_combo.setCurrentText(view.voice)
            self.speak_button.setText(view.speak_label)
            self.speak_button.setEnabled(view.speak_enabled)
            self.status_label.setText(view.status)
            self.last_audio_label.setText(view.last_audio_html)
            self.statusBar().showMessage(view.status)
        finally:
            self._rendering = False

    def on_text_changed(self) -> None:
        if self._rendering:
            return
        self.controller.set_text(self.text_edit.toPlainText())

    def on_voice_changed(self, voice: str) -> None:
        if self._rendering:
            return
        try:
            self.controller.select_voice(voice)
        except ValidationError as e:
            self.statusBar().showMessage(str(e))

    def on_generate(self) -> None:
        self.controller.generate_poem()

    def on_sample(self, index: int) -> None:
        self.controller.use_sample(index)

    def on_speak(self) -> None:
        # The controller rejects overlapping requests; a worker left over from a
        # cleared request may still be waiting on the network.
        worker = SpeakWorker(self.controller)
        worker.failed.connect(self.on_speak_failed)
        worker.finished.connect(lambda: self._workers.discard(worker))
        self._workers.add(worker)
        worker.start()

    def on_speak_failed(self, message: str) -> None:
        self.statusBar().showMessage(message)

    def on_clear(self) -> None:
        self.controller.clear()

    def append_log(self, text: str) -> None:
        self.log_view.append(text)
