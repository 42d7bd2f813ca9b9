from __future__ import annotations

import sys
from pathlib import Path


def _ensure_repo_root_on_sys_path() -> None:
	# Allow running both:
	# - python -m poetic_tts.main
	# - python poetic_tts/main.py
	if __package__:
		return
	repo_root = str(Path(__file__).resolve().parents[1])
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


def _open_window(container):
	from poetic_tts.presentation.main_window import MainWindow

	window = MainWindow(container.request_controller)
	window.show()
	return window


def _speak_once(container, args) -> int:
	from poetic_tts.domain.vo.request_state import Error, Success

	controller = container.request_controller
	container.logger.on_emit = lambda line: print(line, file=sys.stderr)

	try:
		if args.voice:
			controller.select_voice(args.voice)
		if args.poem:
			controller.generate_poem(args.count)
		elif args.text is not None:
			controller.set_text(args.text)
		else:
			controller.set_text(sys.stdin.read())
	except ValueError as exc:
		print(f"Input error: {exc}", file=sys.stderr)
		return 2

	print(controller.text)
	state = controller.speak()

	if isinstance(state, Success):
		print(state.audio_location)
		return 0
	if isinstance(state, Error) and not controller.text.strip():
		return 2
	return 5


def main(argv: list[str] | None = None) -> int:
	_ensure_repo_root_on_sys_path()

	from poetic_tts.config import AppConfig
	from poetic_tts.di_container import build_container
	from poetic_tts.utils.args import parse_args
	from poetic_tts.utils.env import load_dotenv

	args = parse_args(sys.argv[1:] if argv is None else argv)
	load_dotenv(args.env_file)

	try:
		config = AppConfig.from_env()
	except ValueError as exc:
		print(f"Config error: {exc}", file=sys.stderr)
		return 2

	if args.gui:
		from PySide6.QtWidgets import QApplication

		app = QApplication(sys.argv[:1])
		container = build_container(config)
		window = _open_window(container)  # noqa: F841 - must outlive app.exec()
		code = app.exec()
		container.logger.save()
		return code

	if args.play:
		from PySide6.QtCore import QCoreApplication
		from poetic_tts.infrastructure.qt.audio_sink import QtAudioSink

		app = QCoreApplication(sys.argv[:1])
		sink = QtAudioSink()
		container = build_container(config, audio_sink=sink)
		code = _speak_once(container, args)
		if code == 0 and container.playback.current_source:
			sink.playback_finished.connect(app.quit)
			app.exec()
		return code

	from poetic_tts.infrastructure.console_audio_sink import ConsoleAudioSink
	from poetic_tts.utils.logger import Logger

	logger = Logger(log_dir=config.log_dir)
	container = build_container(config, logger=logger, audio_sink=ConsoleAudioSink(logger))
	return _speak_once(container, args)


if __name__ == "__main__":
	raise SystemExit(main())
