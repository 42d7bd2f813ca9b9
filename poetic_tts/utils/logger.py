from __future__ import annotations

from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Callable


class Logger:
    """Session log shared by the controller, the CLI and the window.

    Lines are kept in memory for the whole session; the first subscriber
    attached through `on_emit` receives the backlog.
    """

    def __init__(
        self,
        *,
        log_dir: Path = Path("logs"),
        on_emit: Callable[[str], None] | None = None,
    ):
        self.log_dir = log_dir
        self._on_emit: Callable[[str], None] | None = None

        self._lines: list[str] = []
        self._lock = Lock()
        self._started_at = datetime.now()

        self.on_emit = on_emit

    @property
    def on_emit(self) -> Callable[[str], None] | None:
        return self._on_emit

    @on_emit.setter
    def on_emit(self, callback: Callable[[str], None] | None) -> None:
        with self._lock:
            should_replay = self._on_emit is None and callback is not None
            self._on_emit = callback
            backlog = list(self._lines) if should_replay else []

        if callback is not None:
            for line in backlog:
                callback(line)

    @property
    def lines(self) -> list[str]:
        with self._lock:
            return list(self._lines)

    def log(self, message: str) -> None:
        if not message:
            return

        line = f"[{datetime.now():%H:%M:%S}] {message}"
        with self._lock:
            self._lines.append(line)
            callback = self._on_emit

        if callback:
            callback(line)

    def save(self) -> Path | None:
        with self._lock:
            if not self._lines:
                return None
            content = "\n".join(self._lines)

        self.log_dir.mkdir(parents=True, exist_ok=True)
        path = self.log_dir / self._started_at.strftime("%Y-%m-%d_%H-%M-%S.txt")
        path.write_text(content, encoding="utf-8")
        return path
