"""Application entrypoint."""

from __future__ import annotations

import logging
import sys
from typing import Callable

from config import JsonConfigStore
from models import SessionState
from recorder import SoundDeviceRecorder
from session_controller import RecordingSessionController
from timers import QtScheduler
from uploader import HttpUploadClient
from window import RecorderWindow

try:
    from PySide6.QtCore import QObject, Signal
    from PySide6.QtWidgets import QApplication
except Exception as exc:  # pragma: no cover
    raise SystemExit(f"PySide6 is required to run the desktop app: {exc}")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


class UIBridge(QObject):
    """Moves callables from worker threads onto the Qt main thread."""

    invoke_signal = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self.invoke_signal.connect(self._run)

    def post(self, fn: Callable[[], None]) -> None:
        self.invoke_signal.emit(fn)

    def _run(self, fn: Callable[[], None]) -> None:
        fn()


class App:
    def __init__(self) -> None:
        self.app = QApplication(sys.argv)
        self.config_store = JsonConfigStore()
        self.ui = UIBridge()

        sound_path = self.config_store.get_sound_path()
        self.recorder = SoundDeviceRecorder(path=sound_path)
        if not self.recorder.prepare():
            _logger.warning("recorder is not ready; recording will fail until the input device is available")

        self.controller = RecordingSessionController(
            capture=self.recorder,
            uploader=HttpUploadClient(dispatch=self.ui.post),
            scheduler=QtScheduler(),
            sound_path=sound_path,
            upload_url=self.config_store.get_upload_url(),
            content_type=self.config_store.get_content_type(),
            on_state_change=self._on_state_change,
        )
        self.window = RecorderWindow(on_start=self.controller.start_recording)
        self.window.show_state(self.controller.state)
        self.app.aboutToQuit.connect(self.controller.shutdown)

    def _on_state_change(self, from_state: SessionState, to_state: SessionState) -> None:
        self.window.show_state(to_state)

    def run(self) -> int:
        if not self.controller.upload_url:
            _logger.warning("no upload URL configured; uploads will end in an error state")
        self.window.show()
        return self.app.exec()


def main() -> int:
    setup_logging()
    app = App()
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
