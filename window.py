"""Main window with the state label and the record button."""

from __future__ import annotations

from typing import Callable, Optional

from models import SessionState

try:
    from PySide6.QtCore import Qt
    from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget
except Exception:  # pragma: no cover
    Qt = None  # type: ignore
    QLabel = object  # type: ignore
    QPushButton = object  # type: ignore
    QVBoxLayout = object  # type: ignore
    QWidget = object  # type: ignore


class RecorderWindow(QWidget):
    def __init__(self, on_start: Optional[Callable[[], None]] = None) -> None:
        if Qt is None:
            raise RuntimeError("PySide6 is not installed")
        super().__init__()
        self.setWindowTitle("Sound Record")
        self.setMinimumSize(320, 200)

        self._label = QLabel("")
        self._label.setAlignment(Qt.AlignCenter)
        self._label.setFixedSize(200, 44)

        self._button = QPushButton("Start recording")
        self._button.setFixedSize(200, 44)
        self._button.setStyleSheet(
            "QPushButton { color: blue; }"
            "QPushButton:disabled { color: lightgray; }"
        )
        self._on_start = on_start
        self._button.clicked.connect(self._on_clicked)

        layout = QVBoxLayout()
        layout.addStretch(1)
        layout.addWidget(self._label, 0, Qt.AlignHCenter)
        layout.addWidget(self._button, 0, Qt.AlignHCenter)
        layout.addStretch(1)
        self.setLayout(layout)

    def _on_clicked(self, checked: bool = False) -> None:
        if self._on_start is not None:
            self._on_start()

    def show_state(self, state: SessionState) -> None:
        """Reflect a session state in the label and button."""
        self._label.setText(state.description)
        self._button.setEnabled(state.start_enabled)
