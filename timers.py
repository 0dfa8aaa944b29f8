"""QTimer-backed scheduler for the session controller."""

from __future__ import annotations

from typing import Callable

try:
    from PySide6.QtCore import QTimer
except Exception:  # pragma: no cover
    QTimer = None  # type: ignore


class QtTimerHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None


class QtScheduler:
    """Runs callbacks on the Qt event loop of the thread that owns it."""

    def __init__(self) -> None:
        if QTimer is None:
            raise RuntimeError("PySide6 is not installed")

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> QtTimerHandle:
        return self._schedule(delay_s, callback, single_shot=True)

    def call_every(self, interval_s: float, callback: Callable[[], None]) -> QtTimerHandle:
        return self._schedule(interval_s, callback, single_shot=False)

    def _schedule(self, seconds: float, callback: Callable[[], None], single_shot: bool) -> QtTimerHandle:
        timer = QTimer()
        timer.setSingleShot(single_shot)
        timer.timeout.connect(callback)
        timer.start(int(seconds * 1000))
        return QtTimerHandle(timer)
