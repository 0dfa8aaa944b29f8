"""Tests for the Qt window and scheduler."""

from __future__ import annotations

import time

import pytest

pytest.importorskip("PySide6")

from PySide6.QtWidgets import QApplication  # noqa: E402

from models import SessionState  # noqa: E402
from timers import QtScheduler  # noqa: E402
from window import RecorderWindow  # noqa: E402


@pytest.fixture
def qapp(monkeypatch):  # noqa: ANN001, ANN201
    monkeypatch.setenv("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance() or QApplication([])
    yield app


def _spin(app, until, timeout: float = 2.0) -> None:  # noqa: ANN001
    deadline = time.time() + timeout
    while not until() and time.time() < deadline:
        app.processEvents()
        time.sleep(0.01)


def test_show_state_sets_label_and_button(qapp) -> None:  # noqa: ANN001
    window = RecorderWindow()

    cases = [
        (SessionState.ready(), "Ready", True),
        (SessionState.recording(2.0), "Recording: 2.0", False),
        (SessionState.uploading(50), "Uploading: 50 %", False),
        (SessionState.error("offline"), "Error: offline", True),
    ]
    for state, text, enabled in cases:
        window.show_state(state)
        assert window._label.text() == text
        assert window._button.isEnabled() is enabled


def test_button_click_calls_start(qapp) -> None:  # noqa: ANN001
    starts: list[int] = []
    window = RecorderWindow(on_start=lambda: starts.append(1))

    window._button.click()

    assert starts == [1]


def test_scheduler_runs_one_shot_and_repeating(qapp) -> None:  # noqa: ANN001
    scheduler = QtScheduler()
    fired: list[str] = []
    ticks: list[int] = []

    scheduler.call_later(0.01, lambda: fired.append("stop"))
    handle = scheduler.call_every(0.01, lambda: ticks.append(1))
    _spin(qapp, lambda: fired and len(ticks) >= 3)
    handle.cancel()
    count = len(ticks)
    _spin(qapp, lambda: False, timeout=0.1)

    assert fired == ["stop"]
    assert count >= 3
    assert len(ticks) == count


def test_cancelled_one_shot_never_fires(qapp) -> None:  # noqa: ANN001
    scheduler = QtScheduler()
    fired: list[str] = []

    handle = scheduler.call_later(0.02, lambda: fired.append("stop"))
    handle.cancel()
    _spin(qapp, lambda: False, timeout=0.1)

    assert fired == []
