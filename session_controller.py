"""State-machine based record/upload session orchestration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from config import DEFAULT_CONTENT_TYPE
from errors import CAPTURE_FAILED, ERROR_MESSAGES, NETWORK_ERROR, READ_FAILED, CaptureSetupError
from interfaces import AudioCaptureDevice, Scheduler, TimerHandle, UploadClient, UploadHandle
from models import SessionState, StateKind

_logger = logging.getLogger(__name__)

StateCallback = Callable[[SessionState, SessionState], None]

MAX_DURATION_S = 10.0
TICK_INTERVAL_S = 1.0


def upload_percent(sent: int, expected: int) -> int:
    if expected <= 0:
        return 100
    percent = (sent * 100) // expected
    return max(0, min(100, percent))


class RecordingSessionController:
    def __init__(
        self,
        capture: AudioCaptureDevice,
        uploader: UploadClient,
        scheduler: Scheduler,
        sound_path: Path,
        upload_url: str = "",
        content_type: str = DEFAULT_CONTENT_TYPE,
        max_duration_s: float = MAX_DURATION_S,
        tick_interval_s: float = TICK_INTERVAL_S,
        on_state_change: Optional[StateCallback] = None,
    ) -> None:
        self._capture = capture
        self._uploader = uploader
        self._scheduler = scheduler
        self._sound_path = sound_path
        self.upload_url = upload_url
        self.content_type = content_type
        self._max_duration_s = max_duration_s
        self._tick_interval_s = tick_interval_s
        self._on_state_change = on_state_change

        self._state = SessionState.ready()
        self._elapsed_s = 0.0
        self._capturing = False
        self._tick_timer: Optional[TimerHandle] = None
        self._stop_timer: Optional[TimerHandle] = None
        self._cycle_id = 0
        self._upload_task: Optional[UploadHandle] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def upload_task(self) -> Optional[UploadHandle]:
        return self._upload_task

    def start_recording(self) -> None:
        if not self._state.start_enabled:
            _logger.debug("start ignored in state %s", self._state.description)
            return
        self._cycle_id += 1
        try:
            self._capture.start(self._handle_capture_finished)
        except CaptureSetupError as exc:
            _logger.error("%s (%s)", ERROR_MESSAGES.get(exc.code, exc.code), exc)
            return

        self._capturing = True
        self._elapsed_s = 0.0
        self._transition(SessionState.recording(self._elapsed_s))
        self._stop_timer = self._scheduler.call_later(self._max_duration_s, self.stop_recording)
        self._tick_timer = self._scheduler.call_every(self._tick_interval_s, self._tick)

    def stop_recording(self) -> None:
        if not self._capturing:
            return
        self._capturing = False
        self._cancel_timers()
        self._elapsed_s = 0.0
        # Completion (and the move to Uploading) arrives via the capture callback.
        self._safe_stop_capture()

    def start_uploading(self, data: bytes) -> None:
        cycle_id = self._cycle_id
        self._transition(SessionState.uploading(0))
        try:
            self._upload_task = self._uploader.upload(
                data,
                self.upload_url,
                self.content_type,
                on_progress=lambda sent, total: self._handle_upload_progress(cycle_id, sent, total),
                on_response=lambda status: self._handle_upload_response(cycle_id, status),
                on_completed=lambda error: self._handle_upload_completed(cycle_id, error),
            )
        except Exception as exc:
            _logger.exception("failed to start upload")
            self._transition(SessionState.error(str(exc) or exc.__class__.__name__))

    def shutdown(self) -> None:
        self.stop_recording()
        self._cancel_timers()

    def _tick(self) -> None:
        if self._state.kind != StateKind.RECORDING or not self._capturing:
            return
        self._elapsed_s += 1.0
        self._transition(SessionState.recording(self._elapsed_s))

    def _handle_capture_finished(self, success: bool) -> None:
        if not success:
            _logger.warning(ERROR_MESSAGES[CAPTURE_FAILED])
            return
        data = self._read_sound_file()
        if data is None:
            return
        self.start_uploading(data)

    def _read_sound_file(self) -> Optional[bytes]:
        try:
            data = self._sound_path.read_bytes()
        except OSError as exc:
            _logger.error("%s (%s): %s", ERROR_MESSAGES[READ_FAILED], self._sound_path, exc)
            return None
        if not data:
            _logger.error("%s (%s): file is empty", ERROR_MESSAGES[READ_FAILED], self._sound_path)
            return None
        return data

    def _handle_upload_progress(self, cycle_id: int, sent: int, expected: int) -> None:
        if cycle_id != self._cycle_id or self._state.kind != StateKind.UPLOADING:
            return
        percent = upload_percent(sent, expected)
        if percent < self._state.percent:
            return
        self._transition(SessionState.uploading(percent))

    def _handle_upload_response(self, cycle_id: int, status_code: int) -> None:
        if cycle_id != self._cycle_id:
            return
        _logger.debug("upload response received: %s", status_code)
        # Headers arrive before completion; the button is re-enabled here.
        self._transition(SessionState.ready())

    def _handle_upload_completed(self, cycle_id: int, error: Optional[str]) -> None:
        if cycle_id != self._cycle_id:
            return
        if error is None:
            return
        _logger.error("%s (%s)", ERROR_MESSAGES[NETWORK_ERROR], error)
        self._transition(SessionState.error(error))

    def _cancel_timers(self) -> None:
        if self._tick_timer is not None:
            self._tick_timer.cancel()
            self._tick_timer = None
        if self._stop_timer is not None:
            self._stop_timer.cancel()
            self._stop_timer = None

    def _safe_stop_capture(self) -> None:
        try:
            self._capture.stop()
        except Exception:
            _logger.exception("failed to stop recording")

    def _transition(self, to_state: SessionState) -> None:
        from_state = self._state
        if from_state == to_state:
            return
        self._state = to_state
        _logger.debug("state %s -> %s", from_state.description, to_state.description)
        if self._on_state_change:
            self._on_state_change(from_state, to_state)
