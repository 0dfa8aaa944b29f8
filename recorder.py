"""Microphone recorder that captures one clip into a WAV file."""

from __future__ import annotations

import logging
import threading
import wave
from pathlib import Path
from typing import Any, Optional

from errors import ERROR_MESSAGES, PERMISSION_DENIED, RECORDER_SETUP_FAILED, CaptureSetupError
from interfaces import FinishedCallback
from models import RecordingSettings

try:
    import numpy as np
except Exception:  # pragma: no cover
    np = None  # type: ignore

try:
    import sounddevice as sd
except Exception:  # pragma: no cover
    sd = None  # type: ignore

_logger = logging.getLogger(__name__)


class SoundDeviceRecorder:
    def __init__(
        self,
        path: Path,
        settings: RecordingSettings | None = None,
        chunk_ms: int = 100,
    ) -> None:
        self.path = path
        self.settings = settings or RecordingSettings()
        self.chunk_ms = chunk_ms
        self._stream: Any = None
        self._running = False
        self._lock = threading.Lock()
        self._chunks: list[bytes] = []
        self._on_finished: Optional[FinishedCallback] = None

    @property
    def is_recording(self) -> bool:
        return self._running

    def prepare(self) -> bool:
        """Check that the default input device accepts our settings."""
        if sd is None:
            _logger.error("%s sounddevice is not installed", ERROR_MESSAGES[RECORDER_SETUP_FAILED])
            return False
        try:
            sd.check_input_settings(
                samplerate=self.settings.sample_rate,
                channels=self.settings.channels,
                dtype="int16",
            )
        except Exception as exc:
            _logger.error("%s %s", ERROR_MESSAGES[RECORDER_SETUP_FAILED], exc)
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        return True

    def start(self, on_finished: FinishedCallback) -> None:
        with self._lock:
            if self._running:
                return
            if sd is None:
                raise CaptureSetupError("sounddevice is not installed")
            self._chunks = []
            self._on_finished = on_finished
            blocksize = int(self.settings.sample_rate * (self.chunk_ms / 1000.0))
            try:
                self._stream = sd.InputStream(
                    samplerate=self.settings.sample_rate,
                    channels=self.settings.channels,
                    dtype="int16",
                    blocksize=blocksize,
                    callback=self._on_audio,
                )
                self._stream.start()
            except Exception as exc:
                self._stream = None
                raise CaptureSetupError(str(exc), code=_setup_error_code(exc)) from exc
            self._running = True

    def stop(self) -> None:
        with self._lock:
            if not self._running:
                return
            self._running = False
            stream = self._stream
            self._stream = None

        # The audio callback takes the lock, so the stream is stopped outside it.
        if stream is not None:
            stream.stop()
            stream.close()

        with self._lock:
            pcm = b"".join(self._chunks)
            self._chunks = []
            on_finished = self._on_finished
            self._on_finished = None

        success = self._write_wav(pcm)
        if on_finished is not None:
            on_finished(success)

    def _on_audio(self, indata: Any, frames: int, time_info: Any, status: Any) -> None:
        if status:
            _logger.warning("audio input status: %s", status)
        if not self._running or np is None:
            return
        payload = np.asarray(indata, dtype=np.int16).tobytes()
        with self._lock:
            if self._running:
                self._chunks.append(payload)

    def _write_wav(self, pcm: bytes) -> bool:
        if not pcm:
            _logger.warning("no audio captured")
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with wave.open(str(self.path), "wb") as wf:
                wf.setnchannels(self.settings.channels)
                wf.setsampwidth(self.settings.sample_width)
                wf.setframerate(self.settings.sample_rate)
                wf.writeframes(pcm)
        except (OSError, wave.Error) as exc:
            _logger.error("failed to write %s: %s", self.path, exc)
            return False
        return True


def _setup_error_code(exc: Exception) -> str:
    low = str(exc).lower()
    if "permission" in low or "denied" in low or "not authorized" in low:
        return PERMISSION_DENIED
    return RECORDER_SETUP_FAILED
