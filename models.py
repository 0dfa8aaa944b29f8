"""Core data models for the app."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StateKind(str, Enum):
    READY = "READY"
    RECORDING = "RECORDING"
    UPLOADING = "UPLOADING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class SessionState:
    """One case of the record/upload workflow plus its payload.

    Only the payload field matching ``kind`` is meaningful: ``seconds`` for
    RECORDING, ``percent`` for UPLOADING, ``message`` for ERROR.
    """

    kind: StateKind
    seconds: float = 0.0
    percent: int = 0
    message: str = ""

    @classmethod
    def ready(cls) -> SessionState:
        return cls(StateKind.READY)

    @classmethod
    def recording(cls, seconds: float) -> SessionState:
        return cls(StateKind.RECORDING, seconds=seconds)

    @classmethod
    def uploading(cls, percent: int) -> SessionState:
        return cls(StateKind.UPLOADING, percent=percent)

    @classmethod
    def error(cls, message: str) -> SessionState:
        return cls(StateKind.ERROR, message=message)

    @property
    def start_enabled(self) -> bool:
        return self.kind in (StateKind.READY, StateKind.ERROR)

    @property
    def description(self) -> str:
        if self.kind == StateKind.RECORDING:
            return f"Recording: {self.seconds}"
        if self.kind == StateKind.UPLOADING:
            return f"Uploading: {self.percent} %"
        if self.kind == StateKind.ERROR:
            return f"Error: {self.message}"
        return "Ready"


@dataclass
class RecordingSettings:
    sample_rate: int = 44100
    channels: int = 1
    sample_width: int = 2
