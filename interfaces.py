"""Protocol interfaces used by RecordingSessionController."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

FinishedCallback = Callable[[bool], None]
ProgressCallback = Callable[[int, int], None]
ResponseCallback = Callable[[int], None]
CompletedCallback = Callable[[Optional[str]], None]


class AudioCaptureDevice(Protocol):
    def start(self, on_finished: FinishedCallback) -> None: ...

    def stop(self) -> None: ...


class UploadHandle(Protocol):
    @property
    def done(self) -> bool: ...

    def join(self, timeout: Optional[float] = None) -> bool: ...


class UploadClient(Protocol):
    def upload(
        self,
        data: bytes,
        url: str,
        content_type: str,
        on_progress: ProgressCallback,
        on_response: ResponseCallback,
        on_completed: CompletedCallback,
    ) -> UploadHandle: ...


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle: ...

    def call_every(self, interval_s: float, callback: Callable[[], None]) -> TimerHandle: ...

