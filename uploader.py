"""HTTP upload client for the recorded clip.

Posts the whole file in one request on a worker thread.  The body is fed to
``httpx`` from a generator so every chunk handed to the transport can be
reported as progress.  Callbacks go through ``dispatch`` when one is given,
which lets the UI layer move them onto its own thread.
"""

from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Callable, Iterator, Optional

import httpx

from errors import ERROR_MESSAGES, NO_UPLOAD_URL
from interfaces import CompletedCallback, ProgressCallback, ResponseCallback

_logger = logging.getLogger(__name__)

Dispatch = Callable[[Callable[[], None]], None]


class UploadTask:
    def __init__(self, thread: Optional[threading.Thread]) -> None:
        self._thread = thread

    @property
    def done(self) -> bool:
        return self._thread is None or not self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> bool:
        if self._thread is not None:
            self._thread.join(timeout=timeout)
        return self.done


class HttpUploadClient:
    def __init__(
        self,
        chunk_size: int = 64 * 1024,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        dispatch: Optional[Dispatch] = None,
    ) -> None:
        self._chunk_size = max(1, chunk_size)
        self._timeout_s = timeout_s
        self._transport = transport
        self._dispatch = dispatch

    def upload(
        self,
        data: bytes,
        url: str,
        content_type: str,
        on_progress: ProgressCallback,
        on_response: ResponseCallback,
        on_completed: CompletedCallback,
    ) -> UploadTask:
        thread = threading.Thread(
            target=self._worker,
            args=(bytes(data), url, content_type, on_progress, on_response, on_completed),
            daemon=True,
        )
        thread.start()
        return UploadTask(thread)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _worker(
        self,
        data: bytes,
        url: str,
        content_type: str,
        on_progress: ProgressCallback,
        on_response: ResponseCallback,
        on_completed: CompletedCallback,
    ) -> None:
        if not url:
            _logger.error("upload skipped: no upload URL configured")
            self._deliver(on_completed, ERROR_MESSAGES[NO_UPLOAD_URL])
            return

        total = len(data)
        headers = {"Content-Type": content_type, "Content-Length": str(total)}
        error: Optional[str] = None
        try:
            with httpx.Client(timeout=self._timeout_s, transport=self._transport) as client:
                with client.stream(
                    "POST",
                    url,
                    content=self._iter_body(data, on_progress),
                    headers=headers,
                ) as response:
                    self._deliver(on_response, response.status_code)
                    response.read()
                    if response.status_code >= 400:
                        error = f"HTTP {response.status_code}"
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            error = str(exc) or exc.__class__.__name__
        except Exception as exc:
            _logger.exception("upload to %s raised", url)
            error = str(exc) or exc.__class__.__name__

        if error:
            _logger.error("upload to %s failed: %s", url, error)
        else:
            _logger.info("uploaded %d bytes to %s", total, url)
        self._deliver(on_completed, error)

    def _iter_body(self, data: bytes, on_progress: ProgressCallback) -> Iterator[bytes]:
        total = len(data)
        sent = 0
        for offset in range(0, total, self._chunk_size):
            piece = data[offset : offset + self._chunk_size]
            yield piece
            sent += len(piece)
            self._deliver(on_progress, sent, total)

    def _deliver(self, callback: Callable[..., None], *args: Any) -> None:
        if self._dispatch is None:
            callback(*args)
            return
        self._dispatch(functools.partial(callback, *args))
