"""Shared error codes and user-facing messages."""

from __future__ import annotations

PERMISSION_DENIED = "PERMISSION_DENIED"
RECORDER_SETUP_FAILED = "RECORDER_SETUP_FAILED"
CAPTURE_FAILED = "CAPTURE_FAILED"
READ_FAILED = "READ_FAILED"
NETWORK_ERROR = "NETWORK_ERROR"
NO_UPLOAD_URL = "NO_UPLOAD_URL"

ERROR_MESSAGES = {
    PERMISSION_DENIED: "Microphone access is required in system settings.",
    RECORDER_SETUP_FAILED: "Failed to init recorder.",
    CAPTURE_FAILED: "Failed to record.",
    READ_FAILED: "No data at sound path.",
    NETWORK_ERROR: "Network failed, please retry.",
    NO_UPLOAD_URL: "No upload URL configured",
}


class CaptureSetupError(RuntimeError):
    """Raised when the audio input cannot be opened."""

    def __init__(self, message: str, code: str = RECORDER_SETUP_FAILED) -> None:
        self.code = code
        super().__init__(message)
