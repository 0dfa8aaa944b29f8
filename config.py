"""Simple JSON-based config store."""

from __future__ import annotations

import json
from pathlib import Path

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "soundrecord"
DEFAULT_CONTENT_TYPE = "application/json"


class JsonConfigStore:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or DEFAULT_CONFIG_DIR / "config.json"
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def get_upload_url(self) -> str:
        data = self._read_all()
        return str(data.get("upload_url", ""))

    def get_content_type(self) -> str:
        data = self._read_all()
        return str(data.get("content_type", DEFAULT_CONTENT_TYPE))

    def get_sound_path(self) -> Path:
        data = self._read_all()
        value = data.get("sound_path")
        if not value:
            return self._path.parent / "sound.wav"
        return Path(str(value)).expanduser()

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            return {}
        return data if isinstance(data, dict) else {}
