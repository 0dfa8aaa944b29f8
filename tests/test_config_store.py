from __future__ import annotations

import json
from pathlib import Path

from config import JsonConfigStore


def test_config_defaults(tmp_path: Path) -> None:
    store = JsonConfigStore(path=tmp_path / "config.json")

    assert store.get_upload_url() == ""
    assert store.get_content_type() == "application/json"
    assert store.get_sound_path() == tmp_path / "sound.wav"


def test_config_reads_values(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "upload_url": "https://example.test/upload",
                "content_type": "audio/wav",
                "sound_path": str(tmp_path / "clips" / "last.wav"),
            }
        ),
        encoding="utf-8",
    )

    store = JsonConfigStore(path=path)
    assert store.get_upload_url() == "https://example.test/upload"
    assert store.get_content_type() == "audio/wav"
    assert store.get_sound_path() == tmp_path / "clips" / "last.wav"


def test_config_ignores_environment(tmp_path: Path, monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setenv("SOUNDRECORD_UPLOAD_URL", "https://env.test/upload")
    store = JsonConfigStore(path=tmp_path / "config.json")

    assert store.get_upload_url() == ""


def test_config_invalid_json_fallback(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{invalid", encoding="utf-8")

    store = JsonConfigStore(path=path)
    assert store.get_upload_url() == ""
    assert store.get_content_type() == "application/json"
