from __future__ import annotations

from models import SessionState, StateKind


def test_descriptions_match_label_texts() -> None:
    assert SessionState.ready().description == "Ready"
    assert SessionState.recording(3).description == "Recording: 3"
    assert SessionState.recording(3.0).description == "Recording: 3.0"
    assert SessionState.uploading(42).description == "Uploading: 42 %"
    assert SessionState.error("offline").description == "Error: offline"


def test_start_enabled_only_in_ready_or_error() -> None:
    enabled = {
        StateKind.READY: SessionState.ready().start_enabled,
        StateKind.RECORDING: SessionState.recording(1).start_enabled,
        StateKind.UPLOADING: SessionState.uploading(10).start_enabled,
        StateKind.ERROR: SessionState.error("x").start_enabled,
    }

    assert enabled == {
        StateKind.READY: True,
        StateKind.RECORDING: False,
        StateKind.UPLOADING: False,
        StateKind.ERROR: True,
    }


def test_states_compare_by_kind_and_payload() -> None:
    assert SessionState.recording(1) == SessionState.recording(1.0)
    assert SessionState.recording(1) != SessionState.recording(2)
    assert SessionState.uploading(0) != SessionState.recording(0)
