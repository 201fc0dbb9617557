"""Unit tests for event script replay."""

import asyncio
from pathlib import Path

import pytest

from dictate.models.events import BackendEvent
from dictate.replay import load_event_script, replay_events, summarize
from dictate.services.session_controller import SessionController


CANONICAL_SCRIPT = """
- event: recording-started
- event: partial-text
  payload: hello
- event: recording-stopped
- event: session-complete
  payload: "hello world ."
"""


def write_script(directory, text) -> str:
    path = Path(directory) / "events.yaml"
    path.write_text(text, encoding='utf-8')
    return str(path)


@pytest.mark.unit
class TestLoadEventScript:
    """Test cases for load_event_script."""

    def test_parses_events_in_order(self, temp_data_dir):
        events = load_event_script(write_script(temp_data_dir, CANONICAL_SCRIPT))

        assert events == [
            (BackendEvent.RECORDING_STARTED, None),
            (BackendEvent.PARTIAL_TEXT, "hello"),
            (BackendEvent.RECORDING_STOPPED, None),
            (BackendEvent.SESSION_COMPLETE, "hello world ."),
        ]

    def test_payload_coerced_to_string(self, temp_data_dir):
        events = load_event_script(write_script(temp_data_dir, "- event: partial-text\n  payload: 42\n"))

        assert events == [(BackendEvent.PARTIAL_TEXT, "42")]

    def test_missing_script(self, temp_data_dir):
        with pytest.raises(FileNotFoundError):
            load_event_script(str(Path(temp_data_dir) / "nope.yaml"))

    @pytest.mark.parametrize("text", [
        "event: recording-started",
        "- recording-started",
        "- event: volume-level",
        "- event: session-complete",
        "- [unclosed",
    ])
    def test_malformed_scripts(self, temp_data_dir, text):
        with pytest.raises(ValueError):
            load_event_script(write_script(temp_data_dir, text))


@pytest.mark.unit
class TestReplayEvents:
    """Test cases for replay_events."""

    def test_replay_canonical_session(self, temp_data_dir, fake_backend, bus):
        controller = SessionController(fake_backend, bus)
        events = load_event_script(write_script(temp_data_dir, CANONICAL_SCRIPT))

        snapshot = asyncio.run(replay_events(controller, bus, events))

        assert summarize(snapshot) == {
            "state": "idle",
            "recording": False,
            "display_text": "hello world.",
            "error_message": None,
        }
        assert fake_backend.saved == [("hello world.", ["en"])]

    def test_replay_error_session(self, fake_backend, bus):
        controller = SessionController(fake_backend, bus)
        events = [
            (BackendEvent.RECORDING_STARTED, None),
            (BackendEvent.RECORDING_ERROR, "mic busy"),
            (BackendEvent.RECORDING_STOPPED, None),
        ]

        snapshot = asyncio.run(replay_events(controller, bus, events))

        assert summarize(snapshot)["state"] == "error"
        assert snapshot.error_message == "mic busy"
