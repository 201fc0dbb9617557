"""Unit tests for the console home screen and history view."""

import io
from datetime import datetime

import pytest
from rich.console import Console
from rich.table import Table
from rich.text import Text

from dictate.models.session import SessionSnapshot, SessionState
from dictate.models.settings import Settings
from dictate.models.transcription import TranscriptionEntry
from dictate.ui.history_view import HistoryView, format_timestamp
from dictate.ui.home_screen import HomeScreen


NOW = 1_700_000_000


def render_to_text(renderable) -> str:
    console = Console(file=io.StringIO(), width=100, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


@pytest.mark.unit
class TestFormatTimestamp:
    """Test cases for relative timestamps."""

    @pytest.mark.parametrize("age,expected", [
        (0, "Just now"),
        (59, "Just now"),
        (60, "1m ago"),
        (59 * 60, "59m ago"),
        (3600, "1h ago"),
        (23 * 3600 + 3599, "23h ago"),
        (86400, "1d ago"),
        (6 * 86400, "6d ago"),
    ])
    def test_relative_ages(self, age, expected):
        assert format_timestamp(NOW - age, now=NOW) == expected

    def test_older_than_a_week_shows_date(self):
        timestamp = NOW - 8 * 86400

        expected = datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d")
        assert format_timestamp(timestamp, now=NOW) == expected


@pytest.mark.unit
class TestHistoryView:
    """Test cases for HistoryView."""

    def test_empty_history(self):
        rendered = HistoryView().render([])

        assert isinstance(rendered, Text)
        assert "No transcriptions yet" in rendered.plain

    def test_entries_in_given_order(self, sample_entries):
        rendered = HistoryView().render(sample_entries, now=1_700_000_230)

        assert isinstance(rendered, Table)
        assert rendered.row_count == 2
        output = render_to_text(rendered)
        assert output.index("second note") < output.index("first note")
        assert "Just now" in output
        assert "2m ago" in output
        assert "en,de" in output

    def test_missing_language_shown_as_na(self):
        output = render_to_text(HistoryView().render([TranscriptionEntry("text", NOW)], now=NOW))

        assert "N/A" in output


@pytest.mark.unit
class TestHomeScreen:
    """Test cases for HomeScreen."""

    def test_idle_screen(self):
        output = render_to_text(HomeScreen().render(SessionSnapshot(SessionState.IDLE), Settings()))

        assert "Ready" in output
        assert "Press hotkey to start dictating..." in output
        assert "Preview:" in output
        assert "Insert" in output
        assert "en" in output

    def test_recording_screen_shows_partial_text(self):
        snapshot = SessionSnapshot(SessionState.RECORDING, partial_text="hello there")

        output = render_to_text(HomeScreen().render(snapshot, Settings(hotkey="CommandOrControl+Shift+D")))

        assert "Recording..." in output
        assert "hello there" in output
        assert "Ctrl+Shift+D" in output

    def test_last_session_and_auto_detect(self):
        snapshot = SessionSnapshot(SessionState.IDLE, final_text="all done.")

        output = render_to_text(HomeScreen().render(snapshot, Settings(language_hints=[])))

        assert "Last Session:" in output
        assert "all done." in output
        assert "Auto-detect" in output

    def test_error_message_shown(self):
        snapshot = SessionSnapshot(SessionState.ERROR, error_message="mic busy")

        output = render_to_text(HomeScreen().render(snapshot, Settings()))

        assert "mic busy" in output
