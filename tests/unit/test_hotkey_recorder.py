"""Unit tests for the hotkey chord recorder."""

import pytest

from dictate.models.hotkey import KeyDown
from dictate.ui.hotkey_recorder import (
    HotkeyRecorder,
    chord_tokens,
    describe_chord,
    is_custom_chord,
)


@pytest.mark.unit
class TestChordTokens:
    """Test cases for encoding a single key-down."""

    def test_modifiers_in_fixed_order(self):
        event = KeyDown(key="D", shift=True, alt=True, ctrl=True)
        assert chord_tokens(event) == ["CommandOrControl", "Alt", "Shift", "D"]

    def test_meta_maps_to_command_or_control(self):
        assert chord_tokens(KeyDown(key="K", meta=True)) == ["CommandOrControl", "K"]

    def test_space_token(self):
        assert chord_tokens(KeyDown(key=" ", ctrl=True, shift=True)) == ["CommandOrControl", "Shift", "Space"]

    @pytest.mark.parametrize("key,flags,expected", [
        ("Control", {"ctrl": True}, ["CommandOrControl"]),
        ("Meta", {"meta": True}, ["CommandOrControl"]),
        ("Alt", {"alt": True}, ["Alt"]),
        ("Shift", {"shift": True}, ["Shift"]),
    ])
    def test_modifier_key_alone_is_not_repeated(self, key, flags, expected):
        assert chord_tokens(KeyDown(key=key, **flags)) == expected

    def test_plain_key(self):
        assert chord_tokens(KeyDown(key="F5")) == ["F5"]


@pytest.mark.unit
class TestHotkeyRecorder:
    """Test cases for HotkeyRecorder."""

    def test_records_ctrl_shift_d(self):
        recorder = HotkeyRecorder("Insert")
        recorder.start()
        recorder.key_down(KeyDown(key="D", ctrl=True, shift=True))

        assert recorder.stop() == "CommandOrControl+Shift+D"
        assert recorder.chord == "CommandOrControl+Shift+D"
        assert not recorder.capturing

    def test_stop_without_keys_keeps_previous_chord(self):
        recorder = HotkeyRecorder("F9")
        recorder.start()

        assert recorder.stop() == "F9"
        assert recorder.chord == "F9"
        assert not recorder.capturing

    def test_latest_key_down_replaces_previous(self):
        recorder = HotkeyRecorder()
        recorder.start()
        recorder.key_down(KeyDown(key="A", ctrl=True))
        recorder.key_down(KeyDown(key="B", alt=True))

        assert recorder.pressed_keys == ["Alt", "B"]
        assert recorder.stop() == "Alt+B"

    def test_start_clears_previous_capture(self):
        recorder = HotkeyRecorder()
        recorder.start()
        recorder.key_down(KeyDown(key="A"))
        recorder.start()

        assert recorder.pressed_keys == []
        assert recorder.status_text == "Press any keys..."

    def test_cancel_discards_capture(self):
        recorder = HotkeyRecorder("F2")
        recorder.start()
        recorder.key_down(KeyDown(key="X", shift=True))
        recorder.cancel()

        assert recorder.chord == "F2"
        assert recorder.pressed_keys == []
        assert not recorder.capturing

    def test_key_down_ignored_when_idle(self):
        recorder = HotkeyRecorder("F2")

        assert recorder.key_down(KeyDown(key="X")) is None
        assert recorder.pressed_keys == []
        assert recorder.stop() == "F2"

    def test_status_text_while_capturing(self):
        recorder = HotkeyRecorder()
        recorder.start()
        recorder.key_down(KeyDown(key=" ", ctrl=True, alt=True))

        assert recorder.status_text == "CommandOrControl + Alt + Space"


@pytest.mark.unit
class TestChordDisplay:
    """Test cases for preset/custom chord display."""

    def test_preset_uses_friendly_label(self):
        assert describe_chord("CommandOrControl+Shift+D") == "Ctrl+Shift+D"
        assert describe_chord("F5") == "F5"
        assert not is_custom_chord("CommandOrControl+Alt+Space")

    def test_custom_chord_shown_literally(self):
        assert describe_chord("Alt+Shift+Q") == "Alt+Shift+Q"
        assert is_custom_chord("Alt+Shift+Q")
