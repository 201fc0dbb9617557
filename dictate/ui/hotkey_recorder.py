"""Hotkey chord recorder turning key-down events into a chord string."""

import logging
from typing import List, Optional

from ..models.hotkey import KeyDown, ChordCapture

logger = logging.getLogger(__name__)


CONTROL_TOKEN = "CommandOrControl"
ALT_TOKEN = "Alt"
SHIFT_TOKEN = "Shift"
SPACE_TOKEN = "Space"
CHORD_SEPARATOR = "+"

# Key names that only act as modifiers
MODIFIER_KEYS = frozenset({"Control", "Alt", "Shift", "Meta"})

HOTKEY_PRESETS = [
    ("Insert", "Insert"),
    ("F1", "F1"),
    ("F2", "F2"),
    ("F3", "F3"),
    ("F4", "F4"),
    ("F5", "F5"),
    ("F6", "F6"),
    ("F7", "F7"),
    ("F8", "F8"),
    ("F9", "F9"),
    ("F10", "F10"),
    ("F11", "F11"),
    ("F12", "F12"),
    ("Home", "Home"),
    ("End", "End"),
    ("CommandOrControl+Shift+D", "Ctrl+Shift+D"),
    ("CommandOrControl+Shift+S", "Ctrl+Shift+S"),
    ("CommandOrControl+Shift+V", "Ctrl+Shift+V"),
    ("CommandOrControl+Shift+Space", "Ctrl+Shift+Space"),
    ("CommandOrControl+Alt+Space", "Ctrl+Alt+Space"),
    ("CommandOrControl+Alt+Shift+D", "Ctrl+Alt+Shift+D"),
]

_PRESET_LABELS = dict(HOTKEY_PRESETS)


def chord_tokens(event: KeyDown) -> List[str]:
    """Encode one key-down as chord tokens.

    Modifiers always come first in a fixed order regardless of the order
    they were pressed in, followed by the key itself unless it is a
    modifier.
    """
    tokens = []
    if event.ctrl or event.meta:
        tokens.append(CONTROL_TOKEN)
    if event.alt:
        tokens.append(ALT_TOKEN)
    if event.shift:
        tokens.append(SHIFT_TOKEN)

    key = SPACE_TOKEN if event.key == " " else event.key
    if key and key not in MODIFIER_KEYS:
        tokens.append(key)
    return tokens


def is_custom_chord(chord: str) -> bool:
    return chord not in _PRESET_LABELS


def describe_chord(chord: str) -> str:
    """Friendly label for preset chords, the chord itself otherwise."""
    return _PRESET_LABELS.get(chord, chord)


class HotkeyRecorder:
    """Captures a hotkey chord from key-down events.

    ``start()`` begins a capture, each key-down replaces the captured
    combination, and ``stop()`` commits it. ``cancel()`` or a capture with
    no key-down leaves the committed chord untouched.
    """

    def __init__(self, chord: str = ""):
        """Initialize hotkey recorder.

        Args:
            chord: Currently committed chord
        """
        self.chord = chord
        self.capture = ChordCapture()

    @property
    def capturing(self) -> bool:
        return self.capture.capturing

    @property
    def pressed_keys(self) -> List[str]:
        return list(self.capture.pressed_keys)

    @property
    def status_text(self) -> str:
        if self.capture.pressed_keys:
            return " + ".join(self.capture.pressed_keys)
        return "Press any keys..."

    def start(self) -> None:
        self.capture = ChordCapture(capturing=True)
        logger.debug("Hotkey capture started")

    def key_down(self, event: KeyDown) -> Optional[List[str]]:
        """Record a key-down while capturing.

        Args:
            event: Raw key-down event

        Returns:
            The captured tokens, or None if not capturing
        """
        if not self.capture.capturing:
            return None

        tokens = chord_tokens(event)
        if tokens:
            self.capture.pressed_keys = tokens
        return self.pressed_keys

    def stop(self) -> str:
        """Finish capturing and commit the captured chord, if any.

        Returns:
            The committed chord
        """
        if self.capture.pressed_keys:
            self.chord = CHORD_SEPARATOR.join(self.capture.pressed_keys)
            logger.info(f"Hotkey chord recorded: {self.chord}")
        self.capture.capturing = False
        return self.chord

    def cancel(self) -> None:
        self.capture = ChordCapture()
        logger.debug("Hotkey capture cancelled")
