"""Console UI pieces: screens, hotkey recorder and settings form."""

from .hotkey_recorder import HotkeyRecorder, describe_chord, is_custom_chord, HOTKEY_PRESETS
from .settings_form import SettingsForm, LanguageSelection, LANGUAGES
from .home_screen import HomeScreen
from .history_view import HistoryView, format_timestamp

__all__ = [
    "HotkeyRecorder",
    "describe_chord",
    "is_custom_chord",
    "HOTKEY_PRESETS",
    "SettingsForm",
    "LanguageSelection",
    "LANGUAGES",
    "HomeScreen",
    "HistoryView",
    "format_timestamp",
]
