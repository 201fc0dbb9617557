"""Data models for the Desktop Dictate client."""

from .events import BackendEvent
from .session import SessionState, SessionSnapshot
from .transcription import TranscriptionEntry
from .settings import Settings
from .hotkey import KeyDown, ChordCapture

__all__ = [
    "BackendEvent",
    "SessionState",
    "SessionSnapshot",
    "TranscriptionEntry",
    "Settings",
    "KeyDown",
    "ChordCapture",
]
