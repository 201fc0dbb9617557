"""Hotkey capture data models."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class KeyDown:
    """A raw key-down event as delivered by the UI toolkit."""
    key: str  # Key name, e.g. "D", " ", "F5", "Shift"
    ctrl: bool = False
    meta: bool = False
    alt: bool = False
    shift: bool = False


@dataclass
class ChordCapture:
    """In-progress capture state of the hotkey recorder."""
    capturing: bool = False
    pressed_keys: List[str] = field(default_factory=list)
