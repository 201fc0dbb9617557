"""Settings data model shared with the backend."""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any


DEFAULT_HOTKEY = "Insert"
DEFAULT_LANGUAGE_HINTS = ["en"]


@dataclass
class Settings:
    """User settings exchanged with the backend.

    ``language_restrictions`` is None exactly when restrictions are
    disabled; an empty list is normalized to None.
    """
    api_key: str = ""
    hotkey: str = DEFAULT_HOTKEY
    language_hints: List[str] = field(default_factory=lambda: list(DEFAULT_LANGUAGE_HINTS))
    language_restrictions: Optional[List[str]] = None

    def __post_init__(self):
        self.language_hints = list(self.language_hints)
        if self.language_restrictions is not None:
            self.language_restrictions = list(self.language_restrictions) or None

    @property
    def restrictions_enabled(self) -> bool:
        return self.language_restrictions is not None

    def to_dict(self) -> Dict[str, Any]:
        """Persisted shape of the settings."""
        return {
            "api_key": self.api_key,
            "hotkey": self.hotkey,
            "language_hints": list(self.language_hints),
            "language_restrictions": (
                list(self.language_restrictions) if self.language_restrictions is not None else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Build settings from the persisted shape.

        Raises:
            ValueError: If a field has the wrong type
        """
        hints = data.get("language_hints", DEFAULT_LANGUAGE_HINTS)
        restrictions = data.get("language_restrictions")
        if not isinstance(hints, list):
            raise ValueError(f"language_hints must be a list, got {type(hints).__name__}")
        if restrictions is not None and not isinstance(restrictions, list):
            raise ValueError(f"language_restrictions must be a list or null, got {type(restrictions).__name__}")

        return cls(
            api_key=str(data.get("api_key", "")),
            hotkey=str(data.get("hotkey", DEFAULT_HOTKEY)),
            language_hints=[str(code) for code in hints],
            language_restrictions=[str(code) for code in restrictions] if restrictions is not None else None
        )
