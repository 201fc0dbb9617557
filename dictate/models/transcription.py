"""Transcription-related data models."""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class TranscriptionEntry:
    """A completed dictation session as persisted in history."""
    text: str
    timestamp: int  # Unix timestamp in seconds; may collide between entries
    language: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranscriptionEntry":
        return cls(
            text=str(data["text"]),
            timestamp=int(data["timestamp"]),
            language=str(data.get("language") or "")
        )
