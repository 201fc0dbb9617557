"""Event models for the backend pub/sub event bus."""

from enum import Enum


TOPIC_ROOT = "backend"


class BackendEvent(Enum):
    """Lifecycle and text events emitted by the recognition backend."""
    RECORDING_STARTED = "recording-started"
    RECORDING_STOPPED = "recording-stopped"
    PARTIAL_TEXT = "partial-text"
    TRANSCRIBED_TEXT = "transcribed-text"  # Typing side-channel, not used by the session core
    SESSION_COMPLETE = "session-complete"
    TRANSCRIPTION_ERROR = "transcription-error"
    RECORDING_ERROR = "recording-error"

    @property
    def topic(self) -> str:
        """Pub/sub topic name, e.g. 'backend.partial_text'."""
        return f"{TOPIC_ROOT}.{self.value.replace('-', '_')}"

    @property
    def has_payload(self) -> bool:
        """Whether the event carries a single string payload."""
        return self not in (BackendEvent.RECORDING_STARTED, BackendEvent.RECORDING_STOPPED)

    @classmethod
    def from_tag(cls, tag: str) -> "BackendEvent":
        """Look up an event by its wire tag (e.g. 'session-complete').

        Raises:
            ValueError: If the tag is not a known backend event
        """
        try:
            return cls(tag)
        except ValueError:
            raise ValueError(f"Unknown backend event: {tag!r}")
