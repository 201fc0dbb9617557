"""Session-related data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SessionState(Enum):
    """Lifecycle state of the dictation session."""
    IDLE = "idle"
    RECORDING = "recording"
    STOPPING = "stopping"  # Stopped, still awaiting session-complete
    ERROR = "error"


LISTENING_PLACEHOLDER = "Listening..."
IDLE_PLACEHOLDER = "Press hotkey to start dictating..."


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time view of the session as the UI should show it."""
    state: SessionState
    partial_text: str = ""
    final_text: str = ""
    error_message: Optional[str] = None

    @property
    def recording(self) -> bool:
        return self.state == SessionState.RECORDING

    @property
    def display_text(self) -> str:
        """Text for the preview area.

        While recording the partial transcript wins; afterwards the last
        finalized text stays on screen until the next session starts.
        """
        if self.recording:
            return self.partial_text or LISTENING_PLACEHOLDER
        if self.final_text:
            return self.final_text
        return IDLE_PLACEHOLDER

    @property
    def preview_label(self) -> str:
        if self.recording:
            return "Recording..."
        return "Last Session:" if self.final_text else "Preview:"

    @property
    def status_label(self) -> str:
        return "Recording..." if self.recording else "Ready"
