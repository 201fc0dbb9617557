"""Abstract base class for the dictation backend."""

from abc import ABC, abstractmethod
from typing import List
import logging

from ..models.settings import Settings
from ..models.transcription import TranscriptionEntry

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """A backend command failed."""


class AbstractDictationBackend(ABC):
    """Commands the client can invoke on the recognition backend.

    Lifecycle and text events travel the other way, through the
    ``EventBus`` the backend publishes on.
    """

    @abstractmethod
    async def get_settings(self) -> Settings:
        """Return the persisted settings."""
        pass

    @abstractmethod
    async def save_settings(self, settings: Settings) -> None:
        """Persist settings and apply them (e.g. re-register the hotkey)."""
        pass

    @abstractmethod
    async def start_recording(self) -> None:
        """Start a recording session.

        Raises:
            BackendError: If the session could not be started
        """
        pass

    @abstractmethod
    async def stop_recording(self) -> None:
        """Stop the current recording session.

        Raises:
            BackendError: If the stop request failed
        """
        pass

    @abstractmethod
    async def save_transcription(self, text: str, language_hints: List[str]) -> None:
        """Persist one completed transcription."""
        pass

    @abstractmethod
    async def get_transcriptions(self) -> List[TranscriptionEntry]:
        """Return persisted transcriptions in storage order."""
        pass

    @abstractmethod
    async def clear_transcriptions(self) -> None:
        """Remove all persisted transcriptions."""
        pass
