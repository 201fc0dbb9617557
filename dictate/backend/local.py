"""File-backed backend that keeps settings and history on local disk."""

import logging
from typing import List, Optional

from ..events.bus import EventBus
from ..models.events import BackendEvent
from ..models.settings import Settings
from ..models.transcription import TranscriptionEntry
from ..storage.file_manager import FileManager
from .base import AbstractDictationBackend, BackendError

logger = logging.getLogger(__name__)

API_KEY_MISSING_MESSAGE = "API key not configured. Please set your Soniox API key in settings."


class LocalBackend(AbstractDictationBackend):
    """Backend persisting to JSON files and signalling the recording lifecycle.

    Audio capture and recognition live outside this package; whatever drives
    them publishes partial-text, session-complete and error events on the
    same bus.
    """

    def __init__(self, bus: EventBus, file_manager: FileManager):
        """Initialize local backend.

        Args:
            bus: Event bus to publish lifecycle events on
            file_manager: Storage for settings and transcriptions
        """
        self.bus = bus
        self.file_manager = file_manager
        self.settings = file_manager.load_settings()
        self.is_recording = False
        logger.info(f"LocalBackend initialized (hotkey: {self.settings.hotkey})")

    async def get_settings(self) -> Settings:
        return Settings.from_dict(self.settings.to_dict())

    async def save_settings(self, settings: Settings) -> None:
        old_hotkey = self.settings.hotkey
        new_settings = Settings.from_dict(settings.to_dict())
        try:
            self.file_manager.save_settings(new_settings)
        except Exception as e:
            raise BackendError(f"Failed to save settings: {e}")
        self.settings = new_settings

        if old_hotkey != settings.hotkey:
            logger.info(f"Hotkey changed from '{old_hotkey}' to '{settings.hotkey}'")

    async def start_recording(self) -> None:
        logger.info("start_recording called")
        if self.is_recording:
            raise BackendError("Already recording")

        if not self.settings.api_key:
            logger.error("API key is empty")
            self.bus.publish(BackendEvent.RECORDING_ERROR, API_KEY_MISSING_MESSAGE)
            raise BackendError("API key not configured")

        self.is_recording = True
        self.bus.publish(BackendEvent.RECORDING_STARTED)

    async def stop_recording(self) -> None:
        logger.info("stop_recording called")
        self.is_recording = False
        self.bus.publish(BackendEvent.RECORDING_STOPPED)

    async def toggle_recording(self) -> None:
        """Hotkey action: stop when recording, start otherwise."""
        if self.is_recording:
            await self.stop_recording()
        else:
            await self.start_recording()

    def fail_recording(self, message: str, event: Optional[BackendEvent] = None) -> None:
        """Report a capture or recognition failure for the running session.

        Args:
            message: Human-readable failure description
            event: RECORDING_ERROR (default) or TRANSCRIPTION_ERROR
        """
        event = event or BackendEvent.RECORDING_ERROR
        if event not in (BackendEvent.RECORDING_ERROR, BackendEvent.TRANSCRIPTION_ERROR):
            raise ValueError(f"Not an error event: {event.value}")

        logger.error(f"Recording failed: {message}")
        self.bus.publish(event, message)
        if self.is_recording:
            self.is_recording = False
            self.bus.publish(BackendEvent.RECORDING_STOPPED)

    async def save_transcription(self, text: str, language_hints: List[str]) -> None:
        try:
            self.file_manager.add_transcription(text, language_hints)
        except Exception as e:
            raise BackendError(f"Failed to save transcription: {e}")

    async def get_transcriptions(self) -> List[TranscriptionEntry]:
        return self.file_manager.load_transcriptions()

    async def clear_transcriptions(self) -> None:
        try:
            self.file_manager.clear_transcriptions()
        except Exception as e:
            raise BackendError(f"Failed to clear transcriptions: {e}")
