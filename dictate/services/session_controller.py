"""Session controller driving the dictation state machine from backend events."""

import asyncio
import logging
from typing import Optional, Set, Callable

from ..backend.base import AbstractDictationBackend
from ..events.bus import EventBus
from ..models.events import BackendEvent
from ..models.session import SessionState, SessionSnapshot
from ..models.settings import Settings
from ..text.normalizer import normalize
from .history_cache import HistoryCache

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionSnapshot], None]


class SessionController:
    """Tracks the dictation session and hands finished text to history.

    Backend events arrive through the event bus and are handled to
    completion without awaiting anything. Persistence runs in background
    tasks whose outcome never changes the session state.

    ``recording-stopped`` and ``session-complete`` may arrive in either
    order. Stopping before the final text arrives moves the session to
    STOPPING; whichever of the two comes last returns it to IDLE.
    """

    def __init__(self,
                 backend: AbstractDictationBackend,
                 bus: EventBus,
                 history: Optional[HistoryCache] = None,
                 settings: Optional[Settings] = None,
                 on_change: Optional[StateListener] = None):
        """Initialize session controller and subscribe to backend events.

        Args:
            backend: Backend receiving start/stop/persistence commands
            bus: Event bus the backend publishes on
            history: History cache to persist completed sessions into
            settings: Initial settings (language hints for persistence)
            on_change: Called with a fresh snapshot after every state change
        """
        self.backend = backend
        self.bus = bus
        self.history = history if history is not None else HistoryCache(backend)
        self.settings = settings or Settings()
        self.on_change = on_change

        self.state = SessionState.IDLE
        self.partial_text = ""
        self.final_text = ""
        self.error_message: Optional[str] = None
        self._awaiting_final = False

        self._pending: Set[asyncio.Future] = set()
        self._subscribe()
        logger.info("SessionController initialized")

    @property
    def recording(self) -> bool:
        return self.state == SessionState.RECORDING

    def snapshot(self) -> SessionSnapshot:
        """Current session state as an immutable snapshot."""
        return SessionSnapshot(
            state=self.state,
            partial_text=self.partial_text,
            final_text=self.final_text,
            error_message=self.error_message
        )

    def _handlers(self):
        return [
            (BackendEvent.RECORDING_STARTED, self._on_recording_started),
            (BackendEvent.RECORDING_STOPPED, self._on_recording_stopped),
            (BackendEvent.PARTIAL_TEXT, self._on_partial_text),
            (BackendEvent.TRANSCRIBED_TEXT, self._on_transcribed_text),
            (BackendEvent.SESSION_COMPLETE, self._on_session_complete),
            (BackendEvent.TRANSCRIPTION_ERROR, self._on_transcription_error),
            (BackendEvent.RECORDING_ERROR, self._on_recording_error),
        ]

    def _subscribe(self) -> None:
        for event, handler in self._handlers():
            self.bus.subscribe(event, handler)

    def close(self) -> None:
        """Stop listening to backend events."""
        for event, handler in self._handlers():
            self.bus.unsubscribe(event, handler)
        logger.info("SessionController closed")

    # Backend event handlers

    def _on_recording_started(self) -> None:
        logger.info("Recording started")
        self.state = SessionState.RECORDING
        self.error_message = None
        self.final_text = ""
        self.partial_text = ""
        self._awaiting_final = True
        self._notify()

    def _on_recording_stopped(self) -> None:
        if self.state != SessionState.RECORDING:
            logger.debug(f"Ignoring recording-stopped in state {self.state.value}")
            return

        if self._awaiting_final:
            logger.info("Recording stopped, awaiting final transcript")
            self.state = SessionState.STOPPING
        else:
            logger.info("Recording stopped")
            self.state = SessionState.IDLE
        self._notify()

    def _on_partial_text(self, payload: str) -> None:
        if self.state != SessionState.RECORDING:
            logger.debug(f"Ignoring partial text in state {self.state.value}")
            return
        # Each payload is the full transcript so far
        self.partial_text = payload
        self._notify()

    def _on_transcribed_text(self, payload: str) -> None:
        # Typing deltas are consumed elsewhere
        logger.debug(f"Ignoring transcribed-text ({len(payload)} chars)")

    def _on_session_complete(self, payload: str) -> None:
        if not self._awaiting_final:
            logger.warning("Ignoring session-complete without an open session")
            return
        self._awaiting_final = False

        text = normalize(payload)
        if text:
            self.final_text = text
            logger.info(f"Session complete: {len(text)} chars")
        else:
            logger.info("Session complete with no speech, nothing to save")
        self.partial_text = ""

        if self.state == SessionState.STOPPING:
            self.state = SessionState.IDLE
        self._notify()

        # Persist only after the session state is settled
        if text:
            self._spawn(self.history.append(text, list(self.settings.language_hints)))

    def _on_transcription_error(self, payload: str) -> None:
        self._fail("Transcription error", payload)

    def _on_recording_error(self, payload: str) -> None:
        self._fail("Recording error", payload)

    def _fail(self, kind: str, message: str) -> None:
        logger.error(f"{kind}: {message}")
        # An error ends recording even if recording-stopped never arrives
        self.state = SessionState.ERROR
        self.error_message = message
        self._notify()

    # Commands

    async def start_recording(self) -> bool:
        """Ask the backend to start recording.

        The session only enters RECORDING once the backend confirms with
        recording-started.

        Returns:
            True if the backend accepted the request
        """
        self.error_message = None
        self._notify()
        try:
            await self.backend.start_recording()
            return True
        except Exception as e:
            logger.error(f"Failed to start recording: {e}")
            self.error_message = str(e)
            self._notify()
            return False

    async def stop_recording(self) -> None:
        """Ask the backend to stop recording; failures are only logged."""
        try:
            await self.backend.stop_recording()
        except Exception as e:
            logger.error(f"Failed to stop recording: {e}")

    async def toggle_recording(self) -> None:
        if self.recording:
            await self.stop_recording()
        else:
            await self.start_recording()

    async def load_settings(self) -> Settings:
        """Load settings and history from the backend at startup.

        Returns:
            The settings in effect (defaults if loading failed)
        """
        try:
            self.settings = await self.backend.get_settings()
        except Exception as e:
            logger.error(f"Failed to load settings: {e}")
        await self.history.fetch_all()
        return self.settings

    async def save_settings(self, settings: Settings) -> bool:
        """Apply settings locally, then persist them.

        Returns:
            True if the backend stored the settings
        """
        self.settings = settings
        try:
            await self.backend.save_settings(settings)
            return True
        except Exception as e:
            logger.error(f"Failed to save settings: {e}")
            return False

    async def clear_history(self) -> bool:
        return await self.history.clear_all()

    async def drain(self) -> None:
        """Wait for in-flight persistence tasks to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _spawn(self, coro) -> None:
        task = asyncio.ensure_future(coro)
        self._pending.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Future) -> None:
        self._pending.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Persistence task failed: {task.exception()}")

    def _notify(self) -> None:
        if self.on_change:
            self.on_change(self.snapshot())
