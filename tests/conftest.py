"""Pytest configuration and fixtures for Desktop Dictate tests."""

import asyncio
import logging
import tempfile
from typing import List, Optional

import pytest
from pubsub import pub

from dictate.backend.base import AbstractDictationBackend, BackendError
from dictate.events.bus import EventBus
from dictate.models.settings import Settings
from dictate.models.transcription import TranscriptionEntry


# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class FakeBackend(AbstractDictationBackend):
    """In-memory backend recording every command it receives.

    Commands named in ``failing`` raise ``BackendError``. Fetches can be
    held open with ``hold_next_fetch()`` to deliver responses out of order;
    a held fetch returns the entries as they were when it was issued.
    """

    def __init__(self):
        self.settings = Settings()
        self.entries: List[TranscriptionEntry] = []
        self.saved = []
        self.calls: List[str] = []
        self.failing = set()
        self._fetch_gates: List[asyncio.Event] = []
        self._clock = 1_700_000_000

    def _check(self, command: str) -> None:
        self.calls.append(command)
        if command in self.failing:
            raise BackendError(f"{command} failed")

    def hold_next_fetch(self) -> asyncio.Event:
        gate = asyncio.Event()
        self._fetch_gates.append(gate)
        return gate

    async def get_settings(self) -> Settings:
        self._check("get_settings")
        return self.settings

    async def save_settings(self, settings: Settings) -> None:
        self._check("save_settings")
        self.settings = settings

    async def start_recording(self) -> None:
        self._check("start_recording")

    async def stop_recording(self) -> None:
        self._check("stop_recording")

    async def save_transcription(self, text: str, language_hints: List[str]) -> None:
        self._check("save_transcription")
        self.saved.append((text, list(language_hints)))
        self._clock += 1
        self.entries.insert(0, TranscriptionEntry(text, self._clock, ",".join(language_hints)))

    async def get_transcriptions(self) -> List[TranscriptionEntry]:
        self._check("get_transcriptions")
        snapshot = list(self.entries)
        if self._fetch_gates:
            gate = self._fetch_gates.pop(0)
            await gate.wait()
        return snapshot

    async def clear_transcriptions(self) -> None:
        self._check("clear_transcriptions")
        self.entries = []


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def bus():
    """Event bus on the default publisher, cleared after each test."""
    yield EventBus()
    pub.unsubAll()


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def backend_factory():
    """Factory for additional independent fake backends."""
    return FakeBackend


@pytest.fixture
def sample_entries():
    return [
        TranscriptionEntry(text="second note", timestamp=1_700_000_200, language="en"),
        TranscriptionEntry(text="first note", timestamp=1_700_000_100, language="en,de"),
    ]

