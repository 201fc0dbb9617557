"""Local mirror of the persisted transcription history."""

import itertools
import logging
from typing import List

from ..backend.base import AbstractDictationBackend
from ..models.transcription import TranscriptionEntry

logger = logging.getLogger(__name__)


class HistoryCache:
    """Caches transcription history and resynchronizes it after mutations.

    Every fetch and clear takes a request id when it is issued. A response
    is applied only if its id is newer than the last applied one, so a slow
    fetch issued before a clear cannot bring cleared entries back.
    """

    def __init__(self, backend: AbstractDictationBackend):
        """Initialize history cache.

        Args:
            backend: Backend providing the transcription commands
        """
        self.backend = backend
        self._entries: List[TranscriptionEntry] = []
        self._request_ids = itertools.count(1)
        self._applied_request_id = 0

    @property
    def entries(self) -> List[TranscriptionEntry]:
        """Cached entries in backend order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    async def fetch_all(self) -> List[TranscriptionEntry]:
        """Re-fetch the full history from the backend.

        Returns:
            The cached entries after the fetch; unchanged if the fetch failed
            or its response was superseded by a newer request
        """
        request_id = next(self._request_ids)
        try:
            entries = await self.backend.get_transcriptions()
        except Exception as e:
            logger.error(f"Failed to load transcription history: {e}")
            return self.entries

        if self._apply(request_id, list(entries)):
            logger.debug(f"History refreshed: {len(entries)} entries (request {request_id})")
        else:
            logger.debug(f"Discarding stale history response (request {request_id}, "
                         f"applied {self._applied_request_id})")
        return self.entries

    async def append(self, text: str, language_hints: List[str]) -> bool:
        """Persist one transcription, then resynchronize.

        Args:
            text: Normalized transcription text
            language_hints: Language hints active for the session

        Returns:
            True if the entry was saved
        """
        try:
            await self.backend.save_transcription(text, list(language_hints))
        except Exception as e:
            logger.error(f"Failed to save transcription: {e}")
            return False

        await self.fetch_all()
        return True

    async def clear_all(self) -> bool:
        """Clear the persisted history, then the local cache.

        Returns:
            True if the history was cleared; on failure nothing changes
        """
        request_id = next(self._request_ids)
        try:
            await self.backend.clear_transcriptions()
        except Exception as e:
            logger.error(f"Failed to clear history: {e}")
            return False

        self._apply(request_id, [])
        logger.info("Transcription history cleared")
        await self.fetch_all()
        return True

    def _apply(self, request_id: int, entries: List[TranscriptionEntry]) -> bool:
        if request_id <= self._applied_request_id:
            return False
        self._entries = entries
        self._applied_request_id = request_id
        return True
