"""File management module for settings and transcription history storage."""

import json
import logging
import time
from pathlib import Path
from typing import Dict, Any, Optional, List

from ..models.settings import Settings
from ..models.transcription import TranscriptionEntry


logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"
TRANSCRIPTIONS_FILE = "transcriptions.json"
DEFAULT_MAX_ENTRIES = 100


class FileManager:
    """Manages JSON files holding settings and transcription history."""

    def __init__(self, data_dir: str = "./data", max_entries: int = DEFAULT_MAX_ENTRIES):
        """Initialize file manager with data directory.

        Args:
            data_dir: Base directory for storing all data
            max_entries: Number of most recent transcriptions to keep
        """
        self.data_dir = Path(data_dir)
        self.settings_file = self.data_dir / SETTINGS_FILE
        self.transcriptions_file = self.data_dir / TRANSCRIPTIONS_FILE
        self.logs_dir = self.data_dir / "logs"
        self.max_entries = max_entries

        # Create directory structure
        self._ensure_directories()

        logger.info(f"FileManager initialized with data_dir: {self.data_dir}")

    def _ensure_directories(self) -> None:
        """Ensure all required directories exist."""
        for directory in [self.data_dir, self.logs_dir]:
            directory.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Ensured directory exists: {directory}")

    def load_settings(self) -> Settings:
        """Load settings, falling back to defaults.

        Returns:
            Stored settings, or default settings if the file is missing or
            unreadable
        """
        data = self._read_json(self.settings_file)
        if not data or "settings" not in data:
            logger.info("No stored settings found, using defaults")
            return Settings()

        try:
            return Settings.from_dict(data["settings"])
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Stored settings are invalid, using defaults: {e}")
            return Settings()

    def save_settings(self, settings: Settings) -> str:
        """Save settings to JSON file.

        Args:
            settings: Settings to save

        Returns:
            Path to saved settings file
        """
        self._write_json(self.settings_file, {"settings": settings.to_dict()})
        logger.info(f"Settings saved: {self.settings_file}")
        return str(self.settings_file)

    def load_transcriptions(self) -> List[TranscriptionEntry]:
        """Load transcription history, newest first.

        Returns:
            List of entries, empty if the file is missing or unreadable
        """
        data = self._read_json(self.transcriptions_file)
        if not data:
            return []

        try:
            return [TranscriptionEntry.from_dict(item) for item in data.get("entries", [])]
        except (KeyError, ValueError, TypeError) as e:
            logger.error(f"Stored transcriptions are invalid: {e}")
            return []

    def add_transcription(self, text: str, language_hints: List[str],
                          timestamp: Optional[int] = None) -> TranscriptionEntry:
        """Insert a transcription at the front of the history.

        Args:
            text: Transcribed text
            language_hints: Language hints active for the session
            timestamp: Unix seconds, defaults to now

        Returns:
            The stored entry
        """
        entry = TranscriptionEntry(
            text=text,
            timestamp=int(time.time()) if timestamp is None else int(timestamp),
            language=",".join(language_hints)
        )
        entries = self.load_transcriptions()
        entries.insert(0, entry)
        # Keep only the most recent entries
        del entries[self.max_entries:]

        self._write_transcriptions(entries)
        logger.info(f"Transcription saved ({len(entry.text)} chars, {len(entries)} in history)")
        return entry

    def clear_transcriptions(self) -> None:
        """Remove all stored transcriptions."""
        self._write_transcriptions([])
        logger.info("Transcription history cleared")

    def get_storage_stats(self) -> Dict[str, Any]:
        """Get storage usage statistics.

        Returns:
            Dictionary with storage statistics
        """
        total_size = 0
        for path in (self.settings_file, self.transcriptions_file):
            if path.exists():
                total_size += path.stat().st_size

        return {
            "total_size_bytes": total_size,
            "transcription_count": len(self.load_transcriptions()),
            "max_entries": self.max_entries,
            "data_directory": str(self.data_dir)
        }

    def _write_transcriptions(self, entries: List[TranscriptionEntry]) -> None:
        self._write_json(self.transcriptions_file, {"entries": [entry.to_dict() for entry in entries]})

    def _read_json(self, path: Path) -> Optional[Dict[str, Any]]:
        if not path.exists():
            return None

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading {path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.error(f"Unexpected content in {path}")
            return None
        return data

    def _write_json(self, path: Path, data: Dict[str, Any]) -> None:
        """Write JSON atomically via a temporary file."""
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            tmp_path.replace(path)
        except Exception as e:
            logger.error(f"Error writing {path}: {e}")
            raise
