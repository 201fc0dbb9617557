"""Local storage for settings and transcription history."""

from .file_manager import FileManager

__all__ = ["FileManager"]
