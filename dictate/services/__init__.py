"""Services layer for dictation session logic."""

from .history_cache import HistoryCache
from .session_controller import SessionController

__all__ = [
    "HistoryCache",
    "SessionController",
]
