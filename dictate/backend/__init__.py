"""Backend command interface and the local file-backed implementation."""

from .base import AbstractDictationBackend, BackendError
from .local import LocalBackend

__all__ = [
    "AbstractDictationBackend",
    "BackendError",
    "LocalBackend",
]
