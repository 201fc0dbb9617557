"""Backend event channel."""

from .bus import EventBus

__all__ = ["EventBus"]
