"""Text processing helpers."""

from .normalizer import normalize

__all__ = ["normalize"]
