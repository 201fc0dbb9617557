"""Desktop Dictate: client-side dictation session coordination."""

__version__ = "0.1.0"
