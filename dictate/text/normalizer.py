"""Whitespace and punctuation cleanup applied to finished transcripts."""

import re


_WHITESPACE_RUN = re.compile(r"\s+")
# A space the recognizer put in front of punctuation moves behind it when a
# word follows directly ("b ,c" -> "b, c"); otherwise it is dropped.
_SPACE_BEFORE_PUNCTUATION_WORD = re.compile(r" ([.,!?;:])(?=\w)")
_SPACE_BEFORE_PUNCTUATION = re.compile(r" ([.,!?;:])")


def normalize(text: str) -> str:
    """Normalize a raw transcript for display and storage.

    Collapses whitespace runs to one space, removes the space in front of
    ``. , ! ? ; :`` and trims the ends. All-whitespace input becomes "".
    The result is stable: normalizing it again returns it unchanged.

    Args:
        text: Raw transcript as delivered by the backend

    Returns:
        Normalized text
    """
    if not text:
        return ""
    collapsed = _WHITESPACE_RUN.sub(" ", text)
    moved = _SPACE_BEFORE_PUNCTUATION_WORD.sub(r"\1 ", collapsed)
    return _SPACE_BEFORE_PUNCTUATION.sub(r"\1", moved).strip()
