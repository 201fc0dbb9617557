"""Console rendering of the transcription history."""

import time
from datetime import datetime
from typing import List, Optional, Union

from rich.table import Table
from rich.text import Text

from ..models.transcription import TranscriptionEntry


def format_timestamp(timestamp: int, now: Optional[float] = None) -> str:
    """Relative age of a history entry.

    Args:
        timestamp: Entry time in unix seconds
        now: Reference time in unix seconds, defaults to the current time

    Returns:
        "Just now", "5m ago", "3h ago", "2d ago" or the local date for
        entries older than a week
    """
    now = time.time() if now is None else now
    diff_seconds = now - timestamp
    diff_mins = int(diff_seconds // 60)
    diff_hours = int(diff_seconds // 3600)
    diff_days = int(diff_seconds // 86400)

    if diff_mins < 1:
        return "Just now"
    if diff_mins < 60:
        return f"{diff_mins}m ago"
    if diff_hours < 24:
        return f"{diff_hours}h ago"
    if diff_days < 7:
        return f"{diff_days}d ago"
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d")


class HistoryView:
    """Builds the transcription history table."""

    def render(self, entries: List[TranscriptionEntry], now: Optional[float] = None) -> Union[Table, Text]:
        if not entries:
            return Text("No transcriptions yet\nYour dictation history will appear here", style="dim")

        table = Table(title="Transcription History", show_header=True, header_style="bold magenta")
        table.add_column("#", style="dim", justify="right")
        table.add_column("When", style="cyan", no_wrap=True)
        table.add_column("Language", style="green")
        table.add_column("Text", style="white")

        for i, entry in enumerate(entries, 1):
            table.add_row(str(i), format_timestamp(entry.timestamp, now), entry.language or "N/A", entry.text)
        return table
