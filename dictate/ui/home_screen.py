"""Console rendering of the dictation home screen."""

import logging
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models.session import SessionSnapshot
from ..models.settings import Settings
from .hotkey_recorder import describe_chord


logger = logging.getLogger(__name__)


class HomeScreen:
    """Builds the status/preview panel shown while dictating."""

    title = "Desktop Dictate"

    def render(self, snapshot: SessionSnapshot, settings: Settings) -> Panel:
        """Render the current session and settings.

        Args:
            snapshot: Session state to display
            settings: Settings providing hotkey and language hints

        Returns:
            Rich panel ready to print
        """
        status_style = "bold red" if snapshot.recording else "bold green"
        status = Text.assemble(("● ", status_style), (snapshot.status_label, status_style))

        info = Table.grid(padding=(0, 2))
        info.add_column(style="cyan")
        info.add_column(style="white")
        info.add_row("Hotkey:", describe_chord(settings.hotkey))
        hints = ", ".join(settings.language_hints) if settings.language_hints else "Auto-detect"
        info.add_row("Language Hints:", hints)

        parts = [status, info]
        if snapshot.error_message:
            parts.append(Text(snapshot.error_message, style="bold red"))

        has_text = bool(snapshot.partial_text if snapshot.recording else snapshot.final_text)
        preview = Text(snapshot.display_text, style="white" if has_text else "dim white italic")
        parts.append(Panel(preview, title=snapshot.preview_label, title_align="left", border_style="blue"))

        return Panel(Group(*parts), title=self.title, border_style="bright_blue")
