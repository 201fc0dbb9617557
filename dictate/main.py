"""Main application entry point for Desktop Dictate."""

import sys
import asyncio
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .backend.local import LocalBackend
from .config import DictateConfig
from .events.bus import EventBus
from .replay import load_event_script, replay_events
from .services.history_cache import HistoryCache
from .services.session_controller import SessionController
from .storage.file_manager import FileManager
from .ui.history_view import HistoryView
from .ui.home_screen import HomeScreen
from .ui.hotkey_recorder import describe_chord
from .ui.settings_form import SettingsForm

logger = logging.getLogger(__name__)


class App:
    """Wires storage, backend, event bus and session controller together."""

    def __init__(self, config: DictateConfig):
        self.config = config
        self.bus = EventBus()
        self.file_manager = FileManager(config.get_data_directory(), config.get_max_history_entries())
        self.backend = LocalBackend(self.bus, self.file_manager)
        self.history = HistoryCache(self.backend)
        self.controller = SessionController(self.backend, self.bus, history=self.history)
        self.console = Console()

    async def show_history(self) -> None:
        await self.controller.load_settings()
        self.console.print(HistoryView().render(self.history.entries))

    async def clear_history(self) -> bool:
        await self.controller.load_settings()
        if not await self.controller.clear_history():
            self.console.print("❌ Failed to clear history", style="bold red")
            return False
        self.console.print("✅ History cleared", style="green")
        return True

    async def show_settings(self) -> None:
        settings = await self.controller.load_settings()
        masked_key = "*" * 8 if settings.api_key else "(not set)"
        self.console.print(f"API key:              {masked_key}")
        self.console.print(f"Hotkey:               {describe_chord(settings.hotkey)}")
        self.console.print(f"Language hints:       {', '.join(settings.language_hints) or 'Auto-detect'}")
        restrictions = settings.language_restrictions
        self.console.print(f"Language restrictions: {', '.join(restrictions) if restrictions else 'Off'}")

        stats = self.file_manager.get_storage_stats()
        self.console.print(f"History:              {stats['transcription_count']} of {stats['max_entries']} entries")
        self.console.print(f"Data directory:       {stats['data_directory']}", style="dim")

    async def configure(self, args: argparse.Namespace) -> bool:
        form = SettingsForm.from_settings(await self.controller.load_settings())
        if args.api_key is not None:
            form.api_key = args.api_key
        if args.hotkey is not None:
            form.hotkey = args.hotkey
        if args.hints is not None:
            form.hints.selected = _split_codes(args.hints)
        if args.restrict is not None:
            form.use_restrictions = True
            form.restrictions.selected = _split_codes(args.restrict)
        if args.no_restrict:
            form.use_restrictions = False

        problems = form.validate()
        if problems:
            for problem in problems:
                self.console.print(f"❌ {problem}", style="bold red")
            return False

        if not await self.controller.save_settings(form.to_settings()):
            self.console.print("❌ Failed to save settings", style="bold red")
            return False
        self.console.print("✅ Settings saved", style="green")
        return True

    async def replay(self, script_path: str) -> None:
        events = load_event_script(script_path)
        await self.controller.load_settings()
        snapshot = await replay_events(self.controller, self.bus, events)
        self.console.print(HomeScreen().render(snapshot, self.controller.settings))


def _split_codes(value: str) -> List[str]:
    return [code.strip() for code in value.split(",") if code.strip()]


def setup_logging(config: DictateConfig, level: str = "INFO") -> None:
    """Set up logging configuration from YAML config."""
    # Get log file path from config
    log_file_path = config.get('logging.file_path', 'data/logs/dictate.log')
    console_output = config.get('logging.console_output', True)

    # Create logs directory if it doesn't exist
    log_dir = Path(log_file_path).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    # Set up handlers
    handlers = []

    # File handler - always write to file
    file_handler = logging.FileHandler(log_file_path)
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )
    file_handler.setFormatter(file_formatter)
    handlers.append(file_handler)

    # Console handler - only if enabled in config
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)  # Only show warnings and above on console
        console_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        console_handler.setFormatter(console_formatter)
        handlers.append(console_handler)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in handlers:
        root_logger.addHandler(handler)

    logger.info("=" * 50)
    logger.info("Desktop Dictate starting up")
    logger.info(f"Log file: {log_file_path}")
    logger.info(f"Log level set to: {level}")
    logger.info("=" * 50)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dictate",
        description="Desktop Dictate - dictation session client"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration YAML file (default: built-in defaults)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (overrides config)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="Desktop Dictate v0.1.0"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("history", help="Show transcription history")
    subparsers.add_parser("clear-history", help="Delete all transcriptions")
    subparsers.add_parser("settings", help="Show current settings")

    configure = subparsers.add_parser("configure", help="Change settings")
    configure.add_argument("--api-key", help="Soniox API key")
    configure.add_argument("--hotkey", help="Hotkey chord, e.g. CommandOrControl+Shift+D")
    configure.add_argument("--hints", help="Comma-separated language hints, e.g. en,de")
    restrict = configure.add_mutually_exclusive_group()
    restrict.add_argument("--restrict", help="Comma-separated languages to restrict recognition to")
    restrict.add_argument("--no-restrict", action="store_true", help="Disable language restrictions")

    replay = subparsers.add_parser("replay", help="Replay a YAML backend event script")
    replay.add_argument("script", help="Path to the event script")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the Desktop Dictate CLI."""
    args = build_parser().parse_args(argv)

    try:
        config = DictateConfig(args.config)
        setup_logging(config, args.log_level or config.get('logging.level', 'INFO'))
        app = App(config)

        if args.command == "history":
            asyncio.run(app.show_history())
        elif args.command == "clear-history":
            if not asyncio.run(app.clear_history()):
                sys.exit(1)
        elif args.command == "settings":
            asyncio.run(app.show_settings())
        elif args.command == "configure":
            if not asyncio.run(app.configure(args)):
                sys.exit(1)
        elif args.command == "replay":
            asyncio.run(app.replay(args.script))
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Error: {e}")
        logging.error(f"Application error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
