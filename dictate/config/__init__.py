"""Simple YAML configuration loader for Desktop Dictate."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    "storage": {
        "data_directory": "data",
    },
    "history": {
        "max_entries": 100,
    },
    "logging": {
        "level": "INFO",
        "file_path": "data/logs/dictate.log",
        "console_output": True,
    },
}


class DictateConfig:
    """Desktop Dictate configuration loader."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML config file. If None, built-in defaults
                        are used.
        """
        self.config_file = Path(config_path) if config_path else None

        if self.config_file is None:
            logger.info("No configuration file given, using defaults")
            self.config = _merge(DEFAULT_CONFIG, {})
            return

        if not self.config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        logger.info(f"Loading configuration from: {self.config_file}")
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load and parse YAML configuration file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")
        except OSError as e:
            raise ValueError(f"Failed to load configuration: {e}")

        if not config:
            raise ValueError("Configuration file is empty")
        if not isinstance(config, dict):
            raise ValueError("Configuration file must contain a mapping")

        # Resolve relative paths
        self._resolve_paths(config)

        logger.info("Configuration loaded successfully")
        return _merge(DEFAULT_CONFIG, config)

    def _resolve_paths(self, config: Dict[str, Any]) -> None:
        """Resolve relative paths in configuration relative to config file location."""
        config_dir = self.config_file.parent

        # Resolve data directory
        if 'storage' in config and 'data_directory' in config['storage']:
            data_dir = config['storage']['data_directory']
            if not os.path.isabs(data_dir):
                config['storage']['data_directory'] = str(config_dir / data_dir)

        # Resolve log file path
        if 'logging' in config and 'file_path' in config['logging']:
            log_path = config['logging']['file_path']
            if not os.path.isabs(log_path):
                config['logging']['file_path'] = str(config_dir / log_path)

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation (e.g., 'history.max_entries').

        Args:
            key_path: Dot-separated key path (e.g., 'storage.data_directory')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, key_path: str, value: Any) -> None:
        """Set configuration value using dot notation.

        Args:
            key_path: Dot-separated path to config value (e.g., 'logging.level')
            value: Value to set
        """
        keys = key_path.split('.')
        config_dict = self.config

        # Navigate to the parent dictionary
        for key in keys[:-1]:
            if key not in config_dict:
                config_dict[key] = {}
            config_dict = config_dict[key]

        # Set the final value
        config_dict[keys[-1]] = value
        logger.debug(f"Configuration key '{key_path}' set to: {value}")

    def get_data_directory(self) -> str:
        """Get data directory path."""
        data_dir = self.get('storage.data_directory', 'data')
        return str(Path(data_dir).absolute())

    def get_max_history_entries(self) -> int:
        """Get the number of transcriptions kept in history."""
        max_entries = self.get('history.max_entries', 100)
        if not isinstance(max_entries, int) or max_entries < 1:
            raise ValueError(f"history.max_entries must be a positive integer, got {max_entries!r}")
        return max_entries


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` onto a copy of ``base``."""
    merged = {}
    for key, value in base.items():
        merged[key] = _merge(value, {}) if isinstance(value, dict) else value
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
