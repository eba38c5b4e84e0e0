#!/usr/bin/env python3
"""
Configuration management for escapehtml.
Handles loading and merging configuration from multiple sources.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and merging."""

    DEFAULT_CONFIG_NAMES = ['escapehtml.yaml', 'escapehtml.yml']

    # Single source of truth: Default configuration as YAML string
    DEFAULT_CONFIG_YAML = """# escapehtml configuration file
# Place this file in your working directory or use --config to specify location.

# Output formatting
output:
  banner_char: "="  # Character repeated to draw the console banner rules
  banner_width: 72  # Length of each banner rule
  suffix: ".txt"  # Appended to the source base name in the destination directory
  encoding: "utf-8"  # Used to decode sources; undecodable bytes pass through untouched
  dir_mode: "775"  # Octal permissions for a created destination directory (before umask)
  file_mode: "644"  # Octal permissions for a created output file (before umask)

# Per-file failure handling
errors:
  fail_fast: false  # Stop at the first unreadable/unwritable file instead of skipping it
  report_skipped: true  # Print a summary of skipped files to stderr after the run
  max_reported: 10  # Number of skipped files listed individually in the summary
"""

    def __init__(self):
        self.config: Dict[str, Any] = self._get_default_config()
        self.config_path: Optional[Path] = None

    def _get_default_config(self) -> Dict[str, Any]:
        """Parse default configuration from YAML string."""
        return yaml.safe_load(self.DEFAULT_CONFIG_YAML) or {}

    def find_config_file(self, explicit_path: Optional[str] = None) -> Optional[Path]:
        """Find configuration file in order of precedence."""
        if explicit_path:
            path = Path(explicit_path)
            if path.exists():
                return path
            else:
                raise FileNotFoundError(f"Config file not found: {explicit_path}")

        # Check current directory
        for name in self.DEFAULT_CONFIG_NAMES:
            path = Path.cwd() / name
            if path.exists():
                return path

        # Check user config directory
        config_dir = Path.home() / '.useful_scripts' / 'escapehtml'
        for name in self.DEFAULT_CONFIG_NAMES:
            path = config_dir / name
            if path.exists():
                return path

        # Check system config directory (Unix-like systems)
        if os.name != 'nt':
            system_config_dir = Path('/etc/useful_scripts/escapehtml')
            for name in self.DEFAULT_CONFIG_NAMES:
                path = system_config_dir / name
                if path.exists():
                    return path

        return None

    def load_config(self, config_path: Optional[str] = None) -> None:
        """Load configuration from file."""
        path = self.find_config_file(config_path)
        if not path:
            return  # Use defaults

        self.config_path = path
        logger.debug("Loading config from %s", path)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                if path.suffix in ['.yaml', '.yml']:
                    user_config = yaml.safe_load(f) or {}
                else:
                    raise ValueError(f"Unsupported config format: {path.suffix}")
            if not isinstance(user_config, dict):
                raise ValueError("top level must be a mapping")
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)
            return

        # Deep merge user config with defaults
        self.config = self._deep_merge(self.config, user_config)

    def _deep_merge(self, base: Dict, overlay: Dict) -> Dict:
        """Deep merge overlay dict into base dict."""
        result = base.copy()
        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get config value by dot-notation path (e.g., 'output.suffix')."""
        keys = key_path.split('.')
        value = self.config
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def get_int(self, key_path: str, default: int) -> int:
        """Get an integer setting, falling back to default when it is not one."""
        value = self.get(key_path)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid integer %r for %s", value, key_path)
            return default

    def get_mode(self, key_path: str, default: int) -> int:
        """Get an octal permission string such as "644" as an int."""
        value = self.get(key_path)
        if value is None:
            return default
        if isinstance(value, int):
            return value
        try:
            return int(str(value), 8)
        except ValueError:
            logger.warning("Ignoring invalid mode %r for %s", value, key_path)
            return default

    def set(self, key_path: str, value: Any) -> None:
        """Set config value by dot-notation path."""
        keys = key_path.split('.')
        target = self.config
        for key in keys[:-1]:
            if key not in target:
                target[key] = {}
            target = target[key]
        target[keys[-1]] = value

    def update_from_args(self, args: Any) -> None:
        """Update configuration from command-line arguments."""
        # Flags only override when they were actually given
        if getattr(args, 'fail_fast', False):
            self.set('errors.fail_fast', True)
        if getattr(args, 'quiet_skips', False):
            self.set('errors.report_skipped', False)
