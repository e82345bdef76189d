"""Configuration manager for create-turborepo-template.

This module provides the ConfigManager class for loading configuration
values with a cascading hierarchy:

    1. Environment Variables (highest priority)
    2. Global Config (~/.create-turborepo-config)
    3. Built-in Defaults (lowest priority)
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from rich.table import Table

from create_turborepo.config.settings import CONFIG_FILE, Settings
from create_turborepo.utils.console import console, print_header
from create_turborepo.utils.logging import log_message


class ConfigManager:
    """Loads configuration with cascading precedence.

    Configuration Precedence (highest to lowest):
    1. Environment Variables - CI/CD, temporary overrides
    2. Global Config (~/.create-turborepo-config) - User defaults
    3. Built-in Defaults - Fallback values

    The config file is parsed line by line as KEY=VALUE pairs; nothing in it
    is ever evaluated.

    Attributes:
        settings: Current settings instance
        global_config_path: Path to the global config file
    """

    def __init__(self, global_config_path: Path | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            global_config_path: Optional custom path to global config file.
                                Defaults to ~/.create-turborepo-config.
        """
        self.global_config_path = global_config_path or CONFIG_FILE
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        Each call starts from clean defaults so repeated loads never keep
        stale values.

        Returns:
            Settings instance with loaded values
        """
        self.settings = Settings()
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _load_file(self, path: Path, source: str = "file") -> None:
        """Load key=value pairs from a config file.

        Args:
            path: Path to the config file
            source: Source identifier for debugging
        """
        pattern = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")

        with path.open() as f:
            for line in f:
                line = line.strip()

                # Skip empty lines and comments
                if not line or line.startswith("#"):
                    continue

                match = pattern.match(line)
                if match:
                    key, value = match.groups()

                    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                        value = value[1:-1]

                    self._raw_values[key] = value
                    self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with environment variables.

        Only known config keys are read so unrelated environment variables
        never leak into the configuration.
        """
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object.

        Args:
            key: Configuration key
            value: Raw string value from file or environment
        """
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return  # Unknown key, ignore

        current_value = getattr(self.settings, attr)

        if isinstance(current_value, bool):
            setattr(self.settings, attr, value.lower() in ("true", "1", "yes"))
        elif isinstance(current_value, int):
            try:
                setattr(self.settings, attr, int(value))
            except ValueError:
                log_message(f"Ignoring non-integer value for {key}: {value!r}")
        else:
            setattr(self.settings, attr, value)

    def get_source(self, key: str) -> str:
        """Return where a config key's effective value came from."""
        return self._config_sources.get(key, "default")

    def show(self) -> None:
        """Display the effective configuration."""
        print_header("Current Configuration")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Key")
        table.add_column("Value")
        table.add_column("Source", style="dim")

        for key in Settings.get_config_keys():
            attr = self.settings.get_attribute_for_key(key)
            value = getattr(self.settings, attr) if attr else ""
            table.add_row(key, str(value) if value != "" else "(not set)", self.get_source(key))

        console.print(table)
        console.print()
        console.print(f"[dim]Config file: {self.global_config_path}[/dim]")


__all__ = ["ConfigManager"]
