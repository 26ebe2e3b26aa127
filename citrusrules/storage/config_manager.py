"""
Manages loading and validation of the optional INI configuration file.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from citrusrules.exceptions import ConfigurationError
from citrusrules.models.config import FetchConfig

log = logging.getLogger(__name__)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "citrusrules"


def get_config_file() -> Path:
    return get_config_dir() / "config.ini"


class ConfigManager:
    """Handles all operations related to the application's INI config file."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        self._parser = configparser.ConfigParser()

    def load_config(self, cli_options: dict[str, Any] | None = None) -> FetchConfig:
        """
        Loads configuration from the INI file if present, applies CLI overrides,
        and validates it.

        Args:
            cli_options: A dictionary of options provided via the command line.

        Returns:
            A validated FetchConfig object.

        Raises:
            ConfigurationError: If the config file is unreadable or validation
            fails.
        """
        config_data: dict[str, Any] = {}
        if self.config_file_path.is_file():
            try:
                self._parser.read(self.config_file_path, encoding="utf-8")
            except (configparser.Error, UnicodeDecodeError) as e:
                raise ConfigurationError(
                    f"Error parsing configuration file: {e}"
                ) from e
            config_data = self._get_config_as_dict()
            log.debug(f"Loaded configuration from '{self.config_file_path}'.")
        else:
            log.debug(
                f"No configuration file at '{self.config_file_path}', using defaults."
            )

        if cli_options:
            config_data.update(cli_options)

        try:
            return FetchConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    def _get_config_as_dict(self) -> dict[str, Any]:
        """Reads the known keys of the 'DEFAULT' section into a dictionary."""
        section = self._parser["DEFAULT"]
        unknown = set(section) - FetchConfig.get_ini_keys()
        if unknown:
            log.warning(
                f"[yellow]Ignoring unknown configuration keys: "
                f"{', '.join(sorted(unknown))}[/yellow]"
            )
        try:
            data: dict[str, Any] = {}
            if "base_url" in section:
                data["base_url"] = section.get("base_url", raw=True)
            if "dest_dir" in section:
                data["dest_dir"] = section.get("dest_dir", raw=True)
            if "timeout_seconds" in section:
                data["timeout_seconds"] = section.getfloat("timeout_seconds")
            if "max_workers" in section:
                data["max_workers"] = section.getint("max_workers")
        except ValueError as e:
            raise ConfigurationError(f"Invalid value in configuration file: {e}") from e
        return data
