"""
Loads the optional INI configuration file and merges it with CLI options.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mcm_cli.exceptions import ConfigurationError
from mcm_cli.models.config import InstallConfig
from mcm_cli.utils.path import get_default_minecraft_dir

log = logging.getLogger(__name__)


class ConfigManager:
    """
    Handles the application's INI config file. Unlike the recipe and the
    profile registry, the file is optional: when it is absent every setting
    takes its default.
    """

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        self._parser = configparser.ConfigParser()

    def load_config(self, cli_options: dict[str, Any] | None = None) -> InstallConfig:
        """
        Loads configuration from the INI file, applies CLI overrides, and validates it.

        Args:
            cli_options: A dictionary of options provided via the command line.
                Keys whose value is None are ignored.

        Returns:
            A validated InstallConfig object.

        Raises:
            ConfigurationError: If the file cannot be parsed or validation fails.
        """
        config_from_file: dict[str, Any] = {}
        if self.config_file_path.is_file():
            try:
                self._parser.read(self.config_file_path, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    f"Error parsing configuration file: {e}"
                ) from e
            config_from_file = self._get_config_as_dict()
            log.debug(f"Loaded configuration from '{self.config_file_path}'.")

        settings: dict[str, Any] = {"minecraft_dir": get_default_minecraft_dir()}
        settings.update(config_from_file)
        if cli_options:
            settings.update({k: v for k, v in cli_options.items() if v is not None})

        try:
            return InstallConfig(**settings)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    def _get_config_as_dict(self) -> dict[str, Any]:
        """Reads the known keys of the 'DEFAULT' section, skipping absent ones."""
        section = self._parser["DEFAULT"]
        known = InstallConfig.get_ini_keys()
        unknown = set(section) - known
        if unknown:
            log.warning(
                f"[yellow]Ignoring unknown config keys: "
                f"{', '.join(sorted(unknown))}[/yellow]"
            )

        values: dict[str, Any] = {}
        try:
            if "minecraft_dir" in section:
                values["minecraft_dir"] = section.get("minecraft_dir")
            if section.get("profiles_file"):
                values["profiles_file"] = section.get("profiles_file")
            if "dry_run" in section:
                values["dry_run"] = section.getboolean("dry_run")
            if section.get("timeout"):
                values["timeout"] = section.getfloat("timeout")
            if section.get("user_agent"):
                values["user_agent"] = section.get("user_agent")
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value in configuration file '{self.config_file_path}': {e}"
            ) from e
        return values
