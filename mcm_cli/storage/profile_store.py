"""
Loads the game launcher's profile registry (launcher_profiles.json).
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from mcm_cli.exceptions import ConfigurationError
from mcm_cli.models.profile import ProfileRegistry

log = logging.getLogger(__name__)


class ProfileStore:
    """Reads the profile registry once; the result is never mutated."""

    def __init__(self, profiles_file: Path):
        self.profiles_file = profiles_file

    def load(self) -> ProfileRegistry:
        """
        Reads and validates the registry file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or malformed.
        """
        log.info(f"Load profile: [dim]{self.profiles_file}[/dim]")
        try:
            with open(self.profiles_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            log.error(f"[red]Failed open profile: {self.profiles_file}[/red]")
            raise ConfigurationError(
                f"Could not open profile registry '{self.profiles_file}': {e}"
            ) from e
        except json.JSONDecodeError as e:
            log.error(f"[red]Failed read profile: {self.profiles_file}[/red]")
            raise ConfigurationError(
                f"Could not parse profile registry '{self.profiles_file}': {e}"
            ) from e

        try:
            registry = ProfileRegistry.model_validate(data)
        except ValidationError as e:
            log.error(f"[red]Failed read profile: {self.profiles_file}[/red]")
            raise ConfigurationError(
                f"Invalid profile registry '{self.profiles_file}':\n{e}"
            ) from e

        log.debug(f"Loaded {len(registry.profiles)} profiles.")
        return registry

    @staticmethod
    def lookup(registry: ProfileRegistry, name: str) -> str | None:
        """Returns the directory stored for `name`, or None if it is not a profile."""
        return registry.lookup(name)
