"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from mcm_cli import __version__

PROFILES_FILENAME = "launcher_profiles.json"
DEFAULT_USER_AGENT = f"mcm-cli/{__version__}"


class InstallConfig(BaseModel):
    """A validated configuration model for a single install run."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # Paths
    minecraft_dir: Path
    profiles_file: Path | None = None

    # Behaviour
    dry_run: bool = False
    timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT

    # Internal fields not loaded from INI file
    recipe_path: Path | None = None

    @field_validator("minecraft_dir", "profiles_file", "recipe_path")
    @classmethod
    def expand_path(cls, v: Path | None) -> Path | None:
        return v.expanduser() if v is not None else v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Ensures a positive timeout; zero or less means 'use the default'."""
        if v is not None and v <= 0:
            return None
        return v

    @property
    def resolved_profiles_file(self) -> Path:
        """The registry file to read: explicit setting, else inside minecraft_dir."""
        return self.profiles_file or self.minecraft_dir / PROFILES_FILENAME

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that may appear in the INI file."""
        internal_fields = {"recipe_path"}
        return {key for key in cls.model_fields if key not in internal_fields}
