"""
Pydantic models for the game launcher's profile registry (launcher_profiles.json).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profile(BaseModel):
    """A single launcher profile. Only the fields the installer needs are kept."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    game_dir: str = Field("", alias="gameDir")
    last_version_id: str = Field("", alias="lastVersionId")

    @field_validator("game_dir", "last_version_id", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v


class ProfileRegistry(BaseModel):
    """Read-only mapping of profile name to profile record."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    profiles: dict[str, Profile] = Field(default_factory=dict)

    def is_valid(self, name: str) -> bool:
        """Returns True if `name` is a key in the registry."""
        return name in self.profiles

    def lookup(self, name: str) -> str | None:
        """
        Returns the game directory stored for `name`, which may be empty, or
        None if the profile does not exist.
        """
        profile = self.profiles.get(name)
        if profile is None:
            return None
        return profile.game_dir
