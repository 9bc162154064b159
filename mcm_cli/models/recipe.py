"""
Pydantic models for a decoded recipe (the user's install manifest).
"""

from pathvalidate import ValidationError as FilenameValidationError
from pathvalidate import validate_filename
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Manifest table names -> directory names under the installation root.
# Unknown table names are used as directory names verbatim.
CATEGORY_DIRS = {
    "mod": "mods",
    "resourcepack": "resourcepacks",
    "shaderpack": "shaderpacks",
}


def category_dir(table_name: str) -> str:
    """Maps a manifest table name to the directory it installs into."""
    return CATEGORY_DIRS.get(table_name, table_name)


def _check_single_name(value: str, kind: str) -> str:
    """Rejects anything that is not one path segment inside its parent."""
    if value in ("", ".", ".."):
        raise ValueError(f"Invalid {kind} '{value}'.")
    try:
        validate_filename(value, platform="auto")
    except FilenameValidationError as e:
        raise ValueError(f"Invalid {kind} '{value}': {e}") from e
    return value


class Item(BaseModel):
    """One downloadable file. `name` is also the destination file name."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_single_name(v, "file name")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v:
            raise ValueError("Item URL cannot be empty.")
        return v


class Recipe(BaseModel):
    """
    A decoded recipe: an optional profile name plus the items to install,
    grouped by category directory in declaration order.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    categories: dict[str, list[Item]] = Field(default_factory=dict)

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: dict[str, list[Item]]) -> dict[str, list[Item]]:
        for category in v:
            _check_single_name(category, "category name")
        return v

    @property
    def total_items(self) -> int:
        return sum(len(items) for items in self.categories.values())
