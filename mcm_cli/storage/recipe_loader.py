"""
Reads a TOML recipe file into a validated Recipe.

A recipe looks like:

    name = "fabric-1.20"          # optional launcher profile

    [[mod]]
    name = "sodium.jar"
    url = "https://example.com/sodium.jar"

    [[resourcepack]]
    name = "faithful.zip"
    url = "https://example.com/faithful.zip"

Every top-level array of tables is a category. `mod`, `resourcepack` and
`shaderpack` install into their plural directory names; any other table name
is used as the directory name as-is. Other top-level keys are ignored with a
warning, and names are used exactly as written.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.markup import escape

from mcm_cli.exceptions import ConfigurationError
from mcm_cli.models.recipe import Recipe, category_dir

log = logging.getLogger(__name__)


def _is_table_array(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, dict) for v in value)


def parse_recipe(data: dict[str, Any]) -> Recipe:
    """
    Builds a Recipe from already-decoded manifest data, keeping the document
    order of categories and items.

    Raises:
        ConfigurationError: If the data does not describe a valid recipe.
    """
    categories: dict[str, list[dict[str, Any]]] = {}
    for key, value in data.items():
        if key == "name":
            continue
        if not _is_table_array(value):
            log.warning(
                f"[yellow]Ignoring recipe key '{escape(key)}': "
                "not an array of tables.[/yellow]"
            )
            continue
        # Two table names can map to the same directory (e.g. 'mod' and 'mods').
        categories.setdefault(category_dir(key), []).extend(value)

    name = data.get("name", "")
    if not isinstance(name, str):
        raise ConfigurationError("Recipe 'name' must be a string.")

    try:
        return Recipe(name=name, categories=categories)
    except ValidationError as e:
        raise ConfigurationError(f"Recipe validation failed:\n{e}") from e


def load_recipe(path: Path) -> Recipe:
    """
    Loads a recipe file from disk.

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated.
    """
    full_path = path.expanduser().absolute()
    log.info(f"Load recipe: [dim]{full_path}[/dim]")

    try:
        with open(full_path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        log.error("[red]Failed load recipe[/red]")
        raise ConfigurationError(f"Could not open recipe '{full_path}': {e}") from e
    except tomllib.TOMLDecodeError as e:
        log.error("[red]Failed load recipe[/red]")
        raise ConfigurationError(f"Error parsing recipe '{full_path}': {e}") from e

    recipe = parse_recipe(data)
    log.debug(
        f"Recipe has {recipe.total_items} items in "
        f"{len(recipe.categories)} categories."
    )
    return recipe
