import sys

import pytest
from pydantic import ValidationError

from mcm_cli.models.profile import ProfileRegistry
from mcm_cli.models.recipe import Item, Recipe, category_dir
from mcm_cli.models.stats import InstallStats

# Valid on Linux but not on Windows.
POSIX_ONLY_NAMES = ["Sodium: Fabric.jar", "mod?.jar", "aux.jar", "a|b.zip"]


def test_registry_lookup():
    registry = ProfileRegistry.model_validate(
        {
            "profiles": {
                "fabric": {"gameDir": "/srv/fabric", "lastVersionId": "1.20.1"},
                "vanilla": {"gameDir": None, "lastVersionId": "1.21"},
            },
            "settings": {"locale": "en-us"},
        }
    )
    assert registry.lookup("fabric") == "/srv/fabric"
    assert registry.lookup("vanilla") == ""
    assert registry.lookup("ghost") is None
    assert registry.is_valid("vanilla")
    assert not registry.is_valid("ghost")
    assert registry.profiles["fabric"].last_version_id == "1.20.1"


def test_category_dir_mapping():
    assert category_dir("mod") == "mods"
    assert category_dir("resourcepack") == "resourcepacks"
    assert category_dir("shaderpack") == "shaderpacks"
    assert category_dir("config") == "config"


def test_item_accepts_plain_file_name():
    item = Item(name="sodium-0.5.3.jar", url="https://example.com/sodium.jar")
    assert item.name == "sodium-0.5.3.jar"


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="Linux name rules")
@pytest.mark.parametrize("name", POSIX_ONLY_NAMES)
def test_item_accepts_names_valid_on_this_platform(name):
    assert Item(name=name, url="https://example.com/x.jar").name == name


def test_recipe_name_is_kept_verbatim():
    assert Recipe(name=" fabric ").name == " fabric "


@pytest.mark.parametrize("name", ["../evil.jar", "sub/dir.jar", "", ".."])
def test_item_rejects_names_outside_category(name):
    with pytest.raises(ValidationError):
        Item(name=name, url="https://example.com/x.jar")


def test_item_rejects_empty_url():
    with pytest.raises(ValidationError):
        Item(name="a.jar", url="")


def test_recipe_counts_items_and_keeps_order():
    recipe = Recipe(
        categories={
            "resourcepacks": [{"name": "p.zip", "url": "https://e/p.zip"}],
            "mods": [
                {"name": "b.jar", "url": "https://e/b.jar"},
                {"name": "a.jar", "url": "https://e/a.jar"},
            ],
        }
    )
    assert recipe.name == ""
    assert recipe.total_items == 3
    assert list(recipe.categories) == ["resourcepacks", "mods"]
    assert [i.name for i in recipe.categories["mods"]] == ["b.jar", "a.jar"]


def test_stats_tracks_categories():
    stats = InstallStats()
    stats.record_installed("mods", 10)
    stats.record_installed("mods", 5)
    stats.record_skipped("mods")
    stats.record_failed("resourcepacks")

    assert stats.items_installed == 2
    assert stats.total_size_downloaded == 15
    assert stats.items_skipped_exists == 1
    assert stats.items_failed == 1
    assert stats.categories["mods"].installed == 2
    assert stats.categories["resourcepacks"].failed == 1
