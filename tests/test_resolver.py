from pathlib import Path

import pytest

from mcm_cli.core.resolver import resolve_root
from mcm_cli.exceptions import UnknownProfileError
from mcm_cli.models.profile import ProfileRegistry

DEFAULT_ROOT = Path("/home/steve/.minecraft")


def make_registry(**game_dirs: str) -> ProfileRegistry:
    return ProfileRegistry.model_validate(
        {
            "profiles": {
                name: {"gameDir": game_dir, "lastVersionId": "1.20.1"}
                for name, game_dir in game_dirs.items()
            }
        }
    )


def test_empty_name_uses_default_root():
    registry = make_registry(fabric="/srv/fabric")
    assert resolve_root("", registry, DEFAULT_ROOT) == DEFAULT_ROOT


def test_empty_name_with_empty_registry():
    assert resolve_root("", ProfileRegistry(), DEFAULT_ROOT) == DEFAULT_ROOT


def test_unknown_name_raises():
    registry = make_registry(fabric="/srv/fabric")
    with pytest.raises(UnknownProfileError) as exc_info:
        resolve_root("ghost", registry, DEFAULT_ROOT)
    assert exc_info.value.profile_name == "ghost"
    assert "ghost" in str(exc_info.value)


def test_unknown_name_raises_even_with_empty_registry():
    with pytest.raises(UnknownProfileError):
        resolve_root("ghost", ProfileRegistry(), DEFAULT_ROOT)


def test_profile_without_game_dir_uses_default_root():
    registry = make_registry(vanilla="")
    assert resolve_root("vanilla", registry, DEFAULT_ROOT) == DEFAULT_ROOT


def test_profile_with_missing_game_dir_field_uses_default_root():
    registry = ProfileRegistry.model_validate(
        {"profiles": {"vanilla": {"lastVersionId": "latest-release"}}}
    )
    assert resolve_root("vanilla", registry, DEFAULT_ROOT) == DEFAULT_ROOT


def test_profile_with_game_dir_uses_it():
    registry = make_registry(fabric="/srv/fabric", vanilla="")
    assert resolve_root("fabric", registry, DEFAULT_ROOT) == Path("/srv/fabric")


def test_name_is_matched_verbatim():
    registry = make_registry(fabric="/srv/fabric")
    with pytest.raises(UnknownProfileError):
        resolve_root(" fabric ", registry, DEFAULT_ROOT)
