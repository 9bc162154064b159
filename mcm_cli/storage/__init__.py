"""
Storage Layer.

This package reads everything the installer consumes from disk: the
launcher's profile registry, the recipe, and the optional config file.
"""

from .config_manager import ConfigManager
from .profile_store import ProfileStore
from .recipe_loader import load_recipe

__all__ = ["ConfigManager", "ProfileStore", "load_recipe"]
