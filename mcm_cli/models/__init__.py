"""
Data Models Layer.

This package contains Pydantic models that define the core data structures
used throughout the application: the recipe, the profile registry, the run
configuration and the run statistics.
"""

from .config import InstallConfig
from .profile import Profile, ProfileRegistry
from .recipe import Item, Recipe
from .stats import InstallStats

__all__ = [
    "InstallConfig",
    "InstallStats",
    "Item",
    "Profile",
    "ProfileRegistry",
    "Recipe",
]
