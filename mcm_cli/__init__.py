"""mcm-cli: installs mods and resource packs listed in a recipe file."""

__version__ = "0.5.0"
