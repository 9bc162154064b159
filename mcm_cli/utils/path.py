"""
Utilities for locating the game directory and handling local paths.
"""

import os
from pathlib import Path

MINECRAFT_DIRNAME = ".minecraft"


def get_default_minecraft_dir() -> Path:
    """
    Returns the game's default data directory: %APPDATA%\\.minecraft on Windows,
    ~/.minecraft everywhere else.
    """
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path("~")
    return base_dir.expanduser() / MINECRAFT_DIRNAME


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "mcm-cli"


def path_exists(path: Path) -> bool:
    """True if anything (file, directory or link target) exists at `path`."""
    try:
        path.stat()
    except OSError:
        return False
    return True


def create_dir(directory_path: Path) -> None:
    """Creates a directory and any missing parents if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)
