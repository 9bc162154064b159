"""
Resolves the installation root for a run from the recipe's profile name.
"""

import logging
from pathlib import Path

from rich.markup import escape

from mcm_cli.exceptions import UnknownProfileError
from mcm_cli.models.profile import ProfileRegistry

log = logging.getLogger(__name__)


def resolve_root(
    profile_name: str, registry: ProfileRegistry, default_root: Path
) -> Path:
    """
    Picks the directory the recipe installs into. First match wins:

    1. no profile name: `default_root`
    2. a name missing from the registry: UnknownProfileError
    3. a profile with an empty game directory: `default_root`
    4. otherwise the profile's game directory

    The name is validated before the empty-directory fallback, so an unknown
    name is reported even though the default root would have worked.
    """
    if not profile_name:
        return default_root

    if not registry.is_valid(profile_name):
        log.error(f"[red]Failed find the version name: {escape(profile_name)}[/red]")
        raise UnknownProfileError(profile_name)

    game_dir = registry.lookup(profile_name)
    if not game_dir:
        log.debug(f"Profile '{escape(profile_name)}' has no game directory set.")
        return default_root
    return Path(game_dir).expanduser()
