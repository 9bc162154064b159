"""
The main orchestrator for an install run: load, resolve, install, report.
"""

import logging
import time
from pathlib import Path

from rich.markup import escape

from mcm_cli.models.config import InstallConfig
from mcm_cli.models.profile import ProfileRegistry
from mcm_cli.models.recipe import Recipe
from mcm_cli.models.stats import InstallStats
from mcm_cli.net.fetcher import Fetcher
from mcm_cli.storage.profile_store import ProfileStore
from mcm_cli.storage.recipe_loader import load_recipe

from .installer import Installer, ItemFetcher
from .resolver import resolve_root

log = logging.getLogger(__name__)


class InstallManager:
    """Orchestrates a complete install run for one recipe."""

    def __init__(self, config: InstallConfig, fetcher: ItemFetcher | None = None):
        if config.recipe_path is None:
            raise ValueError("InstallConfig.recipe_path is required for an install.")
        self.config = config
        self._fetcher = fetcher
        self.stats = InstallStats(dry_run=config.dry_run)
        self.registry: ProfileRegistry | None = None
        self.recipe: Recipe | None = None
        self.root: Path | None = None
        self.duration = 0.0

    def prepare(self) -> tuple[Recipe, Path]:
        """
        Loads the profile registry and the recipe, then resolves the installation
        root. Nothing is fetched or written.

        Raises:
            ConfigurationError: If either file cannot be loaded.
            UnknownProfileError: If the recipe names an unknown profile.
        """
        self.registry = ProfileStore(self.config.resolved_profiles_file).load()
        self.recipe = load_recipe(self.config.recipe_path)
        self.root = resolve_root(
            self.recipe.name, self.registry, self.config.minecraft_dir
        )
        log.info(f"Installation root: [dim]{escape(str(self.root))}[/dim]")
        return self.recipe, self.root

    async def execute(self) -> InstallStats:
        """
        Runs the whole install.

        Raises:
            ConfigurationError, UnknownProfileError: Before anything is fetched.
            DirectoryCreationError: If a category directory cannot be created.
            InstallError: After every category was attempted, if any item failed.
        """
        log.info("Start mcm")
        recipe, root = self.prepare()

        fetcher = self._fetcher
        owns_fetcher = fetcher is None
        if owns_fetcher:
            fetcher = Fetcher(
                timeout=self.config.timeout, user_agent=self.config.user_agent
            )

        installer = Installer(fetcher, self.stats, dry_run=self.config.dry_run)
        start_time = time.monotonic()
        try:
            await installer.install_recipe(root, recipe)
        finally:
            self.duration = time.monotonic() - start_time
            if owns_fetcher:
                await fetcher.close()

        installer.raise_for_errors()
        return self.stats
