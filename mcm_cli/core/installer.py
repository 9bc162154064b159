"""
Installs the items of each recipe category, skipping those already on disk.
"""

import logging
from pathlib import Path
from typing import Iterable, Protocol

from rich.markup import escape

from mcm_cli.exceptions import DirectoryCreationError, InstallError, ItemError
from mcm_cli.models.recipe import Item, Recipe
from mcm_cli.models.stats import InstallStats
from mcm_cli.utils.path import create_dir, path_exists

log = logging.getLogger(__name__)


class ItemFetcher(Protocol):
    async def fetch(
        self, destination_path: Path, url: str, *, item_name: str, category: str
    ) -> int: ...


class Installer:
    """
    Runs the skip-or-fetch loop for each category.

    Item failures never stop the loop; they are appended to `errors` in the
    order they happen and reported together by `raise_for_errors` once every
    category has been attempted. Failing to create a category directory is
    fatal and propagates immediately.
    """

    def __init__(
        self,
        fetcher: ItemFetcher,
        stats: InstallStats | None = None,
        dry_run: bool = False,
    ):
        self.fetcher = fetcher
        self.dry_run = dry_run
        self.stats = stats or InstallStats(dry_run=dry_run)
        self.errors: list[ItemError] = []

    async def install_recipe(self, root: Path, recipe: Recipe) -> InstallStats:
        """
        Installs every category in declaration order into `root`.

        Raises:
            DirectoryCreationError: If a category directory cannot be created.
                Later categories are not attempted.
        """
        for category, items in recipe.categories.items():
            await self.install_category(root, category, items)
        return self.stats

    async def install_category(
        self, root: Path, category: str, items: Iterable[Item]
    ) -> list[ItemError]:
        """
        Ensures `root/category` exists and installs each item into it.

        Returns:
            The item failures from this category. They are also appended to
            `self.errors`.

        Raises:
            DirectoryCreationError: If the category directory cannot be created.
        """
        category_path = root / category
        log.info(
            f"Start install {category} to: [dim]{escape(str(category_path))}[/dim]"
        )

        if not path_exists(category_path):
            if self.dry_run:
                log.info(f"[cyan]→ (Dry Run)[/] Would create {category} directory")
            else:
                log.info(f"Create {category} directory")
                try:
                    create_dir(category_path)
                except OSError as e:
                    log.error(f"[red]Failed create {category} directory[/red]")
                    raise DirectoryCreationError(category, category_path, e) from e

        failures = []
        for item in items:
            error = await self.install_item(category_path, category, item)
            if error is not None:
                failures.append(error)
        return failures

    async def install_item(
        self, category_path: Path, category: str, item: Item
    ) -> ItemError | None:
        """Installs a single item unless its destination already exists."""
        destination = category_path / item.name
        if path_exists(destination):
            log.info(f"[yellow]○ Already installed:[/] {escape(item.name)}")
            self.stats.record_skipped(category)
            return None

        if self.dry_run:
            log.info(
                f"[cyan]→ (Dry Run)[/] Would install {escape(item.name)} "
                f"from [dim]{escape(item.url)}[/dim]"
            )
            self.stats.record_would_install(category)
            return None

        log.info(f"Start install: {escape(item.name)}")
        try:
            size = await self.fetcher.fetch(
                destination, item.url, item_name=item.name, category=category
            )
        except ItemError as e:
            log.error(f"[red]✗ {escape(str(e))}[/red]")
            self.errors.append(e)
            self.stats.record_failed(category)
            return e

        log.info(f"[green]✓ Installed:[/] {escape(item.name)}")
        self.stats.record_installed(category, size)
        return None

    def raise_for_errors(self) -> None:
        """Raises InstallError carrying every item failure, if there were any."""
        if self.errors:
            raise InstallError(self.errors)


def item_statuses(root: Path, recipe: Recipe) -> list[tuple[str, Item, bool]]:
    """Lists (category, item, installed) for every recipe item without fetching."""
    return [
        (category, item, path_exists(root / category / item.name))
        for category, items in recipe.categories.items()
        for item in items
    ]
