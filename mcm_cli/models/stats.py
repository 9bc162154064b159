"""
Dataclass for tracking install run statistics.
"""

from dataclasses import dataclass, field


@dataclass
class CategoryStats:
    installed: int = 0
    skipped_exists: int = 0
    failed: int = 0
    would_install: int = 0


@dataclass
class InstallStats:
    """Counts what happened to every item during a run."""

    items_installed: int = 0
    items_skipped_exists: int = 0
    items_failed: int = 0
    items_would_install: int = 0
    total_size_downloaded: int = 0
    dry_run: bool = False
    categories: dict[str, CategoryStats] = field(default_factory=dict)

    def category(self, name: str) -> CategoryStats:
        return self.categories.setdefault(name, CategoryStats())

    def record_installed(self, category: str, size: int) -> None:
        self.items_installed += 1
        self.total_size_downloaded += size
        self.category(category).installed += 1

    def record_skipped(self, category: str) -> None:
        self.items_skipped_exists += 1
        self.category(category).skipped_exists += 1

    def record_failed(self, category: str) -> None:
        self.items_failed += 1
        self.category(category).failed += 1

    def record_would_install(self, category: str) -> None:
        self.items_would_install += 1
        self.category(category).would_install += 1
