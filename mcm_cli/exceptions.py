"""
Defines custom exceptions for the application to allow for more specific error handling.
"""

from pathlib import Path


class McmError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(McmError):
    """Raised when the recipe, the profile registry or the config file cannot be
    read, parsed or validated."""


class UnknownProfileError(McmError):
    """Raised when a recipe names a profile that is not in the registry."""

    def __init__(self, profile_name: str):
        self.profile_name = profile_name
        super().__init__(f"invalid version name: {profile_name}")


class DirectoryCreationError(McmError):
    """Raised when a category directory cannot be created."""

    def __init__(self, category: str, path: Path, cause: Exception):
        self.category = category
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create {category} directory '{path}': {cause}")


class ItemError(McmError):
    """
    Base for per-item failures. These never stop a run; the installer collects
    them and reports them together once every category has been attempted.
    """

    def __init__(
        self,
        message: str,
        *,
        item_name: str,
        url: str,
        path: Path,
        category: str = "",
        cause: Exception | None = None,
    ):
        self.item_name = item_name
        self.url = url
        self.path = path
        self.category = category
        self.cause = cause
        super().__init__(message)


class NetworkError(ItemError):
    """Raised when a download fails or the server answers with a non-2xx status."""


class LocalWriteError(ItemError):
    """Raised when a destination file cannot be created or written."""


class InstallError(McmError):
    """Raised at the end of a run when one or more items failed to install."""

    def __init__(self, errors: list[ItemError]):
        self.errors = list(errors)
        lines = "\n".join(str(e) for e in self.errors)
        super().__init__(f"{len(self.errors)} errors occurred:\n{lines}")
