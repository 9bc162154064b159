"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from mcm_cli import __version__
from mcm_cli.core.install_manager import InstallManager
from mcm_cli.core.installer import item_statuses
from mcm_cli.core.resolver import resolve_root
from mcm_cli.exceptions import InstallError, McmError
from mcm_cli.models.config import InstallConfig
from mcm_cli.storage.config_manager import ConfigManager
from mcm_cli.storage.profile_store import ProfileStore
from mcm_cli.storage.recipe_loader import load_recipe
from mcm_cli.utils.path import get_config_dir

from .formatters import (
    format_error_with_suggestions,
    print_install_errors,
    print_profiles_table,
    print_status_table,
    print_summary_panel,
)

console = Console()
err_console = Console(stderr=True)

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("mcm_cli")

app = typer.Typer(
    name="mcm",
    help=(
        "Install the mods and resource packs listed in a recipe into your game"
        " directory. Use 'mcm <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)

CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"

MINECRAFT_DIR_OPTION = typer.Option(
    None,
    "--minecraft-dir",
    "-d",
    envvar="MCM_MINECRAFT_DIR",
    help="Game directory used as the default root and to find the profiles file.",
)
PROFILES_OPTION = typer.Option(
    None,
    "--profiles",
    "-p",
    help="Path to launcher_profiles.json (default: inside the game directory).",
)


def _load_config(cli_options: dict) -> InstallConfig:
    return ConfigManager(CONFIG_FILE).load_config(cli_options)


def _fail(error: McmError) -> typer.Exit:
    err_console.print(format_error_with_suggestions(error))
    return typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
):
    """mcm: a recipe-driven mod installer"""
    if version:
        console.print(f"[bold]mcm[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("mcm_cli").setLevel(log_level)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def install(
    recipe: Path = typer.Argument(..., help="Recipe file (TOML) listing the items."),
    minecraft_dir: Path | None = MINECRAFT_DIR_OPTION,
    profiles: Path | None = PROFILES_OPTION,
    dry_run: bool | None = typer.Option(
        None,
        "--dry-run/--no-dry-run",
        help="Show what would be installed without writing any files.",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Total timeout in seconds for each download (default: aiohttp's).",
    ),
):
    """Install every missing item of a recipe."""
    try:
        config = _load_config(
            {
                "recipe_path": recipe,
                "minecraft_dir": minecraft_dir,
                "profiles_file": profiles,
                "dry_run": dry_run,
                "timeout": timeout,
            }
        )
        manager = InstallManager(config)
        asyncio.run(manager.execute())
    except InstallError as e:
        print_summary_panel(manager.stats, manager.duration)
        print_install_errors(e, err_console)
        err_console.print(f"[bold red]mcm:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    except McmError as e:
        raise _fail(e) from e

    print_summary_panel(manager.stats, manager.duration)


@app.command()
def status(
    recipe: Path = typer.Argument(..., help="Recipe file (TOML) listing the items."),
    minecraft_dir: Path | None = MINECRAFT_DIR_OPTION,
    profiles: Path | None = PROFILES_OPTION,
):
    """Show which recipe items are installed, without downloading anything."""
    try:
        config = _load_config(
            {
                "recipe_path": recipe,
                "minecraft_dir": minecraft_dir,
                "profiles_file": profiles,
            }
        )
        registry = ProfileStore(config.resolved_profiles_file).load()
        parsed = load_recipe(config.recipe_path)
        root = resolve_root(parsed.name, registry, config.minecraft_dir)
    except McmError as e:
        raise _fail(e) from e

    print_status_table(root, item_statuses(root, parsed))


@app.command(name="profiles")
def list_profiles(
    minecraft_dir: Path | None = MINECRAFT_DIR_OPTION,
    profiles: Path | None = PROFILES_OPTION,
):
    """List the launcher profiles a recipe can target."""
    try:
        config = _load_config(
            {"minecraft_dir": minecraft_dir, "profiles_file": profiles}
        )
        registry = ProfileStore(config.resolved_profiles_file).load()
    except McmError as e:
        raise _fail(e) from e

    print_profiles_table(config.resolved_profiles_file, registry)
