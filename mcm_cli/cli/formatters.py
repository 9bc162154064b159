"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mcm_cli.exceptions import InstallError
from mcm_cli.models.profile import ProfileRegistry
from mcm_cli.models.recipe import Item
from mcm_cli.models.stats import InstallStats
from mcm_cli.utils.formatting import format_duration, format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "ConfigurationError": [
            "• Check that the recipe file exists and is valid TOML.",
            "• Make sure the launcher has been started at least once so that "
            "launcher_profiles.json exists.",
            "• Use --minecraft-dir or --profiles if your game lives elsewhere.",
        ],
        "UnknownProfileError": [
            "• The recipe's 'name' must match a launcher profile exactly.",
            "• Run `mcm profiles` to list the available profiles.",
            "• Remove 'name' from the recipe to install into the default directory.",
        ],
        "DirectoryCreationError": [
            "• Check the permissions of the installation directory.",
            "• Check that the profile's game directory is on a mounted drive.",
        ],
        "InstallError": [
            "• Check the failing URLs in a browser.",
            "• Delete any empty or partial files left behind, then run again.",
            "• Items that were installed are skipped on the next run.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_summary_panel(
    stats: InstallStats, duration_s: float, console: Console | None = None
):
    """Displays the final summary of an install run."""
    console = console or Console()

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=20)
    stats_table.add_column(style="white", justify="left")

    if stats.dry_run:
        stats_table.add_row(
            "→ Would Install:", f"[bold cyan]{stats.items_would_install}[/bold cyan]"
        )
    else:
        stats_table.add_row(
            "✓ Installed:", f"[bold green]{stats.items_installed}[/bold green]"
        )
    if stats.items_skipped_exists > 0:
        stats_table.add_row(
            "○ Already Installed:", f"[yellow]{stats.items_skipped_exists}[/yellow]"
        )
    if stats.items_failed > 0:
        stats_table.add_row("✗ Failed:", f"[bold red]{stats.items_failed}[/bold red]")

    if stats.categories:
        stats_table.add_row("", "")
        for name, cat in stats.categories.items():
            parts = [f"[green]{cat.installed} new[/green]"]
            if cat.skipped_exists:
                parts.append(f"[yellow]{cat.skipped_exists} present[/yellow]")
            if cat.would_install:
                parts.append(f"[cyan]{cat.would_install} pending[/cyan]")
            if cat.failed:
                parts.append(f"[red]{cat.failed} failed[/red]")
            stats_table.add_row(f"{escape(name)}:", ", ".join(parts))

    stats_table.add_row("", "")
    stats_table.add_row(
        "Total Size:", f"[cyan]{format_size(stats.total_size_downloaded)}[/cyan]"
    )
    stats_table.add_row("Time Elapsed:", f"[blue]{format_duration(duration_s)}[/blue]")

    if stats.dry_run:
        title = "🔍 [bold]Dry Run Summary[/bold]"
        border_color = "yellow"
    elif stats.items_failed:
        title = "[bold]Install Finished With Errors[/bold]"
        border_color = "red"
    else:
        title = "[bold]Install Complete![/bold]"
        border_color = "green"

    console.print()
    console.print(
        Panel(
            stats_table,
            title=title,
            border_style=border_color,
            box=box.DOUBLE,
            expand=False,
            padding=(1, 2),
        )
    )
    console.print()


def print_install_errors(error: InstallError, console: Console | None = None):
    """Lists every failed item in the order it was processed."""
    console = console or Console(stderr=True)
    table = Table(title=f"[bold red]{len(error.errors)} errors occurred[/bold red]")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Category", style="cyan")
    table.add_column("Item", style="bold")
    table.add_column("Kind", style="magenta")
    table.add_column("Message", style="red")
    for i, item_error in enumerate(error.errors, 1):
        table.add_row(
            str(i),
            escape(item_error.category),
            escape(item_error.item_name),
            type(item_error).__name__,
            escape(str(item_error)),
        )
    console.print(table)


def print_status_table(
    root: Path,
    statuses: list[tuple[str, Item, bool]],
    console: Console | None = None,
):
    """Displays every recipe item and whether it is already installed."""
    console = console or Console()
    table = Table(title=f"Installation root: [dim]{escape(str(root))}[/dim]")
    table.add_column("Category", style="cyan")
    table.add_column("Item", style="bold")
    table.add_column("Status")
    table.add_column("URL", style="dim", overflow="fold")
    for category, item, installed in statuses:
        status = (
            "[green]✓ installed[/green]" if installed else "[yellow]missing[/yellow]"
        )
        table.add_row(escape(category), escape(item.name), status, escape(item.url))
    console.print(table)

    missing = sum(1 for _, _, installed in statuses if not installed)
    if not statuses:
        console.print("[dim]The recipe lists no items.[/dim]")
    elif missing:
        console.print(f"[yellow]{missing} of {len(statuses)} items missing.[/yellow]")
    else:
        console.print("[bold green]✓ Everything is installed.[/bold green]")


def print_profiles_table(
    profiles_file: Path, registry: ProfileRegistry, console: Console | None = None
):
    """Displays the launcher profiles the installer can target."""
    console = console or Console()
    if not registry.profiles:
        console.print(
            f"[yellow]No profiles found in[/yellow] [dim]{profiles_file}[/dim]"
        )
        return

    table = Table(title=f"Profiles ([dim]{escape(str(profiles_file))}[/dim])")
    table.add_column("Name", style="bold cyan")
    table.add_column("Game Directory")
    table.add_column("Last Version", style="green")
    for name, profile in registry.profiles.items():
        game_dir = (
            escape(profile.game_dir) if profile.game_dir else "[dim](default)[/dim]"
        )
        table.add_row(escape(name), game_dir, escape(profile.last_version_id))
    console.print(table)
