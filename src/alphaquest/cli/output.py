"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from alphaquest.config import UserSettings
from alphaquest.domain import CoverageResult, LevelKind

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_LEVEL_TITLES = {
    LevelKind.FILL: "Fill it in",
    LevelKind.TRACE: "Trace",
    LevelKind.FREE_DRAW: "Draw it yourself",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]AlphaQuest[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_letters(letters: list[str], completed: set[str]) -> None:
    """Print the letter menu with completion marks.

    Args:
        letters: Available letter identifiers
        completed: Identifiers the user has completed
    """
    console.print(f"\n[bold]{len(letters)} letters[/bold] {SYM_DOT} {len(completed)} completed\n")
    for letter in letters:
        if letter in completed:
            console.print(f"  [green]{SYM_OK}[/green] {letter}")
        else:
            console.print(f"    {letter}")


def print_result(
    letter_id: str,
    level: LevelKind,
    result: CoverageResult,
    threshold: float,
    passed: bool,
) -> None:
    """Print the outcome of a level check.

    Args:
        letter_id: Letter that was evaluated
        level: Level that was evaluated
        result: Evaluator output
        threshold: Pass threshold in percent
        passed: Whether the check passed
    """
    line = Text("  ")
    line.append(f"Letter {letter_id}", style="bold")
    line.append(f" {SYM_DOT} {_LEVEL_TITLES[level]}")
    console.print(line)
    console.print(
        f"  {result.covered_count}/{result.tested_count} points covered {SYM_DOT} "
        f"{result.percentage:.1f}% (needs {threshold:.0f}%)"
    )
    if passed:
        console.print(f"\n[bold green]{SYM_OK} Passed[/bold green]")
    else:
        console.print(f"\n[bold red]{SYM_ERR} Not yet[/bold red] {SYM_DOT} try again")


def print_settings(settings: UserSettings, path: str) -> None:
    """Print the user settings as a table.

    Args:
        settings: Settings record to show
        path: Where the record is stored
    """
    table = Table(title="User settings", show_header=True, header_style="bold")
    table.add_column("Setting")
    table.add_column("Value", justify="right")
    table.add_row("Fill threshold", f"{settings.fill_threshold_percentage}%")
    table.add_row("Trace threshold", f"{settings.trace_threshold_percentage}%")
    table.add_row("Shape recognition", f"{settings.shape_recognition_sensitivity}%")
    table.add_row("Music", "on" if settings.is_music_enabled else "off")
    table.add_row("Tutorial completed", "yes" if settings.has_completed_tutorial else "no")
    completed = ", ".join(sorted(settings.completed_letters)) or "-"
    table.add_row("Completed letters", completed)
    console.print(table)
    path_line = Text("  ")
    path_line.append(path, style="dim")
    console.print(path_line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
