"""CLI application entry point for AlphaQuest.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from alphaquest import __version__
from alphaquest.cli.output import (
    console,
    print_error,
    print_header,
    print_letters,
    print_result,
    print_settings,
    print_step,
)
from alphaquest.config import (
    AlphaQuestSettings,
    CurveMode,
    GeometryConfig,
    LoggingConfig,
    LogLevel,
)
from alphaquest.core import LevelAttempt, level_threshold
from alphaquest.domain import AttemptState, LevelKind, Size
from alphaquest.exceptions import (
    AlphaQuestError,
    LetterNotFoundError,
    SettingsSaveError,
    StrokeFileError,
)
from alphaquest.io import JsonSettingsStore, LetterDataProvider, load_stroke_session
from alphaquest.utils import EvaluationLogger, configure_logging

EXIT_FAILED_CHECK = 2

# Create the Typer app
app = typer.Typer(
    name="alphaquest",
    help="Score letter drawings the way the AlphaQuest levels do.",
    add_completion=False,
    no_args_is_help=True,
)
settings_app = typer.Typer(
    help="View or change thresholds and progress.",
    no_args_is_help=True,
)
app.add_typer(settings_app, name="settings")

SettingsPathOption = Annotated[
    Path | None,
    typer.Option(
        "--settings",
        "-s",
        help="User settings file (default: ~/.alphaquest/alphaquest_user_settings.json)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]AlphaQuest[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def _main_options(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Letter learning levels: fill in, trace and free draw."""


@app.command()
def letters(settings_path: SettingsPathOption = None) -> None:
    """List the available letters and mark the completed ones."""
    store = JsonSettingsStore(settings_path)
    provider = LetterDataProvider()
    user = store.load_user_settings()
    print_letters(provider.available(), user.completed_letters)


@app.command()
def evaluate(
    letter: Annotated[
        str,
        typer.Argument(help="Letter to practise (e.g. A)", show_default=False),
    ],
    strokes_file: Annotated[
        Path,
        typer.Argument(
            help="JSON stroke file in canvas coordinates",
            show_default=False,
        ),
    ],
    level: Annotated[
        LevelKind,
        typer.Option(
            "--level",
            "-l",
            help="Level to evaluate (fill|trace|draw)",
            case_sensitive=False,
        ),
    ] = LevelKind.FILL,
    width: Annotated[
        float,
        typer.Option("--width", help="Canvas width", min=1.0),
    ] = 400.0,
    height: Annotated[
        float,
        typer.Option("--height", help="Canvas height", min=1.0),
    ] = 300.0,
    settings_path: SettingsPathOption = None,
    curve_mode: Annotated[
        CurveMode,
        typer.Option(
            "--curve-mode",
            help="Curve handling for trace and draw levels (chord|flatten)",
            case_sensitive=False,
        ),
    ] = CurveMode.CHORD,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR|CRITICAL)",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Score a stroke file against one level of a letter.

    Exits 0 when the drawing passes and 2 when it does not. Passing the
    draw level records the letter as completed.

    Example:
        alphaquest evaluate A strokes.json --level trace
    """
    settings = AlphaQuestSettings(
        geometry=GeometryConfig(curve_mode=curve_mode),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    store = JsonSettingsStore(settings_path)
    try:
        letter_data = LetterDataProvider().require(letter)
        session = load_stroke_session(strokes_file)

        if not quiet:
            print_step(f"Scoring {len(session)} strokes on a {width:g}x{height:g} canvas")

        attempt = LevelAttempt.for_letter(
            letter_data,
            level,
            Size(width, height),
            settings=settings,
            logger=EvaluationLogger(),
        )
        for stroke in session:
            attempt.add_stroke(stroke)

        thresholds = store.load_thresholds()
        state = attempt.check(thresholds)
        passed = state == AttemptState.PASSED
        result = attempt.result

        if not quiet and result is not None:
            print_result(letter_data.letter_id, level, result, level_threshold(level, thresholds), passed)

        if passed and level == LevelKind.FREE_DRAW:
            store.save_completed_letter(letter_data.letter_id)
            if not quiet:
                console.print(f"  Letter {letter_data.letter_id} completed")

    except LetterNotFoundError as e:
        available = ", ".join(LetterDataProvider().available())
        print_error(f"Unknown letter: {e.letter_id}", details=f"Available letters: {available}")
        raise typer.Exit(code=1)
    except StrokeFileError as e:
        print_error(f"Could not read strokes: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except SettingsSaveError as e:
        print_error(f"Could not save progress: {e.reason}")
        raise typer.Exit(code=1)
    except AlphaQuestError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not passed:
        raise typer.Exit(code=EXIT_FAILED_CHECK)


@settings_app.command("show")
def settings_show(settings_path: SettingsPathOption = None) -> None:
    """Show thresholds and progress."""
    store = JsonSettingsStore(settings_path)
    print_settings(store.load_user_settings(), str(store.path))


@settings_app.command("set")
def settings_set(
    fill: Annotated[
        int | None,
        typer.Option("--fill", help="Fill threshold percentage", min=0, max=100),
    ] = None,
    trace: Annotated[
        int | None,
        typer.Option("--trace", help="Trace threshold percentage", min=0, max=100),
    ] = None,
    recognition: Annotated[
        int | None,
        typer.Option("--recognition", help="Shape recognition sensitivity", min=0, max=100),
    ] = None,
    music: Annotated[
        bool | None,
        typer.Option("--music/--no-music", help="Background music"),
    ] = None,
    settings_path: SettingsPathOption = None,
) -> None:
    """Change thresholds (0-100) or the music switch."""
    if fill is None and trace is None and recognition is None and music is None:
        print_error("Nothing to change", details="Pass --fill, --trace, --recognition or --music")
        raise typer.Exit(code=1)

    store = JsonSettingsStore(settings_path)
    try:
        updated = store.set_thresholds(fill=fill, trace=trace, recognition=recognition)
        if music is not None:
            store.set_music_enabled(music)
            updated = store.load_user_settings()
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)
    except SettingsSaveError as e:
        print_error(f"Could not save settings: {e.reason}")
        raise typer.Exit(code=1)
    print_settings(updated, str(store.path))


@settings_app.command("reset")
def settings_reset(settings_path: SettingsPathOption = None) -> None:
    """Restore default thresholds and clear progress."""
    store = JsonSettingsStore(settings_path)
    try:
        defaults = store.reset()
    except SettingsSaveError as e:
        print_error(f"Could not save settings: {e.reason}")
        raise typer.Exit(code=1)
    print_settings(defaults, str(store.path))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
