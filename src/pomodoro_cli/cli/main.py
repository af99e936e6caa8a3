"""CLI for the Pomodoro timer using Typer."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pomodoro_cli import __version__
from pomodoro_cli.core.config import DEFAULT_CONFIG_PATH, Config
from pomodoro_cli.focus.alert import AlertError, AlertPlayer
from pomodoro_cli.focus.countdown import CountdownDisplay
from pomodoro_cli.focus.pomodoro import SessionController

logger = logging.getLogger(__name__)

# Initialize Typer app
app = typer.Typer(
    name="pomodoro",
    help="A simple Pomodoro timer CLI.",
    add_completion=False,
)

console = Console()


def setup_logging(log_level: str, log_file: Path | None = None) -> None:
    """Configure logging for the application."""
    level = getattr(logging, log_level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        log_file = log_file.expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"Pomodoro Timer v{__version__}")
        raise typer.Exit()


def _print_settings(controller: SessionController) -> None:
    session = controller.config

    table = Table(title="Pomodoro Session", show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")

    table.add_row("Work", f"{session.work_minutes} minutes")
    table.add_row("Break", f"{session.break_minutes} minutes")
    table.add_row("Long break", f"{session.long_break_minutes} minutes")
    table.add_row("Cycles before long break", str(session.cycles))
    table.add_row("Alert sound", escape(str(session.sound_file)) if session.sound_file else "built-in beep")

    console.print(table)
    console.print("Press Ctrl+C to exit\n")


def _print_summary(controller: SessionController) -> None:
    summary = controller.get_summary()
    console.print("\n[bold]Session Summary:[/bold]")
    console.print(f"  Pomodoros completed: {summary['pomodoros_completed']}")
    console.print(f"  Breaks taken: {summary['breaks_taken']} (long: {summary['long_breaks_taken']})")
    console.print(f"  Total work time: {summary['total_work_minutes']} minutes")
    console.print(f"  Total break time: {summary['total_break_minutes']} minutes")


@app.command()
def run(
    work: int = typer.Option(
        None,
        "--work",
        "-w",
        min=0,
        metavar="MINUTES",
        help="Work duration in minutes (default: 25)",
    ),
    break_: int = typer.Option(
        None,
        "--break",
        "-b",
        min=0,
        metavar="MINUTES",
        help="Break duration in minutes (default: 5)",
    ),
    long_break: int = typer.Option(
        None,
        "--long-break",
        "-l",
        min=0,
        metavar="MINUTES",
        help="Long break duration in minutes (default: 15)",
    ),
    cycles: int = typer.Option(
        None,
        "--cycles",
        "-c",
        min=1,
        metavar="COUNT",
        help="Number of work/break cycles before a long break (default: 4)",
    ),
    sound_file: Path = typer.Option(
        None,
        "--sound-file",
        "-s",
        metavar="FILE",
        help="Custom sound file to play (WAV or any format libsndfile reads)",
    ),
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        help="YAML config file with default durations",
    ),
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Alternate work and break phases, with a long break every few cycles.

    Examples:
        pomodoro
        pomodoro -w 50 -b 10 -l 30 -c 3
        pomodoro --sound-file ~/sounds/gong.wav
    """
    try:
        config = Config.load(config_path)
        if log_level:
            config = Config.model_validate({**config.model_dump(), "log_level": log_level.upper()})
        session = config.session_with_overrides(
            work_minutes=work,
            break_minutes=break_,
            long_break_minutes=long_break,
            cycles=cycles,
            sound_file=sound_file,
        )
    except (ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Cannot read config file {escape(str(config_path))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    setup_logging(config.log_level, config.log_file)

    controller = SessionController(
        session,
        display=CountdownDisplay(poll_interval=config.display.poll_interval_seconds),
        alert=AlertPlayer(session.sound_file),
        console=console,
    )

    _print_settings(controller)

    try:
        controller.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopped[/yellow]")
        _print_summary(controller)
        raise typer.Exit(130)
    except EOFError:
        logger.error("Standard input closed while waiting to continue")
        console.print("\n[red]Input closed, exiting.[/red]")
        raise typer.Exit(1)
    except (AlertError, FileNotFoundError) as e:
        logger.error(f"Alert failed: {e}")
        console.print(f"\n[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
