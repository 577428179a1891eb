"""CLI interface for jot using Typer.

Usage:
    jot shell                                   # Interactive session
    jot gui                                     # Terminal UI
    jot todo read book                          # Add a plain task
    jot deadline return book /by 21/12/2020 2359
    jot list                                    # Show all tasks

The CLI is structured as:
- app: Main Typer application
- commands/: Command modules (tasks, interactive)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from typing import Optional

import typer

from jot import __version__
from jot.global_config import get_global_config, resolve_data_file, resolve_log_dir
from jot.interfaces.cli.commands import config, interactive, tasks
from jot.interfaces.cli.common import CliState, data_file_option
from jot.logging_setup import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="jot",
    help="A personal task tracker driven by short text commands",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"jot version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    data_file: Optional[str] = data_file_option,
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """jot - keep track of todos, deadlines and events from the terminal."""
    config = get_global_config()
    log_file = setup_logging(
        log_dir=resolve_log_dir(config),
        console_level=logging.DEBUG if verbose else logging.WARNING,
    )
    ctx.obj = CliState(
        data_file=resolve_data_file(config, data_file),
        assistant_name=config.assistant_name,
    )
    logger.debug(f"Using task file {ctx.obj.data_file}, logging to {log_file}")


tasks.register(app)
interactive.register(app)
config.register(app)


__all__ = ["app"]
