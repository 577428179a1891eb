"""Shared utilities for jot CLI commands.

This module provides common utilities used across CLI commands:
- Per-invocation state (which task file, which assistant name)
- Opening a Session on that task file
- Formatted output helpers (errors, separators)
"""

from dataclasses import dataclass
from pathlib import Path

import typer

from jot.application import Session
from jot.domain.shared import Err
from jot.global_config import DEFAULT_ASSISTANT_NAME
from jot.infrastructure.storage import TaskListRepository

# Reusable data-file option for the root callback
data_file_option = typer.Option(
    None,
    "--data-file",
    "-f",
    help="Task file to use (or set JOT_DATA_FILE env var)",
    envvar="JOT_DATA_FILE",
)


@dataclass
class CliState:
    """Options resolved by the root callback, shared with every command."""

    data_file: Path
    assistant_name: str = DEFAULT_ASSISTANT_NAME


def get_state(ctx: typer.Context) -> CliState:
    """Fetch the state the root callback stored on the context.

    Raises:
        typer.Exit: If the callback did not run (should not happen).
    """
    state = ctx.find_root().obj
    if not isinstance(state, CliState):
        print_error("CLI state missing; run commands through the jot app.")
        raise typer.Exit(1)
    return state


def open_session(ctx: typer.Context) -> Session:
    """Open a Session on the task file chosen for this invocation."""
    state = get_state(ctx)
    return Session.open(TaskListRepository(state.data_file), state.assistant_name)


def run_line(ctx: typer.Context, line: str) -> None:
    """Run one command line through a fresh session and print the reply.

    Raises:
        typer.Exit: With code 1 if the command was rejected.
    """
    session = open_session(ctx)
    result = session.handle(line)
    if isinstance(result, Err):
        print_error(result.error.message)
        raise typer.Exit(1)
    typer.echo(result.value)


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_separator(char: str = "-", width: int = 60) -> None:
    """Print a separator line.

    Args:
        char: Character to use for separator
        width: Width of the separator line
    """
    typer.echo(char * width)


__all__ = [
    "CliState",
    "data_file_option",
    "get_state",
    "open_session",
    "run_line",
    "print_error",
    "print_separator",
]
