"""One-shot task commands.

Each command loads the task file, runs a single command line through
the session, saves on success and prints the reply, e.g.::

    jot deadline return book /by 21/12/2020 2359
    jot update 1 -t 22/12/2020 1200
"""

from typing import Optional

import typer

from jot.domain.command import CommandName
from jot.interfaces.cli.common import run_line

# Let "-m"/"-t" and friends through as words instead of options
PASSTHROUGH = {"ignore_unknown_options": True}

WordsArgument = typer.Argument(None, help="Command arguments, as you would type them")


def _run(ctx: typer.Context, name: CommandName, words: Optional[list[str]]) -> None:
    run_line(ctx, " ".join([name.value, *(words or [])]))


def todo(ctx: typer.Context, words: Optional[list[str]] = WordsArgument) -> None:
    """Add a plain task: todo <description>."""
    _run(ctx, CommandName.TODO, words)


def deadline(ctx: typer.Context, words: Optional[list[str]] = WordsArgument) -> None:
    """Add a deadline: deadline <description> /by DD/MM/YYYY HHMM."""
    _run(ctx, CommandName.DEADLINE, words)


def event(ctx: typer.Context, words: Optional[list[str]] = WordsArgument) -> None:
    """Add an event: event <description> /at DD/MM/YYYY HHMM."""
    _run(ctx, CommandName.EVENT, words)


def list_tasks(ctx: typer.Context) -> None:
    """Show every task with its 1-based index."""
    _run(ctx, CommandName.LIST, None)


def done(ctx: typer.Context, words: Optional[list[str]] = WordsArgument) -> None:
    """Mark a task done: done <index>."""
    _run(ctx, CommandName.DONE, words)


def delete(ctx: typer.Context, words: Optional[list[str]] = WordsArgument) -> None:
    """Remove a task: delete <index>."""
    _run(ctx, CommandName.DELETE, words)


def update(ctx: typer.Context, words: Optional[list[str]] = WordsArgument) -> None:
    """Amend a task: update <index> [-m|-t] <description> [/by|/at DD/MM/YYYY HHMM].

    -m rewrites only the description, -t only the time, no flag both.
    """
    _run(ctx, CommandName.UPDATE, words)


def find(ctx: typer.Context, words: Optional[list[str]] = WordsArgument) -> None:
    """List tasks containing any of the given words."""
    _run(ctx, CommandName.FIND, words)


def register(app: typer.Typer) -> None:
    """Attach the task commands to the top-level app."""
    app.command("todo", context_settings=PASSTHROUGH)(todo)
    app.command("deadline", context_settings=PASSTHROUGH)(deadline)
    app.command("event", context_settings=PASSTHROUGH)(event)
    app.command("list")(list_tasks)
    app.command("done", context_settings=PASSTHROUGH)(done)
    app.command("delete", context_settings=PASSTHROUGH)(delete)
    app.command("update", context_settings=PASSTHROUGH)(update)
    app.command("find", context_settings=PASSTHROUGH)(find)
