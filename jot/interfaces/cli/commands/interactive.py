"""Interactive front ends: the line-based shell and the TUI."""

import logging

import typer

from jot.interfaces.cli.common import open_session, print_error, print_separator

logger = logging.getLogger(__name__)


def shell(ctx: typer.Context) -> None:
    """Read commands line by line until 'bye' or end of input."""
    session = open_session(ctx)
    _print_reply(session.greeting())

    while not session.is_exit:
        try:
            line = input()
        except EOFError:
            break
        if not line.strip():
            continue
        _print_reply(session.respond(line))

    logger.info(f"Shell closed with {session.task_list.size} tasks")


def gui(ctx: typer.Context) -> None:
    """Open the terminal user interface."""
    try:
        from jot.tui.app import JotApp
    except ImportError as e:
        print_error(f"Missing dependency - {e}")
        typer.echo("Install required packages: pip install textual")
        raise typer.Exit(1)

    JotApp(open_session(ctx)).run()


def _print_reply(text: str) -> None:
    print_separator()
    typer.echo(text)
    print_separator()


def register(app: typer.Typer) -> None:
    app.command("shell")(shell)
    app.command("gui")(gui)
