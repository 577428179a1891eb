"""Main jot TUI application.

A chat-style window: every line the user enters goes through the same
Session as the CLI, and the reply is appended to the dialog.
"""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input

from jot.application import Session
from jot.tui.widgets import DialogWidget, LineSubmitted

logger = logging.getLogger(__name__)


class JotApp(App):
    """Terminal interface for a jot session."""

    TITLE = "Jot"
    SUB_TITLE = "Todos, deadlines and events"

    CSS = """
    Screen {
        background: $surface;
    }

    DialogWidget {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+l", "list_tasks", "List"),
    ]

    def __init__(self, session: Session) -> None:
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        yield Header()
        yield DialogWidget(id="dialog")
        yield Footer()

    def on_mount(self) -> None:
        dialog = self.query_one("#dialog", DialogWidget)
        dialog.add_line("jot", self.session.greeting())
        self.query_one("#dialog-input", Input).focus()

    def on_line_submitted(self, message: LineSubmitted) -> None:
        self.submit(message.line)

    def submit(self, line: str) -> None:
        """Run a line through the session and show both sides of the exchange."""
        dialog = self.query_one("#dialog", DialogWidget)
        dialog.add_line("user", line)
        dialog.add_line("jot", self.session.respond(line))
        if self.session.is_exit:
            logger.info("Session ended from the TUI")
            self.exit()

    def action_list_tasks(self) -> None:
        self.submit("list")
