"""Dialog widget: the conversation between the user and jot."""

from dataclasses import dataclass

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static


@dataclass
class DialogLine:
    """One entry in the dialog."""

    role: str  # "user" or "jot"
    content: str


class LineSubmitted(Message):
    """Sent when the user enters a command line."""

    def __init__(self, line: str) -> None:
        """Initialize LineSubmitted message.

        Args:
            line: The command line as typed, surrounding whitespace removed.
        """
        self.line = line
        super().__init__()


class DialogWidget(Widget):
    """Scrolling dialog with an input box docked at the bottom."""

    DEFAULT_CSS = """
    DialogWidget {
        layout: vertical;
        height: 100%;
        background: $surface;
        border: solid $primary;
    }

    DialogWidget:focus-within {
        border: solid $accent;
    }

    #dialog-lines {
        height: 1fr;
        padding: 0 1;
    }

    .dialog-line {
        margin: 1 0 0 0;
        padding: 0 1;
    }

    .dialog-user {
        background: $surface-darken-1;
    }

    .dialog-jot {
        background: $surface-lighten-1;
    }

    #dialog-input {
        dock: bottom;
        width: 100%;
    }
    """

    def __init__(
        self,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self._lines: list[DialogLine] = []

    @property
    def lines(self) -> list[DialogLine]:
        return list(self._lines)

    def compose(self) -> ComposeResult:
        yield VerticalScroll(id="dialog-lines")
        yield Input(placeholder="Type a command... (Enter to send)", id="dialog-input")

    def add_line(self, role: str, content: str) -> None:
        """Append one entry and scroll it into view."""
        line = DialogLine(role=role, content=content)
        self._lines.append(line)

        label = "You" if role == "user" else "Jot"
        style = "bold cyan" if role == "user" else "bold green"
        text = Text()
        text.append(f"{label}: ", style=style)
        text.append(content)

        container = self.query_one("#dialog-lines", VerticalScroll)
        container.mount(Static(text, classes=f"dialog-line dialog-{role}"))
        self.call_later(lambda: container.scroll_end(animate=False))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "dialog-input":
            return
        line = event.value.strip()
        event.input.value = ""
        if not line:
            return
        self.post_message(LineSubmitted(line))


__all__ = ["DialogWidget", "DialogLine", "LineSubmitted"]
