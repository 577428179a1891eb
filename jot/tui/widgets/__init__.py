"""Widgets for the jot TUI."""

from jot.tui.widgets.dialog import DialogLine, DialogWidget, LineSubmitted

__all__ = ["DialogWidget", "DialogLine", "LineSubmitted"]
