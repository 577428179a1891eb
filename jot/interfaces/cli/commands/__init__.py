"""CLI command groups for jot.

Command modules:
- tasks: one-shot task commands (todo, deadline, event, list, done,
  delete, update, find)
- interactive: the line-based shell and the TUI
- config: show and change saved preferences

Each module exposes register(app) to attach its commands.
"""

from jot.interfaces.cli.commands import config, interactive, tasks

__all__ = ["tasks", "interactive", "config"]
