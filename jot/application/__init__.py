"""Application service layer for jot.

Connects the command parser, the task list and rendering, and owns the
current list for the front ends.

Example usage:
    >>> from jot.application import execute
    >>> from jot.domain.task import TaskList
    >>> result = execute(TaskList(), ["todo", "read", "book"])
    >>> result.value.reply.splitlines()[1]
    '[T][ ] read book'
"""

from jot.application.session import Outcome, Session, execute

__all__ = [
    "execute",
    "Outcome",
    "Session",
]
