"""Reply text for each command.

Pure string building; adapters decide where the text goes.
"""

from collections.abc import Sequence

from jot.domain.shared.errors import TaskError
from jot.domain.task import Task

EMPTY_SLOT = "Empty Todo"


def render_task_line(task: Task | None) -> str:
    """The task's message, or a placeholder for a vacant slot."""
    if task is None:
        return EMPTY_SLOT
    return task.message


def _numbered(tasks: Sequence[Task | None]) -> str:
    return "\n".join(
        f"{position}.{render_task_line(task)}" for position, task in enumerate(tasks, start=1)
    )


def add_reply(task: Task | None, count: int) -> str:
    return (
        f"Got it! I've added this task:\n{render_task_line(task)}\n"
        f"Now you have {count} tasks in the list."
    )


def delete_reply(task: Task | None, count: int) -> str:
    return (
        f"Noted. I've removed this task:\n{render_task_line(task)}\n"
        f"Now you have {count} tasks in the list."
    )


def done_reply(task: Task | None) -> str:
    return f"Nice! I've marked this task as done:\n{render_task_line(task)}"


def update_reply(task: Task | None) -> str:
    return f"Got it! Task has been amended to:\n{render_task_line(task)}\n."


def list_reply(tasks: Sequence[Task | None]) -> str:
    return f"Here are the tasks in your list:\n{_numbered(tasks)}"


def find_reply(tasks: Sequence[Task | None]) -> str:
    return f"Here are the matching tasks in your list:\n{_numbered(tasks)}"


def greeting(name: str) -> str:
    return f"Hello! I'm {name}\nWhat can I do for you?"


def farewell() -> str:
    return "Bye. Hope to see you again soon!"


def error_reply(error: TaskError) -> str:
    return f"OOPS!!! {error.message}"


__all__ = [
    "EMPTY_SLOT",
    "render_task_line",
    "add_reply",
    "delete_reply",
    "done_reply",
    "update_reply",
    "list_reply",
    "find_reply",
    "greeting",
    "farewell",
    "error_reply",
]
