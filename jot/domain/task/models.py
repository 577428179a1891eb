"""Task domain models.

Three variants of task share one shape: a user-written message and a
done flag. Deadlines add the moment they are due, events the moment
they start. Every variant is frozen; "changing" a task means building
a new one with ``model_copy``.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .timestamps import format_timestamp


class TaskKind(str, Enum):
    """Discriminant of the task variants."""

    PLAIN = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


class _TaskBase(BaseModel):
    raw_message: str = Field(min_length=1)
    done: bool = False

    model_config = {"frozen": True}

    @property
    def message(self) -> str:
        """The line shown to the user for this task."""
        return describe(self)  # type: ignore[arg-type]

    def mark_done(self) -> "_TaskBase":
        """Return a copy of this task with the done flag set."""
        return self.model_copy(update={"done": True})

    def update_message(self, raw_message: str) -> "_TaskBase":
        """Return a copy of this task carrying a new message."""
        return self.model_copy(update={"raw_message": raw_message})


class PlainTask(_TaskBase):
    """A task with nothing but a description."""

    kind: Literal["todo"] = "todo"


class DeadlineTask(_TaskBase):
    """A task that must be finished by a given moment."""

    kind: Literal["deadline"] = "deadline"
    due_at: datetime

    def update_time(self, due_at: datetime) -> "DeadlineTask":
        return self.model_copy(update={"due_at": due_at})

    def update(self, raw_message: str, due_at: datetime) -> "DeadlineTask":
        return self.model_copy(update={"raw_message": raw_message, "due_at": due_at})


class EventTask(_TaskBase):
    """A task that happens at a given moment."""

    kind: Literal["event"] = "event"
    start_at: datetime

    def update_time(self, start_at: datetime) -> "EventTask":
        return self.model_copy(update={"start_at": start_at})

    def update(self, raw_message: str, start_at: datetime) -> "EventTask":
        return self.model_copy(update={"raw_message": raw_message, "start_at": start_at})


Task = Annotated[Union[PlainTask, DeadlineTask, EventTask], Field(discriminator="kind")]  # noqa: UP007


def describe(task: PlainTask | DeadlineTask | EventTask) -> str:
    """Render a task as ``[T][ ] read book``, with a time suffix when it has one."""
    mark = "x" if task.done else " "
    match task.kind:
        case TaskKind.PLAIN:
            return f"[T][{mark}] {task.raw_message}"
        case TaskKind.DEADLINE:
            return f"[D][{mark}] {task.raw_message} (by: {format_timestamp(task.due_at)})"
        case TaskKind.EVENT:
            return f"[E][{mark}] {task.raw_message} (at: {format_timestamp(task.start_at)})"
