"""Validation failures surfaced by the task-list core.

All of these are user-input problems, never process-fatal. The core
hands them back inside ``Err`` and the adapter layer decides how to
show them.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of validation failure a command can run into."""

    COMMAND_NOT_FOUND = "command-not-found"
    BLANK_TASK = "blank-task"
    BLANK_DETAILS = "blank-details"
    INVALID_FLAG = "invalid-flag"
    DATE_TIME_PARSE = "date-time-parse"
    INDEX_OUT_OF_RANGE = "index-out-of-range"


@dataclass(frozen=True)
class TaskError:
    """A failed command with a message meant for the user.

    Attributes:
        kind: Which validation rule was broken.
        message: Human-readable explanation.
    """

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


def command_not_found(name: str) -> TaskError:
    return TaskError(
        ErrorKind.COMMAND_NOT_FOUND,
        f"I'm sorry, but I don't know what '{name}' means :-(",
    )


def blank_task(message: str) -> TaskError:
    return TaskError(ErrorKind.BLANK_TASK, message)


def blank_details(message: str) -> TaskError:
    return TaskError(ErrorKind.BLANK_DETAILS, message)


def invalid_flag() -> TaskError:
    return TaskError(
        ErrorKind.INVALID_FLAG,
        "Please use only a single dash flag in your update command",
    )


def date_time_parse(message: str = "Please format your date to be DD/MM/YYYY HHMM") -> TaskError:
    return TaskError(ErrorKind.DATE_TIME_PARSE, message)


def index_out_of_range() -> TaskError:
    return TaskError(
        ErrorKind.INDEX_OUT_OF_RANGE,
        "The index you input is beyond the range of the number of tasks "
        "you currently have. Please try again.",
    )
