"""Command parsing.

Turns a whitespace-split command line into a command name and the
argument tokens the matching task-list operation interprets. The
parser does not look inside the arguments beyond the helpers below;
date formats and indices are validated by the operation that owns them.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from jot.domain.shared.errors import TaskError, command_not_found
from jot.domain.shared.result import Err, Ok, Result

DEADLINE_KEYWORD = "/by"
EVENT_KEYWORD = "/at"
TIME_KEYWORDS = (DEADLINE_KEYWORD, EVENT_KEYWORD)


class CommandName(str, Enum):
    """Keywords accepted as the first word of a command line."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    LIST = "list"
    DONE = "done"
    DELETE = "delete"
    UPDATE = "update"
    FIND = "find"
    BYE = "bye"


class UpdateFlag(str, Enum):
    """Which part of a timed task an update rewrites."""

    MESSAGE = "-m"
    TIME = "-t"
    NONE = ""


FLAG_TOKENS = (UpdateFlag.MESSAGE.value, UpdateFlag.TIME.value)


@dataclass(frozen=True)
class Command:
    """A parsed command line.

    Attributes:
        name: The recognised command keyword.
        args: Every token after the keyword, verbatim.
    """

    name: CommandName
    args: tuple[str, ...] = ()


def tokenize(line: str) -> list[str]:
    """Split a raw command line on runs of whitespace."""
    return line.split()


def parse(tokens: Sequence[str]) -> Result[Command, TaskError]:
    """Recognise the command keyword at the head of a token sequence.

    Args:
        tokens: The command line, already split on whitespace.

    Returns:
        Ok(Command) with the remaining tokens as arguments, or
        Err(TaskError) of kind COMMAND_NOT_FOUND when the first token
        is missing or not a known keyword.
    """
    if not tokens:
        return Err(command_not_found(""))
    head, *rest = tokens
    try:
        name = CommandName(head)
    except ValueError:
        return Err(command_not_found(head))
    return Ok(Command(name=name, args=tuple(rest)))


def flag_of(token: str) -> UpdateFlag:
    """Map ``-m`` and ``-t`` to their flag; anything else means no flag."""
    if token in FLAG_TOKENS:
        return UpdateFlag(token)
    return UpdateFlag.NONE


def split_segments(
    tokens: Iterable[str],
    keywords: Sequence[str],
) -> tuple[list[str], list[str]]:
    """Split arguments into a message segment and a time segment.

    Tokens before the first keyword form the message. The keyword and
    everything after it form the time segment, so a time segment of
    length one means the keyword was given with nothing after it.

    Example:
        split_segments(["read", "book", "/by", "01/01/2021", "1200"], ["/by"])
        # -> (["read", "book"], ["/by", "01/01/2021", "1200"])
    """
    message: list[str] = []
    time: list[str] = []
    for token in tokens:
        if time or token in keywords:
            time.append(token)
        else:
            message.append(token)
    return message, time
