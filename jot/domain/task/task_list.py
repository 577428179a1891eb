"""The task list and the operations that change it.

A ``TaskList`` is frozen. Every operation validates its arguments first
and only then builds a new list, returning ``Ok((new_list, task))``.
On any failure it returns ``Err(TaskError)`` and the receiver is left
exactly as it was. Indices are 1-based on the way in.
"""

from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel

from jot.domain.command.parser import (
    DEADLINE_KEYWORD,
    EVENT_KEYWORD,
    FLAG_TOKENS,
    TIME_KEYWORDS,
    UpdateFlag,
    flag_of,
    split_segments,
)
from jot.domain.shared.errors import (
    TaskError,
    blank_details,
    blank_task,
    date_time_parse,
    index_out_of_range,
    invalid_flag,
)
from jot.domain.shared.result import Err, Ok, Result, map_result

from .models import DeadlineTask, EventTask, PlainTask, Task, TaskKind
from .timestamps import parse_timestamp

ONE_BASED_INDEX_OFFSET = 1

Change = Result[tuple["TaskList", Task], TaskError]


class TaskList(BaseModel):
    """Ordered, immutable collection of tasks in insertion order."""

    tasks: tuple[Task, ...] = ()

    model_config = {"frozen": True}

    @property
    def size(self) -> int:
        return len(self.tasks)

    # -------------------------------------------------------------------------
    # Adding
    # -------------------------------------------------------------------------

    def add_plain(self, tokens: Sequence[str]) -> Change:
        """Append a plain task whose message is the tokens joined by spaces.

        Returns:
            Ok((new_list, task)), or Err of kind BLANK_TASK when the
            tokens join to nothing but whitespace.
        """
        message = " ".join(tokens)
        if not message.strip():
            return Err(blank_task("The Todo you are trying to add cannot be blank!"))
        task = PlainTask(raw_message=message)
        return Ok((self._append(task), task))

    def add_deadline(self, tokens: Sequence[str]) -> Change:
        """Append a deadline from ``<message> /by DD/MM/YYYY HHMM``."""
        if not tokens:
            return Err(blank_task("The Deadline you are trying to add cannot be blank!"))
        timed = _split_timed(tokens, DEADLINE_KEYWORD, "Deadline")
        if isinstance(timed, Err):
            return timed
        message, due_at = timed.value
        task = DeadlineTask(raw_message=message, due_at=due_at)
        return Ok((self._append(task), task))

    def add_event(self, tokens: Sequence[str]) -> Change:
        """Append an event from ``<message> /at DD/MM/YYYY HHMM``."""
        if not tokens:
            return Err(blank_task("The Event you are trying to add cannot be blank!"))
        timed = _split_timed(tokens, EVENT_KEYWORD, "Event")
        if isinstance(timed, Err):
            return timed
        message, start_at = timed.value
        task = EventTask(raw_message=message, start_at=start_at)
        return Ok((self._append(task), task))

    # -------------------------------------------------------------------------
    # Changing existing tasks
    # -------------------------------------------------------------------------

    def delete(self, tokens: Sequence[str]) -> Change:
        """Remove the task at a 1-based index; later tasks shift down by one."""
        if not tokens:
            return Err(blank_task("Please input an index for the Todo you want to delete!"))
        index = self._resolve_index(tokens[0])
        if isinstance(index, Err):
            return index
        idx = index.value
        remaining = self.tasks[:idx] + self.tasks[idx + 1 :]
        return Ok((self.model_copy(update={"tasks": remaining}), self.tasks[idx]))

    def mark_done(self, tokens: Sequence[str]) -> Change:
        """Replace the task at a 1-based index with a done copy of itself."""
        if not tokens:
            return Err(blank_task("Please input the index of the Todo you have finished!"))
        index = self._resolve_index(tokens[0])
        if isinstance(index, Err):
            return index
        idx = index.value
        done = self.tasks[idx].mark_done()
        return Ok((self._replace(idx, done), done))

    def update(self, tokens: Sequence[str]) -> Change:
        """Amend the task at a 1-based index.

        Arguments are ``<index> [-m|-t] <message> [/by|/at <time>]``.
        ``-m`` rewrites only the message, ``-t`` only the time, and no
        flag rewrites both, which then requires a time after the
        keyword. With ``-t`` the words after the flag are read as the
        new time, as in ``update 2 -t 22/12/2020 1200``. Plain tasks
        only ever get a new message.
        """
        if not tokens:
            return Err(
                blank_task("The new task you are trying to update it to cannot be blank")
            )
        if sum(1 for token in tokens if token in FLAG_TOKENS) > 1:
            return Err(invalid_flag())

        index = self._resolve_index(tokens[0])
        if isinstance(index, Err):
            return index
        idx = index.value

        flag = flag_of(tokens[1]) if len(tokens) > 1 else UpdateFlag.NONE
        start = 1 if flag is UpdateFlag.NONE else 2
        message_tokens, time_tokens = split_segments(tokens[start:], TIME_KEYWORDS)
        text = " ".join(message_tokens)
        if not text.strip():
            return Err(
                blank_task("Please enter a task description to update your current task")
            )

        amended = _amend(self.tasks[idx], flag, text, time_tokens)
        if isinstance(amended, Err):
            return amended
        return Ok((self._replace(idx, amended.value), amended.value))

    # -------------------------------------------------------------------------
    # Querying
    # -------------------------------------------------------------------------

    def find(self, keywords: Sequence[str]) -> list[Task]:
        """Tasks whose message shares at least one whole word with keywords.

        Matching is case-sensitive and on whitespace-separated words, not
        substrings. Order follows the list.
        """
        wanted = set(keywords)
        return [
            task for task in self.tasks if wanted.intersection(task.raw_message.split())
        ]

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _append(self, task: Task) -> "TaskList":
        return self.model_copy(update={"tasks": self.tasks + (task,)})

    def _replace(self, idx: int, task: Task) -> "TaskList":
        tasks = self.tasks[:idx] + (task,) + self.tasks[idx + 1 :]
        return self.model_copy(update={"tasks": tasks})

    def _resolve_index(self, token: str) -> Result[int, TaskError]:
        """Turn a 1-based index token into a valid 0-based position."""
        try:
            idx = int(token) - ONE_BASED_INDEX_OFFSET
        except ValueError:
            return Err(index_out_of_range())
        if idx < 0 or idx >= self.size:
            return Err(index_out_of_range())
        return Ok(idx)


def _split_timed(
    tokens: Sequence[str],
    keyword: str,
    label: str,
) -> Result[tuple[str, datetime], TaskError]:
    """Pull the message and parsed time out of an add-deadline/add-event line."""
    message_tokens, time_tokens = split_segments(tokens, (keyword,))
    message = " ".join(message_tokens)
    if not message.strip():
        return Err(blank_task(f"Please define a task message for your {label}"))
    # the keyword itself is the first token of the time segment
    if len(time_tokens) <= 1:
        return Err(
            blank_details(
                f"Please add a {keyword} followed by the {label.lower()} time and date "
                f"in DD/MM/YYYY HHMM to specify a time and date for the {label} task. "
                f"If there is no time for this {label.lower()} perhaps consider "
                "creating a todo instead."
            )
        )
    parsed = parse_timestamp(" ".join(time_tokens[1:]))
    if isinstance(parsed, Err):
        return Err(date_time_parse(f"Please format your date after {keyword} to be DD/MM/YYYY HHMM"))
    return Ok((message, parsed.value))


def _amend(
    task: Task,
    flag: UpdateFlag,
    text: str,
    time_tokens: list[str],
) -> Result[Task, TaskError]:
    match task.kind:
        case TaskKind.PLAIN:
            return Ok(task.update_message(text))
        case TaskKind.DEADLINE | TaskKind.EVENT:
            match flag:
                case UpdateFlag.MESSAGE:
                    return Ok(task.update_message(text))
                case UpdateFlag.TIME:
                    return map_result(parse_timestamp(text), task.update_time)
                case UpdateFlag.NONE:
                    time_text = " ".join(time_tokens[1:])
                    if not time_text:
                        return Err(
                            blank_details(
                                "Please ensure you have entered the date after a /at or "
                                "/by if you are updating an Event or a Deadline, or use "
                                "a -m flag to update only the message"
                            )
                        )
                    return map_result(
                        parse_timestamp(time_text),
                        lambda at: task.update(text, at),
                    )
    raise AssertionError(f"unhandled task kind: {task.kind}")
