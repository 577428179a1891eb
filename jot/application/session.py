"""Command session: one raw line in, one reply out.

``execute`` is the pure dispatch from a parsed command to a task-list
operation and its reply. ``Session`` wraps it for the front ends: it owns
the current list, swaps it after each successful command and hands it
to the repository to persist.
"""

import logging
from collections.abc import Sequence

from pydantic import BaseModel

from jot.domain.command import CommandName, parse, tokenize
from jot.domain.shared import Err, Ok, Result, TaskError, flat_map, map_result
from jot.domain.task import Task, TaskList
from jot.global_config import DEFAULT_ASSISTANT_NAME
from jot.infrastructure.storage import TaskListRepository
from jot.interfaces import render

logger = logging.getLogger(__name__)


class Outcome(BaseModel):
    """What a successful command produced.

    Attributes:
        task_list: The list after the command (the same list for queries).
        reply: Text to show the user.
        changed: Whether the list differs and needs saving.
        is_exit: Whether the user asked to leave.
    """

    task_list: TaskList
    reply: str
    changed: bool = False
    is_exit: bool = False


def _added(change: tuple[TaskList, Task]) -> Outcome:
    new_list, task = change
    return Outcome(
        task_list=new_list,
        reply=render.add_reply(task, new_list.size),
        changed=True,
    )


def _deleted(change: tuple[TaskList, Task]) -> Outcome:
    new_list, task = change
    return Outcome(
        task_list=new_list,
        reply=render.delete_reply(task, new_list.size),
        changed=True,
    )


def _done(change: tuple[TaskList, Task]) -> Outcome:
    new_list, task = change
    return Outcome(task_list=new_list, reply=render.done_reply(task), changed=True)


def _updated(change: tuple[TaskList, Task]) -> Outcome:
    new_list, task = change
    return Outcome(task_list=new_list, reply=render.update_reply(task), changed=True)


def execute(task_list: TaskList, tokens: Sequence[str]) -> Result[Outcome, TaskError]:
    """Run one command against a task list.

    Args:
        task_list: The current list. Never modified.
        tokens: The command line split on whitespace.

    Returns:
        Ok(Outcome) with the new list and reply, or Err(TaskError) from
        the parser or the task-list operation.
    """

    def dispatch(command) -> Result[Outcome, TaskError]:
        args = command.args
        match command.name:
            case CommandName.TODO:
                return map_result(task_list.add_plain(args), _added)
            case CommandName.DEADLINE:
                return map_result(task_list.add_deadline(args), _added)
            case CommandName.EVENT:
                return map_result(task_list.add_event(args), _added)
            case CommandName.DELETE:
                return map_result(task_list.delete(args), _deleted)
            case CommandName.DONE:
                return map_result(task_list.mark_done(args), _done)
            case CommandName.UPDATE:
                return map_result(task_list.update(args), _updated)
            case CommandName.FIND:
                matches = task_list.find(args)
                return Ok(Outcome(task_list=task_list, reply=render.find_reply(matches)))
            case CommandName.LIST:
                return Ok(Outcome(task_list=task_list, reply=render.list_reply(task_list.tasks)))
            case CommandName.BYE:
                return Ok(Outcome(task_list=task_list, reply=render.farewell(), is_exit=True))
        raise AssertionError(f"unhandled command: {command.name}")

    return flat_map(parse(tokens), dispatch)


class Session:
    """The single owner of the current task list for one user.

    Example:
        session = Session.open(TaskListRepository(Path("tasks.json")))
        print(session.greeting())
        print(session.respond("todo read book"))
    """

    def __init__(
        self,
        repository: TaskListRepository,
        task_list: TaskList | None = None,
        assistant_name: str = DEFAULT_ASSISTANT_NAME,
    ) -> None:
        self._repository = repository
        self._task_list = task_list if task_list is not None else TaskList()
        self._assistant_name = assistant_name
        self._is_exit = False

    @classmethod
    def open(
        cls,
        repository: TaskListRepository,
        assistant_name: str = DEFAULT_ASSISTANT_NAME,
    ) -> "Session":
        """Start a session from whatever the repository holds.

        An unreadable task file is logged and replaced by an empty list;
        the file itself is only overwritten by the next change.
        """
        result = repository.load()
        if isinstance(result, Err):
            logger.warning(f"Could not load tasks, starting empty: {result.error}")
            return cls(repository, TaskList(), assistant_name)
        return cls(repository, result.value, assistant_name)

    @property
    def task_list(self) -> TaskList:
        return self._task_list

    @property
    def is_exit(self) -> bool:
        return self._is_exit

    def greeting(self) -> str:
        return render.greeting(self._assistant_name)

    def respond(self, line: str) -> str:
        """Handle one command line and return the reply to show, errors included."""
        result = self.handle(line)
        if isinstance(result, Err):
            return render.error_reply(result.error)
        return result.value

    def handle(self, line: str) -> Result[str, TaskError]:
        """Handle one command line.

        On success the new list becomes current and is saved. On failure
        the current list is kept as it was.

        Returns:
            Ok(reply) or Err(TaskError) describing the rejected input.
        """
        tokens = tokenize(line)
        result = execute(self._task_list, tokens)
        if isinstance(result, Err):
            logger.debug(f"Rejected {tokens[:1]}: {result.error.kind.value}")
            return result

        outcome = result.value
        reply = outcome.reply
        if outcome.changed:
            saved = self._repository.save(outcome.task_list)
            if isinstance(saved, Err):
                logger.error(f"Failed to save tasks: {saved.error}")
                reply += f"\n(Warning: changes could not be saved: {saved.error})"
            else:
                logger.debug(f"Saved {outcome.task_list.size} tasks after '{tokens[0]}'")

        self._task_list = outcome.task_list
        self._is_exit = outcome.is_exit
        return Ok(reply)
