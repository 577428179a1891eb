# tests/test_session.py

from __future__ import annotations

import json

from jot.application import Session, execute
from jot.domain.shared import Err, ErrorKind, Ok
from jot.domain.task import TaskList
from jot.infrastructure.storage import TaskListRepository


def test_execute_is_pure(sample_list: TaskList) -> None:
    result = execute(sample_list, ["delete", "1"])
    assert isinstance(result, Ok)
    assert result.value.changed is True
    assert result.value.task_list.size == 2
    assert sample_list.size == 3


def test_execute_queries_do_not_change(sample_list: TaskList) -> None:
    result = execute(sample_list, ["find", "book"])
    assert isinstance(result, Ok)
    assert result.value.changed is False
    assert result.value.task_list is sample_list


def test_execute_unknown_command(sample_list: TaskList) -> None:
    result = execute(sample_list, ["blah"])
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.COMMAND_NOT_FOUND


def test_respond_persists_after_each_change(repository: TaskListRepository) -> None:
    session = Session.open(repository)

    assert session.respond("todo read book") == (
        "Got it! I've added this task:\n[T][ ] read book\nNow you have 1 tasks in the list."
    )
    session.respond("deadline return book /by 21/12/2020 2359")
    assert session.respond("done 2") == (
        "Nice! I've marked this task as done:\n[D][x] return book (by: 21/12/2020 2359)"
    )

    reopened = Session.open(repository)
    assert reopened.task_list == session.task_list
    assert reopened.task_list.size == 2


def test_respond_error_keeps_list(repository: TaskListRepository, sample_list: TaskList) -> None:
    repository.save(sample_list)
    session = Session.open(repository)

    reply = session.respond("update 1 -m a -t b")
    assert reply.startswith("OOPS!!! ")
    assert session.task_list == sample_list


def test_handle_returns_error_kind(repository: TaskListRepository) -> None:
    session = Session.open(repository)
    result = session.handle("event party /at someday")
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DATE_TIME_PARSE
    assert not repository.exists()


def test_bye_sets_exit(repository: TaskListRepository) -> None:
    session = Session.open(repository, assistant_name="Jot")
    assert session.greeting() == "Hello! I'm Jot\nWhat can I do for you?"
    assert session.respond("bye") == "Bye. Hope to see you again soon!"
    assert session.is_exit is True


def test_unreadable_file_starts_empty(repository: TaskListRepository) -> None:
    repository.path.parent.mkdir(parents=True)
    repository.path.write_text("garbage", encoding="utf-8")

    session = Session.open(repository)
    assert session.task_list == TaskList()
    assert repository.path.with_name("tasks.json.bak").read_text(encoding="utf-8") == "garbage"


def test_unreadable_file_survives_next_change(repository: TaskListRepository) -> None:
    original = json.dumps(
        {"version": 1, "tasks": [{"kind": "todo", "raw_message": "keep me", "done": "maybe"}]}
    )
    repository.path.parent.mkdir(parents=True)
    repository.path.write_text(original, encoding="utf-8")

    session = Session.open(repository)
    session.respond("todo new")

    backup = repository.path.with_name("tasks.json.bak")
    assert backup.read_text(encoding="utf-8") == original
    assert [t.raw_message for t in repository.load().value.tasks] == ["new"]
