# tests/test_repositories.py

from __future__ import annotations

import json

import pytest

from jot.domain.shared import Err, Ok
from jot.domain.task import TaskList
from jot.infrastructure.storage import JsonStorage, TaskListRepository


def test_missing_file_loads_empty(repository: TaskListRepository) -> None:
    assert not repository.exists()
    assert repository.load() == Ok(TaskList())


def test_save_then_load_keeps_order_and_kinds(
    repository: TaskListRepository, sample_list: TaskList
) -> None:
    done_list = sample_list.mark_done(["2"]).value[0]

    assert repository.save(done_list) == Ok(None)
    loaded = repository.load()

    assert isinstance(loaded, Ok)
    assert loaded.value == done_list
    assert [t.kind for t in loaded.value.tasks] == ["todo", "deadline", "event"]


def test_saved_document_shape(repository: TaskListRepository, sample_list: TaskList) -> None:
    repository.save(sample_list)
    data = json.loads(repository.path.read_text(encoding="utf-8"))

    assert data["version"] == 1
    assert data["tasks"][1] == {
        "raw_message": "return book",
        "done": False,
        "kind": "deadline",
        "due_at": "2020-12-21T23:59:00",
    }
    assert not repository.path.with_name("tasks.json.tmp").exists()


def test_corrupt_file_is_an_error(repository: TaskListRepository) -> None:
    repository.path.parent.mkdir(parents=True)
    repository.path.write_text("{not json", encoding="utf-8")
    result = repository.load()
    assert isinstance(result, Err)
    assert "not valid JSON" in result.error


def test_wrong_shape_is_an_error(repository: TaskListRepository) -> None:
    repository.path.parent.mkdir(parents=True)
    repository.path.write_text(json.dumps({"tasks": [{"kind": "chore"}]}), encoding="utf-8")
    result = repository.load()
    assert isinstance(result, Err)
    assert "Invalid task data" in result.error


def test_non_object_document_is_an_error(repository: TaskListRepository) -> None:
    repository.path.parent.mkdir(parents=True)
    repository.path.write_text("[]", encoding="utf-8")
    result = repository.load()
    assert isinstance(result, Err)
    assert "must hold a JSON object" in result.error


def test_unreadable_file_is_moved_aside(repository: TaskListRepository) -> None:
    original = json.dumps(
        {"version": 1, "tasks": [{"kind": "todo", "raw_message": "keep me", "done": "maybe"}]}
    )
    repository.path.parent.mkdir(parents=True)
    repository.path.write_text(original, encoding="utf-8")

    result = repository.load()
    backup = repository.path.with_name("tasks.json.bak")

    assert isinstance(result, Err)
    assert str(backup) in result.error
    assert not repository.exists()
    assert backup.read_text(encoding="utf-8") == original


def test_save_refused_when_file_cannot_be_moved(
    repository: TaskListRepository, sample_list: TaskList, monkeypatch: pytest.MonkeyPatch
) -> None:
    repository.path.parent.mkdir(parents=True)
    repository.path.write_text("garbage", encoding="utf-8")
    monkeypatch.setattr(
        JsonStorage, "move_aside", lambda self, path: Err(f"Cannot move {path}")
    )

    assert isinstance(repository.load(), Err)
    saved = repository.save(sample_list)

    assert isinstance(saved, Err)
    assert "Not saving over unreadable" in saved.error
    assert repository.path.read_text(encoding="utf-8") == "garbage"
