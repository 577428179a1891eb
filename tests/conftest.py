# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from jot.domain.task import DeadlineTask, EventTask, PlainTask, TaskList
from jot.infrastructure.storage import TaskListRepository


@pytest.fixture()
def repository(tmp_path: Path) -> TaskListRepository:
    """Repository writing to a per-test file that does not exist yet."""
    return TaskListRepository(tmp_path / "data" / "tasks.json")


@pytest.fixture()
def sample_list() -> TaskList:
    """
    One task of each kind, in this order:

    1. [T] read book
    2. [D] return book /by 21/12/2020 2359
    3. [E] project meeting /at 06/01/2021 1400
    """
    return TaskList(
        tasks=(
            PlainTask(raw_message="read book"),
            DeadlineTask(raw_message="return book", due_at=datetime(2020, 12, 21, 23, 59)),
            EventTask(raw_message="project meeting", start_at=datetime(2021, 1, 6, 14, 0)),
        )
    )
