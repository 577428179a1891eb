"""Repository for the task list.

Loads the saved task sequence at startup and writes the whole sequence
back after every change, using Result types for explicit error handling.

A task file that exists but cannot be loaded is never overwritten: it is
moved to ``<name>.bak`` first, and if even that fails the repository
refuses to save.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from jot.domain.shared.result import Err, Ok, Result
from jot.domain.task import Task, TaskList
from jot.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)

STORAGE_VERSION = 1


class StoredTaskList(BaseModel):
    """On-disk document: a format version and the tasks in list order."""

    version: int = STORAGE_VERSION
    tasks: list[Task] = Field(default_factory=list)


class TaskListRepository:
    """Persistence for a single task list stored in one JSON file."""

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            path: File the task list lives in.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.path = path
        self._storage = storage or JsonStorage()
        self._locked_reason: str | None = None

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Result[TaskList, str]:
        """Load the task list.

        A file that does not exist yet is an empty list, not an error. A
        file that exists but does not hold a valid task list is moved
        aside so the next save cannot destroy it.

        Returns:
            Ok(TaskList) if successful, Err(str) with error message if failed.
        """
        if not self.exists():
            logger.info(f"No task file at {self.path}, starting with an empty list")
            return Ok(TaskList())

        result = self._storage.read_document(self.path)
        if isinstance(result, Err):
            return Err(self._set_aside(result.error))

        try:
            stored = StoredTaskList.model_validate(result.value)
        except ValidationError as e:
            return Err(self._set_aside(f"Invalid task data in {self.path}: {e}"))

        logger.info(f"Loaded {len(stored.tasks)} tasks from {self.path}")
        return Ok(TaskList(tasks=tuple(stored.tasks)))

    def save(self, task_list: TaskList) -> Result[None, str]:
        """Write the task list, replacing whatever was stored before.

        Args:
            task_list: The list to persist.

        Returns:
            Ok(None) if successful, Err(str) with error message if failed
            or if an unreadable file is still in the way.
        """
        if self._locked_reason is not None:
            return Err(self._locked_reason)
        stored = StoredTaskList(tasks=list(task_list.tasks))
        return self._storage.write_document(self.path, stored.model_dump(mode="json"))

    def _set_aside(self, reason: str) -> str:
        """Keep an unreadable task file out of the way of later saves."""
        moved = self._storage.move_aside(self.path)
        if isinstance(moved, Err):
            self._locked_reason = (
                f"Not saving over unreadable {self.path}; fix or remove it first"
            )
            logger.error(f"{reason}. {moved.error}")
            return f"{reason}. {moved.error}"
        logger.warning(f"{reason}. Kept the old file as {moved.value}")
        return f"{reason}. The old file was kept as {moved.value}"
