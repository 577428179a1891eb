"""Storage infrastructure for jot.

Persists the task list with Result monads for explicit error handling.
"""

from jot.infrastructure.storage.json_storage import JsonStorage
from jot.infrastructure.storage.repositories import (
    STORAGE_VERSION,
    StoredTaskList,
    TaskListRepository,
)

__all__ = [
    "JsonStorage",
    "TaskListRepository",
    "StoredTaskList",
    "STORAGE_VERSION",
]
