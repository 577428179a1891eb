"""Infrastructure layer for jot.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - TaskListRepository: Task list persistence
"""

from jot.infrastructure.storage import JsonStorage, TaskListRepository

__all__ = [
    "JsonStorage",
    "TaskListRepository",
]
