"""Task domain - the tasks themselves and the list that holds them.

All exports are pure (no I/O, no side effects).

Key Types:
    TaskKind - Variant discriminant
    PlainTask, DeadlineTask, EventTask - Task variants
    Task - Discriminated union of the variants
    TaskList - Immutable ordered collection of tasks

Timestamps:
    parse_timestamp - Parse DD/MM/YYYY HHMM
    format_timestamp - Format back into DD/MM/YYYY HHMM
"""

from .models import (
    DeadlineTask,
    EventTask,
    PlainTask,
    Task,
    TaskKind,
    describe,
)
from .task_list import ONE_BASED_INDEX_OFFSET, TaskList
from .timestamps import TIMESTAMP_FORMAT, format_timestamp, parse_timestamp

__all__ = [
    # Models
    "TaskKind",
    "PlainTask",
    "DeadlineTask",
    "EventTask",
    "Task",
    "describe",
    # List
    "TaskList",
    "ONE_BASED_INDEX_OFFSET",
    # Timestamps
    "TIMESTAMP_FORMAT",
    "parse_timestamp",
    "format_timestamp",
]
