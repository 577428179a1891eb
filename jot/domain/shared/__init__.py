"""Shared domain building blocks for jot.

- Result values for explicit error handling
- Validation error kinds returned by the task-list core

Example usage:
    >>> from jot.domain.shared import ErrorKind, Ok
    >>> Ok(3).value
    3
"""

from jot.domain.shared.errors import ErrorKind, TaskError
from jot.domain.shared.result import (
    Err,
    Ok,
    Result,
    flat_map,
    map_result,
)

__all__ = [
    # Result values
    "Ok",
    "Err",
    "Result",
    "map_result",
    "flat_map",
    # Errors
    "ErrorKind",
    "TaskError",
]
