"""Result values for task-list operations that can fail on user input.

Every fallible operation in the core returns either ``Ok(value)`` or
``Err(error)`` instead of raising, so a caller holding the current task
list can decide what to show the user while its list stays untouched.

Example usage:
    >>> result = parse_timestamp("21/12/2020 2359")
    >>> if isinstance(result, Ok):
    ...     print(result.value.year)
    2020
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome.

    Attributes:
        value: What the operation produced.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed outcome.

    Attributes:
        error: Why the operation refused to produce a value.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def map_result(result: Ok[T] | Err[E], fn: Callable[[T], U]) -> Ok[U] | Err[E]:
    """Apply fn to the value of an Ok, passing an Err through unchanged.

    Args:
        result: The result to transform.
        fn: Function to apply to the Ok value.

    Returns:
        Ok(fn(value)), or the original Err.
    """
    if isinstance(result, Ok):
        return Ok(fn(result.value))
    return result


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Chain a second fallible step after a successful first one.

    Args:
        result: The result to chain from.
        fn: Function taking the Ok value and returning a new Result.

    Returns:
        The Result of fn, or the original Err.
    """
    if isinstance(result, Ok):
        return fn(result.value)
    return result
