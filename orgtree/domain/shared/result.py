"""Result monad for explicit error handling at the I/O boundary.

Loading an organisation from disk can fail for reasons the caller should
handle (missing file, bad JSON, wrong shape). Those cases return a Result
instead of raising.

Example usage:
    >>> def parse_hours(text: str) -> Result[int, str]:
    ...     if not text.isdigit():
    ...         return Err(f"Not a number of hours: {text}")
    ...     return Ok(int(text))
    ...
    >>> result = parse_hours("12")
    >>> if is_ok(result):
    ...     print(f"Hours: {result.value}")
    Hours: 12
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is successful."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is an error."""
    return isinstance(result, Err)


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Chain operations that return Results.

    If the result is Ok, applies fn to the value and returns its Result.
    If the result is Err, returns the Err unchanged.

    Args:
        result: The result to chain from.
        fn: Function that takes the Ok value and returns a new Result.

    Returns:
        The Result from applying fn, or the original Err.
    """
    if isinstance(result, Ok):
        return fn(result.value)
    return result


def unwrap_or(result: Ok[T] | Err[E], default: T) -> T:
    """Extract the value from a Result, using a default if it's an error.

    Args:
        result: The result to unwrap.
        default: The value to return if result is Err.

    Returns:
        The Ok value if successful, otherwise the default.
    """
    if isinstance(result, Ok):
        return result.value
    return default
