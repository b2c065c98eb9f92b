"""pipe() function for threading a value through Result/Option-aware steps."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from vessel.types.option import AbsentType, Present
from vessel.types.result import Failure, Success

__all__ = ["pipe"]

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")

_CONTAINERS = (Success, Failure, Present, AbsentType)


def _step(current: Any, fn: Callable[[Any], Any]) -> Any:
    """Apply fn to the payload of current, keeping the container kind.

    A returned Result/Option is used as-is (no double wrapping); a plain
    return value is wrapped in the same variant current was.
    """
    out = fn(current.value)
    if isinstance(out, _CONTAINERS):
        return out
    return type(current)(out)


@overload
def pipe(value: T, /) -> Success[T]: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> Any: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> Any: ...
@overload
def pipe(
    value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> Any: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> Any: ...


def pipe(value: Any, *fns: Callable[..., Any]) -> Any:
    """Compose functions in sequence, threading a value through them.

    The initial value is wrapped in Success() if not already a Result/Option.
    Each function receives the payload from the previous step. Short-circuits
    on Failure or Absent, returning that container unchanged.

    Args:
        value: The initial value to thread through the functions.
        *fns: Functions to apply in sequence.

    Returns:
        The final Result/Option after applying all functions.

    Example:
        ```python
        pipe(5, lambda x: x + 1, lambda x: x * 2)
        # Success(value=12)

        pipe(Present(3), lambda x: x * 2)
        # Present(value=6)

        pipe(5, lambda x: Failure("fail"), lambda x: x + 1)
        # Failure(error='fail')
        ```
    """
    current = value if isinstance(value, _CONTAINERS) else Success(value)
    for fn in fns:
        if isinstance(current, Failure | AbsentType):
            return current
        current = _step(current, fn)
    return current
