"""@safe decorator for turning raised exceptions into Failure values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from vessel.types.result import Failure, Success

__all__ = ["safe"]

P = ParamSpec("P")
T = TypeVar("T")


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure[Exception]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Failure.

    Wraps a function so that it returns Success(value) on success and
    Failure(exception) if one of the given exceptions is raised. Other
    exceptions propagate.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def parse_port(text: str) -> int:
            return int(text)
        parse_port("8080")
        # Success(value=8080)
        parse_port("http")
        # Failure(error=ValueError("invalid literal for int() with base 10: 'http'"))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[Any]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            return Failure(e)
        return Success(result)

    if func is not None:
        return wrapper(func)
    return wrapper
