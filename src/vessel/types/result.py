"""Result type: Success[T] | Failure[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from vessel._render import render
from vessel.errors import UnwrapOnFailureError, UnwrapOnSuccessError, report

if TYPE_CHECKING:
    from vessel.types.option import AbsentType, Present

__all__ = ["Failure", "Result", "Success", "collect", "combine"]


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Success represents the successful outcome of an operation. It wraps a
    value that can be extracted, transformed, or threaded through a chain of
    Result-returning operations.

    Examples:
        >>> success = Success(42)
        >>> success.unwrap()
        42
        >>> success.map(lambda x: x * 2)
        Success(value=84)
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True if the result is Success.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the result is Success[T].
        """
        return True

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Success."""
        return False

    def is_success_and(self, pred: Callable[[T], bool]) -> bool:
        """Return pred(value)."""
        return pred(self.value)

    def is_failure_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def unwrap(self) -> T:
        """Return the contained value.

        Since this is Success, this always succeeds.
        """
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise an exception since this is Success.

        Raises:
            UnwrapOnSuccessError: Always, with the rendered value.
        """
        raise report(
            UnwrapOnSuccessError(
                f"Called unwrap_err on Success: {render(self.value)}", self.value
            )
        )

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message and the rendered value.

        Raises:
            UnwrapOnSuccessError: Always.
        """
        raise report(UnwrapOnSuccessError(f"{msg}: {render(self.value)}", self.value))

    def into_ok(self) -> T:
        """Return the contained value."""
        return self.value

    def into_err(self) -> None:
        """Return None: a Success carries no error."""
        return None

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Success value.

        Returns:
            Success containing the result of applying f to the value.
        """
        return Success(f(self.value))

    def map_err[F](self, _f: Callable[[Any], F]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def map_or[U](self, default: U, f: Callable[[T], U]) -> Success[U]:  # noqa: ARG002
        """Apply f to the contained value and wrap the outcome in Success.

        Like Option.map_or, the result stays wrapped rather than being
        unwrapped to a plain value.
        """
        return Success(f(self.value))

    def map_or_else[U](
        self, on_err: Callable[[Any], U], on_ok: Callable[[T], U]  # noqa: ARG002
    ) -> Success[U]:
        """Apply on_ok to the contained value and wrap it in Success."""
        return Success(on_ok(self.value))

    def and_[U, F](self, other: Success[U] | Failure[F]) -> Success[U] | Failure[F]:
        """Return other if self is Success, else return self (Failure).

        Since this is Success, returns other.
        """
        return other

    def and_then[U, F](self, f: Callable[[T], Success[U] | Failure[F]]) -> Success[U] | Failure[F]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, F].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_[F](self, _other: Success[T] | Failure[F]) -> Success[T]:
        """Return self if Success, else return other.

        Since this is Success, returns self.
        """
        return self

    def or_else[F](self, _f: Callable[[Any], Success[T] | Failure[F]]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def ok(self) -> Present[T]:
        """Convert to Option, returning Present(value)."""
        from vessel.types.option import Present

        return Present(self.value)

    def err(self) -> AbsentType:
        """Convert to Option, returning Absent since this is Success."""
        from vessel.types.option import Absent

        return Absent

    def inspect(self, f: Callable[[T], Any]) -> Success[T]:
        """Call f with the contained value and return self unchanged."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[Any], Any]) -> Success[T]:
        """Return self without calling f."""
        return self

    def flatten[U, E](self: Success[Success[U] | Failure[E]]) -> Success[U] | Failure[E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value  # type: ignore[return-value]

    def transpose[U](
        self: Success[Present[U] | AbsentType],
    ) -> Present[Success[U]] | AbsentType:
        """Swap a Result of an Option into an Option of a Result.

        Success(Absent) becomes Absent; Success(Present(v)) becomes
        Present(Success(v)).
        """
        from vessel.types.option import AbsentType, Present

        inner = self.value
        if isinstance(inner, AbsentType):
            return inner
        return Present(Success(inner.value))


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an error of type E.

    Failure represents the unsuccessful outcome of an operation. The error
    is an ordinary value (a string, a code, a struct); it does not need to
    be an exception.

    Examples:
        >>> failure = Failure("something went wrong")
        >>> failure.is_failure()
        True
        >>> failure.unwrap_or(0)
        0
    """

    error: E

    def is_success(self) -> TypeIs[Success[object]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True if the result is Failure.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the result is Failure[E].
        """
        return True

    def is_success_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def is_failure_and(self, pred: Callable[[E], bool]) -> bool:
        """Return pred(error)."""
        return pred(self.error)

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Failure.

        Raises:
            UnwrapOnFailureError: Always, with the rendered error.
        """
        raise report(
            UnwrapOnFailureError(f"Called unwrap on Failure: {render(self.error)}", self.error)
        )

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Failure."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a value from the error since this is Failure."""
        return f(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapOnFailureError: Always, as ``"{msg}: {rendered error}"``.
        """
        raise report(UnwrapOnFailureError(f"{msg}: {render(self.error)}", self.error))

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def into_ok(self) -> None:
        """Return None: a Failure carries no value."""
        return None

    def into_err(self) -> E:
        """Return the contained error."""
        return self.error

    def map[T, U](self, _f: Callable[[T], U]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Failure containing the transformed error.
        """
        return Failure(f(self.error))

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> Success[U]:
        """Return Success(default) since there's no value to map."""
        return Success(default)

    def map_or_else[T, U](self, on_err: Callable[[E], U], _on_ok: Callable[[T], U]) -> Success[U]:
        """Return Success(on_err(error))."""
        return Success(on_err(self.error))

    def and_[U, F](self, _other: Success[U] | Failure[F]) -> Failure[E]:
        """Return self since this is Failure."""
        return self

    def and_then[T, U, F](self, _f: Callable[[T], Success[U] | Failure[F]]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def or_[T, F](self, other: Success[T] | Failure[F]) -> Success[T] | Failure[F]:
        """Return other since this is Failure."""
        return other

    def or_else[T, F](self, f: Callable[[E], Success[T] | Failure[F]]) -> Success[T] | Failure[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def ok(self) -> AbsentType:
        """Convert to Option, returning Absent since this is Failure."""
        from vessel.types.option import Absent

        return Absent

    def err(self) -> Present[E]:
        """Convert to Option, returning Present(error)."""
        from vessel.types.option import Present

        return Present(self.error)

    def inspect[T](self, _f: Callable[[T], Any]) -> Failure[E]:
        """Return self without calling f."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Failure[E]:
        """Call f with the contained error and return self unchanged."""
        f(self.error)
        return self

    def flatten(self) -> Failure[E]:
        """Return self since this is Failure (nothing to flatten)."""
        return self

    def transpose(self) -> Present[Failure[E]]:
        """Return Present(self)."""
        from vessel.types.option import Present

        return Present(self)


type Result[T, E] = Success[T] | Failure[E]


def combine(*results: Success[Any] | Failure[Any]) -> Success[list[Any]] | Failure[Any]:
    """Combine any number of Results into one.

    Scans left to right. Returns the first Failure as-is; later results are
    not inspected and errors are never accumulated. If every result is a
    Success, returns Success of their values in input order.

    Examples:
        >>> combine(Success(1), Success("x"))
        Success(value=[1, 'x'])
        >>> combine(Success(5), Failure("a"), Failure("b"))
        Failure(error='a')
    """
    return collect(results)


def collect[T, E](results: Iterable[Success[T] | Failure[E]]) -> Success[list[T]] | Failure[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Failure encountered; the rest of the
    iterable is not consumed.

    Args:
        results: An iterable of Result values.

    Returns:
        Success(list[T]) if all results are Success, otherwise the first Failure.

    Examples:
        >>> collect([Success(1), Success(2), Success(3)])
        Success(value=[1, 2, 3])
        >>> collect(iter([Success(1), Failure("fail"), Success(3)]))
        Failure(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.value)
    return Success(values)
