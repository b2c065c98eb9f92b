"""Option type: Present[T] | Absent for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from vessel.errors import ExpectError, UnwrapOnAbsentError, report

if TYPE_CHECKING:
    from vessel.types.result import Failure, Success

__all__ = ["Absent", "AbsentType", "Option", "Present", "from_nullable"]


class Present[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Option containing a value of type T.

    Present represents the presence of a value. It wraps a value that can be
    extracted, transformed, or threaded through a chain of Option-returning
    operations. ``Present(None)`` is a valid Present and is not Absent.

    Examples:
        >>> present = Present(42)
        >>> present.unwrap()
        42
        >>> present.map(lambda x: x * 2)
        Present(value=84)
    """

    value: T

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True if the option is Present.

        This method provides type narrowing - after checking is_present(),
        the type checker knows the option is Present[T].
        """
        return True

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return False since this is Present."""
        return False

    def unwrap(self) -> T:
        """Return the contained value.

        Since this is Present, this always succeeds.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Present[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Present value.

        Returns:
            Present containing the result of applying f to the value.
        """
        return Present(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> Present[U]:  # noqa: ARG002
        """Apply f to the contained value and wrap the outcome in Present.

        The default is only used for Absent. The result is always Present:
        defaulting wraps, it does not unwrap.
        """
        return Present(f(self.value))

    def map_or_else[U](self, on_absent: Callable[[], U], f: Callable[[T], U]) -> Present[U]:  # noqa: ARG002
        """Apply f to the contained value; on_absent is never called."""
        return Present(f(self.value))

    def match[U](self, *, present: Callable[[T], U], absent: U) -> Present[U]:  # noqa: ARG002
        """Apply the ``present`` arm to the value and wrap it in Present.

        Args:
            present: Function applied to the contained value.
            absent: Value used when the option is Absent.

        Returns:
            Present(present(value)).
        """
        return Present(present(self.value))

    def and_[U](self, other: Present[U] | AbsentType) -> Present[U] | AbsentType:
        """Return other if self is Present, else return Absent.

        Since this is Present, returns other.
        """
        return other

    def and_then[U](
        self, f: Callable[[T], Present[U] | AbsentType]
    ) -> Present[U] | AbsentType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Present[T] | AbsentType:
        """Return self if the predicate is satisfied, else Absent.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            This very Present if predicate(value) is True, else Absent.
        """
        if predicate(self.value):
            return self
        return Absent

    def flatten[U](self: Present[Present[U] | AbsentType]) -> Present[U] | AbsentType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T], returning the inner
        container unchanged.
        """
        return self.value  # type: ignore[return-value]

    def inspect(self, f: Callable[[T], Any]) -> Present[T]:
        """Call f with the contained value and return self unchanged."""
        f(self.value)
        return self

    def ok_or[E](self, _err: E) -> Success[T]:
        """Convert to Result, returning Success(value).

        Args:
            _err: Ignored error value.

        Returns:
            Success containing the value.
        """
        from vessel.types.result import Success

        return Success(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Success[T]:
        """Convert to Result, returning Success(value).

        Args:
            _f: Ignored error factory function.

        Returns:
            Success containing the value.
        """
        from vessel.types.result import Success

        return Success(self.value)

    def or_(self, _other: Present[T] | AbsentType) -> Present[T]:
        """Return self if Present, else return other.

        Since this is Present, returns self.
        """
        return self

    def or_else(self, _f: Callable[[], Present[T] | AbsentType]) -> Present[T]:
        """Return self unchanged since this is Present."""
        return self

    def transpose[U, E](
        self: Present[Success[U] | Failure[E]],
    ) -> Success[Present[U]] | Failure[E]:
        """Swap an Option of a Result into a Result of an Option.

        Present(Success(v)) becomes Success(Present(v)); Present(Failure(e))
        becomes the inner Failure(e) itself.
        """
        from vessel.types.result import Failure, Success

        inner = self.value
        if isinstance(inner, Failure):
            return inner
        return Success(Present(inner.value))

    def unzip[A, B](self: Present[tuple[A, B]]) -> tuple[Present[A], Present[B]]:
        """Split an Option of a pair into a pair of Options."""
        first, second = self.value
        return Present(first), Present(second)

    def zip[U](self, other: Present[U] | AbsentType) -> Present[tuple[T, U]] | AbsentType:
        """Combine two Present values into a tuple.

        If both are Present, returns Present((self.value, other.value)).
        If other is Absent, returns other.
        """
        if isinstance(other, AbsentType):
            return other
        return Present((self.value, other.value))

    def zip_with[U, V](
        self, other: Present[U] | AbsentType, f: Callable[[T, U], V]
    ) -> Present[V] | AbsentType:
        """Combine two Present values with f.

        If both are Present, returns Present(f(self.value, other.value)).
        If other is Absent, returns other without calling f.
        """
        if isinstance(other, AbsentType):
            return other
        return Present(f(self.value, other.value))


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Option representing absence of a value.

    Operations on Absent return Absent, a default value, or raise for the
    extractors. All instances compare equal; use the ``Absent`` constant
    instead of instantiating directly.

    Examples:
        >>> Absent.is_absent()
        True
        >>> Absent.unwrap_or(0)
        0
    """

    def is_present(self) -> TypeIs[Present[object]]:
        """Return False since this is Absent."""
        return False

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return True if the option is Absent.

        This method provides type narrowing - after checking is_absent(),
        the type checker knows the option is Absent.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Absent.

        Raises:
            UnwrapOnAbsentError: Always, since Absent has no value to unwrap.
        """
        raise report(UnwrapOnAbsentError())

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Absent."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Absent."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            ExpectError: Always, with exactly the custom message.
        """
        raise report(ExpectError(msg))

    def map[T, U](self, _f: Callable[[T], U]) -> AbsentType:
        """Return Absent since there's no value to map."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> Present[U]:
        """Return Present(default) since there's no value to map."""
        return Present(default)

    def map_or_else[T, U](self, on_absent: Callable[[], U], _f: Callable[[T], U]) -> Present[U]:
        """Return Present(on_absent()) since there's no value to map."""
        return Present(on_absent())

    def match[T, U](self, *, present: Callable[[T], U], absent: U) -> Present[U]:  # noqa: ARG002
        """Return Present(absent) since there's no value for the present arm."""
        return Present(absent)

    def and_[U](self, _other: Present[U] | AbsentType) -> AbsentType:
        """Return Absent since self is Absent."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Present[U] | AbsentType]) -> AbsentType:
        """Return Absent since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> AbsentType:
        """Return Absent since there's no value to filter."""
        return self

    def flatten(self) -> AbsentType:
        """Return Absent since there's nothing to flatten."""
        return self

    def inspect[T](self, _f: Callable[[T], Any]) -> AbsentType:
        """Return self without calling f."""
        return self

    def ok_or[E](self, err: E) -> Failure[E]:
        """Convert to Result, returning Failure(err).

        Args:
            err: The error value to wrap.

        Returns:
            Failure containing the error.
        """
        from vessel.types.result import Failure

        return Failure(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Failure[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Failure containing the computed error.
        """
        from vessel.types.result import Failure

        return Failure(f())

    def or_[T](self, other: Present[T] | AbsentType) -> Present[T] | AbsentType:
        """Return other since self is Absent."""
        return other

    def or_else[T](
        self, f: Callable[[], Present[T] | AbsentType]
    ) -> Present[T] | AbsentType:
        """Apply a recovery function since this is Absent.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def transpose(self) -> Success[AbsentType]:
        """Return Success(Absent)."""
        from vessel.types.result import Success

        return Success(self)

    def unzip(self) -> tuple[AbsentType, AbsentType]:
        """Return a pair of Absents."""
        return Absent, Absent

    def zip[U](self, _other: Present[U] | AbsentType) -> AbsentType:
        """Return Absent since self is Absent."""
        return self

    def zip_with[T, U, V](
        self, _other: Present[U] | AbsentType, _f: Callable[[T, U], V]
    ) -> AbsentType:
        """Return Absent since self is Absent."""
        return self


Absent: AbsentType = AbsentType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Present[T] | AbsentType


def from_nullable[T](value: T | None) -> Present[T] | AbsentType:
    """Build an Option from a value that may be None.

    Examples:
        >>> from_nullable(3)
        Present(value=3)
        >>> from_nullable(None)
        AbsentType()
    """
    if value is None:
        return Absent
    return Present(value)
