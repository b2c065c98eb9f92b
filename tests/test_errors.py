"""Tests for contract-violation errors and their struct form."""

import pytest

from vessel import (
    Absent,
    ContractViolation,
    ExpectError,
    Failure,
    Success,
    UnwrapError,
    UnwrapOnAbsentError,
    UnwrapOnFailureError,
    UnwrapOnSuccessError,
)


class TestHierarchy:
    """All extractor errors share one base."""

    @pytest.mark.parametrize(
        "cls",
        [UnwrapOnAbsentError, ExpectError, UnwrapOnFailureError, UnwrapOnSuccessError],
    )
    def test_subclasses(self, cls):
        """Every extractor error is an UnwrapError and a RuntimeError."""
        assert issubclass(cls, UnwrapError)
        assert issubclass(cls, RuntimeError)

    @pytest.mark.parametrize(
        ("call", "cls"),
        [
            (lambda: Absent.unwrap(), UnwrapOnAbsentError),
            (lambda: Absent.expect("gone"), ExpectError),
            (lambda: Failure("e").unwrap(), UnwrapOnFailureError),
            (lambda: Failure("e").expect("m"), UnwrapOnFailureError),
            (lambda: Success(1).unwrap_err(), UnwrapOnSuccessError),
            (lambda: Success(1).expect_err("m"), UnwrapOnSuccessError),
        ],
    )
    def test_extractors_raise(self, call, cls):
        """Each extractor raises its own error type on the wrong variant."""
        with pytest.raises(cls):
            call()


class TestUnwrapError:
    """Tests for UnwrapError attributes."""

    def test_attributes(self):
        """message and payload are kept."""
        error = UnwrapError("bad", {"a": 1})
        assert error.message == "bad"
        assert error.payload == {"a": 1}
        assert str(error) == "bad"

    def test_absent_default_message(self):
        """UnwrapOnAbsentError has a fixed default message."""
        assert str(UnwrapOnAbsentError()) == "Called unwrap on Absent"


class TestContractViolation:
    """Tests for struct <-> exception conversion."""

    def test_to_struct(self):
        """to_struct() records kind, message and rendered payload."""
        struct = UnwrapOnFailureError("Called unwrap on Failure", "Oh no").to_struct()
        assert struct == ContractViolation(
            kind="UnwrapOnFailureError",
            message="Called unwrap on Failure",
            payload='"Oh no"',
        )

    def test_absent_payload_renders_null(self):
        """An absent payload renders as null."""
        assert UnwrapOnAbsentError().to_struct().payload == "null"

    def test_to_exception(self):
        """to_exception() restores the exception class and message."""
        error = ContractViolation(kind="ExpectError", message="gone").to_exception()
        assert type(error) is ExpectError
        assert str(error) == "gone"

    def test_unknown_kind(self):
        """Unknown kinds fall back to UnwrapError."""
        error = ContractViolation(kind="Mystery", message="?").to_exception()
        assert type(error) is UnwrapError

    def test_carried_as_failure(self):
        """A violation can travel as a Failure payload."""
        try:
            Absent.unwrap()
        except UnwrapError as exc:
            result = Failure(exc.to_struct())
        assert result.error.kind == "UnwrapOnAbsentError"
