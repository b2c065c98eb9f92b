"""Contract-violation errors: dual struct+exception for Result and raise-based code.

Only the extractors (``unwrap``, ``unwrap_err``, ``expect``, ``expect_err``)
raise. Everything else represents failure as data.
"""

from __future__ import annotations

from typing import Any

import msgspec

from vessel._config import get_config
from vessel._logging import get_logger
from vessel._render import render

__all__ = [
    "ContractViolation",
    "ExpectError",
    "UnwrapError",
    "UnwrapOnAbsentError",
    "UnwrapOnFailureError",
    "UnwrapOnSuccessError",
    "report",
]

logger = get_logger(__name__)


class ContractViolation(msgspec.Struct, frozen=True, gc=False):
    """Extractor misuse - struct variant for Result[T, ContractViolation]."""

    kind: str
    message: str
    payload: str = "null"

    def to_exception(self) -> UnwrapError:
        """Convert to exception for raise-based code.

        The original payload object is not recoverable; the exception carries
        the rendered text instead.
        """
        cls = _KINDS.get(self.kind, UnwrapError)
        return cls(self.message, self.payload)


class UnwrapError(RuntimeError):
    """An extractor was called on the variant that lacks the payload."""

    def __init__(self, message: str, payload: Any = None) -> None:
        self.message = message
        self.payload = payload
        super().__init__(message)

    def to_struct(self) -> ContractViolation:
        """Convert to struct for Result-based code."""
        return ContractViolation(type(self).__name__, self.message, render(self.payload))


class UnwrapOnAbsentError(UnwrapError):
    """``unwrap`` was called on Absent."""

    def __init__(self, message: str = "Called unwrap on Absent", payload: Any = None) -> None:
        super().__init__(message, payload)


class ExpectError(UnwrapError):
    """``expect`` was called on Absent; the message is the caller's, verbatim."""


class UnwrapOnFailureError(UnwrapError):
    """``unwrap``/``expect`` was called on a Failure. ``payload`` is the error."""


class UnwrapOnSuccessError(UnwrapError):
    """``unwrap_err``/``expect_err`` was called on a Success. ``payload`` is the value."""


_KINDS: dict[str, type[UnwrapError]] = {
    cls.__name__: cls
    for cls in (
        UnwrapError,
        UnwrapOnAbsentError,
        ExpectError,
        UnwrapOnFailureError,
        UnwrapOnSuccessError,
    )
}


def report(error: UnwrapError) -> UnwrapError:
    """Log a contract violation and hand the exception back for raising.

    Logging only happens once ``vessel.init(log_level=...)`` has enabled it.
    """
    if get_config().log_level is not None:
        logger.debug(
            "contract_violation",
            kind=type(error).__name__,
            payload=render(error.payload),
        )
    return error
