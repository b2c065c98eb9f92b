"""Core types: Option, Present, Absent, Result, Success, Failure."""

from vessel.types.option import Absent, AbsentType, Option, Present, from_nullable
from vessel.types.result import Failure, Result, Success, collect, combine

__all__ = [
    "Absent",
    "AbsentType",
    "Failure",
    "Option",
    "Present",
    "Result",
    "Success",
    "collect",
    "combine",
    "from_nullable",
]
