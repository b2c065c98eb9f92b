"""vessel: immutable Option and Result containers for Python 3.13+.

Flat imports (preferred):
    from vessel import Option, Present, Absent, Result, Success, Failure
    from vessel import combine, collect, from_nullable, safe, pipe

Submodule imports (for organization):
    from vessel.types import Option, Result
    from vessel.decorators import safe
    from vessel.compose import pipe
"""

# Types
from vessel.types import (
    Absent,
    AbsentType,
    Failure,
    Option,
    Present,
    Result,
    Success,
    collect,
    combine,
    from_nullable,
)

# Errors
from vessel.errors import (
    ContractViolation,
    ExpectError,
    UnwrapError,
    UnwrapOnAbsentError,
    UnwrapOnFailureError,
    UnwrapOnSuccessError,
)

# Decorators
from vessel.decorators import safe

# Composition
from vessel.compose import pipe

# Configuration
from vessel._config import DiagnosticsConfig, RenderMode, get_config, init

__all__ = [
    "Absent",
    "AbsentType",
    "ContractViolation",
    "DiagnosticsConfig",
    "ExpectError",
    "Failure",
    "Option",
    "Present",
    "RenderMode",
    "Result",
    "Success",
    "UnwrapError",
    "UnwrapOnAbsentError",
    "UnwrapOnFailureError",
    "UnwrapOnSuccessError",
    "collect",
    "combine",
    "from_nullable",
    "get_config",
    "init",
    "pipe",
    "safe",
]
