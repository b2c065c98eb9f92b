"""Structured logging configuration for vessel.

Uses structlog's ProcessorFormatter to unify structlog and stdlib logging
output. Only the "vessel" logger hierarchy is configured; the root logger
and the host application's handlers are left untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "get_logger",
    "remove_log_hook",
    "reset_logging",
]

LOGGER_NAME = "vessel"

_handler: logging.Handler | None = None


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ExtraAdder(),
        _create_hook_processor(),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    import structlog

    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = "INFO",
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog with ProcessorFormatter for unified output.

    The handler and level are set on the "vessel" logger only, which stops
    propagating so its events are not emitted twice. Calling this again
    replaces the previously installed handler.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    global _handler  # noqa: PLW0603

    import structlog

    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False
    _handler = handler


def reset_logging() -> None:
    """Detach the handler installed by configure_logging() and restore defaults."""
    global _handler  # noqa: PLW0603
    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
        _handler = None
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger.

    Args:
        name: Logger name. If None, uses the caller's module name.

    Returns:
        A structlog BoundLogger.
    """
    import structlog

    return structlog.get_logger(name)


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called for each log entry.

    Args:
        hook: Callable that receives a copy of the log entry dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that invokes log hooks."""

    def hook_processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for hook in _log_hooks:
            try:
                hook(event_dict.copy())
            except Exception:
                pass  # hook failures never break logging
        return event_dict

    return hook_processor
