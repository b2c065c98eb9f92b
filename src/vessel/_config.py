"""Diagnostics configuration: RenderMode, DiagnosticsConfig, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from vessel._logging import configure_logging, reset_logging

__all__ = [
    "DiagnosticsConfig",
    "RenderMode",
    "get_config",
    "init",
    "reset",
]


class RenderMode(Enum):
    """How payloads are rendered into extractor failure messages."""

    JSON = "json"
    REPR = "repr"


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Configuration for vessel's diagnostics.

    Attributes:
        render_mode: How payloads appear in unwrap/expect messages.
        log_level: Logging level (e.g., "DEBUG"). None = silent.
    """

    render_mode: RenderMode = RenderMode.JSON
    log_level: str | None = None


_DEFAULT = DiagnosticsConfig()

# Global configuration (set by init())
_config: DiagnosticsConfig | None = None


def _detect_render_mode() -> RenderMode:
    """Detect the render mode from the VESSEL_RENDER environment variable."""
    env_mode = os.environ.get("VESSEL_RENDER", "").lower()
    if not env_mode:
        return RenderMode.JSON
    try:
        return RenderMode(env_mode)
    except ValueError:
        logging.warning("Unknown VESSEL_RENDER value '%s', defaulting to json", env_mode)
        return RenderMode.JSON


def init(
    render_mode: RenderMode | str | None = None,
    log_level: str | None = None,
) -> DiagnosticsConfig:
    """Initialize vessel's diagnostics.

    Args:
        render_mode: Rendering of payloads in failure messages. Detected from
            ``VESSEL_RENDER`` if None. Can be RenderMode or string ("json", "repr").
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The DiagnosticsConfig that was set.

    Raises:
        ValueError: If render_mode is a string that names no RenderMode.

    Example:
        ```python
        import vessel

        vessel.init(render_mode="repr", log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    if render_mode is None:
        resolved_mode = _detect_render_mode()
    elif isinstance(render_mode, str):
        resolved_mode = RenderMode(render_mode.lower())
    else:
        resolved_mode = render_mode

    _config = DiagnosticsConfig(render_mode=resolved_mode, log_level=log_level)

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> DiagnosticsConfig:
    """Get the current configuration.

    Returns the defaults (JSON rendering, no logging) if init() has not been
    called.
    """
    if _config is None:
        return _DEFAULT
    return _config


def reset() -> None:
    """Forget any configuration set by init() and detach its log handler."""
    global _config  # noqa: PLW0603
    _config = None
    reset_logging()
