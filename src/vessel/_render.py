"""Human-readable rendering of payloads for extractor failure messages."""

from __future__ import annotations

from typing import Any

import msgspec

from vessel._config import RenderMode, get_config

__all__ = ["render"]


def _fallback(obj: Any) -> str:
    """msgspec enc_hook: encode anything msgspec doesn't know as its repr."""
    return repr(obj)


_encoder = msgspec.json.Encoder(enc_hook=_fallback)


def render(payload: Any, mode: RenderMode | None = None) -> str:
    """Render a payload as JSON-like text.

    Args:
        payload: Any value held by a container.
        mode: Rendering mode. Defaults to the configured mode.

    Returns:
        ``msgspec`` JSON text in JSON mode (``"Oh no"`` renders with its
        quotes), ``repr(payload)`` in REPR mode or when JSON encoding fails.
        Top-level ``bytes``/``bytearray`` payloads always use ``repr``, since
        msgspec would encode them as base64. Binary values nested inside
        other payloads are still base64 encoded.

    Examples:
        >>> render("Oh no")
        '"Oh no"'
        >>> render({"a": [1, 2]})
        '{"a":[1,2]}'
        >>> render(b"oops")
        "b'oops'"
    """
    if mode is None:
        mode = get_config().render_mode
    if mode is RenderMode.REPR or isinstance(payload, (bytes, bytearray)):
        return repr(payload)
    try:
        return _encoder.encode(payload).decode()
    except (msgspec.EncodeError, TypeError, ValueError, OverflowError, RecursionError):
        return repr(payload)
