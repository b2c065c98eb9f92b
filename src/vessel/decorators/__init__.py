"""Decorators: @safe."""

from vessel.decorators.safe import safe

__all__ = ["safe"]
