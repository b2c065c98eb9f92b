"""Composition utilities: pipe() function."""

from vessel.compose.pipe import pipe

__all__ = ["pipe"]
