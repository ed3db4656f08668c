"""Exception types raised by the container layer and the operation engines."""

from __future__ import annotations


class PlateMathError(Exception):
    """Base class for every error raised by platemath."""


class NullArgumentError(PlateMathError, TypeError):
    """A required container or operand is missing."""


class InvalidArgumentError(PlateMathError, ValueError):
    """An argument is outside the values accepted by the operation."""


class InvalidIndexError(InvalidArgumentError):
    """A ``begin``/``length`` window does not fit the target sequence."""


class DimensionMismatchError(PlateMathError, ValueError):
    """Two plates (or a plate and a stack) have different row/column extents."""
