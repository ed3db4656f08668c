"""Argument checks shared by the arithmetic and statistics engines."""

from __future__ import annotations

from typing import Optional, Tuple, Type

from .errors import InvalidIndexError, NullArgumentError

Window = Optional[Tuple[int, int]]


def require(*values, message: str = "Null argument.") -> None:
    """Raise NullArgumentError if any of ``values`` is None."""
    if any(value is None for value in values):
        raise NullArgumentError(message)


def window(begin: Optional[int], length: Optional[int]) -> Window:
    """Normalise optional ``begin``/``length`` arguments into a window.

    Returns:
        tuple[int, int] | None: ``(begin, length)``, or None when neither
        bound was given.

    Raises:
        InvalidIndexError: If only one bound is given or either is negative.
    """
    if begin is None and length is None:
        return None
    if begin is None or length is None:
        raise InvalidIndexError("Both begin and length are required for a window.")
    begin, length = int(begin), int(length)
    if begin < 0 or length < 0:
        raise InvalidIndexError(f"Invalid indices: begin={begin}, length={length}")
    return (begin, length)


def check_window(
    span: Window,
    size: int,
    what: str = "operand",
    error: Type[Exception] = InvalidIndexError,
) -> None:
    """Ensure the window ``span`` fits inside a sequence of ``size`` values."""
    if span is None:
        return
    begin, length = span
    if begin + length > size:
        raise error(
            f"Invalid indices: window [{begin}, {begin + length}) exceeds {what} "
            f"of size {size}"
        )
