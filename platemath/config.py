"""Numeric defaults shared by the operation engines."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context
from typing import Dict, Optional, Tuple

DEFAULT_PRECISION: int = 28
DEFAULT_ROUNDING: str = ROUND_HALF_EVEN

# Standard microplate formats: number of wells -> (rows, columns).
PLATE_DIMENSIONS: Dict[int, Tuple[int, int]] = {
    6: (2, 3),
    12: (3, 4),
    24: (4, 6),
    48: (6, 8),
    96: (8, 12),
    384: (16, 24),
    1536: (32, 48),
}


def make_context(
    precision: int = DEFAULT_PRECISION, rounding: str = DEFAULT_ROUNDING
) -> Context:
    """Build a decimal context for arithmetic and statistics.

    Args:
        precision (int, optional): Significant digits kept by every rounded
            operation. Defaults to ``DEFAULT_PRECISION``.
        rounding (str, optional): One of the ``decimal.ROUND_*`` modes.
            Defaults to ``ROUND_HALF_EVEN``.

    Returns:
        decimal.Context: A fresh context; callers may mutate it freely.

    Raises:
        ValueError: If ``precision`` is not a positive integer.
    """
    if int(precision) < 1:
        raise ValueError(f"precision must be >= 1, got {precision}")
    return Context(prec=int(precision), rounding=rounding)


DEFAULT_CONTEXT: Context = make_context()


def resolve_context(ctx: Optional[Context]) -> Context:
    """Return ``ctx`` or the package default when ``ctx`` is None."""
    return DEFAULT_CONTEXT if ctx is None else ctx
