"""Convert caller-supplied numbers to and from ``decimal.Decimal``."""

from __future__ import annotations

import numbers
from decimal import Decimal, InvalidOperation
from typing import Iterable, List

import numpy as np


def to_decimal(value) -> Decimal:
    """Convert a single number to Decimal.

    Floats (including numpy floating scalars) go through their shortest
    ``repr`` so ``0.1`` becomes ``Decimal("0.1")`` rather than its binary
    expansion.

    Raises:
        TypeError: For None, booleans and non-numeric objects.
    """
    if isinstance(value, Decimal):
        return value
    if value is None or isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, (numbers.Integral, np.integer)):
        return Decimal(int(value))
    if isinstance(value, (numbers.Real, np.floating)):
        return Decimal(repr(float(value)))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as exc:
            raise TypeError(f"Expected a numeric string, got {value!r}") from exc
    raise TypeError(f"Expected a number, got {type(value).__name__}")


def to_decimal_list(values: Iterable) -> List[Decimal]:
    return [to_decimal(v) for v in values]


def to_float_array(values: Iterable[Decimal]) -> np.ndarray:
    """Return ``values`` as a float64 numpy array (lossy)."""
    return np.asarray([float(v) for v in values], dtype=float)
