"""Random containers for tests and examples.

Values are drawn uniformly from ``[low, high)`` with a numpy ``Generator`` and
quantised to ``places`` decimal places, so the same seed always produces the
same Decimals.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

import numpy as np

from ..plate import Plate, Stack, Well, WellSet


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def random_values(
    length: int,
    low: float = 0.0,
    high: float = 10.0,
    places: int = 4,
    rng: Optional[np.random.Generator] = None,
) -> List[Decimal]:
    draws = _rng(rng).uniform(low, high, size=length)
    return [Decimal(f"{value:.{places}f}") for value in draws]


def random_well(
    row: int,
    column: int,
    length: int,
    low: float = 0.0,
    high: float = 10.0,
    places: int = 4,
    rng: Optional[np.random.Generator] = None,
) -> Well:
    return Well(row, column, random_values(length, low, high, places, rng))


def random_plate(
    rows: int,
    columns: int,
    length: int,
    label: Optional[str] = None,
    low: float = 0.0,
    high: float = 10.0,
    places: int = 4,
    rng: Optional[np.random.Generator] = None,
) -> Plate:
    """Fill every position of a rows x columns plate with ``length`` values."""
    rng = _rng(rng)
    plate = Plate(rows, columns, label=label)
    plate.add_wells(
        random_well(row, column, length, low, high, places, rng)
        for row in range(rows)
        for column in range(1, columns + 1)
    )
    return plate


def random_set(
    rows: int,
    columns: int,
    length: int,
    label: Optional[str] = None,
    low: float = 0.0,
    high: float = 10.0,
    places: int = 4,
    rng: Optional[np.random.Generator] = None,
) -> WellSet:
    plate = random_plate(rows, columns, length, label, low, high, places, rng)
    return WellSet(plate, label=label)


def random_stack(
    rows: int,
    columns: int,
    length: int,
    size: int,
    label: Optional[str] = None,
    low: float = 0.0,
    high: float = 10.0,
    places: int = 4,
    rng: Optional[np.random.Generator] = None,
) -> Stack:
    rng = _rng(rng)
    plates = [
        random_plate(rows, columns, length, f"{label or 'Plate'}-{i}", low, high, places, rng)
        for i in range(size)
    ]
    return Stack(rows, columns, label=label, plates=plates)
