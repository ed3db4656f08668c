"""Define standardized column names for plate DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlateColumns:
    """Container for standardized column labels.

    These column names are used by every DataFrame produced or consumed by
    :mod:`platemath.io.tables`, so long-format plate tables and result tables
    can be concatenated and joined without renaming.

    Attributes:
        plate: Plate label (empty string for unlabelled plates).
        well: Well index string such as ``"B12"``.
        row: Zero-based row number.
        column: One-based column number.
        position: Zero-based position of the value inside its well.
        value: Measured value, stored as a string to keep full precision.
        statistic: Name of the statistic in result tables.
        result: Statistic value (string) in result tables.
    """

    plate: str = "Plate"
    well: str = "Well"
    row: str = "Row"
    column: str = "Column"
    position: str = "Position"
    value: str = "Value"
    statistic: str = "Statistic"
    result: str = "Result"


COLUMNS = PlateColumns()
