"""A single microplate well: a (row, column) identity plus ordered values."""

from __future__ import annotations

import re
from decimal import Decimal
from functools import total_ordering
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from ..errors import InvalidArgumentError, InvalidIndexError
from ..util.decimal_util import to_decimal, to_decimal_list, to_float_array

_INDEX_PATTERN = re.compile(r"^\s*([A-Za-z]+)\s*(\d+)\s*$")


def row_to_int(row: Union[int, str]) -> int:
    """Convert a row label (``"A"`` -> 0, ``"AA"`` -> 26) or int to a row number."""
    if isinstance(row, bool):
        raise InvalidArgumentError(f"Invalid row: {row!r}")
    if isinstance(row, int):
        if row < 0:
            raise InvalidArgumentError(f"Row must be non-negative, got {row}")
        return row
    if not isinstance(row, str) or not row.isalpha():
        raise InvalidArgumentError(f"Invalid row: {row!r}")
    number = 0
    for char in row.upper():
        number = number * 26 + (ord(char) - ord("A") + 1)
    return number - 1


def row_to_string(row: int) -> str:
    """Convert a row number to its letter label (0 -> ``"A"``, 26 -> ``"AA"``)."""
    label = ""
    row += 1
    while row > 0:
        row, remainder = divmod(row - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


def column_to_int(column: Union[int, str]) -> int:
    if isinstance(column, str) and column.strip().isdigit():
        column = int(column)
    if isinstance(column, bool) or not isinstance(column, int) or column < 1:
        raise InvalidArgumentError(f"Column must be a positive integer, got {column!r}")
    return column


@total_ordering
class Well:
    """Ordered numeric values measured in one well.

    Two wells are equal when their row and column match; the values are not
    part of equality or hashing, so wells can key dictionaries and populate
    sets by position alone.
    """

    __slots__ = ("_row", "_column", "_data")

    def __init__(
        self,
        row: Union[int, str],
        column: Union[int, str],
        data: Optional[Iterable] = None,
    ):
        self._row = row_to_int(row)
        self._column = column_to_int(column)
        self._data: List[Decimal] = to_decimal_list(data) if data is not None else []

    @classmethod
    def from_index(cls, index: str, data: Optional[Iterable] = None) -> "Well":
        """Build a well from an index string such as ``"B12"``."""
        match = _INDEX_PATTERN.match(index or "")
        if match is None:
            raise InvalidArgumentError(f"Invalid well index: {index!r}")
        return cls(match.group(1), int(match.group(2)), data)

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def identity(self) -> Tuple[int, int]:
        return (self._row, self._column)

    @property
    def index(self) -> str:
        return f"{row_to_string(self._row)}{self._column}"

    @property
    def data(self) -> List[Decimal]:
        """A copy of the well values in insertion order."""
        return list(self._data)

    def add(self, values) -> None:
        """Append a number or an iterable of numbers."""
        if isinstance(values, Well):
            self._data.extend(values._data)
        elif isinstance(values, (str, bytes)) or not hasattr(values, "__iter__"):
            self._data.append(to_decimal(values))
        else:
            self._data.extend(to_decimal_list(values))

    def replace_data(self, values: Iterable) -> None:
        self._data = to_decimal_list(values)

    def clear(self) -> None:
        self._data = []

    def sub_range(self, begin: int, length: int) -> "Well":
        """Return a new well with the same identity holding ``data[begin:begin+length]``.

        Raises:
            InvalidIndexError: If the window does not fit inside the well.
        """
        if begin < 0 or length < 0 or begin + length > len(self._data):
            raise InvalidIndexError(
                f"Window [{begin}, {begin + length}) is outside well {self.index} "
                f"of size {len(self._data)}"
            )
        return Well(self._row, self._column, self._data[begin : begin + length])

    def copy(self) -> "Well":
        return Well(self._row, self._column, self._data)

    def to_numpy(self) -> np.ndarray:
        return to_float_array(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Decimal]:
        return iter(self._data)

    def __getitem__(self, item):
        return self._data[item]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Well):
            return NotImplemented
        return self.identity == other.identity

    def __lt__(self, other: "Well") -> bool:
        if not isinstance(other, Well):
            return NotImplemented
        return self.identity < other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __repr__(self) -> str:
        return f"Well({self.index}, {[str(v) for v in self._data]})"
