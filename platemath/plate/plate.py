"""Plates (fixed row/column grids of wells) and stacks of plates."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..config import PLATE_DIMENSIONS
from ..errors import DimensionMismatchError, InvalidArgumentError, InvalidIndexError
from .well import Well
from .well_set import WellSet

logger = logging.getLogger(__name__)


class Plate:
    """A rows x columns grid owning a set of data wells and named well groups.

    Groups only record well identities (no values) and are used to label
    regions of the plate such as controls or replicates.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        label: Optional[str] = None,
        wells: Optional[Iterable[Well]] = None,
    ):
        if int(rows) < 1 or int(columns) < 1:
            raise InvalidArgumentError(f"Plate dimensions must be positive, got {rows}x{columns}")
        self._rows = int(rows)
        self._columns = int(columns)
        self.label = label
        self._data = WellSet(label=label)
        self._groups: Dict[str, WellSet] = {}
        if wells is not None:
            self.add_wells(wells)

    @classmethod
    def from_format(cls, size: int, label: Optional[str] = None) -> "Plate":
        """Create an empty plate of a standard format (6, 12, 24, 48, 96, 384 or 1536 wells)."""
        if size not in PLATE_DIMENSIONS:
            raise InvalidArgumentError(
                f"Unknown plate format {size}; expected one of {sorted(PLATE_DIMENSIONS)}"
            )
        rows, columns = PLATE_DIMENSIONS[size]
        return cls(rows, columns, label=label)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def dimensions(self) -> Tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def data_set(self) -> WellSet:
        """The set of data wells (live view; engines never modify it)."""
        return self._data

    @property
    def groups(self) -> Dict[str, WellSet]:
        return dict(self._groups)

    def _check_bounds(self, well: Well) -> None:
        if well.row >= self._rows or well.column > self._columns:
            raise InvalidIndexError(
                f"Well {well.index} lies outside a {self._rows}x{self._columns} plate"
            )

    def add_wells(self, wells: Union[Well, WellSet, Iterable[Well]]) -> int:
        if isinstance(wells, Well):
            wells = [wells]
        wells = list(wells)
        for well in wells:
            self._check_bounds(well)
        return self._data.add(wells)

    def add_group(self, label: str, wells: Iterable[Well]) -> bool:
        """Register a named group of well identities.

        Returns:
            bool: False when a group with the same label already exists; the
            existing group is kept and a warning is logged.
        """
        if label in self._groups:
            logger.warning("Group %r already defined on plate %r; skipping", label, self.label)
            return False
        members = WellSet(label=label)
        for well in wells:
            self._check_bounds(well)
            members.add(Well(well.row, well.column))
        self._groups[label] = members
        return True

    def group(self, label: str) -> WellSet:
        try:
            return self._groups[label]
        except KeyError:
            raise KeyError(f"No group named {label!r} on plate {self.label!r}") from None

    def remove_group(self, label: str) -> None:
        self._groups.pop(label, None)

    def first(self) -> Optional[Well]:
        return self._data.first()

    def copy(self) -> "Plate":
        result = Plate(self._rows, self._columns, label=self.label)
        result.add_wells(self._data.copy())
        for label, members in self._groups.items():
            result.add_group(label, members)
        return result

    def __iter__(self) -> Iterator[Well]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, well) -> bool:
        return well in self._data

    def __eq__(self, other) -> bool:
        if not isinstance(other, Plate):
            return NotImplemented
        return (
            self.dimensions == other.dimensions
            and self.label == other.label
            and self._data.identities() == other._data.identities()
        )

    def __hash__(self) -> int:
        return hash((self._rows, self._columns, self.label))

    def __repr__(self) -> str:
        return f"Plate(label={self.label!r}, {self._rows}x{self._columns}, wells={len(self)})"


class Stack:
    """An ordered collection of plates sharing the same dimensions."""

    def __init__(
        self,
        rows: int,
        columns: int,
        label: Optional[str] = None,
        plates: Optional[Iterable[Plate]] = None,
    ):
        self._rows = int(rows)
        self._columns = int(columns)
        self.label = label
        self._plates: List[Plate] = []
        if plates is not None:
            for plate in plates:
                self.add(plate)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def dimensions(self) -> Tuple[int, int]:
        return (self._rows, self._columns)

    def add(self, plate: Plate) -> None:
        if plate.dimensions != self.dimensions:
            raise DimensionMismatchError(
                f"Plate {plate.label!r} is {plate.rows}x{plate.columns}; "
                f"stack {self.label!r} holds {self._rows}x{self._columns} plates"
            )
        self._plates.append(plate)

    def plates(self) -> List[Plate]:
        return list(self._plates)

    def copy(self) -> "Stack":
        return Stack(self._rows, self._columns, self.label, (p.copy() for p in self._plates))

    def __iter__(self) -> Iterator[Plate]:
        return iter(list(self._plates))

    def __len__(self) -> int:
        return len(self._plates)

    def __getitem__(self, item: int) -> Plate:
        return self._plates[item]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return (
            self.dimensions == other.dimensions
            and self.label == other.label
            and self._plates == other._plates
        )

    def __hash__(self) -> int:
        return hash((self._rows, self._columns, self.label))

    def __repr__(self) -> str:
        return f"Stack(label={self.label!r}, {self._rows}x{self._columns}, plates={len(self)})"
