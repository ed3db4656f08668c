"""Identity-unique collections of wells, iterated in (row, column) order."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..errors import InvalidArgumentError
from .well import Well

logger = logging.getLogger(__name__)


class WellSet:
    """A set of wells keyed by (row, column).

    Adding a well whose identity is already present keeps the first well and
    logs a warning. Iteration is always sorted by row, then column.
    """

    def __init__(self, wells: Optional[Iterable[Well]] = None, label: Optional[str] = None):
        self._wells: Dict[Tuple[int, int], Well] = {}
        self.label = label
        if wells is not None:
            self.add(wells)

    def add(self, wells: Union[Well, "WellSet", Iterable[Well]]) -> int:
        """Add a well, another set or an iterable of wells.

        Returns:
            int: The number of wells actually added.
        """
        if isinstance(wells, Well):
            wells = [wells]
        added = 0
        for well in wells:
            if not isinstance(well, Well):
                raise InvalidArgumentError(f"Expected a Well, got {type(well).__name__}")
            if well.identity in self._wells:
                logger.warning(
                    "Well %s already present in set %r; skipping duplicate",
                    well.index,
                    self.label,
                )
                continue
            self._wells[well.identity] = well
            added += 1
        return added

    def remove(self, wells: Union[Well, "WellSet", Iterable[Well]]) -> None:
        """Remove every well sharing an identity with ``wells``."""
        if isinstance(wells, Well):
            wells = [wells]
        for well in wells:
            self._wells.pop(well.identity, None)

    def retain(self, wells: Union["WellSet", Iterable[Well]]) -> None:
        """Keep only wells whose identity also appears in ``wells``."""
        keep = {well.identity for well in wells}
        self._wells = {key: well for key, well in self._wells.items() if key in keep}

    def get(self, well: Well) -> Optional[Well]:
        """Return the stored well with the same identity as ``well``, if any."""
        return self._wells.get(well.identity)

    def first(self) -> Optional[Well]:
        if not self._wells:
            return None
        return self._wells[min(self._wells)]

    def wells(self) -> List[Well]:
        return [self._wells[key] for key in sorted(self._wells)]

    def identities(self) -> List[Tuple[int, int]]:
        return sorted(self._wells)

    def copy(self) -> "WellSet":
        """Deep copy: new set, new wells, same label."""
        return WellSet((well.copy() for well in self.wells()), label=self.label)

    def __contains__(self, well) -> bool:
        return isinstance(well, Well) and well.identity in self._wells

    def __iter__(self) -> Iterator[Well]:
        return iter(self.wells())

    def __len__(self) -> int:
        return len(self._wells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WellSet):
            return NotImplemented
        return self.label == other.label and self.identities() == other.identities()

    def __hash__(self) -> int:
        return hash((self.label, tuple(self.identities())))

    def __repr__(self) -> str:
        return f"WellSet(label={self.label!r}, wells={[w.index for w in self.wells()]})"
