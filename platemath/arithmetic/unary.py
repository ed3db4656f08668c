"""Elementwise single-operand transforms over wells, sets, plates and stacks."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Sequence

from ..plate import Plate, Stack, Well, WellSet
from ..validation import Window, check_window, require, window

logger = logging.getLogger(__name__)


class UnaryOperation(ABC):
    """Base class for one-operand operations such as increment.

    Subclasses implement :meth:`operate`; the list primitives and the
    container fan-out are shared. There is no strict mode since there is no
    second operand whose length could differ.
    """

    name: str = "unary"

    @abstractmethod
    def operate(self, x: Decimal) -> Decimal:
        """Transform one value."""

    def calculate(self, values: Sequence[Decimal]) -> List[Decimal]:
        return [self.operate(x) for x in values]

    def calculate_range(self, values: Sequence[Decimal], begin: int, length: int) -> List[Decimal]:
        return self.calculate(values[begin : begin + length])

    def _apply(self, values: Sequence[Decimal], span: Window) -> List[Decimal]:
        if span is None:
            return self.calculate(values)
        return self.calculate_range(values, *span)

    @staticmethod
    def _check(wells, span: Window) -> None:
        for well in wells:
            check_window(span, len(well), f"well {well.index}")

    def wells(self, well: Well, begin=None, length=None) -> List[Decimal]:
        require(well, message="Well is null.")
        span = window(begin, length)
        check_window(span, len(well), f"well {well.index}")
        return self._apply(well.data, span)

    def sets(self, well_set: WellSet, begin=None, length=None) -> WellSet:
        require(well_set, message="Well set is null.")
        span = window(begin, length)
        self._check(well_set, span)
        return self._sets(well_set, span)

    def _sets(self, well_set: WellSet, span: Window) -> WellSet:
        result = WellSet(label=well_set.label)
        for well in well_set:
            result.add(Well(well.row, well.column, self._apply(well.data, span)))
        return result

    def plates(self, plate: Plate, begin=None, length=None) -> Plate:
        require(plate, message="Plate is null.")
        span = window(begin, length)
        self._check(plate, span)
        return self._plates(plate, span)

    def _plates(self, plate: Plate, span: Window) -> Plate:
        result = Plate(plate.rows, plate.columns, label=plate.label)
        for label, members in plate.groups.items():
            result.add_group(label, members)
        result.add_wells(self._sets(plate.data_set, span))
        return result

    def stacks(self, stack: Stack, begin=None, length=None) -> Stack:
        require(stack, message="Stack is null.")
        span = window(begin, length)
        for plate in stack:
            self._check(plate, span)
        logger.debug("%s: transforming %d plates of stack %r", self.name, len(stack), stack.label)
        result = Stack(stack.rows, stack.columns, label=stack.label)
        for plate in stack:
            result.add(self._plates(plate, span))
        return result
