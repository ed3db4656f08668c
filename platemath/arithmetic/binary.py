"""Elementwise two-operand arithmetic over wells, well sets, plates and stacks.

A concrete operation only supplies :meth:`BinaryOperation.operate`, the
element-level primitive. Everything else, the list-level length-mismatch
policies and the container fan-out, is shared here.

Length-mismatch policies:

- standard: combine index by index over the shorter operand, then append the
  longer operand's remaining values unchanged.
- strict: combine over the shorter operand and drop the rest.

A ``begin``/``length`` window restricts both operands to
``[begin, begin + length)`` before the policy is applied; values outside the
window never appear in the result.

Container rules:

- well x well: list-level combine of the two value sequences.
- set x set: wells present in both sets are combined pairwise by identity.
  Standard mode also copies the wells found in only one set (window-sliced
  when a window is given); strict mode drops them.
- plate x plate: dimensions must match. The result carries the union
  (standard) or intersection (strict) of both plates' groups; data follow
  the set x set rule.
- stack x stack: plates are paired by position. Standard mode appends the
  longer stack's leftover plates; strict mode stops at the shorter stack.
- container x constant/array/collection: every well is combined against the
  same constant or sequence.

Inputs are never modified; every call builds new containers.
"""

from __future__ import annotations

import logging
import numbers
from abc import ABC, abstractmethod
from decimal import Context, Decimal
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..config import resolve_context
from ..errors import DimensionMismatchError, InvalidArgumentError
from ..plate import Plate, Stack, Well, WellSet
from ..util.decimal_util import to_decimal, to_decimal_list
from ..validation import Window, check_window, require, window

logger = logging.getLogger(__name__)

Operand = Union[Decimal, List[Decimal]]


def _as_operand(value) -> Operand:
    """Normalise a constant, array or collection operand.

    Numbers and numeric strings become a Decimal constant; any other iterable
    (list, tuple, numpy array, generator, ...) becomes a list of Decimals.
    """
    try:
        if isinstance(value, (Decimal, numbers.Number, np.number, str)):
            return to_decimal(value)
        if isinstance(value, np.ndarray):
            return to_decimal_list(value.ravel())
        return to_decimal_list(value)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"Operand must be a number or an iterable of numbers, got {type(value).__name__}"
        ) from exc


def _slice(values: Sequence[Decimal], span: Window) -> List[Decimal]:
    if span is None:
        return list(values)
    begin, length = span
    return list(values[begin : begin + length])


class BinaryOperation(ABC):
    """Base class for two-operand elementwise operations."""

    #: Human-readable operation name used in log records.
    name: str = "binary"

    @abstractmethod
    def operate(self, x: Decimal, y: Decimal, ctx: Context) -> Decimal:
        """Combine two values."""

    # ------------------------------------------------------------------
    # List primitives
    # ------------------------------------------------------------------

    def calculate(
        self, values1: Sequence[Decimal], values2: Sequence[Decimal], ctx: Optional[Context] = None
    ) -> List[Decimal]:
        """Standard combine: the longer operand's tail is passed through unchanged."""
        ctx = resolve_context(ctx)
        result = [self.operate(x, y, ctx) for x, y in zip(values1, values2)]
        longer = values1 if len(values1) > len(values2) else values2
        result.extend(longer[len(result) :])
        return result

    def calculate_strict(
        self, values1: Sequence[Decimal], values2: Sequence[Decimal], ctx: Optional[Context] = None
    ) -> List[Decimal]:
        """Strict combine: the result is as long as the shorter operand."""
        ctx = resolve_context(ctx)
        return [self.operate(x, y, ctx) for x, y in zip(values1, values2)]

    def calculate_range(
        self,
        values1: Sequence[Decimal],
        values2: Sequence[Decimal],
        begin: int,
        length: int,
        ctx: Optional[Context] = None,
    ) -> List[Decimal]:
        span = (begin, length)
        return self.calculate(_slice(values1, span), _slice(values2, span), ctx)

    def calculate_strict_range(
        self,
        values1: Sequence[Decimal],
        values2: Sequence[Decimal],
        begin: int,
        length: int,
        ctx: Optional[Context] = None,
    ) -> List[Decimal]:
        span = (begin, length)
        return self.calculate_strict(_slice(values1, span), _slice(values2, span), ctx)

    def calculate_constant(
        self, values: Sequence[Decimal], constant: Decimal, ctx: Optional[Context] = None
    ) -> List[Decimal]:
        """Combine every value with the same constant."""
        ctx = resolve_context(ctx)
        return [self.operate(x, constant, ctx) for x in values]

    def _combine(
        self,
        values: Sequence[Decimal],
        operand: Operand,
        ctx: Context,
        span: Window,
        strict: bool,
    ) -> List[Decimal]:
        if isinstance(operand, Decimal):
            return self.calculate_constant(_slice(values, span), operand, ctx)
        if span is None:
            if strict:
                return self.calculate_strict(values, operand, ctx)
            return self.calculate(values, operand, ctx)
        begin, length = span
        if strict:
            return self.calculate_strict_range(values, operand, begin, length, ctx)
        return self.calculate_range(values, operand, begin, length, ctx)

    # ------------------------------------------------------------------
    # Wells
    # ------------------------------------------------------------------

    def wells(self, well, other, ctx=None, begin=None, length=None) -> List[Decimal]:
        """Combine a well with another well, a constant, an array or a collection.

        Args:
            well (Well): Primary operand.
            other: A Well, a number, or an iterable of numbers.
            ctx (decimal.Context, optional): Rounding context; the package
                default when omitted.
            begin (int, optional): First index of the window.
            length (int, optional): Number of indices in the window.

        Returns:
            list[Decimal]: The combined values (standard policy).

        Raises:
            NullArgumentError: If ``well`` or ``other`` is None.
            InvalidIndexError: If the window does not fit the operands.
        """
        return self._wells_entry(well, other, ctx, begin, length, strict=False)

    def wells_strict(self, well, other, ctx=None, begin=None, length=None) -> List[Decimal]:
        """Like :meth:`wells` but truncates to the shorter operand."""
        return self._wells_entry(well, other, ctx, begin, length, strict=True)

    def _wells_entry(self, well, other, ctx, begin, length, strict) -> List[Decimal]:
        require(well, other)
        span = window(begin, length)
        if isinstance(other, Well):
            check_window(span, max(len(well), len(other)), "wells")
            return self._combine(well.data, other.data, resolve_context(ctx), span, strict)
        check_window(span, len(well), f"well {well.index}")
        return self._combine(well.data, _as_operand(other), resolve_context(ctx), span, strict)

    # ------------------------------------------------------------------
    # Well sets
    # ------------------------------------------------------------------

    def sets(self, well_set, other, ctx=None, begin=None, length=None) -> WellSet:
        """Combine a well set with another set, a constant, an array or a collection."""
        return self._sets_entry(well_set, other, ctx, begin, length, strict=False)

    def sets_strict(self, well_set, other, ctx=None, begin=None, length=None) -> WellSet:
        """Strict set combine: unmatched wells are dropped and values truncated."""
        return self._sets_entry(well_set, other, ctx, begin, length, strict=True)

    def _sets_entry(self, well_set, other, ctx, begin, length, strict) -> WellSet:
        require(well_set, other)
        span = window(begin, length)
        if not isinstance(other, WellSet):
            other = _as_operand(other)
        self._check_sets(well_set, other, span, strict)
        return self._sets(well_set, other, resolve_context(ctx), span, strict)

    @staticmethod
    def _partition(
        set1: WellSet, set2: WellSet
    ) -> Tuple[List[Tuple[Well, Well]], List[Well]]:
        """Split two sets into identity-matched pairs and unmatched wells."""
        matched = [(well, set2.get(well)) for well in set1 if well in set2]
        excluded = [well for well in set1 if well not in set2]
        excluded.extend(well for well in set2 if well not in set1)
        return matched, excluded

    def _check_sets(self, well_set: WellSet, other, span: Window, strict: bool) -> None:
        if span is None:
            return
        if not isinstance(other, WellSet):
            for well in well_set:
                check_window(span, len(well), f"well {well.index}")
            return
        matched, excluded = self._partition(well_set, other)
        for well1, well2 in matched:
            check_window(span, max(len(well1), len(well2)), f"wells {well1.index}")
        if not strict:
            for well in excluded:
                check_window(span, len(well), f"well {well.index}")

    def _sets(self, well_set: WellSet, other, ctx: Context, span: Window, strict: bool) -> WellSet:
        result = WellSet(label=well_set.label)
        if not isinstance(other, WellSet):
            for well in well_set:
                result.add(Well(well.row, well.column, self._combine(well.data, other, ctx, span, strict)))
            return result

        matched, excluded = self._partition(well_set, other)
        logger.debug(
            "%s: %d matched wells, %d unmatched (%s)",
            self.name,
            len(matched),
            len(excluded),
            "strict" if strict else "standard",
        )
        for well1, well2 in matched:
            values = self._combine(well1.data, well2.data, ctx, span, strict)
            result.add(Well(well1.row, well1.column, values))
        if not strict:
            for well in excluded:
                result.add(well.copy() if span is None else well.sub_range(*span))
        return result

    # ------------------------------------------------------------------
    # Plates
    # ------------------------------------------------------------------

    def plates(self, plate, other, ctx=None, begin=None, length=None) -> Plate:
        """Combine a plate with another plate, a constant, an array or a collection.

        Raises:
            DimensionMismatchError: If two plates differ in rows or columns.
        """
        return self._plates_entry(plate, other, ctx, begin, length, strict=False)

    def plates_strict(self, plate, other, ctx=None, begin=None, length=None) -> Plate:
        return self._plates_entry(plate, other, ctx, begin, length, strict=True)

    def _plates_entry(self, plate, other, ctx, begin, length, strict) -> Plate:
        require(plate, other)
        span = window(begin, length)
        if not isinstance(other, Plate):
            other = _as_operand(other)
        self._check_plates(plate, other, span, strict)
        return self._plates(plate, other, resolve_context(ctx), span, strict)

    def _check_plates(self, plate: Plate, other, span: Window, strict: bool) -> None:
        if isinstance(other, Plate):
            if plate.dimensions != other.dimensions:
                raise DimensionMismatchError(
                    f"Unequal plate dimensions: {plate.rows}x{plate.columns} "
                    f"and {other.rows}x{other.columns}"
                )
            self._check_sets(plate.data_set, other.data_set, span, strict)
        else:
            self._check_sets(plate.data_set, other, span, strict)

    @staticmethod
    def _copy_groups(result: Plate, plate1: Plate, plate2: Optional[Plate], strict: bool) -> None:
        groups1 = plate1.groups
        if plate2 is None:
            for label, members in groups1.items():
                result.add_group(label, members)
            return
        groups2 = plate2.groups
        if strict:
            for label, members in groups1.items():
                if label in groups2 and groups2[label] == members:
                    result.add_group(label, members)
            return
        # Groups sharing a label are merged into one group.
        for label in dict.fromkeys([*groups1, *groups2]):
            first = groups1.get(label, WellSet())
            members = list(first)
            members.extend(well for well in groups2.get(label, ()) if well not in first)
            result.add_group(label, members)

    def _plates(self, plate: Plate, other, ctx: Context, span: Window, strict: bool) -> Plate:
        result = Plate(plate.rows, plate.columns, label=plate.label)
        if isinstance(other, Plate):
            self._copy_groups(result, plate, other, strict)
            result.add_wells(self._sets(plate.data_set, other.data_set, ctx, span, strict))
        else:
            self._copy_groups(result, plate, None, strict)
            result.add_wells(self._sets(plate.data_set, other, ctx, span, strict))
        return result

    @staticmethod
    def _slice_plate(plate: Plate, span: Window) -> Plate:
        if span is None:
            return plate.copy()
        result = Plate(plate.rows, plate.columns, label=plate.label)
        result.add_wells([well.sub_range(*span) for well in plate])
        for label, members in plate.groups.items():
            result.add_group(label, members)
        return result

    # ------------------------------------------------------------------
    # Stacks
    # ------------------------------------------------------------------

    def stacks(self, stack, other, ctx=None, begin=None, length=None) -> Stack:
        """Combine a stack with another stack, a constant, an array or a collection.

        Two stacks are paired plate by plate in iteration order; plate labels
        are not matched.
        """
        return self._stacks_entry(stack, other, ctx, begin, length, strict=False)

    def stacks_strict(self, stack, other, ctx=None, begin=None, length=None) -> Stack:
        return self._stacks_entry(stack, other, ctx, begin, length, strict=True)

    def _stacks_entry(self, stack, other, ctx, begin, length, strict) -> Stack:
        require(stack, other)
        span = window(begin, length)
        ctx = resolve_context(ctx)
        result = Stack(stack.rows, stack.columns, label=stack.label)

        if not isinstance(other, Stack):
            operand = _as_operand(other)
            for plate in stack:
                self._check_plates(plate, operand, span, strict)
            for plate in stack:
                result.add(self._plates(plate, operand, ctx, span, strict))
            return result

        if stack.dimensions != other.dimensions:
            raise DimensionMismatchError(
                f"Unequal stack dimensions: {stack.rows}x{stack.columns} "
                f"and {other.rows}x{other.columns}"
            )
        plates1, plates2 = stack.plates(), other.plates()
        leftovers = plates1[len(plates2) :] + plates2[len(plates1) :]
        for plate1, plate2 in zip(plates1, plates2):
            self._check_plates(plate1, plate2, span, strict)
        if not strict and span is not None:
            for plate in leftovers:
                for well in plate:
                    check_window(span, len(well), f"well {well.index}")

        for plate1, plate2 in zip(plates1, plates2):
            result.add(self._plates(plate1, plate2, ctx, span, strict))
        if strict:
            if leftovers:
                logger.debug("%s: strict stack combine dropped %d plates", self.name, len(leftovers))
        else:
            for plate in leftovers:
                result.add(self._slice_plate(plate, span))
        return result
