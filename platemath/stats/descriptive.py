"""Descriptive statistics computed per well or pooled across wells.

A statistic implements :meth:`DescriptiveStatistic.calculate` over a flat
list of Decimals and inherits the fan-out over containers:

- ``well``: one call on the well's values (or a window of them).
- ``set`` / ``plate``: one call per well, returned as a mapping from a copy
  of each well to its result, in (row, column) order.
- ``sets_aggregated`` / ``plates_aggregated``: the values of every well are
  pooled in well order and the statistic is computed once. Given a
  collection of sets or plates (or a stack), one pooled result is returned
  per container, keyed by a copy of the container and sorted by label.

Weighted statistics multiply each value by the weight at the same position
(per well, relative to the window start) before the statistic is applied.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Context, Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Union

from ..config import resolve_context
from ..errors import InvalidArgumentError
from ..plate import Plate, Stack, Well, WellSet
from ..util.decimal_util import to_decimal_list
from ..validation import Window, check_window, require, window

logger = logging.getLogger(__name__)

Result = Union[Decimal, List[Decimal]]


class DescriptiveStatistic(ABC):
    """Base class for statistics over flat lists of Decimals."""

    name: str = "statistic"
    #: True when :meth:`calculate` returns a list rather than a single value.
    returns_list: bool = False
    supports_weights: bool = False

    @abstractmethod
    def calculate(self, values: Sequence[Decimal], ctx: Context) -> Result:
        """Compute the statistic over ``values``."""

    def calculate_range(
        self, values: Sequence[Decimal], begin: int, length: int, ctx: Context
    ) -> Result:
        return self.calculate(list(values[begin : begin + length]), ctx)

    # ------------------------------------------------------------------
    # Helpers shared with the weighted variant
    # ------------------------------------------------------------------

    def _prepare_weights(self, weights) -> Optional[List[Decimal]]:
        if weights is None:
            return None
        if not self.supports_weights:
            raise InvalidArgumentError(f"{type(self).__name__} does not accept weights.")
        return to_decimal_list(weights)

    @staticmethod
    def _check_weights(weights: Optional[List[Decimal]], size: int) -> None:
        if weights is not None and len(weights) < size:
            raise InvalidArgumentError(
                f"Weights array has {len(weights)} entries; {size} are required."
            )

    def _evaluate(
        self,
        values: Sequence[Decimal],
        ctx: Context,
        span: Window,
        weights: Optional[List[Decimal]],
    ) -> Result:
        if span is None:
            return self.calculate(values, ctx)
        return self.calculate_range(values, span[0], span[1], ctx)

    def _pool(
        self,
        wells: Iterable[Well],
        ctx: Context,
        span: Window,
        weights: Optional[List[Decimal]],
    ) -> List[Decimal]:
        pooled: List[Decimal] = []
        for well in wells:
            values = well.data
            if span is not None:
                values = values[span[0] : span[0] + span[1]]
            pooled.extend(values)
        return pooled

    def _check_pooled(self, wells: Iterable[Well], span: Window, weights) -> None:
        for well in wells:
            check_window(span, len(well), f"well {well.index}")
            self._check_weights(weights, len(well) if span is None else span[1])

    # ------------------------------------------------------------------
    # Single well
    # ------------------------------------------------------------------

    def well(self, well: Well, ctx=None, begin=None, length=None, weights=None) -> Result:
        """Compute the statistic for one well.

        Raises:
            NullArgumentError: If ``well`` is None.
            InvalidArgumentError: If the window is not inside the well, or the
                weights are shorter than the values they weigh.
        """
        require(well, message="The well cannot be null.")
        span = window(begin, length)
        check_window(span, len(well), f"well {well.index}", error=InvalidArgumentError)
        weights = self._prepare_weights(weights)
        self._check_weights(weights, len(well) if span is None else span[1])
        return self._evaluate(well.data, resolve_context(ctx), span, weights)

    # ------------------------------------------------------------------
    # Per-well results
    # ------------------------------------------------------------------

    def _per_well(self, wells: Iterable[Well], ctx, begin, length, weights) -> Dict[Well, Result]:
        wells = list(wells)
        span = window(begin, length)
        weights = self._prepare_weights(weights)
        for well in wells:
            check_window(span, len(well), f"well {well.index}", error=InvalidArgumentError)
            self._check_weights(weights, len(well) if span is None else span[1])
        ctx = resolve_context(ctx)
        return {well.copy(): self._evaluate(well.data, ctx, span, weights) for well in wells}

    def set(self, well_set: WellSet, ctx=None, begin=None, length=None, weights=None) -> Dict[Well, Result]:
        """Compute the statistic for every well in a set."""
        require(well_set, message="The well set cannot be null.")
        return self._per_well(well_set, ctx, begin, length, weights)

    def plate(self, plate: Plate, ctx=None, begin=None, length=None, weights=None) -> Dict[Well, Result]:
        """Compute the statistic for every data well on a plate."""
        require(plate, message="The plate cannot be null.")
        return self._per_well(plate, ctx, begin, length, weights)

    # ------------------------------------------------------------------
    # Aggregated results
    # ------------------------------------------------------------------

    def _aggregate(self, wells: Iterable[Well], ctx: Context, span: Window, weights) -> Result:
        return self.calculate(self._pool(wells, ctx, span, weights), ctx)

    def _aggregate_many(self, containers: List, ctx, span: Window, weights) -> Dict:
        for container in containers:
            self._check_pooled(container, span, weights)
        results = {}
        for container in containers:
            clone = container.copy()
            if clone in results:
                logger.warning(
                    "%s: container %r appears more than once; keeping the last result",
                    self.name,
                    container.label,
                )
            results[clone] = self._aggregate(container, ctx, span, weights)
        return dict(sorted(results.items(), key=lambda item: str(item[0].label or "")))

    def sets_aggregated(
        self,
        target: Union[WellSet, Iterable[WellSet]],
        ctx=None,
        begin=None,
        length=None,
        weights=None,
    ) -> Union[Result, Dict[WellSet, Result]]:
        """Pool the values of a set (or of each set in a collection) and compute once.

        Args:
            target (WellSet | Iterable[WellSet]): One set, or a list, tuple or
                other iterable of sets.

        Returns:
            The statistic for a single set, or a dict mapping a copy of each
            set to its statistic, sorted by set label.

        Raises:
            InvalidIndexError: If any pooled well is shorter than the window.
        """
        require(target, message="The well set cannot be null.")
        span = window(begin, length)
        weights = self._prepare_weights(weights)
        ctx = resolve_context(ctx)
        if isinstance(target, WellSet):
            self._check_pooled(target, span, weights)
            return self._aggregate(target, ctx, span, weights)
        sets = list(target)
        for item in sets:
            require(item, message="The well set collection cannot contain None.")
            if not isinstance(item, WellSet):
                raise InvalidArgumentError(f"Expected WellSet, got {type(item).__name__}")
        return self._aggregate_many(sets, ctx, span, weights)

    def plates_aggregated(
        self,
        target: Union[Plate, Stack, Iterable[Plate]],
        ctx=None,
        begin=None,
        length=None,
        weights=None,
    ) -> Union[Result, Dict[Plate, Result]]:
        """Pool the values of a plate (or of each plate in a stack or collection).

        Returns:
            The statistic for a single plate, or a dict mapping a copy of each
            plate to its statistic, sorted by plate label.
        """
        require(target, message="The plate cannot be null.")
        span = window(begin, length)
        weights = self._prepare_weights(weights)
        ctx = resolve_context(ctx)
        if isinstance(target, Plate):
            self._check_pooled(target, span, weights)
            return self._aggregate(target, ctx, span, weights)
        plates = list(target)
        for item in plates:
            require(item, message="The plate collection cannot contain None.")
            if not isinstance(item, Plate):
                raise InvalidArgumentError(f"Expected Plate, got {type(item).__name__}")
        return self._aggregate_many(plates, ctx, span, weights)


class WeightedDescriptiveStatistic(DescriptiveStatistic):
    """A statistic that also accepts positional weights.

    ``weights[i]`` multiplies the i-th value handed to the statistic (the
    i-th value of the window when a window is given). Every entry point of
    :class:`DescriptiveStatistic` accepts ``weights=``.
    """

    supports_weights = True

    @staticmethod
    def apply_weights(
        values: Sequence[Decimal], weights: Sequence[Decimal], ctx: Context
    ) -> List[Decimal]:
        return [ctx.multiply(value, weight) for value, weight in zip(values, weights)]

    def calculate_weighted(
        self, values: Sequence[Decimal], weights: Sequence[Decimal], ctx: Context
    ) -> Result:
        return self.calculate(self.apply_weights(values, weights, ctx), ctx)

    def calculate_weighted_range(
        self,
        values: Sequence[Decimal],
        weights: Sequence[Decimal],
        begin: int,
        length: int,
        ctx: Context,
    ) -> Result:
        return self.calculate_weighted(list(values[begin : begin + length]), weights, ctx)

    def _evaluate(self, values, ctx, span, weights) -> Result:
        if weights is None:
            return super()._evaluate(values, ctx, span, weights)
        if span is None:
            return self.calculate_weighted(values, weights, ctx)
        return self.calculate_weighted_range(values, weights, span[0], span[1], ctx)

    def _pool(self, wells, ctx, span, weights) -> List[Decimal]:
        if weights is None:
            return super()._pool(wells, ctx, span, weights)
        pooled: List[Decimal] = []
        for well in wells:
            values = well.data
            if span is not None:
                values = values[span[0] : span[0] + span[1]]
            pooled.extend(self.apply_weights(values, weights, ctx))
        return pooled
