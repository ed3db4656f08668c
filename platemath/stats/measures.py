"""Concrete descriptive statistics over Decimal values.

All arithmetic goes through the supplied ``decimal.Context`` so results are
rounded to its precision. Statistics of empty inputs (and moments without
enough points) are ``Decimal("NaN")``, matching the usual reference
libraries; ``Sum`` of nothing is zero and list-valued statistics return an
empty list.
"""

from __future__ import annotations

from collections import Counter
from decimal import Context, Decimal
from typing import Iterable, List, Sequence

from ..errors import InvalidArgumentError
from ..util.decimal_util import to_decimal
from .descriptive import DescriptiveStatistic, WeightedDescriptiveStatistic

NAN = Decimal("NaN")
_ZERO = Decimal(0)


def _sum(values: Sequence[Decimal], ctx: Context) -> Decimal:
    total = _ZERO
    for value in values:
        total = ctx.add(total, value)
    return total


def _mean(values: Sequence[Decimal], ctx: Context) -> Decimal:
    return ctx.divide(_sum(values, ctx), Decimal(len(values)))


def _central_moment_sums(values: Sequence[Decimal], ctx: Context, power: int) -> Decimal:
    mean = _mean(values, ctx)
    total = _ZERO
    for value in values:
        total = ctx.add(total, ctx.power(ctx.subtract(value, mean), power))
    return total


def _sorted(values: Sequence[Decimal]) -> List[Decimal]:
    return sorted(values)


class Max(WeightedDescriptiveStatistic):
    name = "max"

    def calculate(self, values, ctx):
        return max(values) if values else NAN


class Min(WeightedDescriptiveStatistic):
    name = "min"

    def calculate(self, values, ctx):
        return min(values) if values else NAN


class Range(WeightedDescriptiveStatistic):
    name = "range"

    def calculate(self, values, ctx):
        if not values:
            return NAN
        return ctx.subtract(max(values), min(values))


class Sum(WeightedDescriptiveStatistic):
    name = "sum"

    def calculate(self, values, ctx):
        return _sum(values, ctx)


class Mean(WeightedDescriptiveStatistic):
    name = "mean"

    def calculate(self, values, ctx):
        return _mean(values, ctx) if values else NAN


class GeometricMean(WeightedDescriptiveStatistic):
    """exp(mean(ln x)); NaN when any value is not strictly positive."""

    name = "geometric_mean"

    def calculate(self, values, ctx):
        if not values or any(value <= 0 for value in values):
            return NAN
        logs = _sum([ctx.ln(value) for value in values], ctx)
        return ctx.exp(ctx.divide(logs, Decimal(len(values))))


class SampleVariance(WeightedDescriptiveStatistic):
    """Bias-corrected variance (divides by n - 1)."""

    name = "sample_variance"

    def calculate(self, values, ctx):
        if len(values) < 2:
            return NAN
        return ctx.divide(_central_moment_sums(values, ctx, 2), Decimal(len(values) - 1))


class PopulationVariance(WeightedDescriptiveStatistic):
    name = "population_variance"

    def calculate(self, values, ctx):
        if not values:
            return NAN
        return ctx.divide(_central_moment_sums(values, ctx, 2), Decimal(len(values)))


class SampleStandardDeviation(SampleVariance):
    name = "sample_standard_deviation"

    def calculate(self, values, ctx):
        variance = super().calculate(values, ctx)
        return variance if variance.is_nan() else ctx.sqrt(variance)


class PopulationStandardDeviation(PopulationVariance):
    name = "population_standard_deviation"

    def calculate(self, values, ctx):
        variance = super().calculate(values, ctx)
        return variance if variance.is_nan() else ctx.sqrt(variance)


class Skewness(WeightedDescriptiveStatistic):
    """Adjusted Fisher-Pearson sample skewness (``G1``).

    Matches ``scipy.stats.skew(x, bias=False)``; NaN for fewer than three
    values or zero variance.
    """

    name = "skewness"

    def calculate(self, values, ctx):
        n = len(values)
        if n < 3:
            return NAN
        m2 = _central_moment_sums(values, ctx, 2)
        if m2.is_zero():
            return NAN
        m3 = _central_moment_sums(values, ctx, 3)
        size = Decimal(n)
        variance = ctx.divide(m2, size - 1)
        std = ctx.sqrt(variance)
        factor = ctx.divide(size, ctx.multiply(size - 1, size - 2))
        return ctx.multiply(factor, ctx.divide(m3, ctx.power(std, 3)))


class Kurtosis(WeightedDescriptiveStatistic):
    """Bias-corrected excess kurtosis (``G2``).

    Matches ``scipy.stats.kurtosis(x, fisher=True, bias=False)``; NaN for
    fewer than four values or zero variance.
    """

    name = "kurtosis"

    def calculate(self, values, ctx):
        n = len(values)
        if n < 4:
            return NAN
        m2 = _central_moment_sums(values, ctx, 2)
        if m2.is_zero():
            return NAN
        m4 = _central_moment_sums(values, ctx, 4)
        size = Decimal(n)
        variance = ctx.divide(m2, size - 1)
        denominator = ctx.multiply(ctx.multiply(size - 1, size - 2), size - 3)
        first = ctx.multiply(
            ctx.divide(ctx.multiply(size, size + 1), denominator),
            ctx.divide(m4, ctx.power(variance, 2)),
        )
        second = ctx.divide(
            ctx.multiply(Decimal(3), ctx.power(size - 1, 2)),
            ctx.multiply(size - 2, size - 3),
        )
        return ctx.subtract(first, second)


def _interpolated_percentile(ordered: List[Decimal], percentile: Decimal, ctx: Context) -> Decimal:
    # Linear interpolation between closest ranks, numpy's default method.
    position = ctx.multiply(Decimal(len(ordered) - 1), ctx.divide(percentile, Decimal(100)))
    lower = int(position)
    fraction = ctx.subtract(position, Decimal(lower))
    if lower + 1 >= len(ordered) or fraction.is_zero():
        return ordered[min(lower, len(ordered) - 1)]
    delta = ctx.subtract(ordered[lower + 1], ordered[lower])
    return ctx.add(ordered[lower], ctx.multiply(fraction, delta))


class Median(WeightedDescriptiveStatistic):
    name = "median"

    def calculate(self, values, ctx):
        if not values:
            return NAN
        return _interpolated_percentile(_sorted(values), Decimal(50), ctx)


class Percentile(DescriptiveStatistic):
    """One value per requested percentile, in the order requested.

    Args:
        percentiles (Iterable): Percentiles in ``[0, 100]``. Defaults to the
            quartiles ``(25, 50, 75)``.
    """

    name = "percentile"
    returns_list = True

    def __init__(self, percentiles: Iterable = (25, 50, 75)):
        self.percentiles = [to_decimal(p) for p in percentiles]
        for p in self.percentiles:
            if p < 0 or p > 100:
                raise InvalidArgumentError(f"Percentile must lie in [0, 100], got {p}")

    def calculate(self, values, ctx):
        if not values:
            return []
        ordered = _sorted(values)
        return [_interpolated_percentile(ordered, p, ctx) for p in self.percentiles]


class Mode(DescriptiveStatistic):
    """Every most-frequent value, ascending."""

    name = "mode"
    returns_list = True

    def calculate(self, values, ctx):
        if not values:
            return []
        counts = Counter(values)
        top = max(counts.values())
        return sorted(value for value, count in counts.items() if count == top)
