from decimal import Decimal

import numpy as np
import pytest
from scipy import stats as sps

from conftest import dec
from platemath.errors import InvalidArgumentError, InvalidIndexError, NullArgumentError
from platemath.plate import Plate, Stack, Well, WellSet
from platemath.stats import (
    STATISTICS,
    GeometricMean,
    Kurtosis,
    Max,
    Mean,
    Median,
    Min,
    Mode,
    Percentile,
    PopulationStandardDeviation,
    PopulationVariance,
    Range,
    SampleStandardDeviation,
    SampleVariance,
    Skewness,
    Sum,
)
from platemath.util.decimal_util import to_float_array
from platemath.util.random_util import random_plate, random_stack

REFERENCES = [
    (Max(), np.max),
    (Min(), np.min),
    (Range(), np.ptp),
    (Sum(), np.sum),
    (Mean(), np.mean),
    (GeometricMean(), sps.gmean),
    (SampleVariance(), lambda x: np.var(x, ddof=1)),
    (PopulationVariance(), np.var),
    (SampleStandardDeviation(), lambda x: np.std(x, ddof=1)),
    (PopulationStandardDeviation(), np.std),
    (Skewness(), lambda x: sps.skew(x, bias=False)),
    (Kurtosis(), lambda x: sps.kurtosis(x, fisher=True, bias=False)),
    (Median(), np.median),
]


@pytest.mark.parametrize("statistic,reference", REFERENCES, ids=lambda s: getattr(s, "name", None))
def test_per_well_matches_reference(statistic, reference, ctx, rng):
    plate = random_plate(2, 3, 12, low=1.0, high=50.0, rng=rng)
    results = statistic.plate(plate, ctx)
    assert len(results) == 6
    for well, value in results.items():
        expected = reference(to_float_array(well.data))
        assert float(value) == pytest.approx(expected, rel=1e-9)


@pytest.mark.parametrize("statistic,reference", REFERENCES, ids=lambda s: getattr(s, "name", None))
def test_aggregated_pools_all_wells(statistic, reference, ctx, rng):
    plate = random_plate(3, 4, 5, label="P", low=1.0, high=50.0, rng=rng)
    pooled = [value for well in plate for value in well.data]
    result = statistic.plates_aggregated(plate, ctx)
    assert float(result) == pytest.approx(reference(to_float_array(pooled)), rel=1e-9)
    assert statistic.sets_aggregated(plate.data_set, ctx) == result


def test_well_and_window(ctx):
    well = Well(0, 1, [1, 2, 3, 4, 10])
    assert Mean().well(well, ctx) == Decimal(4)
    assert Mean().well(well, ctx, begin=1, length=3) == Decimal(3)
    assert Max().well(well, begin=0, length=2) == Decimal(2)
    with pytest.raises(InvalidArgumentError):
        Mean().well(well, begin=4, length=2)


def test_per_well_results_are_keyed_by_copies():
    plate = Plate(2, 2, wells=[Well(1, 2, [4, 6]), Well(0, 1, [1, 3])])
    results = Mean().plate(plate)
    assert [w.index for w in results] == ["A1", "B2"]
    assert results[Well(0, 1)] == Decimal(2)
    key = next(iter(results))
    key.add(100)
    assert plate.first().data == dec(1, 3)


def test_set_results():
    well_set = WellSet([Well(0, 1, [1, 2]), Well(0, 2, [5])])
    assert Sum().set(well_set) == {Well(0, 1): Decimal(3), Well(0, 2): Decimal(5)}


def test_aggregated_collection_of_sets_is_sorted_by_label():
    b = WellSet([Well(0, 1, [5, 7])], label="b")
    a = WellSet([Well(0, 1, [1]), Well(0, 2, [2, 3])], label="a")
    results = Sum().sets_aggregated([b, a])
    assert [s.label for s in results] == ["a", "b"]
    assert list(results.values()) == [Decimal(6), Decimal(12)]


def test_aggregated_stack_has_one_result_per_plate(ctx, rng):
    stack = random_stack(2, 2, 4, size=3, label="S", rng=rng)
    results = Mean().plates_aggregated(stack, ctx)
    assert len(results) == 3
    for plate in stack:
        assert results[plate] == Mean().plates_aggregated(plate, ctx)


def test_aggregated_window_fails_fast_on_short_well():
    plate = Plate(2, 2, wells=[Well(0, 1, [1, 2, 3]), Well(0, 2, [1])])
    with pytest.raises(InvalidIndexError):
        Mean().plates_aggregated(plate, begin=1, length=2)
    with pytest.raises(InvalidIndexError):
        Mean().plates_aggregated(Stack(2, 2, plates=[plate]), begin=1, length=2)
    assert Mean().plates_aggregated(plate, begin=0, length=1) == Decimal(1)


def test_aggregated_rejects_foreign_items():
    with pytest.raises(InvalidArgumentError):
        Mean().sets_aggregated([WellSet(), Well(0, 1)])
    with pytest.raises(NullArgumentError):
        Mean().plates_aggregated([None])


def test_empty_inputs():
    empty = Well(0, 1)
    assert Mean().well(empty).is_nan()
    assert Median().well(empty).is_nan()
    assert Sum().well(empty) == 0
    assert Percentile().well(empty) == []
    assert Mode().well(empty) == []
    assert SampleVariance().well(Well(0, 1, [3])).is_nan()
    assert Skewness().well(Well(0, 1, [2, 2, 2])).is_nan()


def test_geometric_mean_needs_positive_values():
    assert GeometricMean().well(Well(0, 1, [1, 0, 4])).is_nan()
    assert GeometricMean().well(Well(0, 1, [1, 4])) == Decimal(2)


def test_percentile_matches_numpy(ctx, rng):
    plate = random_plate(1, 2, 9, rng=rng)
    statistic = Percentile([0, 10, 50, 90, 100])
    for well, values in statistic.plate(plate, ctx).items():
        expected = np.percentile(to_float_array(well.data), [0, 10, 50, 90, 100])
        assert [float(v) for v in values] == pytest.approx(expected.tolist(), rel=1e-9)


def test_percentile_rejects_out_of_range():
    with pytest.raises(InvalidArgumentError):
        Percentile([50, 101])


def test_mode_returns_every_most_frequent_value():
    assert Mode().well(Well(0, 1, [3, 1, 2, 2, 3])) == dec(2, 3)
    assert Mode().plates_aggregated(Plate(1, 2, wells=[Well(0, 1, [4]), Well(0, 2, [4, 1])])) == dec(4)


def test_statistics_registry_names():
    assert STATISTICS["mean"] is Mean
    assert all(cls.name == name for name, cls in STATISTICS.items())
