from decimal import Decimal

import pytest

from conftest import dec
from platemath.errors import InvalidArgumentError
from platemath.plate import Plate, Well, WellSet
from platemath.stats import Max, Mean, Mode, Percentile, Sum


def test_weights_multiply_values_positionally():
    well = Well(0, 1, [2, 4, 6])
    assert Max().well(well, weights=[1, 2, 3]) == Decimal(18)
    assert Sum().well(well, weights=[1, 0, "0.5"]) == Decimal(5)


def test_weights_start_at_the_window():
    well = Well(0, 1, [1, 2, 3, 4])
    assert Max().well(well, begin=1, length=2, weights=[10, 1]) == Decimal(20)


def test_weights_longer_than_values_are_truncated():
    assert Sum().well(Well(0, 1, [1, 1]), weights=[2, 3, 100]) == Decimal(5)


def test_short_weights_are_rejected():
    with pytest.raises(InvalidArgumentError):
        Sum().well(Well(0, 1, [1, 2, 3]), weights=[1, 2])
    with pytest.raises(InvalidArgumentError):
        Sum().plate(Plate(1, 2, wells=[Well(0, 1, [1]), Well(0, 2, [1, 2])]), weights=[1])


def test_per_well_weights():
    plate = Plate(1, 2, wells=[Well(0, 1, [1, 2]), Well(0, 2, [3, 4])])
    results = Sum().plate(plate, weights=[2, 10])
    assert list(results.values()) == [Decimal(22), Decimal(46)]


def test_aggregated_weights_apply_per_well():
    well_set = WellSet([Well(0, 1, [1, 2]), Well(0, 2, [3, 4])])
    assert Mean().sets_aggregated(well_set, weights=[1, 2]) == Decimal(4)
    assert Sum().sets_aggregated([well_set], weights=[1, 0]) == {well_set: Decimal(4)}


def test_weighted_primitives(ctx):
    assert Sum().calculate_weighted(dec(1, 2, 3), dec(3, 2, 1), ctx) == Decimal(10)
    assert Max().calculate_weighted_range(dec(5, 1, 2), dec(4, 4), 1, 2, ctx) == Decimal(8)


def test_unweighted_statistics_reject_weights():
    well = Well(0, 1, [1, 2])
    with pytest.raises(InvalidArgumentError):
        Percentile().well(well, weights=[1, 1])
    with pytest.raises(InvalidArgumentError):
        Mode().plates_aggregated(Plate(1, 1, wells=[well]), weights=[1, 1])
