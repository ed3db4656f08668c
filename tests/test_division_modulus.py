import decimal
from decimal import Decimal

import pytest

from conftest import dec
from platemath.arithmetic import Division, Modulus, Power
from platemath.config import make_context
from platemath.plate import Plate, Well


def test_division_rounds_to_context_precision():
    result = Division().wells(Well(0, 1, [1, 2]), Well(0, 1, [3, 4]), make_context(5))
    assert result == [Decimal("0.33333"), Decimal("0.5")]


def test_division_divides_first_by_second():
    result = Division().wells(Well(0, 1, [10, 1]), Well(0, 1, [2, 8]))
    assert result == dec(5, "0.125")


def test_division_by_zero_raises():
    with pytest.raises(decimal.DivisionByZero):
        Division().wells(Well(0, 1, [1]), Well(0, 1, [0]))
    with pytest.raises(decimal.InvalidOperation):
        Division().wells(Well(0, 1, [0]), 0)


def test_division_passes_tail_without_dividing():
    result = Division().wells(Well(0, 1, [4, 9, 0]), Well(0, 1, [2]))
    assert result == dec(2, 9, 0)


def test_modulus_sign_follows_dividend():
    result = Modulus().wells(Well(0, 1, [7, -7, "7.5"]), Well(0, 1, [3, 3, 2]))
    assert result == dec(1, -1, "1.5")


def test_power_with_constant_exponent(ctx):
    plate = Plate(1, 2, wells=[Well(0, 1, [2, 3]), Well(0, 2, ["0.5"])])
    result = Power().plates(plate, 2, ctx)
    assert [w.data for w in result] == [dec(4, 9), dec("0.25")]


def test_context_defaults():
    from platemath import DEFAULT_CONTEXT
    from platemath.config import DEFAULT_PRECISION, resolve_context

    assert resolve_context(None) is DEFAULT_CONTEXT
    assert DEFAULT_CONTEXT.prec == DEFAULT_PRECISION
    with pytest.raises(ValueError):
        make_context(0)
