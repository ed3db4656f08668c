"""Concrete single-operand operations."""

from __future__ import annotations

from decimal import Context, Decimal

from .unary import UnaryOperation

_ONE = Decimal(1)


def _exact_add(x: Decimal, y: Decimal) -> Decimal:
    # Enough digits to hold x + y for |y| == 1, whatever the ambient context.
    if not x.is_finite():
        return x + y
    digits = max(x.adjusted(), 0) - min(x.as_tuple().exponent, 0) + 2
    return Context(prec=digits).add(x, y)


class Increment(UnaryOperation):
    name = "increment"

    def operate(self, x: Decimal) -> Decimal:
        return _exact_add(x, _ONE)


class Decrement(UnaryOperation):
    name = "decrement"

    def operate(self, x: Decimal) -> Decimal:
        return _exact_add(x, -_ONE)


class AbsoluteValue(UnaryOperation):
    name = "absolute"

    def operate(self, x: Decimal) -> Decimal:
        return x.copy_abs()


class Negation(UnaryOperation):
    name = "negation"

    def operate(self, x: Decimal) -> Decimal:
        return x.copy_negate()
