"""Concrete two-operand operations.

Each class only defines the element-level primitive; rounding follows the
``decimal.Context`` passed to the engine.
"""

from __future__ import annotations

from decimal import Context, Decimal

from .binary import BinaryOperation


class Addition(BinaryOperation):
    name = "addition"

    def operate(self, x: Decimal, y: Decimal, ctx: Context) -> Decimal:
        return ctx.add(x, y)


class Subtraction(BinaryOperation):
    name = "subtraction"

    def operate(self, x: Decimal, y: Decimal, ctx: Context) -> Decimal:
        return ctx.subtract(x, y)


class Multiplication(BinaryOperation):
    name = "multiplication"

    def operate(self, x: Decimal, y: Decimal, ctx: Context) -> Decimal:
        return ctx.multiply(x, y)


class Division(BinaryOperation):
    """``x / y`` rounded to the context precision.

    A zero divisor raises ``decimal.DivisionByZero`` (or
    ``decimal.InvalidOperation`` for ``0 / 0``) under the default traps.
    """

    name = "division"

    def operate(self, x: Decimal, y: Decimal, ctx: Context) -> Decimal:
        return ctx.divide(x, y)


class Modulus(BinaryOperation):
    """Remainder of truncating division; the sign follows the dividend."""

    name = "modulus"

    def operate(self, x: Decimal, y: Decimal, ctx: Context) -> Decimal:
        return ctx.remainder(x, y)


class Power(BinaryOperation):
    name = "power"

    def operate(self, x: Decimal, y: Decimal, ctx: Context) -> Decimal:
        return ctx.power(x, y)
