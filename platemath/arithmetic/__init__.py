"""Elementwise arithmetic over the container hierarchy.

Modules:
    binary:
        Two-operand engine with standard (pass-through tail) and strict
        (truncating) length policies and optional index windows.

    unary:
        Single-operand engine.

    operations, unary_operations:
        Concrete operations; each supplies only the element primitive.
"""

from .binary import BinaryOperation
from .operations import Addition, Division, Modulus, Multiplication, Power, Subtraction
from .unary import UnaryOperation
from .unary_operations import AbsoluteValue, Decrement, Increment, Negation

__all__ = [
    "BinaryOperation",
    "UnaryOperation",
    "Addition",
    "Subtraction",
    "Multiplication",
    "Division",
    "Modulus",
    "Power",
    "Increment",
    "Decrement",
    "AbsoluteValue",
    "Negation",
]
