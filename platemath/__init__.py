"""
A Python package for arithmetic and descriptive statistics on microplate data.

Values are stored as ``decimal.Decimal`` in a four-level container hierarchy
(Well -> WellSet -> Plate -> Stack) and every operation returns new containers.

Modules:
    - plate: Well, WellSet, Plate and Stack containers.
    - arithmetic: Binary (standard/strict, windowed) and unary elementwise operations.
    - stats: Per-well and aggregated descriptive statistics, optionally weighted.
    - io: JSON object mapping and pandas table conversion.
    - config: Default decimal context and standard plate formats.
"""

__version__ = "1.0.0"

from .arithmetic import (
    AbsoluteValue,
    Addition,
    Decrement,
    Division,
    Increment,
    Modulus,
    Multiplication,
    Negation,
    Power,
    Subtraction,
)
from .config import DEFAULT_CONTEXT, make_context
from .errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    InvalidIndexError,
    NullArgumentError,
    PlateMathError,
)
from .plate import Plate, Stack, Well, WellSet

__all__ = [
    # Containers
    "Well",
    "WellSet",
    "Plate",
    "Stack",
    # Arithmetic
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
    # Configuration
    "DEFAULT_CONTEXT",
    "make_context",
    # Errors
    "PlateMathError",
    "NullArgumentError",
    "InvalidArgumentError",
    "InvalidIndexError",
    "DimensionMismatchError",
]
