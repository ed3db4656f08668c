"""Conversion and test-data helpers."""

from .decimal_util import to_decimal, to_decimal_list, to_float_array

__all__ = ["to_decimal", "to_decimal_list", "to_float_array"]
