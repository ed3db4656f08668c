"""Container hierarchy: Well -> WellSet -> Plate -> Stack."""

from .plate import Plate, Stack
from .well import Well, row_to_int, row_to_string
from .well_set import WellSet

__all__ = ["Plate", "Stack", "Well", "WellSet", "row_to_int", "row_to_string"]
