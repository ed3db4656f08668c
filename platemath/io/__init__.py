"""Import/export of containers: a JSON object mapping and pandas tables."""

from .json_io import (
    dumps,
    loads,
    plate_from_dict,
    plate_to_dict,
    read_plates,
    stack_from_dict,
    stack_to_dict,
    write_plates,
)
from .schema import COLUMNS, PlateColumns
from .tables import frame_to_plate, plate_to_frame, results_to_frame, save_results_csv

__all__ = [
    "COLUMNS",
    "PlateColumns",
    "dumps",
    "loads",
    "plate_from_dict",
    "plate_to_dict",
    "read_plates",
    "write_plates",
    "stack_from_dict",
    "stack_to_dict",
    "frame_to_plate",
    "plate_to_frame",
    "results_to_frame",
    "save_results_csv",
]
