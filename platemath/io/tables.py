"""Convert plates and statistic results to pandas DataFrames and CSV files.

This module is the tabular boundary between in-memory containers and
spreadsheet-friendly artifacts. Values travel as strings so Decimal precision
survives the round trip through CSV.
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Union

import pandas as pd

from ..errors import InvalidArgumentError
from ..plate import Plate, Well
from .schema import COLUMNS

logger = logging.getLogger(__name__)


def plate_to_frame(plate: Plate) -> pd.DataFrame:
    """Flatten a plate into one row per value.

    Args:
        plate (Plate): Plate to flatten.

    Returns:
        pandas.DataFrame: Columns ``Plate``, ``Well``, ``Row``, ``Column``,
        ``Position`` and ``Value``, ordered by well then position. Empty
        wells contribute no rows.
    """
    records = []
    for well in plate:
        for position, value in enumerate(well.data):
            records.append(
                {
                    COLUMNS.plate: plate.label or "",
                    COLUMNS.well: well.index,
                    COLUMNS.row: well.row,
                    COLUMNS.column: well.column,
                    COLUMNS.position: position,
                    COLUMNS.value: str(value),
                }
            )
    columns = [
        COLUMNS.plate,
        COLUMNS.well,
        COLUMNS.row,
        COLUMNS.column,
        COLUMNS.position,
        COLUMNS.value,
    ]
    return pd.DataFrame(records, columns=columns)


def frame_to_plate(
    df: pd.DataFrame, rows: int, columns: int, label: Optional[str] = None
) -> Plate:
    """Rebuild a plate from a long-format table.

    Rows are grouped by ``Well`` and ordered by ``Position`` when that column
    is present, otherwise by their order in ``df``.

    Raises:
        InvalidArgumentError: If ``Well`` or ``Value`` columns are missing.
    """
    missing = {COLUMNS.well, COLUMNS.value} - set(df.columns)
    if missing:
        raise InvalidArgumentError(f"Input table is missing required columns: {sorted(missing)}")
    if COLUMNS.position in df.columns:
        df = df.sort_values([COLUMNS.well, COLUMNS.position], kind="stable")
    plate = Plate(rows, columns, label=label)
    for index, group in df.groupby(COLUMNS.well, sort=False):
        plate.add_wells(Well.from_index(str(index), [str(v) for v in group[COLUMNS.value]]))
    return plate


def results_to_frame(
    results: Mapping, statistic: str = ""
) -> pd.DataFrame:
    """Tabulate a statistic mapping returned by the statistics engine.

    Keys may be wells (per-well results) or plates/sets (aggregated results).
    List-valued results produce one row per element with a ``Position``
    column.
    """
    records: List[Dict[str, Union[str, int]]] = []
    for key, value in results.items():
        base: Dict[str, Union[str, int]] = {COLUMNS.statistic: statistic}
        if isinstance(key, Well):
            base[COLUMNS.well] = key.index
        else:
            base[COLUMNS.plate] = key.label or ""
        if isinstance(value, Decimal):
            records.append({**base, COLUMNS.result: str(value)})
        else:
            for position, item in enumerate(value):
                records.append({**base, COLUMNS.position: position, COLUMNS.result: str(item)})
    return pd.DataFrame(records)


def save_results_csv(frames: Mapping[str, pd.DataFrame], output_dir: str = "output") -> List[str]:
    """Write each named DataFrame to ``<output_dir>/<name>.csv``.

    Returns:
        list[str]: Paths of the written files, in ``frames`` order.
    """
    os.makedirs(output_dir, exist_ok=True)
    paths = []
    for name, frame in frames.items():
        path = os.path.join(output_dir, f"{name}.csv")
        frame.to_csv(path, index=False)
        logger.info("Saved %d rows to %s", len(frame), path)
        paths.append(path)
    return paths
