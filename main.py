#!/usr/bin/env python3
"""
Main script for summarising microplate data.
"""

# Pipeline overview:
# 1) Load a JSON plate list.
# 2) Compute the chosen statistic for every well of every plate.
# 3) Compute the same statistic over the pooled values of each plate.
# 4) Export both result tables as CSV files.

from __future__ import annotations

import argparse
import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pandas as pd

from platemath.config import DEFAULT_PRECISION, make_context
from platemath.io import read_plates, results_to_frame, save_results_csv
from platemath.stats import STATISTICS


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for script execution."""
    parser = argparse.ArgumentParser(
        description="Per-well and per-plate descriptive statistics for JSON plate files."
    )
    parser.add_argument("--input", required=True, help="Path to a JSON plate list.")
    parser.add_argument("--outdir", default="output", help="Directory for CSV outputs.")
    parser.add_argument(
        "--statistic",
        default="mean",
        choices=sorted(STATISTICS),
        help="Statistic to compute (default: mean).",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=DEFAULT_PRECISION,
        help="Significant digits for decimal arithmetic.",
    )
    parser.add_argument("--begin", type=int, default=None, help="First index of a window.")
    parser.add_argument("--length", type=int, default=None, help="Number of indices in a window.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main execution function."""
    args = _build_arg_parser().parse_args(argv)
    start_time = time.time()

    plates = read_plates(args.input)
    logging.info("Loaded %d plates from %s", len(plates), args.input)
    if not plates:
        logging.error("No plates found in %s. Terminating execution.", args.input)
        return 1
    # Unlabelled plates would collide as keys of the per-plate results.
    for position, plate in enumerate(plates, start=1):
        if plate.label is None:
            plate.label = f"plate-{position}"

    statistic = STATISTICS[args.statistic]()
    ctx = make_context(args.precision)

    per_well = []
    for plate in plates:
        frame = results_to_frame(
            statistic.plate(plate, ctx, begin=args.begin, length=args.length),
            statistic.name,
        )
        frame.insert(0, "Plate", plate.label or "")
        per_well.append(frame)
    per_well_df = pd.concat(per_well, ignore_index=True) if per_well else pd.DataFrame()
    logging.info("Computed %s for %d wells", statistic.name, len(per_well_df))

    aggregated = statistic.plates_aggregated(plates, ctx, begin=args.begin, length=args.length)
    aggregated_df = results_to_frame(aggregated, statistic.name)
    logging.info("Computed aggregated %s for %d plates", statistic.name, len(aggregated_df))

    paths = save_results_csv(
        {
            f"{statistic.name}_per_well": per_well_df,
            f"{statistic.name}_per_plate": aggregated_df,
        },
        args.outdir,
    )

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    for path in paths:
        logging.info("  - %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
