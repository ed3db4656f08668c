import pandas as pd

import main
from platemath.io import write_plates
from platemath.plate import Plate, Well


def test_main_writes_per_well_and_per_plate_tables(tmp_path):
    plates = [
        Plate(1, 2, label="first", wells=[Well(0, 1, [1, 2]), Well(0, 2, [3])]),
        Plate(1, 2, label="second", wells=[Well(0, 1, [10])]),
    ]
    source = tmp_path / "plates.json"
    write_plates(plates, str(source))
    outdir = tmp_path / "out"

    assert main.main(["--input", str(source), "--outdir", str(outdir), "--statistic", "sum"]) == 0

    per_well = pd.read_csv(outdir / "sum_per_well.csv", dtype=str)
    assert per_well["Plate"].tolist() == ["first", "first", "second"]
    assert per_well["Result"].tolist() == ["3", "3", "10"]
    per_plate = pd.read_csv(outdir / "sum_per_plate.csv", dtype=str)
    assert per_plate["Plate"].tolist() == ["first", "second"]
    assert per_plate["Result"].tolist() == ["6", "10"]


def test_main_returns_error_without_plates(tmp_path):
    source = tmp_path / "empty.json"
    source.write_text('{"plates": []}', encoding="utf-8")
    assert main.main(["--input", str(source), "--outdir", str(tmp_path / "out")]) == 1


def test_main_labels_unlabelled_plates_by_position(tmp_path):
    plates = [
        Plate(1, 1, wells=[Well(0, 1, [1])]),
        Plate(1, 1, wells=[Well(0, 1, [5])]),
    ]
    source = tmp_path / "plates.json"
    write_plates(plates, str(source))
    outdir = tmp_path / "out"

    assert main.main(["--input", str(source), "--outdir", str(outdir), "--statistic", "max"]) == 0

    per_plate = pd.read_csv(outdir / "max_per_plate.csv", dtype=str)
    assert per_plate["Plate"].tolist() == ["plate-1", "plate-2"]
    assert per_plate["Result"].tolist() == ["1", "5"]
