import json

import pandas as pd
import pytest

from conftest import dec
from platemath.errors import InvalidArgumentError
from platemath.io import (
    COLUMNS,
    dumps,
    frame_to_plate,
    loads,
    plate_to_frame,
    read_plates,
    results_to_frame,
    save_results_csv,
    stack_from_dict,
    stack_to_dict,
    write_plates,
)
from platemath.plate import Plate, Stack, Well
from platemath.stats import Mean, Percentile
from platemath.util.random_util import random_stack


@pytest.fixture()
def plate():
    plate = Plate(2, 3, label="P1", wells=[Well(0, 1, ["1.10", 2]), Well(1, 3, ["-0.5"])])
    plate.add_group("controls", [Well(0, 1), Well(1, 3)])
    return plate


def test_json_round_trip_keeps_values_and_groups(plate, tmp_path):
    path = tmp_path / "plates.json"
    write_plates(plate, str(path))
    (loaded,) = read_plates(str(path))

    assert loaded == plate
    assert loaded.groups == plate.groups
    assert [w.data for w in loaded] == [dec("1.10", 2), dec("-0.5")]
    assert str(loaded.first().data[0]) == "1.10"


def test_json_layout(plate):
    payload = json.loads(dumps(plate))
    entry = payload["plates"][0]
    assert entry["size"] == 6
    assert entry["wells"][0] == {"index": "A1", "values": ["1.10", "2"]}
    assert entry["groups"] == {"controls": ["A1", "B3"]}


def test_loads_accepts_numbers_and_bare_plate():
    (plate,) = loads('{"rows": 1, "columns": 2, "wells": [{"index": "A2", "values": [1, 2.5]}]}')
    assert plate.first().data == dec(1, "2.5")
    with pytest.raises(InvalidArgumentError):
        loads('[{"columns": 2}]')


def test_stack_round_trip(rng):
    stack = random_stack(2, 2, 3, size=2, label="S", rng=rng)
    rebuilt = stack_from_dict(stack_to_dict(stack))
    assert rebuilt == stack
    assert [w.data for w in rebuilt[1]] == [w.data for w in stack[1]]
    assert stack_from_dict({"plates": [], "rows": 2, "columns": 2}) == Stack(2, 2)


def test_plate_frame_round_trip(plate):
    frame = plate_to_frame(plate)
    assert list(frame.columns) == ["Plate", "Well", "Row", "Column", "Position", "Value"]
    assert len(frame) == 3
    rebuilt = frame_to_plate(frame, 2, 3, label="P1")
    assert [w.data for w in rebuilt] == [w.data for w in plate]


def test_frame_to_plate_requires_columns():
    with pytest.raises(InvalidArgumentError):
        frame_to_plate(pd.DataFrame({"Well": ["A1"]}), 1, 1)


def test_results_to_frame(plate):
    per_well = results_to_frame(Mean().plate(plate), "mean")
    assert per_well[COLUMNS.well].tolist() == ["A1", "B3"]
    assert per_well[COLUMNS.result].tolist() == ["1.55", "-0.5"]

    quartiles = results_to_frame(Percentile([0, 100]).plates_aggregated([plate]), "percentile")
    assert quartiles[COLUMNS.plate].tolist() == ["P1", "P1"]
    assert quartiles[COLUMNS.position].tolist() == [0, 1]
    assert quartiles[COLUMNS.result].tolist() == ["-0.5", "2"]


def test_save_results_csv(plate, tmp_path):
    frames = {"mean_per_well": results_to_frame(Mean().plate(plate), "mean")}
    paths = save_results_csv(frames, str(tmp_path / "out"))
    assert len(paths) == 1
    saved = pd.read_csv(paths[0], dtype=str)
    assert saved[COLUMNS.statistic].tolist() == ["mean", "mean"]
