"""Plain JSON object mapping for plates and stacks.

Layout::

    {"plates": [{"label": "P1", "rows": 8, "columns": 12, "size": 96,
                 "wells": [{"index": "A1", "values": ["1.5", "2"]}],
                 "groups": {"controls": ["A1", "H12"]}}]}

Values are written as strings so no precision is lost on the way through a
float-based JSON parser. Reading accepts numbers as well.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Union

from ..errors import InvalidArgumentError
from ..plate import Plate, Stack, Well


def plate_to_dict(plate: Plate) -> Dict[str, Any]:
    return {
        "label": plate.label,
        "rows": plate.rows,
        "columns": plate.columns,
        "size": plate.rows * plate.columns,
        "wells": [
            {"index": well.index, "values": [str(v) for v in well.data]} for well in plate
        ],
        "groups": {
            label: [well.index for well in members] for label, members in plate.groups.items()
        },
    }


def plate_from_dict(payload: Dict[str, Any]) -> Plate:
    """Rebuild a plate from :func:`plate_to_dict` output.

    Raises:
        InvalidArgumentError: If ``rows`` or ``columns`` is missing.
    """
    try:
        rows, columns = int(payload["rows"]), int(payload["columns"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Plate entry needs integer rows and columns: {exc}") from exc
    plate = Plate(rows, columns, label=payload.get("label"))
    plate.add_wells(
        Well.from_index(entry["index"], [str(v) for v in entry.get("values", [])])
        for entry in payload.get("wells", [])
    )
    for label, indices in (payload.get("groups") or {}).items():
        plate.add_group(label, [Well.from_index(index) for index in indices])
    return plate


def stack_to_dict(stack: Stack) -> Dict[str, Any]:
    return {
        "label": stack.label,
        "rows": stack.rows,
        "columns": stack.columns,
        "plates": [plate_to_dict(plate) for plate in stack],
    }


def stack_from_dict(payload: Dict[str, Any]) -> Stack:
    plates = [plate_from_dict(entry) for entry in payload.get("plates", [])]
    if "rows" in payload and "columns" in payload:
        rows, columns = int(payload["rows"]), int(payload["columns"])
    elif plates:
        rows, columns = plates[0].dimensions
    else:
        raise InvalidArgumentError("An empty stack needs explicit rows and columns.")
    return Stack(rows, columns, label=payload.get("label"), plates=plates)


def dumps(plates: Union[Plate, Stack, Iterable[Plate]], indent: int = 2) -> str:
    """Serialise one plate, a stack, or a collection of plates to a JSON plate list."""
    if isinstance(plates, Plate):
        plates = [plates]
    return json.dumps({"plates": [plate_to_dict(p) for p in plates]}, indent=indent)


def loads(text: str) -> List[Plate]:
    """Parse a JSON plate list produced by :func:`dumps`."""
    payload = json.loads(text)
    if isinstance(payload, dict) and "plates" in payload:
        entries = payload["plates"]
    elif isinstance(payload, dict):
        entries = [payload]
    else:
        entries = payload
    return [plate_from_dict(entry) for entry in entries]


def read_plates(path: str) -> List[Plate]:
    with open(path, "r", encoding="utf-8") as handle:
        return loads(handle.read())


def write_plates(plates: Union[Plate, Stack, Iterable[Plate]], path: str) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(dumps(plates))
