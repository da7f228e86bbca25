"""
Cutting plane configuration files.

A plane file is a JSON object with two 3-element numeric arrays:

    {
        "origin": [0.0, 0.0, 0.0],
        "normal": [0.0, 0.0, 1.0]
    }

Other keys are ignored.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from .geometry import Plane

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

PathLike = Union[str, Path]


def _read_vector(data: Mapping[str, Any], key: str) -> List[float]:
    if key not in data:
        raise ValueError(f"Plane configuration is missing '{key}'")
    value = data[key]
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"'{key}' must be an array of 3 numbers")
    out = []
    for c in value:
        # bool is an int subclass but never a coordinate
        if isinstance(c, bool) or not isinstance(c, (int, float)):
            raise ValueError(f"'{key}' must contain only numbers, got {c!r}")
        if not math.isfinite(c):
            raise ValueError(f"'{key}' must contain finite numbers, got {c!r}")
        out.append(float(c))
    return out


def plane_from_dict(data: Mapping[str, Any]) -> Plane:
    """Build a `Plane` from a mapping holding "origin" and "normal"."""
    if not isinstance(data, Mapping):
        raise ValueError("Plane configuration must be a JSON object")
    return Plane(_read_vector(data, "origin"), _read_vector(data, "normal"))


def plane_to_dict(plane: Plane) -> Dict[str, List[float]]:
    return {"origin": list(plane.origin), "normal": list(plane.normal)}


def read_plane(path: PathLike) -> Plane:
    """
    Read a cutting plane from a JSON file.

    Raises:
        OSError: If the file cannot be opened.
        ValueError: If the content is not valid JSON or lacks a well-formed
            "origin"/"normal" pair.
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    plane = plane_from_dict(data)
    logger.info("Loaded plane from %s: origin=%s normal=%s", path, plane.origin, plane.normal)
    return plane


def write_plane(plane: Plane, path: PathLike) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(plane_to_dict(plane), f, indent=4)
        f.write("\n")
