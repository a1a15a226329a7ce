"""Decompose a path's d attribute into flattened sub-polygons."""

import logging
import math
import re
from typing import List, Tuple

from svgpathtools import Line, parse_path

from ..core.constants import DEFAULT_CURVE_RESOLUTION
from .attributes import parse_numbers

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

_MOVETO = re.compile(r"(?=[Mm])")


def _as_point(value: complex) -> Point:
    return (float(value.real), float(value.imag))


def _append(points: List[Point], point: Point) -> None:
    if not points or points[-1] != point:
        points.append(point)


def _flatten_subpath(subpath, resolution: float) -> List[Point]:
    points: List[Point] = []
    for segment in subpath:
        _append(points, _as_point(segment.start))
        if isinstance(segment, Line):
            _append(points, _as_point(segment.end))
            continue

        # Curves and arcs are sampled evenly in t
        steps = max(2, math.ceil(segment.length() / resolution))
        for step in range(1, steps + 1):
            _append(points, _as_point(segment.point(step / steps)))
    return points


def _subpath_definitions(d: str) -> List[str]:
    """Split path data into moveto-delimited slices."""
    return [part for part in _MOVETO.split(d.strip()) if part.strip()]


def _moveto_target(definition: str, current: complex) -> complex:
    if definition[0] not in "Mm":
        return current
    numbers = parse_numbers(definition[1:])
    if len(numbers) < 2:
        return current
    target = complex(numbers[0], numbers[1])
    return target if definition[0] == "M" else current + target


def points_on_path(
    d: str, resolution: float = DEFAULT_CURVE_RESOLUTION
) -> List[List[Point]]:
    """Return one point list per moveto-delimited sub-path of d.

    Every moveto starts a new sub-path, even when it begins where the
    previous one ended. An empty or unparsable d yields an empty list.
    """
    if not d or not d.strip():
        return []

    polygons = []
    current = 0j
    try:
        for definition in _subpath_definitions(d):
            start = _moveto_target(definition, current)
            # Relative movetos resolve against the end of the previous slice
            path = parse_path(definition, current_pos=current)
            if len(path) == 0:
                current = start
                continue

            polygons.append(_flatten_subpath(path, resolution))
            current = start if definition.rstrip()[-1] in "Zz" else path[-1].end
    except (ValueError, IndexError) as e:
        logger.warning(f"Unable to parse path data {d[:40]!r}: {e}")
        return []

    return polygons
