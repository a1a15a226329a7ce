"""Small geometry and identifier helpers."""

import secrets
from typing import Sequence, Tuple

from .constants import WindingOrder

Point = Tuple[float, float]


def random_id() -> str:
    """Return a fresh identifier for elements and groups."""
    return secrets.token_hex(8)


def random_seed() -> int:
    """Return a random seed for the hand-drawn renderer."""
    return secrets.randbelow(2**31)


def dimensions_from_points(points: Sequence[Point]) -> Tuple[float, float]:
    """Width and height of the bounding box around points."""
    if not points:
        return 0.0, 0.0

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return max(xs) - min(xs), max(ys) - min(ys)


def get_winding_order(points: Sequence[Point]) -> WindingOrder:
    """Winding order of a closed polygon using the y-up convention.

    Sums (x2 - x1) * (y2 + y1) over every edge, including the closing edge
    back to the first point.
    """
    total = 0.0
    count = len(points)
    for i in range(count):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % count]
        total += (x2 - x1) * (y2 + y1)

    if total > 0:
        return WindingOrder.CLOCKWISE
    return WindingOrder.COUNTERCLOCKWISE
