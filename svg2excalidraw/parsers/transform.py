"""SVG transform attribute parsing into 4x4 matrices."""

import logging
import math
import re
import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .attributes import parse_numbers

logger = logging.getLogger(__name__)

_TRANSFORM_FUNCTION = re.compile(r"([a-zA-Z]+)\s*\(([^)]*)\)")


def identity() -> np.ndarray:
    return np.identity(4)


def from_affine(a: float, b: float, c: float, d: float, e: float, f: float) -> np.ndarray:
    """4x4 matrix from the six values of an SVG matrix(a b c d e f)."""
    return np.array(
        [
            [a, c, 0.0, e],
            [b, d, 0.0, f],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scale_translate(sx: float, sy: float, tx: float, ty: float) -> np.ndarray:
    """Local matrix that embeds a shape's size and position."""
    return from_affine(sx, 0.0, 0.0, sy, tx, ty)


def _function_matrix(name: str, args: List[float]) -> np.ndarray:
    if name == "matrix" and len(args) == 6:
        return from_affine(*args)

    if name == "translate" and args:
        tx = args[0]
        ty = args[1] if len(args) > 1 else 0.0
        return from_affine(1, 0, 0, 1, tx, ty)

    if name == "scale" and args:
        sx = args[0]
        sy = args[1] if len(args) > 1 else sx
        return from_affine(sx, 0, 0, sy, 0, 0)

    if name == "rotate" and args:
        angle = math.radians(args[0])
        cos, sin = math.cos(angle), math.sin(angle)
        rotation = from_affine(cos, sin, -sin, cos, 0, 0)
        if len(args) >= 3:
            cx, cy = args[1], args[2]
            return (
                from_affine(1, 0, 0, 1, cx, cy)
                @ rotation
                @ from_affine(1, 0, 0, 1, -cx, -cy)
            )
        return rotation

    if name == "skewX" and args:
        return from_affine(1, 0, math.tan(math.radians(args[0])), 1, 0, 0)

    if name == "skewY" and args:
        return from_affine(1, math.tan(math.radians(args[0])), 0, 1, 0, 0)

    logger.debug(f"Ignoring unsupported transform: {name}({args})")
    return identity()


def parse_transform(transform: str) -> np.ndarray:
    """Parse a transform list; functions apply left to right."""
    matrix = identity()
    for name, raw_args in _TRANSFORM_FUNCTION.findall(transform or ""):
        matrix = matrix @ _function_matrix(name, parse_numbers(raw_args))
    return matrix


def get_element_matrix(el: ET.Element) -> np.ndarray:
    return parse_transform(el.get("transform", ""))


def get_transform_matrix(el: ET.Element, groups: Sequence) -> np.ndarray:
    """Compose every enclosing group's transform, outermost first, then el's own."""
    matrix = identity()
    for group in groups:
        matrix = matrix @ get_element_matrix(group.element)
    return matrix @ get_element_matrix(el)


def transform_points(
    points: Iterable[Tuple[float, float]], matrix: np.ndarray
) -> List[Tuple[float, float]]:
    transformed = []
    for x, y in points:
        tx, ty, _, _ = matrix @ np.array([x, y, 0.0, 1.0])
        transformed.append((float(tx), float(ty)))
    return transformed


def translation(matrix: np.ndarray) -> Tuple[float, float]:
    return float(matrix[0, 3]), float(matrix[1, 3])


def scale(matrix: np.ndarray) -> Tuple[float, float]:
    return float(matrix[0, 0]), float(matrix[1, 1])
