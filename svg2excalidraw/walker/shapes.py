"""Geometry resolution for rect, circle, ellipse, polygon and polyline."""

import logging
import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from typing import List, Optional, Tuple

import numpy as np

from ..core.constants import StrokeSharpness
from ..core.utils import Point, dimensions_from_points
from ..elements.models import create_ex_ellipse, create_ex_line, create_ex_rect
from ..parsers.attributes import get, get_num, has, points_attr_to_points
from ..parsers.transform import scale, scale_translate, transform_points, translation
from .context import WalkContext

logger = logging.getLogger(__name__)


def relative_points(
    points: List[Point], matrix: np.ndarray
) -> Optional[Tuple[float, float, List[Point]]]:
    """Transform points and rebase them on the first one.

    Returns (x, y, points) where (x, y) is the first transformed point and
    every returned point is relative to it, or None for an empty list.
    """
    transformed = transform_points(points, matrix)
    if not transformed:
        return None

    x, y = transformed[0]
    return x, y, [(px - x, py - y) for px, py in transformed]


def _box(matrix: np.ndarray, x: float, y: float, w: float, h: float):
    result = matrix @ scale_translate(w, h, x, y)
    tx, ty = translation(result)
    width, height = scale(result)
    return tx, ty, width, height


def walk_rect(context: WalkContext, el: ET.Element) -> None:
    x, y, width, height = _box(
        context.matrix(el),
        get_num(el, "x", 0),
        get_num(el, "y", 0),
        get_num(el, "width", 0),
        get_num(el, "height", 0),
    )

    # The target schema has no corner radius, only a round/sharp switch
    is_round = has(el, "rx") or has(el, "ry")

    values = {
        **context.presentation(el),
        "id": context.new_id(),
        "x": x,
        "y": y,
        "width": width,
        "height": height,
        "stroke_sharpness": (
            StrokeSharpness.ROUND.value if is_round else StrokeSharpness.SHARP.value
        ),
        "group_ids": context.group_ids(),
    }
    context.scene.add(create_ex_rect(**values))


def _add_ellipse(
    context: WalkContext, el: ET.Element, rx: float, ry: float, cx: float, cy: float
) -> None:
    x, y, width, height = _box(
        context.matrix(el),
        get_num(el, "x", 0) + cx - rx,
        get_num(el, "y", 0) + cy - ry,
        rx * 2,
        ry * 2,
    )
    values = {
        **context.presentation(el),
        "id": context.new_id(),
        "x": x,
        "y": y,
        "width": width,
        "height": height,
        "group_ids": context.group_ids(),
    }
    context.scene.add(create_ex_ellipse(**values))


def walk_circle(context: WalkContext, el: ET.Element) -> None:
    r = get_num(el, "r", 0)
    _add_ellipse(context, el, r, r, get_num(el, "cx", 0), get_num(el, "cy", 0))


def walk_ellipse(context: WalkContext, el: ET.Element) -> None:
    _add_ellipse(
        context,
        el,
        get_num(el, "rx", 0),
        get_num(el, "ry", 0),
        get_num(el, "cx", 0),
        get_num(el, "cy", 0),
    )


def _add_point_list(context: WalkContext, el: ET.Element, closed: bool) -> None:
    rebased = relative_points(points_attr_to_points(el), context.matrix(el))
    if rebased is None:
        logger.debug(f"Skipping <{el.tag}> without points")
        return

    x, y, points = rebased
    width, height = dimensions_from_points(points)
    if closed:
        points = points + [(0.0, 0.0)]

    values = {
        **context.presentation(el),
        "id": context.new_id(),
        "points": points,
        "x": x,
        "y": y,
        "width": width,
        "height": height,
        "group_ids": context.group_ids(),
    }
    context.scene.add(create_ex_line(**values))


def walk_polygon(context: WalkContext, el: ET.Element) -> None:
    _add_point_list(context, el, closed=True)


def walk_polyline(context: WalkContext, el: ET.Element) -> None:
    # A polyline is only closed when it is filled
    should_fill = not has(el, "fill") or get(el, "fill") != "none"
    _add_point_list(context, el, closed=should_fill)
