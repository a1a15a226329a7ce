"""Path decomposition into sub-polygons with fill-rule handling.

A path becomes one line element per sub-polygon, all sharing a fresh group
id. The target format has no compound paths, so under the nonzero rule a
sub-polygon wound against the first one is painted with the hole colour.
Under evenodd the sub-polygons keep their ordinary presentation values.
"""

import logging
import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from typing import Any, Dict, List, Optional

from ..core.constants import Colors, FillRule
from ..core.utils import Point, dimensions_from_points, get_winding_order
from ..elements.models import ExcalidrawDraw, create_ex_draw
from ..parsers.attributes import get, get_num, normalize_color, parse_float
from ..parsers.path_points import points_on_path
from .context import WalkContext
from .shapes import relative_points

logger = logging.getLogger(__name__)


def _fill_color(value: str, opacity: Optional[float]) -> str:
    if value == "none":
        return Colors.TRANSPARENT
    return normalize_color(value, opacity) or value


def _draw(
    values: Dict[str, Any], x: float, y: float, points: List[Point]
) -> ExcalidrawDraw:
    width, height = dimensions_from_points(points)
    return create_ex_draw(
        **{
            **values,
            "points": points,
            "x": x,
            "y": y,
            "width": width,
            "height": height,
        }
    )


def walk_path(context: WalkContext, el: ET.Element) -> None:
    fill_rule_value = get(el, "fill-rule", FillRule.NONZERO.value)
    try:
        fill_rule = FillRule(fill_rule_value)
    except ValueError:
        logger.debug(f"Skipping path with unsupported fill-rule {fill_rule_value!r}")
        return

    matrix = context.matrix(el)
    polygons = points_on_path(
        get(el, "d", ""), context.config.paths["curve_resolution"]
    )
    offset_x = get_num(el, "x", 0)
    offset_y = get_num(el, "y", 0)

    colors = context.config.colors
    fill_color = _fill_color(
        get(el, "fill", colors["transparent"]), parse_float(get(el, "fill-opacity"))
    )
    presentation = context.presentation(el)
    group_ids = context.group_ids() + [context.new_id()]

    reference_order = None
    elements = []
    for polygon in polygons:
        rebased = relative_points(polygon, matrix)
        if rebased is None:
            continue
        x, y, points = rebased

        values = {**presentation, "id": context.new_id(), "group_ids": group_ids}

        if fill_rule is FillRule.NONZERO:
            winding_order = get_winding_order(points)
            if reference_order is None:
                reference_order = winding_order

            # Stroke is not drawn per sub-polygon
            values["stroke_width"] = 0
            values["stroke_color"] = colors["path_stroke"]
            values["background_color"] = (
                fill_color if winding_order is reference_order else colors["hole_fill"]
            )

        elements.append(_draw(values, x + offset_x, y + offset_y, points))

    context.scene.extend(elements)
