"""Attribute readers that map SVG presentation attributes to element fields."""

import logging
import re
import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from typing import Any, Dict, List, Mapping, Optional, Tuple

import tinycss2
from PIL import ImageColor

from ..core.constants import Colors, SVGNamespaces

logger = logging.getLogger(__name__)

_NUMBER_PREFIX = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def local_name(tag: Any) -> str:
    """Strip the namespace from an ElementTree tag or attribute name."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def qualified_name(name: str) -> str:
    """Map a prefixed attribute name (xlink:href) to ElementTree's Clark form."""
    if name.startswith("xlink:"):
        return f"{{{SVGNamespaces.XLINK}}}{name[len('xlink:'):]}"
    return name


def has(el: ET.Element, name: str) -> bool:
    return qualified_name(name) in el.attrib


def get(el: ET.Element, name: str, default: Optional[str] = None) -> Optional[str]:
    return el.get(qualified_name(name), default)


def parse_float(value: Optional[str]) -> Optional[float]:
    """Parse the leading number of a string ("12px" -> 12.0), like parseFloat."""
    if value is None:
        return None
    match = _NUMBER_PREFIX.match(value)
    if not match:
        return None
    return float(match.group(1))


def get_num(el: ET.Element, name: str, default: float = 0.0) -> float:
    """Read a numeric attribute, falling back to default when absent or invalid."""
    value = parse_float(get(el, name))
    return default if value is None else value


def parse_numbers(value: str) -> List[float]:
    return [float(n) for n in _NUMBER.findall(value or "")]


def points_attr_to_points(el: ET.Element) -> List[Tuple[float, float]]:
    """Read the points attribute of a polygon or polyline."""
    numbers = parse_numbers(get(el, "points", ""))
    return [(numbers[i], numbers[i + 1]) for i in range(0, len(numbers) - 1, 2)]


def normalize_color(value: str, opacity: Optional[float] = None) -> Optional[str]:
    """Convert any CSS colour to #rrggbb, or #rrggbbaa when opacity is given.

    Returns None for values that are not plain colours (gradients, currentColor).
    """
    value = value.strip()
    if value.lower() == Colors.TRANSPARENT:
        return Colors.TRANSPARENT
    try:
        rgb = ImageColor.getrgb(value)
    except ValueError:
        logger.debug(f"Ignoring unsupported colour value: {value!r}")
        return None

    red, green, blue = rgb[:3]
    alpha = rgb[3] if len(rgb) == 4 else None
    if opacity is not None:
        alpha = round(max(0.0, min(1.0, opacity)) * (255 if alpha is None else alpha))

    color = f"#{red:02x}{green:02x}{blue:02x}"
    if alpha is not None and alpha != 255:
        color += f"{alpha:02x}"
    return color


def _opacity(declarations: Mapping[str, str], name: str) -> Optional[float]:
    return parse_float(declarations.get(name))


def _fields_from_declarations(declarations: Mapping[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}

    stroke = declarations.get("stroke")
    if stroke is not None:
        if stroke.strip() == "none":
            values["stroke_color"] = Colors.TRANSPARENT_STROKE
        else:
            color = normalize_color(stroke, _opacity(declarations, "stroke-opacity"))
            if color is not None:
                values["stroke_color"] = color

    fill = declarations.get("fill")
    if fill is not None:
        if fill.strip() == "none":
            values["background_color"] = Colors.TRANSPARENT
        else:
            color = normalize_color(fill, _opacity(declarations, "fill-opacity"))
            if color is not None:
                values["background_color"] = color

    stroke_width = parse_float(declarations.get("stroke-width"))
    if stroke_width is not None:
        values["stroke_width"] = stroke_width

    opacity = parse_float(declarations.get("opacity"))
    if opacity is not None:
        values["opacity"] = int(round(max(0.0, min(1.0, opacity)) * 100))

    dasharray = declarations.get("stroke-dasharray")
    if dasharray is not None:
        values["stroke_style"] = "solid" if dasharray.strip() == "none" else "dashed"

    return values


def presentation_attributes_to_fields(el: ET.Element) -> Dict[str, Any]:
    """Map presentation attributes (stroke, fill, opacity...) to element fields."""
    declarations = {local_name(name): value for name, value in el.attrib.items()}
    return _fields_from_declarations(declarations)


def style_declarations(el: ET.Element) -> Dict[str, str]:
    """Declarations of the inline style attribute."""
    style = el.get("style")
    if not style:
        return {}

    declarations = {}
    for item in tinycss2.parse_declaration_list(
        style, skip_comments=True, skip_whitespace=True
    ):
        if item.type != "declaration":
            continue
        declarations[item.lower_name] = tinycss2.serialize(item.value).strip()
    return declarations


def filter_attributes_to_fields(el: ET.Element) -> Dict[str, Any]:
    """Map the inline style declarations to element fields.

    These are applied after presentation attributes, so style wins.
    """
    return _fields_from_declarations(style_declarations(el))
