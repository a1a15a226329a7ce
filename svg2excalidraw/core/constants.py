"""Constants and enums for svg2excalidraw to eliminate magic strings and values."""

from enum import Enum


class FillRule(Enum):
    """SVG fill-rule values handled by the path walker."""

    NONZERO = "nonzero"
    EVENODD = "evenodd"


class WindingOrder(Enum):
    """Rotational direction of a closed polygon."""

    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


class StrokeSharpness(Enum):
    """Corner styles supported by the target schema."""

    SHARP = "sharp"
    ROUND = "round"


class ElementType:
    """Output primitive type names."""

    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    LINE = "line"
    TEXT = "text"


class SVGNamespaces:
    """XML namespaces found in SVG documents."""

    SVG = "http://www.w3.org/2000/svg"
    XLINK = "http://www.w3.org/1999/xlink"


class SVGTags:
    """SVG tag names the walker knows about."""

    SVG = "svg"
    G = "g"
    PATH = "path"
    TEXT = "text"
    TSPAN = "tspan"
    USE = "use"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    RECT = "rect"
    LINE = "line"
    POLYLINE = "polyline"
    POLYGON = "polygon"
    STYLE = "style"


class Colors:
    """Default colours shared by the resolvers."""

    DEFAULT_STROKE = "#000000"
    DEFAULT_BACKGROUND = "#000000"
    DEFAULT_TEXT = "#1E1E1E"
    HOLE_FILL = "#FFFFFF"
    TRANSPARENT = "transparent"
    TRANSPARENT_STROKE = "#00000000"
    VIEW_BACKGROUND = "#ffffff"


class TextDefaults:
    """Text layout constants."""

    FONT_SIZE = 10.0
    FONT_FAMILY = 2
    CHAR_WIDTH = 8
    HEIGHT = 15
    LINE_HEIGHT = 1.5
    FILL_STYLE = "hachure"


class SceneDefaults:
    """Top-level scene document values."""

    TYPE = "excalidraw"
    VERSION = 2
    SOURCE = "https://excalidraw.com"


# Attributes of a <use> element that always override the referenced element.
USE_OVERRIDE_ATTRIBUTES = frozenset(
    ["x", "y", "width", "height", "href", f"{{{SVGNamespaces.XLINK}}}href"]
)

# Attributes of a <use> element that are never copied onto the referenced element.
USE_SKIPPED_ATTRIBUTES = frozenset(["id"])

# Marker text found in documents previously exported by the target editor.
EXPORT_MARKER = "excalidraw"

# Default flattening step for curved path segments, in user units.
DEFAULT_CURVE_RESOLUTION = 1.0
