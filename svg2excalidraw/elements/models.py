"""Output primitives of the target whiteboard scene format."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from ..core.constants import Colors, ElementType, StrokeSharpness, TextDefaults
from ..core.utils import Point, random_id, random_seed


def _camel_case(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


@dataclass
class ExcalidrawElement:
    """Fields shared by every scene element.

    Field names are snake_case here; to_dict() emits the camelCase keys the
    target JSON format uses.
    """

    type: str
    id: str = field(default_factory=random_id)
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    angle: float = 0.0
    stroke_color: str = Colors.DEFAULT_STROKE
    background_color: str = Colors.DEFAULT_BACKGROUND
    fill_style: str = "solid"
    stroke_width: float = 1.0
    stroke_style: str = "solid"
    roughness: int = 0
    opacity: int = 100
    seed: int = field(default_factory=random_seed)
    version: int = 0
    version_nonce: int = 0
    is_deleted: bool = False
    group_ids: List[str] = field(default_factory=list)
    bound_element_ids: Optional[List[str]] = None
    stroke_sharpness: str = StrokeSharpness.SHARP.value

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the target's JSON shape."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                value = [list(v) if isinstance(v, tuple) else v for v in value]
            result[_camel_case(f.name)] = value
        return result


@dataclass
class ExcalidrawRectangle(ExcalidrawElement):
    type: str = ElementType.RECTANGLE


@dataclass
class ExcalidrawEllipse(ExcalidrawElement):
    type: str = ElementType.ELLIPSE


@dataclass
class ExcalidrawLine(ExcalidrawElement):
    """Polyline; points are relative to (x, y) and start at (0, 0)."""

    type: str = ElementType.LINE
    points: List[Point] = field(default_factory=list)
    last_committed_point: Optional[Point] = None
    start_binding: Optional[Dict[str, Any]] = None
    end_binding: Optional[Dict[str, Any]] = None
    start_arrowhead: Optional[str] = None
    end_arrowhead: Optional[str] = None


@dataclass
class ExcalidrawDraw(ExcalidrawLine):
    """One closed sub-polygon of a free-form path."""


@dataclass
class ExcalidrawText(ExcalidrawElement):
    type: str = ElementType.TEXT
    text: str = ""
    original_text: str = ""
    font_size: float = TextDefaults.FONT_SIZE
    font_family: int = TextDefaults.FONT_FAMILY
    text_align: str = "left"
    vertical_align: str = "top"
    baseline: float = 0.0
    line_height: float = TextDefaults.LINE_HEIGHT


def create_ex_rect(**values: Any) -> ExcalidrawRectangle:
    return ExcalidrawRectangle(**values)


def create_ex_ellipse(**values: Any) -> ExcalidrawEllipse:
    return ExcalidrawEllipse(**values)


def create_ex_line(**values: Any) -> ExcalidrawLine:
    return ExcalidrawLine(**values)


def create_ex_draw(**values: Any) -> ExcalidrawDraw:
    return ExcalidrawDraw(**values)


def create_ex_text(**values: Any) -> ExcalidrawText:
    return ExcalidrawText(**values)
