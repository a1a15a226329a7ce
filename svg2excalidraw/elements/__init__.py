"""Output scene model."""

from .group import Group, get_group_attrs, get_group_ids
from .models import (
    ExcalidrawDraw,
    ExcalidrawElement,
    ExcalidrawEllipse,
    ExcalidrawLine,
    ExcalidrawRectangle,
    ExcalidrawText,
    create_ex_draw,
    create_ex_ellipse,
    create_ex_line,
    create_ex_rect,
    create_ex_text,
)
from .scene import ExcalidrawScene

__all__ = [
    "ExcalidrawElement",
    "ExcalidrawRectangle",
    "ExcalidrawEllipse",
    "ExcalidrawLine",
    "ExcalidrawDraw",
    "ExcalidrawText",
    "create_ex_rect",
    "create_ex_ellipse",
    "create_ex_line",
    "create_ex_draw",
    "create_ex_text",
    "ExcalidrawScene",
    "Group",
    "get_group_attrs",
    "get_group_ids",
]
