"""Depth-first traversal that dispatches each node to its tag handler."""

import logging
import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from typing import Callable, Dict, Optional

from ..core.constants import SVGTags
from ..core.error_handling import EmptyReferenceResultError
from ..parsers.attributes import local_name
from .context import WalkContext
from .paths import walk_path
from .references import resolve_reference
from .shapes import (
    walk_circle,
    walk_ellipse,
    walk_polygon,
    walk_polyline,
    walk_rect,
)
from .text import walk_text

logger = logging.getLogger(__name__)

Handler = Callable[[WalkContext, ET.Element], None]


def walk(context: WalkContext, node: Optional[ET.Element]) -> None:
    """Convert node and its supported descendants into scene elements."""
    if node is None:
        return

    tag = local_name(node.tag)
    handler = HANDLERS.get(tag)
    if handler is None:
        logger.debug(f"Skipping unsupported element <{tag}>")
        return

    handler(context, node)


def walk_children(context: WalkContext, node: ET.Element) -> None:
    for child in node:
        walk(context, child)


def walk_svg(context: WalkContext, el: ET.Element) -> None:
    walk_children(context, el)


def walk_group(context: WalkContext, el: ET.Element) -> None:
    walk_children(context.with_group(el), el)


def walk_use(context: WalkContext, el: ET.Element) -> None:
    merged, ref = resolve_reference(context.document, el, context.references)

    temp_scene = context.empty_scene()
    walk(context.with_reference(ref, temp_scene), merged)

    element = temp_scene.last()
    if element is None:
        raise EmptyReferenceResultError(
            f"reference {ref} produced no element", {"reference": ref}
        )
    if len(temp_scene) > 1:
        logger.debug(
            f"Reference {ref} produced {len(temp_scene)} elements, keeping the last"
        )

    context.scene.add(element)


def walk_line(context: WalkContext, el: ET.Element) -> None:
    # <line> is not converted
    logger.debug("Skipping <line> element")


HANDLERS: Dict[str, Handler] = {
    SVGTags.SVG: walk_svg,
    SVGTags.G: walk_group,
    SVGTags.USE: walk_use,
    SVGTags.PATH: walk_path,
    SVGTags.TEXT: walk_text,
    SVGTags.CIRCLE: walk_circle,
    SVGTags.ELLIPSE: walk_ellipse,
    SVGTags.RECT: walk_rect,
    SVGTags.LINE: walk_line,
    SVGTags.POLYLINE: walk_polyline,
    SVGTags.POLYGON: walk_polygon,
}

SUPPORTED_TAGS = frozenset(HANDLERS)
