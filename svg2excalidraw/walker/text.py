"""Text layout: one text element per run of a <text> element."""

import logging
import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from ..core.constants import Colors, SVGTags, TextDefaults
from ..elements.models import create_ex_text
from ..parsers.attributes import get, get_num, has, local_name, normalize_color
from ..parsers.stylesheet import font_size_for_class
from ..parsers.transform import scale_translate, translation
from .context import WalkContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextStyle:
    """Resolved values a run inherits from its text element."""

    font_size: float
    fill: Optional[str]
    x: float
    y: float


def resolve_font_size(context: WalkContext, el: ET.Element, default: float) -> float:
    """Font size from the element's attribute, its class rule, or default."""
    class_size = font_size_for_class(
        context.document.stylesheet_text(), el.get("class")
    )
    if class_size is not None:
        default = class_size
    return get_num(el, "font-size", default)


def _resolve_span_style(
    context: WalkContext, span: ET.Element, parent: TextStyle
) -> TextStyle:
    return TextStyle(
        font_size=resolve_font_size(context, span, parent.font_size),
        fill=get(span, "fill") if has(span, "fill") else parent.fill,
        x=get_num(span, "x", 0) if has(span, "x") else parent.x,
        y=get_num(span, "y", 0) if has(span, "y") else parent.y,
    )


def _text_color(fill: Optional[str], default: str) -> str:
    if fill is None:
        return default
    if fill == "none":
        return Colors.TRANSPARENT_STROKE
    return normalize_color(fill) or fill


def iter_runs(el: ET.Element) -> Iterator[Tuple[str, Optional[ET.Element]]]:
    """Yield (text, span) in document order; span is None for direct text.

    Text is yielded as written. Whitespace-only runs are skipped.
    """
    if el.text and el.text.strip():
        yield el.text, None
    for child in el:
        if local_name(child.tag) == SVGTags.TSPAN:
            content = "".join(child.itertext())
            if content.strip():
                yield content, child
        if child.tail and child.tail.strip():
            yield child.tail, None


def walk_text(context: WalkContext, el: ET.Element) -> None:
    text_config = context.config.text
    colors = context.config.colors

    # Text is anchored at its baseline, the target anchors it at the top.
    # Documents exported by the target editor are already top-anchored.
    adjust_height = not context.document.exported_from_excalidraw

    style = TextStyle(
        font_size=resolve_font_size(context, el, text_config["default_font_size"]),
        fill=get(el, "fill"),
        x=get_num(el, "x", 0),
        y=get_num(el, "y", 0),
    )
    matrix = context.matrix(el)
    presentation = context.presentation(el)
    baseline_shift = style.font_size or text_config["default_font_size"]

    for content, span in iter_runs(el):
        run_style = style if span is None else _resolve_span_style(context, span, style)
        x, y = translation(matrix @ scale_translate(1, 1, run_style.x, run_style.y))

        values = {
            **presentation,
            "id": context.new_id(),
            "x": x,
            "y": y - baseline_shift if adjust_height else y,
            "text": content,
            "original_text": content,
            "fill_style": TextDefaults.FILL_STYLE,
            "stroke_color": _text_color(run_style.fill, colors["default_text"]),
            "background_color": colors["transparent"],
            "width": text_config["char_width"] * len(content),
            "height": text_config["height"],
            "line_height": text_config["line_height"],
            "font_size": run_style.font_size or text_config["default_font_size"],
            "font_family": text_config["font_family"],
            "group_ids": context.group_ids(),
        }
        context.scene.add(create_ex_text(**values))
