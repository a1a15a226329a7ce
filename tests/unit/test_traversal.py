"""Tests for tree traversal and group handling."""

import xml.etree.ElementTree as ET

import pytest

from svg2excalidraw.core.config import Config
from svg2excalidraw.elements.scene import ExcalidrawScene
from svg2excalidraw.parsers.svg_reader import SVGDocument
from svg2excalidraw.walker.context import WalkContext
from svg2excalidraw.walker.driver import HANDLERS, SUPPORTED_TAGS, walk


class TestDispatch:
    """Test handler dispatch."""

    def test_supported_tags(self):
        assert SUPPORTED_TAGS == {
            "svg",
            "g",
            "use",
            "path",
            "text",
            "circle",
            "ellipse",
            "rect",
            "line",
            "polyline",
            "polygon",
        }
        assert set(HANDLERS) == SUPPORTED_TAGS

    def test_none_is_ignored(self, walk_context):
        walk(walk_context, None)
        assert len(walk_context.scene) == 0

    @pytest.mark.parametrize(
        "markup",
        [
            '<line x1="0" y1="0" x2="10" y2="10"/>',
            "<title>drawing</title>",
            '<image href="a.png" width="10" height="10"/>',
            "<!-- comment -->",
        ],
    )
    def test_no_op_elements(self, convert_body, markup):
        """Test that these elements produce nothing."""
        assert convert_body(markup) == []

    def test_unsupported_subtree_is_skipped(self, convert_body):
        """Test that children of unsupported elements are not visited."""
        assert convert_body('<defs><rect width="1" height="1"/></defs>') == []

    def test_document_order(self, convert_body):
        elements = convert_body(
            '<rect width="1" height="1"/><circle r="1"/>'
            '<polygon points="0,0 1,0 1,1"/>'
        )
        assert [e.type for e in elements] == ["rectangle", "ellipse", "line"]

    def test_unprefixed_markup(self):
        """Test markup without the SVG namespace."""
        document = SVGDocument(ET.fromstring('<svg><rect width="2" height="3"/></svg>'))
        scene = ExcalidrawScene()
        walk(WalkContext(document=document, scene=scene, config=Config()), document.root)
        (rect,) = scene.elements
        assert (rect.width, rect.height) == (2, 3)


class TestGroups:
    """Test group id propagation."""

    def test_members_share_group_id(self, convert_body):
        first, second = convert_body(
            '<g><rect width="1" height="1"/><circle r="1"/></g>'
        )
        assert first.group_ids == second.group_ids
        assert len(first.group_ids) == 1

    def test_siblings_get_distinct_ids(self, convert_body):
        """Test that sibling groups do not leak into each other."""
        first, second = convert_body(
            '<g><rect width="1" height="1"/></g><g><rect width="1" height="1"/></g>'
        )
        assert first.group_ids != second.group_ids
        assert len(second.group_ids) == 1

    def test_nested_groups_outermost_first(self, convert_body):
        outer, inner, after = convert_body(
            "<g>"
            '<rect width="1" height="1"/>'
            '<g><rect width="1" height="1"/></g>'
            '<rect width="1" height="1"/>'
            "</g>"
        )
        assert len(inner.group_ids) == 2
        assert inner.group_ids[0] == outer.group_ids[0]
        assert after.group_ids == outer.group_ids

    def test_nested_transforms_compose(self, convert_body):
        (rect,) = convert_body(
            '<g transform="translate(10, 0)"><g transform="scale(2)">'
            '<rect x="1" y="1" width="2" height="2"/></g></g>'
        )
        assert (rect.x, rect.y, rect.width, rect.height) == (12, 2, 4, 4)

    def test_innermost_group_style_wins(self, convert_body):
        (rect,) = convert_body(
            '<g fill="red" stroke="blue"><g fill="green">'
            '<rect width="1" height="1"/></g></g>'
        )
        assert rect.background_color == "#008000"
        assert rect.stroke_color == "#0000ff"

    def test_element_ids_are_unique(self, convert_body):
        elements = convert_body(
            '<g><rect width="1" height="1"/><rect width="1" height="1"/></g>'
            '<path d="M0 0 L1 0 L1 1 Z M5 5 L6 5 L6 6 Z"/>'
        )
        ids = [e.id for e in elements]
        assert len(set(ids)) == len(ids)
