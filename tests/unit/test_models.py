"""Tests for output primitives and the scene."""

import json

from svg2excalidraw.elements.models import (
    create_ex_draw,
    create_ex_ellipse,
    create_ex_line,
    create_ex_rect,
    create_ex_text,
)
from svg2excalidraw.elements.scene import ExcalidrawScene


class TestPrimitives:
    """Test default-valued primitive constructors."""

    def test_types(self):
        """Test the type of each variant."""
        assert create_ex_rect().type == "rectangle"
        assert create_ex_ellipse().type == "ellipse"
        assert create_ex_line().type == "line"
        assert create_ex_draw().type == "line"
        assert create_ex_text().type == "text"

    def test_defaults(self):
        """Test base field defaults."""
        rect = create_ex_rect()
        assert rect.stroke_color == "#000000"
        assert rect.stroke_width == 1.0
        assert rect.opacity == 100
        assert rect.group_ids == []
        assert rect.stroke_sharpness == "sharp"
        assert rect.id

    def test_group_ids_not_shared(self):
        """Test that mutable defaults are per instance."""
        first = create_ex_line()
        first.group_ids.append("g")
        first.points.append((1, 1))
        second = create_ex_line()
        assert second.group_ids == []
        assert second.points == []

    def test_to_dict_uses_camel_case(self):
        """Test serialized key names."""
        data = create_ex_line(
            points=[(0, 0), (1, 2)], group_ids=["a"], background_color="#ff0000"
        ).to_dict()
        assert data["backgroundColor"] == "#ff0000"
        assert data["groupIds"] == ["a"]
        assert data["points"] == [[0, 0], [1, 2]]
        assert data["strokeSharpness"] == "sharp"
        assert "lastCommittedPoint" in data
        assert "background_color" not in data

    def test_text_fields(self):
        """Test text specific serialized keys."""
        data = create_ex_text(text="hi", font_size=12).to_dict()
        assert data["text"] == "hi"
        assert data["fontSize"] == 12
        assert data["fontFamily"] == 2
        assert data["lineHeight"] == 1.5


class TestScene:
    """Test the output scene."""

    def test_append_only_order(self):
        """Test that elements keep insertion order."""
        scene = ExcalidrawScene()
        rect = create_ex_rect()
        ellipse = create_ex_ellipse()
        scene.add(rect)
        scene.extend([ellipse])

        assert scene.elements == [rect, ellipse]
        assert scene.last() is ellipse
        assert len(scene) == 2

    def test_elements_is_a_copy(self):
        """Test that the elements property cannot mutate the scene."""
        scene = ExcalidrawScene()
        scene.elements.append(create_ex_rect())
        assert len(scene) == 0
        assert scene.last() is None

    def test_to_dict(self):
        """Test the scene document."""
        scene = ExcalidrawScene(source="tests")
        scene.add(create_ex_rect(x=1))
        data = scene.to_dict()

        assert data["type"] == "excalidraw"
        assert data["version"] == 2
        assert data["source"] == "tests"
        assert data["appState"] == {
            "gridSize": None,
            "viewBackgroundColor": "#ffffff",
        }
        assert data["files"] == {}
        assert data["elements"][0]["x"] == 1

    def test_to_json(self):
        """Test that the scene serializes to JSON."""
        scene = ExcalidrawScene()
        scene.add(create_ex_line(points=[(0, 0), (1, 1)]))
        assert json.loads(scene.to_json())["elements"][0]["points"] == [[0, 0], [1, 1]]
