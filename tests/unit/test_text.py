"""Tests for text run layout."""

from svg2excalidraw.core.config import Config
from svg2excalidraw.elements.models import ExcalidrawText


class TestTextDefaults:
    """Test text elements without styling."""

    def test_defaults(self, convert_body):
        """Test default size, baseline shift and colour."""
        (text,) = convert_body('<text x="5" y="20">Hello</text>')
        assert isinstance(text, ExcalidrawText)
        assert text.text == "Hello"
        assert text.original_text == "Hello"
        assert (text.x, text.y) == (5, 10)
        assert text.font_size == 10
        assert text.width == 40
        assert text.height == 15
        assert text.line_height == 1.5
        assert text.font_family == 2
        assert text.fill_style == "hachure"
        assert text.stroke_color == "#1E1E1E"
        assert text.background_color == "transparent"

    def test_content_kept_as_written(self, convert_body):
        """Test that whitespace inside a run is not altered."""
        (text,) = convert_body('<text y="20">  Hello   world </text>')
        assert text.text == "  Hello   world "
        assert text.original_text == "  Hello   world "
        assert text.width == 128

    def test_preserved_space(self, convert_body):
        """Test a run declared with xml:space="preserve"."""
        (text,) = convert_body(
            '<text x="0" y="20" xml:space="preserve">a   b</text>'
        )
        assert text.text == "a   b"
        assert text.width == 40

    def test_whitespace_only_is_skipped(self, convert_body):
        """Test that blank text produces nothing."""
        assert convert_body('<text y="20">   </text>') == []

    def test_fill_colour(self, convert_body):
        """Test that fill becomes the text colour."""
        (text,) = convert_body('<text y="20" fill="red">A</text>')
        assert text.stroke_color == "#ff0000"

    def test_fill_none(self, convert_body):
        """Test that fill="none" gives an invisible stroke."""
        (text,) = convert_body('<text y="20" fill="none">A</text>')
        assert text.stroke_color == "#00000000"

    def test_group_transform(self, convert_body):
        """Test that the composed matrix moves the anchor."""
        (text,) = convert_body(
            '<g transform="translate(10, 10)"><text x="0" y="20">A</text></g>'
        )
        assert (text.x, text.y) == (10, 20)
        assert len(text.group_ids) == 1

    def test_configured_defaults(self, convert_body):
        """Test that text layout values come from the configuration."""
        config = Config(overrides={"text": {"default_font_size": 20, "char_width": 10}})
        (text,) = convert_body('<text y="50">abc</text>', config=config)
        assert text.font_size == 20
        assert text.y == 30
        assert text.width == 30


class TestFontSize:
    """Test font size resolution."""

    def test_attribute(self, convert_body):
        """Test font-size attribute and its baseline shift."""
        (text,) = convert_body('<text y="20" font-size="16">A</text>')
        assert text.font_size == 16
        assert text.y == 4

    def test_attribute_with_unit(self, convert_body):
        """Test that a unit suffix is ignored."""
        (text,) = convert_body('<text y="20" font-size="12px">A</text>')
        assert text.font_size == 12

    def test_class_rule(self, convert_body):
        """Test font size from a stylesheet class rule."""
        (text,) = convert_body(
            "<style>.big { font-size: 24px; }</style>"
            '<text class="big" y="30">A</text>'
        )
        assert text.font_size == 24
        assert text.y == 6

    def test_qualified_class_rule(self, convert_body):
        """Test a text.class selector."""
        (text,) = convert_body(
            "<style>text.big { font-size: 18px; }</style>"
            '<text class="big" y="30">A</text>'
        )
        assert text.font_size == 18

    def test_attribute_beats_class(self, convert_body):
        """Test that the attribute has priority over the class rule."""
        (text,) = convert_body(
            "<style>.big { font-size: 24px; }</style>"
            '<text class="big" font-size="12" y="30">A</text>'
        )
        assert text.font_size == 12

    def test_unknown_class(self, convert_body):
        """Test that an unmatched class falls back to the default."""
        (text,) = convert_body(
            "<style>.big { font-size: 24px; }</style>"
            '<text class="small" y="30">A</text>'
        )
        assert text.font_size == 10


class TestExportedDocuments:
    """Test documents carrying the editor's export marker."""

    def test_marker_disables_baseline_shift(self, convert_body):
        """Test that y is kept as-is for exported documents."""
        (text,) = convert_body(
            "<!-- svg-source:excalidraw -->" '<text x="5" y="20">Hello</text>'
        )
        assert (text.x, text.y) == (5, 20)

    def test_marker_in_metadata(self, convert_body):
        """Test that the marker is found anywhere in the content."""
        (text,) = convert_body(
            "<metadata>excalidraw scene</metadata>" '<text y="20">A</text>'
        )
        assert text.y == 20


class TestSpans:
    """Test tspan runs."""

    def test_runs_in_document_order(self, convert_body):
        """Test direct text, tspan and tail runs."""
        first, second, third = convert_body(
            '<text x="10" y="20" fill="red">A'
            '<tspan x="30" font-size="20">B</tspan> C</text>'
        )
        assert [t.text for t in (first, second, third)] == ["A", "B", " C"]

        assert (first.x, first.y) == (10, 10)
        assert first.font_size == 10

        # Span inherits fill and uses the parent's size for the shift
        assert (second.x, second.y) == (30, 10)
        assert second.font_size == 20
        assert second.stroke_color == "#ff0000"

        assert (third.x, third.y) == (10, 10)

    def test_span_inherits_position(self, convert_body):
        """Test that a span without x and y uses the parent's."""
        (span,) = convert_body('<text x="7" y="20"><tspan>B</tspan></text>')
        assert (span.x, span.y) == (7, 10)

    def test_span_own_fill(self, convert_body):
        """Test that a span's fill overrides the parent's."""
        (span,) = convert_body(
            '<text y="20" fill="red"><tspan fill="blue">B</tspan></text>'
        )
        assert span.stroke_color == "#0000ff"

    def test_span_class_rule(self, convert_body):
        """Test a class rule on the span itself."""
        (span,) = convert_body(
            "<style>.big tspan { font-size: 30px; }</style>"
            '<text y="40"><tspan class="big">B</tspan></text>'
        )
        assert span.font_size == 30
        assert span.y == 30

    def test_runs_share_groups(self, convert_body):
        """Test that all runs carry the enclosing group ids."""
        first, second = convert_body(
            '<g><text y="20">A<tspan>B</tspan></text></g>'
        )
        assert first.group_ids == second.group_ids
        assert len(first.group_ids) == 1
