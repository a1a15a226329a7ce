"""Shared fixtures for svg2excalidraw tests."""

import itertools

import pytest

from svg2excalidraw.core.config import Config
from svg2excalidraw.elements.scene import ExcalidrawScene
from svg2excalidraw.parsers.svg_reader import SVGDocument
from svg2excalidraw.walker.context import WalkContext
from svg2excalidraw.walker.driver import walk

SVG_HEADER = (
    '<svg xmlns="http://www.w3.org/2000/svg" '
    'xmlns:xlink="http://www.w3.org/1999/xlink" width="200" height="200">'
)


def wrap_svg(body: str) -> str:
    """Wrap body markup in an <svg> root with the usual namespaces."""
    return f"{SVG_HEADER}{body}</svg>"


def counter_ids():
    """Deterministic id factory: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


def walk_markup(body: str, config: Config = None):
    """Convert body markup and return the scene elements."""
    document = SVGDocument.from_string(wrap_svg(body))
    scene = ExcalidrawScene()
    context = WalkContext(
        document=document,
        scene=scene,
        config=config or Config(),
        id_factory=counter_ids(),
    )
    walk(context, document.root)
    return scene.elements


@pytest.fixture
def convert_body():
    """Fixture returning the walk_markup helper."""
    return walk_markup


@pytest.fixture
def walk_context():
    """A walk context over an empty document with deterministic ids."""
    document = SVGDocument.from_string(wrap_svg(""))
    return WalkContext(
        document=document,
        scene=ExcalidrawScene(),
        config=Config(),
        id_factory=counter_ids(),
    )
