"""Core svg2excalidraw library API for programmatic access."""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from ..core.config import Config
from ..core.error_handling import SVGParseError, error_context
from ..core.logging_config import LogContext
from ..core.utils import random_id
from ..elements.scene import ExcalidrawScene
from ..parsers.svg_reader import SVGDocument
from ..walker.context import WalkContext
from ..walker.driver import walk

logger = logging.getLogger(__name__)


class ConversionResult:
    """Result of converting one SVG document."""

    def __init__(self, scene: ExcalidrawScene, errors: Optional[List[str]] = None):
        """Initialize conversion result.

        Args:
            scene: Converted scene (empty when the markup could not be parsed)
            errors: List of error messages
        """
        self.scene = scene
        self.errors = errors or []

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def content(self) -> Dict[str, Any]:
        """The scene as a JSON-ready dict."""
        return self.scene.to_dict()

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.scene.to_json(indent=indent)

    def __bool__(self) -> bool:
        return not self.has_errors

    def __str__(self) -> str:
        status = "FAIL" if self.has_errors else "PASS"
        return (
            f"ConversionResult({status}, {len(self.scene)} elements, "
            f"{len(self.errors)} errors)"
        )


def _new_scene(config: Config) -> ExcalidrawScene:
    return ExcalidrawScene(
        source=config.scene["source"],
        view_background_color=config.scene["view_background_color"],
    )


def convert_document(
    document: SVGDocument,
    config: Optional[Config] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> ExcalidrawScene:
    """Walk a parsed document into a new scene.

    Reference errors abort the whole conversion.
    """
    config = config or Config()
    scene = _new_scene(config)
    context = WalkContext(
        document=document,
        scene=scene,
        config=config,
        id_factory=id_factory or random_id,
    )

    with error_context("walk", root=document.root.tag):
        walk(context, document.root)

    logger.debug(f"Converted document into {len(scene)} elements")
    return scene


def convert(
    svg: Union[str, bytes],
    config: Optional[Config] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> ConversionResult:
    """Convert SVG markup into a scene.

    Markup that is not well-formed XML is reported in the result's errors.
    """
    config = config or Config()

    with LogContext("convert"):
        try:
            document = SVGDocument.from_string(svg)
        except SVGParseError as e:
            logger.warning(e.message)
            return ConversionResult(_new_scene(config), errors=[e.message])

        scene = convert_document(document, config=config, id_factory=id_factory)

    return ConversionResult(scene)
