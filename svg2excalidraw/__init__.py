"""svg2excalidraw - Convert SVG documents into Excalidraw scenes."""

__version__ = "0.1.0"

from svg2excalidraw.api.core import ConversionResult, convert, convert_document
from svg2excalidraw.core.config import Config
from svg2excalidraw.core.error_handling import (
    CyclicReferenceError,
    EmptyReferenceResultError,
    MissingReferencedElementError,
    SVGParseError,
    Svg2ExcalidrawError,
    UnresolvedReferenceError,
)
from svg2excalidraw.elements.scene import ExcalidrawScene
from svg2excalidraw.parsers.svg_reader import SVGDocument

__all__ = [
    "convert",
    "convert_document",
    "ConversionResult",
    "Config",
    "ExcalidrawScene",
    "SVGDocument",
    "Svg2ExcalidrawError",
    "SVGParseError",
    "UnresolvedReferenceError",
    "MissingReferencedElementError",
    "EmptyReferenceResultError",
    "CyclicReferenceError",
]
