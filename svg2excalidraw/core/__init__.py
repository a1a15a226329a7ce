"""Ambient services: configuration, constants, errors and logging."""

from .config import Config
from .error_handling import (
    ConfigurationError,
    ConversionError,
    CyclicReferenceError,
    EmptyReferenceResultError,
    MissingReferencedElementError,
    ReferenceResolutionError,
    SVGParseError,
    Svg2ExcalidrawError,
    UnresolvedReferenceError,
)

__all__ = [
    "Config",
    "Svg2ExcalidrawError",
    "SVGParseError",
    "ConfigurationError",
    "ConversionError",
    "ReferenceResolutionError",
    "UnresolvedReferenceError",
    "MissingReferencedElementError",
    "EmptyReferenceResultError",
    "CyclicReferenceError",
]
