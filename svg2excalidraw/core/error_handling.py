"""Centralized error handling framework for svg2excalidraw."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Svg2ExcalidrawError(Exception):
    """Base exception for all svg2excalidraw errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SVGParseError(Svg2ExcalidrawError):
    """Raised when SVG markup cannot be parsed."""

    pass


class ConfigurationError(Svg2ExcalidrawError):
    """Raised when configuration is invalid."""

    pass


class ConversionError(Svg2ExcalidrawError):
    """Raised when a document cannot be converted to a scene."""

    pass


class ReferenceResolutionError(ConversionError):
    """Base class for failures while resolving <use> references."""

    pass


class UnresolvedReferenceError(ReferenceResolutionError):
    """Raised when a reference element carries no href."""

    pass


class MissingReferencedElementError(ReferenceResolutionError):
    """Raised when a reference points to an id that is not in the document."""

    pass


class EmptyReferenceResultError(ReferenceResolutionError):
    """Raised when the referenced element produced no primitive."""

    pass


class CyclicReferenceError(ReferenceResolutionError):
    """Raised when a reference resolves back onto itself."""

    pass


@contextmanager
def error_context(operation: str, **context_kwargs):
    """
    Context manager for error handling with operation context.

    Args:
        operation: Description of the operation being performed
        **context_kwargs: Additional context information
    """
    try:
        yield
    except Exception as e:
        logger.error(f"Error during {operation}: {e}")

        # Add context to the error if it's one of ours
        if isinstance(e, Svg2ExcalidrawError):
            e.details.update({"operation": operation, **context_kwargs})

        raise
