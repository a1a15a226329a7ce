"""Tree traversal and geometry resolution."""

from .context import WalkContext
from .driver import HANDLERS, SUPPORTED_TAGS, walk
from .references import merge_use_element, resolve_reference

__all__ = [
    "WalkContext",
    "walk",
    "HANDLERS",
    "SUPPORTED_TAGS",
    "merge_use_element",
    "resolve_reference",
]
