"""svg2excalidraw library API.

Example usage:
    from svg2excalidraw.api import convert

    result = convert(svg_markup)
    if not result.has_errors:
        scene_json = result.to_json()
"""

from .core import ConversionResult, convert, convert_document

__all__ = [
    "ConversionResult",
    "convert",
    "convert_document",
]
