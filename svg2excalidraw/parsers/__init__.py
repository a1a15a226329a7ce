"""Readers for SVG documents, attributes, transforms and path data."""

from .attributes import (
    filter_attributes_to_fields,
    get,
    get_num,
    has,
    points_attr_to_points,
    presentation_attributes_to_fields,
)
from .path_points import points_on_path
from .svg_reader import SVGDocument
from .transform import get_transform_matrix, transform_points

__all__ = [
    "SVGDocument",
    "presentation_attributes_to_fields",
    "filter_attributes_to_fields",
    "get",
    "get_num",
    "has",
    "points_attr_to_points",
    "get_transform_matrix",
    "transform_points",
    "points_on_path",
]
