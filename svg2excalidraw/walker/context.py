"""Immutable walk context passed down the tree."""

import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Tuple

import numpy as np

from ..core.config import Config
from ..core.utils import random_id
from ..elements.group import Group, get_group_attrs, get_group_ids
from ..elements.scene import ExcalidrawScene
from ..parsers.attributes import (
    filter_attributes_to_fields,
    presentation_attributes_to_fields,
)
from ..parsers.svg_reader import SVGDocument
from ..parsers.transform import get_transform_matrix


@dataclass(frozen=True)
class WalkContext:
    """Snapshot of everything a handler needs for one node.

    groups only ever grows by copy, so a branch never sees the groups of its
    siblings. scene is the accumulator handlers append to.
    """

    document: SVGDocument
    scene: ExcalidrawScene
    config: Config
    groups: Tuple[Group, ...] = ()
    references: Tuple[str, ...] = ()
    id_factory: Callable[[], str] = random_id

    def new_id(self) -> str:
        return self.id_factory()

    def with_group(self, element: ET.Element) -> "WalkContext":
        group = Group.from_element(element, self.id_factory)
        return replace(self, groups=self.groups + (group,))

    def with_reference(self, ref_id: str, scene: ExcalidrawScene) -> "WalkContext":
        return replace(self, references=self.references + (ref_id,), scene=scene)

    def group_ids(self) -> List[str]:
        return get_group_ids(self.groups)

    def matrix(self, el: ET.Element) -> np.ndarray:
        return get_transform_matrix(el, self.groups)

    def presentation(self, el: ET.Element) -> Dict[str, Any]:
        """Inherited group fields, then el's attributes, then el's inline style."""
        return {
            **get_group_attrs(self.groups),
            **presentation_attributes_to_fields(el),
            **filter_attributes_to_fields(el),
        }

    def empty_scene(self) -> ExcalidrawScene:
        return ExcalidrawScene(
            source=self.scene.source,
            view_background_color=self.scene.view_background_color,
        )
