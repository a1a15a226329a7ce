"""Group records for enclosing <g> elements."""

import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Sequence

from ..core.utils import random_id
from ..parsers.attributes import presentation_attributes_to_fields


@dataclass(frozen=True)
class Group:
    """An enclosing group element and the identifier its members share."""

    element: ET.Element
    id: str = field(default_factory=random_id)

    @classmethod
    def from_element(
        cls, element: ET.Element, id_factory: Callable[[], str] = random_id
    ) -> "Group":
        return cls(element=element, id=id_factory())


def get_group_attrs(groups: Sequence[Group]) -> Dict[str, Any]:
    """Presentation fields inherited from enclosing groups, innermost wins."""
    values: Dict[str, Any] = {}
    for group in groups:
        values.update(presentation_attributes_to_fields(group.element))
    return values


def get_group_ids(groups: Sequence[Group]) -> list:
    return [group.id for group in groups]
