"""The output scene: an ordered, append-only list of primitives."""

import json
from typing import Any, Dict, Iterable, List, Optional

from ..core.constants import Colors, SceneDefaults
from .models import ExcalidrawElement


class ExcalidrawScene:
    """Ordered collection of converted elements."""

    def __init__(
        self,
        source: str = SceneDefaults.SOURCE,
        view_background_color: str = Colors.VIEW_BACKGROUND,
    ) -> None:
        self.source = source
        self.view_background_color = view_background_color
        self._elements: List[ExcalidrawElement] = []

    @property
    def elements(self) -> List[ExcalidrawElement]:
        """A copy of the elements in insertion order."""
        return list(self._elements)

    def add(self, element: ExcalidrawElement) -> None:
        self._elements.append(element)

    def extend(self, elements: Iterable[ExcalidrawElement]) -> None:
        self._elements.extend(elements)

    def last(self) -> Optional[ExcalidrawElement]:
        """The most recently added element, if any."""
        return self._elements[-1] if self._elements else None

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the target's scene document."""
        return {
            "type": SceneDefaults.TYPE,
            "version": SceneDefaults.VERSION,
            "source": self.source,
            "elements": [element.to_dict() for element in self._elements],
            "appState": {
                "gridSize": None,
                "viewBackgroundColor": self.view_background_color,
            },
            "files": {},
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
