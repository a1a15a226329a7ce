"""Load SVG markup into a document with id lookup."""

import logging
import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from typing import Iterator, Optional, Union

from ..core.constants import EXPORT_MARKER, SVGTags
from ..core.error_handling import SVGParseError
from .attributes import local_name

logger = logging.getLogger(__name__)


class SVGDocument:
    """A parsed SVG tree plus the document-wide lookups the walker needs."""

    def __init__(self, root: ET.Element) -> None:
        self.root = root
        self._exported: Optional[bool] = None

    @classmethod
    def from_string(cls, svg: Union[str, bytes]) -> "SVGDocument":
        """Parse SVG markup."""
        try:
            # Comments are kept, exported documents carry their marker in one
            parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
            root = ET.fromstring(svg, parser=parser)  # nosec B314
        except ET.ParseError as e:
            raise SVGParseError(f"Invalid SVG markup: {e}") from e
        return cls(root)

    def iter(self) -> Iterator[ET.Element]:
        return self.root.iter()

    def find_by_id(self, ref: str) -> Optional[ET.Element]:
        """Find the first element whose id matches ref ("#id" or "id")."""
        element_id = ref[1:] if ref.startswith("#") else ref
        if not element_id:
            return None
        for element in self.root.iter():
            if element.get("id") == element_id:
                return element
        return None

    def stylesheet_text(self) -> str:
        """Text of the first <style> element, or an empty string."""
        for element in self.root.iter():
            if local_name(element.tag) == SVGTags.STYLE:
                return "".join(element.itertext())
        return ""

    @property
    def exported_from_excalidraw(self) -> bool:
        """True when the document content carries the editor's export marker."""
        if self._exported is None:
            content = (self.root.text or "") + "".join(
                ET.tostring(child, encoding="unicode") for child in self.root
            )
            self._exported = EXPORT_MARKER in content
        return self._exported
