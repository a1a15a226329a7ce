"""Resolution of <use> elements into merged copies of their templates."""

import copy
import logging
import xml.etree.ElementTree as ET  # nosec B405 - Parsing trusted SVG files only
from typing import Sequence, Tuple

from ..core.constants import USE_OVERRIDE_ATTRIBUTES, USE_SKIPPED_ATTRIBUTES
from ..core.error_handling import (
    CyclicReferenceError,
    MissingReferencedElementError,
    UnresolvedReferenceError,
)
from ..parsers.attributes import get
from ..parsers.svg_reader import SVGDocument

logger = logging.getLogger(__name__)


def reference_of(use_el: ET.Element) -> str:
    """The href of a <use> element, checking href before xlink:href."""
    ref = get(use_el, "href") or get(use_el, "xlink:href")
    if not ref:
        raise UnresolvedReferenceError(
            "unable to get id of use element", {"attributes": dict(use_el.attrib)}
        )
    return ref


def merge_use_element(template: ET.Element, use_el: ET.Element) -> ET.Element:
    """Copy of template carrying the attributes of use_el.

    Attributes set on both keep the template's value, except x, y, width,
    height and href, which always come from use_el. Attributes only on use_el
    are added. The id of use_el is never copied.
    """
    merged = copy.deepcopy(template)
    merged.tail = None
    for name, value in use_el.attrib.items():
        if name in USE_SKIPPED_ATTRIBUTES:
            continue
        if name in USE_OVERRIDE_ATTRIBUTES or name not in template.attrib:
            merged.set(name, value)
    return merged


def resolve_reference(
    document: SVGDocument, use_el: ET.Element, active: Sequence[str] = ()
) -> Tuple[ET.Element, str]:
    """Find the template of use_el and return (merged element, reference)."""
    ref = reference_of(use_el)

    if ref in active:
        raise CyclicReferenceError(
            f"reference cycle through {ref}", {"chain": [*active, ref]}
        )

    template = document.find_by_id(ref)
    if template is None:
        raise MissingReferencedElementError(
            f"unable to find def element with id: {ref}", {"reference": ref}
        )

    logger.debug(f"Resolved reference {ref} to <{template.tag}>")
    return merge_use_element(template, use_el), ref
