"""Class-based font size lookup in an embedded stylesheet."""

import functools
from typing import Dict, Optional, Tuple

import tinycss2

from .attributes import parse_float


@functools.lru_cache(maxsize=32)
def parse_rules(stylesheet: str) -> Tuple[Tuple[str, Dict[str, str]], ...]:
    """Parse a stylesheet into (selector, declarations) pairs in source order."""
    rules = []
    for rule in tinycss2.parse_stylesheet(
        stylesheet, skip_comments=True, skip_whitespace=True
    ):
        if rule.type != "qualified-rule":
            continue
        selector = " ".join(tinycss2.serialize(rule.prelude).split())
        declarations = {}
        for item in tinycss2.parse_declaration_list(
            rule.content, skip_comments=True, skip_whitespace=True
        ):
            if item.type == "declaration":
                declarations[item.lower_name] = tinycss2.serialize(item.value).strip()
        rules.append((selector, declarations))
    return tuple(rules)


def class_selectors(class_name: str) -> Tuple[str, ...]:
    """Selector spellings that style a text element with class_name."""
    return (
        f".{class_name}",
        f".{class_name} tspan",
        f"text.{class_name}",
        f"text.{class_name} tspan",
    )


def font_size_for_class(stylesheet: str, class_name: Optional[str]) -> Optional[float]:
    """Font size of the first rule matching class_name that declares one."""
    if not stylesheet or not class_name:
        return None

    selectors = class_selectors(class_name)
    for selector, declarations in parse_rules(stylesheet):
        if selector not in selectors:
            continue
        size = parse_float(declarations.get("font-size"))
        if size is not None:
            return size
    return None
