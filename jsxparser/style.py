"""
Inline style-string parsing.

    parse_style("margin: 0 1px; padding-left: 45px")
    -> {"margin": "0 1px", "paddingLeft": "45px"}
"""

from __future__ import annotations

import re
from typing import Any, Dict

# ';' outside parentheses, so url(data:...;base64,...) survives
_DECLARATION_SPLIT = re.compile(r";(?![^(]*\))")
_HYPHENATED = re.compile(r"-([a-z0-9])")


def camel_case(property_name: str) -> str:
    name = property_name.strip()
    if name.startswith("--"):
        return name
    lowered = name.lower()
    if lowered.startswith("-ms-"):
        lowered = lowered[1:]
    elif lowered.startswith("-"):
        # -webkit-transition -> WebkitTransition
        lowered = lowered[1:]
        lowered = lowered[:1].upper() + lowered[1:]
    return _HYPHENATED.sub(lambda m: m.group(1).upper(), lowered)


def parse_style(style: Any) -> Any:
    if not isinstance(style, str):
        return style

    parsed: Dict[str, str] = {}
    for declaration in _DECLARATION_SPLIT.split(style):
        if ":" not in declaration:
            continue
        prop, value = declaration.split(":", 1)
        prop, value = prop.strip(), value.strip()
        if not prop or not value:
            continue
        parsed[camel_case(prop)] = value
    return parsed
