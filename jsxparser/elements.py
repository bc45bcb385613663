"""
Element descriptors handed to the host renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class _FragmentType:
    """Structural marker used as the tag of fragments and wrapped text."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Fragment"

    def __reduce__(self):
        return (_FragmentType, ())


FRAGMENT = _FragmentType()


@dataclass(frozen=True)
class Element:
    """
    One renderable unit.

    tag      : lower-cased element name, a component reference, or FRAGMENT
    props    : attribute mapping in source order (never contains "key")
    children : None, a single child, or a list of children
    key      : identity key (explicit, generated, or None)
    """
    tag: Any
    props: Dict[str, Any] = field(default_factory=dict)
    children: Any = None
    key: Optional[str] = None

    @property
    def is_fragment(self) -> bool:
        return self.tag is FRAGMENT


class PromotedChildren(list):
    """Children of a transparent wrapper tag, spliced into the parent's children."""
