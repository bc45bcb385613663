"""
scope.py

Identifier resolution
---------------------

A binding scope is a collections.ChainMap. Every function invocation pushes
a fresh layer with new_child(), so outer layers are never written to.

Lookup order for an identifier:

    local layers -> caller bindings -> ambient globals (if allowed) -> UNDEFINED
"""

from __future__ import annotations

from collections import ChainMap
from collections.abc import Mapping
from typing import Any, Optional

from .js_values import UNDEFINED

Scope = ChainMap


def root_scope() -> ChainMap:
    return ChainMap()


class ScopeResolver:
    """Resolves identifiers against the layered binding scope. Never raises."""

    def __init__(self, bindings: Optional[Mapping] = None, globals_: Optional[Mapping] = None):
        self.bindings = bindings if bindings is not None else {}
        self.globals = globals_

    def resolve(self, name: str, scope: Optional[Mapping] = None) -> Any:
        if scope is not None and name in scope:
            return scope[name]
        if name in self.bindings:
            return self.bindings[name]
        if self.globals is not None and name in self.globals:
            return self.globals[name]
        return UNDEFINED


def resolve_path(registry: Optional[Mapping], dotted_name: str) -> Any:
    """
    Walk "Lib.Sub.Name" through the component registry.

    Mappings are indexed by key, other objects by public attribute.
    Any missing segment resolves the whole path to None.
    """
    if not registry:
        return None
    current: Any = registry
    for segment in dotted_name.split("."):
        if isinstance(current, Mapping):
            if segment not in current:
                return None
            current = current[segment]
        elif segment and not segment.startswith("_") and hasattr(current, segment):
            current = getattr(current, segment)
        else:
            return None
        if current is None:
            return None
    return current
