"""
config.py

Parser options
--------------

ParserOptions carries every recognised render option with its default.
Option names are snake_case; ParserOptions.from_mapping() also accepts the
camelCase spellings used by markup-embedding hosts:

    allowUnknownElements   autoCloseVoidElements  bindings
    blacklistedAttrs       blacklistedTags        className
    components             componentsOnly         disableFragments
    disableKeyGeneration   jsx / markup           onError
    showWarnings           renderError            renderInWrapper
    renderUnrecognized     allowGlobals           globals
    randomSource
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .js_builtins import DEFAULT_GLOBALS


def _ignore_error(error: Exception) -> None:
    return None


def _render_nothing(tag_name: str) -> Any:
    return None


def _default_blacklisted_attrs() -> List[Union[str, re.Pattern]]:
    return [re.compile(r"^on.+", re.IGNORECASE)]


@dataclass
class ParserOptions:
    """Render options. Mutable containers get a fresh default per instance."""
    allow_unknown_elements: bool = True
    auto_close_void_elements: bool = False
    bindings: Mapping[str, Any] = field(default_factory=dict)
    blacklisted_attrs: List[Union[str, re.Pattern]] = field(default_factory=_default_blacklisted_attrs)
    blacklisted_tags: List[str] = field(default_factory=lambda: ["script"])
    class_name: str = ""
    components: Mapping[str, Any] = field(default_factory=dict)
    components_only: bool = False
    disable_fragments: bool = False
    disable_key_generation: bool = False
    markup: str = ""
    on_error: Callable[[Exception], Any] = _ignore_error
    show_warnings: bool = False
    render_error: Optional[Callable[[Dict[str, str]], Any]] = None
    render_in_wrapper: bool = True
    render_unrecognized: Callable[[str], Any] = _render_nothing
    # host policy for ambient names (Math, JSON, Date, ...)
    allow_globals: bool = True
    globals: Mapping[str, Any] = field(default_factory=lambda: DEFAULT_GLOBALS)
    random_source: Optional[random.Random] = None

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]] = None, **overrides: Any) -> "ParserOptions":
        merged: Dict[str, Any] = {}
        for source in (values or {}, overrides):
            for name, value in source.items():
                merged[_option_name(name)] = value
        return cls(**merged)

    def replace(self, **changes: Any) -> "ParserOptions":
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        current.update({_option_name(k): v for k, v in changes.items()})
        return ParserOptions(**current)


_ALIASES = {"jsx": "markup"}
_CAMEL = re.compile(r"(?<!^)([A-Z])")
_FIELD_NAMES = frozenset(f.name for f in fields(ParserOptions))


def _option_name(name: str) -> str:
    """Map a camelCase or snake_case option name to its field name."""
    if name in _ALIASES:
        return _ALIASES[name]
    snake = _CAMEL.sub(r"_\1", name).lower()
    if snake not in _FIELD_NAMES:
        raise TypeError(f"Unknown parser option: {name!r}")
    return snake
