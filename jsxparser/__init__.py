"""
jsxparser - render markup with embedded expressions into element trees.

Public API:
- JsxParser: configurable renderer (render() -> Element)
- render: one-shot convenience wrapper
- evaluate_expression: evaluate a single sandboxed expression
- ParserOptions: render options with their defaults
- Element / FRAGMENT: descriptors handed to the host renderer
- ClosureProxy: rebindable closure produced by block-bodied arrows
"""

from .config import ParserOptions
from .elements import FRAGMENT, Element
from .errors import (
    BlacklistedTagError,
    InvocationError,
    JsxError,
    JsxSyntaxError,
    MemberResolutionError,
    UnrecognizedComponentError,
    UnrecognizedElementError,
    UnresolvedCalleeError,
    UnsupportedSyntaxError,
)
from .function_proxy import BoundClosure, ClosureProxy
from .js_values import UNDEFINED
from .jsx_grammar import parse_expression, parse_markup
from .jsx_runtime import JsxParser, evaluate_expression, render

# Derive version from package metadata
try:
    from importlib.metadata import version
    __version__ = version("jsxparser")
except Exception:
    __version__ = "1.0.0"

__all__ = [
    "JsxParser",
    "render",
    "evaluate_expression",
    "ParserOptions",
    "Element",
    "FRAGMENT",
    "UNDEFINED",
    "ClosureProxy",
    "BoundClosure",
    "parse_markup",
    "parse_expression",
    "JsxError",
    "JsxSyntaxError",
    "BlacklistedTagError",
    "UnrecognizedComponentError",
    "UnrecognizedElementError",
    "UnresolvedCalleeError",
    "InvocationError",
    "MemberResolutionError",
    "UnsupportedSyntaxError",
]
