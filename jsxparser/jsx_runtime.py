"""
jsx_runtime.py

JsxParser: markup string -> Element tree
----------------------------------------

One render() call is one independent parse-and-evaluate cycle:

    1. trim the markup and strip <!DOCTYPE ...> declarations
    2. parse it under the synthetic <root> element
    3. evaluate the root's children against the caller bindings
    4. keep the truthy results and wrap them

Faults are logged and passed to `on_error`; none of them propagate. A
syntax error replaces the whole output with render_error({"error": ...})
or None.

Set JSXPARSER_DEBUG=1 to log parse / evaluate timings.
"""

from __future__ import annotations

import logging
import os
import re
import time
from collections.abc import Mapping
from typing import Any, List, Optional

from .config import ParserOptions
from .constants import WRAPPER_CLASS
from .elements import FRAGMENT, Element, PromotedChildren
from .errors import JsxError, JsxSyntaxError
from .hashing import KeyGenerator
from .js_values import truthy
from .jsx_builder import ElementBuilder
from .jsx_evaluator import ExpressionEvaluator
from .jsx_grammar import parse_expression, parse_markup, wrap_markup
from .scope import ScopeResolver

logger = logging.getLogger(__name__)

_DEBUG_ENABLED = os.getenv("JSXPARSER_DEBUG", "0") == "1"

_DOCTYPE = re.compile(r"<!DOCTYPE([^>]*)>")


def _debug_log(message: str, *args: Any) -> None:
    if _DEBUG_ENABLED:
        logger.debug(message, *args)


def prepare_markup(markup: str) -> str:
    return _DOCTYPE.sub("", (markup or "").strip())


class JsxParser:
    """
    Renders markup with embedded expressions into Element descriptors.

        parser = JsxParser(markup="<b>{name}</b>", bindings={"name": "Ada"})
        tree = parser.render()

    Options may be passed as a ParserOptions, a mapping, or keyword
    arguments (snake_case or camelCase).
    """

    def __init__(self, options: Optional[Any] = None, **overrides: Any):
        if options is None:
            options = ParserOptions.from_mapping(overrides)
        elif isinstance(options, Mapping):
            options = ParserOptions.from_mapping(options, **overrides)
        elif overrides:
            options = options.replace(**overrides)
        self.options: ParserOptions = options
        self.parsed_children: Any = None

    # ------------------------------------------------------------------
    # Fault channel
    # ------------------------------------------------------------------

    def report(self, fault: JsxError) -> None:
        if self.options.show_warnings:
            logger.warning("%s: %s", type(fault).__name__, fault)
        else:
            logger.debug("%s: %s", type(fault).__name__, fault)
        self.options.on_error(fault)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def make_evaluator(self, source: str = "") -> ExpressionEvaluator:
        options = self.options
        keys = KeyGenerator(options.random_source, disabled=options.disable_key_generation)
        builder = ElementBuilder(options, self.report, keys)
        resolver = ScopeResolver(options.bindings, options.globals if options.allow_globals else None)
        return ExpressionEvaluator(resolver=resolver, report=self.report, source=source, builder=builder)

    def parse(self, markup: Optional[str] = None) -> Any:
        """Top-level children for `markup` (defaults to options.markup)."""
        text = prepare_markup(self.options.markup if markup is None else markup)

        started = time.perf_counter()
        try:
            root = parse_markup(text, auto_close_void_elements=self.options.auto_close_void_elements)
        except JsxSyntaxError as error:
            self.report(error)
            if self.options.render_error is not None:
                return self.options.render_error({"error": f"SyntaxError: {error}"})
            return None
        _debug_log("parsed %d chars in %.3f ms", len(text), (time.perf_counter() - started) * 1000)

        started = time.perf_counter()
        evaluator = self.make_evaluator(wrap_markup(text))
        children: List[Any] = []
        for node in root.children:
            value = evaluator.evaluate(node)
            if isinstance(value, PromotedChildren):
                children.extend(value)
            else:
                children.append(value)
        _debug_log("evaluated %d nodes in %.3f ms", len(root.children), (time.perf_counter() - started) * 1000)
        return [child for child in children if truthy(child)]

    def class_name(self) -> str:
        names = [WRAPPER_CLASS, *str(self.options.class_name).split(" ")]
        return " ".join(dict.fromkeys(n for n in names if n))

    def render(self) -> Element:
        self.parsed_children = self.parse()
        if self.options.render_in_wrapper:
            return Element("div", {"className": self.class_name()}, self.parsed_children)
        return Element(FRAGMENT, {}, self.parsed_children)


# ==========================================
# CONVENIENCE ENTRY POINTS
# ==========================================


def render(markup: str, **options: Any) -> Element:
    return JsxParser(markup=markup, **options).render()


def evaluate_expression(text: str, bindings: Optional[Mapping] = None, **options: Any) -> Any:
    """
    Evaluate a single expression with the same sandbox render() uses.

    Raises JsxSyntaxError if `text` is not a valid expression.
    """
    parser = JsxParser(bindings=bindings if bindings is not None else {}, **options)
    node = parse_expression(text)
    return parser.make_evaluator(text).evaluate(node)
