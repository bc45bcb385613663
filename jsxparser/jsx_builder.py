"""
jsx_builder.py

Markup node -> Element descriptor
---------------------------------

ElementBuilder.build() turns one MarkupElement / MarkupFragment into an
Element, in this order:

    1. transparent wrappers (html/head/body) promote their children
    2. tag blacklist                      -> BlacklistedTagError, None
    3. component lookup in the registry
       components_only and not found      -> UnrecognizedComponentError
       unknown elements disallowed        -> UnrecognizedElementError
    4. children (only for components, fragments and non-void tags)
    5. props (rewrite table, blacklist, spreads, style strings)
    6. identity key (explicit `key` beats the generated one)
    7. <option> unwraps its single element child
    8. Element(component or lower-cased tag, props, children, key)

Children are produced by the expression evaluator, which calls back into
build() for nested markup.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Dict, List

from .constants import (
    ATTRIBUTES,
    TRANSPARENT_TAGS,
    can_have_children,
    can_have_whitespace,
    is_unrecognized_tag,
)
from .elements import FRAGMENT, Element, PromotedChildren
from .errors import (
    BlacklistedTagError,
    JsxError,
    UnrecognizedComponentError,
    UnrecognizedElementError,
)
from .hashing import KeyGenerator
from .js_builtins import own_entries
from .js_values import is_nullish, to_js_string
from .jsx_ast import MarkupAttribute, MarkupFragment, MarkupText
from .sanitize import (
    compile_attribute_blacklist,
    is_blacklisted_attribute,
    is_blacklisted_tag,
    normalize_tag_blacklist,
)
from .scope import resolve_path
from .style import parse_style

logger = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    """Whitespace-only text, bare or wrapped in a text fragment."""
    if isinstance(value, Element) and value.is_fragment and not value.props:
        value = value.children
    return isinstance(value, str) and value.strip() == ""


class ElementBuilder:
    def __init__(self, options, report: Callable[[JsxError], None], keys: KeyGenerator):
        self.options = options
        self.report = report
        self.keys = keys
        self.tag_blacklist = normalize_tag_blacklist(options.blacklisted_tags)
        self.attribute_blacklist = compile_attribute_blacklist(options.blacklisted_attrs)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def text(self, node: MarkupText) -> Any:
        if self.options.disable_fragments:
            return node.value
        return Element(FRAGMENT, {}, node.value, self.keys.next())

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def build(self, node, evaluator, scope=None) -> Any:
        is_fragment = isinstance(node, MarkupFragment)
        name = "" if is_fragment else node.name

        if name and TRANSPARENT_TAGS.match(name):
            children = self._evaluate_children(node.children, evaluator, scope)
            return PromotedChildren(c for c in children if not is_blank(c))

        if name and is_blacklisted_tag(name, self.tag_blacklist):
            self.report(BlacklistedTagError(name))
            return None

        component = FRAGMENT if is_fragment else resolve_path(self.options.components, name)
        if component is None:
            if self.options.components_only:
                self.report(UnrecognizedComponentError(name))
                return self.options.render_unrecognized(name)
            if not self.options.allow_unknown_elements and is_unrecognized_tag(name):
                self.report(UnrecognizedElementError(name))
                return self.options.render_unrecognized(name)

        children = None
        if component is not None or can_have_children(name):
            values = self._evaluate_children(node.children, evaluator, scope)
            if component is None and not can_have_whitespace(name):
                values = [v for v in values if not is_blank(v)]
            children = self._reduce_children(values)
        elif node.children:
            logger.debug("dropping children of void element <%s>", name)

        attributes = () if is_fragment else node.attributes
        props = self._build_props(attributes, evaluator, scope)
        explicit_key = props.pop("key", None)
        key = self.keys.next() if is_nullish(explicit_key) else to_js_string(explicit_key)

        lower_name = name.lower()
        if lower_name == "option" and isinstance(children, Element):
            children = children.children

        tag = component if component is not None else lower_name
        return Element(tag, props, children, key)

    def _evaluate_children(self, nodes, evaluator, scope) -> List[Any]:
        values: List[Any] = []
        for child in nodes:
            value = evaluator.evaluate(child, scope)
            if isinstance(value, PromotedChildren):
                values.extend(value)
            else:
                values.append(value)
        return values

    def _reduce_children(self, values: List[Any]) -> Any:
        if not values:
            return None
        if len(values) == 1:
            return values[0]
        if self.keys.disabled:
            return values
        # positional fallback keys for element children that have none
        return [
            dataclasses.replace(v, key=str(index)) if isinstance(v, Element) and v.key is None else v
            for index, v in enumerate(values)
        ]

    # ------------------------------------------------------------------
    # Props
    # ------------------------------------------------------------------

    def _apply(self, props: Dict[str, Any], raw_name: Any, value: Any) -> None:
        raw_name = str(raw_name)
        name = ATTRIBUTES.get(raw_name, raw_name)
        if is_blacklisted_attribute(name, self.attribute_blacklist):
            logger.debug("attribute %s blacklisted", name)
            return
        props[name] = value

    def _build_props(self, attributes, evaluator, scope) -> Dict[str, Any]:
        props: Dict[str, Any] = {}
        for attribute in attributes:
            if isinstance(attribute, MarkupAttribute):
                # a bare attribute (<input readonly />) is an implicit true
                if attribute.value is None:
                    value = True
                else:
                    value = evaluator.evaluate(attribute.value, scope)
                self._apply(props, attribute.name, value)
            else:
                spread = evaluator.evaluate(attribute.argument, scope)
                for raw_name, value in own_entries(spread):
                    self._apply(props, raw_name, value)

        if isinstance(props.get("style"), str):
            props["style"] = parse_style(props["style"])
        return props
