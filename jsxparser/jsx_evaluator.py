"""
jsx_evaluator.py

Sandboxed expression evaluator
------------------------------

ExpressionEvaluator walks the expression nodes of jsx_ast and produces plain
Python values (see js_values for the value model). Nothing is compiled or
exec'd: every construct is interpreted here, and anything outside the closed
dispatch table is reported as UnsupportedSyntaxError.

Faults never escape evaluate(). They are handed to the `report` callback and
the faulty sub-expression degrades to UNDEFINED:

    a.bad.binding        -> MemberResolutionError, UNDEFINED
    missing()            -> UnresolvedCalleeError, UNDEFINED
    explode()            -> InvocationError,       UNDEFINED
    async () => 1        -> UnsupportedSyntaxError, UNDEFINED

Arrow functions become Python callables. Expression bodies are plain
closures over the defining scope; block bodies are wrapped in a
ClosureProxy so a later bind()/apply() merges into, rather than replaces,
the receiver they were created with.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, List

from .errors import (
    InvocationError,
    JsxError,
    MemberResolutionError,
    UnresolvedCalleeError,
    UnsupportedSyntaxError,
)
from .function_proxy import ClosureProxy
from .js_builtins import get_property, own_entries
from .js_values import (
    UNDEFINED,
    binary_operation,
    is_nullish,
    is_undefined,
    to_js_string,
    to_property_key,
    truthy,
    unary_operation,
)
from .jsx_ast import (
    ArrayLiteral,
    ArrayPattern,
    ArrowFunction,
    Binary,
    Block,
    Call,
    Conditional,
    DefaultPattern,
    ExpressionContainer,
    Identifier,
    Literal,
    Logical,
    MarkupElement,
    MarkupFragment,
    MarkupText,
    MemberAccess,
    New,
    ObjectLiteral,
    ObjectPattern,
    OptionalChain,
    RestElement,
    SpreadElement,
    TemplateLiteral,
    ThisReference,
    Unary,
)
from .jsx_statements import StatementInterpreter
from .scope import ScopeResolver, root_scope

Report = Callable[[JsxError], None]


class _ShortCircuit(Exception):
    """A `?.` receiver was nullish; unwinds to the enclosing OptionalChain."""


def _collapse_chain(node):
    """Split a.b[c].d into (root, [segments in source order])."""
    segments = []
    while isinstance(node, MemberAccess):
        segments.append(node)
        node = node.object
    segments.reverse()
    return node, segments


class ExpressionEvaluator:
    def __init__(
        self,
        *,
        resolver: ScopeResolver,
        report: Report,
        source: str = "",
        this_value: Any = None,
        builder=None,
    ):
        self.resolver = resolver
        self.report = report
        self.source = source
        self.this_value = this_value if this_value is not None else resolver.bindings
        self.builder = builder

    def for_block(self, context: Any) -> "ExpressionEvaluator":
        """
        Evaluator for a block body: caller bindings are reachable only
        through `this`, bare identifiers see locals and globals.
        """
        return ExpressionEvaluator(
            resolver=ScopeResolver({}, self.resolver.globals),
            report=self.report,
            source=self.source,
            this_value=context,
            builder=self.builder,
        )

    def source_text(self, node) -> str:
        start, end = node.span
        text = self.source[start:end].strip() if self.source else ""
        return text or type(node).__name__

    # ==========================================
    # DISPATCH
    # ==========================================

    def evaluate(self, node, scope=None) -> Any:
        if scope is None:
            scope = root_scope()
        handler = _HANDLERS.get(type(node))
        if handler is None:
            self.report(UnsupportedSyntaxError(f"Unsupported syntax: {type(node).__name__}"))
            return UNDEFINED
        return handler(self, node, scope)

    # ----------------------------------------------------------------
    # Leaves
    # ----------------------------------------------------------------

    def _literal(self, node: Literal, scope):
        return node.value

    def _identifier(self, node: Identifier, scope):
        return self.resolver.resolve(node.name, scope)

    def _this(self, node: ThisReference, scope):
        return self.this_value

    def _template(self, node: TemplateLiteral, scope):
        parts = [node.quasis[0]]
        for expression, quasi in zip(node.expressions, node.quasis[1:]):
            parts.append(to_js_string(self.evaluate(expression, scope)))
            parts.append(quasi)
        return "".join(parts)

    # ----------------------------------------------------------------
    # Operators
    # ----------------------------------------------------------------

    def _unary(self, node: Unary, scope):
        return unary_operation(node.operator, self.evaluate(node.argument, scope))

    def _binary(self, node: Binary, scope):
        left = self.evaluate(node.left, scope)
        right = self.evaluate(node.right, scope)
        return binary_operation(node.operator, left, right)

    def _logical(self, node: Logical, scope):
        left = self.evaluate(node.left, scope)
        if node.operator == "||":
            return left if truthy(left) else self.evaluate(node.right, scope)
        if node.operator == "&&":
            return self.evaluate(node.right, scope) if truthy(left) else left
        if node.operator == "??":
            return self.evaluate(node.right, scope) if is_nullish(left) else left
        return UNDEFINED

    def _conditional(self, node: Conditional, scope):
        if truthy(self.evaluate(node.test, scope)):
            return self.evaluate(node.consequent, scope)
        return self.evaluate(node.alternate, scope)

    # ----------------------------------------------------------------
    # Members and calls
    # ----------------------------------------------------------------

    def _root_label(self, root) -> str:
        if isinstance(root, Identifier):
            return root.name
        if isinstance(root, ThisReference):
            return "this"
        return "unknown"

    def _member(self, node: MemberAccess, scope):
        root, segments = _collapse_chain(node)
        keys = [
            self.evaluate(s.property, scope) if s.computed else s.property
            for s in segments
        ]
        value = self.evaluate(root, scope)
        parent = UNDEFINED
        for segment, key in zip(segments, keys):
            if is_nullish(value):
                if segment.optional:
                    raise _ShortCircuit()
                path = [to_js_string(k) for k in keys]
                self.report(MemberResolutionError(self._root_label(root), path))
                return UNDEFINED
            parent, value = value, get_property(value, key)
        if isinstance(value, ClosureProxy):
            return value.bind(parent)
        return value

    def _optional_chain(self, node: OptionalChain, scope):
        try:
            return self.evaluate(node.expression, scope)
        except _ShortCircuit:
            return UNDEFINED

    def _spread_items(self, value) -> List[Any]:
        if is_nullish(value) or isinstance(value, Mapping):
            self.report(UnsupportedSyntaxError(f"Spread of non-iterable value {to_js_string(value)}"))
            return []
        try:
            return list(value)
        except TypeError:
            self.report(UnsupportedSyntaxError(f"Spread of non-iterable value {to_js_string(value)}"))
            return []

    def _arguments(self, nodes, scope) -> List[Any]:
        args = []
        for node in nodes:
            if isinstance(node, SpreadElement):
                args.extend(self._spread_items(self.evaluate(node.argument, scope)))
            else:
                args.append(self.evaluate(node, scope))
        return args

    def invocation_context(self, scope) -> Dict[str, Any]:
        context = dict(self.this_value) if isinstance(self.this_value, Mapping) else {}
        context.update(dict(scope))
        return context

    def _call(self, node: Call, scope):
        callee = self.evaluate(node.callee, scope)
        if is_nullish(callee):
            if node.optional:
                raise _ShortCircuit()
            self.report(UnresolvedCalleeError(self.source_text(node.callee)))
            return UNDEFINED
        args = self._arguments(node.arguments, scope)
        if not callable(callee):
            self.report(InvocationError(
                self.source_text(node.callee), TypeError(f"{to_js_string(callee)} is not a function")
            ))
            return UNDEFINED
        try:
            if isinstance(callee, ClosureProxy):
                return callee.call_with_context(self.invocation_context(scope), *args)
            return callee(*args)
        except Exception as exc:
            self.report(InvocationError(self.source_text(node.callee), exc))
            return UNDEFINED

    def _new(self, node: New, scope):
        constructor = self.evaluate(node.callee, scope)
        if is_nullish(constructor):
            self.report(UnresolvedCalleeError(self.source_text(node.callee)))
            return UNDEFINED
        args = self._arguments(node.arguments, scope)
        try:
            return constructor(*args)
        except Exception as exc:
            self.report(InvocationError(self.source_text(node.callee), exc))
            return UNDEFINED

    # ----------------------------------------------------------------
    # Literals with structure
    # ----------------------------------------------------------------

    def _array(self, node: ArrayLiteral, scope):
        result = []
        for element in node.elements:
            if element is None:
                result.append(UNDEFINED)
            elif isinstance(element, SpreadElement):
                result.extend(self._spread_items(self.evaluate(element.argument, scope)))
            else:
                result.append(self.evaluate(element, scope))
        return result

    def _object(self, node: ObjectLiteral, scope):
        result: Dict[Any, Any] = {}
        for prop in node.properties:
            if isinstance(prop, SpreadElement):
                for key, value in own_entries(self.evaluate(prop.argument, scope)):
                    result[key] = value
                continue
            if prop.computed:
                key = to_js_string(to_property_key(self.evaluate(prop.key, scope)))
            else:
                key = prop.key
            result[key] = self.evaluate(prop.value, scope)
        return result

    # ----------------------------------------------------------------
    # Functions
    # ----------------------------------------------------------------

    def bind_parameters(self, params, args, scope) -> Dict[str, Any]:
        """
        Bind call arguments to parameter patterns in a fresh scope layer.

        Defaults and computed keys are evaluated against `scope`, the scope
        the arrow was defined in, so they never see sibling parameters.
        """
        layer: Dict[str, Any] = {}
        for index, param in enumerate(params):
            if isinstance(param, RestElement):
                self.bind_pattern(param.argument, list(args[index:]), layer, scope)
                break
            value = args[index] if index < len(args) else UNDEFINED
            self.bind_pattern(param, value, layer, scope)
        return layer

    def bind_pattern(self, target, value, layer: Dict[str, Any], scope) -> None:
        if isinstance(target, str):
            layer[target] = value
        elif isinstance(target, DefaultPattern):
            if is_undefined(value):
                value = self.evaluate(target.default, scope)
            self.bind_pattern(target.target, value, layer, scope)
        elif isinstance(target, ObjectPattern):
            if is_nullish(value):
                raise TypeError(f"Cannot destructure '{to_js_string(value)}' as it is {to_js_string(value)}.")
            used = set()
            for prop in target.properties:
                key = to_property_key(self.evaluate(prop.key, scope)) if prop.computed else prop.key
                used.add(to_js_string(key))
                self.bind_pattern(prop.value, get_property(value, key), layer, scope)
            if target.rest is not None:
                layer[target.rest] = {
                    k: v for k, v in own_entries(value) if to_js_string(k) not in used
                }
        elif isinstance(target, ArrayPattern):
            if is_nullish(value) or isinstance(value, Mapping):
                raise TypeError(f"{to_js_string(value)} is not iterable")
            items = list(value)
            for index, element in enumerate(target.elements):
                if element is not None:
                    item = items[index] if index < len(items) else UNDEFINED
                    self.bind_pattern(element, item, layer, scope)
            if target.rest is not None:
                self.bind_pattern(target.rest, items[len(target.elements):], layer, scope)
        else:
            raise TypeError(f"Invalid destructuring target: {type(target).__name__}")

    def _arrow(self, node: ArrowFunction, scope):
        if node.is_async:
            self.report(UnsupportedSyntaxError("Async and generator arrow functions are not supported."))
            return UNDEFINED
        if isinstance(node.body, Block):
            return self._block_closure(node, scope)

        def arrow(*args):
            local = scope.new_child(self.bind_parameters(node.params, args, scope))
            return self.evaluate(node.body, local)

        return arrow

    def _block_closure(self, node: ArrowFunction, scope) -> ClosureProxy:
        def run(context, *args):
            layer = self.bind_parameters(node.params, args, scope)
            interpreter = StatementInterpreter(self.for_block(context))
            return interpreter.run(node.body, scope.new_child(layer))

        return ClosureProxy(run, self.resolver.bindings)

    # ----------------------------------------------------------------
    # Markup inside expressions
    # ----------------------------------------------------------------

    def _markup(self, node, scope):
        return self.builder.build(node, self, scope)

    def _text(self, node: MarkupText, scope):
        return self.builder.text(node)

    def _container(self, node: ExpressionContainer, scope):
        if node.expression is None:
            return UNDEFINED
        return self.evaluate(node.expression, scope)


_HANDLERS = {
    Literal: ExpressionEvaluator._literal,
    Identifier: ExpressionEvaluator._identifier,
    ThisReference: ExpressionEvaluator._this,
    TemplateLiteral: ExpressionEvaluator._template,
    Unary: ExpressionEvaluator._unary,
    Binary: ExpressionEvaluator._binary,
    Logical: ExpressionEvaluator._logical,
    Conditional: ExpressionEvaluator._conditional,
    MemberAccess: ExpressionEvaluator._member,
    OptionalChain: ExpressionEvaluator._optional_chain,
    Call: ExpressionEvaluator._call,
    New: ExpressionEvaluator._new,
    ArrayLiteral: ExpressionEvaluator._array,
    ObjectLiteral: ExpressionEvaluator._object,
    ArrowFunction: ExpressionEvaluator._arrow,
    MarkupElement: ExpressionEvaluator._markup,
    MarkupFragment: ExpressionEvaluator._markup,
    MarkupText: ExpressionEvaluator._text,
    ExpressionContainer: ExpressionEvaluator._container,
}
