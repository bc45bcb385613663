"""
jsx_ast.py

Markup + expression syntax tree
-------------------------------

Immutable nodes produced by jsx_grammar.AstBuilder. Every node records the
(start, end) offsets of the source text it was parsed from, so the raw text
of any sub-expression is source[start:end]. Spans never take part in
equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

Span = Tuple[int, int]


def _span():
    return field(default=(0, 0), compare=False, repr=False)


# -------------------------------------------------------------------------
# Expressions
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class Literal:
    value: Any
    span: Span = _span()


@dataclass(frozen=True)
class TemplateLiteral:
    quasis: Tuple[str, ...]
    expressions: Tuple[Any, ...]
    span: Span = _span()


@dataclass(frozen=True)
class Identifier:
    name: str
    span: Span = _span()


@dataclass(frozen=True)
class ThisReference:
    span: Span = _span()


@dataclass(frozen=True)
class SpreadElement:
    argument: Any
    span: Span = _span()


@dataclass(frozen=True)
class ArrayLiteral:
    # None marks a hole
    elements: Tuple[Any, ...]
    span: Span = _span()


@dataclass(frozen=True)
class Property:
    key: Any
    value: Any
    computed: bool = False
    span: Span = _span()


@dataclass(frozen=True)
class ObjectLiteral:
    properties: Tuple[Any, ...]
    span: Span = _span()


@dataclass(frozen=True)
class Unary:
    operator: str
    argument: Any
    span: Span = _span()


@dataclass(frozen=True)
class Binary:
    operator: str
    left: Any
    right: Any
    span: Span = _span()


@dataclass(frozen=True)
class Logical:
    operator: str
    left: Any
    right: Any
    span: Span = _span()


@dataclass(frozen=True)
class Conditional:
    test: Any
    consequent: Any
    alternate: Any
    span: Span = _span()


@dataclass(frozen=True)
class MemberAccess:
    object: Any
    property: Any
    computed: bool = False
    optional: bool = False
    span: Span = _span()


@dataclass(frozen=True)
class Call:
    callee: Any
    arguments: Tuple[Any, ...]
    optional: bool = False
    span: Span = _span()


@dataclass(frozen=True)
class OptionalChain:
    """Boundary of a chain containing `?.`; short-circuits land here."""
    expression: Any
    span: Span = _span()


@dataclass(frozen=True)
class New:
    callee: Any
    arguments: Tuple[Any, ...]
    span: Span = _span()


@dataclass(frozen=True)
class ArrowFunction:
    params: Tuple[Any, ...]
    body: Any
    is_async: bool = False
    span: Span = _span()


# -------------------------------------------------------------------------
# Binding patterns
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class PatternProperty:
    key: Any
    value: Any
    computed: bool = False
    span: Span = _span()


@dataclass(frozen=True)
class ObjectPattern:
    properties: Tuple[PatternProperty, ...]
    rest: Optional[Any] = None
    span: Span = _span()


@dataclass(frozen=True)
class ArrayPattern:
    elements: Tuple[Any, ...]
    rest: Optional[Any] = None
    span: Span = _span()


@dataclass(frozen=True)
class DefaultPattern:
    target: Any
    default: Any
    span: Span = _span()


@dataclass(frozen=True)
class RestElement:
    argument: Any
    span: Span = _span()


# -------------------------------------------------------------------------
# Statements (block-bodied arrow functions only)
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class Block:
    body: Tuple[Any, ...]
    span: Span = _span()


@dataclass(frozen=True)
class Declarator:
    target: Any
    init: Optional[Any] = None
    span: Span = _span()


@dataclass(frozen=True)
class VariableDeclaration:
    kind: str
    declarations: Tuple[Declarator, ...]
    span: Span = _span()


@dataclass(frozen=True)
class Return:
    argument: Optional[Any] = None
    span: Span = _span()


@dataclass(frozen=True)
class If:
    test: Any
    consequent: Any
    alternate: Optional[Any] = None
    span: Span = _span()


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Any
    span: Span = _span()


@dataclass(frozen=True)
class EmptyStatement:
    span: Span = _span()


# -------------------------------------------------------------------------
# Markup
# -------------------------------------------------------------------------


@dataclass(frozen=True)
class MarkupAttribute:
    name: str
    value: Optional[Any] = None
    span: Span = _span()


@dataclass(frozen=True)
class MarkupSpreadAttribute:
    argument: Any
    span: Span = _span()


@dataclass(frozen=True)
class MarkupText:
    value: str
    span: Span = _span()


@dataclass(frozen=True)
class ExpressionContainer:
    # None for `{}` and `{/* comment */}`
    expression: Optional[Any]
    span: Span = _span()


@dataclass(frozen=True)
class MarkupElement:
    name: str
    attributes: Tuple[Any, ...] = ()
    children: Tuple[Any, ...] = ()
    span: Span = _span()


@dataclass(frozen=True)
class MarkupFragment:
    children: Tuple[Any, ...] = ()
    span: Span = _span()
