"""
jsx_grammar.py

PEG grammar for markup with embedded expressions
------------------------------------------------

The grammar is written for parsimonious. Markup is parsed wrapped under a
synthetic root element:

    <root>{markup}</root>

and AstBuilder turns the parse tree into the frozen nodes of jsx_ast.

Conventions inside the grammar:
    - `_` is insignificant whitespace and comments
    - expression tokens consume their trailing `_`
    - markup `>` and `}` do not, since the text after them is content

Two grammars exist, one per auto_close_void_elements setting. Each is built
lazily on first use and then shared; parsing keeps no state on the grammar.
"""

from __future__ import annotations

import html
import re
import sys
import threading
from contextlib import contextmanager
from typing import Any, Optional, Tuple

from parsimonious.exceptions import ParseError
from parsimonious.grammar import Grammar
from parsimonious.nodes import Node, NodeVisitor

from .constants import VOID_ELEMENTS
from .errors import JsxSyntaxError
from .js_values import format_number, normalize_number
from .jsx_ast import (
    ArrayLiteral,
    ArrayPattern,
    ArrowFunction,
    Binary,
    Block,
    Call,
    Conditional,
    Declarator,
    DefaultPattern,
    EmptyStatement,
    ExpressionContainer,
    ExpressionStatement,
    Identifier,
    If,
    Literal,
    Logical,
    MarkupAttribute,
    MarkupElement,
    MarkupFragment,
    MarkupSpreadAttribute,
    MarkupText,
    MemberAccess,
    New,
    ObjectLiteral,
    ObjectPattern,
    OptionalChain,
    PatternProperty,
    Property,
    RestElement,
    Return,
    SpreadElement,
    TemplateLiteral,
    ThisReference,
    Unary,
    VariableDeclaration,
)

ROOT_TAG = "root"

# ==========================================
# GRAMMAR
# ==========================================

GRAMMAR_TEXT = r'''
document            = jsx_element end_of_input
standalone_expression = _ expression end_of_input
end_of_input        = !~r"[\s\S]"

# ---------------------------------------------------------------- markup

jsx_element         = jsx_self_closing / __VOID__ jsx_paired / jsx_fragment
jsx_self_closing    = "<" _ jsx_element_name jsx_attribute* "/" _ ">"
jsx_void_element    = "<" _ void_element_name _ jsx_attribute* ">" void_closing?
void_closing        = "<" _ "/" _ void_element_name _ ">"
jsx_paired          = jsx_opening jsx_child* jsx_closing?
jsx_opening         = "<" _ jsx_element_name jsx_attribute* ">"
jsx_closing         = "<" _ "/" _ jsx_element_name ">"
jsx_fragment        = "<" _ ">" jsx_child* "<" _ "/" _ ">"

jsx_name            = ~r"(?:[^\W\d]|\$)[\w$-]*(?::(?:[^\W\d]|\$)[\w$-]*)?"
jsx_element_name    = jsx_name (_ "." _ jsx_name)* _
void_element_name   = ~r"(?:__VOID_NAMES__)(?![\w$:.-])"

jsx_attribute       = jsx_spread_attribute / jsx_plain_attribute
jsx_spread_attribute = "{" _ "..." _ expression "}" _
jsx_plain_attribute = jsx_name _ attribute_initializer?
attribute_initializer = "=" _ attribute_value _
attribute_value     = jsx_string / attribute_expression / jsx_element
attribute_expression = "{" _ expression "}"
jsx_string          = ~r"\"[^\"]*\"|'[^']*'"

jsx_child           = jsx_text / jsx_expression_container / jsx_element
jsx_text            = ~r"[^<>{}]+"
jsx_expression_container = "{" _ expression? "}"

# ---------------------------------------------------------------- expressions

expression          = arrow_function / conditional_expression
conditional_expression = binary_expression conditional_tail?
conditional_tail    = ~r"\?(?!\?|\.(?!\d))" _ expression ":" _ expression

binary_expression   = unary_expression (binary_operator unary_expression)*
binary_operator     = ~r"\?\?|\|\||&&|===|!==|==|!=|<=|>=|\*\*|[<>+\-*%]|/(?![/*])" _

unary_expression    = unary_operator* postfix_expression
unary_operator      = ~r"!(?!=)|\+(?!\+)|-(?!-)" _

postfix_expression  = callee_expression postfix_operation*
callee_expression   = new_expression / primary_expression
postfix_operation   = optional_call / optional_computed_member / optional_member / call_arguments / computed_member / dot_member
optional_call       = "?." _ call_arguments
optional_computed_member = "?." _ "[" _ expression "]" _
optional_member     = "?." _ property_name_token
call_arguments      = "(" _ argument_list? ")" _
argument_list       = argument ("," _ argument)* ("," _)?
argument            = spread_element / expression
spread_element      = "..." _ expression
computed_member     = "[" _ expression "]" _
dot_member          = "." _ property_name_token
property_name_token = ~r"(?:[^\W\d]|\$)[\w$]*" _

new_expression      = ~r"new(?![\w$])" _ new_callee call_arguments?
new_callee          = primary_expression member_operation*
member_operation    = computed_member / dot_member

primary_expression  = literal_keyword / number / string / template_literal / this_keyword / identifier / array_literal / object_literal / parenthesized / jsx_primary
literal_keyword     = ~r"(?:true|false|null)(?![\w$])" _
number              = ~r"(?:0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)(?![\w$])" _
string              = ~r"\"(?:[^\"\\\n]|\\[\s\S])*\"|'(?:[^'\\\n]|\\[\s\S])*'" _
template_literal    = "`" template_part* "`" _
template_part       = template_substitution / template_chars
template_substitution = "${" _ expression "}"
template_chars      = ~r"(?:[^`\\$]|\\[\s\S]|\$(?!\{))+"
this_keyword        = ~r"this(?![\w$])" _
identifier          = !reserved_word identifier_name
identifier_name     = ~r"(?:[^\W\d]|\$)[\w$]*" _
reserved_word       = ~r"(?:true|false|null|this|new|function|class|typeof|void|delete|in|instanceof|return|if|else|const|var)(?![\w$])"
array_literal       = "[" _ array_slot ("," _ array_slot)* "]" _
array_slot          = (spread_element / expression)?
object_literal      = "{" _ object_members? "}" _
object_members      = object_member ("," _ object_member)* ("," _)?
object_member       = spread_element / keyed_property / shorthand_property
keyed_property      = property_key ":" _ expression
shorthand_property  = identifier !":"
property_key        = computed_key / property_name_token / string / number
computed_key        = "[" _ expression "]" _
parenthesized       = "(" _ expression ")" _
jsx_primary         = jsx_element _

# ---------------------------------------------------------------- functions

arrow_function      = async_keyword? arrow_parameters "=>" _ arrow_body
async_keyword       = ~r"async(?![\w$])" _
arrow_parameters    = parenthesized_parameters / binding_identifier
parenthesized_parameters = "(" _ parameter_list? ")" _
parameter_list      = parameter ("," _ parameter)* ("," _)?
parameter           = rest_element / binding_element
rest_element        = "..." _ binding_target
binding_element     = binding_target initializer?
binding_target      = object_pattern / array_pattern / binding_identifier
binding_identifier  = !reserved_word identifier_name
initializer         = ~r"=(?![=>])" _ expression
object_pattern      = "{" _ pattern_members? "}" _
pattern_members     = pattern_member ("," _ pattern_member)* ("," _)?
pattern_member      = pattern_rest / keyed_pattern / shorthand_pattern
pattern_rest        = "..." _ binding_identifier
keyed_pattern       = property_key ":" _ binding_element
shorthand_pattern   = binding_identifier initializer?
array_pattern       = "[" _ array_pattern_slot ("," _ array_pattern_slot)* "]" _
array_pattern_slot  = parameter?
arrow_body          = block_statement / expression

# ---------------------------------------------------------------- statements

block_statement     = "{" _ statement* "}" _
statement           = block_statement / variable_declaration / return_statement / if_statement / empty_statement / expression_statement
variable_declaration = declaration_kind declarator ("," _ declarator)* semicolon?
declaration_kind    = ~r"(?:const|let|var)(?![\w$])" _
declarator          = binding_target initializer?
return_statement    = ~r"return(?![\w$])" _ expression? semicolon?
if_statement        = ~r"if(?![\w$])" _ "(" _ expression ")" _ statement else_clause?
else_clause         = ~r"else(?![\w$])" _ statement
empty_statement     = ";" _
expression_statement = !"{" expression semicolon?
semicolon           = ";" _

_                   = ~r"(?:\s|//[^\n]*|/\*[\s\S]*?\*/)*"
'''


def _grammar_text(auto_close_void_elements: bool) -> str:
    # str.replace, not %-formatting: the regexes contain "%"
    text = GRAMMAR_TEXT.replace("__VOID_NAMES__", "|".join(VOID_ELEMENTS))
    return text.replace("__VOID__", "jsx_void_element / " if auto_close_void_elements else "")


_GRAMMAR_LOCK = threading.Lock()
_GRAMMARS = {}

_MIN_RECURSION_LIMIT = 10000
_RECURSION_LOCK = threading.Lock()
_recursion_users = 0
_saved_recursion_limit = None


def _get_or_create_grammar(auto_close_void_elements: bool = False) -> Grammar:
    """Get the shared grammar for this setting, creating it if needed."""
    with _GRAMMAR_LOCK:
        grammar = _GRAMMARS.get(auto_close_void_elements)
        if grammar is None:
            grammar = _GRAMMARS[auto_close_void_elements] = Grammar(_grammar_text(auto_close_void_elements))
    return grammar


@contextmanager
def _deep_recursion():
    """
    Raise the interpreter recursion limit for the duration of a parse.

    Packrat matching recurses once per rule per nesting level, so modest
    markup overflows the default limit. The limit is process-wide: the first
    concurrent parse raises it and the last one restores the host's value.
    """
    global _recursion_users, _saved_recursion_limit
    with _RECURSION_LOCK:
        if _recursion_users == 0:
            _saved_recursion_limit = sys.getrecursionlimit()
            if _saved_recursion_limit < _MIN_RECURSION_LIMIT:
                sys.setrecursionlimit(_MIN_RECURSION_LIMIT)
        _recursion_users += 1
    try:
        yield
    finally:
        with _RECURSION_LOCK:
            _recursion_users -= 1
            if _recursion_users == 0:
                sys.setrecursionlimit(_saved_recursion_limit)
                _saved_recursion_limit = None


# ==========================================
# VISITOR MARKERS
# ==========================================
# Intermediate values passed from child rules to their parents. None of them
# survive into the finished tree.


class _Name(str):
    pass


class _TagName(str):
    pass


class _Kind(str):
    pass


class _Op(str):
    start = 0


class _Chunk(str):
    pass


class _Marker:
    def __repr__(self):
        return f"<{type(self).__name__}>"


class _Hole(_Marker):
    pass


class _Async(_Marker):
    pass


_HOLE = _Hole()
_ASYNC = _Async()


class _Opening:
    def __init__(self, name, attributes, start):
        self.name = name
        self.attributes = attributes
        self.start = start


class _Closing:
    def __init__(self, name, start):
        self.name = name
        self.start = start


class _Params(tuple):
    pass


class _Computed:
    def __init__(self, expression):
        self.expression = expression


class _MemberOp:
    def __init__(self, prop, computed, optional, end):
        self.prop = prop
        self.computed = computed
        self.optional = optional
        self.end = end


class _CallOp:
    def __init__(self, args, optional, end):
        self.args = args
        self.optional = optional
        self.end = end


def _flatten(items):
    """Visited values in order, skipping raw parse nodes."""
    for item in items:
        if type(item) is list:
            yield from _flatten(item)
        elif not isinstance(item, Node):
            yield item


def _values(children) -> list:
    return list(_flatten(children))


# ----------------------------------------------------------------
# Literal cooking
# ----------------------------------------------------------------

_ESCAPE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])")
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}
_LINE_CONTINUATIONS = ("\n", "\r\n", "\r", "\u2028", "\u2029")


def _cook_escape(match) -> str:
    seq = match.group(1)
    if seq[0] == "u" and len(seq) > 1:
        digits = seq[2:-1] if seq[1] == "{" else seq[1:]
        return chr(int(digits, 16))
    if seq[0] == "x" and len(seq) > 1:
        return chr(int(seq[1:], 16))
    if seq in _LINE_CONTINUATIONS:
        return ""
    return _SIMPLE_ESCAPES.get(seq, seq)


def cook_string(raw: str) -> str:
    """Resolve backslash escapes the way a string literal's value does."""
    return _ESCAPE.sub(_cook_escape, raw)


def _parse_number(text: str):
    if text[:2].lower() in ("0x", "0b", "0o"):
        return int(text, 0)
    if text.isdigit():
        return int(text)
    return normalize_number(float(text))


def _property_key(value) -> Tuple[Any, bool]:
    """(key, computed) for an object literal / pattern key marker."""
    if isinstance(value, _Computed):
        return value.expression, True
    if isinstance(value, Literal):
        key = value.value
        return (key if isinstance(key, str) else format_number(key)), False
    return str(value), False


# Binding strength; "**" is the only right-associative operator.
_PRECEDENCE = {
    "??": 1, "||": 1,
    "&&": 2,
    "==": 3, "!=": 3, "===": 3, "!==": 3,
    "<": 4, "<=": 4, ">": 4, ">=": 4,
    "+": 5, "-": 5,
    "*": 6, "/": 6, "%": 6,
    "**": 7,
}
_LOGICAL = frozenset(("&&", "||", "??"))


def _combine(op, left, right):
    span = (left.span[0], right.span[1])
    if op in _LOGICAL:
        return Logical(op, left, right, span=span)
    return Binary(op, left, right, span=span)


def _fold_binary(operands, operators):
    """Shunting-yard over a flat `a op b op c` sequence."""
    output = [operands[0]]
    pending = []

    def reduce_top():
        op = pending.pop()
        right = output.pop()
        left = output.pop()
        output.append(_combine(op, left, right))

    for op, operand in zip(operators, operands[1:]):
        strength = _PRECEDENCE[op]
        while pending and (
            _PRECEDENCE[pending[-1]] > strength
            or (_PRECEDENCE[pending[-1]] == strength and op != "**")
        ):
            reduce_top()
        pending.append(op)
        output.append(operand)
    while pending:
        reduce_top()
    return output[0]


def _fold_postfix(base, operations, start):
    expression = base
    optional = False
    for op in operations:
        if isinstance(op, _CallOp):
            expression = Call(expression, op.args, op.optional, span=(start, op.end))
        else:
            expression = MemberAccess(expression, op.prop, op.computed, op.optional, span=(start, op.end))
        optional = optional or op.optional
    return expression, optional


# ==========================================
# PARSE TREE -> AST
# ==========================================


class AstBuilder(NodeVisitor):
    """Builds jsx_ast nodes from a parsimonious parse tree."""

    unwrapped_exceptions = (JsxSyntaxError,)

    def generic_visit(self, node, visited_children):
        return visited_children or node

    def _lift(self, node, visited_children):
        values = _values(visited_children)
        return values[0] if values else node

    visit_document = visit_standalone_expression = _lift
    visit_jsx_element = visit_jsx_child = visit_jsx_attribute = _lift
    visit_attribute_initializer = visit_attribute_value = visit_attribute_expression = _lift
    visit_expression = visit_callee_expression = visit_postfix_operation = _lift
    visit_member_operation = visit_argument = visit_primary_expression = _lift
    visit_parenthesized = visit_jsx_primary = visit_property_key = _lift
    visit_template_part = visit_template_substitution = visit_initializer = _lift
    visit_arrow_parameters = visit_parameter = visit_binding_target = _lift
    visit_binding_identifier = visit_arrow_body = visit_statement = _lift
    visit_object_member = visit_pattern_member = visit_else_clause = _lift

    # -------------------------------------------------------- markup

    def visit_jsx_name(self, node, _):
        return _Name(node.text)

    def visit_jsx_element_name(self, node, visited_children):
        return _TagName(".".join(v for v in _values(visited_children) if isinstance(v, _Name)))

    def visit_void_element_name(self, node, _):
        return _TagName(node.text)

    def _attributes(self, values):
        return tuple(v for v in values if isinstance(v, (MarkupAttribute, MarkupSpreadAttribute)))

    def visit_jsx_self_closing(self, node, visited_children):
        values = _values(visited_children)
        name = next(v for v in values if isinstance(v, _TagName))
        return MarkupElement(name, self._attributes(values), (), span=(node.start, node.end))

    def visit_jsx_void_element(self, node, visited_children):
        values = _values(visited_children)
        name = next(v for v in values if isinstance(v, _TagName))
        closing = next((v for v in values if isinstance(v, _Closing)), None)
        if closing is not None and closing.name != name:
            raise JsxSyntaxError(
                f"Expected corresponding JSX closing tag for <{name}>", closing.start, node.full_text
            )
        return MarkupElement(name, self._attributes(values), (), span=(node.start, node.end))

    def visit_void_closing(self, node, visited_children):
        name = next(v for v in _values(visited_children) if isinstance(v, _TagName))
        return _Closing(name, node.start)

    def visit_jsx_opening(self, node, visited_children):
        values = _values(visited_children)
        name = next(v for v in values if isinstance(v, _TagName))
        return _Opening(name, self._attributes(values), node.start)

    def visit_jsx_closing(self, node, visited_children):
        name = next(v for v in _values(visited_children) if isinstance(v, _TagName))
        return _Closing(name, node.start)

    def visit_jsx_paired(self, node, visited_children):
        values = _values(visited_children)
        opening = values[0]
        closing = values[-1] if isinstance(values[-1], _Closing) else None
        if closing is None or closing.name != opening.name:
            pos = closing.start if closing is not None else node.end
            raise JsxSyntaxError(
                f"Expected corresponding JSX closing tag for <{opening.name}>", pos, node.full_text
            )
        children = tuple(values[1:-1])
        return MarkupElement(opening.name, opening.attributes, children, span=(node.start, node.end))

    def visit_jsx_fragment(self, node, visited_children):
        return MarkupFragment(tuple(_values(visited_children)), span=(node.start, node.end))

    def visit_jsx_spread_attribute(self, node, visited_children):
        return MarkupSpreadAttribute(_values(visited_children)[0], span=(node.start, node.end))

    def visit_jsx_plain_attribute(self, node, visited_children):
        values = _values(visited_children)
        value = values[1] if len(values) > 1 else None
        return MarkupAttribute(str(values[0]), value, span=(node.start, node.end))

    def visit_jsx_string(self, node, _):
        return Literal(html.unescape(node.text[1:-1]), span=(node.start, node.end))

    def visit_jsx_text(self, node, _):
        return MarkupText(html.unescape(node.text), span=(node.start, node.end))

    def visit_jsx_expression_container(self, node, visited_children):
        values = _values(visited_children)
        return ExpressionContainer(values[0] if values else None, span=(node.start, node.end))

    # -------------------------------------------------------- operators

    def visit_conditional_expression(self, node, visited_children):
        values = _values(visited_children)
        if len(values) == 1:
            return values[0]
        test, consequent, alternate = values
        return Conditional(test, consequent, alternate, span=(node.start, node.end))

    def visit_binary_operator(self, node, _):
        return _Op(node.children[0].text)

    def visit_binary_expression(self, node, visited_children):
        values = _values(visited_children)
        if len(values) == 1:
            return values[0]
        return _fold_binary(values[0::2], values[1::2])

    def visit_unary_operator(self, node, _):
        op = _Op(node.children[0].text)
        op.start = node.start
        return op

    def visit_unary_expression(self, node, visited_children):
        values = _values(visited_children)
        operand = values[-1]
        for op in reversed(values[:-1]):
            operand = Unary(str(op), operand, span=(op.start, operand.span[1]))
        return operand

    # -------------------------------------------------------- member / call chains

    def visit_postfix_expression(self, node, visited_children):
        values = _values(visited_children)
        if len(values) == 1:
            return values[0]
        expression, optional = _fold_postfix(values[0], values[1:], node.start)
        if optional:
            return OptionalChain(expression, span=(node.start, node.end))
        return expression

    def visit_new_callee(self, node, visited_children):
        values = _values(visited_children)
        return _fold_postfix(values[0], values[1:], node.start)[0]

    def visit_new_expression(self, node, visited_children):
        values = _values(visited_children)
        args = values[1].args if len(values) > 1 else ()
        return New(values[0], args, span=(node.start, node.end))

    def visit_property_name_token(self, node, _):
        return _Name(node.children[0].text)

    def visit_dot_member(self, node, visited_children):
        return _MemberOp(str(_values(visited_children)[0]), False, False, node.end)

    def visit_optional_member(self, node, visited_children):
        return _MemberOp(str(_values(visited_children)[0]), False, True, node.end)

    def visit_computed_member(self, node, visited_children):
        return _MemberOp(_values(visited_children)[0], True, False, node.end)

    def visit_optional_computed_member(self, node, visited_children):
        return _MemberOp(_values(visited_children)[0], True, True, node.end)

    def visit_call_arguments(self, node, visited_children):
        return _CallOp(tuple(_values(visited_children)), False, node.end)

    def visit_optional_call(self, node, visited_children):
        call = _values(visited_children)[0]
        return _CallOp(call.args, True, node.end)

    def visit_spread_element(self, node, visited_children):
        return SpreadElement(_values(visited_children)[0], span=(node.start, node.end))

    # -------------------------------------------------------- primaries

    def visit_literal_keyword(self, node, _):
        word = node.children[0].text
        value = {"true": True, "false": False, "null": None}[word]
        return Literal(value, span=(node.start, node.end))

    def visit_number(self, node, _):
        return Literal(_parse_number(node.children[0].text), span=(node.start, node.end))

    def visit_string(self, node, _):
        raw = node.children[0].text
        return Literal(cook_string(raw[1:-1]), span=(node.start, node.end))

    def visit_template_chars(self, node, _):
        return _Chunk(cook_string(node.text))

    def visit_template_literal(self, node, visited_children):
        quasis = [""]
        expressions = []
        for value in _values(visited_children):
            if isinstance(value, _Chunk):
                quasis[-1] += value
            else:
                expressions.append(value)
                quasis.append("")
        return TemplateLiteral(tuple(str(q) for q in quasis), tuple(expressions), span=(node.start, node.end))

    def visit_this_keyword(self, node, _):
        return ThisReference(span=(node.start, node.end))

    def visit_identifier_name(self, node, _):
        return _Name(node.children[0].text)

    def visit_identifier(self, node, visited_children):
        return Identifier(str(_values(visited_children)[0]), span=(node.start, node.end))

    def visit_array_slot(self, node, visited_children):
        values = _values(visited_children)
        return values[0] if values else _HOLE

    def visit_array_literal(self, node, visited_children):
        slots = _values(visited_children)
        if slots and slots[-1] is _HOLE:
            # `[a, b,]` and `[]` end in an empty slot that is not a hole
            slots.pop()
        elements = tuple(None if s is _HOLE else s for s in slots)
        return ArrayLiteral(elements, span=(node.start, node.end))

    def visit_computed_key(self, node, visited_children):
        return _Computed(_values(visited_children)[0])

    def visit_keyed_property(self, node, visited_children):
        key_marker, value = _values(visited_children)
        key, computed = _property_key(key_marker)
        return Property(key, value, computed, span=(node.start, node.end))

    def visit_shorthand_property(self, node, visited_children):
        ident = _values(visited_children)[0]
        return Property(ident.name, ident, False, span=(node.start, node.end))

    def visit_object_literal(self, node, visited_children):
        return ObjectLiteral(tuple(_values(visited_children)), span=(node.start, node.end))

    # -------------------------------------------------------- functions and patterns

    def visit_async_keyword(self, node, _):
        return _ASYNC

    def visit_parenthesized_parameters(self, node, visited_children):
        return _Params(_values(visited_children))

    def visit_arrow_function(self, node, visited_children):
        values = _values(visited_children)
        is_async = values[0] is _ASYNC
        if is_async:
            values = values[1:]
        params, body = values
        if not isinstance(params, _Params):
            params = (str(params),)
        params = tuple(str(p) if isinstance(p, _Name) else p for p in params)
        return ArrowFunction(params, body, is_async, span=(node.start, node.end))

    def visit_rest_element(self, node, visited_children):
        target = _values(visited_children)[0]
        return RestElement(str(target) if isinstance(target, _Name) else target, span=(node.start, node.end))

    def visit_binding_element(self, node, visited_children):
        values = _values(visited_children)
        target = str(values[0]) if isinstance(values[0], _Name) else values[0]
        if len(values) == 1:
            return target
        return DefaultPattern(target, values[1], span=(node.start, node.end))

    def visit_pattern_rest(self, node, visited_children):
        return RestElement(str(_values(visited_children)[0]), span=(node.start, node.end))

    def visit_keyed_pattern(self, node, visited_children):
        key_marker, value = _values(visited_children)
        key, computed = _property_key(key_marker)
        return PatternProperty(key, value, computed, span=(node.start, node.end))

    def visit_shorthand_pattern(self, node, visited_children):
        values = _values(visited_children)
        name = str(values[0])
        value = DefaultPattern(name, values[1], span=(node.start, node.end)) if len(values) > 1 else name
        return PatternProperty(name, value, False, span=(node.start, node.end))

    def visit_object_pattern(self, node, visited_children):
        members = _values(visited_children)
        rest = None
        if members and isinstance(members[-1], RestElement):
            rest = members.pop().argument
        return ObjectPattern(tuple(members), rest, span=(node.start, node.end))

    def visit_array_pattern_slot(self, node, visited_children):
        values = _values(visited_children)
        return values[0] if values else _HOLE

    def visit_array_pattern(self, node, visited_children):
        slots = _values(visited_children)
        if slots and slots[-1] is _HOLE:
            slots.pop()
        rest = None
        if slots and isinstance(slots[-1], RestElement):
            rest = slots.pop().argument
        elements = tuple(None if s is _HOLE else s for s in slots)
        return ArrayPattern(elements, rest, span=(node.start, node.end))

    # -------------------------------------------------------- statements

    def visit_block_statement(self, node, visited_children):
        return Block(tuple(_values(visited_children)), span=(node.start, node.end))

    def visit_declaration_kind(self, node, _):
        return _Kind(node.children[0].text)

    def visit_declarator(self, node, visited_children):
        values = _values(visited_children)
        target = str(values[0]) if isinstance(values[0], _Name) else values[0]
        init = values[1] if len(values) > 1 else None
        return Declarator(target, init, span=(node.start, node.end))

    def visit_variable_declaration(self, node, visited_children):
        values = _values(visited_children)
        return VariableDeclaration(str(values[0]), tuple(values[1:]), span=(node.start, node.end))

    def visit_return_statement(self, node, visited_children):
        values = _values(visited_children)
        return Return(values[0] if values else None, span=(node.start, node.end))

    def visit_if_statement(self, node, visited_children):
        values = _values(visited_children)
        alternate = values[2] if len(values) > 2 else None
        return If(values[0], values[1], alternate, span=(node.start, node.end))

    def visit_empty_statement(self, node, _):
        return EmptyStatement(span=(node.start, node.end))

    def visit_expression_statement(self, node, visited_children):
        return ExpressionStatement(_values(visited_children)[0], span=(node.start, node.end))


# ==========================================
# PUBLIC ENTRY POINTS
# ==========================================


def wrap_markup(markup: str) -> str:
    return f"<{ROOT_TAG}>{markup}</{ROOT_TAG}>"


def _syntax_error(error: ParseError) -> JsxSyntaxError:
    pos = max(error.pos, 0)
    if pos >= len(error.text):
        return JsxSyntaxError("Unexpected end of input", pos, error.text)
    return JsxSyntaxError(f"Unexpected token {error.text[pos]!r}", pos, error.text)


def _parse(rule_name: str, text: str, auto_close_void_elements: bool):
    grammar = _get_or_create_grammar(auto_close_void_elements)
    try:
        with _deep_recursion():
            tree = grammar[rule_name].parse(text)
            return AstBuilder().visit(tree)
    except ParseError as error:
        raise _syntax_error(error) from None
    except RecursionError:
        raise JsxSyntaxError("Maximum nesting depth exceeded", -1, text) from None


def parse_markup(markup: str, auto_close_void_elements: bool = False) -> MarkupElement:
    """Parse markup wrapped under the synthetic root; returns the root element."""
    return _parse("document", wrap_markup(markup), auto_close_void_elements)


def parse_expression(text: str) -> Any:
    """Parse a single expression (no surrounding markup)."""
    return _parse("standalone_expression", text, False)
