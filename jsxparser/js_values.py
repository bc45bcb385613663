"""
js_values.py

JavaScript value semantics on plain Python values
--------------------------------------------------

Mapping used throughout the evaluator:

    undefined -> UNDEFINED (singleton, falsy)
    null      -> None
    boolean   -> bool
    number    -> int | float   (integral results collapse to int)
    string    -> str
    array     -> list / tuple
    object    -> any Mapping

Coercions follow the abstract operations of the language (ToNumber,
ToString, ToPrimitive) closely enough for display-level markup
expressions; they are not a conformance-grade engine.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

# ==========================================
# UNDEFINED SENTINEL
# ==========================================


class _Undefined:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "undefined"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

NAN = float("nan")
INFINITY = float("inf")

_MAX_SAFE_INTEGER = 2 ** 53
# ToNumber accepts only JS numeric literals, not Python's "inf"/"1_000"
_NUMERIC_STRING = re.compile(
    r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)$"
)
_RADIX_STRING = re.compile(r"^0([xXbBoO])([0-9a-fA-F]+)$")
_RADIX = {"x": 16, "b": 2, "o": 8}


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_nullish(value: Any) -> bool:
    return value is None or value is UNDEFINED


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def type_tag(value: Any) -> str:
    """Coarse JS type used by the equality algorithms."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def normalize_number(value):
    """Collapse integral floats to int so results read like JS output."""
    if isinstance(value, float) and value.is_integer() and abs(value) < _MAX_SAFE_INTEGER:
        return int(value)
    return value


# ==========================================
# COERCIONS
# ==========================================


def truthy(value: Any) -> bool:
    if value is UNDEFINED or value is None:
        return False
    if isinstance(value, bool):
        return value
    if is_number(value):
        return not (value == 0 or math.isnan(value))
    if isinstance(value, str):
        return value != ""
    # arrays and objects are truthy even when empty
    return True


def to_primitive(value: Any) -> Any:
    if type_tag(value) == "object":
        return to_js_string(value)
    return value


def to_number(value: Any):
    if value is UNDEFINED:
        return NAN
    if value is None:
        return 0
    if isinstance(value, bool):
        return 1 if value else 0
    if is_number(value):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return 0
        radix = _RADIX_STRING.match(text)
        if radix:
            try:
                return int(radix.group(2), _RADIX[radix.group(1).lower()])
            except ValueError:
                return NAN
        if not _NUMERIC_STRING.match(text):
            return NAN
        if re.match(r"^[+-]?\d+$", text):
            return int(text)
        return normalize_number(float(text.replace("Infinity", "inf")))
    if isinstance(value, (list, tuple)):
        return to_number(to_js_string(value))
    return NAN


def format_number(value) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" in text:
        # Python: 1e-07 / 1e+21, JS: 1e-7 / 1e+21
        mantissa, exponent = text.split("e")
        sign = "-" if exponent.startswith("-") else "+"
        text = f"{mantissa}e{sign}{int(exponent.lstrip('+-'))}"
    return text


def to_js_string(value: Any) -> str:
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join("" if is_nullish(v) else to_js_string(v) for v in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    if callable(value):
        return "function () { [native code] }"
    return str(value)


def to_property_key(key: Any):
    """Normalise a computed member key: ints index, everything else is a string."""
    if isinstance(key, str):
        return key
    if isinstance(key, bool) or is_nullish(key):
        return to_js_string(key)
    if isinstance(key, int):
        return key
    if isinstance(key, float):
        return int(key) if key.is_integer() else format_number(key)
    return to_js_string(key)


def to_integer(value: Any, default: int = 0) -> int:
    number = to_number(value) if not is_undefined(value) else default
    if isinstance(number, float):
        if math.isnan(number):
            return 0
        if math.isinf(number):
            return _MAX_SAFE_INTEGER if number > 0 else -_MAX_SAFE_INTEGER
        return int(number)
    return number


# ==========================================
# EQUALITY
# ==========================================


def strict_equals(left: Any, right: Any) -> bool:
    left_type, right_type = type_tag(left), type_tag(right)
    if left_type != right_type:
        return False
    if left_type in ("undefined", "null"):
        return True
    if left_type in ("number", "string", "boolean"):
        return left == right
    return left is right


def same_value_zero(left: Any, right: Any) -> bool:
    if is_number(left) and is_number(right) and math.isnan(left) and math.isnan(right):
        return True
    return strict_equals(left, right)


def loose_equals(left: Any, right: Any) -> bool:
    left_type, right_type = type_tag(left), type_tag(right)
    if left_type == right_type:
        return strict_equals(left, right)
    if is_nullish(left) or is_nullish(right):
        return is_nullish(left) and is_nullish(right)
    if left_type == "boolean":
        return loose_equals(to_number(left), right)
    if right_type == "boolean":
        return loose_equals(left, to_number(right))
    if {left_type, right_type} == {"number", "string"}:
        return to_number(left) == to_number(right)
    if left_type == "object":
        return loose_equals(to_primitive(left), right)
    if right_type == "object":
        return loose_equals(left, to_primitive(right))
    return False


# ==========================================
# OPERATORS
# ==========================================


def _add(left, right):
    left, right = to_primitive(left), to_primitive(right)
    if isinstance(left, str) or isinstance(right, str):
        return to_js_string(left) + to_js_string(right)
    return normalize_number(to_number(left) + to_number(right))


def _divide(left, right):
    a, b = to_number(left), to_number(right)
    if b == 0:
        if a == 0 or math.isnan(a):
            return NAN
        return INFINITY if (a > 0) == (math.copysign(1, b) > 0) else -INFINITY
    return normalize_number(a / b)


def _remainder(left, right):
    a, b = to_number(left), to_number(right)
    if b == 0 or math.isnan(a) or math.isnan(b) or math.isinf(a):
        return NAN
    if math.isinf(b):
        return a
    if isinstance(a, int) and isinstance(b, int):
        # sign follows the dividend
        result = abs(a) % abs(b)
        return -result if a < 0 else result
    return normalize_number(math.fmod(a, b))


def _power(left, right):
    a, b = to_number(left), to_number(right)
    if isinstance(a, int) and isinstance(b, int) and 0 <= b <= 1024:
        return a ** b
    if a == 0 and b < 0:
        return INFINITY
    try:
        if a < 0 and not float(b).is_integer():
            return NAN
        return normalize_number(math.pow(a, b))
    except ZeroDivisionError:
        return INFINITY
    except OverflowError:
        return INFINITY if a > 0 or float(b) % 2 == 0 else -INFINITY
    except ValueError:
        return NAN


def _relational(op, left, right):
    left, right = to_primitive(left), to_primitive(right)
    if isinstance(left, str) and isinstance(right, str):
        a, b = left, right
    else:
        a, b = to_number(left), to_number(right)
        if math.isnan(a) or math.isnan(b):
            return False
    if op == "<":
        return a < b
    if op == "<=":
        return a <= b
    if op == ">":
        return a > b
    return a >= b


BINARY_OPERATORS = {
    "+": _add,
    "-": lambda a, b: normalize_number(to_number(a) - to_number(b)),
    "*": lambda a, b: normalize_number(to_number(a) * to_number(b)),
    "/": _divide,
    "%": _remainder,
    "**": _power,
    "<": lambda a, b: _relational("<", a, b),
    "<=": lambda a, b: _relational("<=", a, b),
    ">": lambda a, b: _relational(">", a, b),
    ">=": lambda a, b: _relational(">=", a, b),
    "==": loose_equals,
    "!=": lambda a, b: not loose_equals(a, b),
    "===": strict_equals,
    "!==": lambda a, b: not strict_equals(a, b),
}


def binary_operation(op: str, left: Any, right: Any) -> Any:
    """Apply a binary operator; unknown operators yield UNDEFINED."""
    handler = BINARY_OPERATORS.get(op)
    if handler is None:
        return UNDEFINED
    return handler(left, right)


def unary_operation(op: str, operand: Any) -> Any:
    if op == "!":
        return not truthy(operand)
    if op == "+":
        return to_number(operand)
    if op == "-":
        number = to_number(operand)
        return normalize_number(-number)
    return UNDEFINED
