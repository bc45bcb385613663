"""
js_builtins.py

Prototype methods and ambient globals for the sandbox
-----------------------------------------------------

Member access on host values goes through get_property(), which exposes:

    - mapping entries by key
    - string / array indices, `length`, and the methods below
    - number and boolean methods
    - public attributes of any other host object

Attribute names starting with "_" are never reachable from markup.

DEFAULT_GLOBALS is the read-only table of ambient names (Math, JSON, Date,
...) that identifiers fall back to when the host permits it.
"""

from __future__ import annotations

import functools
import inspect
import json
import math
import random
import re
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Any, Optional
from urllib.parse import quote, unquote

from .js_values import (
    INFINITY,
    NAN,
    UNDEFINED,
    binary_operation,
    format_number,
    is_nullish,
    is_number,
    is_sequence,
    is_undefined,
    normalize_number,
    same_value_zero,
    strict_equals,
    to_integer,
    to_js_string,
    to_number,
    to_property_key,
    truthy,
)

# ==========================================
# CALLBACK INVOCATION
# ==========================================


def _positional_arity(fn) -> Optional[int]:
    """Number of positional parameters, or None when *args is accepted."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    count = 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def call_callback(fn, *args):
    """
    Call fn the way array methods call their callbacks: (item, index, array)
    trimmed to what a plain Python callable accepts.
    """
    if not callable(fn):
        raise TypeError(f"{to_js_string(fn)} is not a function")
    arity = _positional_arity(fn)
    if arity is not None:
        args = args[:arity]
    return fn(*args)


# ==========================================
# STRING METHODS
# ==========================================


def _str_at(s, index=UNDEFINED):
    i = to_integer(index)
    if i < 0:
        i += len(s)
    return s[i] if 0 <= i < len(s) else UNDEFINED


def _str_char_at(s, index=0):
    i = to_integer(index)
    return s[i] if 0 <= i < len(s) else ""


def _str_char_code_at(s, index=0):
    i = to_integer(index)
    return ord(s[i]) if 0 <= i < len(s) else NAN


def _str_concat(s, *parts):
    return s + "".join(to_js_string(p) for p in parts)


def _str_ends_with(s, search, end=UNDEFINED):
    stop = len(s) if is_undefined(end) else max(0, min(to_integer(end), len(s)))
    return s[:stop].endswith(to_js_string(search))


def _str_includes(s, search, position=0):
    return to_js_string(search) in s[max(0, to_integer(position)):]


def _str_index_of(s, search, position=0):
    return s.find(to_js_string(search), max(0, to_integer(position)))


def _str_last_index_of(s, search):
    return s.rfind(to_js_string(search))


def _pad(s, length, fill, at_start):
    target = to_integer(length)
    fill = " " if is_undefined(fill) else to_js_string(fill)
    if target <= len(s) or not fill:
        return s
    padding = (fill * (target // len(fill) + 1))[: target - len(s)]
    return padding + s if at_start else s + padding


def _str_pad_start(s, length, fill=UNDEFINED):
    return _pad(s, length, fill, True)


def _str_pad_end(s, length, fill=UNDEFINED):
    return _pad(s, length, fill, False)


def _str_repeat(s, count=0):
    times = to_integer(count)
    if times < 0:
        raise ValueError("Invalid count value")
    return s * times


def _replace(s, pattern, replacement, count):
    if isinstance(pattern, re.Pattern):
        if callable(replacement):
            return pattern.sub(lambda m: to_js_string(call_callback(replacement, m.group(0))), s, count=count)
        return pattern.sub(to_js_string(replacement).replace("\\", "\\\\"), s, count=count)
    needle = to_js_string(pattern)
    if callable(replacement):
        pieces = s.split(needle, count if count else -1)
        out = pieces[0]
        for piece in pieces[1:]:
            out += to_js_string(call_callback(replacement, needle)) + piece
        return out
    return s.replace(needle, to_js_string(replacement), count if count else -1)


def _str_replace(s, pattern, replacement=UNDEFINED):
    return _replace(s, pattern, replacement, 1)


def _str_replace_all(s, pattern, replacement=UNDEFINED):
    return _replace(s, pattern, replacement, 0)


def _str_search(s, pattern):
    regex = pattern if isinstance(pattern, re.Pattern) else re.compile(to_js_string(pattern))
    match = regex.search(s)
    return match.start() if match else -1


def _str_slice(s, start=0, end=UNDEFINED):
    return s[to_integer(start): None if is_undefined(end) else to_integer(end)]


def _str_split(s, separator=UNDEFINED, limit=UNDEFINED):
    if is_undefined(separator):
        parts = [s]
    elif isinstance(separator, re.Pattern):
        parts = separator.split(s)
    else:
        sep = to_js_string(separator)
        parts = list(s) if sep == "" else s.split(sep)
    if not is_undefined(limit):
        parts = parts[: max(0, to_integer(limit))]
    return parts


def _str_starts_with(s, search, position=0):
    return s.startswith(to_js_string(search), max(0, to_integer(position)))


def _str_substr(s, start=0, length=UNDEFINED):
    begin = to_integer(start)
    if begin < 0:
        begin = max(len(s) + begin, 0)
    if is_undefined(length):
        return s[begin:]
    return s[begin: begin + max(0, to_integer(length))]


def _str_substring(s, start=0, end=UNDEFINED):
    a = max(0, min(to_integer(start), len(s)))
    b = len(s) if is_undefined(end) else max(0, min(to_integer(end), len(s)))
    if a > b:
        a, b = b, a
    return s[a:b]


STRING_METHODS = {
    "at": _str_at,
    "charAt": _str_char_at,
    "charCodeAt": _str_char_code_at,
    "concat": _str_concat,
    "endsWith": _str_ends_with,
    "includes": _str_includes,
    "indexOf": _str_index_of,
    "lastIndexOf": _str_last_index_of,
    "padEnd": _str_pad_end,
    "padStart": _str_pad_start,
    "repeat": _str_repeat,
    "replace": _str_replace,
    "replaceAll": _str_replace_all,
    "search": _str_search,
    "slice": _str_slice,
    "split": _str_split,
    "startsWith": _str_starts_with,
    "substr": _str_substr,
    "substring": _str_substring,
    "toLowerCase": lambda s: s.lower(),
    "toString": lambda s: s,
    "toUpperCase": lambda s: s.upper(),
    "trim": lambda s: s.strip(),
    "trimEnd": lambda s: s.rstrip(),
    "trimStart": lambda s: s.lstrip(),
}

# ==========================================
# ARRAY METHODS
# ==========================================


def _arr_at(arr, index=UNDEFINED):
    i = to_integer(index)
    if i < 0:
        i += len(arr)
    return arr[i] if 0 <= i < len(arr) else UNDEFINED


def _arr_concat(arr, *items):
    result = list(arr)
    for item in items:
        if is_sequence(item):
            result.extend(item)
        else:
            result.append(item)
    return result


def _arr_every(arr, fn):
    return all(truthy(call_callback(fn, item, i, arr)) for i, item in enumerate(arr))


def _arr_filter(arr, fn):
    return [item for i, item in enumerate(arr) if truthy(call_callback(fn, item, i, arr))]


def _arr_find(arr, fn):
    for i, item in enumerate(arr):
        if truthy(call_callback(fn, item, i, arr)):
            return item
    return UNDEFINED


def _arr_find_index(arr, fn):
    for i, item in enumerate(arr):
        if truthy(call_callback(fn, item, i, arr)):
            return i
    return -1


def _flatten_into(result, items, depth):
    for item in items:
        if is_sequence(item) and depth > 0:
            _flatten_into(result, item, depth - 1)
        else:
            result.append(item)
    return result


def _arr_flat(arr, depth=1):
    return _flatten_into([], arr, to_integer(depth, default=1))


def _arr_for_each(arr, fn):
    for i, item in enumerate(arr):
        call_callback(fn, item, i, arr)
    return UNDEFINED


def _arr_includes(arr, value, start=0):
    return any(same_value_zero(item, value) for item in list(arr)[to_integer(start):])


def _arr_index_of(arr, value, start=0):
    begin = to_integer(start)
    if begin < 0:
        begin = max(len(arr) + begin, 0)
    for i in range(begin, len(arr)):
        if strict_equals(arr[i], value):
            return i
    return -1


def _arr_last_index_of(arr, value):
    for i in range(len(arr) - 1, -1, -1):
        if strict_equals(arr[i], value):
            return i
    return -1


def _arr_join(arr, separator=UNDEFINED):
    sep = "," if is_undefined(separator) else to_js_string(separator)
    return sep.join("" if is_nullish(item) else to_js_string(item) for item in arr)


def _arr_map(arr, fn):
    return [call_callback(fn, item, i, arr) for i, item in enumerate(arr)]


def _arr_reduce(arr, fn, *initial):
    items = list(arr)
    if initial:
        accumulator, start = initial[0], 0
    elif items:
        accumulator, start = items[0], 1
    else:
        raise TypeError("Reduce of empty array with no initial value")
    for i in range(start, len(items)):
        accumulator = call_callback(fn, accumulator, items[i], i, arr)
    return accumulator


def _arr_reverse(arr):
    if isinstance(arr, list):
        arr.reverse()
        return arr
    return list(reversed(arr))


def _arr_slice(arr, start=0, end=UNDEFINED):
    return list(arr[to_integer(start): None if is_undefined(end) else to_integer(end)])


def _arr_some(arr, fn):
    return any(truthy(call_callback(fn, item, i, arr)) for i, item in enumerate(arr))


def _default_sort_key(item):
    # undefined sorts last, everything else by its string form
    return (is_undefined(item), "" if is_undefined(item) else to_js_string(item))


def _arr_sort(arr, comparator=UNDEFINED):
    if is_undefined(comparator):
        key = _default_sort_key
    else:
        def compare(a, b):
            order = to_number(call_callback(comparator, a, b))
            if isinstance(order, float) and math.isnan(order):
                return 0
            return (order > 0) - (order < 0)
        key = functools.cmp_to_key(compare)
    if isinstance(arr, list):
        arr.sort(key=key)
        return arr
    return sorted(arr, key=key)


ARRAY_METHODS = {
    "at": _arr_at,
    "concat": _arr_concat,
    "every": _arr_every,
    "filter": _arr_filter,
    "find": _arr_find,
    "findIndex": _arr_find_index,
    "flat": _arr_flat,
    "forEach": _arr_for_each,
    "includes": _arr_includes,
    "indexOf": _arr_index_of,
    "join": _arr_join,
    "lastIndexOf": _arr_last_index_of,
    "map": _arr_map,
    "reduce": _arr_reduce,
    "reverse": _arr_reverse,
    "slice": _arr_slice,
    "some": _arr_some,
    "sort": _arr_sort,
    "toString": _arr_join,
}

# ==========================================
# NUMBER / BOOLEAN METHODS
# ==========================================


def _num_to_fixed(x, digits=0):
    places = to_integer(digits)
    if not 0 <= places <= 100:
        raise ValueError("toFixed() digits argument must be between 0 and 100")
    if math.isnan(x) or math.isinf(x):
        return format_number(x)
    return f"{x:.{places}f}"


def _num_to_precision(x, precision=UNDEFINED):
    if is_undefined(precision) or math.isnan(x) or math.isinf(x):
        return format_number(x)
    places = to_integer(precision)
    if not 1 <= places <= 100:
        raise ValueError("toPrecision() argument must be between 1 and 100")
    text = f"{float(x):#.{places}g}"
    if "e" in text:
        mantissa, exponent = text.split("e")
        sign = "-" if exponent.startswith("-") else "+"
        return f"{mantissa.rstrip('.')}e{sign}{int(exponent.lstrip('+-'))}"
    return text.rstrip(".")


_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _num_to_string(x, radix=10):
    base = to_integer(radix, default=10)
    if base == 10 or not float(x).is_integer():
        return format_number(x)
    if not 2 <= base <= 36:
        raise ValueError("toString() radix must be between 2 and 36")
    n = int(x)
    if n == 0:
        return "0"
    digits = []
    negative, n = n < 0, abs(n)
    while n:
        n, rem = divmod(n, base)
        digits.append(_DIGITS[rem])
    return ("-" if negative else "") + "".join(reversed(digits))


NUMBER_METHODS = {
    "toFixed": _num_to_fixed,
    "toPrecision": _num_to_precision,
    "toString": _num_to_string,
}

BOOLEAN_METHODS = {
    "toString": lambda b: to_js_string(b),
}

# ==========================================
# MEMBER ACCESS
# ==========================================


def _index_key(key):
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return None


def _mapping_get(target: Mapping, key):
    try:
        if key in target:
            return target[key]
    except TypeError:
        return UNDEFINED
    alternate = str(key) if isinstance(key, int) else _index_key(key)
    if alternate is not None and alternate in target:
        return target[alternate]
    return UNDEFINED


def get_property(target: Any, key: Any) -> Any:
    """Read `target[key]` with JavaScript-flavoured lookup rules."""
    if is_nullish(target):
        return UNDEFINED
    key = to_property_key(key)

    if isinstance(target, Mapping):
        return _mapping_get(target, key)

    if isinstance(target, (str, list, tuple)):
        index = _index_key(key)
        if index is not None:
            return target[index] if 0 <= index < len(target) else UNDEFINED
        if key == "length":
            return len(target)
        methods = STRING_METHODS if isinstance(target, str) else ARRAY_METHODS
        method = methods.get(key)
        return functools.partial(method, target) if method else UNDEFINED

    if isinstance(target, bool):
        method = BOOLEAN_METHODS.get(key)
        return functools.partial(method, target) if method else UNDEFINED

    if is_number(target):
        method = NUMBER_METHODS.get(key)
        return functools.partial(method, target) if method else UNDEFINED

    if isinstance(key, str) and key and not key.startswith("_"):
        return getattr(target, key, UNDEFINED)
    return UNDEFINED


def own_entries(value: Any):
    """(key, value) pairs an object spread copies, in key order."""
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, (str, list, tuple)):
        return [(str(i), item) for i, item in enumerate(value)]
    # plain host objects expose their public instance attributes
    if not callable(value) and hasattr(value, "__dict__"):
        return [(k, v) for k, v in vars(value).items() if not k.startswith("_")]
    return []


# ==========================================
# AMBIENT GLOBALS
# ==========================================


def _numbers(values):
    return [to_number(v) for v in values]


class JsMath:
    PI = math.pi
    E = math.e
    LN2 = math.log(2)
    LN10 = math.log(10)
    LOG2E = 1 / math.log(2)
    LOG10E = 1 / math.log(10)
    SQRT2 = math.sqrt(2)
    SQRT1_2 = math.sqrt(0.5)

    @staticmethod
    def max(*values):
        numbers = _numbers(values)
        if any(isinstance(n, float) and math.isnan(n) for n in numbers):
            return NAN
        return max(numbers) if numbers else -INFINITY

    @staticmethod
    def min(*values):
        numbers = _numbers(values)
        if any(isinstance(n, float) and math.isnan(n) for n in numbers):
            return NAN
        return min(numbers) if numbers else INFINITY

    @staticmethod
    def abs(x=UNDEFINED):
        return abs(to_number(x))

    @staticmethod
    def floor(x=UNDEFINED):
        n = to_number(x)
        return n if math.isnan(n) or math.isinf(n) else math.floor(n)

    @staticmethod
    def ceil(x=UNDEFINED):
        n = to_number(x)
        return n if math.isnan(n) or math.isinf(n) else math.ceil(n)

    @staticmethod
    def round(x=UNDEFINED):
        n = to_number(x)
        # half-way cases round towards +Infinity
        return n if math.isnan(n) or math.isinf(n) else math.floor(n + 0.5)

    @staticmethod
    def trunc(x=UNDEFINED):
        n = to_number(x)
        return n if math.isnan(n) or math.isinf(n) else math.trunc(n)

    @staticmethod
    def sign(x=UNDEFINED):
        n = to_number(x)
        if math.isnan(n):
            return NAN
        return (n > 0) - (n < 0)

    @staticmethod
    def sqrt(x=UNDEFINED):
        n = to_number(x)
        return NAN if math.isnan(n) or n < 0 else normalize_number(math.sqrt(n))

    @staticmethod
    def cbrt(x=UNDEFINED):
        n = to_number(x)
        return normalize_number(math.copysign(abs(n) ** (1 / 3), n))

    @staticmethod
    def pow(base=UNDEFINED, exponent=UNDEFINED):
        return binary_operation("**", base, exponent)

    @staticmethod
    def exp(x=UNDEFINED):
        return normalize_number(math.exp(to_number(x)))

    @staticmethod
    def log(x=UNDEFINED):
        n = to_number(x)
        if n == 0:
            return -INFINITY
        return NAN if n < 0 or math.isnan(n) else normalize_number(math.log(n))

    @staticmethod
    def log2(x=UNDEFINED):
        n = to_number(x)
        if n == 0:
            return -INFINITY
        return NAN if n < 0 or math.isnan(n) else normalize_number(math.log2(n))

    @staticmethod
    def log10(x=UNDEFINED):
        n = to_number(x)
        if n == 0:
            return -INFINITY
        return NAN if n < 0 or math.isnan(n) else normalize_number(math.log10(n))

    @staticmethod
    def sin(x=UNDEFINED):
        return math.sin(to_number(x))

    @staticmethod
    def cos(x=UNDEFINED):
        return math.cos(to_number(x))

    @staticmethod
    def tan(x=UNDEFINED):
        return math.tan(to_number(x))

    @staticmethod
    def atan(x=UNDEFINED):
        return math.atan(to_number(x))

    @staticmethod
    def atan2(y=UNDEFINED, x=UNDEFINED):
        return math.atan2(to_number(y), to_number(x))

    @staticmethod
    def hypot(*values):
        return normalize_number(math.hypot(*_numbers(values)))

    @staticmethod
    def random():
        return random.random()


def _to_json_value(value):
    if is_undefined(value) or callable(value):
        return UNDEFINED
    if is_number(value) and isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    if isinstance(value, Mapping):
        out = {}
        for k, v in value.items():
            converted = _to_json_value(v)
            if not is_undefined(converted):
                out[to_js_string(k)] = converted
        return out
    if is_sequence(value):
        items = [_to_json_value(v) for v in value]
        return [None if is_undefined(v) else v for v in items]
    if isinstance(value, JsDate):
        return value.toISOString()
    return value


class JsJSON:
    @staticmethod
    def stringify(value=UNDEFINED, replacer=UNDEFINED, space=UNDEFINED):
        converted = _to_json_value(value)
        if is_undefined(converted):
            return UNDEFINED
        indent = None
        if is_number(space) and space > 0:
            indent = min(int(space), 10)
        elif isinstance(space, str) and space:
            indent = space[:10]
        separators = (",", ":") if indent is None else (",", ": ")
        return json.dumps(converted, indent=indent, separators=separators, ensure_ascii=False)

    @staticmethod
    def parse(text=UNDEFINED):
        return json.loads(to_js_string(text))


class JsDate:
    """The slice of Date that display markup reaches for."""

    def __init__(self, *args):
        if not args:
            self._moment = datetime.now().astimezone()
        elif len(args) == 1 and isinstance(args[0], JsDate):
            self._moment = args[0]._moment
        elif len(args) == 1 and isinstance(args[0], str):
            text = args[0].strip()
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            moment = datetime.fromisoformat(text)
            if moment.tzinfo is None:
                moment = moment.astimezone()
            self._moment = moment
        elif len(args) == 1:
            millis = to_number(args[0])
            self._moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc).astimezone()
        else:
            parts = [to_integer(a) for a in args[:7]]
            year, month = parts[0], parts[1]
            day = parts[2] if len(parts) > 2 else 1
            rest = parts[3:] + [0] * (4 - len(parts[3:]))
            base = datetime(year + month // 12, month % 12 + 1, 1)
            moment = base + timedelta(
                days=day - 1, hours=rest[0], minutes=rest[1], seconds=rest[2], milliseconds=rest[3]
            )
            self._moment = moment.astimezone()

    @staticmethod
    def now():
        return int(datetime.now(tz=timezone.utc).timestamp() * 1000)

    def getFullYear(self):
        return self._moment.year

    def getMonth(self):
        return self._moment.month - 1

    def getDate(self):
        return self._moment.day

    def getDay(self):
        return (self._moment.weekday() + 1) % 7

    def getHours(self):
        return self._moment.hour

    def getMinutes(self):
        return self._moment.minute

    def getSeconds(self):
        return self._moment.second

    def getMilliseconds(self):
        return self._moment.microsecond // 1000

    def getTime(self):
        return int(self._moment.timestamp() * 1000)

    valueOf = getTime

    def toISOString(self):
        utc = self._moment.astimezone(timezone.utc)
        return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"

    toJSON = toISOString

    def toLocaleDateString(self):
        return self._moment.strftime("%x")

    def toLocaleTimeString(self):
        return self._moment.strftime("%X")

    def toString(self):
        return self._moment.strftime("%a %b %d %Y %H:%M:%S GMT%z")

    def __str__(self):
        return self.toString()


class JsObject:
    @staticmethod
    def keys(value=UNDEFINED):
        return [key for key, _ in own_entries(value)]

    @staticmethod
    def values(value=UNDEFINED):
        return [item for _, item in own_entries(value)]

    @staticmethod
    def entries(value=UNDEFINED):
        return [[key, item] for key, item in own_entries(value)]

    @staticmethod
    def fromEntries(pairs=UNDEFINED):
        return {to_js_string(pair[0]): pair[1] for pair in pairs}


class JsArray:
    @staticmethod
    def isArray(value=UNDEFINED):
        return is_sequence(value)

    @staticmethod
    def of(*items):
        return list(items)

    @staticmethod
    def from_(iterable=UNDEFINED, map_fn=UNDEFINED):
        if isinstance(iterable, Mapping) and "length" in iterable:
            items = [UNDEFINED] * to_integer(iterable["length"])
        elif is_nullish(iterable) or isinstance(iterable, Mapping):
            items = []
        else:
            items = list(iterable)
        if is_undefined(map_fn):
            return items
        return [call_callback(map_fn, item, i) for i, item in enumerate(items)]


# "from" is a Python keyword, so the attribute is attached after the class body
setattr(JsArray, "from", staticmethod(JsArray.from_))

_FLOAT_PREFIX = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(value=UNDEFINED):
    match = _FLOAT_PREFIX.match(to_js_string(value).lstrip())
    if not match:
        return NAN
    return to_number(match.group(0))


def parse_int(value=UNDEFINED, radix=UNDEFINED):
    text = to_js_string(value).strip()
    sign = 1
    if text[:1] in "+-" and text:
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    base = 0 if is_undefined(radix) else to_integer(radix)
    if base in (0, 16) and text[:2].lower() == "0x":
        text, base = text[2:], 16
    if base == 0:
        base = 10
    if not 2 <= base <= 36:
        return NAN
    digits = ""
    for char in text.lower():
        if char in _DIGITS[:base]:
            digits += char
        else:
            break
    return sign * int(digits, base) if digits else NAN


def is_nan(value=UNDEFINED):
    number = to_number(value)
    return isinstance(number, float) and math.isnan(number)


def is_finite(value=UNDEFINED):
    number = to_number(value)
    return not (isinstance(number, float) and (math.isnan(number) or math.isinf(number)))


class JsNumber:
    MAX_SAFE_INTEGER = 2 ** 53 - 1
    MIN_SAFE_INTEGER = -(2 ** 53 - 1)
    EPSILON = 2.0 ** -52
    NaN = NAN
    POSITIVE_INFINITY = INFINITY
    NEGATIVE_INFINITY = -INFINITY

    def __call__(self, value=0):
        return to_number(value)

    @staticmethod
    def isInteger(value=UNDEFINED):
        return is_number(value) and is_finite(value) and float(value).is_integer()

    @staticmethod
    def isFinite(value=UNDEFINED):
        return is_number(value) and is_finite(value)

    @staticmethod
    def isNaN(value=UNDEFINED):
        return is_number(value) and is_nan(value)

    parseFloat = staticmethod(parse_float)
    parseInt = staticmethod(parse_int)


class JsString:
    def __call__(self, value=""):
        return to_js_string(value)

    @staticmethod
    def fromCharCode(*codes):
        return "".join(chr(to_integer(c)) for c in codes)


class JsBoolean:
    def __call__(self, value=False):
        return truthy(value)


def encode_uri_component(value=UNDEFINED):
    return quote(to_js_string(value), safe="-_.!~*'()")


def decode_uri_component(value=UNDEFINED):
    return unquote(to_js_string(value))


DEFAULT_GLOBALS = MappingProxyType({
    "Math": JsMath(),
    "JSON": JsJSON(),
    "Date": JsDate,
    "Object": JsObject(),
    "Array": JsArray(),
    "Number": JsNumber(),
    "String": JsString(),
    "Boolean": JsBoolean(),
    "parseInt": parse_int,
    "parseFloat": parse_float,
    "isNaN": is_nan,
    "isFinite": is_finite,
    "encodeURIComponent": encode_uri_component,
    "decodeURIComponent": decode_uri_component,
    "undefined": UNDEFINED,
    "NaN": NAN,
    "Infinity": INFINITY,
})
