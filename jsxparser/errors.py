"""
errors.py

Fault taxonomy for jsxparser
----------------------------

Only JsxSyntaxError is ever raised (by the parser) and it is caught at the
top level by JsxParser.render(). Every other fault is instantiated and handed
to the caller's on_error callback, and the offending node degrades to None or
UNDEFINED while its siblings keep rendering.

    JsxSyntaxError             unparsable markup (whole output)
    BlacklistedTagError        node -> None
    UnrecognizedComponentError node -> render_unrecognized(name)
    UnrecognizedElementError   node -> render_unrecognized(name)
    UnresolvedCalleeError      value -> UNDEFINED
    InvocationError            value -> UNDEFINED
    MemberResolutionError      value -> UNDEFINED
    UnsupportedSyntaxError     value -> UNDEFINED
"""

from __future__ import annotations

from typing import Optional


class JsxError(Exception):
    """Base class for every fault produced while rendering markup."""


class JsxSyntaxError(JsxError):
    """Raised when the markup (or an embedded expression) cannot be parsed."""

    def __init__(self, message: str, pos: int = -1, text: str = ""):
        super().__init__(message)
        self.message = message
        self.pos = pos
        self.text = text

    @property
    def line(self) -> Optional[int]:
        if self.pos < 0:
            return None
        return self.text.count("\n", 0, self.pos) + 1

    @property
    def column(self) -> Optional[int]:
        # 0-based, like most JavaScript parsers report it
        if self.pos < 0:
            return None
        return self.pos - (self.text.rfind("\n", 0, self.pos) + 1)

    def __str__(self) -> str:
        if self.pos < 0:
            return self.message
        return f"{self.message} ({self.line}:{self.column})"


class BlacklistedTagError(JsxError):
    """A tag matched the tag blacklist and was dropped."""

    def __init__(self, tag: str):
        super().__init__(f"The tag <{tag}> is blacklisted, and will not be rendered.")
        self.tag = tag


class UnrecognizedComponentError(JsxError):
    """components_only is on and the tag is not a registered component."""

    def __init__(self, tag: str):
        super().__init__(f"The component <{tag}> is unrecognized, and will not be rendered.")
        self.tag = tag


class UnrecognizedElementError(JsxError):
    """Unknown elements are disallowed and the tag is not a known HTML element."""

    def __init__(self, tag: str):
        super().__init__(f"The tag <{tag}> is unrecognized in this browser, and will not be rendered.")
        self.tag = tag


class UnresolvedCalleeError(JsxError):
    """The callee of a call expression resolved to null/undefined."""

    def __init__(self, expression: str):
        super().__init__(
            f"The expression '{expression}' could not be resolved, "
            "resulting in an undefined return value."
        )
        self.expression = expression


class InvocationError(JsxError):
    """A host callable (or constructor) raised while being invoked."""

    def __init__(self, expression: str, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Invoking '{expression}' failed{detail}")
        self.expression = expression
        self.__cause__ = cause


class MemberResolutionError(JsxError):
    """A non-optional member access hit null/undefined part-way along its path."""

    def __init__(self, root: str, path):
        joined = '"]["'.join(str(p) for p in path)
        super().__init__(f'Unable to parse {root}["{joined}"]')
        self.root = root
        self.path = list(path)


class UnsupportedSyntaxError(JsxError):
    """The markup used a construct the evaluator deliberately does not run."""
