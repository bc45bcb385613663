"""
function_proxy.py

Rebindable closures
-------------------

A ClosureProxy pairs a target callable with a reassignable captured scope.
The target always receives the effective context as its first argument:

    effective = {**proxy.scope, **explicit_context}

Entry points:

    proxy(*args)                           explicit context = none
    proxy.call_with_context(ctx, *args)
    proxy.apply(ctx, args)                 spread-argument form
    proxy.bind(ctx)(*args)                 BoundClosure, ctx fixed

`scope` is read at call time, so reassigning it affects later invocations
only (bound closures included).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence


class ClosureProxy:
    def __init__(self, target: Callable[..., Any], scope: Optional[Mapping] = None):
        if not callable(target):
            raise TypeError("ClosureProxy target must be callable")
        self.target = target
        self.scope = dict(scope) if scope is not None else {}

    def _effective_context(self, context: Any) -> Any:
        if context is None:
            return dict(self.scope)
        if isinstance(context, Mapping):
            merged = dict(self.scope)
            merged.update(context)
            return merged
        # non-mapping receivers replace the captured scope wholesale
        return context

    def __call__(self, *args):
        return self.call_with_context(None, *args)

    def call_with_context(self, context: Any, *args):
        return self.target(self._effective_context(context), *args)

    def apply(self, context: Any, args: Sequence[Any] = ()):
        return self.call_with_context(context, *tuple(args))

    def bind(self, context: Any) -> "BoundClosure":
        return BoundClosure(self, context)

    def __repr__(self):
        return f"ClosureProxy({self.target!r})"


class BoundClosure:
    """A ClosureProxy with its explicit context fixed."""

    def __init__(self, proxy: ClosureProxy, context: Any):
        self.proxy = proxy
        self.context = context

    def __call__(self, *args):
        return self.proxy.call_with_context(self.context, *args)

    def call_with_context(self, context: Any, *args):
        # a bound receiver cannot be replaced
        return self(*args)

    def apply(self, context: Any, args: Sequence[Any] = ()):
        return self(*tuple(args))

    def bind(self, context: Any) -> "BoundClosure":
        return self

    def __repr__(self):
        return f"BoundClosure({self.proxy.target!r})"
