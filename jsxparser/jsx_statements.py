"""
Statement interpreter for block-bodied arrow functions.

Covers exactly what display callbacks need: const/let/var declarations
(with destructuring), return, if/else, expression statements, nested
blocks and empty statements. There are no loops and no assignment, so a
block body always terminates.

Identifiers inside a block see its own declarations, the parameters, the
scope the arrow was written in, and then ambient globals. Caller bindings
are reached through `this`.
"""

from __future__ import annotations

import logging

from .errors import UnsupportedSyntaxError
from .js_values import UNDEFINED, truthy
from .jsx_ast import (
    Block,
    EmptyStatement,
    ExpressionStatement,
    If,
    Return,
    VariableDeclaration,
)

logger = logging.getLogger(__name__)

# Marks "fell off the end of the statement" as opposed to `return undefined`
_NO_RETURN = object()


class StatementInterpreter:
    def __init__(self, evaluator):
        self.evaluator = evaluator

    def run(self, block: Block, scope):
        result = self._execute_block(block, scope)
        return UNDEFINED if result is _NO_RETURN else result

    def _execute_block(self, block: Block, scope):
        local = scope.new_child({})
        for statement in block.body:
            result = self.execute(statement, local)
            if result is not _NO_RETURN:
                return result
        return _NO_RETURN

    def execute(self, statement, scope):
        evaluate = self.evaluator.evaluate

        if isinstance(statement, Return):
            if statement.argument is None:
                return UNDEFINED
            return evaluate(statement.argument, scope)

        if isinstance(statement, VariableDeclaration):
            layer = scope.maps[0]
            for declarator in statement.declarations:
                value = UNDEFINED if declarator.init is None else evaluate(declarator.init, scope)
                self.evaluator.bind_pattern(declarator.target, value, layer, scope)
            return _NO_RETURN

        if isinstance(statement, ExpressionStatement):
            evaluate(statement.expression, scope)
            return _NO_RETURN

        if isinstance(statement, If):
            if truthy(evaluate(statement.test, scope)):
                return self.execute(statement.consequent, scope)
            if statement.alternate is not None:
                return self.execute(statement.alternate, scope)
            return _NO_RETURN

        if isinstance(statement, Block):
            return self._execute_block(statement, scope)

        if isinstance(statement, EmptyStatement):
            return _NO_RETURN

        logger.debug("unsupported statement %s", type(statement).__name__)
        self.evaluator.report(UnsupportedSyntaxError(f"Unsupported statement: {type(statement).__name__}"))
        return _NO_RETURN
