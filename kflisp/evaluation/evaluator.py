"""Core evaluator for kflisp.

Folds a Value tree bottom-up into a single Value. Evaluation never raises
for a wrong program: every failure is an Error value, and the first Error
found among an expression's children (left to right) replaces the whole
expression.
"""

from __future__ import annotations

import logging

from kflisp.types.value import Value, Expression, Error, Symbol, error
from kflisp.types.operator import Operator
from kflisp.evaluation.builtins import builtin_op

logger = logging.getLogger(__name__)

ERR_BAD_HEAD = "S-expression does not start with symbol!"


def evaluate(v: Value) -> Value:
    match v:
        case Expression():
            return eval_sexpr(v)
    # --- Numbers, Errors and Symbols evaluate to themselves ---
    return v


def eval_sexpr(expr: Expression) -> Value:
    # Children first, left to right, in place.
    for i, child in enumerate(expr.cells):
        expr.cells[i] = evaluate(child)

    # First error wins; everything else is discarded.
    for i, child in enumerate(expr.cells):
        if isinstance(child, Error):
            logger.debug("short-circuit on %r", child)
            return expr.take(i)

    match len(expr):
        case 0:
            return expr
        case 1:
            return expr.take(0)

    head, operands = expr.detach_head()
    if not isinstance(head, Symbol):
        return error(ERR_BAD_HEAD)

    op = Operator.from_symbol(head)
    result = builtin_op(op if op is not None else head.name, operands.cells)
    logger.debug("%s %s -> %r", head.name, operands, result)
    return result
