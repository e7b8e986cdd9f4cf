"""Arithmetic reducer for kflisp.

builtin_op folds an operator left-to-right over already-evaluated operands.
All integer arithmetic is 64-bit two's-complement: results that leave the
range wrap around instead of growing, so (+ 9223372036854775807 1) is
-9223372036854775808. Division and remainder truncate toward zero.
"""

from __future__ import annotations
from typing import Callable, Optional, Sequence

from kflisp.types.value import Value, Number, Error, error, number, wrap_int64
from kflisp.types.operator import Operator

ERR_NOT_NUMBER = "Cannot operate on non-number"
ERR_DIV_ZERO = "Division by zero!"
ERR_MOD_ZERO = "Modulo by zero!"
ERR_NEG_EXPONENT = "Negative exponent!"
ERR_BAD_OP = "Unknown operator!"
ERR_NO_OPERANDS = "Operator needs at least one operand!"


# -------------------------------
# Integer primitives
# -------------------------------
def trunc_div(a: int, b: int) -> int:
    """Quotient rounded toward zero (Python's // rounds toward -inf)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * trunc_div(a, b)


def _add(x: int, y: int) -> int | Error:
    return wrap_int64(x + y)


def _sub(x: int, y: int) -> int | Error:
    return wrap_int64(x - y)


def _mul(x: int, y: int) -> int | Error:
    return wrap_int64(x * y)


def _div(x: int, y: int) -> int | Error:
    if y == 0:
        return error(ERR_DIV_ZERO)
    return wrap_int64(trunc_div(x, y))


def _mod(x: int, y: int) -> int | Error:
    if y == 0:
        return error(ERR_MOD_ZERO)
    return trunc_mod(x, y)


def _pow(x: int, y: int) -> int | Error:
    if y < 0:
        return error(ERR_NEG_EXPONENT)
    # modular exponentiation keeps huge exponents cheap; same bits as wrapping
    return wrap_int64(pow(x, y, 2 ** 64))


STEPS: dict[Operator, Callable[[int, int], int | Error]] = {
    Operator.ADD: _add,
    Operator.SUB: _sub,
    Operator.MUL: _mul,
    Operator.DIV: _div,
    Operator.MOD: _mod,
    Operator.POW: _pow,
}


# -------------------------------
# Reducer
# -------------------------------
def builtin_op(op: Operator | str, operands: Sequence[Value]) -> Value:
    resolved: Optional[Operator] = _resolve(op)
    if resolved is None:
        return error(ERR_BAD_OP)

    if any(not isinstance(v, Number) for v in operands):
        return error(ERR_NOT_NUMBER)
    if not operands:
        return error(ERR_NO_OPERANDS)

    values = [v.value for v in operands]

    # (- x) negates
    if resolved is Operator.SUB and len(values) == 1:
        return number(wrap_int64(-values[0]))

    step = STEPS[resolved]
    acc = values[0]
    for y in values[1:]:
        result = step(acc, y)
        if isinstance(result, Error):
            return result
        acc = result
    return number(acc)


def _resolve(op: Operator | str) -> Optional[Operator]:
    if isinstance(op, Operator):
        return op
    try:
        return Operator(op)
    except ValueError:
        return None
