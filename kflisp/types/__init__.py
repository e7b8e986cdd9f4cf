from kflisp.types.value import (
    Value,
    Number,
    Error,
    Symbol,
    Expression,
    number,
    error,
    symbol,
    empty_expression,
    wrap_int64,
    INT64_MIN,
    INT64_MAX,
)
from kflisp.types.operator import Operator, OPERATOR_DOCS
