from __future__ import annotations

from kflisp.errors import KflispTypeError
from kflisp.types.value import Value, Number, Error, Symbol, Expression


def to_str(v: Value) -> str:
    match v:
        case Number(value=x):
            return str(x)
        case Error(message=msg):
            return f"Error: {msg}"
        case Symbol(name=name):
            return name
        case Expression(cells=cells):
            return "(" + " ".join(to_str(c) for c in cells) + ")"
    raise KflispTypeError(f"Not a kflisp value: {v!r}")


def println(v: Value) -> None:
    print(to_str(v))
