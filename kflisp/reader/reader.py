"""Reader: syntax tree -> Value tree.

Leaves become Numbers or Symbols, every other node becomes an Expression
whose children mirror the node's meaningful children. Delimiters and the
zero-width anchors are dropped, so the result is isomorphic to the program
minus its punctuation.
"""

from __future__ import annotations

from kflisp.reader.grammar import AstNode, TAG_ANCHOR, parse
from kflisp.types.value import (
    Value,
    Expression,
    INT64_MIN,
    INT64_MAX,
    number,
    error,
    symbol,
    empty_expression,
)

_DELIMITERS = ("(", ")")


def read_num(node: AstNode) -> Value:
    try:
        x = int(node.contents, 10)
    except ValueError:
        return error("invalid number")
    if not INT64_MIN <= x <= INT64_MAX:
        return error("invalid number")
    return number(x)


def read(node: AstNode) -> Value:
    if "number" in node.tag:
        return read_num(node)
    if "symbol" in node.tag:
        return symbol(node.contents)

    # root (">") or sexpr
    expr: Expression = empty_expression()
    for child in node.children:
        if child.contents in _DELIMITERS:
            continue
        if child.tag == TAG_ANCHOR:
            continue
        expr.append(read(child))
    return expr


def read_str(source: str, filename: str = "<stdin>") -> Value:
    """Parse and read source text; raises KflispSyntaxError on bad input."""
    return read(parse(source, filename))
