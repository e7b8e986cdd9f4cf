from __future__ import annotations

from enum import Enum
from typing import Optional

from kflisp.types.value import Symbol


class Operator(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"

    @classmethod
    def from_symbol(cls, sym: Symbol) -> Optional[Operator]:
        try:
            return cls(sym.name)
        except ValueError:
            return None


# Shown by the language server on hover.
OPERATOR_DOCS: dict[Operator, str] = {
    Operator.ADD: "(+ a b ...): sum of all operands",
    Operator.SUB: "(- a b ...): a minus the rest, or (- a) negates",
    Operator.MUL: "(* a b ...): product of all operands",
    Operator.DIV: "(/ a b ...): division truncated toward zero",
    Operator.MOD: "(% a b ...): remainder of truncating division",
    Operator.POW: "(^ a b ...): a raised to b; exponents must be non-negative",
}
