"""Runtime values for kflisp.

Every datum the reader or the evaluator produces is one of four variants:

    - Number     -> signed 64-bit integer
    - Error      -> message string, terminal (never evaluated further)
    - Symbol     -> operator name, only meaningful as an expression head
    - Expression -> ordered list of child values (may be empty)

An Expression owns its children outright. Children are moved between
expressions with pop/take/detach_head, never shared, so dropping the root
reference releases the whole tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from kflisp.errors import KflispTypeError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def wrap_int64(x: int) -> int:
    """Two's-complement wraparound of an arbitrary int into the 64-bit range."""
    return ((x - INT64_MIN) % 2 ** 64) + INT64_MIN


class _Printable:
    __slots__ = ()

    def __str__(self) -> str:
        # Lazy import to avoid circular imports
        from kflisp.printer import to_str
        return to_str(self)


@dataclass(frozen=True, slots=True, repr=False)
class Number(_Printable):
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise KflispTypeError(f"Number payload must be an int, got {self.value!r}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise OverflowError(f"{self.value} does not fit in 64 bits")

    def __repr__(self):
        return f"Number({self.value})"


@dataclass(frozen=True, slots=True, repr=False)
class Error(_Printable):
    message: str

    def __repr__(self):
        return f"Error({self.message!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Symbol(_Printable):
    name: str

    def __repr__(self):
        return f"Symbol({self.name!r})"


@dataclass(slots=True, repr=False)
class Expression(_Printable):
    cells: list[Value] = field(default_factory=list)

    def __post_init__(self):
        self.cells = list(self.cells)
        for cell in self.cells:
            _check_value(cell)

    def __repr__(self):
        return f"Expression({self.cells!r})"

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        return self.cells[i]

    def append(self, v: Value) -> Expression:
        self.cells.append(_check_value(v))
        return self

    def pop(self, i: int = 0) -> Value:
        """Detach the child at i; the remaining children close the gap."""
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Detach the child at i and discard everything else."""
        v = self.cells.pop(i)
        self.cells.clear()
        return v

    def detach_head(self) -> tuple[Value, Expression]:
        """Split into (head, tail); self is left empty."""
        head, *rest = self.cells
        self.cells.clear()
        return head, Expression(rest)


Value = Union[Number, Error, Symbol, Expression]

_VARIANTS = (Number, Error, Symbol, Expression)


def _check_value(v) -> Value:
    if not isinstance(v, _VARIANTS):
        raise KflispTypeError(f"Not a kflisp value: {v!r}")
    return v


# -------------------------------
# Constructors
# -------------------------------
def number(x: int) -> Number:
    return Number(x)


def error(msg: str) -> Error:
    return Error(str(msg))


def symbol(name: str) -> Symbol:
    return Symbol(str(name))


def empty_expression() -> Expression:
    return Expression()
