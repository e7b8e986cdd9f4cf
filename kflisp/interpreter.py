from __future__ import annotations

import logging
from typing import Callable

from kflisp.errors import KflispSyntaxError
from kflisp.printer import to_str
from kflisp.reader.grammar import parse
from kflisp.reader.reader import read
from kflisp.types.value import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates parsing, reading and evaluating kflisp input.
    Holds no state between calls: every line is evaluated on a fresh tree.
    """

    def __init__(
        self,
        eval_fn: Callable[[Value], Value] | None = None,
        filename: str = "<stdin>",
    ):
        if eval_fn is None:
            from kflisp.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.filename = filename

    def read(self, code: str) -> Value:
        """Return the unevaluated Value tree; raises KflispSyntaxError."""
        return read(parse(code, self.filename))

    def eval(self, code: str) -> Value:
        value = self.read(code)
        logger.debug("read %s", value)
        return self.eval_fn(value)

    def rep(self, code: str) -> str:
        """Read, evaluate and print; syntax errors are rendered, not raised."""
        try:
            return to_str(self.eval(code))
        except KflispSyntaxError as ex:
            logger.info("syntax error: %s", ex)
            return str(ex)
