from __future__ import annotations


class KflispError(Exception):
    """ Base class for all kflisp host errors"""
    pass


class KflispTypeError(KflispError):
    """ Raised when something other than a Value is handed to the value API"""


class KflispSyntaxError(KflispError):
    """ Raised when source text does not match the grammar"""

    def __init__(
        self,
        filename: str,
        line: int,
        col: int,
        expected: list[str],
        unexpected: str,
    ):
        self.filename = filename
        self.line = line
        self.col = col
        self.expected = list(expected)
        self.unexpected = unexpected
        super().__init__(self._render())

    def _render(self) -> str:
        if len(self.expected) == 1:
            wanted = self.expected[0]
        else:
            wanted = "one of " + ", ".join(self.expected[:-1]) + " or " + self.expected[-1]
        return f"{self.filename}:{self.line}:{self.col}: error: expected {wanted} at {self.unexpected}"

# Evaluation failures are not exceptions: see kflisp.types.value.Error.
