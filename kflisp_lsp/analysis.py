from __future__ import annotations

"""
Line-by-line analysis of kflisp documents for the language server.

Each non-blank line is one program, exactly as the REPL would see it. We
parse and evaluate every line (evaluation is pure and always terminates)
and record:
- syntax errors, positioned where the parser gave up
- Error values, spanning the whole line
- the printed value of every line that evaluated, for hover
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from kflisp.errors import KflispSyntaxError
from kflisp.interpreter import Interpreter
from kflisp.printer import to_str
from kflisp.types.operator import Operator, OPERATOR_DOCS
from kflisp.types.value import Error

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

# LSP line breaks; str.splitlines would also split on form feeds etc.
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    return LINE_BREAK_RE.split(text)


@dataclass
class Finding:
    line: int  # 0-based
    col: int  # 0-based
    end_col: int
    message: str
    severity: str


@dataclass
class DocumentReport:
    findings: List[Finding] = field(default_factory=list)
    results: Dict[int, str] = field(default_factory=dict)  # line -> printed value


def analyse(text: str, filename: str = "<buffer>") -> DocumentReport:
    interp = Interpreter(filename=filename)
    report = DocumentReport()
    for lineno, line in enumerate(split_lines(text)):
        if not line.strip():
            continue
        start = len(line) - len(line.lstrip())
        end = len(line.rstrip())
        try:
            value = interp.eval(line)
        except KflispSyntaxError as ex:
            col = max(ex.col - 1, 0)
            report.findings.append(
                Finding(lineno, col, max(col + 1, min(end, len(line))), str(ex), SEVERITY_ERROR)
            )
            continue
        if isinstance(value, Error):
            report.findings.append(
                Finding(lineno, start, end, value.message, SEVERITY_WARNING)
            )
        report.results[lineno] = to_str(value)
    return report


def word_at(text: str, line: int, character: int) -> Optional[str]:
    lines = split_lines(text)
    if line >= len(lines):
        return None
    src = lines[line]
    # positions past the end of the line mean the end of the line
    character = min(character, len(src))
    start = character
    while start > 0 and src[start - 1] not in " \t()":
        start -= 1
    end = character
    while end < len(src) and src[end] not in " \t()":
        end += 1
    return src[start:end] or None


def hover_text(text: str, report: DocumentReport, line: int, character: int) -> Optional[str]:
    word = word_at(text, line, character)
    op = next((o for o in Operator if o.value == word), None)
    if op is not None:
        return OPERATOR_DOCS[op]
    if line in report.results:
        return f"=> {report.results[line]}"
    return None
