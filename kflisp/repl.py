"""Interactive read-eval-print loop for kflisp.

One line per interaction: the line is parsed, read, evaluated and printed.
A syntax error or an Error value is printed and the loop carries on; only
end of input or Ctrl-C ends the session.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

try:
    import readline
except ImportError:  # Windows has no GNU readline; run without history
    readline = None

from kflisp import __version__
from kflisp import config
from kflisp.errors import KflispSyntaxError
from kflisp.interpreter import Interpreter
from kflisp.reader.grammar import parse, ast_to_str

logger = logging.getLogger(__name__)

LineSource = Callable[[str], str]


class History:
    """Input history backed by the readline module, persisted to a file."""

    def __init__(self, path: Optional[Path], length: int):
        self.path = path
        self.length = length
        self.enabled = readline is not None

    def load(self) -> None:
        if not self.enabled:
            return
        readline.set_history_length(self.length)
        if self.path is None or not self.path.exists():
            return
        try:
            readline.read_history_file(str(self.path))
        except OSError as ex:
            logger.warning("Could not read history file %s: %s", self.path, ex)

    def add(self, line: str) -> None:
        if not self.enabled or not line.strip():
            return
        # input() already records lines when readline is active
        n = readline.get_current_history_length()
        if n and readline.get_history_item(n) == line:
            return
        readline.add_history(line)

    def save(self) -> None:
        if not self.enabled or self.path is None:
            return
        try:
            readline.write_history_file(str(self.path))
        except OSError as ex:
            logger.warning("Could not write history file %s: %s", self.path, ex)


class Repl:
    def __init__(
        self,
        interp: Interpreter | None = None,
        prompt: str | None = None,
        line_source: LineSource | None = None,
        out: TextIO | None = None,
        history: History | None = None,
        show_ast: bool = False,
    ):
        self.interp = interp or Interpreter()
        self.prompt = prompt if prompt is not None else config.get_prompt()
        self.line_source = line_source or input
        self.out = out or sys.stdout
        self.history = history
        self.show_ast = show_ast

    def banner(self) -> None:
        self.emit(f"kflisp version {__version__}")
        self.emit("Press ctrl+c to exit\n")

    def handle(self, line: str) -> str:
        """Process one line of input and return the text to display."""
        if self.show_ast:
            try:
                return ast_to_str(parse(line, self.interp.filename))
            except KflispSyntaxError as ex:
                return str(ex)
        return self.interp.rep(line)

    def run(self, banner: bool = True) -> int:
        if banner:
            self.banner()
        if self.history:
            self.history.load()
        try:
            while True:
                try:
                    line = self.line_source(self.prompt)
                except EOFError:
                    self.emit("")
                    break
                if self.history:
                    self.history.add(line)
                self.emit(self.handle(line))
        except KeyboardInterrupt:
            self.emit("")
        finally:
            if self.history:
                self.history.save()
        return 0

    def emit(self, text: str) -> None:
        print(text, file=self.out)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="kflisp", description="kflisp arithmetic REPL")
    ap.add_argument("-e", "--eval", dest="code", help="evaluate one expression, print it and exit")
    ap.add_argument("--prompt", help="prompt string (default: $KFLISP_PROMPT or 'kflisp> ')")
    ap.add_argument("--no-banner", action="store_true", help="do not print the version banner")
    ap.add_argument("--ast", action="store_true", help="print the parse tree instead of evaluating")
    ap.add_argument("--no-history", action="store_true", help="do not load or save input history")
    ap.add_argument("--log-level", help="logging level (default: $KFLISP_LOG_LEVEL or WARNING)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    config.configure_logging(args.log_level)

    history = None
    if args.code is None and not args.no_history:
        history = History(config.get_history_file(), config.get_history_length())

    repl = Repl(prompt=args.prompt, history=history, show_ast=args.ast)
    if args.code is not None:
        repl.emit(repl.handle(args.code))
        return 0
    return repl.run(banner=not args.no_banner)


if __name__ == "__main__":
    sys.exit(main())
