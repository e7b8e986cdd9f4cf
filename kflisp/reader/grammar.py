"""
  kflisp Lexer and Parser

Turns one line of source text into a tagged syntax tree. The grammar is:

    number : /-?[0-9]+/ ;
    symbol : '+' | '-' | '*' | '/' | '%' | '^' ;
    sexpr  : '(' <expr>* ')' ;
    expr   : <number> | <symbol> | <sexpr> ;
    lispy  : /^/ <expr>* /$/ ;

Nodes carry a tag naming the rules that produced them, mpc style:

    - root         -> ">"
    - anchors      -> "regex", empty contents (start and end of input)
    - numbers      -> "expr|number|regex"
    - symbols      -> "expr|symbol|char"
    - sub-lists    -> "expr|sexpr|>"
    - delimiters   -> "char", contents "(" or ")"

The tree is consumed by kflisp.reader.reader, which never builds nodes itself.
Parentheses nest at most MAX_DEPTH (256) deep; deeper input is reported as
a syntax error rather than exhausting the Python stack.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Optional

from kflisp.errors import KflispSyntaxError


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<number>-?[0-9]+)"  # must precede symbol so '-5' is a number
    r"|(?P<symbol>[-+*/%^])"  # operators
    r"|(?P<error>\S)"  # anything else is a syntax error
    r")"
)

TAG_ROOT = ">"
TAG_ANCHOR = "regex"
TAG_NUMBER = "expr|number|regex"
TAG_SYMBOL = "expr|symbol|char"
TAG_SEXPR = "expr|sexpr|>"
TAG_CHAR = "char"

# Nesting deeper than this would exhaust the Python stack in the reader
# and evaluator, which both recurse once per level.
MAX_DEPTH = 256

_EXPR_START = ["number", "symbol", "'('"]


class Token(NamedTuple):
    kind: str
    text: str
    offset: int


@dataclass
class AstNode:
    tag: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    line: int = 1
    col: int = 1


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.lastgroup is None:
            # only trailing whitespace left
            break
        kind = m.lastgroup
        yield Token(kind, m.group(kind), m.start(kind))
        pos = m.end()


def _position(source: str, offset: int) -> tuple[int, int]:
    # Return (line, col), 1-based
    line = source.count("\n", 0, offset) + 1
    col = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, col


class TokenStream:
    def __init__(self, source: str, filename: str = "<stdin>"):
        self.source = source
        self.filename = filename
        self.tokens = iter(lex(source))
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def _fail(self, tok: Optional[Token], expected: list[str]) -> KflispSyntaxError:
        if tok is None:
            line, col = _position(self.source, len(self.source))
            unexpected = "end of input"
        else:
            line, col = _position(self.source, tok.offset)
            unexpected = repr(tok.text)
        return KflispSyntaxError(self.filename, line, col, expected, unexpected)

    def _leaf(self, tag: str, tok: Token) -> AstNode:
        line, col = _position(self.source, tok.offset)
        return AstNode(tag, tok.text, [], line, col)

    def _anchor(self, offset: int) -> AstNode:
        line, col = _position(self.source, offset)
        return AstNode(TAG_ANCHOR, "", [], line, col)

    def parse_expr(self, depth: int = 0) -> AstNode:
        tok = self.peek()
        if tok is None:
            raise self._fail(tok, _EXPR_START)

        if tok.kind == "number":
            self.advance()
            return self._leaf(TAG_NUMBER, tok)

        if tok.kind == "symbol":
            self.advance()
            return self._leaf(TAG_SYMBOL, tok)

        if tok.kind == "lparen":
            if depth >= MAX_DEPTH:
                raise self._fail(tok, [f"at most {MAX_DEPTH} nested '('"])
            self.advance()
            line, col = _position(self.source, tok.offset)
            node = AstNode(TAG_SEXPR, "", [self._leaf(TAG_CHAR, tok)], line, col)
            while True:
                nxt = self.peek()
                if nxt is None or nxt.kind == "error":
                    raise self._fail(nxt, _EXPR_START + ["')'"])
                if nxt.kind == "rparen":
                    self.advance()
                    node.children.append(self._leaf(TAG_CHAR, nxt))
                    return node
                node.children.append(self.parse_expr(depth + 1))

        raise self._fail(tok, _EXPR_START)

    def parse_lispy(self) -> AstNode:
        """Parse the whole input: /^/ <expr>* /$/"""
        root = AstNode(TAG_ROOT, "", [self._anchor(0)])
        while True:
            tok = self.peek()
            if tok is None:
                break
            if tok.kind in ("rparen", "error"):
                raise self._fail(tok, _EXPR_START + ["end of input"])
            root.children.append(self.parse_expr())
        root.children.append(self._anchor(len(self.source)))
        return root


def parse(source: str, filename: str = "<stdin>") -> AstNode:
    return TokenStream(source, filename).parse_lispy()


def ast_to_str(node: AstNode, indent: int = 0) -> str:
    """Render a syntax tree one node per line, children indented."""
    pad = "  " * indent
    if not node.children:
        lines = [f"{pad}{node.tag}:{node.line}:{node.col} '{node.contents}'"]
    else:
        lines = [f"{pad}{node.tag} "]
        lines.extend(ast_to_str(child, indent + 1) for child in node.children)
    return "\n".join(lines)
