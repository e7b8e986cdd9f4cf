from kflisp.reader.grammar import lex, parse, ast_to_str, AstNode, Token, TokenStream
from kflisp.reader.reader import read, read_str
