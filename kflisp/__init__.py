# Core aliases for kflisp's data model.
#
# A program is read into a tree of Values (Number, Error, Symbol, Expression)
# and evaluated by folding that tree bottom-up into a single Value.
#
# Naming guidance:
# - SyntaxNode: the tagged parse tree emitted by kflisp.reader.grammar.
# - Value:      the runtime datum produced by the reader and the evaluator.

from kflisp.types.value import Value, Number, Error, Symbol, Expression

__version__ = "0.0.4"

__all__ = ["Value", "Number", "Error", "Symbol", "Expression", "__version__"]
