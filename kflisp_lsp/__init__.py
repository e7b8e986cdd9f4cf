"""kflisp Language Server package.

This package provides:
- A pygls-based Language Server for kflisp buffers.
- A line analyser that parses and evaluates each line to report errors and values.
"""

__all__ = [
    "server",
    "analysis",
]
