"""
dharma - a parenthesized arithmetic interpreter

A lexer and recursive descent parser for single-digit operands combined with
'+' and '*' inside mandatory parentheses, plus an evaluator and shell.

Example:
    >>> from dharma import Interpreter
    >>> interpreter = Interpreter()
    >>> result = interpreter.run("((1+2)*4)")
    >>> if result.success:
    ...     print(result.value)
    12

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "dharma Team"

from .core import Interpreter, RunResult, Parser, ParseError

__all__ = [
    "__version__",
    "__author__",
    "Interpreter",
    "RunResult",
    "Parser",
    "ParseError",
]
