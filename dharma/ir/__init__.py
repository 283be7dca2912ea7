"""
AST module for dharma.

This module defines the expression tree produced by the parser and consumed
by the backend.
"""

from .nodes import Operator, Digit, Parenthesized, Expr

__all__ = [
    "Operator",
    "Digit",
    "Parenthesized",
    "Expr",
]
