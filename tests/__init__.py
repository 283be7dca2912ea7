"""
Test suite for dharma.

This package contains tests for the dharma interpreter including:
- Unit tests for the lexer, parser and expression tree
- Unit tests for evaluation and printing
- End-to-end tests through the interpreter, shell and CLI
"""

__version__ = "0.1.0"
