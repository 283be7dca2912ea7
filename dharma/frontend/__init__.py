"""
Frontend module for dharma.

This module provides the character-stream lexer and the recursive descent
parser that builds the expression tree.
"""

from .lexer import Lexer, Token, TokenType, LexerError, tokenize_source
from .parser import Parser, ParseError, parse_source

__all__ = [
    # Lexer components
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize_source",
    # Parser components
    "Parser",
    "ParseError",
    "parse_source",
]
