"""
Parser module for dharma.

This module provides a recursive descent parser over the lexer's current
token. It builds the expression tree for the grammar

    Expression := Digit
                | '(' Expression Operator Expression ')'
    Operator   := '+' | '*'

A production that does not start at the current token returns None and
consumes nothing. Once a '(' has been consumed the production is committed
and every missing piece raises ParseError.
"""

import logging
from typing import Optional

from ..ir import Operator, Digit, Parenthesized, Expr
from .lexer import Lexer, Token, TokenType, LexerError

logger = logging.getLogger(__name__)


class ParseError(LexerError):
    """Exception raised for malformed input after a committed production."""

    def __init__(self, message: str, lineno: int = 0, col_offset: int = 0):
        super().__init__(message, lineno, col_offset)

    def _format_message(self) -> str:
        if self.lineno > 0:
            return f"Line {self.lineno}: {self.message}"
        return self.message

    @classmethod
    def at(cls, message: str, token: Token) -> "ParseError":
        """Build an error positioned at the offending token."""
        return cls(message, token.lineno, token.col_offset)


class Parser:
    """Recursive descent parser for dharma.

    Example:
        >>> parser = Parser(Lexer.from_string("(2+3)"))
        >>> parser.parse_program()
        Parenthesized(left=Digit(value=2), op=<Operator.ADD: '+'>, right=Digit(value=3))
    """

    def __init__(self, lexer: Lexer):
        """Initialize the parser.

        Args:
            lexer: Lexer supplying the current token
        """
        self._lexer = lexer

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    def parse_program(self) -> Optional[Expr]:
        """Parse one top-level expression.

        Returns:
            The expression tree, or None if no expression starts here

        Raises:
            ParseError: If the input is malformed or nested deeper than
                the interpreter stack allows
        """
        try:
            expr = self.parse_expression()
        except RecursionError:
            raise ParseError.at("Expression nested too deeply", self._lexer.peek()) from None
        if expr is None:
            logger.debug("no top-level expression at %r", self._lexer.peek())
        return expr

    def parse_operator(self) -> Optional[Operator]:
        """Parse '+' or '*', consuming it only on a match."""
        token = self._lexer.peek()
        if token.type in (TokenType.PLUS, TokenType.STAR):
            self._lexer.advance()
            return Operator.from_symbol(token.value)
        return None

    def parse_expression(self) -> Optional[Expr]:
        """Parse a digit or a parenthesized expression.

        Returns:
            The expression, or None if the current token starts neither

        Raises:
            ParseError: If a parenthesized expression is incomplete
        """
        token = self._lexer.peek()

        if token.type == TokenType.DIGIT:
            self._lexer.advance()
            return Digit(int(token.value))

        if token.type == TokenType.LPAR:
            self._lexer.advance()
            left = self._require_expression()
            op = self.parse_operator()
            if op is None:
                raise ParseError.at("Missing operator", self._lexer.peek())
            right = self._require_expression()
            closing = self._lexer.peek()
            if closing.type != TokenType.RPAR:
                raise ParseError.at("Missing right parenthesis", closing)
            self._lexer.advance()
            return Parenthesized(left, op, right)

        return None

    def _require_expression(self) -> Expr:
        expr = self.parse_expression()
        if expr is None:
            raise ParseError.at("Missing expression", self._lexer.peek())
        return expr


def parse_source(source: str) -> Expr:
    """Convenience function to parse a source string.

    Raises:
        ParseError: If the source is malformed or holds no expression
    """
    parser = Parser(Lexer.from_string(source))
    expr = parser.parse_program()
    if expr is None:
        raise ParseError.at("No top-level expression", parser.lexer.peek())
    return expr
