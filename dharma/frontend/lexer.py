"""
Lexer module for dharma.

This module turns a character stream into classified tokens, one at a time.
The lexer holds exactly one current token; the parser uses it as its single
token of lookahead and calls `advance()` to move past it.
"""

import io
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional, TextIO, Union

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types for the dharma grammar."""
    DIGIT = auto()         # 0-9
    PLUS = auto()          # +
    STAR = auto()          # *
    LPAR = auto()          # (
    RPAR = auto()          # )
    UNKNOWN = auto()       # any other character
    END_OF_INPUT = auto()  # stream exhausted


# Sentinel value carried by the end-of-input token
END_OF_INPUT_REPR = "#"

WHITESPACE = frozenset(" \t\n")


@dataclass(frozen=True)
class Token:
    """Represents a token in the source stream.

    Attributes:
        type: The token type
        value: The raw character consumed
        lineno: Line number (1-indexed)
        col_offset: Column offset (0-indexed)
    """
    type: TokenType
    value: str
    lineno: int = 1
    col_offset: int = 0

    @property
    def token_class(self) -> Union[TokenType, str]:
        """Class tag of the token.

        Digits and end of input have their own class; every other token is
        classed by its character, so distinct unknown characters never share
        a class.
        """
        if self.type in (TokenType.DIGIT, TokenType.END_OF_INPUT):
            return self.type
        return self.value

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, line={self.lineno})"


class LexerError(Exception):
    """Base exception for errors raised by the dharma front-end."""

    def __init__(self, message: str, lineno: int = 0, col_offset: int = 0):
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.lineno > 0:
            return f"Line {self.lineno}, col {self.col_offset}: {self.message}"
        return self.message


class Lexer:
    """Pull-based lexer over a character stream.

    Reads the stream one character at a time and never pushes characters
    back. Lookahead is the current token only.

    Example:
        >>> lexer = Lexer.from_string("(1 + 2)")
        >>> lexer.peek()
        Token(LPAR, '(', line=1)
        >>> lexer.advance()
        Token(DIGIT, '1', line=1)
    """

    _SYMBOL_MAP = {
        '+': TokenType.PLUS,
        '*': TokenType.STAR,
        '(': TokenType.LPAR,
        ')': TokenType.RPAR,
    }

    def __init__(self, stream: TextIO):
        """Initialize the lexer.

        Args:
            stream: Text stream to read characters from
        """
        self._stream = stream
        self._current: Optional[Token] = None
        self._lineno = 1
        self._col = 0

    @classmethod
    def from_string(cls, source: str) -> "Lexer":
        """Create a lexer reading from an in-memory string."""
        return cls(io.StringIO(source))

    @property
    def current(self) -> Optional[Token]:
        """The current token, or None if the lexer has not been primed."""
        return self._current

    def peek(self) -> Token:
        """Return the current token without consuming it.

        The first call primes the lexer by reading the first token.
        """
        if self._current is None:
            return self.advance()
        return self._current

    def advance(self) -> Token:
        """Read the next token from the stream and make it current.

        Returns:
            The new current token
        """
        ch = self._read_char()
        while ch in WHITESPACE:
            ch = self._read_char()

        if not ch:
            token = Token(TokenType.END_OF_INPUT, END_OF_INPUT_REPR, self._lineno, self._col)
        else:
            # Position of the character just consumed
            col = self._col - 1
            if '0' <= ch <= '9':
                token_type = TokenType.DIGIT
            else:
                token_type = self._SYMBOL_MAP.get(ch, TokenType.UNKNOWN)
            token = Token(token_type, ch, self._lineno, col)

        logger.debug("lexed %r", token)
        self._current = token
        return token

    def tokens(self) -> Iterator[Token]:
        """Yield the remaining tokens, ending with the end-of-input token."""
        token = self.peek()
        while True:
            yield token
            if token.type == TokenType.END_OF_INPUT:
                return
            token = self.advance()

    def _read_char(self) -> str:
        # Empty string means end of input
        ch = self._stream.read(1)
        if ch == "\n":
            self._lineno += 1
            self._col = 0
        elif ch:
            self._col += 1
        return ch


def tokenize_source(source: str) -> List[Token]:
    """Convenience function to tokenize source code.

    Args:
        source: Source string

    Returns:
        List of Token objects ending with the end-of-input token
    """
    return list(Lexer.from_string(source).tokens())
