"""
AST node definitions for dharma.

This module contains the data classes that represent a parsed dharma
program: single-digit leaves and fully parenthesized binary applications.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Operator(Enum):
    """Binary operators supported inside a parenthesized expression."""
    ADD = "+"
    MULTIPLY = "*"

    @property
    def symbol(self) -> str:
        """The source character for this operator."""
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """Map a source character to its operator.

        Raises:
            ValueError: If the character is not an operator
        """
        return cls(symbol)


# ==================== Expressions ====================

@dataclass(frozen=True)
class Digit:
    """Single-digit integer leaf.

    Attributes:
        value: The digit value (0-9)
    """
    value: int

    def __post_init__(self):
        if not 0 <= self.value <= 9:
            raise ValueError(f"Digit value out of range: {self.value}")


@dataclass(frozen=True)
class Parenthesized:
    """Parenthesized binary application `(left op right)`.

    Attributes:
        left: Left operand expression
        op: The operator
        right: Right operand expression
    """
    left: "Expr"
    op: Operator
    right: "Expr"


Expr = Union[Digit, Parenthesized]
