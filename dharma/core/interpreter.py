"""
Main interpreter orchestration module for dharma.

This module provides the high-level Interpreter class that coordinates
parsing and evaluation of a program.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO, Union

from ..backend import Evaluator, EvaluationError
from ..frontend import Lexer, LexerError, Parser, ParseError
from ..ir import Expr
from ..utils.settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Result of running a program.

    Attributes:
        success: Whether parsing and evaluation succeeded
        value: The program's value (if applicable)
        tree: The parsed expression tree (if applicable)
        error_message: Error message if the run failed
    """
    success: bool
    value: Optional[int] = None
    tree: Optional[Expr] = None
    error_message: Optional[str] = None


class Interpreter:
    """Main interpreter class for dharma.

    Example:
        >>> interpreter = Interpreter()
        >>> result = interpreter.run("((1+2)*4)")
        >>> result.value
        12
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the interpreter.

        Args:
            settings: Configuration (defaults to DEFAULT_SETTINGS)
        """
        self.settings = settings or DEFAULT_SETTINGS
        self._evaluator = Evaluator()

    def parse(self, source: Union[str, TextIO]) -> Expr:
        """Parse a program into an expression tree.

        Args:
            source: Program text or a text stream

        Returns:
            Expr: The top-level expression

        Raises:
            ParseError: If the program is malformed or empty
        """
        stream = io.StringIO(source) if isinstance(source, str) else source
        parser = Parser(Lexer(stream))
        tree = parser.parse_program()
        if tree is None:
            raise ParseError.at("No top-level expression", parser.lexer.peek())
        return tree

    def evaluate(self, tree: Expr) -> int:
        """Evaluate an expression tree."""
        return self._evaluator.evaluate(tree)

    def run(self, source: Union[str, TextIO]) -> RunResult:
        """Parse and evaluate a program.

        Args:
            source: Program text or a text stream

        Returns:
            RunResult: The result of the run
        """
        try:
            tree = self.parse(source)
        except LexerError as e:
            logger.debug("parse failed: %s", e)
            return RunResult(
                success=False,
                error_message=f"Parse error: {e}"
            )
        except UnicodeDecodeError as e:
            return RunResult(
                success=False,
                error_message=f"Read error: {e}"
            )

        try:
            value = self.evaluate(tree)
        except EvaluationError as e:
            return RunResult(
                success=False,
                tree=tree,
                error_message=f"Evaluation error: {e}"
            )

        logger.info("program evaluated to %d", value)
        return RunResult(success=True, value=value, tree=tree)

    def run_file(self, path: Path) -> RunResult:
        """Parse and evaluate the program stored in a file."""
        if not path.exists():
            return RunResult(
                success=False,
                error_message=f"Input file not found: {path}"
            )

        logger.info("running %s", path)
        try:
            with path.open(encoding="utf-8") as stream:
                return self.run(stream)
        except OSError as e:
            return RunResult(
                success=False,
                error_message=f"Cannot read input file: {e}"
            )
