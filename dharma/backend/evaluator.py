"""
Expression evaluator for dharma.

Reduces an expression tree to its integer value. The walk uses an explicit
work stack so tree depth is not bounded by the interpreter's recursion limit.
"""

import logging
from typing import Callable, Dict, List, Tuple

from ..ir import Operator, Digit, Parenthesized, Expr

logger = logging.getLogger(__name__)


class EvaluationError(Exception):
    """Exception raised when a tree cannot be evaluated."""


_APPLY: Dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.MULTIPLY: lambda a, b: a * b,
}


class Evaluator:
    """Evaluates dharma expression trees.

    Example:
        >>> Evaluator().evaluate(Parenthesized(Digit(2), Operator.ADD, Digit(3)))
        5
    """

    def evaluate(self, expr: Expr) -> int:
        """Evaluate an expression tree.

        Args:
            expr: Root of the tree

        Returns:
            int: The value of the expression

        Raises:
            EvaluationError: If the tree contains an unsupported node
        """
        # (node, children_done) pairs; values collects results in post-order
        work: List[Tuple[Expr, bool]] = [(expr, False)]
        values: List[int] = []

        while work:
            node, children_done = work.pop()
            if isinstance(node, Digit):
                values.append(node.value)
            elif isinstance(node, Parenthesized):
                if children_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(self._apply(node.op, left, right))
                else:
                    work.append((node, True))
                    work.append((node.right, False))
                    work.append((node.left, False))
            else:
                raise EvaluationError(f"Unsupported node: {type(node).__name__}")

        result = values.pop()
        logger.debug("evaluated %r -> %d", expr, result)
        return result

    def _apply(self, op: Operator, left: int, right: int) -> int:
        try:
            return _APPLY[op](left, right)
        except KeyError:
            raise EvaluationError(f"Unsupported operator: {op!r}") from None


def evaluate(expr: Expr) -> int:
    """Convenience function to evaluate an expression tree."""
    return Evaluator().evaluate(expr)
