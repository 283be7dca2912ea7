"""
Backend module for dharma.

This module consumes expression trees: evaluation and printing.
"""

from .evaluator import Evaluator, EvaluationError, evaluate
from .printer import to_source, dump

__all__ = [
    "Evaluator",
    "EvaluationError",
    "evaluate",
    "to_source",
    "dump",
]
