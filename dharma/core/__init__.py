"""
Core interpreter module for dharma.

This module contains the orchestration that drives the frontend parser and
the evaluation backend.
"""

from ..frontend.parser import Parser, ParseError
from .interpreter import Interpreter, RunResult

__all__ = [
    "Parser",
    "ParseError",
    "Interpreter",
    "RunResult",
]
