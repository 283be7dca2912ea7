"""
Pytest configuration and fixtures for dharma tests.
"""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def sample_program_file(temp_dir):
    """Create a sample program file for testing."""
    program = temp_dir / "program.dh"
    program.write_text("((1 + 2) * 4)\n")
    return program


@pytest.fixture
def interpreter():
    """Provide an Interpreter instance."""
    from dharma import Interpreter
    return Interpreter()


@pytest.fixture
def make_parser():
    """Provide a factory building a Parser over a source string."""
    from dharma.frontend import Lexer, Parser

    def _make(source):
        return Parser(Lexer.from_string(source))
    return _make
