"""
Unit tests for the tree printers.
"""

import pytest
from dharma.backend import to_source, dump
from dharma.frontend import parse_source
from dharma.ir import Operator, Digit, Parenthesized


class TestToSource:
    """Tests for canonical source rendering."""

    def test_digit(self):
        assert to_source(Digit(3)) == "3"

    def test_nested(self):
        tree = Parenthesized(Parenthesized(Digit(1), Operator.ADD, Digit(2)), Operator.MULTIPLY, Digit(4))
        assert to_source(tree) == "((1+2)*4)"

    @pytest.mark.parametrize("source", ["7", "(1+2)", "((1*2)+(3*(4+5)))"])
    def test_reparses_to_equal_tree(self, source):
        """Test that printed source parses back to the same tree."""
        tree = parse_source(source)
        assert parse_source(to_source(tree)) == tree

    def test_unsupported_node(self):
        with pytest.raises(TypeError):
            to_source("1")


class TestDump:
    """Tests for the multi-line tree dump."""

    def test_digit(self):
        assert dump(Digit(5)) == "Digit(5)"

    def test_nested(self):
        tree = parse_source("((1+2)*4)")
        assert dump(tree).splitlines() == [
            "Parenthesized(MULTIPLY)",
            "  Parenthesized(ADD)",
            "    Digit(1)",
            "    Digit(2)",
            "  Digit(4)",
        ]

    def test_indent(self):
        assert dump(Digit(1), indent=2) == "    Digit(1)"


class TestDeepTrees:
    """Tests for trees deeper than the interpreter's recursion limit."""

    @staticmethod
    def left_nested(depth):
        tree = Digit(0)
        for _ in range(depth):
            tree = Parenthesized(tree, Operator.ADD, Digit(1))
        return tree

    def test_to_source(self):
        text = to_source(self.left_nested(5000))
        assert text == "(" * 5000 + "0" + "+1)" * 5000

    def test_dump(self):
        lines = dump(self.left_nested(1500)).splitlines()
        assert len(lines) == 2 * 1500 + 1
        assert lines[0] == "Parenthesized(ADD)"
        assert lines[1500] == "  " * 1500 + "Digit(0)"
