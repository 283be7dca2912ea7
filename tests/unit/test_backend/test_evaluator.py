"""
Unit tests for the expression evaluator.
"""

import pytest
from dharma.backend import Evaluator, EvaluationError, evaluate
from dharma.frontend import parse_source
from dharma.ir import Operator, Digit, Parenthesized


@pytest.fixture
def evaluator():
    return Evaluator()


class TestEvaluator:
    """Tests for Evaluator.evaluate."""

    def test_digit(self, evaluator):
        assert evaluator.evaluate(Digit(5)) == 5

    def test_add(self, evaluator):
        assert evaluator.evaluate(Parenthesized(Digit(2), Operator.ADD, Digit(3))) == 5

    def test_multiply(self, evaluator):
        assert evaluator.evaluate(Parenthesized(Digit(2), Operator.MULTIPLY, Digit(3))) == 6

    @pytest.mark.parametrize("source, expected", [
        ("((1+2)*4)", 12),
        ("(1+(2*4))", 9),
        ("((9*9)*(9*9))", 6561),
        ("((0*7)+1)", 1),
    ])
    def test_nested(self, evaluator, source, expected):
        """Test evaluation follows the explicit parenthesization."""
        assert evaluator.evaluate(parse_source(source)) == expected

    def test_deep_tree(self, evaluator):
        """Test that trees deeper than the recursion limit evaluate."""
        tree = Digit(0)
        for _ in range(5000):
            tree = Parenthesized(tree, Operator.ADD, Digit(1))
        assert evaluator.evaluate(tree) == 5000

    def test_unsupported_node(self, evaluator):
        """Test that foreign objects are rejected."""
        with pytest.raises(EvaluationError, match="Unsupported node"):
            evaluator.evaluate(Parenthesized(Digit(1), Operator.ADD, "2"))

    def test_convenience_function(self):
        assert evaluate(Parenthesized(Digit(4), Operator.MULTIPLY, Digit(2))) == 8
