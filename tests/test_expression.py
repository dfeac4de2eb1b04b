import pytest

from fastfss.expression import EvaluationError, ExpressionEvaluator


@pytest.fixture
def evaluator():
    return ExpressionEvaluator()


def test_precedence(evaluator):
    assert evaluator.evaluate("1 + 2 * 3") == 1 + 2 * 3


def test_parentheses_override_precedence(evaluator):
    assert evaluator.evaluate("(1 + 2) * 3") == (1 + 2) * 3


def test_left_associative_subtraction_and_division(evaluator):
    assert evaluator.evaluate("10 - 4 - 3") == 10 - 4 - 3
    assert evaluator.evaluate("64 / 4 / 2") == 64 / 4 / 2


def test_negative_numbers(evaluator):
    assert evaluator.evaluate("2 - -3") == 2 - -3
    assert evaluator.evaluate("-1.5 * 2") == -1.5 * 2


def test_whitespace_everywhere(evaluator):
    assert evaluator.evaluate("  \t( 4 +\n5 )  ") == 4 + 5


def test_decimal_forms(evaluator):
    assert evaluator.evaluate("1.") == 1.0
    assert evaluator.evaluate("-.5") == -0.5


def test_longest_number_prefix_is_used(evaluator):
    assert evaluator.evaluate("1.2.3") == 1.2


def test_evaluator_is_reusable(evaluator):
    first = evaluator.evaluate("2 * (3 + 4)")
    evaluator.evaluate("99")
    assert evaluator.evaluate("2 * (3 + 4)") == first


def test_division_by_zero(evaluator):
    with pytest.raises(EvaluationError, match="Division by zero"):
        evaluator.evaluate("1 / 0")
    with pytest.raises(EvaluationError, match="Division by zero"):
        evaluator.evaluate("1 / (2 - 2)")


def test_missing_close_paren(evaluator):
    with pytest.raises(EvaluationError, match=r"Missing '\)'"):
        evaluator.evaluate("(1 + 2")


def test_trailing_characters(evaluator):
    with pytest.raises(EvaluationError, match="Unexpected character at end: '\\)'"):
        evaluator.evaluate("2)")


def test_unexpected_character(evaluator):
    with pytest.raises(EvaluationError, match="Unexpected character: 'x'"):
        evaluator.evaluate("x + 1")


def test_empty_expression(evaluator):
    with pytest.raises(EvaluationError, match="Unexpected character"):
        evaluator.evaluate("")


def test_leading_plus_is_invalid_number(evaluator):
    with pytest.raises(EvaluationError, match="Invalid number: ''"):
        evaluator.evaluate("+5")


def test_minus_before_paren_is_invalid_number(evaluator):
    with pytest.raises(EvaluationError, match="Invalid number: '-'"):
        evaluator.evaluate("-(2)")


def test_error_is_value_error(evaluator):
    with pytest.raises(ValueError):
        evaluator.evaluate("3 *")