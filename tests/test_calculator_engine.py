import pytest
from hypothesis import given, strategies as st

from calculator_engine import (
    CalculatorEngine,
    can_append,
    evaluate_expression,
    normalize_result,
)
from formula_evaluator import (
    DivisionByZeroError,
    EvaluationError,
    InvalidCharacterError,
    TrailingOperatorError,
)


def test_empty_expression_gives_empty_result():
    assert evaluate_expression("") == ""
    assert evaluate_expression("   ") == ""


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("2+3*4", "14"),
        ("3*-4", "-12"),
        ("3*-4*-5", "60"),
        ("0.1+0.2", "0.3"),
        ("1/3", "0.3333333333"),
        ("2/3", "0.6666666667"),
        ("10/4", "2.5"),
        ("-5+5", "0"),
        ("-0.0000000000001*1", "0"),
        ("6/2", "3"),
        ("1.10", "1.1"),
        ("1000000*1000000", "1000000000000"),
    ],
)
def test_evaluate_expression(expr, expected):
    assert evaluate_expression(expr) == expected


def test_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        evaluate_expression("5/0")


def test_trailing_operator():
    with pytest.raises(TrailingOperatorError):
        evaluate_expression("3+")


def test_failures_are_evaluation_errors():
    for expr in ("5/0", "3+", "2a", "*3"):
        with pytest.raises(EvaluationError):
            evaluate_expression(expr)


def test_invalid_character_reaches_caller():
    with pytest.raises(InvalidCharacterError):
        CalculatorEngine().evaluate("1+x")


def test_engine_exposes_validator():
    engine = CalculatorEngine()
    assert engine.can_append("", "-")
    assert not engine.can_append("", "*")
    assert can_append("3+", "-")
    assert not can_append("3-", "-")


class TestNormalizeResult:
    def test_integers_without_fraction(self):
        assert normalize_result(3.0) == "3"
        assert normalize_result(-12.0) == "-12"
        assert normalize_result(3) == "3"

    def test_no_negative_zero(self):
        assert normalize_result(-0.0) == "0"
        assert normalize_result(-1e-12) == "0"

    def test_rounds_to_ten_decimals(self):
        assert normalize_result(0.30000000000000004) == "0.3"
        assert normalize_result(1.23456789012345) == "1.2345678901"

    def test_never_uses_exponent_notation(self):
        assert normalize_result(1e16) == "10000000000000000"
        assert normalize_result(1.5e-7) == "0.00000015"
        assert "e" not in normalize_result(123456789.123456789)


_numbers = st.one_of(
    st.integers(min_value=-10**6, max_value=10**6).map(str),
    st.decimals(
        min_value=-10**6, max_value=10**6, places=4,
        allow_nan=False, allow_infinity=False,
    ).map(lambda d: format(d, "f")),
)


@st.composite
def _expressions(draw):
    operands = draw(st.lists(_numbers, min_size=1, max_size=6))
    ops = draw(st.lists(st.sampled_from("+-*"), min_size=len(operands) - 1,
                        max_size=len(operands) - 1))
    parts = [operands[0]]
    for op, operand in zip(ops, operands[1:]):
        parts.extend([op, operand])
    return "".join(parts)


@given(_expressions())
def test_normalized_result_evaluates_to_itself(expr):
    result = evaluate_expression(expr)
    assert evaluate_expression(result) == result
