import pytest

from expression_rules import (
    can_append,
    is_decimal_point,
    is_digit,
    is_operator,
    is_unary_minus_position,
    last_number_chunk,
    needs_leading_zero,
)


class TestClassifier:
    @pytest.mark.parametrize("ch", ["+", "-", "*", "/"])
    def test_operators(self, ch):
        assert is_operator(ch)

    @pytest.mark.parametrize("ch", ["", "x", ".", "5", " ", "^", "--"])
    def test_non_operators(self, ch):
        assert not is_operator(ch)

    def test_ascii_digits_only(self):
        assert all(is_digit(ch) for ch in "0123456789")
        assert not is_digit("²")
        assert not is_digit("٣")
        assert not is_digit("12")
        assert not is_digit("")

    def test_decimal_point(self):
        assert is_decimal_point(".")
        assert not is_decimal_point(",")


class TestCanAppend:
    def test_cannot_open_with_multiplicative_operator(self):
        assert can_append("", "*") is False
        assert can_append("", "/") is False

    def test_can_open_with_minus_only(self):
        assert can_append("", "-") is True
        assert can_append("", "+") is False

    def test_single_unary_minus_after_operator(self):
        assert can_append("3+", "+") is False
        assert can_append("3+", "-") is True
        assert can_append("3*", "-") is True
        assert can_append("3-", "-") is False
        assert can_append("3*-", "-") is False
        assert can_append("3*-", "+") is False
        assert can_append("-", "-") is False

    def test_operator_after_number(self):
        for op in "+-*/":
            assert can_append("12", op) is True
            assert can_append("1.", op) is True

    def test_one_decimal_point_per_number(self):
        assert can_append("3.1", ".") is False
        assert can_append("3+2.1", ".") is False
        assert can_append("3.1+2", ".") is True
        assert can_append("3*-1.5", ".") is False
        assert can_append("", ".") is True

    def test_digits_always_accepted(self):
        assert can_append("", "7") is True
        assert can_append("3*-", "7") is True


def test_last_number_chunk():
    assert last_number_chunk("") == ""
    assert last_number_chunk("12.5") == "12.5"
    assert last_number_chunk("3+2.1") == "2.1"
    assert last_number_chunk("3+") == ""
    assert last_number_chunk("3*-") == "-"
    assert last_number_chunk("3*-1.5") == "-1.5"
    assert last_number_chunk("-4") == "-4"
    assert last_number_chunk("3-4") == "4"


def test_unary_minus_position_is_shared_rule():
    expr = "-3*-4-5"
    unary = [i for i, ch in enumerate(expr) if ch == "-" and is_unary_minus_position(expr, i)]
    assert unary == [0, 3]


def test_unary_minus_position_looks_at_raw_previous_character():
    assert is_unary_minus_position("-3", 0)
    assert is_unary_minus_position("3*-4", 2)
    assert not is_unary_minus_position("3 * -4", 4)
    assert not is_unary_minus_position(" -3", 1)
    assert not is_unary_minus_position("3 -4", 2)


def test_needs_leading_zero():
    assert needs_leading_zero("")
    assert needs_leading_zero("3+")
    assert needs_leading_zero("3*-")
    assert needs_leading_zero("-")
    assert not needs_leading_zero("3")
