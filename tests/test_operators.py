import math

import pytest

from core import (
    NumericResult, Operator, PostfixResult, PrefixResult, RESULT_TYPES, get_result_type
)


def test_numeric_combine():
    one, two = NumericResult.from_literal(1), NumericResult.from_literal(2)
    assert NumericResult.combine(Operator.ADD, one, two).output == 3.0
    assert NumericResult.combine(Operator.SUB, one, two).output == -1.0
    assert NumericResult.combine(Operator.MUL, one, two).output == 2.0
    assert NumericResult.combine(Operator.DIV, one, two).output == 0.5
    assert NumericResult.combine(Operator.POW, two, two).output == 4.0


def test_numeric_output_is_python_float():
    result = NumericResult.from_literal(3)
    assert type(result.output) is float


def test_numeric_follows_ieee_semantics():
    zero = NumericResult.from_literal(0)
    one = NumericResult.from_literal(1)
    assert NumericResult.combine(Operator.DIV, one, zero).output == math.inf
    assert math.isnan(NumericResult.combine(Operator.DIV, zero, zero).output)

    minus_eight = NumericResult.combine(Operator.SUB, zero, NumericResult.from_literal(8))
    third = NumericResult.from_literal(1 / 3)
    assert math.isnan(NumericResult.combine(Operator.POW, minus_eight, third).output)

    big = NumericResult.from_literal(10)
    assert NumericResult.combine(Operator.POW, big, NumericResult.from_literal(400)).output == math.inf


def test_prefix_and_postfix_combine():
    one, two = PrefixResult.from_literal(1), PrefixResult.from_literal(2.5)
    assert PrefixResult.combine(Operator.ADD, one, two).output == "(+ 1 2.5)"

    one, two = PostfixResult.from_literal(1), PostfixResult.from_literal(2.5)
    assert PostfixResult.combine(Operator.ADD, one, two).output == "(1 2.5 +)"


def test_text_forms_nest():
    a, b, c = (PrefixResult.from_literal(v) for v in (1, 2, 3))
    inner = PrefixResult.combine(Operator.MUL, a, b)
    assert PrefixResult.combine(Operator.SUB, inner, c).output == "(- (* 1 2) 3)"


def test_literal_rendering():
    assert PrefixResult.from_literal(1.0).output == "1"
    assert PrefixResult.from_literal(2.50).output == "2.5"
    assert PostfixResult.from_literal(0.125).output == "0.125"


@pytest.mark.parametrize("result_type", [NumericResult, PrefixResult, PostfixResult])
@pytest.mark.parametrize("paren", [Operator.LEFT_PAREN, Operator.RIGHT_PAREN])
def test_combine_with_parenthesis_is_a_defect(result_type, paren):
    one = result_type.from_literal(1)
    with pytest.raises(AssertionError):
        result_type.combine(paren, one, one)


def test_get_result_type():
    assert get_result_type('value') is NumericResult
    assert get_result_type('prefix') is PrefixResult
    assert get_result_type('postfix') is PostfixResult
    assert set(RESULT_TYPES) == {'value', 'prefix', 'postfix'}
    with pytest.raises(ValueError):
        get_result_type('infix')
