import math

import pytest

from calculator_engine import (
    SUPPORTED_OPERATORS,
    CalculatorEngine,
    evaluate,
    format_result,
    is_valid_result,
)


def test_examples_from_the_manual():
    assert not is_valid_result(evaluate("10", "0", "/"))
    assert evaluate("10", "3", "/") == 3.3333333333333335
    assert not is_valid_result(evaluate("-4", "", "sqrt"))
    assert evaluate("4", "", "sqrt") == 2
    assert evaluate("abc", "5", "+") == 5
    assert evaluate("2", "3", "^") == 8
    assert not is_valid_result(evaluate("-8", "0.3333333", "^"))


@pytest.mark.parametrize("left, right, op, expected", [
    ("2", "3", "+", 5.0),
    ("2", "3", "-", -1.0),
    ("2,5", "4", "*", 10.0),
    ("7", "2", "%", 1.0),
    ("-7", "2", "%", -1.0),
    ("7,5", "2", "%", 1.5),
    ("4", "0.5", "^", 2.0),
    ("2", "-1", "^", 0.5),
    ("9", "no importa", "sqrt", 3.0),
])
def test_operations(left, right, op, expected):
    assert evaluate(left, right, op) == expected


def test_modulo_by_zero_is_invalid():
    assert math.isnan(evaluate("5", "0", "%"))
    assert math.isnan(evaluate("5", "abc", "%"))


def test_division_by_subnormal_is_allowed():
    assert is_valid_result(evaluate("1e-300", "5e-324", "/"))


@pytest.mark.parametrize("op", ["", "x", "//", "SQRT", "log"])
def test_unknown_operator_is_invalid(op):
    assert math.isnan(evaluate("1", "2", op))


def test_overflow_is_infinite():
    assert evaluate("1e308", "10", "*") == math.inf
    assert evaluate("10", "400", "^") == math.inf
    assert evaluate("-10", "401", "^") == -math.inf
    assert evaluate("0", "-1", "^") == math.inf


def test_never_raises():
    samples = ["0", "-0", "1", "-1", "2,5", "1e308", "-1e308", "5e-324",
               "abc", "", None, "Infinity", "-Infinity", "NaN", "0.3333333"]
    for op in SUPPORTED_OPERATORS + ("?",):
        for left in samples:
            for right in samples:
                value = evaluate(left, right, op)
                assert isinstance(value, float)


def test_evaluate_detailed_reports_defaulted_operands():
    evaluation = CalculatorEngine().evaluate_detailed("abc", "5", "+")
    assert evaluation.value == 5
    assert evaluation.left_defaulted
    assert not evaluation.right_defaulted
    assert evaluation.is_valid


@pytest.mark.parametrize("value, text", [
    (3.3333333333333335, "3.3333333333333335"),
    (8.0, "8"),
    (0.1, "0.10000000000000001"),
    (1e20, "1E+20"),
    (-2.5, "-2.5"),
])
def test_format_result(value, text):
    assert format_result(value) == text
