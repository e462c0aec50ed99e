"""Tests for the left-to-right evaluator and number handling."""

import pytest

from opcalc.calculator import Calculator
from opcalc.errors import DomainError, MalformedExpressionError
from opcalc.evaluator import fold, format_number, parse_number, tokenize
from opcalc.registry import create_operation, supported_symbols


@pytest.fixture
def calc():
    """Calculator with every available operation."""
    return Calculator("all", [create_operation(s) for s in supported_symbols()])


# --- Folding ---

def test_no_precedence(calc):
    assert calc.evaluate("2 + 3 * 4 =") == pytest.approx(20.0)


def test_mixed_operations(calc):
    assert calc.evaluate("10 - 4 / 2 ** 3 V 3 =") == pytest.approx(3.0)


def test_decimals_and_negatives(calc):
    assert calc.evaluate("-1.5 * -2 + 0.25 =") == pytest.approx(3.25)


def test_root_of_negative_in_expression(calc):
    assert calc.evaluate("0 - 8 V 3 =") == pytest.approx(-2.0)


def test_stops_at_terminator():
    calc = Calculator("add", [create_operation("+")])
    tokens = iter(["1", "+", "2", "=", "leftover"])
    assert fold(calc, tokens).value == 3
    assert next(tokens) == "leftover"


def test_custom_terminator():
    calc = Calculator("add", [create_operation("+")])
    assert fold(calc, ["1", "+", "2", "end"], terminator="end").value == 3


def test_domain_error_mid_expression(calc):
    with pytest.raises(DomainError):
        calc.evaluate("1 - 1 / 0 + 5 =")


# --- Malformed input ---

@pytest.mark.parametrize(
    "expression",
    [
        "",
        "=",
        "1 +",
        "1 + 2",
        "1 + =",
        "abc + 1 =",
        "1 + two =",
        "3+4 =",
        "nan + 1 =",
        "1 * inf =",
    ],
)
def test_malformed(calc, expression):
    with pytest.raises(MalformedExpressionError):
        calc.evaluate(expression)


# --- Helpers ---

def test_tokenize_splits_on_any_whitespace():
    assert tokenize("  1\t+\n2  = ") == ["1", "+", "2", "="]


def test_parse_number():
    assert parse_number("2.5e2") == 250.0
    with pytest.raises(MalformedExpressionError):
        parse_number("2,5")


@pytest.mark.parametrize(
    "value, text",
    [(14.0, "14"), (-2.0, "-2"), (3.75, "3.75"), (0.1 + 0.2, "0.30000000000000004"), (1e20, "1e+20")],
)
def test_format_number(value, text):
    assert format_number(value) == text
