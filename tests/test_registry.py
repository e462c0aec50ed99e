"""Tests for the operation factory."""

import pytest

from opcalc.errors import InvalidOperatorError
from opcalc.models import OperationInfo
from opcalc.operations import PowerOperation, RootOperation
from opcalc.registry import (
    available_operations,
    create_operation,
    is_supported,
    supported_symbols,
)


def test_supported_symbols_in_menu_order():
    assert supported_symbols() == ["+", "-", "*", "/", "**", "V"]


@pytest.mark.parametrize("symbol", ["+", "-", "*", "/", "**", "V"])
def test_create_operation_matches_symbol(symbol):
    assert create_operation(symbol).symbol == symbol


def test_create_operation_variants():
    assert isinstance(create_operation("**"), PowerOperation)
    assert isinstance(create_operation("V"), RootOperation)


def test_each_call_returns_new_instance():
    first = create_operation("+")
    second = create_operation("+")
    assert first is not second
    first.name = "Plus"
    assert second.name == "Add"


@pytest.mark.parametrize("symbol", ["", "^", "v", "sqrt", "***", "="])
def test_unknown_symbol_rejected(symbol):
    with pytest.raises(InvalidOperatorError):
        create_operation(symbol)


def test_is_supported():
    assert is_supported("**")
    assert not is_supported("%")


def test_available_operations():
    infos = available_operations()
    assert infos[0] == OperationInfo(symbol="+", name="Add")
    assert infos[-1] == OperationInfo(symbol="V", name="Root")
    assert str(infos[-1]) == "V - Root"
