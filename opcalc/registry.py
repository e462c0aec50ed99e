"""Operation factory for opcalc.

Maps the symbols a user may pick to the Operation classes that implement
them. The table only holds classes, so every call hands out a new,
independently owned instance.
"""

from __future__ import annotations

from opcalc.errors import InvalidOperatorError
from opcalc.models import OperationInfo
from opcalc.operations import (
    AddOperation,
    DivideOperation,
    MultiplyOperation,
    Operation,
    PowerOperation,
    RootOperation,
    SubtractOperation,
)

# Menu order: the order operations are offered to the user.
_OPERATION_TYPES: dict[str, type[Operation]] = {
    cls.SYMBOL: cls
    for cls in (
        AddOperation,
        SubtractOperation,
        MultiplyOperation,
        DivideOperation,
        PowerOperation,
        RootOperation,
    )
}


def supported_symbols() -> list[str]:
    """Symbols the factory can build, in menu order."""
    return list(_OPERATION_TYPES)


def is_supported(symbol: str) -> bool:
    return symbol in _OPERATION_TYPES


def available_operations() -> list[OperationInfo]:
    """(symbol, name) for every operation the factory can build."""
    return [OperationInfo(symbol=symbol, name=cls.NAME) for symbol, cls in _OPERATION_TYPES.items()]


def create_operation(symbol: str) -> Operation:
    """Build a fresh operation for ``symbol``.

    Raises:
        InvalidOperatorError: if no operation uses that symbol.
    """
    cls = _OPERATION_TYPES.get(symbol)
    if cls is None:
        raise InvalidOperatorError(symbol)
    return cls()
