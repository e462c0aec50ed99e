"""Binary arithmetic operations.

One class per operation. Each carries a display name and the symbol the
user types, evaluates a pure rule in ``execute`` and can clone itself with
``create_new``. Domain failures raise DomainError instead of leaking NaN or
infinities into the running result.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from opcalc.errors import ConfigurationError, DomainError


class Operation(ABC):
    """Base class for a named binary operation identified by a symbol."""

    NAME: ClassVar[str] = ""
    SYMBOL: ClassVar[str] = ""

    def __init__(self, name: Optional[str] = None, symbol: Optional[str] = None) -> None:
        self._name = self.NAME if name is None else name
        self._symbol = self.SYMBOL if symbol is None else symbol
        self._assert_valid()

    def _assert_valid(self) -> None:
        if not self._name:
            raise ConfigurationError("Invalid operation name!")
        if not self._symbol:
            raise ConfigurationError("Invalid operation symbol!")

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not value:
            raise ConfigurationError("Invalid operation name!")
        self._name = value

    @property
    def symbol(self) -> str:
        return self._symbol

    @symbol.setter
    def symbol(self, value: str) -> None:
        if not value:
            raise ConfigurationError("Invalid operation symbol!")
        self._symbol = value

    def create_new(self) -> Operation:
        """Return an independent instance of the same variant."""
        return type(self)(name=self._name, symbol=self._symbol)

    @abstractmethod
    def execute(self, n1: float, n2: float) -> float:
        """Apply the operation to the running value ``n1`` and operand ``n2``."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operation):
            return NotImplemented
        return (type(self), self._name, self._symbol) == (type(other), other._name, other._symbol)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, symbol={self._symbol!r})"


def _finite(result: float, description: str) -> float:
    """Reject an IEEE overflow (inf) or an undefined result (nan)."""
    if not math.isfinite(result):
        raise DomainError(f"{description} is not a finite number")
    return result


class AddOperation(Operation):
    NAME = "Add"
    SYMBOL = "+"

    def execute(self, n1: float, n2: float) -> float:
        return _finite(n1 + n2, f"{n1} + {n2}")


class SubtractOperation(Operation):
    NAME = "Subtract"
    SYMBOL = "-"

    def execute(self, n1: float, n2: float) -> float:
        return _finite(n1 - n2, f"{n1} - {n2}")


class MultiplyOperation(Operation):
    NAME = "Multiply"
    SYMBOL = "*"

    def execute(self, n1: float, n2: float) -> float:
        return _finite(n1 * n2, f"{n1} * {n2}")


class DivideOperation(Operation):
    NAME = "Divide"
    SYMBOL = "/"

    def execute(self, n1: float, n2: float) -> float:
        if n2 == 0:
            raise DomainError("Cannot divide by zero!")
        return _finite(n1 / n2, f"{n1} / {n2}")


def _checked_pow(base: float, exponent: float) -> float:
    """math.pow with its ValueError/OverflowError mapped to DomainError."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        raise DomainError(f"{base} ** {exponent} is not a real number")
    except OverflowError:
        raise DomainError(f"{base} ** {exponent} is too large")


class PowerOperation(Operation):
    """n1 raised to n2.

    0 ** 0 is rejected outright. So are 0 to a negative power and a negative
    base with a fractional exponent, which have no real result.
    """

    NAME = "Power"
    SYMBOL = "**"

    def execute(self, n1: float, n2: float) -> float:
        if n1 == 0 and n2 == 0:
            raise DomainError("Cannot raise 0 to the power of 0!")
        if n1 == 0 and n2 < 0:
            raise DomainError("Cannot raise 0 to a negative power!")
        if n1 < 0 and not float(n2).is_integer():
            raise DomainError("Cannot raise negative number to a fractional power!")
        return _checked_pow(n1, n2)


class RootOperation(Operation):
    """The n2-th root of n1, i.e. n1 ** (1 / n2).

    A negative n1 only has a real root for an odd integer index, which is
    computed sign-aware: V(-8, 3) == -2.
    """

    NAME = "Root"
    SYMBOL = "V"

    def execute(self, n1: float, n2: float) -> float:
        if n1 < 0 and n2 < 0:
            raise DomainError("Cannot take negative root of negative number!")
        if n1 < 0 and not float(n2).is_integer():
            raise DomainError("Cannot take fractional root of negative number!")
        if n2 == 0:
            raise DomainError("Cannot take the zeroth root!")
        if n1 == 0 and n2 < 0:
            raise DomainError("Cannot take negative root of zero!")
        if n1 < 0:
            if int(n2) % 2 == 0:
                raise DomainError("Cannot take even root of negative number!")
            return -_checked_pow(-n1, 1.0 / n2)
        return _checked_pow(n1, 1.0 / n2)
