"""Exception hierarchy for opcalc.

Construction-time invariant violations derive from ConfigurationError.
Everything that can go wrong while folding one expression derives from
EvaluationError, so a session can report the failure and carry on.
"""

from __future__ import annotations


class CalculatorError(Exception):
    """Base class for every error raised by opcalc."""


class ConfigurationError(CalculatorError):
    """An empty name or symbol, a non-positive capacity, or similar."""


class DuplicateOperatorError(ConfigurationError):
    """Two operations in one calculator share a symbol."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Operation with symbol '{symbol}' is already registered")
        self.symbol = symbol


class CapacityExceededError(CalculatorError):
    """Adding an operation to a calculator that is already full."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Capacity for operations exceeded ({capacity})")
        self.capacity = capacity


class InvalidOperatorError(CalculatorError):
    """The factory does not know how to build an operation for this symbol."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Invalid operator: '{symbol}'")
        self.symbol = symbol


class EvaluationError(CalculatorError):
    """A single evaluation failed; the calculator itself is still usable."""


class DomainError(EvaluationError):
    """Operands outside the domain of an operation (e.g. division by zero)."""


class UnknownOperatorError(EvaluationError):
    """An expression used a symbol the calculator does not support."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unsupported operator: '{symbol}'")
        self.symbol = symbol


class MalformedExpressionError(EvaluationError):
    """The token stream is not <num> <op> <num> ... =."""
