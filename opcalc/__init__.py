"""opcalc — Interactive left-to-right calculator.

Name a calculator, pick the operations it supports (+ - * / ** V) and fold
flat expressions like ``3 + 4 * 2 =`` strictly left to right.

Usage:
    python -m opcalc run                              # Interactive session
    python -m opcalc eval "2 ** 10 =" --ops "**"      # One-shot evaluation
"""

from opcalc.calculator import Calculator
from opcalc.config import CalculatorConfig
from opcalc.errors import (
    CalculatorError,
    CapacityExceededError,
    ConfigurationError,
    DomainError,
    DuplicateOperatorError,
    EvaluationError,
    InvalidOperatorError,
    MalformedExpressionError,
    UnknownOperatorError,
)
from opcalc.models import OperationInfo, SuccessCounter
from opcalc.operations import (
    AddOperation,
    DivideOperation,
    MultiplyOperation,
    Operation,
    PowerOperation,
    RootOperation,
    SubtractOperation,
)
from opcalc.registry import create_operation

__all__ = [
    "Calculator",
    "CalculatorConfig",
    "CalculatorError",
    "CapacityExceededError",
    "ConfigurationError",
    "DomainError",
    "DuplicateOperatorError",
    "EvaluationError",
    "InvalidOperatorError",
    "MalformedExpressionError",
    "UnknownOperatorError",
    "OperationInfo",
    "SuccessCounter",
    "Operation",
    "AddOperation",
    "SubtractOperation",
    "MultiplyOperation",
    "DivideOperation",
    "PowerOperation",
    "RootOperation",
    "create_operation",
]
