"""Left-to-right expression evaluator.

An expression is a flat token stream::

    <num> <op> <num> <op> ... <num> =

There is no precedence and no grouping: ``3 + 4 * 2 =`` is ``(3 + 4) * 2``.
The evaluator only needs something with a ``calculate(n1, n2, symbol)``
method, normally a Calculator.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Iterator, Protocol

from opcalc.config import DEFAULT_TERMINATOR
from opcalc.errors import MalformedExpressionError
from opcalc.models import EvaluationResult

logger = logging.getLogger(__name__)


class SupportsCalculate(Protocol):
    def calculate(self, n1: float, n2: float, symbol: str) -> float: ...


def tokenize(expression: str) -> list[str]:
    """Split an expression on whitespace.

    Tokens must be separated by spaces, so ``3+4`` is one (malformed) token.
    """
    return expression.split()


def parse_number(token: str) -> float:
    """Convert a token to a finite float or raise MalformedExpressionError."""
    try:
        value = float(token)
    except ValueError:
        raise MalformedExpressionError(f"Couldn't convert '{token}' to number")
    if not math.isfinite(value):
        raise MalformedExpressionError(f"'{token}' is not a finite number")
    return value


def _next_token(tokens: Iterator[str], expected: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise MalformedExpressionError(f"Expression ended while expecting {expected}")


def fold(
    calculator: SupportsCalculate,
    tokens: Iterable[str],
    terminator: str = DEFAULT_TERMINATOR,
) -> EvaluationResult:
    """Fold ``tokens`` left to right until ``terminator``.

    Tokens are pulled lazily, so ``tokens`` may be an interactive reader that
    blocks for more input. Nothing after the terminator is consumed.

    Raises:
        MalformedExpressionError: non-numeric operand, or no terminator.
        UnknownOperatorError, DomainError: propagated from ``calculate``.
    """
    stream = iter(tokens)
    acc = parse_number(_next_token(stream, "a number"))
    steps: list[tuple[str, float]] = []

    while True:
        symbol = _next_token(stream, f"an operator or '{terminator}'")
        if symbol == terminator:
            break
        operand = parse_number(_next_token(stream, f"a number after '{symbol}'"))
        acc = calculator.calculate(acc, operand, symbol)
        steps.append((symbol, operand))
        logger.debug("step %d: %s %s -> %s", len(steps), symbol, operand, acc)

    return EvaluationResult(value=acc, steps=steps)


def format_number(value: float) -> str:
    """Render a result the way the calculator prints it (``14`` not ``14.0``)."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
