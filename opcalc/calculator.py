"""Calculator: a named, bounded collection of operations.

Owns clones of the operations it is given, looks them up by symbol in
registration order and folds expressions through the evaluator. The count
of completed evaluations lives in a SuccessCounter injected by the caller,
so every calculator of one session reports the same total.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Sequence, Union

from opcalc.config import DEFAULT_MAX_OPERATIONS, DEFAULT_TERMINATOR, CalculatorConfig
from opcalc.errors import (
    CapacityExceededError,
    ConfigurationError,
    DomainError,
    DuplicateOperatorError,
    MalformedExpressionError,
    UnknownOperatorError,
)
from opcalc.evaluator import fold, tokenize
from opcalc.models import EvaluationResult, OperationInfo, SuccessCounter
from opcalc.operations import Operation

logger = logging.getLogger(__name__)

INPUT_FORMAT_HELP = (
    "<num1> <symbol> <num2> <symbol> <num3> ... <numN> =",
    "Please make sure to include spaces between each number and operator.",
)


class Calculator:
    """A named calculator supporting a chosen set of operations.

    Args:
        name: Display name, must not be empty.
        operations: Initial operations, cloned in order.
        capacity: Maximum number of operations (default 16).
        counter: Shared success counter. A private one is created if omitted.
        terminator: Token that ends an expression.
        legacy_unknown_operator: Treat an unknown symbol as producing 0
            instead of raising UnknownOperatorError.

    Raises:
        ConfigurationError: empty name or non-positive capacity.
        DuplicateOperatorError: two initial operations share a symbol.
        CapacityExceededError: more initial operations than ``capacity``.
    """

    def __init__(
        self,
        name: str,
        operations: Iterable[Operation] = (),
        capacity: int = DEFAULT_MAX_OPERATIONS,
        counter: Optional[SuccessCounter] = None,
        terminator: str = DEFAULT_TERMINATOR,
        legacy_unknown_operator: bool = False,
    ) -> None:
        if not name:
            raise ConfigurationError("Invalid calculator name!")
        if capacity <= 0:
            raise ConfigurationError("Capacity for operations cannot be zero!")
        if not terminator:
            raise ConfigurationError("Terminator cannot be empty!")

        self._name = name
        self._capacity = capacity
        self._operations: list[Operation] = []
        self._counter = counter if counter is not None else SuccessCounter()
        self.terminator = terminator
        self.legacy_unknown_operator = legacy_unknown_operator

        for op in operations:
            self.add_operation(op)

    @classmethod
    def from_config(
        cls,
        name: str,
        operations: Iterable[Operation],
        config: CalculatorConfig,
        counter: Optional[SuccessCounter] = None,
    ) -> Calculator:
        config.validate()
        return cls(
            name,
            operations,
            capacity=config.max_operations,
            counter=counter,
            terminator=config.terminator,
            legacy_unknown_operator=config.legacy_unknown_operator,
        )

    # --- Properties ---

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not value:
            raise ConfigurationError("Invalid calculator name!")
        self._name = value

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def operations(self) -> tuple[Operation, ...]:
        """Clones of the registered operations; changing them has no effect here."""
        return tuple(op.create_new() for op in self._operations)

    @property
    def counter(self) -> SuccessCounter:
        return self._counter

    def __len__(self) -> int:
        return len(self._operations)

    def is_full(self) -> bool:
        return len(self._operations) >= self._capacity

    # --- Operation set ---

    def list_supported_operations(self) -> list[OperationInfo]:
        """Symbol and name of each operation, in registration order."""
        return [OperationInfo(symbol=op.symbol, name=op.name) for op in self._operations]

    def _find_operation(self, symbol: str) -> Optional[Operation]:
        for op in self._operations:
            if op.symbol == symbol:
                return op
        return None

    def add_operation(self, op: Operation) -> Calculator:
        """Append a clone of ``op`` and return this calculator.

        Raises:
            CapacityExceededError: the calculator is full. Nothing is added.
            DuplicateOperatorError: an operation with this symbol exists.
        """
        if self.is_full():
            raise CapacityExceededError(self._capacity)
        if self._find_operation(op.symbol) is not None:
            raise DuplicateOperatorError(op.symbol)
        self._operations.append(op.create_new())
        logger.debug("%s: registered %s (%s)", self._name, op.symbol, op.name)
        return self

    def input_format(self) -> list[str]:
        return list(INPUT_FORMAT_HELP)

    # --- Evaluation ---

    def calculate(self, n1: float, n2: float, symbol: str) -> float:
        """Apply the operation registered under ``symbol`` to ``n1`` and ``n2``."""
        op = self._find_operation(symbol)
        if op is None:
            if self.legacy_unknown_operator:
                logger.info("%s: unknown operator %r, substituting 0", self._name, symbol)
                return 0.0
            raise UnknownOperatorError(symbol)
        result = op.execute(n1, n2)
        if not math.isfinite(result):
            raise DomainError(f"{n1} {symbol} {n2} is not a finite number")
        return result

    def evaluate_detailed(self, tokens: Union[str, Iterable[str]]) -> EvaluationResult:
        """Fold an expression and count it as a successful calculation.

        ``tokens`` is either a whole expression string, a sequence of tokens
        or a lazy token source such as an interactive reader. A string or
        sequence must end at the terminator; a lazy source is left positioned
        just after it. A failed evaluation is not counted.
        """
        if isinstance(tokens, str):
            tokens = tokenize(tokens)
        complete = isinstance(tokens, Sequence)
        stream = iter(tokens)
        result = fold(self, stream, self.terminator)
        if complete:
            leftover = list(stream)
            if leftover:
                raise MalformedExpressionError(
                    f"Unexpected tokens after '{self.terminator}': {' '.join(leftover)}"
                )
        self._counter.increment()
        logger.debug("%s: evaluation #%d = %s", self._name, self._counter.value, result.value)
        return result

    def evaluate(self, tokens: Union[str, Iterable[str]]) -> float:
        return self.evaluate_detailed(tokens).value

    def get_success_count(self) -> int:
        return self._counter.value

    # --- Copying ---

    def copy(self) -> Calculator:
        """Independent copy with cloned operations and the same counter."""
        clone = Calculator(
            self._name,
            capacity=self._capacity,
            counter=self._counter,
            terminator=self.terminator,
            legacy_unknown_operator=self.legacy_unknown_operator,
        )
        clone._operations = [op.create_new() for op in self._operations]
        return clone

    def __copy__(self) -> Calculator:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Calculator:
        return self.copy()

    def __repr__(self) -> str:
        symbols = " ".join(op.symbol for op in self._operations)
        return f"Calculator(name={self._name!r}, operations=[{symbols}], capacity={self._capacity})"
