"""Data models for opcalc.

OperationInfo, SuccessCounter, EvaluationResult: the small typed
structures that flow between calculator, evaluator and CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OperationInfo:
    """Read-only description of one operation, as listed to the user."""

    symbol: str
    name: str

    def __str__(self) -> str:
        return f"{self.symbol} - {self.name}"


@dataclass
class SuccessCounter:
    """Count of completed evaluations.

    Owned by the application context and shared by every calculator it
    creates (and every copy of them). Only ever goes up.
    """

    value: int = 0

    def increment(self) -> int:
        self.value += 1
        return self.value


@dataclass
class EvaluationResult:
    """Outcome of one evaluation: the final value plus the steps taken."""

    value: float
    steps: list[tuple[str, float]] = field(default_factory=list)

    @property
    def step_count(self) -> int:
        return len(self.steps)
