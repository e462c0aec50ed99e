"""Calculator configuration.

Plain dataclass with package defaults. Values are only overridden from the
command line; opcalc reads no config files and no environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass

from opcalc.errors import ConfigurationError

# Default values
DEFAULT_MAX_OPERATIONS = 16
DEFAULT_TERMINATOR = "="


@dataclass
class CalculatorConfig:
    """Settings shared by every calculator of one session."""

    max_operations: int = DEFAULT_MAX_OPERATIONS
    terminator: str = DEFAULT_TERMINATOR
    # Substitute 0 for an unknown operator instead of failing the evaluation.
    legacy_unknown_operator: bool = False

    def validate(self) -> CalculatorConfig:
        if self.max_operations <= 0:
            raise ConfigurationError("Capacity for operations cannot be zero!")
        if not self.terminator or self.terminator.isspace():
            raise ConfigurationError("Terminator cannot be empty!")
        return self
