"""Tests for configuration defaults, validation and the shared models."""

import pytest

from opcalc.config import DEFAULT_MAX_OPERATIONS, DEFAULT_TERMINATOR, CalculatorConfig
from opcalc.errors import CalculatorError, ConfigurationError, DomainError, EvaluationError
from opcalc.models import EvaluationResult, OperationInfo, SuccessCounter


class TestCalculatorConfig:
    """Tests for CalculatorConfig."""

    def test_defaults(self):
        config = CalculatorConfig()
        assert config.max_operations == DEFAULT_MAX_OPERATIONS == 16
        assert config.terminator == DEFAULT_TERMINATOR == "="
        assert config.legacy_unknown_operator is False

    def test_validate_returns_self(self):
        config = CalculatorConfig(max_operations=4)
        assert config.validate() is config

    @pytest.mark.parametrize("capacity", [0, -3])
    def test_non_positive_capacity(self, capacity):
        with pytest.raises(ConfigurationError):
            CalculatorConfig(max_operations=capacity).validate()

    @pytest.mark.parametrize("terminator", ["", "  "])
    def test_blank_terminator(self, terminator):
        with pytest.raises(ConfigurationError):
            CalculatorConfig(terminator=terminator).validate()


class TestModels:
    """Tests for the small data models."""

    def test_counter_starts_at_zero_and_increments(self):
        counter = SuccessCounter()
        assert counter.value == 0
        assert counter.increment() == 1
        assert counter.increment() == 2

    def test_operation_info_is_frozen(self):
        info = OperationInfo(symbol="+", name="Add")
        with pytest.raises(AttributeError):
            info.symbol = "-"

    def test_evaluation_result_defaults(self):
        assert EvaluationResult(value=1.0).step_count == 0


def test_error_hierarchy():
    assert issubclass(DomainError, EvaluationError)
    assert issubclass(EvaluationError, CalculatorError)
    assert not issubclass(ConfigurationError, EvaluationError)
