"""CLI for opcalc.

Usage:
    python -m opcalc run                               # Interactive calculator
    python -m opcalc run --capacity 4                  # Smaller operation limit
    python -m opcalc ops                               # Show available operations
    python -m opcalc eval "3 + 4 * 2 =" --ops "+ *"    # One-shot evaluation
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from opcalc.calculator import Calculator
from opcalc.config import DEFAULT_MAX_OPERATIONS, CalculatorConfig
from opcalc.errors import (
    CapacityExceededError,
    ConfigurationError,
    EvaluationError,
    InvalidOperatorError,
)
from opcalc.evaluator import format_number, tokenize
from opcalc.registry import available_operations, create_operation
from opcalc.session import InteractiveSession

app = typer.Typer(
    name="opcalc",
    help="Interactive left-to-right calculator",
    no_args_is_help=True,
)
console = Console(soft_wrap=True)
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _config_or_exit(capacity: int, legacy_unknown_operator: bool) -> CalculatorConfig:
    try:
        return CalculatorConfig(
            max_operations=capacity,
            legacy_unknown_operator=legacy_unknown_operator,
        ).validate()
    except ConfigurationError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)


@app.command("run")
def cmd_run(
    capacity: int = typer.Option(DEFAULT_MAX_OPERATIONS, "--capacity", "-c", help="Maximum number of operations"),
    legacy_unknown_operator: bool = typer.Option(
        False, "--legacy-unknown-operator", help="Treat unknown operators as producing 0 instead of failing"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log evaluation steps to stderr"),
) -> None:
    """Set up a calculator and evaluate expressions interactively."""
    _setup_logging(verbose)
    config = _config_or_exit(capacity, legacy_unknown_operator)
    session = InteractiveSession(console, sys.stdin, config)
    try:
        code = session.run()
    except ConfigurationError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)
    raise typer.Exit(code)


@app.command("ops")
def cmd_ops() -> None:
    """Show every operation a calculator can be built with."""
    table = Table(title="Available Operations", show_header=True, header_style="bold")
    table.add_column("Symbol", style="green", justify="center")
    table.add_column("Name", min_width=10)

    for info in available_operations():
        table.add_row(escape(info.symbol), info.name)

    console.print()
    console.print(table)
    console.print()


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '3 + 4 * 2 ='"),
    ops: str = typer.Option("+ - * / ** V", "--ops", "-o", help="Space-separated operator symbols to enable"),
    name: str = typer.Option("opcalc", "--name", "-n", help="Calculator name"),
    legacy_unknown_operator: bool = typer.Option(
        False, "--legacy-unknown-operator", help="Treat unknown operators as producing 0 instead of failing"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log evaluation steps to stderr"),
) -> None:
    """Evaluate a single expression and print the result."""
    _setup_logging(verbose)
    config = _config_or_exit(DEFAULT_MAX_OPERATIONS, legacy_unknown_operator)

    try:
        calculator = Calculator.from_config(
            name, [create_operation(symbol) for symbol in tokenize(ops)], config
        )
    except (ConfigurationError, CapacityExceededError, InvalidOperatorError) as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)

    tokens = tokenize(expression)
    if not tokens or tokens[-1] != config.terminator:
        tokens.append(config.terminator)

    try:
        value = calculator.evaluate(tokens)
    except EvaluationError as e:
        err_console.print(f"[red]Invalid operation:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(format_number(value))


if __name__ == "__main__":
    app()
