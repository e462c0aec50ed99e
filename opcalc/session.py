"""Interactive stdin/stdout session.

Flow:
1. Ask for the calculator's name
2. Ask how many operations it should support (0..capacity)
3. Read that many operator symbols, re-asking for the whole batch on error
4. Menu loop: list operations, show input format, calculate, exit

Input is read token by token from a text stream, so a single line may
answer several prompts and an expression may span several lines. After a
rejected answer the rest of the current line is discarded.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import IntEnum
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape

from opcalc.calculator import Calculator
from opcalc.config import CalculatorConfig
from opcalc.errors import EvaluationError
from opcalc.evaluator import format_number
from opcalc.models import SuccessCounter
from opcalc.registry import available_operations, create_operation, is_supported

logger = logging.getLogger(__name__)


class MenuOption(IntEnum):
    """Main menu entries."""

    LIST_OPERATIONS = 1
    INPUT_FORMAT = 2
    CALCULATE = 3
    EXIT = 4


_MENU_LABELS = {
    MenuOption.LIST_OPERATIONS: "List supported operations",
    MenuOption.INPUT_FORMAT: "List input format",
    MenuOption.CALCULATE: "Start calculation",
    MenuOption.EXIT: "Exit",
}


class TokenReader:
    """Whitespace-separated tokens from a line-oriented text stream.

    Iterating yields tokens until end of input; ``next_token`` raises
    EOFError there instead.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()
        self.at_eof = False

    def _fill(self) -> None:
        while not self._pending:
            line = self._stream.readline()
            if line == "":
                self.at_eof = True
                raise EOFError("end of input")
            self._pending.extend(line.split())

    def next_token(self) -> str:
        self._fill()
        return self._pending.popleft()

    def read_line(self) -> str:
        """Rest of the current line, or the next line if nothing is pending."""
        if self._pending:
            rest = " ".join(self._pending)
            self._pending.clear()
            return rest
        line = self._stream.readline()
        if line == "":
            self.at_eof = True
            raise EOFError("end of input")
        return line.strip()

    def discard_line(self) -> None:
        self._pending.clear()

    def __iter__(self) -> TokenReader:
        return self

    def __next__(self) -> str:
        try:
            return self.next_token()
        except EOFError:
            raise StopIteration


class InteractiveSession:
    """One interactive run: set up a calculator, then serve the menu."""

    def __init__(
        self,
        console: Console,
        stream: TextIO,
        config: Optional[CalculatorConfig] = None,
        counter: Optional[SuccessCounter] = None,
    ) -> None:
        self.console = console
        self.reader = TokenReader(stream)
        self.config = (config or CalculatorConfig()).validate()
        self.counter = counter if counter is not None else SuccessCounter()
        self.calculator: Optional[Calculator] = None

    def _prompt(self, text: str) -> None:
        self.console.print(text, end="")

    # --- Setup ---

    def _ask_name(self) -> str:
        while True:
            self._prompt("Enter calculator's name: ")
            name = self.reader.read_line()
            if name:
                return name
            self.console.print("Calculator name cannot be empty!")

    def _ask_operation_count(self) -> int:
        capacity = self.config.max_operations
        while True:
            self._prompt("Enter number of operations: ")
            token = self.reader.next_token()
            try:
                count = int(token)
            except ValueError:
                self.console.print("Couldn't convert to number!")
            else:
                if count < 0:
                    self.console.print("Number of operations cannot be negative!")
                elif count > capacity:
                    self.console.print(f"Exceeded operator capacity of {capacity}!")
                else:
                    return count
            self.reader.discard_line()

    def _ask_operations(self, count: int) -> list[str]:
        self.console.print("Enter operations: ")
        for info in available_operations():
            self.console.print(escape(str(info)))
        if count == 0:
            return []

        while True:
            symbols: list[str] = []
            for _ in range(count):
                symbol = self.reader.next_token()
                if not is_supported(symbol):
                    self.console.print("Invalid operator!")
                    break
                if symbol in symbols:
                    self.console.print("Duplicate operator!")
                    break
                symbols.append(symbol)
            self.reader.discard_line()
            if len(symbols) == count:
                return symbols

    def setup(self) -> Calculator:
        name = self._ask_name()
        count = self._ask_operation_count()
        symbols = self._ask_operations(count)
        self.calculator = Calculator.from_config(
            name,
            [create_operation(symbol) for symbol in symbols],
            self.config,
            counter=self.counter,
        )
        logger.debug("Created %r", self.calculator)
        return self.calculator

    # --- Menu ---

    def _print_menu(self) -> None:
        for option in MenuOption:
            self.console.print(f"{option.value}. {_MENU_LABELS[option]}")

    def _read_option(self) -> Optional[MenuOption]:
        token = self.reader.next_token()
        try:
            return MenuOption(int(token))
        except ValueError:
            return None

    def list_operations(self, calculator: Calculator) -> None:
        infos = calculator.list_supported_operations()
        if not infos:
            self.console.print("No operations configured.")
        for info in infos:
            self.console.print(escape(str(info)))

    def list_input_format(self, calculator: Calculator) -> None:
        for line in calculator.input_format():
            self.console.print(escape(line))

    def calculate(self, calculator: Calculator) -> None:
        try:
            result = calculator.evaluate_detailed(self.reader)
        except EvaluationError as e:
            logger.debug("Evaluation failed: %s", e)
            self.console.print(f"[red]Invalid operation:[/red] {escape(str(e))}")
            self.reader.discard_line()
            return
        self.console.print(format_number(result.value))

    def run(self) -> int:
        """Run the session to completion and return the exit code.

        End of input at any prompt ends the session like option 4.
        """
        try:
            calculator = self.setup()
            while True:
                self._print_menu()
                option = self._read_option()
                if option is None:
                    self.console.print("Invalid option, try again.")
                    self.reader.discard_line()
                elif option is MenuOption.LIST_OPERATIONS:
                    self.list_operations(calculator)
                elif option is MenuOption.INPUT_FORMAT:
                    self.list_input_format(calculator)
                elif option is MenuOption.CALCULATE:
                    self.calculate(calculator)
                    if self.reader.at_eof:
                        break
                else:
                    break
        except EOFError:
            logger.debug("End of input")

        self.console.print(f"{self.counter.value} successful calculation(s).")
        return 0
