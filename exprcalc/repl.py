"""
Interactive read-eval-print loop.

Each input line is one of:
- ``exit``: leave the loop
- ``defined``: list the variable table
- ``<letter> = <expression>``: store a definition (kept as raw text)
- anything else: evaluate it in the notation chosen at startup

Errors are reported as ``Error: <message>`` and never end the loop.
"""

import logging
from collections.abc import Callable

import typer

from exprcalc.config import REPL_CONFIG
from exprcalc.errors import ExpressionError
from exprcalc.executors import ExpressionExecutor
from exprcalc.parser.notation import NotationMode
from exprcalc.variables import VariableTable, parse_assignment

logger = logging.getLogger(__name__)


class Repl:
    """
    Command loop around the expression executor.

    Usage:
        Repl(NotationMode.POSTFIX).run()
    """

    def __init__(
        self,
        mode: NotationMode = NotationMode.INFIX,
        variables: VariableTable | None = None,
        input_func: Callable[[str], str] = input,
        detect_cycles: bool = True,
    ):
        """
        Initialize the REPL.

        Args:
            mode: Notation used for every evaluated line
            variables: Table to store definitions in (a new one by default)
            input_func: Reads one line given a prompt
            detect_cycles: Passed through to the evaluator
        """
        self.mode = mode
        self.variables = variables if variables is not None else VariableTable()
        self.input_func = input_func
        self.detect_cycles = detect_cycles
        self.commands = [REPL_CONFIG["exit_command"], REPL_CONFIG["list_command"]]

    def run(self) -> None:
        """Print the banner and process lines until exit or end of input."""
        typer.echo(REPL_CONFIG["banner"])

        while True:
            try:
                line = self.input_func(self.mode.prompt)
            except (EOFError, KeyboardInterrupt):
                typer.echo()
                return

            if not self.handle_line(line):
                return

    def handle_line(self, line: str) -> bool:
        """
        Process one line of input.

        Returns:
            False if the loop should stop
        """
        line = line.strip()
        if not line:
            return True

        if line == REPL_CONFIG["exit_command"]:
            return False

        if line == REPL_CONFIG["list_command"]:
            self._list_variables()
            return True

        try:
            if "=" in line:
                self._assign(line)
            else:
                self._evaluate(line)
        except ExpressionError as e:
            logger.debug("Failed to handle %r: %s", line, e)
            typer.echo(f"Error: {e}")

        return True

    def _assign(self, line: str) -> None:
        name, definition = parse_assignment(line)
        typer.echo(f"Assignment: {name} = {definition}")
        self.variables.set(name, definition)

    def _evaluate(self, line: str) -> None:
        executor = ExpressionExecutor(
            line, self.mode, self.variables, detect_cycles=self.detect_cycles
        )
        typer.echo(executor.execute())

    def _list_variables(self) -> None:
        typer.echo("Here is a list of defined variables:")

        if not self.variables:
            typer.echo("There are no defined variables :(")
            return

        typer.echo(self.variables.to_frame().to_string(index=False))

    def complete(self, text: str, state: int) -> str | None:
        """readline completer offering the REPL command words."""
        matches = [command for command in self.commands if command.startswith(text)]
        if state < len(matches):
            return matches[state]
        return None

    def install_completion(self) -> None:
        """Bind Tab to command completion and enable line history."""
        import readline

        readline.set_completer(self.complete)
        readline.parse_and_bind("tab: complete")
        readline.set_history_length(REPL_CONFIG["history_length"])
