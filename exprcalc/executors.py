"""
Expression Executors - Entry point for evaluating expression lines.

This module provides the ExpressionExecutor class that runs one line of
input through the lexer, the parser for the selected notation and the
evaluator.
"""

import logging
from collections.abc import Mapping
from typing import Any

from exprcalc.evaluator import ExpressionEvaluator
from exprcalc.lexer import tokenize
from exprcalc.parser.notation import NotationMode
from exprcalc.syntax_tree.nodes import ASTNode

logger = logging.getLogger(__name__)


class ExpressionExecutor:
    """
    Main executor for expression lines.

    Usage:
        executor = ExpressionExecutor("2 * x + 1", variables={"x": "3"})
        result = executor.execute()
    """

    def __init__(
        self,
        line: str,
        mode: NotationMode = NotationMode.INFIX,
        variables: Mapping[str, str] | None = None,
        **options: Any,
    ):
        """
        Initialize the executor.

        Args:
            line: The expression text
            mode: Notation used to parse the line
            variables: Variable table used to resolve references
            **options: Evaluator options (detect_cycles, max_value, max_depth)
        """
        self.line = line
        self.mode = mode
        self.variables = variables if variables is not None else {}
        self.options = options
        self._ast: ASTNode | None = None

    def parse(self) -> ASTNode:
        """
        Parse the line into an AST.

        Returns:
            The parsed tree
        """
        if self._ast is None:
            tokens = tokenize(self.line)
            self._ast = self.mode.parse(tokens)
        return self._ast

    def execute(self) -> int:
        """
        Evaluate the line and return the result.

        Returns:
            The unsigned integer value of the expression
        """
        ast = self.parse()
        result = ExpressionEvaluator(self.variables, **self.options).evaluate(ast)
        logger.debug("%s => %d", self.line, result)
        return result


def evaluate_line(
    line: str,
    mode: NotationMode = NotationMode.INFIX,
    variables: Mapping[str, str] | None = None,
    **options: Any,
) -> int:
    """Evaluate a single line of input."""
    return ExpressionExecutor(line, mode, variables, **options).execute()
