"""
Expression evaluator for arithmetic expressions.

Evaluates AST nodes against a variable table (single-letter name -> raw
expression text). Variables are resolved lazily: the stored text is
tokenized and parsed as infix every time the variable is read, then the
resulting tree is evaluated against the same table.

Pure evaluation: neither the tree nor the table is modified.
"""

import logging
from collections.abc import Mapping

from exprcalc.config import LIMITS
from exprcalc.errors import ExpressionError
from exprcalc.lexer import tokenize
from exprcalc.parser.infix_parser import parse_infix
from exprcalc.syntax_tree.nodes import (
    ASTNode,
    BinaryOpNode,
    NumberNode,
    Operator,
    VariableNode,
)

logger = logging.getLogger(__name__)


class EvaluationError(ExpressionError):
    """Error during expression evaluation."""


class UndefinedVariableError(EvaluationError):
    """A referenced variable has no entry in the table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable {name} not found.")


class CyclicVariableError(EvaluationError):
    """A variable is defined, directly or indirectly, in terms of itself."""

    def __init__(self, chain: tuple[str, ...]):
        self.chain = chain
        super().__init__(
            f"Variable {chain[0]} is defined in terms of itself: {' -> '.join(chain)}"
        )


class RecursionLimitError(EvaluationError):
    """Evaluation went deeper than the configured or interpreter limit."""


class ArithmeticOverflowError(EvaluationError):
    """A sum or product does not fit in the value range."""


class ExpressionEvaluator:
    """
    Tree-walking evaluator over a read-only variable table.

    With ``detect_cycles`` on, the chain of variables currently being
    resolved is carried through the walk and re-entering one of them
    raises CyclicVariableError. With it off, a self-referencing table
    recurses until ``max_depth`` nested lookups and then raises
    RecursionLimitError.
    """

    def __init__(
        self,
        variables: Mapping[str, str] | None = None,
        *,
        detect_cycles: bool = True,
        max_value: int = LIMITS["max_value"],
        max_depth: int = LIMITS["max_variable_depth"],
    ):
        self.variables: Mapping[str, str] = variables if variables is not None else {}
        self.detect_cycles = detect_cycles
        self.max_value = max_value
        self.max_depth = max_depth

    def evaluate(self, node: ASTNode) -> int:
        """
        Evaluate a tree.

        Args:
            node: Root of the parsed expression

        Returns:
            The unsigned integer result

        Raises:
            EvaluationError: For undefined or cyclic variables, overflow,
                or runaway recursion
            LexerError, ParserError: If a variable's stored text is invalid
        """
        try:
            return self._interpret(node, ())
        except RecursionError as e:
            raise RecursionLimitError("Expression is nested too deeply to evaluate") from e

    def _interpret(self, node: ASTNode, resolving: tuple[str, ...]) -> int:
        """Dispatch evaluation to the appropriate handler."""
        if isinstance(node, NumberNode):
            return node.value

        if isinstance(node, VariableNode):
            return self._interpret_variable(node, resolving)

        if isinstance(node, BinaryOpNode):
            return self._interpret_binary(node, resolving)

        raise EvaluationError(f"Unknown expression type: {type(node).__name__}")

    def _interpret_variable(self, node: VariableNode, resolving: tuple[str, ...]) -> int:
        name = node.name
        if name not in self.variables:
            raise UndefinedVariableError(name)

        if self.detect_cycles and name in resolving:
            start = resolving.index(name)
            raise CyclicVariableError(resolving[start:] + (name,))

        if len(resolving) >= self.max_depth:
            raise RecursionLimitError(
                f"Variable resolution exceeded {self.max_depth} levels at {name}"
            )

        definition = self.variables[name]
        logger.debug("Resolving variable %s = %s", name, definition)

        tree = parse_infix(tokenize(definition))
        return self._interpret(tree, resolving + (name,))

    def _interpret_binary(self, node: BinaryOpNode, resolving: tuple[str, ...]) -> int:
        left = self._interpret(node.left, resolving)
        right = self._interpret(node.right, resolving)

        if node.operator is Operator.SUM:
            result = left + right
        else:
            result = left * right

        if result > self.max_value:
            raise ArithmeticOverflowError(
                f"Arithmetic overflow: {left} {node.operator.value} {right} "
                f"exceeds {self.max_value}"
            )
        return result


def evaluate(
    node: ASTNode,
    variables: Mapping[str, str] | None = None,
    **options,
) -> int:
    """Evaluate a tree against a variable table.

    Keyword options are passed to :class:`ExpressionEvaluator`.
    """
    return ExpressionEvaluator(variables, **options).evaluate(node)
