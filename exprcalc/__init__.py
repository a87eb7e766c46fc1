"""
exprcalc - Evaluate small arithmetic expressions over unsigned integers.

Expressions use + and * over numbers and single-letter variables, in
infix or postfix notation. Variables hold raw expression text that is
re-parsed every time the variable is read.

Usage:
    from exprcalc import evaluate_line, NotationMode

    evaluate_line("2 * x + 1", variables={"x": "3"})          # 7
    evaluate_line("2 3 4 * +", NotationMode.POSTFIX)           # 14
"""

from exprcalc.errors import ExpressionError
from exprcalc.evaluator import (
    ArithmeticOverflowError,
    CyclicVariableError,
    EvaluationError,
    ExpressionEvaluator,
    RecursionLimitError,
    UndefinedVariableError,
    evaluate,
)
from exprcalc.executors import ExpressionExecutor, evaluate_line
from exprcalc.lexer import LexerError, Token, TokenType, tokenize
from exprcalc.parser import NotationMode, ParserError, parse_infix, parse_postfix
from exprcalc.syntax_tree import to_infix, to_postfix
from exprcalc.variables import AssignmentError, VariableTable

__all__ = [
    "ArithmeticOverflowError",
    "AssignmentError",
    "CyclicVariableError",
    "EvaluationError",
    "ExpressionError",
    "ExpressionEvaluator",
    "ExpressionExecutor",
    "LexerError",
    "NotationMode",
    "ParserError",
    "RecursionLimitError",
    "Token",
    "TokenType",
    "UndefinedVariableError",
    "VariableTable",
    "evaluate",
    "evaluate_line",
    "parse_infix",
    "parse_postfix",
    "to_infix",
    "to_postfix",
    "tokenize",
]

__version__ = "0.1.0"
