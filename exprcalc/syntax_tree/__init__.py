"""
Syntax Tree module for expression parsing.

This module defines the node types that represent parsed expressions
and provides rendering utilities.

Note: Named 'syntax_tree' instead of 'ast' to avoid conflict with Python's built-in ast module.
"""

from exprcalc.syntax_tree.nodes import (
    ASTNode,
    BinaryOpNode,
    NumberNode,
    Operator,
    VariableNode,
)
from exprcalc.syntax_tree.printer import ASTPrinter, to_infix, to_postfix

__all__ = [
    "ASTNode",
    "BinaryOpNode",
    "NumberNode",
    "Operator",
    "VariableNode",
    "ASTPrinter",
    "to_infix",
    "to_postfix",
]
