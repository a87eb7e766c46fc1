"""
Notation modes.

The REPL works in exactly one notation for its whole lifetime. The mode
is chosen once at startup and handed down; it knows which parser to use
and which prompt to show.
"""

from enum import Enum

from exprcalc.config import REPL_CONFIG
from exprcalc.lexer import Token
from exprcalc.parser.infix_parser import parse_infix
from exprcalc.parser.postfix_parser import parse_postfix
from exprcalc.syntax_tree.nodes import ASTNode


class NotationMode(Enum):
    """Closed set of supported input notations."""

    INFIX = "infix"
    POSTFIX = "postfix"

    def parse(self, tokens: list[Token]) -> ASTNode:
        """Parse tokens with the parser for this notation."""
        if self is NotationMode.POSTFIX:
            return parse_postfix(tokens)
        return parse_infix(tokens)

    @property
    def prompt(self) -> str:
        return REPL_CONFIG["prompts"][self.value]
