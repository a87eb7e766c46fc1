"""
Postfix Parser - Reduces reverse Polish token sequences into AST nodes.

The sequence is consumed from its tail: an operator is read first and
its operands are then pulled from the tokens before it, right operand
first.
"""

import logging

from exprcalc.lexer import Token, TokenType
from exprcalc.parser.errors import ParserError
from exprcalc.syntax_tree.nodes import (
    ASTNode,
    BinaryOpNode,
    NumberNode,
    Operator,
    VariableNode,
)

logger = logging.getLogger(__name__)

OPERATORS = {
    TokenType.SUM: Operator.SUM,
    TokenType.PRODUCT: Operator.PRODUCT,
}


class PostfixParser:
    """
    Parser for postfix (reverse Polish) notation.

    The token sequence must end with the EOF token produced by the
    lexer. Parentheses are rejected. Tokens left at the head of the
    sequence once the tree is complete are ignored unless the parser is
    created with ``strict=True``.
    """

    def __init__(self, tokens: list[Token], strict: bool = False):
        self.tokens = list(tokens)
        self.strict = strict

    def parse(self) -> ASTNode:
        """Parse the token sequence into an AST."""
        if not self.tokens:
            raise ParserError("Unexpected end of input")

        last = self.tokens.pop()
        if last.type != TokenType.EOF:
            raise ParserError(
                f"Postfix input must end with EOF, got {last!r}", last, TokenType.EOF
            )

        for token in self.tokens:
            if token.type in (TokenType.LPAREN, TokenType.RPAREN):
                raise ParserError("Parentheses are not allowed in postfix notation", token)

        try:
            expression = self._parse_expression()
        except RecursionError as e:
            raise ParserError("Expression is nested too deeply") from e

        if self.strict and self.tokens:
            leftover = self.tokens[-1]
            raise ParserError(f"Unexpected leftover token {leftover!r}", leftover)

        logger.debug("Parsed postfix expression: %r", expression)
        return expression

    def _parse_expression(self) -> ASTNode:
        """Reduce the last remaining token (and its operands) into a node."""
        if not self.tokens:
            raise ParserError("Unexpected end of input")

        token = self.tokens.pop()

        if token.type in OPERATORS:
            # The right operand sits closer to the operator, so it is reduced first.
            right = self._parse_expression()
            left = self._parse_expression()
            return BinaryOpNode(OPERATORS[token.type], left, right)

        if token.type == TokenType.NUMBER:
            return NumberNode(token.value)

        if token.type == TokenType.VARIABLE:
            return VariableNode(token.value)

        raise ParserError(f"Unexpected token {token!r}", token)


def parse_postfix(tokens: list[Token], strict: bool = False) -> ASTNode:
    """
    Parse a postfix token sequence.

    Args:
        tokens: Tokens produced by the lexer; the list is not modified
        strict: Reject tokens left over after the expression

    Returns:
        The root of the parsed tree

    Raises:
        ParserError: If the sequence does not end with EOF, contains a
            parenthesis, or runs out of operands
    """
    return PostfixParser(tokens, strict=strict).parse()
