"""
Infix Parser - Recursive descent parser for infix expressions.

This module parses the token sequence produced by the lexer into AST
nodes. Both operators are right-recursive, so chains lean to the right:
``1+2+3`` becomes ``Sum(1, Sum(2, 3))``.
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


class InfixParser:
    """
    Recursive descent parser for infix notation.

    Grammar:
        expression := term SUM expression | term
        term       := primary PRODUCT term | primary
        primary    := NUMBER | VARIABLE | LPAREN expression RPAREN

    Tokens left over after the first complete expression are ignored
    unless the parser is created with ``strict=True``.
    """

    def __init__(self, tokens: list[Token], strict: bool = False):
        self.tokens = tokens
        self.strict = strict
        self.pos = 0

    def parse(self) -> ASTNode:
        """Parse the token sequence into an AST."""
        if not self.tokens:
            raise ParserError("Unexpected end of input")

        self.pos = 0
        try:
            expression = self._parse_expression()
        except RecursionError as e:
            raise ParserError("Expression is nested too deeply") from e

        if self.strict and not self._match(TokenType.EOF):
            raise ParserError(
                f"Unexpected trailing token {self._current_token()!r}",
                self._current_token(),
                TokenType.EOF,
            )

        logger.debug("Parsed infix expression: %r", expression)
        return expression

    def _current_token(self) -> Token:
        """Get the current token."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]  # Return EOF token

    def _advance(self) -> Token:
        """Advance and return the current token."""
        token = self._current_token()
        self.pos += 1
        return token

    def _expect(self, token_type: TokenType) -> Token:
        """Expect a specific token type, raise error if not found."""
        token = self._current_token()
        if token.type != token_type:
            raise ParserError(
                f"Expected {token_type.name}, got {token.type.name}", token, token_type
            )
        return self._advance()

    def _match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self._current_token().type in token_types

    def _parse_expression(self) -> ASTNode:
        """Parse expression: term (SUM expression)?"""
        left = self._parse_term()

        if self._match(TokenType.SUM):
            self._advance()
            right = self._parse_expression()
            return BinaryOpNode(Operator.SUM, left, right)

        return left

    def _parse_term(self) -> ASTNode:
        """Parse term: primary (PRODUCT term)?"""
        left = self._parse_primary()

        if self._match(TokenType.PRODUCT):
            self._advance()
            right = self._parse_term()
            return BinaryOpNode(Operator.PRODUCT, left, right)

        return left

    def _parse_primary(self) -> ASTNode:
        """Parse primary: NUMBER | VARIABLE | (expression)"""
        token = self._advance()

        if token.type == TokenType.NUMBER:
            return NumberNode(token.value)

        if token.type == TokenType.VARIABLE:
            return VariableNode(token.value)

        if token.type == TokenType.LPAREN:
            expression = self._parse_expression()
            self._expect(TokenType.RPAREN)
            return expression

        raise ParserError(f"Unexpected token {token!r}", token)


def parse_infix(tokens: list[Token], strict: bool = False) -> ASTNode:
    """
    Parse an infix token sequence.

    Args:
        tokens: Tokens produced by the lexer
        strict: Reject tokens left over after the expression

    Returns:
        The root of the parsed tree

    Raises:
        ParserError: If a primary is missing, a parenthesis is unbalanced,
            or (in strict mode) tokens remain after the expression
    """
    return InfixParser(tokens, strict=strict).parse()
