"""Errors raised by the expression parsers."""

from exprcalc.errors import ExpressionError
from exprcalc.lexer import Token, TokenType


class ParserError(ExpressionError):
    """Exception raised for parser errors."""

    def __init__(
        self,
        message: str,
        token: Token | None = None,
        expected: TokenType | None = None,
    ):
        self.token = token
        self.expected = expected
        if token:
            super().__init__(f"{message} at position {token.position}")
        else:
            super().__init__(message)
