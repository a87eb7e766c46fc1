"""
Lexer module for tokenizing arithmetic expressions.

This module turns expression text into the token sequence consumed by
both the infix and the postfix parsers. Every sequence produced here
ends with exactly one EOF token.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from exprcalc.config import LIMITS
from exprcalc.errors import ExpressionError


class TokenType(Enum):
    """Token types for the expression lexer."""

    # Literals
    NUMBER = auto()  # unsigned decimal integer
    VARIABLE = auto()  # single lowercase letter

    # Operators
    SUM = auto()  # +
    PRODUCT = auto()  # *

    # Brackets
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    # Special
    EOF = auto()


SINGLE_CHAR_TOKENS = {
    "+": TokenType.SUM,
    "*": TokenType.PRODUCT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

WHITESPACE = " \t"


@dataclass(frozen=True)
class Token:
    """Represents a single token from the lexer."""

    type: TokenType
    value: int | str | None = None
    position: int = field(default=0, compare=False)  # starting position in the source string

    def __repr__(self) -> str:
        if self.type in (TokenType.NUMBER, TokenType.VARIABLE):
            return f"{self.type.name}({self.value})"
        return self.type.name


class LexerError(ExpressionError):
    """Exception raised for lexer errors."""

    def __init__(self, message: str, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(message)


class ExpressionLexer:
    """
    Tokenizer for arithmetic expressions.

    Handles:
    - Single-letter variables (a-z); adjacent letters are separate tokens
    - Unsigned decimal numbers, read greedily
    - The operators + and *
    - Parentheses
    - Spaces and tabs, which are skipped
    """

    def __init__(self, source: str, max_value: int = LIMITS["max_value"]):
        self.source = source
        self.max_value = max_value
        self.pos = 0
        self.length = len(source)

    def _current_char(self) -> str | None:
        """Return current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def _advance(self) -> str | None:
        """Advance position and return the character."""
        char = self._current_char()
        if char is not None:
            self.pos += 1
        return char

    def _skip_whitespace(self) -> None:
        while self._current_char() is not None and self._current_char() in WHITESPACE:
            self._advance()

    def _read_number(self) -> Token:
        """Read an unsigned integer literal."""
        start_pos = self.pos
        chars: list[str] = []

        while self._current_char() is not None and self._current_char() in "0123456789":
            chars.append(self._advance())  # type: ignore

        literal = "".join(chars)
        # Compare digit counts first; int() refuses very long digit strings.
        digits = literal.lstrip("0") or "0"
        if len(digits) > len(str(self.max_value)) or int(digits) > self.max_value:
            raise LexerError(
                f"Number literal {literal} is out of range (maximum is {self.max_value})",
                literal,
                start_pos,
            )

        return Token(TokenType.NUMBER, int(digits), start_pos)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source string."""
        tokens: list[Token] = []

        while self.pos < self.length:
            self._skip_whitespace()

            if self.pos >= self.length:
                break

            char = self._current_char()
            start_pos = self.pos

            if char in "0123456789":
                tokens.append(self._read_number())
                continue

            if "a" <= char <= "z":
                self._advance()
                tokens.append(Token(TokenType.VARIABLE, char, start_pos))
                continue

            if char in SINGLE_CHAR_TOKENS:
                self._advance()
                tokens.append(Token(SINGLE_CHAR_TOKENS[char], char, start_pos))
                continue

            raise LexerError(f"Unexpected character `{char}`", char, start_pos)

        tokens.append(Token(TokenType.EOF, position=self.pos))

        return tokens


def tokenize(source: str) -> list[Token]:
    """
    Tokenize an expression string.

    Args:
        source: The expression text

    Returns:
        The token list, terminated by a single EOF token

    Raises:
        LexerError: If the text contains a character outside the alphabet
            or a number literal that does not fit in an unsigned 32-bit value
    """
    return ExpressionLexer(source).tokenize()
