"""
Tests for the postfix parser.

Covers:
- Reduction from the tail with right operand first
- Rejection of parentheses and of input without EOF
- Missing operands and leftover tokens
"""

import pytest

from exprcalc.evaluator import evaluate
from exprcalc.lexer import Token, TokenType, tokenize
from exprcalc.parser import ParserError, PostfixParser, parse_postfix
from exprcalc.syntax_tree.nodes import BinaryOpNode, NumberNode, Operator, VariableNode


def Sum(left, right):
    return BinaryOpNode(Operator.SUM, left, right)


def Product(left, right):
    return BinaryOpNode(Operator.PRODUCT, left, right)


N = NumberNode
V = VariableNode


def parse(text: str, **kwargs):
    return parse_postfix(tokenize(text), **kwargs)


class TestReduction:
    """Tests for building trees from postfix tokens."""

    def test_classic_example(self):
        """2 3 4 * + is 2 + 3 * 4."""
        tree = parse("2 3 4 * +")
        assert tree == Sum(N(2), Product(N(3), N(4)))
        assert evaluate(tree) == 14

    def test_operand_order(self):
        """The operand read first from the tail is the right operand."""
        assert parse("5 2 *") == Product(N(5), N(2))
        assert parse("1 2 +") == Sum(N(1), N(2))

    def test_left_nested(self):
        assert parse("1 2 + 3 *") == Product(Sum(N(1), N(2)), N(3))

    def test_single_operand(self):
        assert parse("9") == N(9)

    def test_variables(self):
        assert parse("x y + z *") == Product(Sum(V("x"), V("y")), V("z"))

    def test_adjacent_letters(self):
        """Letters are separate tokens, so no spaces are needed."""
        assert parse("ab+") == Sum(V("a"), V("b"))

    def test_long_left_chain(self):
        text = "1" + " 1 +" * 200
        assert evaluate(parse(text)) == 201


class TestParentheses:
    """Parentheses have no meaning in postfix notation."""

    @pytest.mark.parametrize("text", ["( 1 2 + )", "1 2 + )", "( 1 2 +", "(", "1 ( 2 +"])
    def test_parentheses_rejected(self, text):
        with pytest.raises(ParserError, match="Parentheses are not allowed"):
            parse(text)


class TestErrors:
    """Tests for malformed postfix input."""

    def test_empty_sequence(self):
        with pytest.raises(ParserError, match="Unexpected end of input"):
            parse_postfix([])

    def test_sequence_without_eof(self):
        tokens = [Token(TokenType.NUMBER, 1), Token(TokenType.NUMBER, 2), Token(TokenType.SUM, "+")]
        with pytest.raises(ParserError, match="must end with EOF") as exc_info:
            parse_postfix(tokens)

        assert exc_info.value.expected == TokenType.EOF

    @pytest.mark.parametrize("text", ["", "+", "1 +", "1 * +"])
    def test_missing_operand(self, text):
        with pytest.raises(ParserError, match="Unexpected end of input"):
            parse(text)

    def test_eof_in_the_middle(self):
        tokens = [Token(TokenType.EOF), Token(TokenType.EOF)]
        with pytest.raises(ParserError, match="Unexpected token EOF"):
            parse_postfix(tokens)


class TestLeftoverTokens:
    """Tokens at the head that no operator consumes."""

    def test_ignored_by_default(self):
        assert parse("1 2") == N(2)

    def test_strict_mode_rejects_leftovers(self):
        with pytest.raises(ParserError, match="leftover"):
            parse("1 2", strict=True)

    def test_strict_mode_accepts_complete_input(self):
        assert parse("1 2 +", strict=True) == Sum(N(1), N(2))


class TestInputIsNotModified:
    """The parser works on its own copy of the tokens."""

    def test_tokens_unchanged(self):
        tokens = tokenize("1 2 + 3 *")
        snapshot = list(tokens)

        PostfixParser(tokens).parse()

        assert tokens == snapshot

    def test_same_tokens_parse_twice(self):
        tokens = tokenize("4 5 *")
        assert parse_postfix(tokens) == parse_postfix(tokens)
