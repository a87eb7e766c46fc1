"""
Common error base for the expression pipeline.

Each stage defines its own exception next to the code that raises it
(LexerError in the lexer, ParserError in the parsers, EvaluationError in
the evaluator). They all derive from ExpressionError so callers that only
want to report a failure can catch a single type.
"""


class ExpressionError(Exception):
    """Base class for every error raised while handling an expression."""
