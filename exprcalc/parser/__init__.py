"""
Parser module for expression syntax analysis.

This module provides the infix recursive descent parser and the postfix
reducer, both of which turn lexer tokens into AST nodes.
"""

from .errors import ParserError
from .infix_parser import InfixParser, parse_infix
from .notation import NotationMode
from .postfix_parser import PostfixParser, parse_postfix

__all__ = [
    "InfixParser",
    "NotationMode",
    "ParserError",
    "PostfixParser",
    "parse_infix",
    "parse_postfix",
]
