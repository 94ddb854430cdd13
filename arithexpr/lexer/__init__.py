"""
arithexpr Lexer Package

Lexical analysis for arithmetic expressions: numeric literals, the five
arithmetic operators and parentheses, each stamped with its source span.

Author: arithexpr developers
"""

from .position import Position
from .tokens import Token, TokenType
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "Position",
    "Diagnostic",
    "LexError",
    "tokenize_string",
    "tokenize_file",
]
