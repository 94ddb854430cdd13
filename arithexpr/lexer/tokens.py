"""
Token definitions for the arithexpr lexer.

The language is tiny: numeric literals, the five arithmetic operators,
parentheses, and an end-of-input marker.

Author: arithexpr developers
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union

from .position import Position


Number = Union[int, float]


class TokenType(Enum):
    """Enumeration of all token types."""

    NUMBER = auto()     # 42, 3.14, .5
    PLUS = auto()       # +
    MINUS = auto()      # -
    MUL = auto()        # *
    DIV = auto()        # /
    POW = auto()        # ^
    LPAREN = auto()     # (
    RPAREN = auto()     # )
    EOF = auto()        # end of input


@dataclass(frozen=True)
class Token:
    """
    A typed, position-stamped lexical unit.

    `value` holds the parsed number for NUMBER tokens and is None for every
    other type. `pos_end` points just past the last character of the lexeme.
    """
    type: TokenType
    value: Optional[Number]
    pos_start: Position
    pos_end: Position

    def __post_init__(self):
        if (self.type is TokenType.NUMBER) != (self.value is not None):
            raise ValueError(f"{self.type.name} token cannot carry value {self.value!r}")

    def represent(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"{self.type.name}:{self.value}"
        return self.type.name

    @property
    def lexeme(self) -> str:
        """Raw source text covered by this token."""
        return self.pos_start.source[self.pos_start.index:self.pos_end.index]

    def __str__(self) -> str:
        return self.represent()


OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MUL,
    "/": TokenType.DIV,
    "^": TokenType.POW,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

# Reverse lookup, used when rendering nodes back to surface syntax
OPERATOR_SYMBOLS = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.MUL: "*",
    TokenType.DIV: "/",
    TokenType.POW: "^",
}

DIGITS = "0123456789"
WHITESPACE = " \t\r\n"
