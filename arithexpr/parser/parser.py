"""
arithexpr Recursive Descent Parser

One method per precedence level, lowest first:

    expr   := term (('+' | '-') term)*
    term   := factor (('*' | '/') factor)*
    factor := ('+' | '-') factor | power
    power  := atom ('^' factor)?
    atom   := NUMBER | '(' expr ')'

`^` is right-associative because its right operand is a `factor`, and a
unary sign applies to the whole power, so `-2^2` parses as `-(2^2)`.

Author: arithexpr developers
"""

import logging
import sys
from typing import List

from ..lexer.tokens import Token, TokenType
from .ast_nodes import Node, NumberNode, UnaryOpNode, BinOpNode, UNARY_OPERATORS
from .errors import (
    create_unexpected_token_error, create_missing_paren_error,
    create_trailing_input_error, create_nesting_error, create_unexpected_eof_error,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100

# One nesting level costs five parser frames: factor, power, atom, expr, term
FRAMES_PER_LEVEL = 5
RECURSION_HEADROOM = 200

EXPR_OPERATORS = (TokenType.PLUS, TokenType.MINUS)
TERM_OPERATORS = (TokenType.MUL, TokenType.DIV)


def max_supported_depth() -> int:
    """Deepest nesting the parser can follow under the current recursion limit."""
    return max(1, (sys.getrecursionlimit() - RECURSION_HEADROOM) // FRAMES_PER_LEVEL)


class Parser:
    """
    arithexpr parser.

    Consumes an EOF-terminated token list with one token of lookahead and
    produces a single expression tree.
    """

    def __init__(self, tokens: List[Token], max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the lexer, ending with an EOF token
            max_depth: Maximum nesting of unary operators, powers and parentheses,
                capped at max_supported_depth()
        """
        if not tokens or tokens[-1].type is not TokenType.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.max_depth = min(max_depth, max_supported_depth())
        self.current = 0
        self.depth = 0

    def parse(self) -> Node:
        """
        Parse the token stream into an AST.

        Returns:
            Root node of the expression

        Raises:
            ParseError: If the tokens do not form exactly one expression
        """
        self.current = 0
        self.depth = 0

        if self._check(TokenType.EOF):
            raise create_unexpected_eof_error("an expression", self._peek())

        try:
            node = self._parse_expr()
        except RecursionError:
            raise create_nesting_error(self._peek(), self.max_depth) from None

        if not self._check(TokenType.EOF):
            raise create_trailing_input_error(self._peek())

        logger.debug("parsed %d tokens from %s", len(self.tokens), self.tokens[0].pos_start.filename)
        return node

    # Grammar rules, lowest precedence first

    def _parse_expr(self) -> Node:
        """Parse a left-associative chain of + and -."""
        left = self._parse_term()

        while self._peek().type in EXPR_OPERATORS:
            operator_token = self._advance()
            left = BinOpNode(left, operator_token, self._parse_term())

        return left

    def _parse_term(self) -> Node:
        """Parse a left-associative chain of * and /."""
        left = self._parse_factor()

        while self._peek().type in TERM_OPERATORS:
            operator_token = self._advance()
            left = BinOpNode(left, operator_token, self._parse_factor())

        return left

    def _parse_factor(self) -> Node:
        """Parse a unary sign applied to a factor, or a power."""
        self.depth += 1
        try:
            if self.depth > self.max_depth:
                raise create_nesting_error(self._peek(), self.max_depth)

            if self._peek().type in UNARY_OPERATORS:
                operator_token = self._advance()
                return UnaryOpNode(operator_token, self._parse_factor())

            return self._parse_power()
        finally:
            self.depth -= 1

    def _parse_power(self) -> Node:
        """Parse atom ('^' factor)?; the right operand recursing makes ^ right-associative."""
        left = self._parse_atom()

        if self._check(TokenType.POW):
            operator_token = self._advance()
            return BinOpNode(left, operator_token, self._parse_factor())

        return left

    def _parse_atom(self) -> Node:
        token = self._peek()

        if token.type is TokenType.NUMBER:
            self._advance()
            return NumberNode(token)

        if token.type is TokenType.LPAREN:
            self._advance()
            expr = self._parse_expr()
            if not self._check(TokenType.RPAREN):
                raise create_missing_paren_error(self._peek())
            self._advance()
            return expr

        raise create_unexpected_token_error("a number, '+', '-' or '('", token)

    # Utility methods

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type is token_type

    def _advance(self) -> Token:
        """Consume and return current token; never moves past EOF."""
        token = self.tokens[self.current]
        if token.type is not TokenType.EOF:
            self.current += 1
        return token

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.current]


def parse_string(source: str, filename: str = "<string>", max_depth: int = DEFAULT_MAX_DEPTH) -> Node:
    """
    Convenience function to parse a source string.

    Raises:
        LexError: If lexing fails
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    return Parser(tokens, max_depth).parse()


def parse_file(filepath: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Node:
    """
    Convenience function to parse a source file.

    Raises:
        LexError: If lexing fails
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    from ..lexer import tokenize_file

    tokens = tokenize_file(filepath)
    return Parser(tokens, max_depth).parse()
