"""
Error handling for the arithexpr parser.

Every syntax error is fatal and points at the token the grammar could not
match, so the caller can render a pointer-style diagnostic.

Author: arithexpr developers
"""

from typing import Optional, Union

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the token stream does not match the grammar.

    Carries the unexpected token alongside the diagnostic.
    """

    kind = "UnexpectedToken"

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.token = token
        self.diagnostic = Diagnostic(
            kind=self.kind,
            message=message,
            pos_start=token.pos_start,
            pos_end=token.pos_end,
            code=code,
            help_text=help_text,
        )

    @property
    def position(self):
        return self.token.pos_start

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
def describe(token: Token) -> str:
    """Human readable name for a token in error messages."""
    if token.type is TokenType.EOF:
        return "end of input"
    return f"'{token.lexeme}'" if token.lexeme else token.represent()


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Union[TokenType, str], found: Token) -> ParseError:
    """Create an error for a token the grammar does not allow here."""
    if found.type is TokenType.EOF:
        return create_unexpected_eof_error(expected, found)

    expected_str = expected.name if isinstance(expected, TokenType) else expected
    return ParseError(
        message=f"Expected {expected_str}, found {describe(found)}",
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position.",
    )


def create_missing_paren_error(found: Token) -> ParseError:
    """Create an error for a '(' whose matching ')' never shows up."""
    return ParseError(
        message=f"Expected ')', found {describe(found)}",
        token=found,
        code="P002",
        help_text="Add a closing parenthesis ')'.",
    )


def create_trailing_input_error(found: Token) -> ParseError:
    """Create an error for tokens left over after a complete expression."""
    return ParseError(
        message=f"Expected '+', '-', '*', '/' or '^', found {describe(found)}",
        token=found,
        code="P003",
        help_text="An operator is missing, or the input has extra text after the expression.",
    )


def create_nesting_error(found: Token, max_depth: int) -> ParseError:
    """Create an error for input nested past the parser's depth limit."""
    return ParseError(
        message=f"Expression nested more than {max_depth} levels deep",
        token=found,
        code="P004",
        help_text="Simplify the expression or raise the maximum nesting depth.",
    )


def create_unexpected_eof_error(expected: Union[TokenType, str], found: Token) -> ParseError:
    """Create an error for input that ends before the expression does."""
    expected_str = expected.name if isinstance(expected, TokenType) else expected
    return ParseError(
        message=f"Unexpected end of input, expected {expected_str}",
        token=found,
        code="P010",
        help_text=f"The parser reached the end of the input while expecting {expected_str}.",
    )
