"""
arithexpr Lexer - turns source text into a list of tokens

Single left-to-right pass with one Position cursor. No backtracking, no
error recovery: the first illegal character ends the run.

Author: arithexpr developers
"""

import logging
from typing import List, Optional

from .position import Position
from .tokens import Token, TokenType, OPERATORS, DIGITS, WHITESPACE
from .errors import (
    create_invalid_character_error, create_invalid_number_error, create_number_out_of_range_error,
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    arithexpr lexical analyzer.

    Converts source text into a materialized list of tokens that always ends
    with exactly one EOF token.
    """

    def __init__(self, source: str, filename: str = "<stdin>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source text
            filename: Name used for error reporting only
        """
        self.source = source
        self.filename = filename
        self.position = Position.start(source, filename)
        self.current_char: Optional[str] = None
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens including the trailing EOF token

        Raises:
            LexError: On the first character that is not part of the language
        """
        self.position = Position.start(self.source, self.filename)
        self.current_char = self.source[0] if self.source else None
        self.tokens = []

        while self.current_char is not None:
            if self.current_char in WHITESPACE:
                self._advance()
                continue

            if self.current_char in DIGITS or self.current_char == ".":
                self.tokens.append(self._tokenize_number())
                continue

            token_type = OPERATORS.get(self.current_char)
            if token_type is None:
                raise create_invalid_character_error(self.current_char, self.position)

            start = self.position
            self._advance()
            self.tokens.append(Token(token_type, None, start, self.position))

        self.tokens.append(Token(TokenType.EOF, None, self.position, self.position))
        logger.debug("lexed %d tokens from %s", len(self.tokens), self.filename)

        return self.tokens

    def _tokenize_number(self) -> Token:
        """Tokenize a maximal run of digits with at most one decimal point."""
        start = self.position
        dot_count = 0

        while self.current_char is not None and (self.current_char in DIGITS or self.current_char == "."):
            if self.current_char == ".":
                if dot_count == 1:
                    raise create_invalid_number_error(
                        ".", self.position,
                        "A number literal can contain at most one decimal point."
                    )
                dot_count += 1
            self._advance()

        lexeme = self.source[start.index:self.position.index]
        if lexeme == ".":
            raise create_invalid_number_error(
                ".", start,
                "A decimal point must be preceded or followed by at least one digit."
            )

        try:
            value = float(lexeme) if dot_count else int(lexeme)
        except ValueError:
            # int() refuses digit strings longer than sys.get_int_max_str_digits()
            raise create_number_out_of_range_error(start, self.position) from None
        if value == float("inf"):
            raise create_number_out_of_range_error(start, self.position)

        return Token(TokenType.NUMBER, value, start, self.position)

    def _advance(self):
        """Advance one character, updating line/column."""
        self.position = self.position.advance(self.current_char)
        if self.position.index < len(self.source):
            self.current_char = self.source[self.position.index]
        else:
            self.current_char = None


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
