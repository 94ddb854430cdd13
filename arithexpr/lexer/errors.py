"""
Error handling for the arithexpr lexer.

Provides error reporting with source span information and pointer-style
rendering of the offending source line. The Diagnostic record defined here
is shared by the parser and the interpreter.

Author: arithexpr developers
"""

from typing import Optional
from dataclasses import dataclass

from .position import Position


@dataclass
class Diagnostic:
    """Structured description of a front-end error."""
    kind: str           # "IllegalCharacter", "UnexpectedToken", "RuntimeError"
    message: str
    pos_start: Position
    pos_end: Position
    severity: str = "error"
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def title(self) -> str:
        """Kind split into words: 'IllegalCharacter' -> 'Illegal Character'."""
        words = []
        for ch in self.kind:
            if ch.isupper() and words:
                words.append(" ")
            words.append(ch)
        return "".join(words)

    def pointer(self) -> str:
        """Source line of the error with carets under the offending span."""
        line = self.pos_start.line_text()
        start = self.pos_start.column
        if self.pos_end.line == self.pos_start.line:
            end = self.pos_end.column
        else:
            end = len(line)
        width = max(end - start, 1)
        return f"{line}\n{' ' * start}{'^' * width}"

    def __str__(self) -> str:
        header = f"{self.title}: {self.message}"
        if self.code:
            header += f" [{self.code}]"
        result = header + "\n"
        result += f"  --> {self.pos_start}\n"
        for row in self.pointer().split("\n"):
            result += f"    {row}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexError(Exception):
    """
    Exception raised when the lexer meets a character it cannot accept.

    Lexing stops at the first error; there is no partial token list.
    """

    kind = "IllegalCharacter"

    def __init__(
        self,
        message: str,
        pos_start: Position,
        pos_end: Position,
        char: str = "",
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.char = char
        self.diagnostic = Diagnostic(
            kind=self.kind,
            message=message,
            pos_start=pos_start,
            pos_end=pos_end,
            code=code,
            help_text=help_text,
        )

    @property
    def position(self) -> Position:
        return self.diagnostic.pos_start

    def __str__(self) -> str:
        return str(self.diagnostic)


def create_invalid_character_error(char: str, position: Position) -> LexError:
    """Create an error for a character outside the language."""
    if char.isprintable():
        help_text = "Only digits, '.', '+', '-', '*', '/', '^', '(' and ')' are allowed."
    else:
        help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."

    return LexError(
        message=f"Unexpected character '{char}'",
        pos_start=position,
        pos_end=position.advance(char),
        char=char,
        code="L001",
        help_text=help_text,
    )


def create_invalid_number_error(char: str, position: Position, reason: str) -> LexError:
    """Create an error for a malformed numeric literal, pointing at `char`."""
    return LexError(
        message=f"Unexpected character '{char}' in number literal",
        pos_start=position,
        pos_end=position.advance(char),
        char=char,
        code="L002",
        help_text=reason,
    )


def create_number_out_of_range_error(pos_start: Position, pos_end: Position) -> LexError:
    """Create an error for a literal too long to convert to an int or a finite float."""
    return LexError(
        message="Number literal is too large",
        pos_start=pos_start,
        pos_end=pos_end,
        char=pos_start.source[pos_start.index:pos_start.index + 1],
        code="L003",
        help_text="Integer literals are limited to 4300 digits; float literals must stay below 1.8e308.",
    )
