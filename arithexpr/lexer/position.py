"""
Source positions for the arithexpr lexer.

A Position is a cursor into the source text. It is immutable: advancing
returns a new Position, so every token and AST node can hold on to the
position it was built with without it shifting underneath.

Author: arithexpr developers
"""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Position:
    """
    Zero-based location in the source code.

    Used for error reporting and for the spans carried by tokens and nodes.
    """
    index: int
    line: int
    column: int
    filename: str = "<stdin>"
    source: str = field(default="", repr=False, compare=False)

    @classmethod
    def start(cls, source: str, filename: str = "<stdin>") -> "Position":
        """Position of the first character of `source`."""
        return cls(0, 0, 0, filename, source)

    def advance(self, current_char: str = "") -> "Position":
        """Return the position after consuming `current_char`."""
        if current_char == "\n":
            return replace(self, index=self.index + 1, line=self.line + 1, column=0)
        return replace(self, index=self.index + 1, column=self.column + 1)

    def copy(self) -> "Position":
        return replace(self)

    def line_text(self) -> str:
        """Return the full source line this position sits on, without the newline."""
        lines = self.source.split("\n")
        if self.line < len(lines):
            return lines[self.line]
        return ""

    def __str__(self) -> str:
        return f"{self.filename}:{self.line + 1}:{self.column + 1}"
