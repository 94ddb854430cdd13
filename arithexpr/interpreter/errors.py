"""
Runtime error handling for the arithexpr interpreter.

Evaluation errors point at the node whose value could not be computed,
using the same Diagnostic record as the lexer and parser.

Author: arithexpr developers
"""

from typing import Optional

from ..lexer.errors import Diagnostic
from ..parser.ast_nodes import Node


class EvaluationError(Exception):
    """Exception raised when a well-formed tree cannot be evaluated."""

    kind = "RuntimeError"

    def __init__(
        self,
        message: str,
        node: Node,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.node = node
        self.diagnostic = Diagnostic(
            kind=self.kind,
            message=message,
            pos_start=node.pos_start,
            pos_end=node.pos_end,
            code=code,
            help_text=help_text,
        )

    @property
    def position(self):
        return self.node.pos_start

    def __str__(self) -> str:
        return str(self.diagnostic)


def create_division_by_zero_error(divisor: Node) -> EvaluationError:
    return EvaluationError(
        message="Division by zero",
        node=divisor,
        code="R001",
        help_text="The right operand evaluated to 0.",
    )


def create_overflow_error(node: Node) -> EvaluationError:
    return EvaluationError(
        message="Result is too large to represent",
        node=node,
        code="R002",
    )


def create_exponent_too_large_error(exponent: Node, limit: int) -> EvaluationError:
    return EvaluationError(
        message=f"Integer exponent exceeds {limit}",
        node=exponent,
        code="R003",
        help_text="Use a decimal base (e.g. 2.0) for a floating point result.",
    )


def create_complex_result_error(node: Node) -> EvaluationError:
    return EvaluationError(
        message="Result is not a real number",
        node=node,
        code="R004",
        help_text="A negative base cannot be raised to a fractional power.",
    )
