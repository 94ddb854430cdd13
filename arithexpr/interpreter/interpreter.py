"""
Tree-walking interpreter for arithexpr.

Evaluates a parsed tree bottom-up. Integers stay integers under + - * and
integer powers; `/` is always true division.

Author: arithexpr developers
"""

import logging
import math

from ..lexer.tokens import TokenType, Number
from ..parser.ast_nodes import Node, NumberNode, UnaryOpNode, BinOpNode, fold
from ..parser.parser import parse_string, DEFAULT_MAX_DEPTH
from .errors import (
    create_division_by_zero_error, create_overflow_error,
    create_exponent_too_large_error, create_complex_result_error,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_INT_EXPONENT = 10_000

# Integers wider than this have more than 4300 decimal digits, which is
# Python's default limit for int/str conversion.
MAX_INT_BITS = 14_284


class Interpreter:
    """Evaluates expression trees to a Python int or float."""

    def __init__(self, max_int_exponent: int = DEFAULT_MAX_INT_EXPONENT):
        self.max_int_exponent = max_int_exponent

    def evaluate(self, node: Node) -> Number:
        result = self.visit(node)
        logger.debug("evaluated tree at %s to a %s", node.pos_start, type(result).__name__)
        return result

    def visit(self, node: Node) -> Number:
        return fold(node, self.visit_NumberNode, self.visit_UnaryOpNode, self.visit_BinOpNode)

    def visit_NumberNode(self, node: NumberNode) -> Number:
        return node.value

    def visit_UnaryOpNode(self, node: UnaryOpNode, value: Number) -> Number:
        if node.op_token.type is TokenType.MINUS:
            return -value
        return +value

    def visit_BinOpNode(self, node: BinOpNode, left: Number, right: Number) -> Number:
        op = node.op_token.type

        try:
            if op is TokenType.PLUS:
                result = left + right
            elif op is TokenType.MINUS:
                result = left - right
            elif op is TokenType.MUL:
                result = left * right
            elif op is TokenType.DIV:
                if right == 0:
                    raise create_division_by_zero_error(node.right_node)
                result = left / right
            else:
                result = self._power(node, left, right)
        except OverflowError:
            raise create_overflow_error(node) from None

        if isinstance(result, float) and math.isinf(result):
            raise create_overflow_error(node)
        if isinstance(result, int) and result.bit_length() > MAX_INT_BITS:
            raise create_overflow_error(node)
        return result

    def _power(self, node: BinOpNode, base: Number, exponent: Number) -> Number:
        if base == 0 and exponent < 0:
            raise create_division_by_zero_error(node.left_node)

        if isinstance(base, int) and isinstance(exponent, int) and abs(base) > 1:
            if abs(exponent) > self.max_int_exponent:
                raise create_exponent_too_large_error(node.right_node, self.max_int_exponent)
            # Lower bound on the result width; the real width is at most twice this
            if exponent > 0 and (base.bit_length() - 1) * exponent >= MAX_INT_BITS:
                raise create_overflow_error(node)

        result = base ** exponent
        if isinstance(result, complex):
            raise create_complex_result_error(node)
        return result


def evaluate_string(
    source: str,
    filename: str = "<string>",
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_int_exponent: int = DEFAULT_MAX_INT_EXPONENT,
) -> Number:
    """
    Convenience function to lex, parse and evaluate a source string.

    Raises:
        LexError: If lexing fails
        ParseError: If parsing fails
        EvaluationError: If the expression cannot be evaluated
    """
    node = parse_string(source, filename, max_depth)
    return Interpreter(max_int_exponent).evaluate(node)
