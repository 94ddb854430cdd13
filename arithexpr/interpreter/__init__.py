"""
arithexpr Interpreter Package

Straightforward tree-walking evaluation of parsed arithmetic expressions.

Author: arithexpr developers
"""

from .interpreter import Interpreter, evaluate_string, DEFAULT_MAX_INT_EXPONENT
from .errors import EvaluationError

__all__ = [
    "Interpreter",
    "evaluate_string",
    "DEFAULT_MAX_INT_EXPONENT",
    "EvaluationError",
]
