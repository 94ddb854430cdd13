"""
arithexpr - an arithmetic expression front end

Lexes source text into position-stamped tokens, parses them into an
immutable expression tree that honors operator precedence, associativity
and unary signs, and evaluates the tree.

Architecture:
    arithexpr/
    ├── lexer/           # Positions, tokens and lexical analysis
    ├── parser/          # Recursive descent parser and AST nodes
    ├── interpreter/     # Tree-walking evaluation
    ├── config.py        # Front-end limits
    └── cli.py           # Command-line shell

License: MIT

Author: arithexpr developers
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, Position, Diagnostic, LexError, tokenize_string
from .parser import (
    Parser, Node, NumberNode, UnaryOpNode, BinOpNode, NodeVisitor, ParseError, parse_string,
)
from .interpreter import Interpreter, EvaluationError, evaluate_string
from .config import FrontendConfig

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Interpreter",
    "FrontendConfig",

    # Tokens and positions
    "Token",
    "TokenType",
    "Position",

    # AST nodes
    "Node",
    "NumberNode",
    "UnaryOpNode",
    "BinOpNode",
    "NodeVisitor",

    # Errors
    "Diagnostic",
    "LexError",
    "ParseError",
    "EvaluationError",

    # Convenience functions
    "tokenize_string",
    "parse_string",
    "evaluate_string",

    # Version info
    "__version__",
    "__license__",
]
