"""
arithexpr Parser Package

Recursive descent parser for arithmetic expressions. Produces immutable
trees whose nodes carry the source span they were parsed from.

Author: arithexpr developers
"""

from .ast_nodes import Node, NumberNode, UnaryOpNode, BinOpNode, NodeVisitor, fold
from .parser import Parser, parse_string, parse_file, DEFAULT_MAX_DEPTH, max_supported_depth
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_file", "DEFAULT_MAX_DEPTH", "max_supported_depth",

    # AST nodes
    "Node", "NumberNode", "UnaryOpNode", "BinOpNode", "NodeVisitor", "fold",

    # Error handling
    "ParseError",
]
