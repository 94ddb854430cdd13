"""
Abstract Syntax Tree node definitions for arithexpr.

Three node kinds make up the tree: numeric literals, unary +/- and binary
operations. Nodes are immutable and derive their source span from their
children, so a node never needs to look at the source text again.

Trees can be as deep as the longest flat operator chain, so the helpers here
walk them with an explicit stack instead of recursion.

Author: arithexpr developers
"""

from dataclasses import dataclass
from typing import Any, Callable, Union

from ..lexer.position import Position
from ..lexer.tokens import Token, TokenType, Number, OPERATOR_SYMBOLS


@dataclass(frozen=True)
class NumberNode:
    """Numeric literal leaf."""
    token: Token

    @property
    def value(self) -> Number:
        return self.token.value

    @property
    def pos_start(self) -> Position:
        return self.token.pos_start

    @property
    def pos_end(self) -> Position:
        return self.token.pos_end

    def represent(self) -> str:
        return str(self.value)

    def to_source(self) -> str:
        return self.token.lexeme or str(self.value)

    def accept(self, visitor: "NodeVisitor") -> Any:
        return visitor.visit(self)

    def __str__(self) -> str:
        return self.represent()


@dataclass(frozen=True)
class UnaryOpNode:
    """Unary plus or minus applied to a single operand."""
    op_token: Token
    node: "Node"

    @property
    def pos_start(self) -> Position:
        return self.op_token.pos_start

    @property
    def pos_end(self) -> Position:
        return _span_end(self)

    def represent(self) -> str:
        return _represent(self)

    def to_source(self) -> str:
        return _to_source(self)

    def accept(self, visitor: "NodeVisitor") -> Any:
        return visitor.visit(self)

    def __str__(self) -> str:
        return self.represent()


@dataclass(frozen=True)
class BinOpNode:
    """Binary operation expression."""
    left_node: "Node"
    op_token: Token
    right_node: "Node"

    @property
    def pos_start(self) -> Position:
        return _span_start(self)

    @property
    def pos_end(self) -> Position:
        return _span_end(self)

    def represent(self) -> str:
        return _represent(self)

    def to_source(self) -> str:
        return _to_source(self)

    def accept(self, visitor: "NodeVisitor") -> Any:
        return visitor.visit(self)

    def __str__(self) -> str:
        return self.represent()


Node = Union[NumberNode, UnaryOpNode, BinOpNode]

UNARY_OPERATORS = (TokenType.PLUS, TokenType.MINUS)


def fold(
    root: Node,
    on_number: Callable[[NumberNode], Any],
    on_unary: Callable[[UnaryOpNode, Any], Any],
    on_binary: Callable[[BinOpNode, Any, Any], Any],
) -> Any:
    """
    Combine a tree bottom-up.

    Each callback receives the node and the already-combined results of its
    children, left before right. The walk keeps its own stack, so a left-deep
    chain of thousands of operators never touches the recursion limit.
    """
    results: list = []
    pending = [(root, False)]

    while pending:
        node, children_done = pending.pop()

        if isinstance(node, NumberNode):
            results.append(on_number(node))
        elif not children_done:
            pending.append((node, True))
            if isinstance(node, BinOpNode):
                pending.append((node.right_node, False))
                pending.append((node.left_node, False))
            else:
                pending.append((node.node, False))
        elif isinstance(node, UnaryOpNode):
            results.append(on_unary(node, results.pop()))
        else:
            right = results.pop()
            left = results.pop()
            results.append(on_binary(node, left, right))

    return results.pop()


def _span_start(node: Node) -> Position:
    while isinstance(node, BinOpNode):
        node = node.left_node
    return node.pos_start


def _span_end(node: Node) -> Position:
    while not isinstance(node, NumberNode):
        node = node.right_node if isinstance(node, BinOpNode) else node.node
    return node.pos_end


def _represent(root: Node) -> str:
    return fold(
        root,
        lambda node: node.represent(),
        lambda node, operand: f"({node.op_token.represent()}, {operand})",
        lambda node, left, right: f"({left}, {node.op_token.represent()}, {right})",
    )


def _to_source(root: Node) -> str:
    return fold(
        root,
        lambda node: node.to_source(),
        lambda node, operand: f"({OPERATOR_SYMBOLS[node.op_token.type]}{operand})",
        lambda node, left, right: f"({left} {OPERATOR_SYMBOLS[node.op_token.type]} {right})",
    )


class NodeVisitor:
    """
    Base visitor for walking a tree.

    `visit` dispatches to `visit_<ClassName>`; subclasses implement one
    method per node kind they care about.
    """

    def visit(self, node: Node) -> Any:
        method = getattr(self, f"visit_{type(node).__name__}", None)
        if method is None:
            return self.generic_visit(node)
        return method(node)

    def generic_visit(self, node: Node) -> Any:
        raise NotImplementedError(f"{type(self).__name__} has no visit_{type(node).__name__} method")
