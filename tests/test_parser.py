"""
Tests for the arithexpr parser and AST nodes.

Covers precedence, associativity, unary operators, node spans, the
textual tree dump and syntax errors.

Author: arithexpr developers
"""

import unittest
import sys
import os
import inspect
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from arithexpr.lexer import Lexer, Position, Token, TokenType
from arithexpr.parser import (
    Parser, ParseError, NumberNode, UnaryOpNode, BinOpNode, NodeVisitor, parse_string, parse_file,
    max_supported_depth, fold,
)


def parse(source, **kwargs):
    return Parser(Lexer(source).tokenize(), **kwargs).parse()


class TestPrecedence(unittest.TestCase):
    """Test the shape of trees built from valid input."""

    def assertTree(self, source, expected):
        self.assertEqual(parse(source).represent(), expected)

    def test_number(self):
        node = parse("42")
        self.assertIsInstance(node, NumberNode)
        self.assertEqual(node.value, 42)
        self.assertEqual(node.pos_start.index, 0)
        self.assertEqual(node.pos_end.index, 2)

    def test_decimal_number(self):
        node = parse("  3.25 ")
        self.assertEqual(node.value, 3.25)
        self.assertEqual((node.pos_start.index, node.pos_end.index), (2, 6))

    def test_subtraction_is_left_associative(self):
        self.assertTree("1-2-3", "((1, MINUS, 2), MINUS, 3)")

    def test_division_is_left_associative(self):
        self.assertTree("8/4/2", "((8, DIV, 4), DIV, 2)")

    def test_power_is_right_associative(self):
        self.assertTree("2^3^2", "(2, POW, (3, POW, 2))")

    def test_multiplication_binds_tighter_than_addition(self):
        self.assertTree("2+3*4", "(2, PLUS, (3, MUL, 4))")
        self.assertTree("2*3+4", "((2, MUL, 3), PLUS, 4)")

    def test_parentheses_reset_precedence(self):
        self.assertTree("(2+3)*4", "((2, PLUS, 3), MUL, 4)")

    def test_power_binds_tighter_than_multiplication(self):
        self.assertTree("2*3^2", "(2, MUL, (3, POW, 2))")

    def test_unary_minus_applies_to_whole_power(self):
        node = parse("-2^2")
        self.assertIsInstance(node, UnaryOpNode)
        self.assertEqual(node.op_token.type, TokenType.MINUS)
        self.assertIsInstance(node.node, BinOpNode)
        self.assertEqual(node.represent(), "(MINUS, (2, POW, 2))")

    def test_unary_in_operand_position(self):
        self.assertTree("2*-3", "(2, MUL, (MINUS, 3))")
        self.assertTree("2^-1", "(2, POW, (MINUS, 1))")

    def test_stacked_unary_operators(self):
        self.assertTree("--1", "(MINUS, (MINUS, 1))")
        self.assertTree("+-1", "(PLUS, (MINUS, 1))")

    def test_binary_minus_followed_by_unary(self):
        self.assertTree("1--1", "(1, MINUS, (MINUS, 1))")

    def test_nested_parentheses(self):
        self.assertTree("((((7))))", "7")


class TestNodeSpans(unittest.TestCase):
    """Test that nodes derive their spans from their children."""

    def test_binary_span(self):
        node = parse("1 + 23")
        self.assertEqual(node.pos_start.index, 0)
        self.assertEqual(node.pos_end.index, 6)
        self.assertEqual(node.pos_start, node.left_node.pos_start)
        self.assertEqual(node.pos_end, node.right_node.pos_end)

    def test_unary_span(self):
        node = parse("-(1 + 2)")
        self.assertEqual(node.pos_start, node.op_token.pos_start)
        self.assertEqual(node.pos_end, node.node.pos_end)
        self.assertEqual(node.pos_end.index, 7)

    def test_number_span_matches_token(self):
        tokens = Lexer("9.5").tokenize()
        node = Parser(tokens).parse()
        self.assertEqual(node.pos_start, tokens[0].pos_start)
        self.assertEqual(node.pos_end, tokens[0].pos_end)

    def test_span_across_lines(self):
        node = parse("1 +\n  2")
        self.assertEqual(node.pos_end.line, 1)
        self.assertEqual(node.pos_end.column, 3)


class TestRepresent(unittest.TestCase):
    """Test the textual dump on hand-built trees."""

    def setUp(self):
        self.pos = Position.start("")

    def _number(self, value):
        return NumberNode(Token(TokenType.NUMBER, value, self.pos, self.pos))

    def _op(self, token_type):
        return Token(token_type, None, self.pos, self.pos)

    def test_number(self):
        self.assertEqual(self._number(7).represent(), "7")
        self.assertEqual(self._number(2.5).represent(), "2.5")

    def test_unary(self):
        node = UnaryOpNode(self._op(TokenType.MINUS), self._number(5))
        self.assertEqual(node.represent(), "(MINUS, 5)")

    def test_binary(self):
        node = BinOpNode(self._number(1), self._op(TokenType.PLUS), self._number(2))
        self.assertEqual(node.represent(), "(1, PLUS, 2)")
        self.assertEqual(str(node), "(1, PLUS, 2)")

    def test_nested(self):
        inner = BinOpNode(self._number(3), self._op(TokenType.POW), self._number(2))
        node = BinOpNode(
            UnaryOpNode(self._op(TokenType.MINUS), self._number(1)),
            self._op(TokenType.DIV),
            inner,
        )
        self.assertEqual(node.represent(), "((MINUS, 1), DIV, (3, POW, 2))")

    def test_to_source_without_lexeme(self):
        node = BinOpNode(self._number(1), self._op(TokenType.MUL), self._number(2))
        self.assertEqual(node.to_source(), "(1 * 2)")


class TestReparse(unittest.TestCase):
    """Test that rendered trees parse back to the same tree."""

    SOURCES = ["1+2*3", "-2^2", "(1-2)-3", "2^3^2", "-(4/2)*+3", "1.5*.5", "2^-1"]

    def test_to_source_round_trip(self):
        for source in self.SOURCES:
            with self.subTest(source=source):
                tree = parse(source)
                self.assertEqual(parse(tree.to_source()).represent(), tree.represent())

    def test_to_source_is_fully_parenthesized(self):
        self.assertEqual(parse("1+2*3").to_source(), "(1 + (2 * 3))")
        self.assertEqual(parse("-2").to_source(), "(-2)")

    def test_number_represent_reparses(self):
        tree = parse("42")
        self.assertEqual(parse(tree.represent()).represent(), "42")


class TestVisitor(unittest.TestCase):
    """Test visitor dispatch."""

    def test_dispatch_by_node_kind(self):
        class Counter(NodeVisitor):
            def __init__(self):
                self.numbers = 0
                self.operators = 0

            def visit_NumberNode(self, node):
                self.numbers += 1

            def visit_UnaryOpNode(self, node):
                self.operators += 1
                self.visit(node.node)

            def visit_BinOpNode(self, node):
                self.operators += 1
                self.visit(node.left_node)
                self.visit(node.right_node)

        counter = Counter()
        parse("-1 + 2 * (3 - 4)").accept(counter)
        self.assertEqual(counter.numbers, 4)
        self.assertEqual(counter.operators, 4)

    def test_missing_method(self):
        with self.assertRaises(NotImplementedError):
            NodeVisitor().visit(parse("1"))


class TestParseErrors(unittest.TestCase):
    """Test syntax errors and their locations."""

    def assertParseError(self, source, code):
        with self.assertRaises(ParseError) as ctx:
            parse(source)
        self.assertEqual(ctx.exception.kind, "UnexpectedToken")
        self.assertEqual(ctx.exception.diagnostic.code, code)
        return ctx.exception

    def test_missing_closing_paren(self):
        error = self.assertParseError("(1+2", "P002")
        self.assertEqual(error.token.type, TokenType.EOF)
        self.assertIn("')'", error.diagnostic.message)

    def test_wrong_token_instead_of_closing_paren(self):
        error = self.assertParseError("(1 2)", "P002")
        self.assertEqual(error.token.value, 2)

    def test_trailing_number(self):
        error = self.assertParseError("1 2", "P003")
        self.assertEqual(error.token.type, TokenType.NUMBER)
        self.assertEqual(error.token.value, 2)
        self.assertEqual(error.position.index, 2)

    def test_trailing_paren(self):
        error = self.assertParseError("(1))", "P003")
        self.assertEqual(error.token.type, TokenType.RPAREN)
        self.assertEqual(error.position.index, 3)

    def test_operator_without_left_operand(self):
        error = self.assertParseError("*3", "P001")
        self.assertEqual(error.token.type, TokenType.MUL)

    def test_closing_paren_at_start(self):
        self.assertParseError(")", "P001")

    def test_empty_parentheses(self):
        error = self.assertParseError("()", "P001")
        self.assertEqual(error.token.type, TokenType.RPAREN)

    def test_missing_right_operand(self):
        error = self.assertParseError("1+", "P010")
        self.assertEqual(error.token.type, TokenType.EOF)

    def test_lone_unary_operator(self):
        self.assertParseError("-", "P010")

    def test_empty_input(self):
        self.assertParseError("   ", "P010")

    def test_rendered_diagnostic(self):
        with self.assertRaises(ParseError) as ctx:
            parse_string("1 2")
        rendered = str(ctx.exception)
        self.assertIn("Unexpected Token", rendered)
        self.assertIn("--> <string>:1:3", rendered)
        self.assertIn("    1 2\n      ^\n", rendered)

    def test_tokens_must_end_with_eof(self):
        tokens = Lexer("1").tokenize()[:-1]
        with self.assertRaises(ValueError):
            Parser(tokens)


class TestNestingLimit(unittest.TestCase):
    """Test the recursion guard on deeply nested input."""

    def test_deep_parentheses_rejected(self):
        source = "(" * 150 + "1" + ")" * 150
        with self.assertRaises(ParseError) as ctx:
            parse(source)
        self.assertEqual(ctx.exception.diagnostic.code, "P004")

    def test_deep_unary_chain_rejected(self):
        with self.assertRaises(ParseError) as ctx:
            parse("-" * 500 + "1")
        self.assertEqual(ctx.exception.diagnostic.code, "P004")

    def test_limit_is_configurable(self):
        with self.assertRaises(ParseError):
            parse("---1", max_depth=3)
        self.assertEqual(parse("---1", max_depth=4).represent(), "(MINUS, (MINUS, (MINUS, 1)))")

    def test_nesting_within_limit(self):
        source = "(" * 90 + "1" + ")" * 90
        self.assertEqual(parse(source).represent(), "1")

    def test_long_flat_chains_are_not_nesting(self):
        source = "+".join(["1"] * 1500)
        node = parse(source)
        self.assertIsInstance(node, BinOpNode)
        self.assertEqual(node.pos_start.index, 0)
        self.assertEqual(node.pos_end.index, len(source))
        self.assertTrue(node.represent().startswith("(" * 1499 + "1, PLUS, 1)"))
        self.assertEqual(len(node.to_source()), len(source) + 4 * 1499)

    def test_long_flat_chain_with_debug_logging(self):
        with self.assertLogs("arithexpr.parser.parser", level="DEBUG"):
            node = parse("*".join(["2"] * 2000))
        self.assertEqual(node.right_node.value, 2)

    def test_depth_is_capped_at_recursion_limit(self):
        ceiling = max_supported_depth()
        self.assertGreaterEqual(ceiling, 100)
        self.assertEqual(Parser(Lexer("1").tokenize(), max_depth=5000).max_depth, ceiling)

        source = "(" * 1000 + "1" + ")" * 1000
        with self.assertRaises(ParseError) as ctx:
            parse(source, max_depth=5000)
        self.assertEqual(ctx.exception.diagnostic.code, "P004")

    def test_recursion_error_becomes_nesting_error(self):
        limit = sys.getrecursionlimit()
        parser = Parser(Lexer("(" * 150 + "1" + ")" * 150).tokenize())
        sys.setrecursionlimit(len(inspect.stack(0)) + 100)
        try:
            with self.assertRaises(ParseError) as ctx:
                parser.parse()
        finally:
            sys.setrecursionlimit(limit)
        self.assertEqual(ctx.exception.diagnostic.code, "P004")

    def test_parser_reusable_after_error(self):
        parser = Parser(Lexer("-" * 5 + "1").tokenize(), max_depth=2)
        with self.assertRaises(ParseError):
            parser.parse()
        self.assertEqual(parser.depth, 0)


class TestParseHelpers(unittest.TestCase):
    """Test the module-level convenience functions."""

    def test_parse_string(self):
        node = parse_string("2 * 3", "expr")
        self.assertEqual(node.pos_start.filename, "expr")

    def test_parse_file(self):
        with tempfile.NamedTemporaryFile('w', suffix='.calc', delete=False, encoding='utf-8') as f:
            f.write("1 +\n  2 * 3\n")
            path = f.name
        try:
            node = parse_file(path)
        finally:
            os.unlink(path)

        self.assertEqual(node.represent(), "(1, PLUS, (2, MUL, 3))")
        self.assertEqual(node.pos_start.filename, path)
        self.assertEqual(node.pos_end.line, 1)

    def test_parse_file_reports_errors_with_path(self):
        with tempfile.NamedTemporaryFile('w', suffix='.calc', delete=False, encoding='utf-8') as f:
            f.write("(1 + 2\n")
            path = f.name
        try:
            with self.assertRaises(ParseError) as ctx:
                parse_file(path)
        finally:
            os.unlink(path)

        self.assertEqual(ctx.exception.diagnostic.code, "P002")
        self.assertIn(f"--> {path}:", str(ctx.exception))

    def test_fold_combines_children_left_to_right(self):
        node = parse_string("1 - -2 * 3")
        order = fold(
            node,
            lambda n: [n.value],
            lambda n, operand: operand + ["neg"],
            lambda n, left, right: left + right + [n.op_token.type.name],
        )
        self.assertEqual(order, [1, 2, "neg", 3, "MUL", "MINUS"])


if __name__ == "__main__":
    unittest.main()
