"""
Test suite for the calcengine parser.

Tests cover:
- Operator precedence and associativity
- Parenthesized groups
- Contract violations on unrepairable token lists
- AST node construction

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from calcengine.lexer import Operator, SourceLocation
from calcengine.parser import (
    Parser, ParseError, parse_string, Literal, Term, SourceSpan, ASTNodeType,
    walk_postorder
)
from calcengine.parser.errors import ERROR_CODES


class TestParser(unittest.TestCase):
    """Test cases for the parser."""

    def _tree(self, source: str) -> str:
        return str(parse_string(source))

    def test_single_number(self):
        tree = parse_string("42")
        self.assertIsInstance(tree, Literal)
        self.assertEqual(tree.value, 42.0)

    def test_precedence(self):
        self.assertEqual(self._tree("1+2*3"), "(1 + (2 * 3))")
        self.assertEqual(self._tree("2*3+1"), "((2 * 3) + 1)")
        self.assertEqual(self._tree("2^3*4"), "((2 ^ 3) * 4)")
        self.assertEqual(self._tree("4/2^2"), "(4 / (2 ^ 2))")

    def test_left_associativity(self):
        self.assertEqual(self._tree("1-2-3"), "((1 - 2) - 3)")
        self.assertEqual(self._tree("8/4/2"), "((8 / 4) / 2)")

    def test_power_is_left_associative(self):
        self.assertEqual(self._tree("2^3^2"), "((2 ^ 3) ^ 2)")

    def test_grouping(self):
        self.assertEqual(self._tree("(1+2)*3"), "((1 + 2) * 3)")
        self.assertEqual(self._tree("2^(3^2)"), "(2 ^ (3 ^ 2))")
        self.assertEqual(self._tree("((7))"), "7")

    def test_repaired_input(self):
        self.assertEqual(self._tree("-5+2"), "((0 - 5) + 2)")
        self.assertEqual(self._tree("(1)(2"), "(1 * 2)")

    def test_fractional_rendering(self):
        self.assertEqual(self._tree("2.5*.5"), "(2.5 * 0.5)")

    def test_adjacent_numbers_are_a_contract_violation(self):
        with self.assertRaises(ParseError) as ctx:
            parse_string("2 3")
        self.assertEqual(ctx.exception.code, "P003")
        self.assertEqual(ctx.exception.token.value, 3.0)

    def test_number_before_group_is_a_contract_violation(self):
        with self.assertRaises(ParseError) as ctx:
            parse_string("2(3)")
        self.assertEqual(ctx.exception.code, "P003")

    def test_empty_group(self):
        with self.assertRaises(ParseError) as ctx:
            parse_string("()")
        self.assertEqual(ctx.exception.code, "P001")

    def test_empty_input(self):
        with self.assertRaises(ParseError) as ctx:
            Parser([]).parse()
        self.assertEqual(ctx.exception.code, "P002")

    def test_spans(self):
        tree = parse_string("12+3")
        self.assertEqual(tree.span.start.column, 1)
        self.assertEqual(tree.span.end.column, 4)

    def test_children(self):
        tree = parse_string("1+2")
        self.assertEqual(tree.node_type, ASTNodeType.TERM)
        self.assertEqual([child.value for child in tree.children()], [1.0, 2.0])
        self.assertEqual(tree.left.children(), [])

    def test_deeply_nested_groups(self):
        """Nesting deeper than the default recursion limit allows still parses."""
        tree = parse_string("(" * 1000 + "1")
        self.assertIsInstance(tree, Literal)
        self.assertEqual(tree.value, 1.0)

    def test_nested_groups_with_operators(self):
        tree = parse_string("(1+" * 300 + "1")
        self.assertEqual(tree.node_type, ASTNodeType.TERM)

    def test_recursion_limit_is_restored(self):
        limit = sys.getrecursionlimit()
        parse_string("(" * 500 + "1")
        self.assertEqual(sys.getrecursionlimit(), limit)

    def test_nesting_beyond_limit(self):
        limit = sys.getrecursionlimit()
        with self.assertRaises(ParseError) as ctx:
            parse_string("(" * 5000 + "1")
        self.assertEqual(ctx.exception.code, "P004")
        self.assertEqual(sys.getrecursionlimit(), limit)

    def test_long_chain_renders(self):
        """A long chain parses into a deep left-nested tree that still renders."""
        rendered = str(parse_string("+".join(["1"] * 3000)))
        self.assertTrue(rendered.startswith("(" * 2999 + "1 + 1)"))
        self.assertTrue(rendered.endswith(" + 1)"))

    def test_messages_come_from_error_codes(self):
        for source in ["2 3", "()", "(" * 5000 + "1"]:
            with self.subTest(source=source[:10]):
                with self.assertRaises(ParseError) as ctx:
                    parse_string(source)
                error = ctx.exception
                self.assertTrue(error.diagnostic.message.startswith(ERROR_CODES[error.code]))


class TestASTNodes(unittest.TestCase):
    """Test cases for expression tree nodes."""

    def setUp(self):
        location = SourceLocation("<test>", 1, 1, 0)
        self.span = SourceSpan(location, location)

    def test_term_requires_operator(self):
        left = Literal(1.0, self.span)
        right = Literal(2.0, self.span)
        with self.assertRaises(TypeError):
            Term(left, "+", right, self.span)

    def test_literal_rendering(self):
        self.assertEqual(str(Literal(5.0, self.span)), "5")
        self.assertEqual(str(Literal(-0.25, self.span)), "-0.25")
        self.assertEqual(str(Literal(float("inf"), self.span)), "inf")

    def test_term_rendering(self):
        term = Term(Literal(1.0, self.span), Operator.EXPONENTIATE, Literal(2.0, self.span), self.span)
        self.assertEqual(str(term), "(1 ^ 2)")

    def test_walk_postorder_order(self):
        tree = parse_string("1-2*3")
        order = [str(node) if isinstance(node, Literal) else node.operator.symbol
                 for node in walk_postorder(tree)]
        self.assertEqual(order, ["1", "2", "3", "*", "-"])


if __name__ == '__main__':
    unittest.main()
