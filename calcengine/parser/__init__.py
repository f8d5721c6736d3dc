"""
calcengine Parser Package

Implements a recursive descent parser that turns repaired token lists into
binary expression trees.

Key Features:
- Three precedence levels: + -, * /, ^ (all left-associative)
- Parenthesized groups
- Expression trees with source spans and visitor support
- Debug rendering of trees, e.g. "((2 ^ 3) ^ 2)"

Author: xwest
"""

from .ast_nodes import (
    ASTNodeType, ASTVisitor, SourceSpan, Expression, Literal, Term, walk_postorder
)
from .parser import Parser, parse_string
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse_string",

    # AST nodes
    "ASTNodeType", "ASTVisitor", "SourceSpan",
    "Expression", "Literal", "Term", "walk_postorder",

    # Error handling
    "ParseError",
]
