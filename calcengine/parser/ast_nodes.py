"""
Abstract Syntax Tree node definitions for calcengine.

An expression tree has two node kinds: Literal leaves and binary Term
nodes. Nodes carry their source span and support the visitor pattern.
Trees are never mutated after construction.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Tuple
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import SourceLocation, Operator


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    LITERAL = "Literal"
    TERM = "Term"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'Expression') -> Any:
        """Visit a generic AST node."""
        pass


class Expression(ABC):
    """Base class for all expression nodes."""

    def __init__(self, node_type: ASTNodeType, span: SourceSpan):
        self.node_type = node_type
        self.span = span

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self}, span={self.span})"


class Literal(Expression):
    """A numeric literal."""

    def __init__(self, value: float, span: SourceSpan):
        super().__init__(ASTNodeType.LITERAL, span)
        self.value = float(value)

    def children(self) -> List[Expression]:
        return []

    def __str__(self) -> str:
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)


class Term(Expression):
    """A binary operation; owns both operand subtrees."""

    def __init__(self, left: Expression, operator: Operator, right: Expression, span: SourceSpan):
        if not isinstance(operator, Operator):
            raise TypeError(f"Term operator must be an Operator, got {operator!r}")
        super().__init__(ASTNodeType.TERM, span)
        self.left = left
        self.operator = operator
        self.right = right

    def children(self) -> List[Expression]:
        return [self.left, self.right]

    def __str__(self) -> str:
        rendered: List[str] = []
        for node in walk_postorder(self):
            if isinstance(node, Term):
                right = rendered.pop()
                left = rendered.pop()
                rendered.append(f"({left} {node.operator} {right})")
            else:
                rendered.append(str(node))
        return rendered.pop()


def walk_postorder(root: Expression) -> Iterator[Expression]:
    """
    Yield every node of a tree, children before parents, left before right.

    Uses an explicit stack, so the depth of the tree is not limited by the
    interpreter's recursion limit.
    """
    stack: List[Tuple[Expression, bool]] = [(root, False)]

    while stack:
        node, expanded = stack.pop()
        children = node.children()

        if expanded or not children:
            yield node
            continue

        stack.append((node, True))
        for child in reversed(children):
            stack.append((child, False))
