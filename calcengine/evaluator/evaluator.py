"""
Tree evaluator for calcengine.

A visitor that folds an expression tree into one float, left operand
before right. Evaluation never fails: division by zero, overflow and
undefined powers give inf or NaN.

The fold walks the tree with an explicit stack, so long operator chains
(which parse into deeply left-nested trees) do not hit the recursion limit.

Author: xwest
"""

from typing import List

from ..parser.ast_nodes import ASTVisitor, Expression, Literal, Term, walk_postorder


class Evaluator(ASTVisitor):
    """
    Evaluates expression trees.

    Holds no state between calls, so one instance can evaluate any number
    of trees.
    """

    def evaluate(self, tree: Expression) -> float:
        """
        Evaluate an expression tree.

        Args:
            tree: Root of the tree

        Returns:
            The value of the expression (may be inf or NaN)
        """
        values: List[float] = []

        for node in walk_postorder(tree):
            if isinstance(node, Term):
                right = values.pop()
                left = values.pop()
                values.append(node.operator.apply(left, right))
            elif isinstance(node, Literal):
                values.append(node.value)
            else:
                raise TypeError(f"Cannot evaluate node of type {type(node).__name__}")

        return values.pop()

    def visit(self, node: Expression) -> float:
        return self.evaluate(node)
