"""
calcengine recursive descent parser

Grammar, lowest precedence first:

    sum     := product ( ('+' | '-') product )*
    product := power ( ('*' | '/') power )*
    power   := atom ( '^' atom )*
    atom    := NUMBER | '(' sum ')'

Every rule is an iterative left fold, including power: 2^3^2 parses as
(2^3)^2. Input must come from the repair pass; anything the grammar cannot
consume raises ParseError.

Groups are the only source of recursion. Each level of parentheses costs
seven frames (sum, product and power with their folds, then atom), so
parse() temporarily raises the interpreter's recursion limit in proportion
to the number of groups, up to MAX_RECURSION_LIMIT. Deeper input raises
ParseError P004.

Author: xwest
"""

import sys
from contextlib import contextmanager
from typing import Callable, FrozenSet, Iterator, List

from ..lexer.tokens import Token, TokenType, Operator, SourceLocation
from .ast_nodes import Expression, Literal, Term, SourceSpan
from .errors import (
    create_unexpected_token_error, create_unexpected_eof_error,
    create_trailing_tokens_error, create_nesting_too_deep_error
)


SUM_OPERATORS = frozenset({Operator.ADD, Operator.SUBTRACT})
PRODUCT_OPERATORS = frozenset({Operator.MULTIPLY, Operator.DIVIDE})
POWER_OPERATORS = frozenset({Operator.EXPONENTIATE})

# Frames used per nested group, with room for _advance and Term construction
FRAMES_PER_GROUP = 8

# Ceiling for the temporary recursion limit
MAX_RECURSION_LIMIT = 10000


class Parser:
    """
    Expression parser.

    Owns a cursor over one repaired token list and builds a single
    expression tree from it.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Repaired token list
        """
        self.tokens = tokens
        self.current = 0

    def parse(self) -> Expression:
        """
        Parse the token list into an expression tree.

        Returns:
            Root node of the tree

        Raises:
            ParseError: If the tokens do not form exactly one expression
        """
        self.current = 0
        groups = sum(1 for token in self.tokens if token.type == TokenType.LEFT_PAREN)

        with _recursion_headroom(groups * FRAMES_PER_GROUP):
            try:
                expr = self._parse_sum()
            except RecursionError:
                raise create_nesting_too_deep_error(self._end_location(), groups) from None

        if not self._is_at_end():
            raise create_trailing_tokens_error(self._peek())

        return expr

    def _parse_sum(self) -> Expression:
        # sum: product (('+' | '-') product)*
        return self._parse_left_fold(SUM_OPERATORS, self._parse_product)

    def _parse_product(self) -> Expression:
        # product: power (('*' | '/') power)*
        return self._parse_left_fold(PRODUCT_OPERATORS, self._parse_power)

    def _parse_power(self) -> Expression:
        # power: atom ('^' atom)*
        return self._parse_left_fold(POWER_OPERATORS, self._parse_atom)

    def _parse_left_fold(
        self,
        operators: FrozenSet[Operator],
        operand: Callable[[], Expression]
    ) -> Expression:
        """Parse ``operand (op operand)*`` into a left-associated chain."""
        expr = operand()

        while self._check_operator(operators):
            operator = self._advance().operator
            right = operand()
            expr = Term(expr, operator, right, SourceSpan(expr.span.start, right.span.end))

        return expr

    def _parse_atom(self) -> Expression:
        # atom: NUMBER | '(' sum ')'
        token = self._advance()

        if token.type == TokenType.NUMBER:
            return Literal(token.value, SourceSpan(token.location, token.location))

        if token.type != TokenType.LEFT_PAREN:
            raise create_unexpected_token_error("a number or '('", token)

        expr = self._parse_sum()
        # Repair balanced the parentheses, so this is the matching ')'
        self._advance()

        return expr

    # Utility methods

    def _check_operator(self, operators: FrozenSet[Operator]) -> bool:
        """Check if the current token is one of ``operators``."""
        if self._is_at_end():
            return False
        token = self._peek()
        return token.is_operator and token.operator in operators

    def _advance(self) -> Token:
        """Consume and return current token."""
        if self._is_at_end():
            raise create_unexpected_eof_error(self._end_location())
        token = self.tokens[self.current]
        self.current += 1
        return token

    def _is_at_end(self) -> bool:
        return self.current >= len(self.tokens)

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _end_location(self) -> SourceLocation:
        if self.tokens:
            return self.tokens[-1].location
        return SourceLocation("<empty>", 1, 1, 0)


@contextmanager
def _recursion_headroom(frames: int) -> Iterator[None]:
    """Raise the recursion limit by ``frames`` for the duration of the block."""
    previous = sys.getrecursionlimit()
    limit = min(previous + frames, max(previous, MAX_RECURSION_LIMIT))

    if limit <= previous:
        yield
        return

    sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def parse_string(source: str, filename: str = "<string>") -> Expression:
    """
    Convenience function to parse an expression string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        Expression tree

    Raises:
        LexerError: If lexing or repair fails
        ParseError: If the repaired tokens do not form one expression
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    parser = Parser(tokens)
    return parser.parse()
