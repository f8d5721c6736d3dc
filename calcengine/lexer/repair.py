"""
Token repair pass.

Normalizes informal input so the parser needs no special cases:
trailing unclosed groups are closed, ``)(`` and ``)3`` become implicit
multiplication, and operators with a missing operand get the operator's
identity value on that side (``-5`` is ``0-5``, ``2*`` is ``2*1``).

Author: xwest
"""

import logging
from collections import deque
from typing import Deque, List, Optional

from .tokens import Token, TokenType, Operator, make_number, make_operator
from .errors import create_unmatched_paren_error

logger = logging.getLogger(__name__)


def repair_tokens(tokens: List[Token]) -> List[Token]:
    """
    Repair a raw token list.

    Args:
        tokens: Tokens exactly as produced by the lexer

    Returns:
        A new, balanced token list with implicit operators and operands made
        explicit. The input list is not modified.

    Raises:
        RepairError: If a ')' appears before its matching '('
    """
    balanced = balance_parentheses(tokens)
    return insert_implicit_tokens(balanced)


def balance_parentheses(tokens: List[Token]) -> List[Token]:
    """Close every group left open at the end of the input."""
    open_parens = 0

    for token in tokens:
        if token.type == TokenType.LEFT_PAREN:
            open_parens += 1
        elif token.type == TokenType.RIGHT_PAREN:
            open_parens -= 1

        if open_parens < 0:
            raise create_unmatched_paren_error(token.location)

    if open_parens == 0:
        return list(tokens)

    logger.debug("auto-closing %d unclosed parenthes%s",
                 open_parens, "is" if open_parens == 1 else "es")

    location = tokens[-1].location
    closers = [Token(TokenType.RIGHT_PAREN, ")", None, location, True)
               for _ in range(open_parens)]
    return list(tokens) + closers


def insert_implicit_tokens(tokens: List[Token]) -> List[Token]:
    """
    Insert implicit multiplications and identity operands.

    Walks the source list from the end, building the output from the front.
    The token after the current one is read from the output, so it already
    reflects insertions made for later positions; the token before it is
    read from the untouched source.
    """
    repaired: Deque[Token] = deque()

    for index in range(len(tokens) - 1, -1, -1):
        token = tokens[index]
        previous: Optional[Token] = tokens[index - 1] if index > 0 else None
        following: Optional[Token] = repaired[0] if repaired else None

        if token.is_operator and not _starts_operand(following):
            repaired.appendleft(_identity(token))

        repaired.appendleft(token)

        if token.is_operator and not _ends_operand(previous):
            repaired.appendleft(_identity(token))

        if (previous is not None and previous.type == TokenType.RIGHT_PAREN
                and token.type in (TokenType.NUMBER, TokenType.LEFT_PAREN)):
            repaired.appendleft(make_operator(Operator.MULTIPLY, token.location, synthetic=True))

    return list(repaired)


def _starts_operand(token: Optional[Token]) -> bool:
    return token is not None and token.type in (TokenType.NUMBER, TokenType.LEFT_PAREN)


def _ends_operand(token: Optional[Token]) -> bool:
    return token is not None and token.type in (TokenType.NUMBER, TokenType.RIGHT_PAREN)


def _identity(token: Token) -> Token:
    return make_number(token.operator.identity, token.location, synthetic=True)
