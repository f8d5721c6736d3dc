"""
Entry point: text in, optional float out.

Author: xwest
"""

import logging
from typing import List, Optional

from .lexer import Token, LexerError, tokenize_string
from .parser import Parser
from .evaluator import Evaluator

logger = logging.getLogger(__name__)


def tokenize(text: str) -> Optional[List[Token]]:
    """
    Lex and repair ``text``.

    Returns:
        The repaired token list, or None if the text has an invalid
        character, a malformed number, or an unmatched ')'.
    """
    try:
        return tokenize_string(text, "<input>")
    except LexerError as e:
        logger.debug("rejected %r [%s]: %s", text, e.code, e.diagnostic.message)
        return None


def evaluate(text: str) -> Optional[float]:
    """
    Evaluate an arithmetic expression.

    Args:
        text: Expression text, e.g. "2*(3+4)"

    Returns:
        The result as a float (possibly inf or NaN), or None if the text
        could not be tokenized.

    Raises:
        ParseError: If repaired tokens still do not form one expression,
            e.g. two numbers separated only by whitespace ("2 3")
    """
    tokens = tokenize(text)
    if tokens is None:
        return None

    tree = Parser(tokens).parse()
    return Evaluator().evaluate(tree)
