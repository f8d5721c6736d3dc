"""
calcengine Lexer Package

Implements the lexical analyzer for arithmetic expressions and the token
repair pass that runs on its output.

Key Features:
- Float literals with at most one decimal point ("3", "3.5", ".5", "5.")
- Single-character operators + - * / ^ and parentheses
- Source location tracking for diagnostics
- Repair of unclosed groups, implicit multiplication and unary operators

Author: xwest
"""

from .tokens import Token, TokenType, Operator, SourceLocation
from .lexer import Lexer, tokenize_string
from .repair import repair_tokens
from .errors import Diagnostic, LexerError, RepairError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "Operator",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "RepairError",
    "repair_tokens",
    "tokenize_string",
]
