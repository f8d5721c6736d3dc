"""
Token definitions for the calcengine lexer.

This module defines the lexical vocabulary of arithmetic expressions:
- Numeric literals (64-bit floats)
- The five binary operators and their semantics
- Parenthesis markers

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Callable, Dict

import numpy as np


class TokenType(Enum):
    """Enumeration of all token types in an expression."""

    NUMBER = auto()                 # 42, 3.14, .5
    OPERATOR = auto()               # + - * / ^
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


class Operator(Enum):
    """
    Binary arithmetic operators.

    The enum value is the source symbol, so ``Operator("^")`` looks an
    operator up by its character.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EXPONENTIATE = "^"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def identity(self) -> float:
        """Operand value substituted when one side of the operator is missing."""
        return IDENTITY_VALUES[self]

    def apply(self, left: float, right: float) -> float:
        """
        Reduce two operands with IEEE-754 double semantics.

        Division by zero and undefined powers produce inf/NaN instead of
        raising, so the result is always a float.
        """
        reducer = REDUCERS[self]
        with np.errstate(all="ignore"):
            return float(reducer(np.float64(left), np.float64(right)))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the input text.

    Used for error reporting and debug output.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token of an arithmetic expression.

    Contains the token type, lexeme (raw text), semantic value and source
    location. Tokens created by the repair pass have ``synthetic`` set and
    reuse the location of the token that caused the insertion.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # float for NUMBER, Operator for OPERATOR
    location: SourceLocation
    synthetic: bool = False

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return f"{self.type.name}({self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR

    @property
    def operator(self) -> Operator:
        """The operator carried by an OPERATOR token."""
        if not self.is_operator:
            raise ValueError(f"{self} is not an operator token")
        return self.value


# Lookup tables used by the lexer and by Operator

IDENTITY_VALUES: Dict[Operator, float] = {
    Operator.ADD: 0.0,
    Operator.SUBTRACT: 0.0,
    Operator.MULTIPLY: 1.0,
    Operator.DIVIDE: 1.0,
    Operator.EXPONENTIATE: 1.0,
}

REDUCERS: Dict[Operator, Callable[[np.float64, np.float64], np.float64]] = {
    Operator.ADD: np.add,
    Operator.SUBTRACT: np.subtract,
    Operator.MULTIPLY: np.multiply,
    Operator.DIVIDE: np.true_divide,
    Operator.EXPONENTIATE: np.power,
}

OPERATORS: Dict[str, Operator] = {op.symbol: op for op in Operator}

PARENTHESES: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

WHITESPACE = {" ", "\n"}

NUMBER_CHARS = set("0123456789.")


def make_number(value: float, location: SourceLocation, synthetic: bool = False) -> Token:
    """Create a NUMBER token holding ``value``."""
    lexeme = repr(float(value))
    return Token(TokenType.NUMBER, lexeme, float(value), location, synthetic)


def make_operator(operator: Operator, location: SourceLocation, synthetic: bool = False) -> Token:
    """Create an OPERATOR token for ``operator``."""
    return Token(TokenType.OPERATOR, operator.symbol, operator, location, synthetic)
