"""
Error handling for the calcengine parser.

The parser only ever sees repaired token lists, so a ParseError means the
repair pass let through something the grammar cannot consume (for example
two numbers side by side). These are contract violations, not user-facing
failures.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser cannot consume its token list.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Unexpected end of input",
    "P003": "Unconsumed tokens after expression",
    "P004": "Expression nested too deeply",
}


def create_unexpected_token_error(expected: str, found: Token) -> ParseError:
    """Create an error for an unexpected token."""
    return ParseError(
        message=f"{ERROR_CODES['P001']} '{found.lexeme}', expected {expected}",
        location=found.location,
        token=found,
        code="P001",
        help_text=f"Expected {expected} here."
    )


def create_unexpected_eof_error(location: SourceLocation) -> ParseError:
    """Create an error for running out of tokens mid-expression."""
    return ParseError(
        message=ERROR_CODES["P002"],
        location=location,
        code="P002",
        help_text="The expression ended before it was complete."
    )


def create_trailing_tokens_error(found: Token) -> ParseError:
    """Create an error for tokens left over after a complete expression."""
    help_text = "Operands must be separated by an operator."
    suggestions = []
    if found.type in (TokenType.NUMBER, TokenType.LEFT_PAREN):
        suggestions.append(f"Insert '*' before '{found.lexeme}' to multiply")

    return ParseError(
        message=f"{ERROR_CODES['P003']}: '{found.lexeme}'",
        location=found.location,
        token=found,
        code="P003",
        help_text=help_text,
        suggestions=suggestions
    )


def create_nesting_too_deep_error(location: SourceLocation, depth: int) -> ParseError:
    """Create an error for parentheses nested beyond what the parser supports."""
    return ParseError(
        message=f"{ERROR_CODES['P004']}: {depth} open groups",
        location=location,
        code="P004",
        help_text="Each '(' opens a nested group; remove redundant parentheses."
    )
