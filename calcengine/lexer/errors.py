"""
Error handling for the calcengine lexer.

Provides error reporting with source location information and help text
for the two user-facing failure kinds: lexical failures and unbalanced
parentheses found by the repair pass.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix = f"{severity_prefix}[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer rejects its input.

    Lexing is not recoverable: the first error aborts the whole input.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class RepairError(LexerError):
    """Raised when the token repair pass finds an imbalance it cannot fix."""


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L003": "Invalid numeric literal",
    "L011": "Unmatched closing parenthesis",
}

# Alternatives offered for characters people commonly type in arithmetic
OPERATOR_ALTERNATIVES = {
    '×': ['*'],
    '·': ['*'],
    '÷': ['/'],
    '−': ['-'],
    ',': ['.'],
    '[': ['('],
    ']': [')'],
    '{': ['('],
    '}': [')'],
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an invalid character."""
    suggestions = OPERATOR_ALTERNATIVES.get(char, [])

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in an arithmetic expression."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"{ERROR_CODES['L001']}: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str) -> LexerError:
    """Create an error for an invalid numeric literal."""
    return LexerError(
        message=f"{ERROR_CODES['L003']}: '{lexeme}'",
        location=location,
        code="L003",
        help_text=reason,
        suggestions=["Use at most one decimal point per number", "Put at least one digit in every number"]
    )


def create_unmatched_paren_error(location: SourceLocation) -> RepairError:
    """Create an error for a ')' without a matching '('."""
    return RepairError(
        message=ERROR_CODES["L011"],
        location=location,
        code="L011",
        help_text="Every ')' must close a '(' that appears before it.",
        suggestions=["Remove the extra ')'", "Add the missing '(' earlier in the expression"]
    )
