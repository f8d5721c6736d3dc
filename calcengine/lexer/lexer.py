"""
calcengine Lexer - turns expression text into tokens

Reads the input one character at a time. Digits and a decimal point
collect in a buffer that is flushed into a NUMBER token as soon as
anything else shows up. Everything else is a single-character token,
skipped whitespace, or an error.

xwest
"""

from typing import List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, OPERATORS, PARENTHESES, WHITESPACE,
    NUMBER_CHARS, make_operator
)
from .errors import create_invalid_character_error, create_invalid_number_error
from .repair import repair_tokens


class Lexer:
    """
    Arithmetic expression lexical analyzer.

    Converts text into a flat list of tokens. The first malformed character
    or numeric literal raises LexerError; there is no partial result.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with expression text.

        Args:
            source: Expression text
            filename: Name used in diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

        # Pending numeric literal
        self._buffer: List[str] = []
        self._buffer_start: Optional[SourceLocation] = None

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire input.

        Returns:
            List of raw (unrepaired) tokens

        Raises:
            LexerError: On an invalid character or numeric literal
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self._buffer = []
        self._buffer_start = None

        while self.pos < len(self.source):
            char = self.source[self.pos]
            location = self._location()

            # Anything but a digit or '.' ends the pending number
            if char not in NUMBER_CHARS:
                self._flush_number()

            if char in NUMBER_CHARS:
                self._push_number_char(char, location)
            elif char in OPERATORS:
                self.tokens.append(make_operator(OPERATORS[char], location))
            elif char in PARENTHESES:
                self.tokens.append(Token(PARENTHESES[char], char, None, location))
            elif char in WHITESPACE:
                pass
            else:
                raise create_invalid_character_error(char, location)

            self._advance()

        self._flush_number()

        return self.tokens

    def _push_number_char(self, char: str, location: SourceLocation):
        """Append a digit or decimal point to the numeric buffer."""
        if char == '.' and '.' in self._buffer:
            lexeme = ''.join(self._buffer) + char
            raise create_invalid_number_error(
                lexeme,
                self._buffer_start or location,
                "A number can contain only one decimal point"
            )

        if not self._buffer:
            self._buffer_start = location
        self._buffer.append(char)

    def _flush_number(self):
        """Emit the numeric buffer as a NUMBER token, if non-empty."""
        if not self._buffer:
            return

        lexeme = ''.join(self._buffer)
        location = self._buffer_start
        self._buffer = []
        self._buffer_start = None

        try:
            value = float(lexeme)
        except ValueError:
            # Only a lone '.' gets here
            raise create_invalid_number_error(
                lexeme,
                location,
                "A number needs at least one digit"
            )

        self.tokens.append(Token(TokenType.NUMBER, lexeme, value, location))

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to lex and repair an expression string.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        Repaired token list, ready for the parser

    Raises:
        LexerError: If lexing fails
        RepairError: If a ')' has no matching '('
    """
    lexer = Lexer(source, filename)
    return repair_tokens(lexer.tokenize())
