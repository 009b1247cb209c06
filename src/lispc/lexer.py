"""
S-Expression Lexer (Tokenizer)
==============================

This module converts S-expression source text into a list of tokens for
the parser.

Token Categories
----------------
- Parens: ``(`` and ``)``, one token per character
- Numbers: a maximal run of ASCII digits
- Identifiers: a maximal run of ASCII letters

Whitespace separates tokens and is never emitted. Letters and digits do
not mix inside a token, so ``abc12`` lexes as ``abc`` followed by ``12``.
Any other character is a LexError.

Example Usage
-------------
>>> from lispc.lexer import tokenize
>>> for token in tokenize("(add 1 2)"):
...     print(token)
Token(PAREN, '(', 1:1)
Token(IDENTIFIER, 'add', 1:2)
Token(NUMBER, '1', 1:6)
Token(NUMBER, '2', 1:8)
Token(PAREN, ')', 1:9)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator
import string

from lispc.errors import SourceLocation, LexError


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token categories of the S-expression grammar."""

    PAREN = auto()          # ( or )
    NUMBER = auto()         # run of digits
    IDENTIFIER = auto()     # run of letters


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from S-expression source.

    Attributes:
        type: The TokenType classification
        value: The exact source text of the token
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        offset: Character offset in source (0-indexed)
        filename: Name of the source file
    """
    type: TokenType
    value: str
    line: int = 1
    column: int = 1
    offset: int = 0
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_open_paren(self) -> bool:
        return self.type == TokenType.PAREN and self.value == "("

    def is_close_paren(self) -> bool:
        return self.type == TokenType.PAREN and self.value == ")"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes S-expression source text.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source text being tokenized
        filename: Name of the source file (for error reporting)
    """

    DIGITS = string.digits
    LETTERS = string.ascii_letters
    WHITESPACE = string.whitespace
    PARENS = "()"

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        # Current position in source
        self._pos = 0
        self._line = 1
        self._column = 1

        # Track line start position for error reporting
        self._line_start_pos = 0

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source text.

        Yields:
            Token objects in source order

        Raises:
            LexError: On any character outside the accepted alphabet
        """
        while not self._at_end():
            char = self._peek()

            if char in self.WHITESPACE:
                self._advance()
                continue

            if char in self.PARENS:
                token = self._make_token(TokenType.PAREN, char)
                self._advance()
                yield token
                continue

            if char in self.DIGITS:
                yield self._scan_run(TokenType.NUMBER, self.DIGITS)
                continue

            if char in self.LETTERS:
                yield self._scan_run(TokenType.IDENTIFIER, self.LETTERS)
                continue

            raise self._error(char)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Current character, or empty string past end of source."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        """Consume the current character, updating line and column."""
        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        return Token(
            type=token_type,
            value=value,
            line=self._line,
            column=self._column,
            offset=self._pos,
            filename=self.filename,
        )

    def _scan_run(self, token_type: TokenType, alphabet: str) -> Token:
        """
        Scan a maximal run of characters drawn from alphabet.

        The run stops at the first character outside the alphabet or at
        end of source.
        """
        start_line = self._line
        start_column = self._column
        start_pos = self._pos

        while self._peek() and self._peek() in alphabet:
            self._advance()

        return Token(
            type=token_type,
            value=self.source[start_pos:self._pos],
            line=start_line,
            column=start_column,
            offset=start_pos,
            filename=self.filename,
        )

    def _error(self, char: str) -> LexError:
        """Build a LexError for char at the current position."""
        location = SourceLocation(self.filename, self._line, self._column)

        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        source_line = self.source[self._line_start_pos:line_end]

        return LexError(char, self._pos, location=location, source_line=source_line)


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize source text into a list.

    Raises:
        LexError: On any character outside the accepted alphabet
    """
    return list(Lexer(source, filename).tokenize())
