"""
lispc Error Hierarchy
=====================

This module defines the exception hierarchy for the lispc transpiler.
All exceptions inherit from LispcError, allowing callers to catch every
transpiler error with a single except clause.

Exception Hierarchy
-------------------
LispcError (base)
└── CompileError - a failure in one of the compilation stages
    ├── LexError - unrecognized character in source
    ├── ParseError - unexpected or missing token
    ├── TransformError - structurally invalid source AST
    └── CodeGenError - unrecognized target AST node

Each CompileError names the stage that failed (``stage``) and, where the
failure can be tied to source text, carries a SourceLocation and the
offending source line.

Error Message Format
--------------------
    filename:line:column: error: parse error: unexpected end of input
        (add 1
              ^
    hint: add ')' to close the call
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LispcError(Exception):
    """
    Base exception for all lispc errors.

        try:
            compile_lisp(source)
        except LispcError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in source text for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Compilation Errors
# =============================================================================

class CompileError(LispcError):
    """
    Base exception for failures in a compilation stage.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text at the error location (optional)
        stage: Name of the pipeline stage that failed
    """

    stage = "compile"

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            demo.lisp:1:7: error: parse error: unexpected end of input
                (add 1
                      ^
            hint: add ')' to close the call
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.stage} error: {self.message}")
        else:
            parts.append(f"error: {self.stage} error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class LexError(CompileError):
    """
    Unrecognized character in source text.

    Only ASCII letters, digits, parentheses and whitespace are accepted.
    """

    stage = "lex"

    def __init__(
        self,
        char: str,
        offset: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        self.offset = offset
        super().__init__(
            f"unknown character {char!r} (0x{ord(char):02X}) at offset {offset}",
            location=location,
            hint="only letters, digits, parentheses and whitespace are allowed",
            source_line=source_line,
        )


class ParseError(CompileError):
    """
    Unexpected or missing token during parsing.

    ``found`` is the text of the offending token, or None when the token
    list ended early.
    """

    stage = "parse"

    def __init__(
        self,
        found: Optional[str],
        expected: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.found = found
        self.expected = expected

        if found is None:
            message = "unexpected end of input"
        else:
            message = f"unexpected token '{found}'"
        if expected:
            message = f"{message}, expected {expected}"

        super().__init__(
            message,
            location=location,
            hint=hint,
            source_line=source_line,
        )


class TransformError(CompileError):
    """
    Source AST that cannot be lowered to the target AST.

    Raised for a bare number literal at top level, a Program node that is
    not the root, or a node class with no visitor.
    """

    stage = "transform"

    def __init__(
        self,
        message: str,
        kind: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.kind = kind
        super().__init__(
            message,
            location=location,
            hint=hint,
            source_line=source_line,
        )


class CodeGenError(CompileError):
    """Target AST node the code generator does not know how to render."""

    stage = "codegen"

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"unexpected node type '{kind}'")
