"""
tablelex Error Hierarchy
========================

This module defines the exception hierarchy for the table-driven lexer.
All exceptions inherit from TableLexError, allowing callers to catch all
library errors with a single except clause if desired.

Exception Hierarchy
-------------------
TableLexError (base)
├── FileAccessError - a table or source file cannot be opened or decoded
├── TableFormatError - a table file is malformed
└── LexicalError - error tokens promoted to a failure by the caller

Error Tiers
-----------
FileAccessError and TableFormatError are fatal configuration errors: the
tables and the source file are preconditions of a run, not user input to
be validated gracefully. Lexical errors are *not* fatal; the engine emits
them as ERROR tokens and keeps scanning. LexicalError only exists for
callers that decide (e.g. with ``tlex --strict``) that an error token
should abort the run.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TableLexError(Exception):
    """
    Base exception for all tablelex errors.

    All exceptions in the library inherit from this class, allowing
    callers to catch every library error with a single except clause:

        try:
            tokens = lexer.lex("program.src")
        except TableLexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in a source or table file for error reporting.

    Attributes:
        filename: Name of the file (or "<input>" for string input)
        line: Line (or table row) number, 1-indexed
        column: Column number, 1-indexed
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Located Errors
# =============================================================================

class LocatedError(TableLexError):
    """
    Base for errors that point at a position in a file.

    Attributes:
        message: The error description
        location: Where the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The text of the offending line (optional)
    """

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

        Example output:
            program.src:3:7: error: unrecognized lexeme '@'
                x = y @ z;
                      ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class TableFormatError(LocatedError):
    """
    A transition or classification table file is malformed.

    Raised while building a table when a cell that must hold an integer
    does not, when a state id is not positive, when a symbol header is
    empty, when two columns normalize to the same symbol with conflicting
    targets, or when a token class id is unknown.

    The location line/column are the 1-indexed row and column of the
    offending cell in the table file.
    """
    pass


class LexicalError(LocatedError):
    """
    An error token that a caller chose to treat as fatal.

    The engine never raises this; see TokenStream.raise_for_errors().
    """

    def __init__(
        self,
        lexeme: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        error_count: int = 1,
    ):
        self.lexeme = lexeme
        self.error_count = error_count
        hint = None
        if error_count > 1:
            hint = f"{error_count - 1} more unrecognized lexeme(s) follow"
        super().__init__(
            f"unrecognized lexeme {lexeme!r}",
            location,
            hint=hint,
            source_line=source_line,
        )


# =============================================================================
# File Access Errors
# =============================================================================

class FileAccessError(TableLexError):
    """
    A table or source file cannot be opened or decoded.

    This is a fatal configuration error. The underlying OSError or
    UnicodeDecodeError is chained as __cause__.

    Attributes:
        path: The path that could not be read
        reason: Short description of the failure
    """

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read '{path}': {reason}")
