"""
Token Classes and Token Records
===============================

This module defines the token vocabulary produced by the lexer engine.

Token classes are integers because the classification table file stores
them as numbers: column 1 of every row is a TokenClass value. ERROR and
WHITESPACE are ordinary classification outcomes; END_OF_FILE is only ever
produced by the engine itself, once per token stream.

Example
-------
>>> from tablelex.tokens import Token, TokenClass
>>> Token(TokenClass.IDENTIFIER, "x", 1, 1, "<input>")
Token(IDENTIFIER, 'x', <input>:1:1)
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from tablelex.errors import LexicalError, SourceLocation


# =============================================================================
# Token Class Enumeration
# =============================================================================

class TokenClass(IntEnum):
    """
    Token classes, numbered as they appear in classification tables.
    """

    # === Special Classes ===
    ERROR = 0               # No accepting state reached
    WHITESPACE = 1          # Spaces, newlines, comments (discarded)

    # === Identifiers and Literals ===
    IDENTIFIER = 2
    INTEGER = 3
    REAL = 4
    STRING = 5

    # === Arithmetic Operators ===
    PLUS = 10               # +
    MINUS = 11              # -
    STAR = 12               # *
    SLASH = 13              # /
    PERCENT = 14            # %

    # === Assignment, Comparison and Logic ===
    ASSIGN = 20             # =
    EQ = 21                 # ==
    NOT = 22                # !
    NE = 23                 # !=
    LT = 24                 # <
    LE = 25                 # <=
    GT = 26                 # >
    GE = 27                 # >=
    AND = 28                # &&
    OR = 29                 # ||

    # === Delimiters ===
    LPAREN = 30             # (
    RPAREN = 31             # )
    LBRACE = 32             # {
    RBRACE = 33             # }
    SEMICOLON = 34          # ;
    COMMA = 35              # ,

    # === Keywords ===
    IF = 40
    ELSE = 41
    WHILE = 42
    FOR = 43
    RETURN = 44
    INT = 45
    FLOAT = 46
    VOID = 47
    TRUE = 48
    FALSE = 49

    # === Structural ===
    END_OF_FILE = 99


# Exact lexeme text -> class, applied after the DFA has classified a lexeme
RESERVED_WORDS: dict[str, TokenClass] = {
    "if": TokenClass.IF,
    "else": TokenClass.ELSE,
    "while": TokenClass.WHILE,
    "for": TokenClass.FOR,
    "return": TokenClass.RETURN,
    "int": TokenClass.INT,
    "float": TokenClass.FLOAT,
    "void": TokenClass.VOID,
    "true": TokenClass.TRUE,
    "false": TokenClass.FALSE,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Line and column are those of the lexeme's first character.

    Attributes:
        type: The TokenClass, after any reserved-word override
        lexeme: The exact source text consumed
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        file: Name of the source file
    """
    type: TokenClass
    lexeme: str
    line: int
    column: int
    file: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.location})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.file, self.line, self.column)

    @property
    def is_error(self) -> bool:
        return self.type == TokenClass.ERROR

    @property
    def is_eof(self) -> bool:
        return self.type == TokenClass.END_OF_FILE

    def to_dict(self) -> dict:
        """Plain-dict form used by the JSON output of tlex."""
        return {
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "type": self.type.name,
            "lexeme": self.lexeme,
        }


# =============================================================================
# Token Stream
# =============================================================================

class TokenStream(list):
    """
    The tokens of one file, terminated by exactly one END_OF_FILE token.

    A plain list with helpers for callers that want to decide what to do
    about ERROR tokens.
    """

    def __init__(self, tokens=(), source_text: Optional[str] = None):
        super().__init__(tokens)
        self._source_text = source_text

    def errors(self) -> list[Token]:
        """Return all ERROR tokens in stream order."""
        return [token for token in self if token.is_error]

    @property
    def has_errors(self) -> bool:
        return any(token.is_error for token in self)

    def raise_for_errors(self) -> None:
        """
        Raise LexicalError for the first ERROR token, if there is one.

        Raises:
            LexicalError: Pointing at the first unrecognized lexeme
        """
        errors = self.errors()
        if not errors:
            return

        first = errors[0]
        source_line = None
        if self._source_text is not None:
            # Only LF starts a new line, matching CharacterSource
            lines = self._source_text.split("\n")
            if 0 < first.line <= len(lines):
                source_line = lines[first.line - 1]

        raise LexicalError(
            first.lexeme,
            first.location,
            source_line=source_line,
            error_count=len(errors),
        )
