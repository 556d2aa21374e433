"""
tablelex - Table-Driven Lexical Analyzer
========================================

This package converts source text into a stream of classified tokens by
running a deterministic finite automaton whose transition function and
accepting states are read from delimiter-separated table files.

The automaton is supplied pre-built; tablelex only executes it. Changing
the language means editing the tables, not the code.

Main Components
---------------
- **tables**: TransitionTable and ClassificationTable, built once from files
- **lexer**: the Lexer engine (maximal-munch scanning, reserved words)
- **source**: CharacterSource, one-character lookahead with line/column
- **symbols**: alias vocabulary for table header cells (0x20, comma, ...)
- **cli**: the ``tlex`` command-line tool

Quick Start
-----------
Lex a file with the packaged tables:
    >>> from tablelex import Lexer
    >>> lexer = Lexer.from_options()
    >>> for token in lexer.lex("program.src"):
    ...     print(token.type.name, token.lexeme)

Use your own tables:
    >>> from tablelex import LexerOptions
    >>> options = LexerOptions(
    ...     transition_table_path="my_transitions.csv",
    ...     classification_table_path="my_classes.csv",
    ... )
    >>> lexer = Lexer.from_options(options)

Or use the command-line tool:
    $ tlex program.src
    $ tlex --format json -t my_transitions.csv -c my_classes.csv program.src
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from tablelex.config import KeywordPolicy, LexerOptions
from tablelex.errors import (
    TableLexError,
    FileAccessError,
    TableFormatError,
    LexicalError,
    SourceLocation,
)
from tablelex.grid import TableGrid
from tablelex.lexer import Lexer
from tablelex.source import END_OF_INPUT, CharacterSource, EndOfInput
from tablelex.symbols import normalize_symbol
from tablelex.tables import START_STATE, ClassificationTable, TransitionTable
from tablelex.tokens import RESERVED_WORDS, Token, TokenClass, TokenStream

__all__ = [
    "__version__",
    # Engine
    "Lexer",
    "LexerOptions",
    "KeywordPolicy",
    # Tables
    "TableGrid",
    "TransitionTable",
    "ClassificationTable",
    "START_STATE",
    "normalize_symbol",
    # Source
    "CharacterSource",
    "EndOfInput",
    "END_OF_INPUT",
    # Tokens
    "Token",
    "TokenClass",
    "TokenStream",
    "RESERVED_WORDS",
    # Exception hierarchy
    "TableLexError",
    "FileAccessError",
    "TableFormatError",
    "LexicalError",
    "SourceLocation",
]
