"""
Lexer Configuration
===================

Options that select the automaton tables and the reserved-word policy.
Configuration can come from:
- Default values (defined here; the tables packaged in tablelex/data)
- Environment variables, via LexerOptions.from_env()
- Command-line options of tlex
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from tablelex.tokens import RESERVED_WORDS, TokenClass

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_TRANSITION_TABLE = DATA_DIR / "transitions.csv"
DEFAULT_CLASSIFICATION_TABLE = DATA_DIR / "classes.csv"


class KeywordPolicy(Enum):
    """
    When a lexeme found in the reserved-word table is re-classified.

    IDENTIFIER_ONLY: only lexemes the DFA classified as IDENTIFIER
    ALWAYS: any lexeme, whatever the DFA decided
    NEVER: reserved words are not applied
    """
    IDENTIFIER_ONLY = "identifier"
    ALWAYS = "always"
    NEVER = "never"


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        transition_table_path: Transition table file
        classification_table_path: Classification table file
        delimiter: Cell delimiter of both table files
        keyword_policy: When reserved words override the DFA class
        reserved_words: Exact lexeme text -> token class
        encoding: Text encoding of source files
    """
    transition_table_path: Path = DEFAULT_TRANSITION_TABLE
    classification_table_path: Path = DEFAULT_CLASSIFICATION_TABLE
    delimiter: str = ","
    keyword_policy: KeywordPolicy = KeywordPolicy.IDENTIFIER_ONLY
    reserved_words: dict[str, TokenClass] = field(
        default_factory=lambda: dict(RESERVED_WORDS)
    )
    encoding: str = "utf-8"

    def __post_init__(self):
        self.transition_table_path = Path(self.transition_table_path)
        self.classification_table_path = Path(self.classification_table_path)
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            TABLELEX_TRANSITIONS: Transition table path
            TABLELEX_CLASSES: Classification table path
            TABLELEX_DELIMITER: Table delimiter (one character)
            TABLELEX_KEYWORD_POLICY: identifier, always or never
            TABLELEX_ENCODING: Source file encoding

        Invalid values are logged and the default is kept.
        """
        options = cls()

        if path := os.environ.get("TABLELEX_TRANSITIONS"):
            options.transition_table_path = Path(path)

        if path := os.environ.get("TABLELEX_CLASSES"):
            options.classification_table_path = Path(path)

        if delimiter := os.environ.get("TABLELEX_DELIMITER"):
            if len(delimiter) == 1:
                options.delimiter = delimiter
            else:
                logger.warning(f"Ignoring TABLELEX_DELIMITER={delimiter!r}: not one character")

        if policy := os.environ.get("TABLELEX_KEYWORD_POLICY"):
            try:
                options.keyword_policy = KeywordPolicy(policy.lower())
            except ValueError:
                logger.warning(f"Ignoring unknown TABLELEX_KEYWORD_POLICY={policy!r}")

        if encoding := os.environ.get("TABLELEX_ENCODING"):
            options.encoding = encoding

        return options
