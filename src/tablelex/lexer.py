"""
Table-Driven Lexer Engine
=========================

This module runs the DFA described by a TransitionTable and a
ClassificationTable over a CharacterSource, producing one token per scan.

Scanning
--------
Each scan starts in state 1 with an empty lexeme and follows transitions
for as long as one exists for the next character (maximal munch). Every
character followed is consumed for good; nothing is ever pushed back.
When no transition applies, or the input runs out, the state reached so
far decides the token:

- a final state gives the class from the classification table
- any other state gives an ERROR token holding the characters consumed

The character that stopped the scan stays unconsumed and starts the next
scan. Reserved words are then looked up by exact lexeme text, subject to
the KeywordPolicy.

A full-file scan drops WHITESPACE tokens and appends one END_OF_FILE
token with an empty lexeme at the final cursor position.

Example Usage
-------------
>>> from tablelex.lexer import Lexer
>>> lexer = Lexer.from_options()
>>> for token in lexer.lex_source("if (x1 >= 10) return 2.5;"):
...     print(token)
Token(IF, 'if', <input>:1:1)
Token(LPAREN, '(', <input>:1:4)
Token(IDENTIFIER, 'x1', <input>:1:5)
Token(GE, '>=', <input>:1:8)
Token(INTEGER, '10', <input>:1:11)
Token(RPAREN, ')', <input>:1:13)
Token(RETURN, 'return', <input>:1:15)
Token(REAL, '2.5', <input>:1:22)
Token(SEMICOLON, ';', <input>:1:25)
Token(END_OF_FILE, '', <input>:1:26)
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Iterator, Mapping, Optional, Union

from tablelex.config import KeywordPolicy, LexerOptions
from tablelex.source import END_OF_INPUT, CharacterSource, EndOfInput
from tablelex.tables import START_STATE, ClassificationTable, TransitionTable
from tablelex.tokens import RESERVED_WORDS, Token, TokenClass, TokenStream

logger = logging.getLogger(__name__)


class Lexer:
    """
    Tokenizes source files with a table-supplied automaton.

    The tables are passed in rather than loaded globally, so several
    independently configured lexers can live in one process. A Lexer
    holds no per-file state and may lex any number of files.

    Usage:
        lexer = Lexer.from_options()
        tokens = lexer.lex("program.src")

    Attributes:
        transitions: The DFA transition function
        classifications: Accepting states and their token classes
        reserved_words: Exact lexeme text -> token class
        keyword_policy: When reserved words override the DFA class
        encoding: Text encoding used by lex()
    """

    def __init__(
        self,
        transitions: TransitionTable,
        classifications: ClassificationTable,
        reserved_words: Optional[Mapping[str, TokenClass]] = None,
        keyword_policy: KeywordPolicy = KeywordPolicy.IDENTIFIER_ONLY,
        encoding: str = "utf-8",
    ):
        self.transitions = transitions
        self.classifications = classifications
        self.reserved_words = dict(RESERVED_WORDS if reserved_words is None else reserved_words)
        self.keyword_policy = keyword_policy
        self.encoding = encoding

    @classmethod
    def from_options(cls, options: Optional[LexerOptions] = None) -> "Lexer":
        """
        Build both tables from the files named in options.

        Raises:
            FileAccessError: If a table file cannot be read
            TableFormatError: If a table file is malformed
        """
        options = options or LexerOptions()

        transitions = TransitionTable.from_file(
            options.transition_table_path, options.delimiter
        )
        classifications = ClassificationTable.from_file(
            options.classification_table_path, options.delimiter
        )
        logger.info(
            f"Loaded {len(transitions)} transitions from {options.transition_table_path} "
            f"and {len(classifications)} final states from {options.classification_table_path}"
        )

        return cls(
            transitions,
            classifications,
            reserved_words=options.reserved_words,
            keyword_policy=options.keyword_policy,
            encoding=options.encoding,
        )

    # =========================================================================
    # Full-File Scanning
    # =========================================================================

    def lex(self, path: str | Path) -> TokenStream:
        """
        Tokenize a source file.

        Returns:
            The file's tokens, ending with one END_OF_FILE token

        Raises:
            FileAccessError: If the file cannot be read
        """
        source = CharacterSource.from_file(path, self.encoding)
        return self._collect(source)

    def lex_source(self, text: str, filename: str = "<input>") -> TokenStream:
        """Tokenize in-memory text as if it were the file filename."""
        return self._collect(CharacterSource.from_string(text, filename))

    def tokens(self, source: CharacterSource) -> Iterator[Token]:
        """
        Generate every non-whitespace token of source, then END_OF_FILE.

        When a scan consumes nothing, the offending character is consumed
        as the lexeme of an ERROR token so that the scan always moves
        forward. This holds whatever class the empty scan got, including
        tables that make the start state final.
        """
        while not source.at_end():
            token = self.scan_token(source)

            if not token.lexeme:
                token = dataclasses.replace(
                    token, type=TokenClass.ERROR, lexeme=source.next()
                )

            # Ignore all whitespace
            if token.type == TokenClass.WHITESPACE:
                continue

            yield token

        yield Token(
            TokenClass.END_OF_FILE,
            "",
            source.line,
            source.column,
            source.filename,
        )

    def _collect(self, source: CharacterSource) -> TokenStream:
        stream = TokenStream(self.tokens(source), source_text=source.text)
        logger.debug(
            f"Lexed {source.filename}: {len(stream) - 1} tokens, "
            f"{len(stream.errors())} errors"
        )
        return stream

    # =========================================================================
    # Single-Token Scanning
    # =========================================================================

    def scan_token(self, source: CharacterSource) -> Union[Token, EndOfInput]:
        """
        Scan one token starting at the current position of source.

        Returns:
            The next Token, or END_OF_INPUT if source was already exhausted
        """
        if source.at_end():
            return END_OF_INPUT

        filename = source.filename
        line = source.line
        column = source.column

        state = START_STATE
        chars = []

        while True:
            char = source.peek()
            if char is END_OF_INPUT:
                break
            if not self.transitions.has_transition(state, char):
                break

            source.next()
            chars.append(char)
            state = self.transitions.next_state(state, char)

        if self.classifications.is_final(state):
            token_class = self.classifications.class_of(state)
        else:
            token_class = TokenClass.ERROR

        lexeme = "".join(chars)
        return Token(
            type=self._apply_reserved_words(token_class, lexeme),
            lexeme=lexeme,
            line=line,
            column=column,
            file=filename,
        )

    def _apply_reserved_words(self, token_class: TokenClass, lexeme: str) -> TokenClass:
        """Return the reserved-word class for lexeme if the policy allows it."""
        if self.keyword_policy == KeywordPolicy.NEVER:
            return token_class
        if (
            self.keyword_policy == KeywordPolicy.IDENTIFIER_ONLY
            and token_class != TokenClass.IDENTIFIER
        ):
            return token_class
        return self.reserved_words.get(lexeme, token_class)
