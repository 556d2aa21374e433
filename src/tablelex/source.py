"""
Character Source
================

Wraps the full text of one source file and hands it to the engine one
character at a time, keeping the 1-indexed line and column of the next
unconsumed character.

Exhaustion is reported with the END_OF_INPUT singleton rather than with a
reserved character value, so a source containing NUL characters is lexed
like any other text:

>>> source = CharacterSource.from_string("a\\n")
>>> source.next(), source.next(), source.next() is END_OF_INPUT
('a', '\\n', True)
>>> source.line, source.column
(2, 1)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from tablelex.errors import FileAccessError, SourceLocation

logger = logging.getLogger(__name__)


class EndOfInput:
    """
    Result returned by peek()/next() once the source is exhausted.

    Never equal to any character. Use the END_OF_INPUT instance.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "END_OF_INPUT"

    def __bool__(self) -> bool:
        return False


END_OF_INPUT = EndOfInput()

# A single character, or END_OF_INPUT
Symbol = Union[str, EndOfInput]


class CharacterSource:
    """
    One-character-lookahead reader over a loaded source file.

    Usage:
        source = CharacterSource.from_file("program.src")
        while not source.at_end():
            ch = source.next()

    Attributes:
        text: The complete source text
        filename: Name reported in token positions
    """

    def __init__(self, text: str, filename: str = "<input>"):
        self.text = text
        self.filename = filename

        self._pos = 0
        self._line = 1
        self._column = 1

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = "utf-8") -> "CharacterSource":
        """
        Load a whole source file.

        Line endings are kept exactly as stored, so a CR before LF is a
        character the tables must handle.

        Raises:
            FileAccessError: If the file cannot be opened or decoded
        """
        path = Path(path)
        try:
            with open(path, encoding=encoding, newline="") as f:
                text = f.read()
        except OSError as e:
            raise FileAccessError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise FileAccessError(path, f"not valid {encoding} text") from e

        logger.debug(f"Loaded source {path} ({len(text)} characters)")
        return cls(text, str(path))

    @classmethod
    def from_string(cls, text: str, filename: str = "<input>") -> "CharacterSource":
        return cls(text, filename)

    # =========================================================================
    # Character Access
    # =========================================================================

    def at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self._pos >= len(self.text)

    def peek(self) -> Symbol:
        """Return the next character without consuming it."""
        if self._pos >= len(self.text):
            return END_OF_INPUT
        return self.text[self._pos]

    def next(self) -> Symbol:
        """
        Consume and return the next character.

        A newline moves the position to column 1 of the following line;
        any other character advances the column. At end of input nothing
        changes and END_OF_INPUT is returned.
        """
        if self._pos >= len(self.text):
            return END_OF_INPUT

        char = self.text[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char

    # =========================================================================
    # Position
    # =========================================================================

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def offset(self) -> int:
        """Number of characters consumed so far."""
        return self._pos

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.filename, self._line, self._column)
