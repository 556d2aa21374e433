"""
Table Grid Reader
=================

Reads a delimiter-separated text file into an immutable grid of text
cells. The table builders only use three accessors: ``rows``,
``columns`` and ``get(row, column)``.

Quoting is disabled: every character between delimiters is taken
literally, so a header cell may be a lone ``"`` or ``\\``. A delimiter
character can therefore never appear inside a cell, which is why the
symbol vocabulary has a ``comma`` alias.
"""

import csv
import io
import logging
from pathlib import Path

from tablelex.errors import FileAccessError

logger = logging.getLogger(__name__)


class TableGrid:
    """
    Rows x columns of text cells.

    Short rows are padded on access: ``get`` returns an empty string for
    any cell beyond the end of its row.

    Attributes:
        name: File name (or "<string>") used in error messages
    """

    def __init__(self, cells: list[list[str]], name: str = "<string>"):
        self.name = name
        self._cells = tuple(tuple(row) for row in cells)
        self._columns = max((len(row) for row in self._cells), default=0)

    @classmethod
    def from_file(cls, path: str | Path, delimiter: str = ",") -> "TableGrid":
        """
        Read a table file.

        Raises:
            FileAccessError: If the file cannot be opened or decoded
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8", newline="") as f:
                text = f.read()
        except OSError as e:
            raise FileAccessError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise FileAccessError(path, "not valid utf-8 text") from e

        grid = cls.from_string(text, delimiter, name=str(path))
        logger.debug(f"Read table {path}: {grid.rows} rows x {grid.columns} columns")
        return grid

    @classmethod
    def from_string(cls, text: str, delimiter: str = ",", name: str = "<string>") -> "TableGrid":
        reader = csv.reader(
            io.StringIO(text, newline=""),
            delimiter=delimiter,
            quoting=csv.QUOTE_NONE,
        )
        # Blank lines carry no cells and are dropped.
        cells = [row for row in reader if row]
        return cls(cells, name)

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def columns(self) -> int:
        return self._columns

    def get(self, row: int, column: int) -> str:
        """Return the text of a cell, or "" past the end of a short row."""
        cells = self._cells[row]
        if column < len(cells):
            return cells[column]
        return ""

    def row(self, row: int) -> tuple[str, ...]:
        return self._cells[row]
