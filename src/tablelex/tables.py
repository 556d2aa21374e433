"""
Automaton Tables
================

The lexer's DFA is not hard-coded; it is read from two tables.

Transition Table
----------------
A grid whose first row lists the input symbols and whose first column
lists the states. A non-empty cell is the target state for that
(state, symbol) pair:

    state,a,b,0x20
    1,2,,3
    2,2,2,
    3,,,3

Empty cells mean "no transition". The function is partial: there is no
state 0 standing in for a missing entry.

Classification Table
--------------------
Two columns, one row per accepting state: the state id and the numeric
token class it recognizes.

    2,2
    3,1

A state that appears here is final; any other state is not.

Both tables are built once and only read afterwards, so one instance can
be shared by every lexer and every file in a process.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from tablelex.errors import SourceLocation, TableFormatError
from tablelex.grid import TableGrid
from tablelex.symbols import describe_symbol, is_alias, normalize_symbol
from tablelex.tokens import TokenClass

logger = logging.getLogger(__name__)

# Every scan starts here
START_STATE = 1


def _parse_state(grid: TableGrid, row: int, column: int, what: str) -> int:
    """Parse a cell holding a state id, raising TableFormatError if invalid."""
    text = grid.get(row, column).strip()
    location = SourceLocation(grid.name, row + 1, column + 1)
    try:
        value = int(text)
    except ValueError:
        raise TableFormatError(
            f"{what} {text!r} is not an integer",
            location,
        ) from None
    if value < 1:
        raise TableFormatError(
            f"{what} {value} is not a positive state id",
            location,
            hint="state ids start at 1, which is the start state",
        )
    return value


# =============================================================================
# Transition Table
# =============================================================================

class TransitionTable:
    """
    The DFA transition function, (state, symbol) -> state.

    Example:
        table = TransitionTable.from_file("transitions.csv")
        if table.has_transition(1, "a"):
            state = table.next_state(1, "a")
    """

    def __init__(self, transitions: Mapping[tuple[int, str], int]):
        self._transitions = MappingProxyType(dict(transitions))

    @classmethod
    def from_file(cls, path: str | Path, delimiter: str = ",") -> "TransitionTable":
        """
        Read and build a transition table.

        Raises:
            FileAccessError: If the file cannot be read
            TableFormatError: If the table is malformed
        """
        return cls.from_grid(TableGrid.from_file(path, delimiter))

    @classmethod
    def from_grid(cls, grid: TableGrid) -> "TransitionTable":
        """
        Build the table from a grid.

        The grid is read column by column so each header cell is
        normalized once.

        Raises:
            TableFormatError: If a header, state id or target is invalid, or
                if two entries give one (state, symbol) pair different targets
        """
        transitions: dict[tuple[int, str], int] = {}

        if grid.rows == 0:
            logger.warning(f"Transition table {grid.name} is empty")
            return cls(transitions)

        row_states = [
            _parse_state(grid, row, 0, "state")
            for row in range(1, grid.rows)
        ]

        for column in range(1, grid.columns):
            header = grid.get(0, column)
            symbol = normalize_symbol(header)
            if symbol is None:
                raise TableFormatError(
                    "empty symbol header",
                    SourceLocation(grid.name, 1, column + 1),
                    hint="write whitespace and ',' as aliases such as 0x20 or comma",
                )
            if len(header) > 1 and not is_alias(header):
                logger.warning(
                    f"{grid.name}:1:{column + 1}: header {header!r} is not an alias, "
                    f"using its first character {symbol!r}"
                )

            for row, state in enumerate(row_states, start=1):
                if not grid.get(row, column).strip():
                    continue

                target = _parse_state(grid, row, column, "target state")
                key = (state, symbol)
                previous = transitions.get(key)
                if previous is not None and previous != target:
                    raise TableFormatError(
                        f"state {state} on {describe_symbol(symbol)!r} goes to both "
                        f"{previous} and {target}",
                        SourceLocation(grid.name, row + 1, column + 1),
                        hint="a deterministic automaton allows one target per state and symbol",
                    )
                transitions[key] = target

        logger.debug(
            f"Built transition table from {grid.name}: {len(transitions)} transitions, "
            f"{len(row_states)} states"
        )
        return cls(transitions)

    def has_transition(self, state: int, symbol: str) -> bool:
        return (state, symbol) in self._transitions

    def next_state(self, state: int, symbol: str) -> int:
        """
        Return the target of a transition.

        Only defined when has_transition(state, symbol) holds.

        Raises:
            KeyError: If there is no such transition
        """
        return self._transitions[(state, symbol)]

    @property
    def states(self) -> frozenset[int]:
        """States that have at least one outgoing transition."""
        return frozenset(state for state, _ in self._transitions)

    @property
    def alphabet(self) -> frozenset[str]:
        """Every symbol that appears in some transition."""
        return frozenset(symbol for _, symbol in self._transitions)

    def items(self) -> Iterable[tuple[tuple[int, str], int]]:
        return self._transitions.items()

    def __len__(self) -> int:
        return len(self._transitions)

    def __repr__(self) -> str:
        return f"TransitionTable({len(self)} transitions)"


# =============================================================================
# Classification Table
# =============================================================================

class ClassificationTable:
    """
    Accepting states and the token class each one recognizes.

    Example:
        table = ClassificationTable.from_file("classes.csv")
        if table.is_final(state):
            token_class = table.class_of(state)
    """

    def __init__(self, classes: Mapping[int, TokenClass]):
        self._classes = MappingProxyType(dict(classes))

    @classmethod
    def from_file(cls, path: str | Path, delimiter: str = ",") -> "ClassificationTable":
        """
        Read and build a classification table.

        Raises:
            FileAccessError: If the file cannot be read
            TableFormatError: If the table is malformed
        """
        return cls.from_grid(TableGrid.from_file(path, delimiter))

    @classmethod
    def from_grid(cls, grid: TableGrid) -> "ClassificationTable":
        """
        Build the table from a two-column grid.

        Every row is data; there is no header row. When a state is listed
        twice the later row wins.

        Raises:
            TableFormatError: If a row is short, a state id is invalid, or
                a class id is not a known TokenClass
        """
        classes: dict[int, TokenClass] = {}

        for row in range(grid.rows):
            if len(grid.row(row)) < 2:
                raise TableFormatError(
                    "expected two columns: final state, token class",
                    SourceLocation(grid.name, row + 1, 1),
                )

            state = _parse_state(grid, row, 0, "final state")

            text = grid.get(row, 1).strip()
            location = SourceLocation(grid.name, row + 1, 2)
            try:
                token_class = TokenClass(int(text))
            except ValueError:
                raise TableFormatError(
                    f"token class {text!r} is not a known class id",
                    location,
                    hint=f"valid ids are {', '.join(str(int(c)) for c in TokenClass)}",
                ) from None

            if state in classes:
                logger.warning(
                    f"{grid.name}:{row + 1}: state {state} listed again, "
                    f"{classes[state].name} replaced by {token_class.name}"
                )
            classes[state] = token_class

        logger.debug(f"Built classification table from {grid.name}: {len(classes)} final states")
        return cls(classes)

    def is_final(self, state: int) -> bool:
        return state in self._classes

    def class_of(self, state: int) -> TokenClass:
        """
        Return the token class of an accepting state.

        Only defined when is_final(state) holds.

        Raises:
            KeyError: If the state is not final
        """
        return self._classes[state]

    @property
    def final_states(self) -> frozenset[int]:
        return frozenset(self._classes)

    def items(self) -> Iterable[tuple[int, TokenClass]]:
        return self._classes.items()

    def __contains__(self, state: object) -> bool:
        return state in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"ClassificationTable({len(self)} final states)"
