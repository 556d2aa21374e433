"""
tablelex Test Configuration
===========================

Shared fixtures for the test suite.

The "mini" automaton used throughout is small enough to reason about by
hand:

    state 1 --digit--> 2 --digit--> 2          2 is final: INTEGER
    state 1 --letter-> 3 --letter/digit--> 3   3 is final: IDENTIFIER
    state 1 --space/newline--> 4 --same--> 4   4 is final: WHITESPACE
    state 1 --'<'--> 5 --'-'--> 6              6 is final: ASSIGN
                                               5 is not final
"""

import pytest

from tablelex.grid import TableGrid
from tablelex.lexer import Lexer
from tablelex.tables import ClassificationTable, TransitionTable
from tablelex.tokens import TokenClass

DIGITS = "0123456789"
LETTERS = "abcdefghijklmnopqrstuvwxyz"

# Header cells: literal characters plus the space and newline aliases
MINI_SYMBOLS = [*DIGITS, *LETTERS, "<", "-", "0x20", "\\n"]


def _mini_target(state: int, cell: str) -> str:
    char = {"0x20": " ", "\\n": "\n"}.get(cell, cell)
    if state == 1:
        if char in DIGITS:
            return "2"
        if char in LETTERS:
            return "3"
        if char in " \n":
            return "4"
        if char == "<":
            return "5"
    elif state == 2 and char in DIGITS:
        return "2"
    elif state == 3 and (char in LETTERS or char in DIGITS):
        return "3"
    elif state == 4 and char in " \n":
        return "4"
    elif state == 5 and char == "-":
        return "6"
    return ""


def build_mini_transitions_csv() -> str:
    lines = [",".join(["state", *MINI_SYMBOLS])]
    for state in range(1, 7):
        cells = [_mini_target(state, cell) for cell in MINI_SYMBOLS]
        lines.append(",".join([str(state), *cells]))
    return "\n".join(lines) + "\n"


MINI_CLASSES_CSV = (
    f"2,{int(TokenClass.INTEGER)}\n"
    f"3,{int(TokenClass.IDENTIFIER)}\n"
    f"4,{int(TokenClass.WHITESPACE)}\n"
    f"6,{int(TokenClass.ASSIGN)}\n"
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def mini_transitions_csv() -> str:
    """CSV text of the mini transition table."""
    return build_mini_transitions_csv()


@pytest.fixture
def mini_classes_csv() -> str:
    """CSV text of the mini classification table."""
    return MINI_CLASSES_CSV


@pytest.fixture
def mini_transitions(mini_transitions_csv) -> TransitionTable:
    return TransitionTable.from_grid(TableGrid.from_string(mini_transitions_csv))


@pytest.fixture
def mini_classes(mini_classes_csv) -> ClassificationTable:
    return ClassificationTable.from_grid(TableGrid.from_string(mini_classes_csv))


@pytest.fixture
def mini_lexer(mini_transitions, mini_classes) -> Lexer:
    """Lexer over the mini automaton with the default reserved words."""
    return Lexer(mini_transitions, mini_classes)


@pytest.fixture
def mini_table_files(tmp_path, mini_transitions_csv, mini_classes_csv):
    """The mini tables written to disk, as (transitions_path, classes_path)."""
    transitions_path = tmp_path / "transitions.csv"
    classes_path = tmp_path / "classes.csv"
    transitions_path.write_text(mini_transitions_csv)
    classes_path.write_text(mini_classes_csv)
    return transitions_path, classes_path


@pytest.fixture(scope="session")
def default_lexer() -> Lexer:
    """Lexer built from the packaged tables."""
    return Lexer.from_options()
