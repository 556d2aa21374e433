"""
Symbol Normalizer
=================

Maps the text of a transition-table header cell to the single character
it stands for. Characters that cannot be written literally in a
comma-delimited file (whitespace, the comma itself) have fixed aliases:

| Alias                     | Character        |
|---------------------------|------------------|
| 0x0A, 0x0a, \\n           | newline          |
| 0x0D, 0x0d, \\r           | carriage return  |
| 0x20                      | space            |
| 0x09, \\t                 | tab              |
| comma, Comma              | ,                |

Matching is exact and case-sensitive. Any other cell stands for its first
character.
"""

from typing import Optional

SYMBOL_ALIASES: dict[str, str] = {
    "0x0A": "\n",
    "0x0a": "\n",
    "\\n": "\n",
    "0x0D": "\r",
    "0x0d": "\r",
    "\\r": "\r",
    "0x20": " ",
    "0x09": "\t",
    "\\t": "\t",
    "comma": ",",
    "Comma": ",",
}


def normalize_symbol(cell: str) -> Optional[str]:
    """
    Resolve a header cell to its symbol.

    Returns None for an empty cell, which names no symbol.

    >>> normalize_symbol("0x20"), normalize_symbol("comma"), normalize_symbol("ab")
    (' ', ',', 'a')
    """
    if cell in SYMBOL_ALIASES:
        return SYMBOL_ALIASES[cell]
    if not cell:
        return None
    return cell[0]


def is_alias(cell: str) -> bool:
    """Return True if cell is one of the fixed aliases."""
    return cell in SYMBOL_ALIASES


def describe_symbol(symbol: str) -> str:
    """Printable name for a symbol, used in log and error messages."""
    for alias, char in SYMBOL_ALIASES.items():
        if char == symbol and not alias.startswith("0x"):
            return alias
    if symbol == " ":
        return "0x20"
    return symbol
