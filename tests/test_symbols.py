"""
Symbol Normalizer Tests
=======================

Tests for the alias vocabulary used in transition table headers.
"""

import pytest

from tablelex.symbols import SYMBOL_ALIASES, describe_symbol, is_alias, normalize_symbol


class TestNormalizeSymbol:
    """Test header cell to symbol mapping."""

    @pytest.mark.parametrize("cell,symbol", [
        ("0x0A", "\n"),
        ("0x0a", "\n"),
        ("\\n", "\n"),
        ("0x0D", "\r"),
        ("0x0d", "\r"),
        ("\\r", "\r"),
        ("0x20", " "),
        ("0x09", "\t"),
        ("\\t", "\t"),
        ("comma", ","),
        ("Comma", ","),
    ])
    def test_aliases(self, cell, symbol):
        assert normalize_symbol(cell) == symbol

    def test_literal_character(self):
        assert normalize_symbol("a") == "a"
        assert normalize_symbol("{") == "{"

    def test_first_character_fallback(self):
        assert normalize_symbol("abc") == "a"

    def test_aliases_are_case_sensitive(self):
        """Only the listed spellings are aliases."""
        assert normalize_symbol("COMMA") == "C"
        assert normalize_symbol("0X0A") == "0"
        assert normalize_symbol("\\N") == "\\"

    def test_unlisted_hex_code_is_literal(self):
        assert normalize_symbol("0x41") == "0"

    def test_empty_cell(self):
        assert normalize_symbol("") is None


class TestHelpers:
    """Test is_alias and describe_symbol."""

    def test_is_alias(self):
        assert is_alias("comma")
        assert not is_alias(",")
        assert all(is_alias(cell) for cell in SYMBOL_ALIASES)

    @pytest.mark.parametrize("symbol,name", [
        ("\n", "\\n"),
        ("\r", "\\r"),
        ("\t", "\\t"),
        (" ", "0x20"),
        (",", "comma"),
        ("x", "x"),
    ])
    def test_describe_symbol(self, symbol, name):
        assert describe_symbol(symbol) == name
