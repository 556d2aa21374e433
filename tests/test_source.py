# =============================================================================
# test_source.py - Character Source Unit Tests
# =============================================================================
# Tests for CharacterSource: lookahead, consumption, line/column tracking
# and the END_OF_INPUT result.
# =============================================================================

import pytest

from tablelex.errors import FileAccessError
from tablelex.source import END_OF_INPUT, CharacterSource, EndOfInput


class TestEndOfInput:
    """Test the exhausted-source result."""

    def test_singleton(self):
        assert EndOfInput() is END_OF_INPUT

    def test_falsy(self):
        assert not END_OF_INPUT

    def test_never_a_character(self):
        assert END_OF_INPUT != ""
        assert END_OF_INPUT != "\0"

    def test_repr(self):
        assert repr(END_OF_INPUT) == "END_OF_INPUT"


class TestCharacterAccess:
    """Test peek() and next()."""

    def test_peek_does_not_advance(self):
        source = CharacterSource.from_string("ab")
        assert source.peek() == "a"
        assert source.peek() == "a"
        assert source.offset == 0

    def test_next_advances(self):
        source = CharacterSource.from_string("ab")
        assert source.next() == "a"
        assert source.peek() == "b"
        assert source.next() == "b"
        assert source.at_end()

    def test_empty_source(self):
        source = CharacterSource.from_string("")
        assert source.at_end()
        assert source.peek() is END_OF_INPUT
        assert source.next() is END_OF_INPUT

    def test_next_at_end_changes_nothing(self):
        source = CharacterSource.from_string("a")
        source.next()
        position = (source.line, source.column, source.offset)
        assert source.next() is END_OF_INPUT
        assert source.next() is END_OF_INPUT
        assert (source.line, source.column, source.offset) == position

    def test_nul_is_ordinary_character(self):
        """A NUL character does not end the input."""
        source = CharacterSource.from_string("\0x")
        assert source.next() == "\0"
        assert source.next() == "x"
        assert source.peek() is END_OF_INPUT


class TestPosition:
    """Test 1-indexed line and column tracking."""

    def test_starts_at_one_one(self):
        source = CharacterSource.from_string("abc")
        assert (source.line, source.column) == (1, 1)

    def test_column_advances(self):
        source = CharacterSource.from_string("abc")
        source.next()
        source.next()
        assert (source.line, source.column) == (1, 3)

    def test_newline_resets_column(self):
        source = CharacterSource.from_string("ab\ncd")
        for _ in range(3):
            source.next()
        assert (source.line, source.column) == (2, 1)
        source.next()
        assert (source.line, source.column) == (2, 2)

    def test_carriage_return_is_a_column(self):
        """Only newline starts a new line; CR counts as a column."""
        source = CharacterSource.from_string("a\r\nb")
        source.next()
        source.next()
        assert (source.line, source.column) == (1, 3)
        source.next()
        assert (source.line, source.column) == (2, 1)

    def test_location(self):
        source = CharacterSource.from_string("x\ny", "prog.src")
        source.next()
        source.next()
        assert str(source.location) == "prog.src:2:1"


class TestFromFile:
    """Test loading sources from disk."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "prog.src"
        path.write_bytes(b"x = 1\r\n")
        source = CharacterSource.from_file(path)
        assert source.filename == str(path)
        assert source.text == "x = 1\r\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileAccessError) as exc_info:
            CharacterSource.from_file(tmp_path / "missing.src")
        assert "missing.src" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "bin.src"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(FileAccessError, match="not valid utf-8"):
            CharacterSource.from_file(path)

    def test_encoding(self, tmp_path):
        path = tmp_path / "latin.src"
        path.write_bytes("caf\xe9".encode("latin-1"))
        source = CharacterSource.from_file(path, encoding="latin-1")
        assert source.text == "caf\xe9"
