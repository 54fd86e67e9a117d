"""Tests for parse error location reporting."""

import pytest

from bibscan.core.exceptions import (
    MalformedHeaderError,
    MalformedStringError,
    MalformedTagError,
    MalformedValueError,
    MissingCitationKeyError,
    ParseError,
    TrailingContentError,
    UndefinedVariableError,
    UnterminatedConstructError,
)


class TestParseError:
    """Test error attributes and formatting."""

    def test_locate(self) -> None:
        """Offsets become line, column and context."""
        text = "first line\nsecond line\nthird"
        error = ParseError("bad", offset=text.index("line", 11)).locate(text, 3)

        assert error.line == 2
        assert error.column == 8
        assert error.context == "second line"
        assert error.construct_index == 3

    def test_locate_at_end(self) -> None:
        """An offset at end of input is located on the last line."""
        text = "a\nbc"
        error = ParseError("eof", offset=len(text)).locate(text)

        assert error.line == 2
        assert error.column == 3

    def test_locate_keeps_construct_index(self) -> None:
        """An already known construct index is not replaced."""
        error = ParseError("x", construct_index=1).locate("text", 5)

        assert error.construct_index == 1

    def test_str_with_location(self) -> None:
        error = ParseError("Expected value", offset=2).locate("@a{")

        assert str(error) == "Line 1, column 3: Expected value\n  @a{"

    def test_str_without_location(self) -> None:
        assert str(ParseError("oops", offset=7)) == "Offset 7: oops"

    def test_undefined_variable(self) -> None:
        error = UndefinedVariableError("acm", 4)

        assert error.key == "acm"
        assert error.offset == 4
        assert "acm" in error.message

    @pytest.mark.parametrize(
        "error_class, kind",
        [
            (MalformedHeaderError, "malformed_header"),
            (UnterminatedConstructError, "unterminated_construct"),
            (MalformedStringError, "malformed_string"),
            (MissingCitationKeyError, "missing_citation_key"),
            (TrailingContentError, "trailing_content"),
            (MalformedTagError, "malformed_tag"),
            (MalformedValueError, "malformed_value"),
        ],
    )
    def test_kinds(self, error_class, kind) -> None:
        """Every error is a ParseError with its own kind."""
        error = error_class("message", 0)

        assert isinstance(error, ParseError)
        assert error.kind == kind
