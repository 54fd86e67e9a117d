"""Exception classes for BibTeX parsing.

Every error is fatal to the parse that raised it. Each one records where in
the source text it was detected so callers can report precise diagnostics.
"""

from __future__ import annotations


class ParseError(Exception):
    """Base exception for all parse failures.

    Attributes:
        message: Human readable description.
        offset: Absolute character offset into the source text.
        line: 1-based line number of ``offset``.
        column: 1-based column number of ``offset``.
        construct_index: 0-based index of the construct being processed.
        context: The source line containing ``offset``.
    """

    kind = "parse_error"

    def __init__(
        self,
        message: str,
        offset: int = 0,
        line: int = 0,
        column: int = 0,
        construct_index: int | None = None,
        context: str | None = None,
    ):
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        self.construct_index = construct_index
        self.context = context
        super().__init__(message)

    def locate(self, text: str, construct_index: int | None = None) -> ParseError:
        """Fill in line, column and context from the full source text."""
        offset = min(max(self.offset, 0), len(text))
        self.line = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        line_end = text.find("\n", offset)
        if line_end == -1:
            line_end = len(text)
        self.column = offset - line_start + 1
        self.context = text[line_start:line_end].rstrip()
        if construct_index is not None and self.construct_index is None:
            self.construct_index = construct_index
        return self

    def __str__(self) -> str:
        if not self.line:
            return f"Offset {self.offset}: {self.message}"
        base = f"Line {self.line}, column {self.column}: {self.message}"
        if self.context:
            return f"{base}\n  {self.context}"
        return base


class MalformedHeaderError(ParseError):
    """Raised when ``@`` is not followed by an identifier and ``{`` or ``(``."""

    kind = "malformed_header"


class UnterminatedConstructError(ParseError):
    """Raised when input ends before a closing delimiter is found."""

    kind = "unterminated_construct"


class MalformedStringError(ParseError):
    """Raised when an ``@string`` body is not exactly one ``key = value``."""

    kind = "malformed_string"


class MissingCitationKeyError(ParseError):
    """Raised when an entry body does not start with a citation key."""

    kind = "missing_citation_key"


class TrailingContentError(ParseError):
    """Raised on content after a complete value where none is expected."""

    kind = "trailing_content"


class MalformedTagError(ParseError):
    """Raised when an entry tag name is not followed by ``=``."""

    kind = "malformed_tag"


class MalformedValueError(ParseError):
    """Raised when a value expression is expected but missing."""

    kind = "malformed_value"


class UndefinedVariableError(ParseError):
    """Raised when a reference names a variable not yet defined."""

    kind = "undefined_variable"

    def __init__(self, key: str, offset: int = 0, **kwargs):
        self.key = key
        super().__init__(f"Undefined string variable: {key}", offset, **kwargs)
