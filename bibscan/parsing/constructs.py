"""Interpretation of construct bodies.

Turns the raw body of each construct found by the scanner into a typed,
unresolved construct. Values are kept as :class:`ValueExpression` objects:
sequences of literal and variable-reference segments joined by ``#``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from bibscan.core.exceptions import (
    MalformedStringError,
    MalformedTagError,
    MalformedValueError,
    MissingCitationKeyError,
    TrailingContentError,
    UnterminatedConstructError,
)

from .scanner import ConstructKind, RawConstruct

# Characters that end a bare identifier
NAME_STOP = frozenset('"#%\'(),={}')


@dataclass(frozen=True)
class Literal:
    """Literal text with its delimiters removed."""

    text: str


@dataclass(frozen=True)
class Reference:
    """Bare identifier naming a string variable."""

    key: str
    offset: int = field(default=0, compare=False)


Segment = Union[Literal, Reference]


@dataclass(frozen=True)
class ValueExpression:
    """Segments of a value, concatenated in order."""

    segments: tuple[Segment, ...]

    @classmethod
    def literal(cls, text: str) -> ValueExpression:
        return cls((Literal(text),))

    @property
    def is_literal(self) -> bool:
        """True when no segment needs variable lookup."""
        return all(isinstance(segment, Literal) for segment in self.segments)


@dataclass(frozen=True)
class PreambleConstruct:
    value: ValueExpression
    offset: int = field(default=0, compare=False)


@dataclass(frozen=True)
class CommentConstruct:
    text: str
    implicit: bool = False
    offset: int = field(default=0, compare=False)


@dataclass(frozen=True)
class StringConstruct:
    key: str
    value: ValueExpression
    offset: int = field(default=0, compare=False)


@dataclass(frozen=True)
class RawTag:
    key: str
    value: ValueExpression
    offset: int = field(default=0, compare=False)


@dataclass(frozen=True)
class EntryConstruct:
    entry_type: str
    citation_key: str
    tags: tuple[RawTag, ...] = ()
    offset: int = field(default=0, compare=False)


ParsedConstruct = Union[
    PreambleConstruct, CommentConstruct, StringConstruct, EntryConstruct
]


class BodyReader:
    """Cursor over a construct body.

    Offsets reported in errors are absolute positions in the source text.
    """

    def __init__(self, text: str, base: int = 0):
        self.text = text
        self.base = base
        self.pos = 0

    def offset(self) -> int:
        return self.base + self.pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str | None:
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def advance(self) -> str:
        char = self.text[self.pos]
        self.pos += 1
        return char

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def read_until(self, predicate) -> str:
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]

    def read_name(self) -> str:
        return self.read_until(lambda c: not c.isspace() and c not in NAME_STOP)

    def read_value(self) -> ValueExpression:
        """Read ``segment ('#' segment)*``."""
        segments: list[Segment] = []

        while True:
            self.skip_whitespace()
            segment = self.read_segment()
            if segment is None:
                if segments:
                    message = "Expected a value after '#'"
                else:
                    message = "Expected a value"
                raise MalformedValueError(message, self.offset())
            segments.append(segment)

            self.skip_whitespace()
            if self.peek() != "#":
                break
            self.advance()

        return ValueExpression(tuple(segments))

    def read_segment(self) -> Segment | None:
        char = self.peek()
        if char is None:
            return None
        if char == '"':
            return Literal(self.read_quoted())
        if char == "{":
            return Literal(self.read_braced())

        offset = self.offset()
        name = self.read_name()
        if not name:
            return None
        if name.isdigit():
            return Literal(name)
        return Reference(name, offset)

    def read_quoted(self) -> str:
        """Read a ``"..."`` literal. Braces inside must balance."""
        start = self.offset()
        self.advance()
        value_start = self.pos
        depth = 0

        while not self.at_end():
            char = self.advance()
            if char == "{":
                depth += 1
            elif char == "}":
                if depth == 0:
                    raise MalformedValueError(
                        "Unbalanced '}' in quoted value", self.offset() - 1
                    )
                depth -= 1
            elif char == '"' and depth == 0:
                return self.text[value_start : self.pos - 1]

        raise UnterminatedConstructError("Unterminated quoted value", start)

    def read_braced(self) -> str:
        """Read a ``{...}`` literal, keeping nested braces verbatim."""
        start = self.offset()
        self.advance()
        value_start = self.pos
        depth = 1

        while not self.at_end():
            char = self.advance()
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return self.text[value_start : self.pos - 1]

        raise UnterminatedConstructError("Unterminated braced value", start)


def parse_construct(raw: RawConstruct) -> ParsedConstruct:
    """Parse the body of ``raw`` according to its kind."""
    if raw.kind is ConstructKind.COMMENT:
        return CommentConstruct(raw.body.strip(), raw.implicit, raw.start)
    if raw.kind is ConstructKind.PREAMBLE:
        return parse_preamble(raw)
    if raw.kind is ConstructKind.STRING:
        return parse_string(raw)
    return parse_entry(raw)


def parse_preamble(raw: RawConstruct) -> PreambleConstruct:
    reader = BodyReader(raw.body, raw.body_offset)
    value = reader.read_value()
    reader.skip_whitespace()
    if not reader.at_end():
        raise TrailingContentError(
            "Unexpected content after preamble value", reader.offset()
        )
    return PreambleConstruct(value, raw.start)


def parse_string(raw: RawConstruct) -> StringConstruct:
    """Parse ``name = value``; only one definition per construct."""
    reader = BodyReader(raw.body, raw.body_offset)
    reader.skip_whitespace()
    key = reader.read_name()
    if not key:
        raise MalformedStringError("Expected variable name", reader.offset())

    reader.skip_whitespace()
    if reader.peek() != "=":
        raise MalformedStringError(
            f"Expected '=' after variable name '{key}'", reader.offset()
        )
    reader.advance()

    reader.skip_whitespace()
    if reader.at_end():
        raise MalformedStringError(f"Missing value for '{key}'", reader.offset())
    value = reader.read_value()

    reader.skip_whitespace()
    if reader.peek() == ",":
        raise MalformedStringError(
            "Only one definition is allowed per @string", reader.offset()
        )
    if not reader.at_end():
        raise TrailingContentError(
            f"Unexpected content after value of '{key}'", reader.offset()
        )
    return StringConstruct(key, value, raw.start)


def parse_entry(raw: RawConstruct) -> EntryConstruct:
    """Parse ``citation-key, tag = value, ...``."""
    reader = BodyReader(raw.body, raw.body_offset)
    reader.skip_whitespace()
    key_offset = reader.offset()
    citation_key = reader.read_until(lambda c: c != "," and not c.isspace())
    if not citation_key or "=" in citation_key:
        raise MissingCitationKeyError("Expected citation key", key_offset)

    reader.skip_whitespace()
    if reader.peek() == "=":
        raise MissingCitationKeyError("Expected citation key", key_offset)

    tags = []
    while True:
        reader.skip_whitespace()
        if reader.at_end():
            break
        if reader.peek() != ",":
            raise TrailingContentError("Expected ',' between tags", reader.offset())
        reader.advance()

        reader.skip_whitespace()
        if reader.at_end():
            break

        tag_offset = reader.offset()
        name = reader.read_name()
        if not name:
            raise MalformedTagError("Expected tag name", tag_offset)
        reader.skip_whitespace()
        if reader.peek() != "=":
            raise MalformedTagError(f"Expected '=' after tag '{name}'", reader.offset())
        reader.advance()

        tags.append(RawTag(name, reader.read_value(), tag_offset))

    return EntryConstruct(raw.name, citation_key, tuple(tags), raw.start)
