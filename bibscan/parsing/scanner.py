"""Top-level scanner for BibTeX source text.

The scanner walks the text left to right and cuts it into constructs:
``@preamble``, ``@comment``, ``@string`` and bibliography entries, plus the
free text between them, which BibTeX treats as comments. It only finds
construct boundaries; the bodies are interpreted by
:mod:`bibscan.parsing.constructs`.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from bibscan.core.exceptions import MalformedHeaderError, UnterminatedConstructError

CLOSING = {"{": "}", "(": ")"}


class ConstructKind(Enum):
    """Kinds of top-level construct."""

    PREAMBLE = "preamble"
    COMMENT = "comment"
    STRING = "string"
    ENTRY = "entry"

    @classmethod
    def from_name(cls, name: str) -> ConstructKind:
        """Classify the identifier following ``@``."""
        lowered = name.lower()
        if lowered == "preamble":
            return cls.PREAMBLE
        if lowered == "comment":
            return cls.COMMENT
        if lowered == "string":
            return cls.STRING
        return cls.ENTRY


@dataclass(frozen=True)
class RawConstruct:
    """A construct located in the source, body not yet interpreted.

    ``start``/``end`` span the whole construct; ``body_offset`` is where
    ``body`` begins in the source. Implicit comments have an empty ``name``.
    """

    kind: ConstructKind
    name: str
    body: str
    body_offset: int
    start: int
    end: int
    implicit: bool = False


def is_header_char(char: str) -> bool:
    return char.isalnum() or char in "_-:./+"


class ConstructScanner:
    """Find constructs and their balanced bodies in BibTeX text."""

    def __init__(self, text: str):
        self.text = text

    def next_construct(self, cursor: int) -> RawConstruct | None:
        """Return the next construct at or after ``cursor``.

        Non-blank text before the next ``@`` is returned first, as an
        implicit comment. Returns None at end of input.
        """
        text = self.text
        at = text.find("@", cursor)
        stop = len(text) if at == -1 else at

        gap = text[cursor:stop]
        if gap.strip():
            return RawConstruct(
                kind=ConstructKind.COMMENT,
                name="",
                body=gap,
                body_offset=cursor,
                start=cursor,
                end=stop,
                implicit=True,
            )
        if at == -1:
            return None

        return self.read_construct(at)

    def read_construct(self, at: int) -> RawConstruct:
        """Read the header and balanced body of the construct at ``at``."""
        text = self.text
        pos = at + 1
        while pos < len(text) and is_header_char(text[pos]):
            pos += 1
        name = text[at + 1 : pos]
        if not name:
            raise MalformedHeaderError("Expected construct name after '@'", at)

        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos >= len(text) or text[pos] not in CLOSING:
            raise MalformedHeaderError(f"Expected '{{' or '(' after '@{name}'", at)

        kind = ConstructKind.from_name(name)
        opener = text[pos]
        close = self.find_closing(pos, quote_aware=kind is not ConstructKind.COMMENT)
        return RawConstruct(
            kind=kind,
            name=name,
            body=text[pos + 1 : close],
            body_offset=pos + 1,
            start=at,
            end=close + 1,
        )

    def find_closing(self, open_pos: int, quote_aware: bool = True) -> int:
        """Return the position of the delimiter closing ``open_pos``.

        Braces are always balanced. A double quote toggles the quoted state
        only outside nested braces; inside a quoted span parentheses are
        ignored, while a ``}`` with no matching ``{`` still closes a braced
        body.
        """
        text = self.text
        opener = text[open_pos]
        brace_depth = 0
        paren_depth = 0
        in_quote = False

        pos = open_pos + 1
        while pos < len(text):
            char = text[pos]
            if char == "{":
                brace_depth += 1
            elif char == "}":
                if brace_depth == 0:
                    if opener == "{":
                        return pos
                else:
                    brace_depth -= 1
            elif char == '"' and quote_aware and brace_depth == 0:
                in_quote = not in_quote
            elif opener == "(" and brace_depth == 0 and not in_quote:
                if char == "(":
                    paren_depth += 1
                elif char == ")":
                    if paren_depth == 0:
                        return pos
                    paren_depth -= 1
            pos += 1

        raise UnterminatedConstructError(
            f"Missing closing '{CLOSING[opener]}' for construct", open_pos
        )

    def scan(self, cursor: int = 0) -> Iterator[RawConstruct]:
        """Yield every construct from ``cursor`` to the end of input."""
        while True:
            construct = self.next_construct(cursor)
            if construct is None:
                return
            yield construct
            cursor = construct.end
