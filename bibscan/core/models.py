"""Document model produced by a parse.

This module defines the structures a successful parse returns. Every value
held here is fully resolved: string variable references and ``#``
concatenations have already been expanded.

Key components:
- Document: Ordered preambles, comments, variables and bibliographies
- Bibliography: One ``@type{key, tag = value, ...}`` entry
- Variable: A resolved ``@string`` definition
- Tag: A resolved field of a bibliography entry
"""

from typing import TYPE_CHECKING, Any, NamedTuple

import msgspec

if TYPE_CHECKING:
    from bibscan.config import ParserConfig


class Variable(NamedTuple):
    """A string variable with its resolved value."""

    key: str
    value: str


class Tag(NamedTuple):
    """A bibliography field with its resolved value."""

    key: str
    value: str


class Bibliography(msgspec.Struct, frozen=True, kw_only=True):
    """A single bibliography entry.

    Tag order mirrors the source. Duplicate tag keys are preserved and the
    key case is kept as written.
    """

    entry_type: str
    citation_key: str
    tags: tuple[Tag, ...] = msgspec.field(default_factory=tuple)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the first tag value whose key matches ``name``.

        The comparison ignores case, as BibTeX field names do.
        """
        wanted = name.lower()
        for tag in self.tags:
            if tag.key.lower() == wanted:
                return tag.value
        return default

    def fields(self) -> dict[str, str]:
        """Return tags as a dictionary keyed by lowercased tag name.

        When a tag appears more than once the first occurrence wins.
        """
        result: dict[str, str] = {}
        for tag in self.tags:
            result.setdefault(tag.key.lower(), tag.value)
        return result

    def to_dict(self) -> dict[str, Any]:
        return {
            "entry_type": self.entry_type,
            "citation_key": self.citation_key,
            "tags": [{"key": tag.key, "value": tag.value} for tag in self.tags],
        }


class Document(msgspec.Struct, frozen=True, kw_only=True):
    """Structured contents of a BibTeX source.

    Each sequence keeps the order in which its items appear in the source.
    """

    preambles: tuple[str, ...] = msgspec.field(default_factory=tuple)
    comments: tuple[str, ...] = msgspec.field(default_factory=tuple)
    variables: tuple[Variable, ...] = msgspec.field(default_factory=tuple)
    bibliographies: tuple[Bibliography, ...] = msgspec.field(default_factory=tuple)

    @classmethod
    def parse(cls, text: str, config: "ParserConfig | None" = None) -> "Document":
        """Parse BibTeX source text into a document."""
        from bibscan.parsing.parser import parse

        return parse(text, config=config)

    def variable(self, key: str) -> str | None:
        """Look up a variable value by exact key."""
        for variable in self.variables:
            if variable.key == key:
                return variable.value
        return None

    def find(self, citation_key: str) -> Bibliography | None:
        """Return the first bibliography with the given citation key."""
        for bibliography in self.bibliographies:
            if bibliography.citation_key == citation_key:
                return bibliography
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert the document to builtin types for serialization."""
        data = msgspec.to_builtins(self)
        data["variables"] = [
            {"key": variable.key, "value": variable.value}
            for variable in self.variables
        ]
        data["bibliographies"] = [
            bibliography.to_dict() for bibliography in self.bibliographies
        ]
        return data
