"""Single-pass BibTeX parser.

The scanner finds constructs left to right; each is parsed and, for
:func:`parse`, resolved immediately against the variables defined by the
constructs before it. A variable defined later in the file is therefore
never visible to an earlier construct.

Every error aborts the parse. No partial document is returned.
"""

from __future__ import annotations

import logging

from bibscan.config import ParserConfig
from bibscan.core.exceptions import ParseError
from bibscan.core.models import Bibliography, Document, Tag
from bibscan.core.strings import VariableTable

from .constructs import (
    CommentConstruct,
    EntryConstruct,
    ParsedConstruct,
    PreambleConstruct,
    StringConstruct,
    parse_construct,
)
from .resolver import resolve
from .scanner import ConstructScanner

logger = logging.getLogger(__name__)


class BibtexParser:
    """Parse BibTeX text into a :class:`Document`.

    A parser holds no state between calls; every call to :meth:`parse`
    builds its own variable table and document.
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config if config is not None else ParserConfig()

    def raw_parse(self, text: str) -> list[ParsedConstruct]:
        """Return the unresolved constructs of ``text`` in source order."""
        return list(self._iter_constructs(text))

    def parse(self, text: str) -> Document:
        """Parse and resolve ``text``."""
        table = VariableTable(predefined_months=self.config.predefined_months)
        preambles: list[str] = []
        comments: list[str] = []
        bibliographies: list[Bibliography] = []

        for index, construct in enumerate(self._iter_constructs(text)):
            try:
                if isinstance(construct, CommentConstruct):
                    comments.append(construct.text)
                elif isinstance(construct, PreambleConstruct):
                    preambles.append(resolve(construct.value, table))
                elif isinstance(construct, StringConstruct):
                    table.define(construct.key, resolve(construct.value, table))
                elif isinstance(construct, EntryConstruct):
                    bibliographies.append(self._build_bibliography(construct, table))
            except ParseError as e:
                raise e.locate(text, index)

        logger.debug(
            "Parsed %d preambles, %d comments, %d variables, %d bibliographies",
            len(preambles),
            len(comments),
            len(table),
            len(bibliographies),
        )
        return Document(
            preambles=tuple(preambles),
            comments=tuple(comments),
            variables=table.definitions(),
            bibliographies=tuple(bibliographies),
        )

    def _build_bibliography(
        self, construct: EntryConstruct, table: VariableTable
    ) -> Bibliography:
        tags = []
        for tag in construct.tags:
            key = tag.key.lower() if self.config.lowercase_tags else tag.key
            tags.append(Tag(key, resolve(tag.value, table)))
        return Bibliography(
            entry_type=construct.entry_type,
            citation_key=construct.citation_key,
            tags=tuple(tags),
        )

    def _iter_constructs(self, text: str):
        scanner = ConstructScanner(text)
        cursor = 0
        index = 0
        while True:
            try:
                raw = scanner.next_construct(cursor)
                if raw is None:
                    return
                construct = parse_construct(raw)
            except ParseError as e:
                raise e.locate(text, index)

            logger.debug(
                "Construct %d: %s at offset %d", index, raw.kind.value, raw.start
            )
            yield construct
            cursor = raw.end
            index += 1


def parse(text: str, config: ParserConfig | None = None) -> Document:
    """Parse BibTeX source text into a resolved :class:`Document`.

    Raises:
        ParseError: On the first syntax or resolution error.
    """
    return BibtexParser(config).parse(text)


def raw_parse(text: str, config: ParserConfig | None = None) -> list[ParsedConstruct]:
    """Parse BibTeX source text without resolving variables."""
    return BibtexParser(config).raw_parse(text)
