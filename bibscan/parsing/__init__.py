"""BibTeX scanning, construct parsing and value resolution."""

from bibscan.parsing.constructs import (
    CommentConstruct,
    EntryConstruct,
    Literal,
    ParsedConstruct,
    PreambleConstruct,
    RawTag,
    Reference,
    StringConstruct,
    ValueExpression,
    parse_construct,
)
from bibscan.parsing.parser import BibtexParser, parse, raw_parse
from bibscan.parsing.resolver import resolve
from bibscan.parsing.scanner import ConstructKind, ConstructScanner, RawConstruct

__all__ = [
    "BibtexParser",
    "parse",
    "raw_parse",
    "ConstructScanner",
    "ConstructKind",
    "RawConstruct",
    "parse_construct",
    "ParsedConstruct",
    "PreambleConstruct",
    "CommentConstruct",
    "StringConstruct",
    "EntryConstruct",
    "RawTag",
    "ValueExpression",
    "Literal",
    "Reference",
    "resolve",
]
