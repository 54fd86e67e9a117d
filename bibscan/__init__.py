"""Parse BibTeX source text into a structured, resolved document.

Example:
    >>> from bibscan import parse
    >>> document = parse('@string(name="Ada") @misc{key, author=name}')
    >>> document.bibliographies[0].tags
    (Tag(key='author', value='Ada'),)
"""

__version__ = "0.1.0"

from bibscan.config import ParserConfig, load_config
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
from bibscan.core.models import Bibliography, Document, Tag, Variable
from bibscan.parsing import BibtexParser, parse, raw_parse

__all__ = [
    "__version__",
    # Parsing
    "parse",
    "raw_parse",
    "BibtexParser",
    # Models
    "Document",
    "Bibliography",
    "Variable",
    "Tag",
    # Configuration
    "ParserConfig",
    "load_config",
    # Errors
    "ParseError",
    "MalformedHeaderError",
    "UnterminatedConstructError",
    "MalformedStringError",
    "MissingCitationKeyError",
    "TrailingContentError",
    "MalformedTagError",
    "MalformedValueError",
    "UndefinedVariableError",
]
