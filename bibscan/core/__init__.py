"""Document model, string variables and error types."""

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
from bibscan.core.strings import PREDEFINED_MONTHS, VariableTable

__all__ = [
    # Models
    "Document",
    "Bibliography",
    "Variable",
    "Tag",
    # String variables
    "PREDEFINED_MONTHS",
    "VariableTable",
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
