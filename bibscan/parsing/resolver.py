"""Resolution of value expressions against string variables."""

from __future__ import annotations

from bibscan.core.exceptions import UndefinedVariableError
from bibscan.core.strings import VariableTable

from .constructs import Literal, ValueExpression


def resolve(expression: ValueExpression, table: VariableTable) -> str:
    """Concatenate the segments of ``expression`` into a literal string.

    Literals contribute their text verbatim; references contribute the
    value currently bound in ``table``. ``#`` inserts no separator.

    Raises:
        UndefinedVariableError: A reference names a key absent from ``table``.
    """
    parts = []
    for segment in expression.segments:
        if isinstance(segment, Literal):
            parts.append(segment.text)
            continue

        value = table.lookup(segment.key)
        if value is None:
            raise UndefinedVariableError(segment.key, segment.offset)
        parts.append(value)

    return "".join(parts)
