"""String variable table used while resolving values."""

from .models import Variable

# Predefined month abbreviations
PREDEFINED_MONTHS = {
    "jan": "January",
    "feb": "February",
    "mar": "March",
    "apr": "April",
    "may": "May",
    "jun": "June",
    "jul": "July",
    "aug": "August",
    "sep": "September",
    "oct": "October",
    "nov": "November",
    "dec": "December",
}


class VariableTable:
    """Resolved ``@string`` variables accumulated during one parse.

    Keys are case-sensitive. Redefining a key replaces its value for later
    lookups while the listing keeps every definition in source order.
    Month abbreviations are consulted only when no user variable matches.
    """

    def __init__(self, predefined_months: bool = True):
        self._values: dict[str, str] = {}
        self._definitions: list[Variable] = []
        self.predefined_months = predefined_months

    def define(self, key: str, value: str) -> None:
        """Add a resolved variable."""
        self._values[key] = value
        self._definitions.append(Variable(key, value))

    def lookup(self, key: str) -> str | None:
        """Return the value for ``key`` or None when it is undefined."""
        if key in self._values:
            return self._values[key]
        if self.predefined_months:
            return PREDEFINED_MONTHS.get(key)
        return None

    def __contains__(self, key: str) -> bool:
        return self.lookup(key) is not None

    def __len__(self) -> int:
        return len(self._definitions)

    def definitions(self) -> tuple[Variable, ...]:
        """Return all definitions in source order."""
        return tuple(self._definitions)
