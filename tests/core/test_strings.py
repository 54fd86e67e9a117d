"""Tests for the string variable table."""

from bibscan.core.models import Variable
from bibscan.core.strings import PREDEFINED_MONTHS, VariableTable


class TestVariableTable:
    """Test variable definitions and lookup."""

    def test_predefined_month_abbreviations(self) -> None:
        """All twelve months are predefined."""
        table = VariableTable()

        assert len(PREDEFINED_MONTHS) == 12
        for abbrev, full in PREDEFINED_MONTHS.items():
            assert table.lookup(abbrev) == full

    def test_month_lookup_is_case_sensitive(self) -> None:
        """Only the lowercase abbreviations are predefined."""
        table = VariableTable()

        assert table.lookup("dec") == "December"
        assert table.lookup("Dec") is None
        assert table.lookup("MAY") is None
        assert "JAN" not in table

    def test_months_are_not_listed(self) -> None:
        """Predefined months are not definitions."""
        table = VariableTable()

        assert table.definitions() == ()
        assert len(table) == 0
        assert "jan" in table

    def test_user_keys_are_case_sensitive(self) -> None:
        """User variable keys match exactly."""
        table = VariableTable()
        table.define("ACM", "ACM Press")

        assert table.lookup("ACM") == "ACM Press"
        assert table.lookup("acm") is None
        assert "acm" not in table

    def test_redefinition(self) -> None:
        """A later definition replaces the value; both are listed."""
        table = VariableTable()
        table.define("a", "1")
        table.define("a", "2")

        assert table.lookup("a") == "2"
        assert table.definitions() == (Variable("a", "1"), Variable("a", "2"))

    def test_definitions_keep_order(self) -> None:
        """Definitions are listed in insertion order."""
        table = VariableTable(predefined_months=False)
        table.define("z", "last")
        table.define("a", "first")

        assert table.definitions() == (("z", "last"), ("a", "first"))
        assert table.lookup("jan") is None
