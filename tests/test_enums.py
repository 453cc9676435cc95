"""Tests for droidstrings enumerations."""

from droidstrings.enums import KeyOrder, PluralCategory, PluralsTag


class TestPluralCategory:
    """CLDR categories."""

    def test_canonical_order(self) -> None:
        assert [str(c) for c in PluralCategory] == [
            "zero", "one", "two", "few", "many", "other",
        ]

    def test_lookup_by_value(self) -> None:
        assert PluralCategory("few") is PluralCategory.FEW

    def test_is_string(self) -> None:
        assert PluralCategory.OTHER == "other"


class TestPluralsTag:
    """Plural element names."""

    def test_values(self) -> None:
        assert str(PluralsTag.PLURAL) == "plural"
        assert str(PluralsTag.PLURALS) == "plurals"


class TestKeyOrder:
    """Entry ordering modes."""

    def test_values(self) -> None:
        assert {str(k) for k in KeyOrder} == {"source", "sorted"}
