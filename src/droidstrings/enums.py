"""Enumerations for droidstrings type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category of a plural item.

    Member order is the canonical emission order of plural items.
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class PluralsTag(StrEnum):
    """Element name used for plural resources.

    StrEnum provides automatic string conversion: str(PluralsTag.PLURALS) == "plurals"
    """

    PLURAL = "plural"
    """Singular element name, compatible with existing consumers of the tool."""

    PLURALS = "plurals"
    """Android-standard element name: <plurals name="...">"""


class KeyOrder(StrEnum):
    """Order in which top-level JSON keys become resource entries."""

    SOURCE = "source"
    """Order of appearance in the JSON document."""

    SORTED = "sorted"
    """Lexicographic order of the original JSON keys."""


__all__ = [
    "KeyOrder",
    "PluralCategory",
    "PluralsTag",
]
