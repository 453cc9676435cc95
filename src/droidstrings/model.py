"""Android string-resource document model.

Immutable node types produced by the decoder and consumed by the serializer.
All sequences are tuples so a built document cannot change after decoding.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from droidstrings.enums import PluralCategory

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Entries
    "StringEntry",
    "StringArrayEntry",
    "PluralItem",
    "PluralsEntry",
    # Document
    "ResourceDocument",
    # Type aliases
    "ResourceEntry",
]


@dataclass(frozen=True, slots=True)
class StringEntry:
    """Single string resource: <string name="...">value</string>

    Attributes:
        name: Resource name (hyphens already replaced by underscores)
        value: Markup text with placeholders rewritten to xliff:g tags
    """

    name: str
    value: str

    @staticmethod
    def guard(entry: object) -> TypeIs["StringEntry"]:
        """Type guard for StringEntry."""
        return isinstance(entry, StringEntry)


@dataclass(frozen=True, slots=True)
class StringArrayEntry:
    """String-array resource; items keep the order of the JSON array."""

    name: str
    items: tuple[str, ...] = ()

    @staticmethod
    def guard(entry: object) -> TypeIs["StringArrayEntry"]:
        """Type guard for StringArrayEntry."""
        return isinstance(entry, StringArrayEntry)


@dataclass(frozen=True, slots=True)
class PluralItem:
    """One quantity form of a plural resource."""

    quantity: PluralCategory
    value: str


@dataclass(frozen=True, slots=True)
class PluralsEntry:
    """Plural resource.

    Items are held in canonical category order (zero, one, two, few, many,
    other), never in the key order of the input object.
    """

    name: str
    items: tuple[PluralItem, ...] = ()

    def __post_init__(self) -> None:
        """Validate canonical item order.

        Raises:
            ValueError: If items are out of canonical order or repeat a category
        """
        order = list(PluralCategory)
        positions = [order.index(item.quantity) for item in self.items]
        if positions != sorted(set(positions)):
            msg = f"Plural items of '{self.name}' must follow canonical category order"
            raise ValueError(msg)

    @property
    def categories(self) -> tuple[PluralCategory, ...]:
        """Categories present in this resource."""
        return tuple(item.quantity for item in self.items)

    @staticmethod
    def guard(entry: object) -> TypeIs["PluralsEntry"]:
        """Type guard for PluralsEntry."""
        return isinstance(entry, PluralsEntry)


type ResourceEntry = StringEntry | StringArrayEntry | PluralsEntry


@dataclass(frozen=True, slots=True)
class ResourceDocument:
    """Root container of one converted localization map.

    Attributes:
        strings: String resources in decode order
        string_arrays: String-array resources in decode order
        plurals: Plural resources in decode order
    """

    strings: tuple[StringEntry, ...] = ()
    string_arrays: tuple[StringArrayEntry, ...] = ()
    plurals: tuple[PluralsEntry, ...] = ()

    def __len__(self) -> int:
        """Total number of resource entries."""
        return len(self.strings) + len(self.string_arrays) + len(self.plurals)

    def entries(self) -> tuple[ResourceEntry, ...]:
        """All entries in emission order: strings, string arrays, plurals."""
        return (*self.strings, *self.string_arrays, *self.plurals)
