"""Conversion configuration.

Provides a single frozen dataclass that encapsulates every conversion option,
shared by the decoder, the serializer and the command-line interface.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from droidstrings.enums import KeyOrder, PluralsTag

__all__ = ["ConversionConfig"]


@dataclass(frozen=True, slots=True)
class ConversionConfig:
    """Immutable configuration for JSON to Android XML conversion.

    All fields have sensible defaults; ``ConversionConfig()`` reproduces the
    historical output of the tool (singular ``<plural>`` element, lenient
    placeholders) with deterministic source-order entries.

    Attributes:
        plurals_tag: Element name for plural resources (default: ``plural``).
            ``PluralsTag.PLURALS`` emits the Android-standard ``plurals``.
        key_order: Order in which JSON keys become entries (default: source
            document order).
        strict_placeholders: Raise PlaceholderSyntaxError on nested, unmatched
            or unterminated placeholders (default: False).
        xml_declaration: Prefix the output with an XML declaration
            (default: True).
        locale: Locale whose CLDR plural rules are checked against each plural
            resource (default: None, no check). Requires Babel.
        warn_duplicate_keys: Log a warning when a top-level JSON key repeats
            (default: True).

    Example:
        >>> config = ConversionConfig(plurals_tag=PluralsTag.PLURALS, locale="pl")
        >>> config.plurals_tag
        <PluralsTag.PLURALS: 'plurals'>
    """

    plurals_tag: PluralsTag = PluralsTag.PLURAL
    key_order: KeyOrder = KeyOrder.SOURCE
    strict_placeholders: bool = False
    xml_declaration: bool = True
    locale: str | None = None
    warn_duplicate_keys: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Plain strings naming a valid member are accepted for the enum fields
        and converted in place.

        Raises:
            ValueError: If plurals_tag or key_order is not a known value, or
                locale is an empty string.
            TypeError: If locale is neither a string nor None.
        """
        object.__setattr__(self, "plurals_tag", PluralsTag(self.plurals_tag))
        object.__setattr__(self, "key_order", KeyOrder(self.key_order))
        if self.locale is not None:
            if not isinstance(self.locale, str):
                msg = f"locale must be str or None, got {type(self.locale).__name__}"
                raise TypeError(msg)
            if not self.locale.strip():
                msg = "locale must not be empty"
                raise ValueError(msg)
