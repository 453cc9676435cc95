"""CLDR plural category coverage using Babel.

Android selects a plural item by the CLDR category of the quantity in the
device locale. A plurals resource lacking a category that the locale uses
falls back to ``other`` at runtime, which is usually a translation bug. This
module reports such gaps; it never changes the converted document.

Python 3.13+. Depends on Babel for CLDR data (optional extra).

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging

from droidstrings.core.babel_compat import get_unknown_locale_error, require_babel
from droidstrings.diagnostics import ConfigurationError, Diagnostic, ErrorTemplate
from droidstrings.enums import PluralCategory
from droidstrings.locale_utils import get_babel_locale
from droidstrings.model import PluralsEntry, ResourceDocument

__all__ = [
    "check_plural_coverage",
    "locale_plural_categories",
    "missing_categories",
]

logger = logging.getLogger(__name__)


def locale_plural_categories(locale_code: str) -> tuple[PluralCategory, ...]:
    """Plural categories used by a locale, in canonical order.

    Args:
        locale_code: Locale code (e.g., "en", "pl", "ar-SA")

    Returns:
        Categories of the locale's CLDR plural rule, always including
        ``other``

    Raises:
        BabelImportError: If Babel is not installed
        ConfigurationError: If the locale is unknown or malformed

    Examples:
        >>> locale_plural_categories("en")
        (<PluralCategory.ONE: 'one'>, <PluralCategory.OTHER: 'other'>)
        >>> [str(c) for c in locale_plural_categories("ja")]
        ['other']
    """
    require_babel("locale_plural_categories")
    unknown_locale_error = get_unknown_locale_error()
    try:
        locale_obj = get_babel_locale(locale_code)
    except (unknown_locale_error, ValueError, TypeError) as e:
        raise ConfigurationError(ErrorTemplate.locale_unknown(locale_code)) from e

    # Babel's PluralRule.tags omits the implicit "other" rule
    tags = set(locale_obj.plural_form.tags) | {PluralCategory.OTHER.value}
    return tuple(category for category in PluralCategory if category.value in tags)


def missing_categories(
    entry: PluralsEntry,
    required: tuple[PluralCategory, ...],
) -> tuple[PluralCategory, ...]:
    """Required categories absent from a plural resource, in canonical order."""
    present = set(entry.categories)
    return tuple(category for category in required if category not in present)


def check_plural_coverage(
    document: ResourceDocument,
    locale_code: str,
    *,
    logger: logging.Logger = logger,  # noqa: PLW0621 - module logger is the default sink
) -> list[Diagnostic]:
    """Warn about plural resources missing categories used by a locale.

    Args:
        document: Converted resource document
        locale_code: Locale whose plural rules apply to the document
        logger: Diagnostic sink for the warnings

    Returns:
        One warning diagnostic per plural resource with missing categories

    Raises:
        BabelImportError: If Babel is not installed
        ConfigurationError: If the locale is unknown or malformed
    """
    required = locale_plural_categories(locale_code)
    warnings: list[Diagnostic] = []
    for entry in document.plurals:
        missing = missing_categories(entry, required)
        if not missing:
            continue
        diagnostic = ErrorTemplate.plural_category_missing(
            entry.name, locale_code, tuple(str(category) for category in missing)
        )
        logger.warning("%s", diagnostic.format_error())
        warnings.append(diagnostic)
    return warnings
