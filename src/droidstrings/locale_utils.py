"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization before handing codes to Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from droidstrings.core.babel_compat import require_babel

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (pt-BR), Babel/POSIX uses underscores (pt_BR).
    Android resource qualifiers (pt-rBR) are not accepted here.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    require_babel("get_babel_locale")
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
