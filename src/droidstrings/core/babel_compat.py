"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across Babel-dependent code.

Design Rationale:
    droidstrings supports two installation modes:
    - Converter only: `pip install droidstrings` (lxml only)
    - With plural checks: `pip install droidstrings[babel]` (adds CLDR data)

    This module ensures that:
    1. Plain conversions never trigger Babel imports
    2. Locale-aware checks get a consistent, helpful error when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from droidstrings.core.babel_compat import require_babel

    def my_function(locale_code: str) -> None:
        require_babel("my_function")  # Raises ImportError if Babel missing
        from babel import Locale  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = [
    "BabelImportError",
    "get_unknown_locale_error",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install droidstrings[babel]"
        )
        super().__init__(message)
        self.feature = feature


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError
