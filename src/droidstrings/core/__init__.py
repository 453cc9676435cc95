"""Core infrastructure shared by the converter modules.

Python 3.13+.
"""

from .babel_compat import BabelImportError, require_babel

__all__ = [
    "BabelImportError",
    "require_babel",
]
