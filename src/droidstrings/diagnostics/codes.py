"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (opening, reading, closing the source)
        2000-2999: Decode errors (JSON syntax, resource shape, placeholders)
        3000-3999: Serialize errors (XML emission)
        4000-4999: Configuration errors
        5100-5199: Warnings (conversion proceeds)
    """

    # Input errors (1000-1999)
    INPUT_UNREADABLE = 1001
    INPUT_CLOSE_FAILED = 1002

    # Decode errors (2000-2999)
    JSON_SYNTAX = 2001
    ROOT_NOT_OBJECT = 2002
    UNSUPPORTED_VALUE = 2003
    ARRAY_ITEM_NOT_STRING = 2004
    PLURAL_ITEM_NOT_STRING = 2005
    PLACEHOLDER_MALFORMED = 2006
    INPUT_NOT_UTF8 = 2007

    # Serialize errors (3000-3999)
    SERIALIZE_FAILED = 3001

    # Configuration errors (4000-4999)
    LOCALE_UNKNOWN = 4001

    # Warnings (5100-5199)
    DUPLICATE_KEY = 5101
    PLURAL_CATEGORY_MISSING = 5102


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to point a
    translator at the offending entry of the input document.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (JSON syntax errors only)
        hint: Suggestion for fixing the error
        key: Top-level JSON key of the offending entry
        value: Short rendering of the offending JSON value
        source: Input location ("<stdin>" or a file path)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    key: str | None = None
    value: str | None = None
    source: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNSUPPORTED_VALUE]: Cannot convert entry 'count': unsupported value 42
              --> strings.json
              = key: count
              = value: 42
              = help: Use a string, an array of strings, or an object of plural forms

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
