"""Conversion exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.
Every failure is fatal for the conversion: no partial XML is produced.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigurationError",
    "ConversionError",
    "DecodeError",
    "InputIOError",
    "PlaceholderSyntaxError",
    "SerializeError",
]


class ConversionError(Exception):
    """Base exception for all conversion errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ConversionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InputIOError(ConversionError):
    """Input file cannot be opened or read."""


class DecodeError(ConversionError):
    """Input is not a convertible JSON resource map.

    Raised for invalid JSON syntax, a root value that is not an object, an
    entry value of unsupported type, or a non-string leaf where a string is
    required.

    Attributes:
        key: Top-level JSON key of the offending entry ("" when not applicable)
        value: The offending JSON value (None when not applicable)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        key: str = "",
        value: object = None,
    ) -> None:
        """Initialize DecodeError.

        Args:
            message: Error message string OR Diagnostic object
            key: Top-level JSON key of the offending entry
            value: The offending JSON value
        """
        super().__init__(message)
        self.key = key
        self.value = value


class PlaceholderSyntaxError(DecodeError):
    """Malformed placeholder in strict placeholder mode.

    Nested opening braces, a closing brace without an opening one, and an
    unterminated placeholder are only errors when strict placeholders are
    enabled; otherwise the tokenizer passes them through silently.

    Attributes:
        position: Character offset in the brace-collapsed string
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        key: str = "",
        value: object = None,
        position: int = -1,
    ) -> None:
        """Initialize PlaceholderSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            key: Top-level JSON key of the offending entry
            value: The raw string containing the placeholder
            position: Character offset of the offending brace
        """
        super().__init__(message, key=key, value=value)
        self.position = position


class SerializeError(ConversionError):
    """Resource document cannot be rendered to XML."""


class ConfigurationError(ConversionError):
    """Conversion configuration is unusable (for example an unknown locale)."""
