"""Diagnostic system for conversion errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ConfigurationError,
    ConversionError,
    DecodeError,
    InputIOError,
    PlaceholderSyntaxError,
    SerializeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate, render_value

__all__ = [
    "ConfigurationError",
    "ConversionError",
    "DecodeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InputIOError",
    "OutputFormat",
    "PlaceholderSyntaxError",
    "SerializeError",
    "SourceSpan",
    "render_value",
]
