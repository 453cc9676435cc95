"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Control characters are shown escaped so that input values cannot forge
# additional diagnostic lines on stderr.
_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in range(0x20)} | {
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    0x7F: "\\x7f",
}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unsupported_value("count", 42)))
        UNSUPPORTED_VALUE: Can't handle 'count': 42
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[JSON_SYNTAX]: Error parsing JSON: Expecting value
              --> strings.json:3:12
              = key: title
              = help: ...
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._clean(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        location = self._location(diagnostic)
        if location:
            parts.append(f"  --> {location}")

        if diagnostic.key is not None:
            parts.append(f"  = key: {self._clean(diagnostic.key)}")

        if diagnostic.value is not None:
            parts.append(f"  = value: {self._clean(diagnostic.value)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            UNSUPPORTED_VALUE: Can't handle 'count': 42
        """
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "JSON_SYNTAX", "code_value": 2001, "message": "...", "severity": "error"}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.source:
            data["source"] = diagnostic.source

        if diagnostic.key is not None:
            data["key"] = diagnostic.key

        if diagnostic.value is not None:
            data["value"] = diagnostic.value

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def _location(diagnostic: Diagnostic) -> str:
        """Render source and span as path:line:column."""
        span = diagnostic.span
        if span is None:
            return diagnostic.source or ""
        if diagnostic.source:
            return f"{diagnostic.source}:{span.line}:{span.column}"
        return f"line {span.line}, column {span.column}"

    @staticmethod
    def _clean(text: str) -> str:
        """Escape control characters."""
        return text.translate(_CONTROL_ESCAPES)
