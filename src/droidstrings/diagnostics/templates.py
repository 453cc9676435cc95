"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

import json

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate", "render_value"]

# Longest JSON rendering of an offending value kept in a diagnostic.
_MAX_VALUE_LENGTH = 80


def render_value(value: object) -> str:
    """Render a decoded JSON value the way it appeared in the input.

    Args:
        value: Decoded JSON value

    Returns:
        Compact JSON text, truncated to a readable length
    """
    try:
        text = json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        text = repr(value)
    if len(text) > _MAX_VALUE_LENGTH:
        return text[: _MAX_VALUE_LENGTH - 3] + "..."
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every failure mode in one place.
    """

    _SHAPE_HINT = "Use a string, an array of strings, or an object of plural forms"

    @staticmethod
    def input_unreadable(source: str, reason: str) -> Diagnostic:
        """Input file could not be opened or read.

        Args:
            source: Path of the input
            reason: Operating system error description

        Returns:
            Diagnostic for INPUT_UNREADABLE
        """
        msg = f"Cannot read input '{source}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_UNREADABLE,
            message=msg,
            hint="Check that the file exists and is readable",
            source=source,
        )

    @staticmethod
    def input_close_failed(source: str, reason: str) -> Diagnostic:
        """Input file could not be closed after reading.

        Args:
            source: Path of the input
            reason: Operating system error description

        Returns:
            Warning diagnostic for INPUT_CLOSE_FAILED
        """
        msg = f"Failed to close input '{source}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_CLOSE_FAILED,
            message=msg,
            source=source,
            severity="warning",
        )

    @staticmethod
    def input_not_utf8(reason: str, source: str | None = None) -> Diagnostic:
        """Input bytes are not valid UTF-8.

        Args:
            reason: Codec error description
            source: Input location

        Returns:
            Diagnostic for INPUT_NOT_UTF8
        """
        msg = f"Error parsing JSON: input is not valid UTF-8 ({reason})"
        return Diagnostic(
            code=DiagnosticCode.INPUT_NOT_UTF8,
            message=msg,
            hint="Save the file with UTF-8 encoding",
            source=source,
        )

    @staticmethod
    def json_syntax(
        reason: str,
        span: SourceSpan | None = None,
        source: str | None = None,
    ) -> Diagnostic:
        """Input is not syntactically valid JSON.

        Args:
            reason: Parser error description
            span: Location of the syntax error
            source: Input location

        Returns:
            Diagnostic for JSON_SYNTAX
        """
        msg = f"Error parsing JSON: {reason}"
        return Diagnostic(
            code=DiagnosticCode.JSON_SYNTAX,
            message=msg,
            span=span,
            source=source,
        )

    @staticmethod
    def root_not_object(value: object, source: str | None = None) -> Diagnostic:
        """Root JSON value is not an object.

        Args:
            value: Decoded root value
            source: Input location

        Returns:
            Diagnostic for ROOT_NOT_OBJECT
        """
        kind = type(value).__name__ if value is not None else "null"
        msg = f"Error parsing JSON: root value must be an object, got {kind}"
        return Diagnostic(
            code=DiagnosticCode.ROOT_NOT_OBJECT,
            message=msg,
            hint="Wrap the entries in a top-level JSON object",
            value=render_value(value),
            source=source,
        )

    @staticmethod
    def unsupported_value(key: str, value: object) -> Diagnostic:
        """Entry value is not a string, array or object.

        Args:
            key: Top-level JSON key
            value: Offending value

        Returns:
            Diagnostic for UNSUPPORTED_VALUE
        """
        rendered = render_value(value)
        msg = f"Can't handle '{key}': {rendered}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_VALUE,
            message=msg,
            hint=ErrorTemplate._SHAPE_HINT,
            key=key,
            value=rendered,
        )

    @staticmethod
    def array_item_not_string(key: str, index: int, item: object) -> Diagnostic:
        """String-array element is not a string.

        Args:
            key: Top-level JSON key
            index: Position of the element in the array
            item: Offending element

        Returns:
            Diagnostic for ARRAY_ITEM_NOT_STRING
        """
        rendered = render_value(item)
        msg = f"Can't handle '{key}': item {index} is not a string: {rendered}"
        return Diagnostic(
            code=DiagnosticCode.ARRAY_ITEM_NOT_STRING,
            message=msg,
            hint="String arrays may only contain strings",
            key=key,
            value=rendered,
        )

    @staticmethod
    def plural_item_not_string(key: str, category: str, item: object) -> Diagnostic:
        """Plural form value is not a string.

        Args:
            key: Top-level JSON key
            category: Plural category of the form
            item: Offending value

        Returns:
            Diagnostic for PLURAL_ITEM_NOT_STRING
        """
        rendered = render_value(item)
        msg = f"Can't handle '{key}': plural form '{category}' is not a string: {rendered}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_ITEM_NOT_STRING,
            message=msg,
            hint="Plural forms must be strings",
            key=key,
            value=rendered,
        )

    @staticmethod
    def placeholder_malformed(reason: str, position: int, text: str) -> Diagnostic:
        """Malformed placeholder found in strict placeholder mode.

        Args:
            reason: What is wrong with the placeholder
            position: Character offset of the offending brace
            text: Raw string being tokenized

        Returns:
            Diagnostic for PLACEHOLDER_MALFORMED
        """
        msg = f"Malformed placeholder at offset {position}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_MALFORMED,
            message=msg,
            hint="Placeholders are written as {{name}} and cannot be nested",
            value=render_value(text),
        )

    @staticmethod
    def serialize_failed(reason: str, name: str | None = None) -> Diagnostic:
        """Resource document could not be rendered to XML.

        Args:
            reason: Emitter error description
            name: Resource name being written when the failure occurred

        Returns:
            Diagnostic for SERIALIZE_FAILED
        """
        where = f" resource '{name}'" if name else " document"
        msg = f"Error serializing XML{where}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.SERIALIZE_FAILED,
            message=msg,
            hint="XML 1.0 cannot represent most control characters",
            key=name,
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Configured locale is not known to CLDR.

        Args:
            locale_code: Locale code as configured

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a CLDR locale code such as 'en', 'pl' or 'pt-BR'",
        )

    @staticmethod
    def duplicate_key(key: str) -> Diagnostic:
        """Top-level JSON key appears more than once.

        Args:
            key: Duplicated key

        Returns:
            Warning diagnostic for DUPLICATE_KEY
        """
        msg = f"Duplicate key '{key}': the last value wins"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_KEY,
            message=msg,
            key=key,
            severity="warning",
        )

    @staticmethod
    def plural_category_missing(
        name: str,
        locale_code: str,
        missing: tuple[str, ...],
    ) -> Diagnostic:
        """Plural resource lacks categories used by the target locale.

        Args:
            name: Resource name
            locale_code: Locale whose plural rules were consulted
            missing: Categories the locale uses but the resource lacks

        Returns:
            Warning diagnostic for PLURAL_CATEGORY_MISSING
        """
        categories = ", ".join(missing)
        msg = f"Plural '{name}' lacks categories used by '{locale_code}': {categories}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_CATEGORY_MISSING,
            message=msg,
            key=name,
            severity="warning",
        )
