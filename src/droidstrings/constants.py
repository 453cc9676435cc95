"""Shared constants for droidstrings.

Centralizes the fixed vocabulary of the Android string-resources format and
the placeholder convention of the JSON input. Placing constants here avoids
circular imports between the decoder, tokenizer and serializer.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Placeholder convention
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    "ESCAPED_OPEN",
    "ESCAPED_CLOSE",
    "PLACEHOLDER_TAG_TEMPLATE",
    # Android resources vocabulary
    "XLIFF_NAMESPACE",
    "XLIFF_PREFIX",
    "RESOURCES_TAG",
    "STRING_TAG",
    "STRING_ARRAY_TAG",
    "ITEM_TAG",
    "NAME_ATTRIBUTE",
    "QUANTITY_ATTRIBUTE",
    "ID_ATTRIBUTE",
    # Encoding
    "INPUT_ENCODING",
    "OUTPUT_ENCODING",
]

# ============================================================================
# PLACEHOLDER CONVENTION
# ============================================================================

PLACEHOLDER_OPEN = "{"
PLACEHOLDER_CLOSE = "}"

# Doubled braces collapse to single delimiters before tokenizing.
ESCAPED_OPEN = "{{"
ESCAPED_CLOSE = "}}"

# Inline tag substituted for each placeholder in MarkupText.
PLACEHOLDER_TAG_TEMPLATE = '<xliff:g id="{name}" />'

# ============================================================================
# ANDROID RESOURCES VOCABULARY
# ============================================================================

XLIFF_NAMESPACE = "urn:oasis:names:tc:xliff:document:1.2"
XLIFF_PREFIX = "xliff"

RESOURCES_TAG = "resources"
STRING_TAG = "string"
STRING_ARRAY_TAG = "string-array"
ITEM_TAG = "item"

NAME_ATTRIBUTE = "name"
QUANTITY_ATTRIBUTE = "quantity"
ID_ATTRIBUTE = "id"

# ============================================================================
# ENCODING
# ============================================================================

INPUT_ENCODING = "utf-8"
OUTPUT_ENCODING = "utf-8"
