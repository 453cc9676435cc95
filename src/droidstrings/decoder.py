"""JSON localization map decoder.

Classifies each top-level entry of a JSON object into one of three Android
resource shapes and builds an immutable ResourceDocument:

    JSON string              -> StringEntry
    JSON array of strings    -> StringArrayEntry
    JSON object of plurals   -> PluralsEntry (items in canonical category order)

Any other value type is a DecodeError naming the offending key and value.
Decoding is all-or-nothing: the first failure aborts the whole document.

Keys are read in source-document order (Python's json module preserves object
member order), or sorted when KeyOrder.SORTED is configured, so output is
reproducible across runs.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any, NoReturn

from droidstrings.config import ConversionConfig
from droidstrings.constants import INPUT_ENCODING
from droidstrings.diagnostics import (
    DecodeError,
    ErrorTemplate,
    PlaceholderSyntaxError,
    SourceSpan,
)
from droidstrings.enums import KeyOrder, PluralCategory
from droidstrings.model import (
    PluralItem,
    PluralsEntry,
    ResourceDocument,
    StringArrayEntry,
    StringEntry,
)
from droidstrings.placeholders import make_identifier, process_translation

__all__ = [
    "classify_mapping",
    "decode_document",
    "parse_json",
]

logger = logging.getLogger(__name__)

_CATEGORY_NAMES = frozenset(category.value for category in PluralCategory)


def parse_json(
    data: bytes | str,
    *,
    source: str | None = None,
    duplicates: list[str] | None = None,
) -> Any:
    """Parse JSON text, mapping every failure to DecodeError.

    Args:
        data: UTF-8 bytes or already-decoded text
        source: Input location for diagnostics
        duplicates: When given, receives the keys repeated in the root object

    Returns:
        Decoded JSON value (objects keep member order)

    Raises:
        DecodeError: On invalid UTF-8, invalid JSON syntax, non-standard
            constants (NaN, Infinity) or excessive nesting
    """
    if isinstance(data, bytes):
        try:
            text = data.decode(INPUT_ENCODING)
        except UnicodeDecodeError as e:
            raise DecodeError(ErrorTemplate.input_not_utf8(str(e), source)) from e
    else:
        text = data

    def reject_constant(name: str) -> NoReturn:
        raise DecodeError(ErrorTemplate.json_syntax(f"invalid constant {name}", source=source))

    try:
        return json.loads(
            text,
            object_pairs_hook=_collect_pairs(duplicates),
            parse_constant=reject_constant,
        )
    except json.JSONDecodeError as e:
        span = SourceSpan(start=e.pos, end=e.pos, line=e.lineno, column=e.colno)
        raise DecodeError(ErrorTemplate.json_syntax(e.msg, span, source)) from e
    except RecursionError as e:
        raise DecodeError(ErrorTemplate.json_syntax("nesting too deep", source=source)) from e


def decode_document(
    data: bytes | str,
    config: ConversionConfig | None = None,
    *,
    source: str | None = None,
    logger: logging.Logger = logger,  # noqa: PLW0621 - module logger is the default sink
) -> ResourceDocument:
    """Decode a JSON localization map into a resource document.

    Args:
        data: JSON document whose root value is an object
        config: Conversion options (defaults to ConversionConfig())
        source: Input location for diagnostics ("<stdin>" or a path)
        logger: Diagnostic sink

    Returns:
        Immutable resource document

    Raises:
        DecodeError: If the input is not valid JSON, the root is not an
            object, or any entry has an unsupported shape
    """
    config = config or ConversionConfig()
    duplicates: list[str] = []
    root = parse_json(data, source=source, duplicates=duplicates)

    if not isinstance(root, dict):
        raise DecodeError(ErrorTemplate.root_not_object(root, source), value=root)

    if config.warn_duplicate_keys:
        for key in duplicates:
            logger.warning("%s", ErrorTemplate.duplicate_key(key).format_error())

    return classify_mapping(root, config, logger=logger)


def classify_mapping(
    mapping: Mapping[str, Any],
    config: ConversionConfig | None = None,
    *,
    logger: logging.Logger = logger,  # noqa: PLW0621 - module logger is the default sink
) -> ResourceDocument:
    """Classify the entries of a decoded JSON object.

    Args:
        mapping: Decoded top-level JSON object
        config: Conversion options (defaults to ConversionConfig())
        logger: Diagnostic sink

    Returns:
        Immutable resource document

    Raises:
        DecodeError: If any entry has an unsupported shape
    """
    config = config or ConversionConfig()
    keys = list(mapping)
    if config.key_order is KeyOrder.SORTED:
        keys.sort()

    strings: list[StringEntry] = []
    string_arrays: list[StringArrayEntry] = []
    plurals: list[PluralsEntry] = []

    for key in keys:
        value = mapping[key]
        match value:
            case str():
                strings.append(StringEntry(make_identifier(key), _tokenize(key, value, config)))
                logger.debug("string %r", key)
            case list():
                string_arrays.append(_string_array(key, value, config))
                logger.debug("string-array %r with %d items", key, len(value))
            case dict():
                plurals.append(_plurals(key, value, config, logger))
                logger.debug("plural %r", key)
            case _:
                raise DecodeError(
                    ErrorTemplate.unsupported_value(key, value), key=key, value=value
                )

    document = ResourceDocument(
        strings=tuple(strings),
        string_arrays=tuple(string_arrays),
        plurals=tuple(plurals),
    )
    logger.info(
        "Decoded %d entries (%d strings, %d string arrays, %d plurals)",
        len(document),
        len(strings),
        len(string_arrays),
        len(plurals),
    )
    return document


def _string_array(key: str, items: list[Any], config: ConversionConfig) -> StringArrayEntry:
    converted: list[str] = []
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise DecodeError(
                ErrorTemplate.array_item_not_string(key, index, item), key=key, value=item
            )
        converted.append(_tokenize(key, item, config))
    return StringArrayEntry(make_identifier(key), tuple(converted))


def _plurals(
    key: str,
    forms: dict[str, Any],
    config: ConversionConfig,
    log: logging.Logger,
) -> PluralsEntry:
    items: list[PluralItem] = []
    for category in PluralCategory:
        if category.value not in forms:
            continue
        value = forms[category.value]
        if not isinstance(value, str):
            raise DecodeError(
                ErrorTemplate.plural_item_not_string(key, category.value, value),
                key=key,
                value=value,
            )
        items.append(PluralItem(category, _tokenize(key, value, config)))

    ignored = [name for name in forms if name not in _CATEGORY_NAMES]
    if ignored:
        log.debug("plural %r: ignoring unrecognized categories %s", key, ignored)

    return PluralsEntry(make_identifier(key), tuple(items))


def _tokenize(key: str, value: str, config: ConversionConfig) -> str:
    try:
        return process_translation(value, strict=config.strict_placeholders)
    except PlaceholderSyntaxError as e:
        diagnostic = replace(e.diagnostic, key=key) if e.diagnostic else str(e)
        raise PlaceholderSyntaxError(
            diagnostic, key=key, value=value, position=e.position
        ) from e


def _collect_pairs(
    duplicates: list[str] | None,
) -> Callable[[list[tuple[str, Any]]], dict[str, Any]]:
    """Build an object hook equivalent to dict(pairs) that records repeated keys.

    The decoder finishes inner objects before their parent, so once parsing
    returns an object the list holds the repeats of that root object only.
    """

    def hook(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        if duplicates is not None:
            duplicates.clear()
        obj: dict[str, Any] = {}
        for key, value in pairs:
            if duplicates is not None and key in obj:
                duplicates.append(key)
            obj[key] = value
        return obj

    return hook
