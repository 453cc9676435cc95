"""Tests for JSON classification into string, string-array and plural resources."""

from __future__ import annotations

import json
import logging

import pytest
from hypothesis import event, given

from droidstrings.config import ConversionConfig
from droidstrings.decoder import classify_mapping, decode_document, parse_json
from droidstrings.diagnostics import DecodeError, DiagnosticCode, PlaceholderSyntaxError
from droidstrings.enums import KeyOrder, PluralCategory
from droidstrings.model import PluralItem, PluralsEntry, StringArrayEntry, StringEntry

from .strategies import plain_texts, plural_maps, resource_keys, resource_maps


def _code(error: DecodeError) -> DiagnosticCode:
    assert error.diagnostic is not None
    return error.diagnostic.code


# ============================================================================
# CLASSIFICATION
# ============================================================================


class TestClassification:
    """Each JSON value shape maps to one resource type."""

    def test_string_entry(self) -> None:
        document = decode_document('{"app-name": "My App"}')
        assert document.strings == (StringEntry("app_name", "My App"),)
        assert document.string_arrays == ()
        assert document.plurals == ()

    def test_string_value_is_tokenized(self) -> None:
        document = decode_document('{"greeting": "Hello {{name}}!"}')
        assert document.strings[0].value == 'Hello <xliff:g id="name" />!'

    def test_string_array_entry(self) -> None:
        document = decode_document('{"letters": ["a", "b", "{{x}}"]}')
        assert document.string_arrays == (
            StringArrayEntry("letters", ("a", "b", '<xliff:g id="x" />')),
        )

    def test_empty_array(self) -> None:
        document = decode_document('{"none": []}')
        assert document.string_arrays == (StringArrayEntry("none", ()),)

    def test_plural_entry(self) -> None:
        document = decode_document('{"items": {"one": "1 item", "other": "{{n}} items"}}')
        assert document.plurals == (
            PluralsEntry(
                "items",
                (
                    PluralItem(PluralCategory.ONE, "1 item"),
                    PluralItem(PluralCategory.OTHER, '<xliff:g id="n" /> items'),
                ),
            ),
        )

    def test_plural_items_follow_canonical_order(self) -> None:
        raw = '{"n": {"other": "o", "many": "m", "zero": "z", "one": "1", "few": "f", "two": "2"}}'
        document = decode_document(raw)
        assert [str(c) for c in document.plurals[0].categories] == [
            "zero", "one", "two", "few", "many", "other",
        ]

    def test_other_before_one_in_input(self) -> None:
        document = decode_document('{"items": {"other": "many", "one": "single"}}')
        assert document.plurals[0].categories == (PluralCategory.ONE, PluralCategory.OTHER)

    def test_unrecognized_category_ignored(self) -> None:
        document = decode_document('{"items": {"one": "x", "dual": "y"}}')
        assert document.plurals[0].categories == (PluralCategory.ONE,)

    def test_unrecognized_category_value_not_checked(self) -> None:
        document = decode_document('{"items": {"other": "x", "dual": 2}}')
        assert document.plurals[0].categories == (PluralCategory.OTHER,)

    def test_empty_plural_object(self) -> None:
        document = decode_document('{"items": {}}')
        assert document.plurals == (PluralsEntry("items", ()),)

    def test_empty_object(self) -> None:
        document = decode_document("{}")
        assert len(document) == 0

    def test_bytes_input(self) -> None:
        document = decode_document('{"k": "Zażółć"}'.encode())
        assert document.strings[0].value == "Zażółć"

    def test_classify_mapping_directly(self) -> None:
        document = classify_mapping({"a-b": "x", "c": ["y"], "d": {"other": "z"}})
        assert len(document) == 3
        assert document.strings[0].name == "a_b"

    @given(plural_maps)
    def test_plural_items_subset_in_order(self, forms: dict[str, str]) -> None:
        """Property: items are the recognized categories present, canonically ordered."""
        document = classify_mapping({"p": forms})
        categories = [str(c) for c in document.plurals[0].categories]
        expected = [c.value for c in PluralCategory if c.value in forms]
        event(f"items={len(categories)}")
        assert categories == expected

    @given(resource_keys, plain_texts)
    def test_plain_strings_unchanged(self, key: str, text: str) -> None:
        """Property: brace-free strings keep their value, keys lose hyphens."""
        document = classify_mapping({key: text})
        assert document.strings == (StringEntry(key.replace("-", "_"), text),)

    @given(resource_maps)
    def test_one_entry_per_key(self, mapping: dict[str, object]) -> None:
        """Property: every top-level key yields exactly one entry."""
        document = classify_mapping(mapping)
        event(f"entries={len(document)}")
        assert len(document) == len(mapping)


# ============================================================================
# ORDERING
# ============================================================================


class TestOrdering:
    """Entry order is deterministic."""

    SOURCE = '{"zeta": "z", "alpha": "a", "mid": ["m"], "beta": "b"}'

    def test_source_order_by_default(self) -> None:
        document = decode_document(self.SOURCE)
        assert [e.name for e in document.strings] == ["zeta", "alpha", "beta"]

    def test_sorted_order(self) -> None:
        config = ConversionConfig(key_order=KeyOrder.SORTED)
        document = decode_document(self.SOURCE, config)
        assert [e.name for e in document.strings] == ["alpha", "beta", "zeta"]

    def test_entries_grouped_by_kind(self) -> None:
        document = decode_document('{"p": {"other": "x"}, "a": ["y"], "s": "z"}')
        assert [type(e).__name__ for e in document.entries()] == [
            "StringEntry", "StringArrayEntry", "PluralsEntry",
        ]

    def test_duplicate_key_keeps_last_value(self, sink) -> None:
        logger, handler = sink
        document = decode_document('{"a": "first", "b": "x", "a": "second"}', logger=logger)
        assert [(e.name, e.value) for e in document.strings] == [("a", "second"), ("b", "x")]
        assert any("Duplicate key 'a'" in message for message in handler.messages)
        assert logging.WARNING in handler.levels

    def test_duplicate_plural_form_is_not_a_duplicate_key(self, sink) -> None:
        logger, handler = sink
        document = decode_document('{"p": {"one": "a", "one": "b"}}', logger=logger)
        assert document.plurals[0].items[0].value == "b"
        assert not any("Duplicate key" in message for message in handler.messages)

    def test_duplicate_warning_can_be_disabled(self, sink) -> None:
        logger, handler = sink
        config = ConversionConfig(warn_duplicate_keys=False)
        decode_document('{"a": "1", "a": "2"}', config, logger=logger)
        assert not any("Duplicate" in message for message in handler.messages)


# ============================================================================
# DECODE FAILURES
# ============================================================================


class TestDecodeErrors:
    """Every unsupported shape aborts decoding with a DecodeError."""

    @pytest.mark.parametrize("raw", ["42", "true", "null", '["a"]', '"text"'])
    def test_root_not_object(self, raw: str) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_document(raw)
        assert _code(exc_info.value) == DiagnosticCode.ROOT_NOT_OBJECT
        assert exc_info.value.value == json.loads(raw)

    @pytest.mark.parametrize(
        ("raw", "value"),
        [('{"count": 42}', 42), ('{"count": 1.5}', 1.5), ('{"count": true}', True),
         ('{"count": null}', None)],
    )
    def test_unsupported_value(self, raw: str, value: object) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_document(raw)
        error = exc_info.value
        assert _code(error) == DiagnosticCode.UNSUPPORTED_VALUE
        assert error.key == "count"
        assert error.value == value
        assert "count" in str(error)

    def test_array_item_not_string(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_document('{"days": ["Mon", 2]}')
        assert _code(exc_info.value) == DiagnosticCode.ARRAY_ITEM_NOT_STRING
        assert exc_info.value.key == "days"
        assert exc_info.value.value == 2
        assert "item 1" in str(exc_info.value)

    def test_nested_array_rejected(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_document('{"grid": [["a"]]}')
        assert _code(exc_info.value) == DiagnosticCode.ARRAY_ITEM_NOT_STRING

    def test_plural_item_not_string(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_document('{"items": {"one": 1}}')
        assert _code(exc_info.value) == DiagnosticCode.PLURAL_ITEM_NOT_STRING
        assert exc_info.value.key == "items"

    def test_malformed_json_has_position(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_document('{\n  "a": "x",\n  "b": \n}', source="in.json")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.JSON_SYNTAX
        assert diagnostic.span is not None
        assert diagnostic.span.line == 4
        assert diagnostic.source == "in.json"
        assert "Error parsing JSON" in str(exc_info.value)

    def test_empty_input(self) -> None:
        with pytest.raises(DecodeError, match="Error parsing JSON"):
            decode_document("")

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_rejected(self, constant: str) -> None:
        with pytest.raises(DecodeError, match="invalid constant"):
            decode_document(f'{{"a": {constant}}}')

    def test_invalid_utf8(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_document(b'{"a": "\xff"}')
        assert _code(exc_info.value) == DiagnosticCode.INPUT_NOT_UTF8

    def test_deep_nesting(self) -> None:
        with pytest.raises(DecodeError):
            decode_document("[" * 100_000 + "]" * 100_000)

    def test_first_failure_aborts(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_document('{"ok": "fine", "bad": false, "worse": 3}')
        assert exc_info.value.key == "bad"

    def test_strict_placeholders_report_key(self) -> None:
        config = ConversionConfig(strict_placeholders=True)
        with pytest.raises(PlaceholderSyntaxError) as exc_info:
            decode_document('{"title": "Hi {{name"}', config)
        error = exc_info.value
        assert error.key == "title"
        assert error.value == "Hi {{name"
        assert error.diagnostic is not None
        assert error.diagnostic.key == "title"

    def test_strict_placeholders_in_plural_form(self) -> None:
        config = ConversionConfig(strict_placeholders=True)
        with pytest.raises(PlaceholderSyntaxError) as exc_info:
            decode_document('{"n": {"other": "x}} items"}}', config)
        assert exc_info.value.key == "n"

    def test_lenient_by_default(self) -> None:
        document = decode_document('{"title": "Hi {{name"}')
        assert document.strings[0].value == "Hi "


class TestParseJson:
    """Low-level JSON parsing."""

    def test_preserves_member_order(self) -> None:
        assert list(parse_json('{"b": 1, "a": 2}')) == ["b", "a"]

    def test_collects_root_duplicates(self) -> None:
        duplicates: list[str] = []
        parse_json('{"a": "1", "p": {"x": "y"}, "a": "2"}', duplicates=duplicates)
        assert duplicates == ["a"]

    def test_nested_duplicates_not_collected(self) -> None:
        duplicates: list[str] = []
        parse_json('{"p": {"one": "a", "one": "b"}}', duplicates=duplicates)
        assert duplicates == []

    def test_nested_duplicates_do_not_hide_root_ones(self) -> None:
        duplicates: list[str] = []
        raw = '{"k": "1", "p": {"one": "a", "one": "b"}, "k": "2"}'
        parse_json(raw, duplicates=duplicates)
        assert duplicates == ["k"]
