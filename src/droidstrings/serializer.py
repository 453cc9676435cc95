"""Android string-resources XML serializer.

Renders a ResourceDocument as an lxml element tree and serializes it:

    <resources xmlns:xliff="urn:oasis:names:tc:xliff:document:1.2">
      <string name="greeting">Hello <xliff:g id="name"/>!</string>
      <string-array name="days">
        <item>Mon</item>
      </string-array>
      <plural name="items">
        <item quantity="one">1 item</item>
        <item quantity="other"><xliff:g id="n"/> items</item>
      </plural>
    </resources>

Element order is strings, then string arrays, then plurals. Placeholder tags of
each markup text become real ``xliff:g`` elements in the xliff namespace; the
surrounding text is escaped by lxml, so the output is always well-formed XML.

Python 3.13+.
"""

from __future__ import annotations

from lxml import etree

from droidstrings.config import ConversionConfig
from droidstrings.constants import (
    ID_ATTRIBUTE,
    ITEM_TAG,
    NAME_ATTRIBUTE,
    OUTPUT_ENCODING,
    QUANTITY_ATTRIBUTE,
    RESOURCES_TAG,
    STRING_ARRAY_TAG,
    STRING_TAG,
    XLIFF_NAMESPACE,
    XLIFF_PREFIX,
)
from droidstrings.diagnostics import ErrorTemplate, SerializeError
from droidstrings.model import PluralsEntry, ResourceDocument, StringArrayEntry, StringEntry
from droidstrings.placeholders import split_markup

__all__ = ["build_tree", "serialize_document"]

_XLIFF_G = f"{{{XLIFF_NAMESPACE}}}g"


def build_tree(
    document: ResourceDocument,
    config: ConversionConfig | None = None,
) -> etree._Element:
    """Build the <resources> element tree for a document.

    Args:
        document: Resource document to render
        config: Conversion options (defaults to ConversionConfig())

    Returns:
        Root <resources> element

    Raises:
        SerializeError: If a name or value cannot be represented in XML 1.0
    """
    config = config or ConversionConfig()
    root = etree.Element(RESOURCES_TAG, nsmap={XLIFF_PREFIX: XLIFF_NAMESPACE})
    plurals_tag = config.plurals_tag.value
    name: str | None = None

    try:
        for entry in document.entries():
            name = entry.name
            if StringEntry.guard(entry):
                element = etree.SubElement(root, STRING_TAG, {NAME_ATTRIBUTE: name})
                _write_markup(element, entry.value)
            elif StringArrayEntry.guard(entry):
                element = etree.SubElement(root, STRING_ARRAY_TAG, {NAME_ATTRIBUTE: name})
                for value in entry.items:
                    _write_markup(etree.SubElement(element, ITEM_TAG), value)
            elif PluralsEntry.guard(entry):
                element = etree.SubElement(root, plurals_tag, {NAME_ATTRIBUTE: name})
                for item in entry.items:
                    child = etree.SubElement(
                        element, ITEM_TAG, {QUANTITY_ATTRIBUTE: item.quantity.value}
                    )
                    _write_markup(child, item.value)
    except ValueError as e:
        # lxml rejects NUL and other control characters XML 1.0 cannot carry
        raise SerializeError(ErrorTemplate.serialize_failed(str(e), name)) from e

    return root


def serialize_document(
    document: ResourceDocument,
    config: ConversionConfig | None = None,
) -> bytes:
    """Serialize a document to UTF-8 encoded Android resources XML.

    Args:
        document: Resource document to render
        config: Conversion options (defaults to ConversionConfig())

    Returns:
        Pretty-printed XML, two-space indented, newline terminated

    Raises:
        SerializeError: If the document cannot be rendered
    """
    config = config or ConversionConfig()
    root = build_tree(document, config)
    try:
        return etree.tostring(
            root,
            encoding=OUTPUT_ENCODING,
            xml_declaration=config.xml_declaration,
            pretty_print=True,
        )
    except (ValueError, etree.SerialisationError) as e:
        raise SerializeError(ErrorTemplate.serialize_failed(str(e))) from e


def _write_markup(element: etree._Element, markup: str) -> None:
    """Fill an element with markup text and its xliff:g placeholder children.

    The element always receives a text node, even an empty one, so the pretty
    printer never inserts indentation inside a translated value.
    """
    parts = split_markup(markup)
    element.text = parts[0]
    for index in range(1, len(parts), 2):
        placeholder = etree.SubElement(element, _XLIFF_G, {ID_ATTRIBUTE: parts[index]})
        placeholder.tail = parts[index + 1] or None
