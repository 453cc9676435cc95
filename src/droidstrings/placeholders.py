"""Placeholder tokenizer: {{name}} to Android xliff:g tags.

Localization maps mark substitution points with doubled braces
(``Hello {{name}}!``). Android string resources mark them with inline
``xliff:g`` elements (``Hello <xliff:g id="name" />!``). This module rewrites
the former into the latter and derives resource names from JSON keys.

The rewrite is a two-step process:

1. Doubled braces collapse to single braces (``{{`` to ``{``, ``}}`` to ``}``).
2. One left-to-right scan with two states, outside and inside a placeholder.
   Characters outside are copied, characters inside accumulate into the
   placeholder name, ``}`` emits the tag.

Lenient by default: nested ``{`` re-enters the placeholder state keeping the
name collected so far, an unterminated placeholder is dropped, and a stray
``}`` emits a tag with an empty id. Strict mode reports each of these as
PlaceholderSyntaxError instead.

Python 3.13+. Zero external dependencies.
"""

import re
from typing import NoReturn
from xml.sax.saxutils import escape, unescape

from droidstrings.constants import (
    ESCAPED_CLOSE,
    ESCAPED_OPEN,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
    PLACEHOLDER_TAG_TEMPLATE,
)
from droidstrings.diagnostics import ErrorTemplate, PlaceholderSyntaxError

__all__ = [
    "PLACEHOLDER_TAG_PATTERN",
    "make_identifier",
    "process_translation",
    "split_markup",
]

# Matches the tags emitted by process_translation; group 1 is the name.
PLACEHOLDER_TAG_PATTERN = re.compile(r'<xliff:g id="(.*?)" />', re.DOTALL)

# Names are stored attribute-escaped (&, <, > and ") so no name can end the tag.
_NAME_ESCAPES = {'"': "&quot;"}
_NAME_UNESCAPES = {"&quot;": '"'}


def make_identifier(key: str) -> str:
    """Derive an Android resource name from a JSON key.

    Hyphens become underscores; nothing else changes.

    Example:
        >>> make_identifier("welcome-screen-title")
        'welcome_screen_title'
    """
    return key.replace("-", "_")


def process_translation(raw: str, *, strict: bool = False) -> str:
    """Rewrite {{name}} placeholders of a raw string into xliff:g tags.

    Args:
        raw: Translation text as found in the JSON map
        strict: Raise on nested, unmatched or unterminated placeholders
            instead of passing them through

    Returns:
        Markup text: the input with every placeholder replaced by
        ``<xliff:g id="NAME" />`` and all other characters unchanged

    Raises:
        PlaceholderSyntaxError: In strict mode, on a malformed placeholder

    Example:
        >>> process_translation("Hello {{name}}!")
        'Hello <xliff:g id="name" />!'
        >>> process_translation("{{{{x}}}}")
        '<xliff:g id="x" /><xliff:g id="" />'
    """
    text = raw.replace(ESCAPED_OPEN, PLACEHOLDER_OPEN).replace(ESCAPED_CLOSE, PLACEHOLDER_CLOSE)

    output: list[str] = []
    name: list[str] = []
    inside = False
    opened_at = -1

    for pos, char in enumerate(text):
        if char == PLACEHOLDER_OPEN:
            if strict and inside:
                _fail("nested '{' inside a placeholder", pos, raw)
            inside = True
            opened_at = pos
        elif char == PLACEHOLDER_CLOSE:
            if strict and not inside:
                _fail("'}' without a matching '{'", pos, raw)
            tag_name = escape("".join(name), _NAME_ESCAPES)
            output.append(PLACEHOLDER_TAG_TEMPLATE.format(name=tag_name))
            name.clear()
            inside = False
        elif inside:
            name.append(char)
        else:
            output.append(char)

    if strict and inside:
        _fail("placeholder is never closed", opened_at, raw)

    return "".join(output)


def split_markup(text: str) -> list[str]:
    """Split markup text into text runs and placeholder names.

    Returns:
        Alternating list ``[text, name, text, name, ..., text]``; even
        positions are literal text runs (possibly empty), odd positions are
        placeholder names with their escaping undone

    Example:
        >>> split_markup('Hi <xliff:g id="name" />!')
        ['Hi ', 'name', '!']
    """
    parts = PLACEHOLDER_TAG_PATTERN.split(text)
    parts[1::2] = [unescape(name, _NAME_UNESCAPES) for name in parts[1::2]]
    return parts


def _fail(reason: str, position: int, raw: str) -> NoReturn:
    raise PlaceholderSyntaxError(
        ErrorTemplate.placeholder_malformed(reason, position, raw),
        value=raw,
        position=position,
    )
