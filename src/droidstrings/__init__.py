"""droidstrings - JSON localization maps to Android string resources.

Converts a flat JSON map (key to string, string array, or plural forms) into
an Android string-resources XML document, rewriting ``{{name}}`` placeholders
into ``<xliff:g id="name"/>`` tags.

Public API:
    convert - Convert JSON text or bytes to XML bytes
    decode_document - Decode JSON into a ResourceDocument
    serialize_document - Render a ResourceDocument as XML bytes
    process_translation - Rewrite the placeholders of one string
    make_identifier - Derive a resource name from a JSON key
    ConversionConfig - Immutable conversion options

Exceptions:
    ConversionError - Base exception class
    InputIOError - Input cannot be opened or read
    DecodeError - Input is not a convertible JSON map
    PlaceholderSyntaxError - Malformed placeholder (strict mode)
    SerializeError - Document cannot be rendered
    ConfigurationError - Unusable configuration

Submodules:
    droidstrings.model - Resource document types
    droidstrings.diagnostics - Diagnostic codes, templates and formatting
    droidstrings.plural_rules - CLDR plural coverage checks (requires Babel)
    droidstrings.cli - Command-line interface
"""

from .config import ConversionConfig
from .converter import convert, read_input
from .decoder import decode_document
from .diagnostics import (
    ConfigurationError,
    ConversionError,
    DecodeError,
    InputIOError,
    PlaceholderSyntaxError,
    SerializeError,
)
from .enums import KeyOrder, PluralCategory, PluralsTag
from .model import (
    PluralItem,
    PluralsEntry,
    ResourceDocument,
    StringArrayEntry,
    StringEntry,
)
from .placeholders import make_identifier, process_translation
from .serializer import serialize_document

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("droidstrings")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "ConversionConfig",
    "ConversionError",
    "DecodeError",
    "InputIOError",
    "KeyOrder",
    "PlaceholderSyntaxError",
    "PluralCategory",
    "PluralItem",
    "PluralsEntry",
    "PluralsTag",
    "ResourceDocument",
    "SerializeError",
    "StringArrayEntry",
    "StringEntry",
    "__version__",
    "convert",
    "decode_document",
    "make_identifier",
    "process_translation",
    "read_input",
    "serialize_document",
]
