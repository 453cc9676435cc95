"""One-shot conversion pipeline: read, decode, check, serialize.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from droidstrings.config import ConversionConfig
from droidstrings.decoder import decode_document
from droidstrings.diagnostics import ErrorTemplate, InputIOError
from droidstrings.plural_rules import check_plural_coverage
from droidstrings.serializer import serialize_document

__all__ = ["STDIN_SOURCE", "convert", "read_input"]

logger = logging.getLogger(__name__)

STDIN_SOURCE = "<stdin>"


def read_input(
    path: str | Path | None = None,
    *,
    logger: logging.Logger = logger,  # noqa: PLW0621 - module logger is the default sink
) -> tuple[bytes, str]:
    """Read the whole input document.

    A failure to close the file after a successful read is logged as a
    warning and does not fail the conversion.

    Args:
        path: Input file, or None / "-" for standard input
        logger: Diagnostic sink

    Returns:
        Tuple of (raw bytes, source label for diagnostics)

    Raises:
        InputIOError: If the input cannot be opened or read
    """
    if path is None or str(path) == "-":
        try:
            return sys.stdin.buffer.read(), STDIN_SOURCE
        except OSError as e:
            raise InputIOError(ErrorTemplate.input_unreadable(STDIN_SOURCE, str(e))) from e

    source = str(path)
    try:
        handle = Path(path).open("rb")  # noqa: SIM115 - close failures are handled below
    except OSError as e:
        raise InputIOError(ErrorTemplate.input_unreadable(source, e.strerror or str(e))) from e

    try:
        data = handle.read()
    except OSError as e:
        raise InputIOError(ErrorTemplate.input_unreadable(source, e.strerror or str(e))) from e
    finally:
        try:
            handle.close()
        except OSError as e:
            diagnostic = ErrorTemplate.input_close_failed(source, e.strerror or str(e))
            logger.warning("%s", diagnostic.format_error())

    logger.info("Read %d bytes from %s", len(data), source)
    return data, source


def convert(
    data: bytes | str,
    config: ConversionConfig | None = None,
    *,
    source: str | None = None,
    logger: logging.Logger = logger,  # noqa: PLW0621 - module logger is the default sink
) -> bytes:
    """Convert a JSON localization map to Android string-resources XML.

    Args:
        data: JSON document whose root value is an object
        config: Conversion options (defaults to ConversionConfig())
        source: Input location for diagnostics
        logger: Diagnostic sink

    Returns:
        UTF-8 encoded XML document

    Raises:
        DecodeError: If the input is not a convertible JSON map
        SerializeError: If the document cannot be rendered
        ConfigurationError: If the configured locale is unknown
        BabelImportError: If a locale is configured but Babel is missing

    Example:
        >>> print(convert('{"hi": "Hello {{name}}!"}').decode())
        <?xml version='1.0' encoding='utf-8'?>
        <resources xmlns:xliff="urn:oasis:names:tc:xliff:document:1.2">
          <string name="hi">Hello <xliff:g id="name"/>!</string>
        </resources>
        <BLANKLINE>
    """
    config = config or ConversionConfig()
    document = decode_document(data, config, source=source, logger=logger)
    if config.locale is not None:
        check_plural_coverage(document, config.locale, logger=logger)
    return serialize_document(document, config)
