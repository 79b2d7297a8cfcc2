"""Loading of Java .properties input into a Properties mapping.

Supports:
- key=value, key: value and key value syntax
- Multi-line values with \\ continuation
- Comments starting with # or !
- Unicode escape sequences (\\uXXXX)
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO

from .models import Properties
from .reader import DEFAULT_ENCODING, LineReader
from .record import parse_record

logger = logging.getLogger(__name__)


def load(source: BinaryIO, encoding: str = DEFAULT_ENCODING) -> Properties:
    """Read every property declared in a binary stream.

    Later declarations of a key replace earlier ones. The stream is read to
    the end but not closed.

    Args:
        source: Binary stream positioned at the start of the properties
        encoding: Encoding of the raw bytes (ISO-8859-1 by default)

    Returns:
        Properties mapping of decoded keys to decoded values

    Raises:
        MalformedEscapeError: If a key or value holds a malformed \\u escape
        UnicodeDecodeError: If a line is not valid in ``encoding``
        OSError: If reading from the stream fails
    """
    reader = LineReader(source, encoding=encoding)
    properties = Properties()

    while True:
        line = reader.read_line()
        if line is None:
            break

        key, value = parse_record(line)
        if key in properties:
            logger.debug("Property '%s' redefined, keeping the later value", key)
        properties[key] = value

    logger.debug("Loaded %d properties", len(properties))
    return properties


def loads(content: str | bytes, encoding: str = DEFAULT_ENCODING) -> Properties:
    """Parse properties held in memory.

    Text content is encoded with ``encoding`` before parsing, so characters
    outside that encoding must be written as \\uXXXX escapes.
    """
    if isinstance(content, str):
        content = content.encode(encoding)
    return load(io.BytesIO(content), encoding=encoding)


def load_file(path: Path | str, encoding: str = DEFAULT_ENCODING) -> Properties:
    """Parse a .properties file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    logger.debug("Reading properties from %s", path)
    with open(path, "rb") as f:
        return load(f, encoding=encoding)
