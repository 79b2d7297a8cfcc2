"""Key/value splitting of logical .properties lines.

A logical line is split at the first unescaped ``=``, ``:`` or whitespace.
Whitespace around the separator is discarded, and when the key ends at
whitespace a single ``=`` or ``:`` may still follow before the value.
"""

from .unescape import unescape

SEPARATORS = "=:"

WHITESPACE = " \t\f"


def split_record(line: str) -> tuple[str, str]:
    """Split a logical line into its raw (still escaped) key and value.

    Args:
        line: One logical line, already continuation-joined

    Returns:
        Tuple of (raw_key, raw_value). A line without any separator is all
        key, with an empty value.
    """
    limit = len(line)
    key_length = 0
    value_start = limit
    has_separator = False
    preceding_backslash = False

    while key_length < limit:
        char = line[key_length]
        if not preceding_backslash:
            if char in SEPARATORS:
                value_start = key_length + 1
                has_separator = True
                break
            if char in WHITESPACE:
                value_start = key_length + 1
                break
        preceding_backslash = char == "\\" and not preceding_backslash
        key_length += 1

    while value_start < limit:
        char = line[value_start]
        if char not in WHITESPACE:
            if has_separator or char not in SEPARATORS:
                break
            has_separator = True
        value_start += 1

    return line[:key_length], line[value_start:]


def parse_record(line: str) -> tuple[str, str]:
    """Split a logical line and decode the escapes in both halves.

    Raises:
        MalformedEscapeError: If either half holds a malformed \\u escape
    """
    raw_key, raw_value = split_record(line)
    value_offset = len(line) - len(raw_value)
    return unescape(raw_key), unescape(raw_value, offset=value_offset)
