"""Escape-sequence decoding for .properties keys and values.

Handles:
- \\t, \\r, \\n, \\f control characters
- \\uXXXX unicode escapes (surrogate pairs are combined)
- any other escaped character, which stands for itself
"""

from .exceptions import MalformedEscapeError

_CONTROL_ESCAPES = {"t": "\t", "r": "\r", "n": "\n", "f": "\f"}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def unescape(text: str, offset: int = 0) -> str:
    """Decode the backslash escapes in a raw key or value.

    Args:
        text: Raw key or value span, as split from a logical line
        offset: Position of ``text`` within its logical line, added to the
            position reported for a malformed escape

    Returns:
        The decoded string

    Raises:
        MalformedEscapeError: If a \\u escape has fewer than four hex digits
    """
    result: list[str] = []
    length = len(text)
    i = 0
    while i < length:
        char = text[i]
        if char != "\\":
            result.append(char)
            i += 1
            continue

        if i + 1 == length:
            # Nothing left to escape
            break

        next_char = text[i + 1]
        if next_char != "u":
            result.append(_CONTROL_ESCAPES.get(next_char, next_char))
            i += 2
            continue

        code_point = _read_code_point(text, i, offset)
        i += 6
        if 0xD800 <= code_point <= 0xDBFF:
            low = _peek_low_surrogate(text, i)
            if low is not None:
                code_point = 0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00)
                i += 6
        result.append(chr(code_point))

    return "".join(result)


def _read_code_point(text: str, start: int, offset: int) -> int:
    """Read the four hex digits of the \\u escape starting at ``start``."""
    digits = text[start + 2 : start + 6]
    if len(digits) < 4 or not all(d in _HEX_DIGITS for d in digits):
        raise MalformedEscapeError(text[start : start + 6], offset + start)
    return int(digits, 16)


def _peek_low_surrogate(text: str, start: int) -> int | None:
    """Return the low surrogate escaped at ``start``, if there is one."""
    if text[start : start + 2] != "\\u":
        return None
    digits = text[start + 2 : start + 6]
    if len(digits) < 4 or not all(d in _HEX_DIGITS for d in digits):
        return None
    value = int(digits, 16)
    if 0xDC00 <= value <= 0xDFFF:
        return value
    return None
