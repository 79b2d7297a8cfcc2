"""Logical line reading for .properties input.

A logical line is one property declaration: comment lines and blank lines
are skipped, leading whitespace of every physical line is dropped, and a line
ending in an odd number of backslashes is joined with the next physical line.
Escapes are left untouched; they are decoded after the key/value split.
"""

from typing import BinaryIO

DEFAULT_BUFFER_SIZE = 1024

DEFAULT_ENCODING = "latin-1"

_WHITESPACE = b" \t\f"
_LINE_TERMINATORS = b"\r\n"
_COMMENT_MARKERS = b"#!"
_BACKSLASH = ord("\\")
_CR = ord("\r")
_LF = ord("\n")


class LineReader:
    """Read logical lines from a binary stream.

    The stream is consumed in chunks of ``buffer_size`` bytes. Each call to
    :meth:`read_line` returns the next logical line, or ``None`` once the
    input is exhausted. Exceptions raised by the stream propagate unchanged.
    """

    def __init__(
        self,
        source: BinaryIO,
        encoding: str = DEFAULT_ENCODING,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.encoding = encoding
        self.buffer_size = buffer_size
        self._source = source
        self._buffer = b""
        self._offset = 0
        self._line = bytearray()
        self._exhausted = False
        self._reset_line_state()

    @property
    def exhausted(self) -> bool:
        """True once the end of input (or a read error) has been reached."""
        return self._exhausted

    def read_line(self) -> str | None:
        """Return the next logical line, or None at end of input."""
        if self._exhausted:
            return None

        self._reset_line_state()

        while True:
            if self._offset >= len(self._buffer) and not self._fill():
                self._exhausted = True
                if self._is_comment_line or not self._line:
                    return None
                if self._preceding_backslash:
                    del self._line[-1]
                return self._decode()

            char = self._buffer[self._offset]
            self._offset += 1

            if self._skip_lf:
                self._skip_lf = False
                if char == _LF:
                    continue

            if self._skip_whitespace:
                if char in _WHITESPACE:
                    continue
                if not self._appended_line_begin and char in _LINE_TERMINATORS:
                    continue
                self._skip_whitespace = False
                self._appended_line_begin = False

            if self._is_new_line:
                self._is_new_line = False
                if char in _COMMENT_MARKERS:
                    self._is_comment_line = True
                    continue

            if char not in _LINE_TERMINATORS:
                if not self._is_comment_line:
                    self._line.append(char)
                    self._preceding_backslash = (
                        char == _BACKSLASH and not self._preceding_backslash
                    )
                continue

            # End of a physical line
            if self._is_comment_line or not self._line:
                self._reset_line_state()
                continue

            if not self._preceding_backslash:
                return self._decode()

            # Continuation: drop the backslash and the next line's indentation
            del self._line[-1]
            self._preceding_backslash = False
            self._skip_whitespace = True
            self._appended_line_begin = True
            if char == _CR:
                self._skip_lf = True

    def _reset_line_state(self) -> None:
        self._line.clear()
        self._skip_lf = False
        self._skip_whitespace = True
        self._appended_line_begin = False
        self._is_new_line = True
        self._is_comment_line = False
        self._preceding_backslash = False

    def _fill(self) -> bool:
        """Refill the raw buffer. Returns False at end of input."""
        try:
            chunk = self._source.read(self.buffer_size)
        except Exception:
            self._exhausted = True
            raise

        if isinstance(chunk, str):
            self._exhausted = True
            raise TypeError("properties source must be opened in binary mode")

        if chunk is None:
            # Non-blocking stream with no data ready
            self._exhausted = True
            raise BlockingIOError("properties source must be a blocking stream")

        self._buffer = chunk
        self._offset = 0
        return bool(self._buffer)

    def _decode(self) -> str:
        return self._line.decode(self.encoding)
