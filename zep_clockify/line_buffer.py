"""
Physical line buffer for the CSV tokenizer.
Reads one line at a time from a text or binary stream and tracks a cursor.
"""

import io
import logging
from typing import IO, Union

logger = logging.getLogger(__name__)


class LineBuffer:
    """Holds the current physical line of a stream and a cursor into it."""

    def __init__(self, stream: IO[Union[str, bytes]], encoding: str = 'utf-8'):
        """
        Initialize line buffer.

        Args:
            stream: Readable text or binary stream
            encoding: Encoding used when the stream yields bytes
        """
        self._wrapped = isinstance(stream, (io.RawIOBase, io.BufferedIOBase))
        if self._wrapped:
            # same newline handling as files opened in text mode
            stream = io.TextIOWrapper(stream, encoding=encoding)

        self.stream = stream
        self.encoding = encoding
        self.line = ''
        self.cursor = 0
        self.line_number = 0
        self.eof = False

    @property
    def exhausted(self) -> bool:
        """True if every character of the current line has been consumed."""
        return self.cursor >= len(self.line)

    def advance(self) -> bool:
        """
        Load the next physical line and reset the cursor.

        Returns:
            False if the stream has no more lines
        """
        self.line = ''
        self.cursor = 0
        if self.eof:
            return False

        raw = self.stream.readline()
        if not raw:
            self.eof = True
            if self._wrapped:
                # hand the binary stream back open
                self.stream.detach()
            logger.debug(f"End of input after {self.line_number} lines")
            return False

        if isinstance(raw, bytes):
            raw = raw.decode(self.encoding)

        # strip a single line terminator
        if raw.endswith('\r\n'):
            raw = raw[:-2]
        elif raw.endswith('\n'):
            raw = raw[:-1]

        self.line = raw
        self.line_number += 1
        return True

    def read_char(self) -> str:
        """Return the next character of the current line, or '' at end of line."""
        if self.exhausted:
            return ''
        c = self.line[self.cursor]
        self.cursor += 1
        return c

    def remaining(self) -> str:
        """Unconsumed rest of the current line."""
        return self.line[self.cursor:]

    def skip(self, count: int) -> None:
        self.cursor = min(self.cursor + count, len(self.line))

    def skip_rest(self) -> None:
        self.cursor = len(self.line)
