"""
Semicolon-delimited CSV parser with quoted, multi-line fields.
Tokenizes a stream field by field and reads fixed-width records after the header.
"""

import logging
from dataclasses import dataclass
from typing import IO, Iterator, List, TypeVar, Union

from .errors import (
    ColumnCountMismatchError,
    StructuralTruncationError,
    UnterminatedQuoteError,
)
from .line_buffer import LineBuffer

logger = logging.getLogger(__name__)

DELIMITER = ';'
QUOTE = '"'

T = TypeVar('T')


class _EndOfStream:
    """Sentinel returned by the readers once the input is exhausted."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'EOF'


EOF = _EndOfStream()

# Either the value that was read or EOF
ReaderResult = Union[T, _EndOfStream]


@dataclass(frozen=True)
class Token:
    """A single field value read by the tokenizer."""
    value: str
    further_tokens: bool  # more fields follow in the current record


class CSVParser:
    """Sequential reader for the header and records of one input stream."""

    def __init__(self, stream: IO, encoding: str = 'utf-8'):
        """
        Initialize CSV parser.

        Args:
            stream: Text or binary stream to read from
            encoding: Encoding used when the stream yields bytes
        """
        self._lines = LineBuffer(stream, encoding)
        self._num_columns = 0
        # previous token ended with a delimiter, so the record continues on this line
        self._field_pending = False

    @property
    def num_columns(self) -> int:
        return self._num_columns

    @property
    def line_number(self) -> int:
        return self._lines.line_number

    def read_header_record(self) -> List[str]:
        """
        Read the header record and fix the column count.

        Returns:
            Column names in input order

        Raises:
            RuntimeError: If the header was already read
            StructuralTruncationError: If the input ends before the header does
        """
        if self._num_columns != 0:
            raise RuntimeError("Already read header record")

        header: List[str] = []
        while True:
            token = self.read_token()
            if token is EOF:
                logger.error(f"Input ended inside header at line {self.line_number}")
                raise StructuralTruncationError(self.line_number)

            header.append(token.value)
            if not token.further_tokens:
                self._num_columns = len(header)
                logger.debug(f"Read header with {self._num_columns} columns: {header}")
                return header

    def read_record(self, record: List[str]) -> ReaderResult[List[str]]:
        """
        Read a single record into the provided buffer.

        Args:
            record: Buffer with exactly num_columns entries, overwritten in place

        Returns:
            The filled buffer, or EOF if the input ended before a new record started

        Raises:
            ColumnCountMismatchError: If the record is wider or narrower than the header
            StructuralTruncationError: If the input ends inside the record
        """
        if self._num_columns == 0:
            raise RuntimeError("Header record must be read before records")
        if len(record) != self._num_columns:
            raise ValueError(
                f"Record buffer has {len(record)} entries, expected {self._num_columns}"
            )

        for index in range(self._num_columns):
            token = self.read_token()
            if token is EOF:
                if index == 0:
                    return EOF
                raise StructuralTruncationError(self.line_number)

            record[index] = token.value
            is_last = index + 1 == self._num_columns
            if token.further_tokens and is_last:
                raise ColumnCountMismatchError(ColumnCountMismatchError.TOO_MANY, self.line_number)
            if not token.further_tokens and not is_last:
                raise ColumnCountMismatchError(ColumnCountMismatchError.TOO_FEW, self.line_number)

        return record

    def iter_records(self) -> Iterator[List[str]]:
        """Yield every remaining record as a new list."""
        while True:
            record = [''] * self._num_columns
            if self.read_record(record) is EOF:
                return
            yield record

    def read_token(self) -> ReaderResult[Token]:
        """
        Read the next field of the input.

        Returns:
            The token, or EOF if no character could be read

        Raises:
            UnterminatedQuoteError: If the input ends inside a quoted field
        """
        lines = self._lines
        if not self._field_pending and lines.exhausted:
            if not lines.advance():
                return EOF

        c = lines.read_char()
        if c == '':
            # blank line, or the record ended with a delimiter
            return self._token('', False)
        if c == DELIMITER:
            return self._token('', True)
        if c == QUOTE:
            return self._read_quoted()
        return self._read_unquoted(c)

    def _read_unquoted(self, first: str) -> Token:
        lines = self._lines
        rest = lines.remaining()
        idx = rest.find(DELIMITER)
        if idx >= 0:
            lines.skip(idx + 1)
            return self._token(first + rest[:idx], True)

        lines.skip_rest()
        return self._token(first + rest, False)

    def _read_quoted(self) -> Token:
        lines = self._lines
        start_line = lines.line_number
        parts: List[str] = []

        while True:
            rest = lines.remaining()
            idx = rest.find(QUOTE)
            if idx >= 0:
                parts.append(rest[:idx])
                lines.skip(idx + 1)
                break

            # closing quote is on a later line
            parts.append(rest)
            parts.append('\n')
            lines.skip_rest()
            if not lines.advance():
                logger.error(f"Quoted field opened at line {start_line} is not terminated")
                raise UnterminatedQuoteError(start_line)

        value = ''.join(parts)
        tail = lines.remaining()
        idx = tail.find(DELIMITER)
        if idx >= 0:
            lines.skip(idx + 1)
            return self._token(value, True)

        lines.skip_rest()
        return self._token(value, False)

    def _token(self, value: str, further_tokens: bool) -> Token:
        self._field_pending = further_tokens
        return Token(value=value, further_tokens=further_tokens)
