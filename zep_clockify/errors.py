"""
Error types raised by the CSV core, the Clockify client and the CLI.
Everything a caller is expected to handle derives from ZepClockifyError.
"""

from typing import Optional


class ZepClockifyError(Exception):
    """Base class for all recoverable errors of the package."""


class SourceUnavailableError(ZepClockifyError):
    """The input file cannot be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class ConfigError(ZepClockifyError):
    """Configuration file contains invalid values."""


class CSVError(ZepClockifyError):
    """Structural error in the CSV input, tagged with the physical line number."""

    def __init__(self, message: str, line_number: int):
        self.message = message
        self.line_number = line_number
        super().__init__(f"Line {line_number}: {message}")


class StructuralTruncationError(CSVError):
    """Input ended in the middle of the header or a record."""

    def __init__(self, line_number: int):
        super().__init__("Got unexpected end", line_number)


class ColumnCountMismatchError(CSVError):
    """A record has more or fewer columns than the header."""

    TOO_MANY = "too many"
    TOO_FEW = "too few"

    def __init__(self, direction: str, line_number: int):
        self.direction = direction
        super().__init__(f"Got {direction} columns for record", line_number)


class UnterminatedQuoteError(CSVError):
    """Input ended inside a quoted field."""

    def __init__(self, line_number: int):
        super().__init__("Quoted field is not terminated before end of input", line_number)


class BindingError(ZepClockifyError):
    """The header cannot be bound to the destination record fields."""

    def __init__(self, message: str, field_name: str):
        self.field_name = field_name
        super().__init__(message)


class MissingFieldError(BindingError):
    def __init__(self, field_name: str):
        super().__init__(f"Cannot find field {field_name}", field_name)


class DuplicateColumnError(BindingError):
    def __init__(self, field_name: str):
        super().__init__(f"Header contains field {field_name} more than once", field_name)


class FieldParseError(ZepClockifyError):
    """A raw column value could not be converted into its record field."""

    def __init__(self, field_index: int, field_name: str, raw: str, reason: str,
                 line_number: Optional[int] = None):
        self.field_index = field_index
        self.field_name = field_name
        self.raw = raw
        self.reason = reason
        self.line_number = line_number
        super().__init__(field_index, field_name, raw, reason)

    def __str__(self) -> str:
        message = f"Invalid value {self.raw!r} for field {self.field_name}: {self.reason}"
        if self.line_number is not None:
            return f"Line {self.line_number}: {message}"
        return message


class ClockifyError(ZepClockifyError):
    """Base class for errors talking to the Clockify REST API."""


class InvalidURIError(ClockifyError):
    pass


class RestAPIError(ClockifyError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
