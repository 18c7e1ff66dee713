"""
String-to-value converters used by field bindings.
Each converter takes the raw column text and raises ValueError on bad input.
"""

import re
from datetime import date, datetime
from enum import Enum
from typing import Callable, Optional, Type, TypeVar

E = TypeVar('E', bound=Enum)

# Date formats found in ZEP exports
DATE_FORMATS = [
    '%Y-%m-%d',  # ISO8601
    '%d.%m.%Y',
]

_DIGITS_RE = re.compile(r'^[0-9]+$')


def parse_str(raw: str) -> str:
    return raw


def parse_unsigned_int(raw: str) -> int:
    """Parse a non-negative integer made of ASCII digits only."""
    if not _DIGITS_RE.match(raw):
        raise ValueError("invalid digit found in string" if raw else "cannot parse integer from empty string")
    return int(raw)


def parse_date(raw: str) -> Optional[date]:
    """
    Parse a date in one of DATE_FORMATS.

    Args:
        raw: Date string, may be empty

    Returns:
        The date, or None for an empty string
    """
    if raw == '':
        return None

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"unrecognized date format (expected one of {', '.join(DATE_FORMATS)})")


def enum_parser(enum_type: Type[E]) -> Callable[[str], Optional[E]]:
    """Build a converter matching member values of enum_type case-insensitively."""
    by_value = {str(member.value).lower(): member for member in enum_type}

    def parse(raw: str) -> Optional[E]:
        if raw == '':
            return None
        try:
            return by_value[raw.lower()]
        except KeyError:
            allowed = ', '.join(sorted(by_value))
            raise ValueError(f"unknown {enum_type.__name__} (allowed: {allowed})") from None

    return parse
