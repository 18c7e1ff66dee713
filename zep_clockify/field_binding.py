"""
Field bindings: per-record-type descriptor tables.
Supplies field count, canonical header names and per-field string parsing.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Sequence, TypeVar

from .converters import parse_str
from .errors import FieldParseError

logger = logging.getLogger(__name__)

R = TypeVar('R')


@dataclass(frozen=True)
class FieldSpec:
    """One destination field: header name, record attribute and converter."""
    name: str
    attribute: str
    converter: Callable[[str], Any] = parse_str
    required: bool = True  # optional fields may be absent from the header


class FieldBinding(Generic[R]):
    """Binds header names to the fields of one record type."""

    def __init__(self, record_factory: Callable[[], R], fields: Sequence[FieldSpec]):
        """
        Initialize binding.

        Args:
            record_factory: Callable returning a default-initialized record
            fields: Ordered field descriptors

        Raises:
            ValueError: If fields is empty or names a header column twice
        """
        if not fields:
            raise ValueError("A field binding needs at least one field")

        names = [f.name for f in fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate field names in binding: {', '.join(duplicates)}")

        self.record_factory = record_factory
        self.fields: List[FieldSpec] = list(fields)

    @property
    def field_count(self) -> int:
        return len(self.fields)

    def field_name(self, index: int) -> str:
        return self._field(index).name

    def new_record(self) -> R:
        return self.record_factory()

    def parse_field(self, record: R, index: int, raw: str) -> None:
        """
        Parse raw and store it into the field at index.

        Raises:
            FieldParseError: If the converter rejects raw
        """
        spec = self._field(index)
        try:
            value = spec.converter(raw)
        except ValueError as e:
            logger.debug(f"Field {spec.name} rejected {raw!r}: {e}")
            raise FieldParseError(index, spec.name, raw, str(e)) from e

        setattr(record, spec.attribute, value)

    def _field(self, index: int) -> FieldSpec:
        if not 0 <= index < len(self.fields):
            raise IndexError(f"Index {index} is out of range")
        return self.fields[index]
