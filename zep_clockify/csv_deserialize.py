"""
Header-driven CSV deserialization.
Maps header columns onto record fields by name and parses every row into a record.
"""

import logging
from typing import IO, List, Optional, TypeVar

from .csv_parser import EOF, CSVParser
from .errors import DuplicateColumnError, FieldParseError, MissingFieldError
from .field_binding import FieldBinding

logger = logging.getLogger(__name__)

R = TypeVar('R')


def create_index_map(header: List[str], binding: FieldBinding) -> List[Optional[int]]:
    """
    Map each record field index to the index of its header column.

    Args:
        header: Column names from the header record
        binding: Field binding of the destination record type

    Returns:
        Column index per field index, None for an absent optional field

    Raises:
        MissingFieldError: If a required field name is not in the header
        DuplicateColumnError: If a field name is in the header more than once
    """
    field_map: List[Optional[int]] = []
    for i, spec in enumerate(binding.fields):
        name = binding.field_name(i)
        positions = [index for index, column in enumerate(header) if column == name]
        if not positions:
            if not spec.required:
                logger.debug(f"Optional column {name!r} not in header")
                field_map.append(None)
                continue
            logger.error(f"Header has no column {name!r}: {header}")
            raise MissingFieldError(name)
        if len(positions) > 1:
            logger.error(f"Header column {name!r} is ambiguous at positions {positions}")
            raise DuplicateColumnError(name)
        field_map.append(positions[0])

    return field_map


def deserialize_csv(source: IO, binding: FieldBinding[R], encoding: str = 'utf-8') -> List[R]:
    """
    Deserialize every record of source.

    Args:
        source: Text or binary stream with a header record
        binding: Field binding of the destination record type
        encoding: Encoding used when source yields bytes

    Returns:
        Records in input order
    """
    # read the header record and build record fields -> CSV column map
    parser = CSVParser(source, encoding)
    header = parser.read_header_record()
    field_map = create_index_map(header, binding)

    record_raw = [''] * len(header)
    records = []
    while parser.read_record(record_raw) is not EOF:
        record = binding.new_record()
        for field_index, column_index in enumerate(field_map):
            if column_index is None:
                continue
            try:
                binding.parse_field(record, field_index, record_raw[column_index])
            except FieldParseError as e:
                e.line_number = parser.line_number
                logger.error(f"Failed to parse record: {e}")
                raise

        records.append(record)

    logger.info(f"Deserialized {len(records)} records with {len(header)} columns")
    return records
