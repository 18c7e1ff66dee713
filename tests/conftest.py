"""Shared fixtures for the zep_clockify test suite."""

import io
import os
import sys
from dataclasses import dataclass

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from zep_clockify.converters import parse_unsigned_int  # noqa: E402
from zep_clockify.csv_parser import CSVParser  # noqa: E402
from zep_clockify.field_binding import FieldBinding, FieldSpec  # noqa: E402


@dataclass
class SimpleProject:
    id: int = 0
    name: str = ""
    description: str = ""


SIMPLE_FIELDS = [
    FieldSpec("ID", "id", parse_unsigned_int),
    FieldSpec("Abbreviation", "name"),
    FieldSpec("Description", "description"),
]


@pytest.fixture
def simple_binding() -> FieldBinding:
    return FieldBinding(SimpleProject, SIMPLE_FIELDS)


@pytest.fixture
def make_parser():
    def _make(text: str) -> CSVParser:
        return CSVParser(io.StringIO(text))
    return _make
