"""
Data models for ZEP project imports and the Clockify REST API.
Defines record structures using dataclasses and their field bindings.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional
from enum import Enum

from .converters import enum_parser, parse_date, parse_str, parse_unsigned_int
from .field_binding import FieldBinding, FieldSpec


class ProjectStatus(str, Enum):
    """Status of a ZEP project."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    COMPLETED = "completed"


@dataclass
class Project:
    """A single project row of a ZEP project export."""
    id: int = 0
    name: str = ""  # ZEP abbreviation
    description: str = ""
    status: Optional[ProjectStatus] = None
    start_date: Optional[date] = None


PROJECT_BINDING: FieldBinding[Project] = FieldBinding(Project, [
    FieldSpec("ID", "id", parse_unsigned_int),
    FieldSpec("Abbreviation", "name", parse_str),
    FieldSpec("Description", "description", parse_str),
    FieldSpec("Status", "status", enum_parser(ProjectStatus), required=False),
    FieldSpec("Start Date", "start_date", parse_date, required=False),
])


@dataclass
class Workspace:
    """A Clockify workspace."""
    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Workspace":
        return cls(id=data['id'], name=data['name'])


@dataclass
class ClockifyProject:
    """A project inside a Clockify workspace."""
    id: str
    name: str
    client_id: str = ""
    billable: bool = False
    public: bool = False
    color: str = ""
    note: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClockifyProject":
        """
        Build from a Clockify JSON object.

        Args:
            data: Decoded JSON object with camelCase keys

        Raises:
            KeyError: If id or name is missing
        """
        return cls(
            id=data['id'],
            name=data['name'],
            client_id=data.get('clientId') or "",
            billable=bool(data.get('billable', False)),
            public=bool(data.get('public', False)),
            color=data.get('color') or "",
            note=data.get('note') or "",
        )
