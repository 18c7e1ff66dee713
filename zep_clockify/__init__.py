"""
ZEP to Clockify tooling package.
"""

__version__ = "0.1.0"
__author__ = "Automation Team"

from .errors import (
    ZepClockifyError,
    SourceUnavailableError,
    ConfigError,
    CSVError,
    StructuralTruncationError,
    ColumnCountMismatchError,
    UnterminatedQuoteError,
    BindingError,
    MissingFieldError,
    DuplicateColumnError,
    FieldParseError,
    ClockifyError,
    InvalidURIError,
    RestAPIError,
)
from .csv_parser import CSVParser, Token, EOF
from .field_binding import FieldBinding, FieldSpec
from .csv_deserialize import create_index_map, deserialize_csv
from .models import (
    Project,
    ProjectStatus,
    PROJECT_BINDING,
    Workspace,
    ClockifyProject,
)
from .projects_loader import load_projects
from .clockify_client import ClockifyClient, ClockifyConfig
from .config_loader import AppConfig, ConfigLoader
from .logging_setup import setup_logging

__all__ = [
    'ZepClockifyError',
    'SourceUnavailableError',
    'ConfigError',
    'CSVError',
    'StructuralTruncationError',
    'ColumnCountMismatchError',
    'UnterminatedQuoteError',
    'BindingError',
    'MissingFieldError',
    'DuplicateColumnError',
    'FieldParseError',
    'ClockifyError',
    'InvalidURIError',
    'RestAPIError',
    'CSVParser',
    'Token',
    'EOF',
    'FieldBinding',
    'FieldSpec',
    'create_index_map',
    'deserialize_csv',
    'Project',
    'ProjectStatus',
    'PROJECT_BINDING',
    'Workspace',
    'ClockifyProject',
    'load_projects',
    'ClockifyClient',
    'ClockifyConfig',
    'AppConfig',
    'ConfigLoader',
    'setup_logging',
]
