"""
Loader for ZEP project exports.
Reads a project CSV file into Project records.
"""

import logging
from pathlib import Path
from typing import List

from .csv_deserialize import deserialize_csv
from .errors import SourceUnavailableError
from .models import PROJECT_BINDING, Project
from .utils import open_source

logger = logging.getLogger(__name__)


def load_projects(file_path: Path, encoding: str = 'utf-8') -> List[Project]:
    """
    Load all projects of a ZEP project export.

    Args:
        file_path: Path to the CSV export
        encoding: File encoding

    Returns:
        Projects in file order

    Raises:
        SourceUnavailableError: If the file cannot be opened or decoded
    """
    file_path = Path(file_path)
    logger.info(f"Loading projects: {file_path.name}")

    with open_source(file_path, encoding) as f:
        try:
            projects = deserialize_csv(f, PROJECT_BINDING)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {file_path}: {e}")
            raise SourceUnavailableError(str(file_path), str(e)) from e

    logger.info(f"Loaded {len(projects)} projects from {file_path.name}")
    return projects
