"""
Utility functions for opening input files and formatting log output.
"""

import logging
from pathlib import Path
from typing import IO

from .errors import SourceUnavailableError

logger = logging.getLogger(__name__)


def open_source(file_path: Path, encoding: str = 'utf-8') -> IO[str]:
    """
    Open a text file for parsing.

    Args:
        file_path: Path to the input file
        encoding: File encoding

    Returns:
        Open text stream

    Raises:
        SourceUnavailableError: If the file cannot be opened
    """
    file_path = Path(file_path)
    try:
        return open(file_path, 'r', encoding=encoding)
    except OSError as e:
        logger.error(f"Cannot open {file_path}: {e}")
        raise SourceUnavailableError(str(file_path), e.strerror or str(e)) from e


def truncate_string(s: str, max_length: int = 100) -> str:
    """Truncate string for logging/display."""
    if len(s) <= max_length:
        return s
    return s[:max_length - 3] + "..."
