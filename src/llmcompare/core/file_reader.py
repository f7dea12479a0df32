"""Reading the two input files."""

import logging
from pathlib import Path

from .exceptions import FileReadError

logger = logging.getLogger(__name__)


def read_input_file(path: str) -> str:
    """Read a text file as UTF-8.

    The path is resolved against the current directory only for reading;
    callers keep the string as typed.

    Raises:
        FileReadError: if the file is missing, unreadable or not UTF-8 text.
    """
    resolved = Path(path).resolve()
    try:
        return resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Error reading file {resolved}: {e}")
        raise FileReadError(path, str(e)) from e
