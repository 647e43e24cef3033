"""
Utility functions for spectrum identifier parsing and DTA file discovery.
"""

from __future__ import annotations

import logging
import os
from typing import List, Union

from .constants import DTA_EXTENSION
from .exceptions import InvalidIdentifierError

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def parse_ordinal(identifier: Union[int, str]) -> int:
    """
    Coerce a spectrum identifier to an ordinal within a concatenated DTA file.

    Accepts a native integer or a string holding a decimal integer
    (surrounding whitespace allowed). Range checking is left to the index:
    ``0`` or negative values parse fine and are simply never found.

    Args:
        identifier: The identifier to coerce.

    Returns:
        The ordinal as an int.

    Raises:
        InvalidIdentifierError: If *identifier* is neither an int nor a
            decimal string. Booleans are rejected.
    """
    if isinstance(identifier, bool):
        raise InvalidIdentifierError(
            f"Spectrum ordinal must be an integer, got {identifier!r}.")
    if isinstance(identifier, int):
        return identifier
    if isinstance(identifier, str):
        try:
            return int(identifier.strip(), 10)
        except ValueError:
            raise InvalidIdentifierError(
                f"Spectrum ordinal must be a decimal integer, got {identifier!r}.") from None
    raise InvalidIdentifierError(
        f"Spectrum ordinal must be an int or str, got {type(identifier).__name__}.")


def is_dta_filename(name: str, extension: str = DTA_EXTENSION) -> bool:
    """Return True if *name* ends with the DTA suffix (case-sensitive)."""
    return name.endswith(extension)


def list_dta_files(directory: str, extension: str = DTA_EXTENSION) -> List[str]:
    """
    List the DTA files directly inside a directory.

    Names are returned as-is (not joined to *directory*) in the order the
    operating system enumerates them, which is not guaranteed to be sorted.
    Files are not opened or validated.

    Args:
        directory: Directory to list.
        extension: Suffix a name must end with to be kept.

    Returns:
        List of matching filenames. Empty if the directory holds no match
        or cannot be listed.
    """
    try:
        names = os.listdir(directory)
    except OSError as exc:
        logger.warning("Could not list DTA directory %s: %s", directory, exc)
        return []

    return [name for name in names if is_dta_filename(name, extension)]
