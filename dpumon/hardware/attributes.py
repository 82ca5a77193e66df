"""Per-rank sysfs attribute readers."""

import logging
from pathlib import Path
from typing import Optional

from dpumon.schema import UNKNOWN_VALUE

LOGGER = logging.getLogger(__name__)


def read_text(path: Path) -> Optional[str]:
    """Return the contents of an attribute file, or None if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        return None


def first_token(contents: str) -> Optional[str]:
    """First whitespace-delimited token of contents, or None when blank."""
    parts = contents.split()
    return parts[0] if parts else None


def read_token(path: Path) -> Optional[str]:
    """Return the first whitespace-delimited token of a file.

    Returns:
        The token, or None if the file cannot be opened or is empty
    """
    contents = read_text(path)
    if contents is None:
        return None
    return first_token(contents)


def read_int(path: Path) -> Optional[int]:
    """Return the first token of a file parsed as an integer, or None."""
    token = read_token(path)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def read_part_number(rank_path: Path) -> str:
    """Read the part number of a rank, UNKNOWN_VALUE when unreadable."""
    path = rank_path / "part_number"
    contents = read_text(path)
    if contents is None:
        LOGGER.warning("Failed to open %s", path)
        return UNKNOWN_VALUE
    token = first_token(contents)
    if token is None:
        LOGGER.warning("Empty part number in %s", path)
        return UNKNOWN_VALUE
    return token


def read_mem_total(rank_path: Path) -> str:
    """Read the MRAM size of a rank as integer text, UNKNOWN_VALUE when unreadable."""
    path = rank_path / "mram_size"
    contents = read_text(path)
    if contents is None:
        LOGGER.warning("Failed to open %s", path)
        return UNKNOWN_VALUE
    token = first_token(contents)
    if token is None:
        LOGGER.warning("Empty MRAM size in %s", path)
        return UNKNOWN_VALUE
    try:
        return str(int(token))
    except ValueError:
        LOGGER.warning("Invalid MRAM size in %s: %r", path, token)
        return UNKNOWN_VALUE


def attribute_readable(path: Path) -> bool:
    """Return True if the attribute file holds an integer token."""
    return read_int(path) is not None


__all__ = [
    "read_text",
    "first_token",
    "read_token",
    "read_int",
    "read_part_number",
    "read_mem_total",
    "attribute_readable",
]
