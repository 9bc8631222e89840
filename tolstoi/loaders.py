"""Input loading: whole-file reads and term sets.

Term files hold one term per line. Lines are trimmed; blank lines are dropped
before the terms reach the scorer.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from tolstoi.core.exceptions import InputReadError
from tolstoi.core.logging import get_logger
from tolstoi.text.lines import split_lines

logger = get_logger(__name__)


def read_text_file(path: str | Path, label: str) -> str:
    """Read a whole UTF-8 file.

    Args:
        path: File to read.
        label: Name of the input for error messages ("book", "peace terms", ...).

    Returns:
        The file contents.

    Raises:
        InputReadError: If the file is missing, unreadable or not valid UTF-8.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(label, str(path), str(e)) from e


def to_trimmed_lines(text: str) -> list[str]:
    """Split text into lines with surrounding whitespace removed.

    Blank lines are kept as empty strings.
    """
    return [line.strip() for line in split_lines(text)]


def build_term_set(lines: Iterable[str]) -> frozenset[str]:
    """Build a term set from trimmed lines, ignoring empty ones."""
    return frozenset(line for line in lines if line)


def load_term_set(path: str | Path, label: str) -> frozenset[str]:
    """Read a terms file and return its term set.

    Raises:
        InputReadError: If the file cannot be read.
    """
    terms = build_term_set(to_trimmed_lines(read_text_file(path, label)))
    if not terms:
        logger.warning("empty_term_set", label=label, path=str(path))
    return terms
