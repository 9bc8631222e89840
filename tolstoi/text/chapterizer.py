"""
Chapterizer for Project Gutenberg books.

Splits the raw book text into an ordered list of chapter texts:
- A line containing the chapter marker opens a new chapter (the line is kept
  as the chapter's first line)
- A line containing the book end marker stops the scan; it is not kept
- Lines before the first chapter marker (front matter) are dropped

Each chapter is returned as its lines joined with a single space.
"""

from __future__ import annotations

from typing import Final

from tolstoi.text.lines import split_lines

# =============================================================================
# Module Constants
# =============================================================================

DEFAULT_CHAPTER_MARKER: Final[str] = "CHAPTER "
DEFAULT_BOOK_END_MARKER: Final[str] = "END OF THE PROJECT GUTENBERG EBOOK, WAR AND PEACE"

LINE_SEPARATOR: Final[str] = " "


# =============================================================================
# Line Predicates
# =============================================================================


def is_chapter_start(line: str, marker: str = DEFAULT_CHAPTER_MARKER) -> bool:
    """Return True if the line opens a new chapter (case-sensitive)."""
    return marker in line


def is_book_end(line: str, marker: str = DEFAULT_BOOK_END_MARKER) -> bool:
    """Return True if the line marks the end of the book text."""
    return marker in line


# =============================================================================
# Chapterizer
# =============================================================================


def chapterize(
    book: str,
    chapter_marker: str = DEFAULT_CHAPTER_MARKER,
    book_end_marker: str = DEFAULT_BOOK_END_MARKER,
) -> list[str]:
    """Split a book into chapter texts.

    Args:
        book: The whole book text.
        chapter_marker: Substring identifying a chapter heading line.
        book_end_marker: Substring identifying the end-of-book line.

    Returns:
        Chapter texts in order of appearance. Empty if the book has no
        chapter marker.

    Examples:
        >>> chapterize("Title\\nCHAPTER 1\\nText\\nCHAPTER 2\\nMore")
        ['CHAPTER 1 Text', 'CHAPTER 2 More']
    """
    chapters: list[list[str]] = []

    for line in split_lines(book):
        if is_chapter_start(line, chapter_marker):
            chapters.append([])
        elif is_book_end(line, book_end_marker):
            break

        if chapters:
            chapters[-1].append(line)

    return [LINE_SEPARATOR.join(lines) for lines in chapters]
