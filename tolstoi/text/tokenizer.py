"""Word tokenizer for chapter text.

Splits on runs of whitespace and strips leading/trailing non-alphabetic
characters from every piece. Interior characters are kept ("well-known",
"don't"), case is preserved, and pieces with no alphabetic character at all
("--", "1805") are dropped so that token counts are word counts.
"""

from __future__ import annotations

from collections.abc import Iterable


def _strip_non_alphabetic(piece: str) -> str:
    start = 0
    end = len(piece)
    while start < end and not piece[start].isalpha():
        start += 1
    while end > start and not piece[end - 1].isalpha():
        end -= 1
    return piece[start:end]


def tokenize(chapter_text: str) -> list[str]:
    """Tokenize chapter text into normalized words.

    Args:
        chapter_text: Raw text of one chapter.

    Returns:
        Non-empty tokens in order of appearance.

    Examples:
        >>> tokenize('"Well, Prince, so Genoa and Lucca -- 1805')
        ['Well', 'Prince', 'so', 'Genoa', 'and', 'Lucca']
    """
    tokens = (_strip_non_alphabetic(piece) for piece in chapter_text.split())
    return [token for token in tokens if token]


def tokenize_chapters(chapters: Iterable[str]) -> list[list[str]]:
    """Tokenize every chapter, keeping chapter order."""
    return [tokenize(chapter) for chapter in chapters]
