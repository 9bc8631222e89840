"""Text segmentation: chapterizer and tokenizer."""
from tolstoi.text.chapterizer import (
    DEFAULT_BOOK_END_MARKER,
    DEFAULT_CHAPTER_MARKER,
    chapterize,
    is_book_end,
    is_chapter_start,
)
from tolstoi.text.tokenizer import tokenize, tokenize_chapters

__all__ = [
    "DEFAULT_BOOK_END_MARKER",
    "DEFAULT_CHAPTER_MARKER",
    "chapterize",
    "is_book_end",
    "is_chapter_start",
    "tokenize",
    "tokenize_chapters",
]
