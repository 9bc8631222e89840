"""tolstoi: peace vs. war term density per chapter of War and Peace.

The package splits a Project Gutenberg book into chapters, tokenizes each
chapter and scores it against two vocabularies:
- Chapterizer and tokenizer (tolstoi.text)
- Term density scoring and verdicts (tolstoi.scoring)
- Command line entry point (tolstoi.cli)
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
