"""
tolstoi - Command Line Entry Point

Usage:
    tolstoi BOOK PEACE_TERMS WAR_TERMS [--format text|json] [--log-level LEVEL]
    python -m tolstoi BOOK PEACE_TERMS WAR_TERMS

Options may appear between the paths (tolstoi BOOK --format json PEACE WAR).

Output:
    One line per chapter on stdout, ``CHAPTER <index>: <verdict>``, or a JSON
    array with both densities per chapter when ``--format json`` is given.

Exit status is 1 when an argument is missing or an input cannot be read.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, TextIO

from pydantic import ValidationError

from tolstoi import __version__
from tolstoi.core.config import Settings, get_settings
from tolstoi.core.exceptions import ConfigurationError, InputReadError
from tolstoi.core.logging import configure_logging, get_logger
from tolstoi.core.tracing import configure_tracing, get_tracer
from tolstoi.loaders import load_term_set, read_text_file
from tolstoi.scoring.classifier import ChapterClassifier, ChapterReport, Verdict
from tolstoi.text.chapterizer import chapterize
from tolstoi.text.tokenizer import tokenize_chapters

logger = get_logger(__name__)
tracer = get_tracer(__name__)

# =============================================================================
# Constants
# =============================================================================

FORMAT_TEXT: Final[str] = "text"
FORMAT_JSON: Final[str] = "json"

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1

MISSING_BOOK_MSG: Final[str] = "Didn't get a book file path"
MISSING_PEACE_TERMS_MSG: Final[str] = "Didn't get a peace terms file path"
MISSING_WAR_TERMS_MSG: Final[str] = "Didn't get a war terms file path"


# =============================================================================
# Run Configuration
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    The three paths are declared optional so that a missing one is reported
    with its own message by RunConfig.build() instead of argparse's usage error.
    """
    parser = argparse.ArgumentParser(
        prog="tolstoi",
        description="Classify each chapter of War and Peace as peace or war related",
    )
    parser.add_argument("book", nargs="?", help="Path to the book text")
    parser.add_argument("peace_terms", nargs="?", help="Path to the peace terms file")
    parser.add_argument("war_terms", nargs="?", help="Path to the war terms file")
    parser.add_argument(
        "--format",
        choices=[FORMAT_TEXT, FORMAT_JSON],
        default=FORMAT_TEXT,
        help="Output format (default: text)",
    )
    parser.add_argument("--log-level", help="Overrides TOLSTOI_LOG_LEVEL")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Input paths and output options for one run.

    Attributes:
        book_path: Path to the book text
        peace_terms_path: Path to the peace terms file
        war_terms_path: Path to the war terms file
        output_format: "text" or "json"
        log_level: Log level override, None to use settings
    """

    book_path: str
    peace_terms_path: str
    war_terms_path: str
    output_format: str = FORMAT_TEXT
    log_level: str | None = None

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> RunConfig:
        """Build from parsed arguments, checking paths in positional order.

        Raises:
            ConfigurationError: If a path is missing.
        """
        if args.book is None:
            raise ConfigurationError(MISSING_BOOK_MSG)
        if args.peace_terms is None:
            raise ConfigurationError(MISSING_PEACE_TERMS_MSG)
        if args.war_terms is None:
            raise ConfigurationError(MISSING_WAR_TERMS_MSG)

        return cls(
            book_path=args.book,
            peace_terms_path=args.peace_terms,
            war_terms_path=args.war_terms,
            output_format=args.format,
            log_level=args.log_level,
        )

    @classmethod
    def build(cls, argv: Sequence[str]) -> RunConfig:
        """Parse command line arguments (without the program name).

        Raises:
            ConfigurationError: If a path is missing.
        """
        return cls.from_namespace(build_parser().parse_intermixed_args(list(argv)))


def load_settings() -> Settings:
    """Load settings, turning validation failures into ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        msg = f"Invalid settings: {e}"
        raise ConfigurationError(msg) from e


# =============================================================================
# Run
# =============================================================================


def run(
    config: RunConfig,
    settings: Settings | None = None,
    out: TextIO | None = None,
) -> list[ChapterReport]:
    """Classify every chapter of the book and write the result.

    All three inputs are read before any chapter is processed.

    Args:
        config: Paths and output options
        settings: Markers and tolerance. Loaded from the environment if None.
        out: Output stream, stdout if None

    Returns:
        One ChapterReport per chapter, in chapter order.

    Raises:
        InputReadError: If any input file cannot be read.
    """
    settings = settings if settings is not None else get_settings()
    # no-op when main() already configured logging
    configure_logging(log_level=settings.log_level, json_output=settings.log_json)
    out = out if out is not None else sys.stdout

    with tracer.start_as_current_span("classify_book") as span:
        book = read_text_file(config.book_path, "book")
        peace_terms = load_term_set(config.peace_terms_path, "peace terms")
        war_terms = load_term_set(config.war_terms_path, "war terms")
        logger.info(
            "inputs_loaded",
            book=config.book_path,
            book_chars=len(book),
            peace_terms=len(peace_terms),
            war_terms=len(war_terms),
        )

        chapters = chapterize(
            book,
            chapter_marker=settings.chapter_marker,
            book_end_marker=settings.book_end_marker,
        )
        tokenized_chapters = tokenize_chapters(chapters)
        logger.info("book_chapterized", chapters=len(chapters))

        classifier = ChapterClassifier(
            peace_terms,
            war_terms,
            tolerance=settings.tie_tolerance,
        )
        reports = classifier.classify_chapters(tokenized_chapters)
        span.set_attribute("book.chapters", len(reports))

    write_reports(reports, config.output_format, out)
    logger.info(
        "run_complete",
        chapters=len(reports),
        peace=sum(1 for r in reports if r.verdict is Verdict.PEACE_RELATED),
        war=sum(1 for r in reports if r.verdict is Verdict.WAR_RELATED),
        equal=sum(1 for r in reports if r.verdict is Verdict.EQUAL),
    )
    return reports


def write_reports(
    reports: Sequence[ChapterReport], output_format: str, out: TextIO
) -> None:
    """Write reports as text lines or a JSON array."""
    if output_format == FORMAT_JSON:
        json.dump([report.to_dict() for report in reports], out, indent=2)
        out.write("\n")
        return

    for report in reports:
        out.write(report.to_line() + "\n")


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name, sys.argv[1:] if None

    Returns:
        Process exit status
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    args = build_parser().parse_intermixed_args(argv)

    try:
        settings = load_settings()
        config = RunConfig.from_namespace(args)
    except ConfigurationError as e:
        print(f"Parsing error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(
        log_level=config.log_level or settings.log_level,
        json_output=settings.log_json,
    )

    if settings.tracing_enabled:
        configure_tracing(
            service_name=settings.service_name,
            console_export=settings.tracing_console_export,
        )

    try:
        run(config, settings)
    except InputReadError as e:
        logger.error("input_read_failed", input=e.label, path=e.path)
        print(f"Application error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK
