"""
Chapter classifier: peace vs. war verdict per chapter.

Scores every chapter against both vocabularies with a density scorer and
compares the two densities:
- peace > war -> Verdict.PEACE_RELATED
- peace < war -> Verdict.WAR_RELATED
- otherwise   -> Verdict.EQUAL

Ties use exact float equality unless a non-negative tolerance is given, in
which case densities within the tolerance of each other are EQUAL.

Pattern: Protocol-based scorer injection with a fake for tests.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

import numpy as np

from tolstoi.core.logging import get_logger
from tolstoi.core.tracing import get_tracer
from tolstoi.scoring.density import term_density

logger = get_logger(__name__)
tracer = get_tracer(__name__)


# =============================================================================
# Verdict
# =============================================================================


class Verdict(Enum):
    """Per-chapter classification outcome."""

    PEACE_RELATED = "peace"
    WAR_RELATED = "war"
    EQUAL = "equal"

    @property
    def text(self) -> str:
        """Human-readable verdict as printed by the command line."""
        return _VERDICT_TEXT[self]


_VERDICT_TEXT: dict[Verdict, str] = {
    Verdict.PEACE_RELATED: "Peace related!",
    Verdict.WAR_RELATED: "War related!",
    Verdict.EQUAL: "Equal density!",
}


def classify(
    peace_density: float,
    war_density: float,
    tolerance: float = 0.0,
) -> Verdict:
    """Compare two densities.

    Args:
        peace_density: Density of the peace vocabulary.
        war_density: Density of the war vocabulary.
        tolerance: Width of the EQUAL band. 0.0 means exact equality.

    Returns:
        The verdict for the chapter.

    Raises:
        ValueError: If tolerance is negative.
    """
    if tolerance < 0:
        msg = f"tolerance must be non-negative, got {tolerance}"
        raise ValueError(msg)

    if tolerance and abs(peace_density - war_density) <= tolerance:
        return Verdict.EQUAL
    if peace_density > war_density:
        return Verdict.PEACE_RELATED
    if peace_density < war_density:
        return Verdict.WAR_RELATED
    return Verdict.EQUAL


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True, slots=True)
class ChapterReport:
    """Scores and verdict for one chapter.

    Attributes:
        index: 0-based chapter position in the book
        peace_density: Density of the peace vocabulary
        war_density: Density of the war vocabulary
        verdict: Comparison outcome
    """

    index: int
    peace_density: np.float32
    war_density: np.float32
    verdict: Verdict

    def to_line(self) -> str:
        """Render as ``CHAPTER <index>: <verdict text>``."""
        return f"CHAPTER {self.index}: {self.verdict.text}"

    def to_dict(self) -> dict[str, object]:
        """Render as a JSON-serializable dict."""
        return {
            "chapter": self.index,
            "peace_density": float(self.peace_density),
            "war_density": float(self.war_density),
            "verdict": self.verdict.value,
        }


# =============================================================================
# Protocol
# =============================================================================


@runtime_checkable
class DensityScorer(Protocol):
    """Callable scoring one tokenized chapter against one term set."""

    def __call__(self, tokens: Sequence[str], terms: Set[str]) -> np.float32:
        ...


# =============================================================================
# Main Implementation
# =============================================================================


class ChapterClassifier:
    """Classifies tokenized chapters against a peace and a war vocabulary.

    Usage:
        classifier = ChapterClassifier(peace_terms, war_terms)
        for report in classifier.classify_chapters(tokenized_chapters):
            print(report.to_line())
    """

    def __init__(
        self,
        peace_terms: Set[str],
        war_terms: Set[str],
        scorer: DensityScorer = term_density,
        tolerance: float = 0.0,
    ) -> None:
        """Initialize ChapterClassifier.

        Args:
            peace_terms: Peace vocabulary. May be empty.
            war_terms: War vocabulary. May be empty.
            scorer: Density function, term_density unless testing.
            tolerance: EQUAL band passed to classify().

        Raises:
            ValueError: If tolerance is negative.
        """
        if tolerance < 0:
            msg = f"tolerance must be non-negative, got {tolerance}"
            raise ValueError(msg)

        self._peace_terms = frozenset(peace_terms)
        self._war_terms = frozenset(war_terms)
        self._scorer = scorer
        self._tolerance = tolerance

    def classify_chapter(self, index: int, tokens: Sequence[str]) -> ChapterReport:
        """Score one chapter against both vocabularies.

        Args:
            index: 0-based chapter index.
            tokens: Tokenized chapter.

        Returns:
            ChapterReport with both densities and the verdict.
        """
        with tracer.start_as_current_span("score_chapter") as span:
            peace_density = self._scorer(tokens, self._peace_terms)
            war_density = self._scorer(tokens, self._war_terms)
            verdict = classify(peace_density, war_density, self._tolerance)

            span.set_attribute("chapter.index", index)
            span.set_attribute("chapter.tokens", len(tokens))
            span.set_attribute("density.peace", float(peace_density))
            span.set_attribute("density.war", float(war_density))
            span.set_attribute("verdict", verdict.value)

        logger.debug(
            "chapter_scored",
            chapter=index,
            tokens=len(tokens),
            peace_density=float(peace_density),
            war_density=float(war_density),
            verdict=verdict.value,
        )
        return ChapterReport(
            index=index,
            peace_density=peace_density,
            war_density=war_density,
            verdict=verdict,
        )

    def classify_chapters(
        self, tokenized_chapters: Iterable[Sequence[str]]
    ) -> list[ChapterReport]:
        """Classify chapters in order; report i is chapter i."""
        return [
            self.classify_chapter(index, tokens)
            for index, tokens in enumerate(tokenized_chapters)
        ]


# =============================================================================
# Test Double
# =============================================================================


class FakeDensityScorer:
    """Fake DensityScorer for testing.

    Returns a configured score per term set and records every call.

    Usage:
        peace = frozenset({"peace"})
        fake = FakeDensityScorer(scores={peace: 0.5})
        fake(["peace"], peace)  # 0.5
    """

    def __init__(
        self,
        scores: Mapping[frozenset[str], float] | None = None,
        default: float = 0.0,
    ) -> None:
        """Initialize with pre-configured scores.

        Args:
            scores: Mapping from term set to the score returned for it
            default: Score for term sets not in scores
        """
        self._scores: dict[frozenset[str], float] = dict(scores) if scores else {}
        self._default = default
        self.calls: list[tuple[tuple[str, ...], frozenset[str]]] = []

    def __call__(self, tokens: Sequence[str], terms: Set[str]) -> np.float32:
        key = frozenset(terms)
        self.calls.append((tuple(tokens), key))
        return np.float32(self._scores.get(key, self._default))
