"""Density scoring and per-chapter verdicts."""
from tolstoi.scoring.classifier import (
    ChapterClassifier,
    ChapterReport,
    DensityScorer,
    FakeDensityScorer,
    Verdict,
    classify,
)
from tolstoi.scoring.density import (
    NO_MATCH_DISTANCE,
    avg_nearest_term_distance,
    count_terms,
    term_density,
)

__all__ = [
    "NO_MATCH_DISTANCE",
    "ChapterClassifier",
    "ChapterReport",
    "DensityScorer",
    "FakeDensityScorer",
    "Verdict",
    "avg_nearest_term_distance",
    "classify",
    "count_terms",
    "term_density",
]
