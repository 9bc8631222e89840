"""
Term density scoring.

Combines how often a vocabulary's terms occur in a chapter with how close
together they occur:

    density = term_count / (token_count * avg_nearest_term_distance)

avg_nearest_term_distance is the sum of the gaps between consecutive matching
positions divided by the number of matches. Repeated mentions a few words
apart give a small distance and therefore a high density.

All arithmetic is single precision (numpy.float32).

Edge cases (none of them raise):
- no matching token: the distance is NO_MATCH_DISTANCE, the density is 0.0
- a single match: the gap sum is taken as 1
- no tokens at all: the density is 0.0
"""

from __future__ import annotations

from collections.abc import Sequence, Set
from typing import Final

import numpy as np
from numpy.typing import NDArray

# =============================================================================
# Module Constants
# =============================================================================

# Arbitrarily large distance so that a chapter without matches scores ~0
NO_MATCH_DISTANCE: Final[np.float32] = np.float32(1_000_000.0)

# Gap sum used when there are fewer than two matches
MIN_GAP_SUM: Final[int] = 1

ZERO_DENSITY: Final[np.float32] = np.float32(0.0)


# =============================================================================
# Helpers
# =============================================================================


def match_positions(tokens: Sequence[str], terms: Set[str]) -> NDArray[np.intp]:
    """Return the 0-based positions of tokens that are in terms, ascending."""
    mask = np.fromiter(
        (token in terms for token in tokens), dtype=bool, count=len(tokens)
    )
    return np.flatnonzero(mask)


def count_terms(tokens: Sequence[str], terms: Set[str]) -> int:
    """Count tokens that exactly match a term, with repetition.

    Args:
        tokens: Tokenized chapter.
        terms: Term set (case-sensitive).

    Returns:
        Number of matching tokens.
    """
    return sum(1 for token in tokens if token in terms)


def avg_nearest_term_distance(
    tokens: Sequence[str], terms: Set[str]
) -> np.float32:
    """Average gap between consecutive matching tokens.

    Args:
        tokens: Tokenized chapter.
        terms: Term set (case-sensitive).

    Returns:
        Sum of gaps between consecutive matches (1 if that sum is 0) divided by
        the number of matches, or NO_MATCH_DISTANCE when nothing matches.

    Examples:
        >>> float(avg_nearest_term_distance(["bar", "foo", "foo", "bar"], {"bar"}))
        1.5
    """
    positions = match_positions(tokens, terms)
    if positions.size == 0:
        return NO_MATCH_DISTANCE

    gap_sum = int(np.diff(positions).sum()) or MIN_GAP_SUM
    return np.float32(gap_sum) / np.float32(positions.size)


# =============================================================================
# Density
# =============================================================================


def term_density(tokens: Sequence[str], terms: Set[str]) -> np.float32:
    """Compute the density of terms in a tokenized chapter.

    Args:
        tokens: Tokenized chapter.
        terms: Term set (case-sensitive). May be empty.

    Returns:
        Non-negative float32 density; 0.0 for a chapter without tokens.

    Examples:
        >>> float(term_density(["foo", "bar", "fo", "baar"], {"foo", "fo"}))
        0.5
    """
    if not tokens:
        return ZERO_DENSITY

    term_count = np.float32(count_terms(tokens, terms))
    token_count = np.float32(len(tokens))
    return term_count / (token_count * avg_nearest_term_distance(tokens, terms))
