"""String similarity utilities for "did you mean?" suggestions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from namesuggest.infrastructure.config import (
    DEFAULT_CONFIG,
    MatchConfig,
    default_threshold,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "find_best_match",
    "find_similar_names",
    "lev_distance",
    "sort_by_words",
]

logger = structlog.get_logger()


def lev_distance(a: str, b: str) -> int:
    """Calculate the Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, substitutions) to transform a into b.
    Characters are compared as code points, so a non-ASCII character
    counts as a single edit unit.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The edit distance between the strings.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Single working row, updated in place
    row = list(range(len(b) + 1))

    for i, ca in enumerate(a):
        # Value of row[j] before this pass (the diagonal predecessor)
        diagonal = i
        row[0] = i + 1

        for j, cb in enumerate(b):
            above = row[j + 1]
            if ca == cb:
                row[j + 1] = diagonal
            else:
                row[j + 1] = min(diagonal, above, row[j]) + 1
            diagonal = above

    return row[-1]


def sort_by_words(name: str, separator: str = "_") -> str:
    """Normalize a name by sorting its separator-delimited words.

    Args:
        name: Name to normalize.
        separator: Word separator.

    Returns:
        The words of name in sorted order, joined by separator.
    """
    return separator.join(sorted(name.split(separator)))


def find_best_match(
    candidates: Iterable[str],
    lookup: str,
    threshold: int | None = None,
    *,
    config: MatchConfig | None = None,
) -> str | None:
    """Find the best match for a name among the given candidates.

    Priority of matches:

    1. Exact case-insensitive match.
    2. Smallest edit distance within threshold (earliest candidate wins ties).
    3. Same words in a different order.

    As a loose rule to avoid obviously wrong suggestions, the threshold
    defaults to about one third of the lookup length.

    Args:
        candidates: Names to choose from. Consumed once.
        lookup: The (possibly misspelled) name to match.
        threshold: Maximum edit distance for tier 2.
        config: Match settings (defaults to DEFAULT_CONFIG).

    Returns:
        The matching candidate exactly as supplied, or None.
    """
    if config is None:
        config = DEFAULT_CONFIG

    names = tuple(candidates)
    if threshold is None:
        threshold = default_threshold(lookup, config)

    # 1. Exact case insensitive match
    folded = lookup.upper()
    for candidate in names:
        if candidate.upper() == folded:
            logger.debug("best_match_exact", lookup=lookup, candidate=candidate)
            return candidate

    # 2. Levenshtein distance match
    best: tuple[str, int] | None = None
    for candidate in names:
        distance = lev_distance(lookup, candidate)
        if distance > threshold:
            continue
        if best is None or distance < best[1]:
            best = (candidate, distance)

    if best is not None:
        logger.debug(
            "best_match_distance",
            lookup=lookup,
            candidate=best[0],
            distance=best[1],
            threshold=threshold,
        )
        return best[0]

    # 3. Sorted word match
    match = _find_match_by_sorted_words(names, lookup, config.word_separator)
    if match is not None:
        logger.debug("best_match_words", lookup=lookup, candidate=match)
    else:
        logger.debug("best_match_none", lookup=lookup, threshold=threshold)
    return match


def _find_match_by_sorted_words(
    names: tuple[str, ...], lookup: str, separator: str
) -> str | None:
    """Return the first name made of the same words as lookup."""
    target = sort_by_words(lookup, separator)
    for candidate in names:
        if sort_by_words(candidate, separator) == target:
            return candidate
    return None


def find_similar_names(
    target: str,
    candidates: Iterable[str],
    *,
    max_distance: int = 3,
    max_suggestions: int = 3,
) -> list[str]:
    """Find similar names from a list of candidates.

    Uses case-insensitive Levenshtein distance to rank candidates.

    Args:
        target: The string to match against.
        candidates: Possible matches.
        max_distance: Maximum edit distance to consider a match.
        max_suggestions: Maximum number of suggestions to return.

    Returns:
        List of similar names, closest first. Equal distances keep the
        order in which candidates were supplied.
    """
    folded = target.lower()
    scored = [(name, lev_distance(folded, name.lower())) for name in candidates]
    within_threshold = [(name, dist) for name, dist in scored if dist <= max_distance]

    # Stable sort keeps supplied order for ties
    within_threshold.sort(key=lambda x: x[1])

    return [name for name, _ in within_threshold[:max_suggestions]]
