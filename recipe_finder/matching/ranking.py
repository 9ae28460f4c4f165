"""Thresholding and ordering of scored recipes."""

from typing import Iterable

from .scoring import MatchResult

EXACT_MATCH_PERCENTAGE = 100


def rank(results: Iterable[MatchResult], min_percentage: int) -> list[MatchResult]:
    """Keep results at or above ``min_percentage``, best first.

    The sort is stable, so equal percentages keep candidate-retrieval order.
    """
    kept = [r for r in results if r.match_percentage >= min_percentage]
    return sorted(kept, key=lambda r: r.match_percentage, reverse=True)


def exact_matches(results: Iterable[MatchResult]) -> list[MatchResult]:
    """Recipes whose every parsed ingredient is covered.

    Empty recipes score 0 and never pass.
    """
    return rank(results, EXACT_MATCH_PERCENTAGE)


def quick_suggestions(results: Iterable[MatchResult], limit: int) -> list[MatchResult]:
    """Recipes using at least one available ingredient, shortest ingredient list first.

    Ties keep candidate-retrieval order; the list is cut to ``limit``.
    """
    if limit <= 0:
        return []
    usable = [r for r in results if r.matching_count >= 1]
    usable.sort(key=lambda r: r.total_count)
    return usable[:limit]
