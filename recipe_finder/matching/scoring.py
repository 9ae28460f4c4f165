"""Match scoring of a recipe's ingredients against the ingredients on hand."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional, Sequence

from .normalize import DROP, EmptyPolicy, normalize_ingredients
from .synonyms import SynonymExpander


class MatchMode(str, Enum):
    # Available term must be a substring of the normalized requirement:
    # "soda" covers "bicarbonate of soda", "olive oil" does not cover "oil".
    CONTAINS = "contains"
    # Either side may contain the other: "olive oil" also covers "oil".
    BIDIRECTIONAL = "bidirectional"


@dataclass(frozen=True)
class MatchResult:
    recipe: Any
    match_percentage: int
    matching_count: int
    total_count: int
    missing_ingredients: list[str] = field(default_factory=list)


def match_percentage(matching_count: int, total_count: int) -> int:
    """Rounded share of matching ingredients, half up; 0 for an empty recipe."""
    if total_count <= 0:
        return 0
    return (200 * matching_count + total_count) // (2 * total_count)


def prepare_available(available: Iterable[str]) -> list[str]:
    """Lowercase and trim available terms, dropping blanks and duplicates.

    A blank term is a substring of everything, so it is never kept.
    """
    seen: dict[str, None] = {}
    for term in available:
        if term is None:
            continue
        t = term.lower().strip()
        if t:
            seen.setdefault(t, None)
    return list(seen)


def ingredient_matches(required: str, available: Sequence[str], mode: MatchMode) -> bool:
    if mode == MatchMode.BIDIRECTIONAL:
        return any(a in required or required in a for a in available)
    return any(a in required for a in available)


class MatchScorer:
    """Scores recipes against an available-ingredient set.

    The synonym table is injected at construction and only used by
    ``expand_available`` (smart matching).
    """

    def __init__(
        self,
        synonyms: Optional[SynonymExpander] = None,
        empty_policy: EmptyPolicy = DROP,
    ):
        self.synonyms = synonyms or SynonymExpander()
        self.empty_policy = empty_policy

    def required_ingredients(self, recipe: Any) -> list[str]:
        return list(normalize_ingredients(recipe.ingredients or [], self.empty_policy))

    def expand_available(self, available: Iterable[str]) -> list[str]:
        """Available terms widened with their known aliases."""
        return sorted(self.synonyms.expand_all(prepare_available(available)))

    def score(
        self,
        recipe: Any,
        available: Iterable[str],
        mode: MatchMode = MatchMode.CONTAINS,
    ) -> MatchResult:
        return self._score_prepared(recipe, prepare_available(available), mode)

    def score_all(
        self,
        recipes: Iterable[Any],
        available: Iterable[str],
        mode: MatchMode = MatchMode.CONTAINS,
    ) -> list[MatchResult]:
        terms = prepare_available(available)
        return [self._score_prepared(r, terms, mode) for r in recipes]

    def _score_prepared(self, recipe: Any, terms: list[str], mode: MatchMode) -> MatchResult:
        required = self.required_ingredients(recipe)
        if not required:
            return MatchResult(recipe=recipe, match_percentage=0, matching_count=0, total_count=0)

        missing = [req for req in required if not ingredient_matches(req, terms, mode)]
        matching = len(required) - len(missing)
        return MatchResult(
            recipe=recipe,
            match_percentage=match_percentage(matching, len(required)),
            matching_count=matching,
            total_count=len(required),
            missing_ingredients=missing,
        )
