"""Recipe discovery strategies.

Each strategy takes the ingredients (or categories) a user has, plus optional
filters, and returns recipes:

- categories:   any-of category lookup, pushed to the store
- exact:        every parsed ingredient covered (100% under CONTAINS matching)
- match:        percentage threshold, BIDIRECTIONAL substring matching
- smart:        percentage threshold over synonym-expanded terms, CONTAINS matching
- ingredients:  every name found in the ingredient text (store-side ILIKE)
- full-text:    store-ranked relevance search, filters applied afterwards
- quick:        at least one ingredient used, shortest recipes first

Empty inputs return ``[]`` without touching the store.
"""

import logging
from typing import Iterable, Optional, Sequence

from ..matching.filters import build_predicate, categories_overlap, ingredient_text_contains
from ..matching.ranking import exact_matches, quick_suggestions, rank
from ..matching.relevance import RelevanceHit, apply_post_filters, websearch_query
from ..matching.scoring import MatchMode, MatchResult, MatchScorer, prepare_available
from ..models import Recipe
from ..schemas import RecipeFilters
from .store import RecipeStore

logger = logging.getLogger("recipe_finder.search")


class RecipeFinder:
    def __init__(
        self,
        store: RecipeStore,
        scorer: Optional[MatchScorer] = None,
        *,
        relevance_limit: int = 100,
        ingredient_name_limit: int = 50,
        quick_default_limit: int = 10,
    ):
        self.store = store
        self.scorer = scorer or MatchScorer()
        self.relevance_limit = relevance_limit
        self.ingredient_name_limit = ingredient_name_limit
        self.quick_default_limit = quick_default_limit

    def _candidates(self, filters: Optional[RecipeFilters]) -> list[Recipe]:
        return self.store.find_many(build_predicate(filters))

    def _log(self, strategy: str, candidates: int, results: int) -> None:
        logger.info(f"{strategy}: {candidates} candidates -> {results} results")

    def find_by_categories(
        self, categories: Sequence[str], filters: Optional[RecipeFilters] = None
    ) -> list[Recipe]:
        if not categories:
            logger.debug("find_by_categories: no categories given")
            return []
        recipes = self.store.find_many(build_predicate(filters, categories_overlap(categories)))
        self._log("find_by_categories", len(recipes), len(recipes))
        return recipes

    def exact_ingredients(
        self, available: Iterable[str], filters: Optional[RecipeFilters] = None
    ) -> list[MatchResult]:
        """Recipes that can be made entirely from ``available``.

        Same code path as ``match_by_percentage`` at 100%, but with one-way
        (CONTAINS) matching.
        """
        terms = prepare_available(available)
        if not terms:
            logger.debug("exact_ingredients: no available ingredients")
            return []
        candidates = self._candidates(filters)
        results = exact_matches(self.scorer.score_all(candidates, terms, MatchMode.CONTAINS))
        self._log("exact_ingredients", len(candidates), len(results))
        return results

    def match_by_percentage(
        self,
        available: Iterable[str],
        min_match_percentage: int,
        filters: Optional[RecipeFilters] = None,
    ) -> list[MatchResult]:
        terms = prepare_available(available)
        if not terms:
            logger.debug("match_by_percentage: no available ingredients")
            return []
        candidates = self._candidates(filters)
        scored = self.scorer.score_all(candidates, terms, MatchMode.BIDIRECTIONAL)
        results = rank(scored, min_match_percentage)
        self._log("match_by_percentage", len(candidates), len(results))
        return results

    def smart_match(
        self,
        available: Iterable[str],
        min_match_percentage: int,
        filters: Optional[RecipeFilters] = None,
    ) -> list[MatchResult]:
        terms = prepare_available(available)
        if not terms:
            logger.debug("smart_match: no available ingredients")
            return []
        expanded = self.scorer.expand_available(terms)
        candidates = self._candidates(filters)
        scored = self.scorer.score_all(candidates, expanded, MatchMode.CONTAINS)
        results = rank(scored, min_match_percentage)
        self._log("smart_match", len(candidates), len(results))
        return results

    def search_by_ingredient_names(
        self, names: Sequence[str], filters: Optional[RecipeFilters] = None
    ) -> list[Recipe]:
        """Recipes whose ingredient text contains every one of ``names``."""
        names = [n.strip() for n in names if n and n.strip()]
        if not names:
            logger.debug("search_by_ingredient_names: no names given")
            return []
        conditions = [ingredient_text_contains(n) for n in names]
        recipes = self.store.find_many(
            build_predicate(filters, *conditions), limit=self.ingredient_name_limit
        )
        self._log("search_by_ingredient_names", len(recipes), len(recipes))
        return recipes

    def full_text_search(
        self, available: Iterable[str], filters: Optional[RecipeFilters] = None
    ) -> list[RelevanceHit]:
        """Store-ranked search; filters run after the store's cap."""
        query = websearch_query(available)
        if not query:
            logger.debug("full_text_search: no available ingredients")
            return []
        rows = self.store.text_relevance_search(query, self.relevance_limit)
        hits = [RelevanceHit(recipe=recipe, relevance_score=score) for recipe, score in rows]
        results = apply_post_filters(hits, filters)
        self._log("full_text_search", len(hits), len(results))
        return results

    def quick_suggestions(
        self,
        available: Iterable[str],
        limit: Optional[int] = None,
        filters: Optional[RecipeFilters] = None,
    ) -> list[MatchResult]:
        terms = prepare_available(available)
        if not terms:
            logger.debug("quick_suggestions: no available ingredients")
            return []
        candidates = self._candidates(filters)
        scored = self.scorer.score_all(candidates, terms, MatchMode.CONTAINS)
        results = quick_suggestions(scored, limit if limit is not None else self.quick_default_limit)
        self._log("quick_suggestions", len(candidates), len(results))
        return results
