"""Helpers for the store-ranked full-text strategy.

Ranking is done by the store; this module only builds the query text and applies
the structured filters after retrieval. The store's result cap is applied
before these filters, so a filtered search can return fewer rows than exist.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..schemas import RecipeFilters
from .filters import matches_filters

_QUOTE_RE = re.compile(r'["\s]+')


@dataclass(frozen=True)
class RelevanceHit:
    recipe: Any
    relevance_score: float


def websearch_query(terms: Iterable[str]) -> str:
    """Join terms with ``or`` for ``websearch_to_tsquery``.

    Every term is quoted so operator syntax inside a term (a leading ``-``, a bare
    ``or``) is read as text: ["olive oil", "salt"] -> '"olive oil" or "salt"'.
    """
    parts = []
    for term in terms:
        cleaned = _QUOTE_RE.sub(" ", term or "").strip()
        if not cleaned:
            continue
        parts.append(f'"{cleaned}"')
    return " or ".join(parts)


def apply_post_filters(hits: Iterable[RelevanceHit], filters: Optional[RecipeFilters]) -> list[RelevanceHit]:
    return [h for h in hits if matches_filters(h.recipe, filters)]
