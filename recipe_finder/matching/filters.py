"""Recipe filters: store-level predicates and the in-memory equivalent.

``build_predicate`` is pushed into candidate retrieval. ``matches_filters`` is the
post-hoc check used where the store ranks results itself (full-text search).
"""

from typing import Any, Iterable, Optional

from sqlalchemy import and_, func, true
from sqlalchemy.sql.elements import ColumnElement

from ..models import Recipe
from ..schemas import RecipeFilters

LIKE_ESCAPE = "\\"


def _has_categories(filters: Optional[RecipeFilters]) -> bool:
    return bool(filters and filters.categories)


def categories_overlap(categories: Iterable[str]) -> ColumnElement[bool]:
    """Recipe shares at least one category with ``categories`` (any-of)."""
    return Recipe.categories.overlap(list(categories))


def filter_conditions(filters: Optional[RecipeFilters]) -> list[ColumnElement[bool]]:
    conditions: list[ColumnElement[bool]] = []
    if filters is None:
        return conditions
    if filters.vegan is not None:
        conditions.append(Recipe.vegan == filters.vegan)
    if _has_categories(filters):
        conditions.append(categories_overlap(filters.categories))
    return conditions


def build_predicate(
    filters: Optional[RecipeFilters] = None,
    *extra: ColumnElement[bool],
) -> ColumnElement[bool]:
    """AND of the filter conditions and any ``extra`` conditions; matches all if empty."""
    conditions = filter_conditions(filters) + list(extra)
    if not conditions:
        return true()
    if len(conditions) == 1:
        return conditions[0]
    return and_(*conditions)


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def ingredient_text_contains(name: str) -> ColumnElement[bool]:
    """Case-insensitive substring test over the recipe's joined ingredient lines."""
    joined = func.array_to_string(Recipe.ingredients, " ")
    return joined.ilike(f"%{escape_like(name)}%", escape=LIKE_ESCAPE)


def matches_filters(recipe: Any, filters: Optional[RecipeFilters]) -> bool:
    if filters is None:
        return True
    vegan_match = filters.vegan is None or recipe.vegan == filters.vegan
    category_match = not _has_categories(filters) or any(
        c in (recipe.categories or []) for c in filters.categories
    )
    return vegan_match and category_match
