"""Recipe search API router, one endpoint per matching strategy.

All endpoints take a JSON body and are rate limited per client IP.
"""

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from ..deps import get_finder
from ..matching.scoring import MatchResult
from ..schemas import (
    CategorySearchRequest,
    IngredientNameSearchRequest,
    IngredientSearchRequest,
    MatchSearchRequest,
    QuickSuggestionRequest,
    RecipeMatchOut,
    RecipeOut,
    RecipeRelevanceOut,
)
from ..services.recipe_search import RecipeFinder
from ..settings import settings

router = APIRouter(prefix="/recipes/search")
limiter = Limiter(key_func=get_remote_address)


def _match_to_out(result: MatchResult) -> RecipeMatchOut:
    return RecipeMatchOut(
        recipe=RecipeOut.model_validate(result.recipe),
        match_percentage=result.match_percentage,
        matching_ingredients_count=result.matching_count,
        total_ingredients_count=result.total_count,
        missing_ingredients=list(result.missing_ingredients),
    )


@router.post("/categories", response_model=list[RecipeOut])
@limiter.limit(settings.search_rate_limit)
def search_by_categories(
    request: Request,  # Required for rate limiter
    body: CategorySearchRequest,
    finder: RecipeFinder = Depends(get_finder),
):
    return finder.find_by_categories(body.categories, body.filters)


@router.post("/exact", response_model=list[RecipeOut])
@limiter.limit(settings.search_rate_limit)
def search_exact(
    request: Request,
    body: IngredientSearchRequest,
    finder: RecipeFinder = Depends(get_finder),
):
    """Recipes that need nothing beyond the available ingredients."""
    return [r.recipe for r in finder.exact_ingredients(body.available_ingredients, body.filters)]


@router.post("/match", response_model=list[RecipeMatchOut])
@limiter.limit(settings.search_rate_limit)
def search_by_match(
    request: Request,
    body: MatchSearchRequest,
    finder: RecipeFinder = Depends(get_finder),
):
    results = finder.match_by_percentage(
        body.available_ingredients, body.min_match_percentage, body.filters
    )
    return [_match_to_out(r) for r in results]


@router.post("/smart", response_model=list[RecipeMatchOut])
@limiter.limit(settings.search_rate_limit)
def search_smart(
    request: Request,
    body: MatchSearchRequest,
    finder: RecipeFinder = Depends(get_finder),
):
    results = finder.smart_match(
        body.available_ingredients, body.min_match_percentage, body.filters
    )
    return [_match_to_out(r) for r in results]


@router.post("/ingredients", response_model=list[RecipeOut])
@limiter.limit(settings.search_rate_limit)
def search_by_ingredient_names(
    request: Request,
    body: IngredientNameSearchRequest,
    finder: RecipeFinder = Depends(get_finder),
):
    return finder.search_by_ingredient_names(body.ingredient_names, body.filters)


@router.post("/full-text", response_model=list[RecipeRelevanceOut])
@limiter.limit(settings.search_rate_limit)
def search_full_text(
    request: Request,
    body: IngredientSearchRequest,
    finder: RecipeFinder = Depends(get_finder),
):
    """Relevance-ranked search. Filters are applied after the relevance cap."""
    hits = finder.full_text_search(body.available_ingredients, body.filters)
    return [
        RecipeRelevanceOut(recipe=RecipeOut.model_validate(h.recipe), relevance_score=h.relevance_score)
        for h in hits
    ]


@router.post("/quick", response_model=list[RecipeMatchOut])
@limiter.limit(settings.search_rate_limit)
def search_quick(
    request: Request,
    body: QuickSuggestionRequest,
    finder: RecipeFinder = Depends(get_finder),
):
    results = finder.quick_suggestions(body.available_ingredients, body.limit, body.filters)
    return [_match_to_out(r) for r in results]
