"""FastAPI dependencies for the recipe finder API.

Provides:
- Database session dependency
- Recipe store bound to the request's session
- Recipe finder with scorer and limits taken from settings
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from .db import get_db
from .matching.scoring import MatchScorer
from .matching.synonyms import SynonymExpander
from .services.recipe_search import RecipeFinder
from .services.store import RecipeStore
from .settings import settings

_scorer = MatchScorer(SynonymExpander(), empty_policy=settings.empty_ingredient_policy)


def get_store(db: Session = Depends(get_db)) -> RecipeStore:
    return RecipeStore(db, text_search_config=settings.text_search_config)


def get_finder(store: RecipeStore = Depends(get_store)) -> RecipeFinder:
    return RecipeFinder(
        store,
        _scorer,
        relevance_limit=settings.relevance_search_limit,
        ingredient_name_limit=settings.ingredient_name_search_limit,
        quick_default_limit=settings.quick_suggestions_default_limit,
    )
