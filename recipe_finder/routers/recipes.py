"""Recipes CRUD API router.

Endpoints:
- GET /api/recipes - List recipes
- POST /api/recipes - Create recipe
- GET /api/recipes/{id} - Get recipe
- PATCH /api/recipes/{id} - Update supplied fields
- DELETE /api/recipes/{id} - Delete recipe
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from ..deps import get_store
from ..schemas import RecipeCreate, RecipeOut, RecipePatch
from ..services.store import RecipeStore

router = APIRouter()
logger = logging.getLogger("recipe_finder.recipes")


@router.get("/recipes", response_model=list[RecipeOut])
def list_recipes(
    store: RecipeStore = Depends(get_store),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    """List recipes in id order."""
    return store.list_recipes(limit=limit, offset=offset)


@router.post("/recipes", response_model=RecipeOut, status_code=status.HTTP_201_CREATED)
def create_recipe(payload: RecipeCreate, store: RecipeStore = Depends(get_store)):
    return store.create(payload.model_dump())


@router.get("/recipes/{recipe_id}", response_model=RecipeOut)
def get_recipe(recipe_id: int, store: RecipeStore = Depends(get_store)):
    return store.get(recipe_id)


@router.patch("/recipes/{recipe_id}", response_model=RecipeOut)
def update_recipe(recipe_id: int, payload: RecipePatch, store: RecipeStore = Depends(get_store)):
    """Update a recipe. Fields left out of the body are untouched."""
    update_data = payload.model_dump(exclude_unset=True)
    logger.info(f"Updating recipe {recipe_id} fields: {sorted(update_data)}")
    return store.update(recipe_id, update_data)


@router.delete("/recipes/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(recipe_id: int, store: RecipeStore = Depends(get_store)):
    store.delete(recipe_id)
