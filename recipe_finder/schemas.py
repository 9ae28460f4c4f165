"""Pydantic schemas for the recipe finder API.

Request/response models for:
- Recipes (CRUD)
- Search requests, one per matching strategy
- Match and relevance results
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Recipe ---

class NutritionalInfo(BaseModel):
    fat: str
    carbohydrates: str
    protein: str


class RecipeCreate(BaseModel):
    recipe_name: str = Field(..., min_length=1, max_length=200)
    servings: str
    description: str
    ingredients: list[str]
    procedure: str
    estimated_time: str
    calories: str
    nutritional_info: NutritionalInfo
    vegan: bool
    categories: list[str] = []


class RecipePatch(BaseModel):
    recipe_name: Optional[str] = Field(None, min_length=1, max_length=200)
    servings: Optional[str] = None
    description: Optional[str] = None
    ingredients: Optional[list[str]] = None
    procedure: Optional[str] = None
    estimated_time: Optional[str] = None
    calories: Optional[str] = None
    nutritional_info: Optional[NutritionalInfo] = None
    vegan: Optional[bool] = None
    categories: Optional[list[str]] = None

    @field_validator("*")
    @classmethod
    def reject_null(cls, v):
        # Omit a field to leave it unchanged; every column is NOT NULL.
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class RecipeOut(BaseModel):
    id: int
    recipe_name: str
    servings: str
    description: str
    ingredients: list[str]
    procedure: str
    estimated_time: str
    calories: str
    nutritional_info: dict
    vegan: bool
    categories: list[str]
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# --- Filters ---

class RecipeFilters(BaseModel):
    """Optional constraints; an absent field means no constraint."""
    vegan: Optional[bool] = None
    categories: Optional[list[str]] = None


# --- Search requests ---

class CategorySearchRequest(BaseModel):
    categories: list[str]
    filters: Optional[RecipeFilters] = None


class IngredientSearchRequest(BaseModel):
    available_ingredients: list[str]
    filters: Optional[RecipeFilters] = None


class MatchSearchRequest(IngredientSearchRequest):
    min_match_percentage: int = Field(..., ge=0, le=100)


class IngredientNameSearchRequest(BaseModel):
    ingredient_names: list[str]
    filters: Optional[RecipeFilters] = None


class QuickSuggestionRequest(IngredientSearchRequest):
    limit: Optional[int] = Field(None, ge=1, le=100)  # settings default when omitted


# --- Search results ---

class RecipeMatchOut(BaseModel):
    recipe: RecipeOut
    match_percentage: int
    matching_ingredients_count: int
    total_ingredients_count: int
    missing_ingredients: list[str]


class RecipeRelevanceOut(BaseModel):
    recipe: RecipeOut
    relevance_score: float
