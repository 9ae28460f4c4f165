"""SQLAlchemy ORM models for the recipe finder.

Tables:
- recipes: Recipe catalog. Ingredients are stored as raw text lines
  ("2 tbsp olive oil"); quantity, unit and name are only separated at query time.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    String,
    DateTime,
    Text,
    Integer,
    Boolean,
    Index,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from sqlalchemy.dialects.postgresql import ARRAY, JSONB

from .db import Base


class Recipe(Base):
    """A recipe in the catalog."""
    __tablename__ = "recipes"
    __table_args__ = (
        Index("ix_recipes_vegan", "vegan"),
        Index("ix_recipes_categories", "categories", postgresql_using="gin"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    recipe_name: Mapped[str] = mapped_column(String(200), nullable=False)
    servings: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # Raw ingredient lines, in recipe order
    ingredients: Mapped[list[str]] = mapped_column(
        ARRAY(Text), nullable=False, default=list
    )

    procedure: Mapped[str] = mapped_column(Text, nullable=False)
    estimated_time: Mapped[str] = mapped_column(Text, nullable=False)
    calories: Mapped[str] = mapped_column(Text, nullable=False)

    # {"fat": "...", "carbohydrates": "...", "protein": "..."}
    nutritional_info: Mapped[dict] = mapped_column(
        JSONB, nullable=False, server_default=text("'{}'")
    )

    vegan: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    categories: Mapped[list[str]] = mapped_column(
        ARRAY(String(80)), nullable=False, default=list
    )

    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<Recipe {self.id} {self.recipe_name!r}>"
