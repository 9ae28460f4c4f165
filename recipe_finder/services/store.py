"""SQLAlchemy-backed recipe store.

Two read capabilities feed the matching engine:
- ``find_many``: structured filtered retrieval (candidate sets)
- ``text_relevance_search``: PostgreSQL full-text search ranked by ``ts_rank``

plus plain CRUD. Every SQLAlchemy failure is logged with its operation name and
re-raised as ``QueryFailedError``; nothing is retried here.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

from sqlalchemy import cast, func, select, text
from sqlalchemy.dialects.postgresql import REGCONFIG
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from ..errors import QueryFailedError, RecipeNotFoundError
from ..models import Recipe

logger = logging.getLogger("recipe_finder.store")


def ingredient_document(config: str = "english"):
    """tsvector over all ingredient lines of a recipe joined by spaces."""
    return func.to_tsvector(cast(config, REGCONFIG), func.array_to_string(Recipe.ingredients, " "))


def text_relevance_statement(query: str, limit: int, config: str = "english"):
    document = ingredient_document(config)
    tsquery = func.websearch_to_tsquery(cast(config, REGCONFIG), query)
    relevance = func.ts_rank(document, tsquery).label("relevance_score")
    return (
        select(Recipe, relevance)
        .where(document.op("@@")(tsquery))
        .order_by(relevance.desc(), Recipe.id)
        .limit(limit)
    )


class RecipeStore:
    def __init__(self, db: Session, text_search_config: str = "english"):
        self.db = db
        self.text_search_config = text_search_config

    @contextmanager
    def _operation(self, name: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Store operation {name} failed: {e}")
            raise QueryFailedError(name, str(e)) from e

    # --- Reads ---

    def find_many(self, predicate: ColumnElement[bool], limit: Optional[int] = None) -> list[Recipe]:
        """Recipes satisfying ``predicate``, in id order."""
        stmt = select(Recipe).where(predicate).order_by(Recipe.id)
        if limit is not None:
            stmt = stmt.limit(limit)
        with self._operation("find_many"):
            return list(self.db.scalars(stmt).all())

    def text_relevance_search(self, query: str, limit: int) -> list[tuple[Recipe, float]]:
        """At most ``limit`` recipes whose ingredient text matches ``query``, most relevant first."""
        stmt = text_relevance_statement(query, limit, self.text_search_config)
        with self._operation("text_relevance_search"):
            rows = self.db.execute(stmt).all()
        return [(row[0], float(row[1])) for row in rows]

    def get(self, recipe_id: int, operation: str = "get_recipe") -> Recipe:
        with self._operation(operation):
            recipe = self.db.get(Recipe, recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe

    def list_recipes(self, limit: int = 50, offset: int = 0) -> Sequence[Recipe]:
        stmt = select(Recipe).order_by(Recipe.id).offset(offset).limit(limit)
        with self._operation("list_recipes"):
            return self.db.scalars(stmt).all()

    def ping(self) -> bool:
        with self._operation("ping"):
            self.db.execute(text("SELECT 1"))
        return True

    # --- Writes ---

    def create(self, data: dict[str, Any]) -> Recipe:
        recipe = Recipe(**data)
        with self._operation("create_recipe"):
            self.db.add(recipe)
            self.db.commit()
            self.db.refresh(recipe)
        logger.info(f"Created recipe {recipe.id}")
        return recipe

    def update(self, recipe_id: int, data: dict[str, Any]) -> Recipe:
        """Apply only the supplied fields."""
        recipe = self.get(recipe_id, "update_recipe")
        for field, value in data.items():
            setattr(recipe, field, value)
        with self._operation("update_recipe"):
            self.db.commit()
            self.db.refresh(recipe)
        return recipe

    def delete(self, recipe_id: int) -> Recipe:
        recipe = self.get(recipe_id, "delete_recipe")
        with self._operation("delete_recipe"):
            self.db.delete(recipe)
            self.db.commit()
        logger.info(f"Deleted recipe {recipe_id}")
        return recipe
