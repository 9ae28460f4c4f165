"""Errors raised by the recipe finder.

All store-originated failures surface as ``QueryFailedError``; a lookup of a
missing recipe surfaces as ``RecipeNotFoundError`` so callers can tell the two apart.
"""


class RecipeFinderError(Exception):
    """Base class for recipe finder errors."""


class QueryFailedError(RecipeFinderError):
    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation} failed: {message}")


class RecipeNotFoundError(RecipeFinderError):
    def __init__(self, recipe_id: int):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe with ID {recipe_id} not found.")
