"""Synonym expansion for smart matching.

Maps a canonical ingredient name to the aliases it is commonly written as, so
that "onion" in the pantry also covers "red onion" or "onions" in a recipe.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

DEFAULT_SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "onion": ("onions", "red onion", "white onion"),
    "garlic": ("garlic cloves", "garlic paste"),
    "tomato": ("tomatoes", "canned tomatoes"),
})


class SynonymExpander:
    """Read-only lookup over a canonical-name -> aliases table."""

    def __init__(self, synonyms: Optional[Mapping[str, Iterable[str]]] = None):
        table = DEFAULT_SYNONYMS if synonyms is None else synonyms
        self._synonyms: Mapping[str, frozenset[str]] = MappingProxyType({
            key.lower().strip(): frozenset(alias.lower().strip() for alias in aliases)
            for key, aliases in table.items()
        })

    def aliases(self, term: str) -> frozenset[str]:
        return self._synonyms.get(term.lower().strip(), frozenset())

    def expand(self, term: str) -> set[str]:
        """Return ``{term} | aliases(term)``; unknown terms expand to themselves."""
        key = term.lower().strip()
        return {key} | self.aliases(key)

    def expand_all(self, terms: Iterable[str]) -> set[str]:
        expanded: set[str] = set()
        for term in terms:
            expanded |= self.expand(term)
        return expanded
