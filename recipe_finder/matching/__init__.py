from .normalize import normalize_ingredient, normalize_ingredients, UNIT_WORDS
from .synonyms import SynonymExpander, DEFAULT_SYNONYMS
from .scoring import MatchMode, MatchResult, MatchScorer, match_percentage
from .ranking import rank, exact_matches, quick_suggestions

__all__ = [
    "normalize_ingredient", "normalize_ingredients", "UNIT_WORDS",
    "SynonymExpander", "DEFAULT_SYNONYMS",
    "MatchMode", "MatchResult", "MatchScorer", "match_percentage",
    "rank", "exact_matches", "quick_suggestions",
]
