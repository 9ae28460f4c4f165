"""Ingredient line normalization.

Turns a raw ingredient line ("2 tbsp garlic cloves, minced") into a bare,
lowercase token ("garlic cloves") that can be compared by substring.

Stages run in a fixed order, each one working on the previous one's output:
lowercase, drop parentheticals, cut at the first comma, drop quantities,
drop unit words, collapse whitespace.
"""

import re
from typing import Iterable, Iterator, Literal

EmptyPolicy = Literal["drop", "fallback"]

DROP: EmptyPolicy = "drop"
FALLBACK: EmptyPolicy = "fallback"

UNIT_WORDS = (
    "g", "kg", "ml", "l", "oz", "lb",
    "tbsp", "tsp", "cup", "cups",
    "pinch", "handful", "clove",
    "large", "medium", "small",
    "can", "cans",
)

FRACTION_GLYPHS = "½⅓⅔¼¾⅕⅖⅗⅘⅙⅚⅐⅛⅜⅝⅞⅑⅒"

_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
_NUMBER = rf"(?:\d+(?:\.\d+)?|[{FRACTION_GLYPHS}])"
# "2", "1.5", "1/2", "1-2", "1½", "½"
_QUANTITY_RE = re.compile(rf"{_NUMBER}(?:\s*[/⁄-]?\s*{_NUMBER})*")
_UNIT_RE = re.compile(r"\b(?:" + "|".join(re.escape(u) for u in UNIT_WORDS) + r")\b")
_WHITESPACE_RE = re.compile(r"\s+")

# Left behind by "200g / 7oz" style quantities
_EDGE_CHARS = " /-"


def _collapse(s: str) -> str:
    return _WHITESPACE_RE.sub(" ", s).strip()


def normalize_ingredient(raw: str, empty_policy: EmptyPolicy = DROP) -> str:
    """
    Normalize one ingredient line to a comparable name token.

    Rules:
    1. Lowercase
    2. Remove parentheticals ("flour (sifted)" -> "flour ")
    3. Keep only the text before the first comma ("onion, diced" -> "onion")
    4. Remove quantities: digits, decimals, ranges, fractions and fraction glyphs
    5. Remove whole-word unit words (tbsp, cups, large, ...)
    6. Collapse whitespace and trim

    If nothing is left, ``empty_policy`` decides: ``"drop"`` returns "" (the line
    is unmatchable), ``"fallback"`` returns the lowercased raw line.
    """
    if not raw:
        return ""

    # 1. Lowercase
    s = raw.lower()

    # 2. Parentheticals
    s = _PARENTHETICAL_RE.sub("", s)

    # 3. Trailing comma clauses ("minced", "to taste")
    s = s.split(",", 1)[0]

    # 4. Quantities
    s = _QUANTITY_RE.sub(" ", s)

    # 5. Units
    s = _UNIT_RE.sub(" ", s)

    # 6. Whitespace
    s = _collapse(s).strip(_EDGE_CHARS)
    s = _collapse(s)

    if not s and empty_policy == FALLBACK:
        return _collapse(raw.lower())
    return s


def normalize_ingredients(lines: Iterable[str], empty_policy: EmptyPolicy = DROP) -> Iterator[str]:
    """Lazily normalize ingredient lines, skipping the ones that end up empty."""
    for line in lines:
        token = normalize_ingredient(line, empty_policy)
        if token:
            yield token
