"""
Risk categories reported by the content rater.

The category set is closed: every trigger, every combination bonus,
and every key of the ``matches`` output map is one of these seven
members.  The string values are part of the output contract and must
not be reworded.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List


class Category(str, Enum):
    ADULT_SUGGESTIVE = "Adult/Suggestive"
    VIOLENCE = "Violence"
    SELF_HARM_TERRORISM = "Self-harm/Terrorism"
    IP_BRANDS = "IP/Brands"
    REAL_PERSON = "Real Person"
    BODY_DETAIL = "Body-detail"
    HATE_HARASSMENT = "Hate/Harassment"

    def __str__(self) -> str:
        return self.value


# ------------------------------------------------------------------
# Declaration order doubles as the tie-break order when two
# categories end up with the same weighted total.
# ------------------------------------------------------------------

CATEGORY_ORDER: List[Category] = list(Category)


def empty_matches() -> Dict[Category, List[str]]:
    """Fresh ``{category: []}`` map with all seven keys present."""
    return {cat: [] for cat in CATEGORY_ORDER}


def empty_totals() -> Dict[Category, float]:
    return {cat: 0.0 for cat in CATEGORY_ORDER}
