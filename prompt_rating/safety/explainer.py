"""
Turns a ``ScoreSheet`` into the human-facing parts of a rating:
the 1–5 band, the ranked category list, the cleaned match lists,
a single short reason, and the capped suggestion list.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional, Sequence

from .categories import CATEGORY_ORDER, Category
from .scorer import ReasonCandidate

MAX_SCORE = 100
MAX_MATCHES_PER_CATEGORY = 3
MAX_SUGGESTIONS = 6
REASON_MAX_LENGTH = 120
_ELLIPSIS = "..."

# (lower bound, rating), checked top down.
RATING_BANDS = ((70, 5), (50, 4), (30, 3), (15, 2))

_SOURCE_PRIORITY = {"combo": 0, "trigger": 1}


def final_score(raw: float) -> int:
    """Round half up, then clamp to 0–100."""
    rounded = math.floor(raw + 0.5)
    return max(0, min(MAX_SCORE, rounded))


def to_rating(score: int) -> int:
    for lower, rating in RATING_BANDS:
        if score >= lower:
            return rating
    return 1


def clean_matches(found: Iterable[str]) -> List[str]:
    """Trim, drop blanks, dedupe (case-sensitive), keep the first three."""
    unique: List[str] = []
    for item in found:
        item = item.strip()
        if item and item not in unique:
            unique.append(item)
            if len(unique) == MAX_MATCHES_PER_CATEGORY:
                break
    return unique


def rank_categories(
    matches: Dict[Category, List[str]],
    totals: Dict[Category, float],
) -> List[Category]:
    """Matched categories, heaviest first; ties keep declaration order."""
    matched = [cat for cat in CATEGORY_ORDER if matches.get(cat)]
    return sorted(matched, key=lambda cat: totals.get(cat, 0.0), reverse=True)


def format_reason(category: Category, term: str) -> str:
    reason = f"Reason: {category.value} term '{term}' commonly triggers moderation."
    if len(reason) > REASON_MAX_LENGTH:
        reason = reason[: REASON_MAX_LENGTH - len(_ELLIPSIS)] + _ELLIPSIS
    return reason


def best_candidate(candidates: Sequence[ReasonCandidate]) -> Optional[ReasonCandidate]:
    """Heaviest candidate with a usable term; combos win weight ties."""
    ordered = sorted(
        candidates,
        key=lambda c: (-c.weight, _SOURCE_PRIORITY.get(c.source, len(_SOURCE_PRIORITY))),
    )
    for candidate in ordered:
        if candidate.match:
            return candidate
    return None


def build_reason(
    rating: int,
    categories: Sequence[Category],
    cleaned: Dict[Category, List[str]],
    candidates: Sequence[ReasonCandidate],
) -> Optional[str]:
    """
    Explain a rating of 3 or more in one sentence.

    The first cleaned term of the top category is preferred.  When that
    list is empty the strongest reason candidate is used instead; when
    nothing usable exists the rating goes out without a reason.
    """
    if rating < 3 or not categories:
        return None

    top = categories[0]
    terms = cleaned.get(top) or []
    if terms:
        return format_reason(top, terms[0])

    candidate = best_candidate(candidates)
    if candidate is None:
        return None
    return format_reason(candidate.category, candidate.match)


def cap_suggestions(suggestions: Iterable[str]) -> List[str]:
    unique: List[str] = []
    for suggestion in suggestions:
        if suggestion not in unique:
            unique.append(suggestion)
    return unique[:MAX_SUGGESTIONS]
