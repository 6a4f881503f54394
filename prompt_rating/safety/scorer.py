"""
Weighted scoring for the content rater.

Runs every trigger against the combined prompt text, accumulates a
running total and per-category totals, then layers on the category
combination bonuses and the production-language discount.  The
result is the raw (unclamped, unrounded) score plus the evidence the
explainer needs.

The scorer is stateless: text and a strictness multiplier in, a
``ScoreSheet`` out.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .categories import Category, empty_matches, empty_totals
from .triggers import PRODUCTION_TERM_PATTERNS, PRODUCTION_TERMS, TRIGGERS, Trigger

# Occurrences of one trigger beyond this many add nothing.
MAX_COUNTED_OCCURRENCES = 3

MAX_PRODUCTION_DISCOUNT = 10
PRODUCTION_DISCOUNT_PER_TERM = 2

BODY_SUGGESTIVE_BONUS = 25
RESEMBLANCE_BONUS = 30
REALISTIC_VIOLENCE_BONUS = 15

_RESEMBLANCE_RE = re.compile(r"looks\s+like|celebrity", re.IGNORECASE | re.ASCII)
_REALISM_RE = re.compile(r"(photorealistic|hyper-?realistic|realistic)", re.IGNORECASE | re.ASCII)


# ------------------------------------------------------------------
# Result structures
# ------------------------------------------------------------------

@dataclass(frozen=True)
class ReasonCandidate:
    """One possible explanation: a term (or combo) and what it added."""
    category: Category
    match: str
    weight: float
    source: str                      # "trigger" | "combo"


@dataclass
class ScoreSheet:
    """Everything accumulated while scoring one piece of text."""
    multiplier: float = 1.0
    score: float = 0.0
    totals: Dict[Category, float] = field(default_factory=empty_totals)
    matches: Dict[Category, List[str]] = field(default_factory=empty_matches)
    suggestions: List[str] = field(default_factory=list)
    candidates: List[ReasonCandidate] = field(default_factory=list)
    fired: List[str] = field(default_factory=list)      # trigger labels
    discount: int = 0

    def add(self, category: Category, amount: float) -> None:
        self.score += amount
        self.totals[category] += amount

    def has(self, category: Category) -> bool:
        return bool(self.matches[category])

    def suggest(self, suggestion: Optional[str]) -> None:
        if suggestion and suggestion not in self.suggestions:
            self.suggestions.append(suggestion)

    @property
    def matched_categories(self) -> List[Category]:
        return [cat for cat, found in self.matches.items() if found]


# ------------------------------------------------------------------
# Scorer
# ------------------------------------------------------------------

class TriggerScorer:
    """
    Stateless scorer over a trigger table.

    ``score(combined, prompt, multiplier)`` evaluates the table against
    *combined* (prompt + negative + character text) and applies the
    production discount using *prompt* alone.
    """

    def __init__(self, triggers: Sequence[Trigger] = TRIGGERS):
        self.triggers = tuple(triggers)

    def score(self, combined: str, prompt: str = "", multiplier: float = 1.0) -> ScoreSheet:
        sheet = ScoreSheet(multiplier=multiplier)
        for trigger in self.triggers:
            self._apply_trigger(sheet, trigger, combined)
        self._apply_combinations(sheet, combined)
        sheet.discount = production_discount(prompt)
        sheet.score -= sheet.discount
        return sheet

    # ── Internal ─────────────────────────────────────────────

    @staticmethod
    def _apply_trigger(sheet: ScoreSheet, trigger: Trigger, text: str) -> None:
        found = [m.group(0) for m in trigger.pattern.finditer(text)]
        found = [term for term in found if term]
        if not found:
            return

        counted = min(len(found), MAX_COUNTED_OCCURRENCES)
        addition = counted * trigger.weight * sheet.multiplier
        sheet.add(trigger.category, addition)
        sheet.fired.append(trigger.label)

        # Every occurrence is kept as evidence; trimming to three
        # distinct terms happens when the result is built.
        sheet.matches[trigger.category].extend(found)
        sheet.suggest(trigger.suggestion)

        salient = found[0].strip()
        if salient:
            sheet.candidates.append(
                ReasonCandidate(trigger.category, salient, addition, "trigger")
            )

    @staticmethod
    def _apply_combinations(sheet: ScoreSheet, text: str) -> None:
        m = sheet.multiplier

        if sheet.has(Category.BODY_DETAIL) and sheet.has(Category.ADULT_SUGGESTIVE):
            bump = BODY_SUGGESTIVE_BONUS * m
            sheet.score += bump
            sheet.totals[Category.ADULT_SUGGESTIVE] += bump / 2
            sheet.totals[Category.BODY_DETAIL] += bump / 2
            sheet.candidates.append(ReasonCandidate(
                Category.ADULT_SUGGESTIVE, "body-detail + suggestive mix", bump, "combo",
            ))

        if sheet.has(Category.REAL_PERSON) and _RESEMBLANCE_RE.search(text):
            bump = RESEMBLANCE_BONUS * m
            sheet.add(Category.REAL_PERSON, bump)
            sheet.candidates.append(ReasonCandidate(
                Category.REAL_PERSON, "real person resemblance", bump, "combo",
            ))

        if sheet.has(Category.VIOLENCE) and _REALISM_RE.search(text):
            bump = REALISTIC_VIOLENCE_BONUS * m
            sheet.add(Category.VIOLENCE, bump)
            sheet.candidates.append(ReasonCandidate(
                Category.VIOLENCE, "realistic violent depiction", bump, "combo",
            ))


def matched_production_terms(prompt: str) -> List[str]:
    """Production terms found as whole words in *prompt*."""
    return [
        term for term, pattern in zip(PRODUCTION_TERMS, PRODUCTION_TERM_PATTERNS)
        if pattern.search(prompt or "")
    ]


def production_discount(prompt: str) -> int:
    """Points taken off for clinical film-brief vocabulary, at most 10."""
    hits = len(matched_production_terms(prompt))
    return min(MAX_PRODUCTION_DISCOUNT, hits * PRODUCTION_DISCOUNT_PER_TERM)

