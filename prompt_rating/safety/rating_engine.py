"""
Content rating engine — the single entry point callers use.

Pipeline for one call:
    1. Assemble prompt, negative prompt, and character text.
    2. Read the strictness tier (skipped for empty input).
    3. Score triggers, combinations, and the production discount.
    4. Band the score and explain it.
    5. Publish and log the result.

The engine holds no per-call state, so one instance can be shared.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..events import RATING_ASSESSED
from .categories import Category, empty_matches
from .explainer import (
    build_reason,
    cap_suggestions,
    clean_matches,
    final_score,
    rank_categories,
    to_rating,
)
from .rating_log import RatingLogger, build_log_entry
from .scorer import TriggerScorer
from .strictness import (
    ConfigStrictness,
    Strictness,
    StrictnessProvider,
    resolve_strictness,
)

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Input / result
# ------------------------------------------------------------------

def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class RatingInput:
    """What the caller supplies.  Non-string fields read as empty."""
    prompt: str = ""
    negative: Optional[str] = None
    characters_text: Optional[str] = None

    @classmethod
    def coerce(cls, prompt: Any, negative: Any = None, characters_text: Any = None) -> "RatingInput":
        return cls(_as_text(prompt), _as_text(negative), _as_text(characters_text))

    def combined(self) -> str:
        parts = [self.prompt, self.negative, self.characters_text]
        return " ".join(part for part in parts if part).strip()


@dataclass
class RatingResult:
    """Outcome of one assessment."""
    rating: int = 1
    score: int = 0
    reason: Optional[str] = None
    categories: List[Category] = field(default_factory=list)
    matches: Dict[Category, List[str]] = field(default_factory=empty_matches)
    suggestions: List[str] = field(default_factory=list)

    @property
    def flagged(self) -> bool:
        return self.rating >= 3

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rating": self.rating,
            "score": self.score,
            "reason": self.reason,
            "categories": [cat.value for cat in self.categories],
            "matches": {cat.value: list(terms) for cat, terms in self.matches.items()},
            "suggestions": list(self.suggestions),
        }


# ------------------------------------------------------------------
# Engine
# ------------------------------------------------------------------

class ContentRatingEngine:
    """
    Rates creative prompts for moderation risk.

    Usage::

        engine = ContentRatingEngine(event_bus, config)
        result = engine.assess("Nude portrait highlighting cleavage.")
        if result.flagged:
            show(result.reason, result.suggestions)

    Strictness comes from *strictness_provider* when given, otherwise
    from *config* (key ``content_strictness_preference``), otherwise
    ``Standard``.
    """

    def __init__(
        self,
        event_bus: Optional[Any] = None,
        config: Optional[Any] = None,
        strictness_provider: Optional[StrictnessProvider] = None,
        scorer: Optional[TriggerScorer] = None,
    ):
        self.bus = event_bus
        self.config = config
        self.scorer = scorer or TriggerScorer()
        self.logger = RatingLogger(event_bus)

        if strictness_provider is None and config is not None:
            strictness_provider = ConfigStrictness(config)
        self._strictness = strictness_provider

    # ── Public API ───────────────────────────────────────────

    def current_strictness(self) -> Strictness:
        if self._strictness is None:
            return Strictness.STANDARD
        return resolve_strictness(self._strictness())

    def assess(
        self,
        prompt: Any,
        negative: Any = None,
        characters_text: Any = None,
        *,
        strictness: Any = None,
    ) -> RatingResult:
        """Rate one prompt.  *strictness* overrides the provider for this call."""
        data = RatingInput.coerce(prompt, negative, characters_text)
        combined = data.combined()
        if not combined:
            return RatingResult()

        tier = resolve_strictness(strictness) if strictness is not None else self.current_strictness()
        sheet = self.scorer.score(combined, data.prompt, tier.multiplier)

        score = final_score(sheet.score)
        rating = to_rating(score)
        categories = rank_categories(sheet.matches, sheet.totals)
        cleaned = {cat: clean_matches(found) for cat, found in sheet.matches.items()}

        result = RatingResult(
            rating=rating,
            score=score,
            reason=build_reason(rating, categories, cleaned, sheet.candidates),
            categories=categories,
            matches=cleaned,
            suggestions=cap_suggestions(sheet.suggestions),
        )

        logger.debug(
            "Rated prompt: rating=%d score=%d strictness=%s categories=%s",
            rating, score, tier.value, [cat.value for cat in categories],
        )
        self._report(combined, result, tier, sheet.fired, sheet.discount)
        return result

    # ── Reporting ────────────────────────────────────────────

    def _report(
        self,
        text: str,
        result: RatingResult,
        tier: Strictness,
        fired: List[str],
        discount: int,
    ) -> None:
        payload = result.to_dict()
        entry = build_log_entry(
            original_text=text,
            rating=result.rating,
            score=result.score,
            strictness=tier.value,
            categories=payload["categories"],
            reason=result.reason,
            matched=payload["matches"],
            fired=fired,
            discount=discount,
            store_original=self.logger.store_original_text,
        )
        self.logger.log(entry)

        if self.bus is not None:
            payload["strictness"] = tier.value
            self.bus.publish(RATING_ASSESSED, payload)


_default_engine: Optional[ContentRatingEngine] = None


def assess_content_rating(
    prompt: Any,
    negative: Any = None,
    characters_text: Any = None,
    *,
    strictness: Any = None,
) -> RatingResult:
    """
    Module-level convenience wrapper around a shared, bus-less engine.

    Without *strictness* the tier is ``Standard``; callers with a
    settings store should build a ``ContentRatingEngine`` with a
    ``Config`` instead.
    """
    global _default_engine
    if _default_engine is None:
        _default_engine = ContentRatingEngine()
    return _default_engine.assess(prompt, negative, characters_text, strictness=strictness)
