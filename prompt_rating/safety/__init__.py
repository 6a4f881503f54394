"""
Heuristic moderation-risk scoring for creative prompts.  Covers the
trigger table, strictness tiers, weighted scoring with combination
bonuses, and short explanations with rewrite suggestions.
"""

from .categories import CATEGORY_ORDER, Category, empty_matches
from .triggers import PRODUCTION_TERMS, TRIGGERS, Trigger
from .strictness import (
    STRICTNESS_KEY,
    STRICTNESS_MULTIPLIER,
    ConfigStrictness,
    Strictness,
    fixed_strictness,
    resolve_strictness,
)
from .scorer import ReasonCandidate, ScoreSheet, TriggerScorer
from .rating_engine import ContentRatingEngine, RatingInput, RatingResult, assess_content_rating
from .rating_log import RatingLogger
