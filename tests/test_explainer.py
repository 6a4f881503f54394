"""
Tests for prompt_rating/safety/explainer.py.

Covers:
* final_score() rounding (half up) and clamping
* to_rating() band boundaries
* clean_matches(), rank_categories(), cap_suggestions()
* build_reason() — top-term path, candidate fallback, truncation
"""

from __future__ import annotations

import pytest

from prompt_rating.safety.categories import Category, empty_matches, empty_totals
from prompt_rating.safety.explainer import (
    REASON_MAX_LENGTH,
    best_candidate,
    build_reason,
    cap_suggestions,
    clean_matches,
    final_score,
    format_reason,
    rank_categories,
    to_rating,
)
from prompt_rating.safety.scorer import ReasonCandidate


# ── Score / rating ────────────────────────────────────────────────────

class TestFinalScore:
    @pytest.mark.parametrize("raw,expected", [
        (25.5, 26), (0.5, 1), (69.49, 69), (30.6, 31), (-4, 0), (150, 100), (100.4, 100),
    ])
    def test_round_half_up_and_clamp(self, raw, expected):
        assert final_score(raw) == expected


class TestToRating:
    @pytest.mark.parametrize("score,rating", [
        (100, 5), (70, 5), (69, 4), (50, 4), (49, 3), (30, 3), (29, 2), (15, 2), (14, 1), (0, 1),
    ])
    def test_bands(self, score, rating):
        assert to_rating(score) == rating


# ── Matches / categories / suggestions ────────────────────────────────

class TestCleanMatches:
    def test_dedupes_case_sensitively(self):
        assert clean_matches(["blood", "Blood", "blood"]) == ["blood", "Blood"]

    def test_caps_at_three_in_first_seen_order(self):
        assert clean_matches(["a", "b", "a", "c", "d"]) == ["a", "b", "c"]

    def test_trims_and_drops_blank(self):
        assert clean_matches(["  gun ", "gun", "   "]) == ["gun"]


class TestRankCategories:
    def test_heaviest_first(self):
        matches = empty_matches()
        totals = empty_totals()
        matches[Category.VIOLENCE] = ["blood"]
        matches[Category.SELF_HARM_TERRORISM] = ["bomb"]
        totals[Category.VIOLENCE] = 35
        totals[Category.SELF_HARM_TERRORISM] = 55
        assert rank_categories(matches, totals) == [
            Category.SELF_HARM_TERRORISM, Category.VIOLENCE,
        ]

    def test_ties_keep_declaration_order(self):
        matches = empty_matches()
        totals = empty_totals()
        for cat in (Category.HATE_HARASSMENT, Category.ADULT_SUGGESTIVE):
            matches[cat] = ["x"]
            totals[cat] = 32
        assert rank_categories(matches, totals) == [
            Category.ADULT_SUGGESTIVE, Category.HATE_HARASSMENT,
        ]

    def test_unmatched_excluded_even_with_total(self):
        totals = empty_totals()
        totals[Category.IP_BRANDS] = 50
        assert rank_categories(empty_matches(), totals) == []


class TestCapSuggestions:
    def test_dedupes_and_caps(self):
        items = ["a", "b", "a", "c", "d", "e", "f", "g"]
        assert cap_suggestions(items) == ["a", "b", "c", "d", "e", "f"]


# ── Reason ────────────────────────────────────────────────────────────

class TestReason:
    def test_format(self):
        assert format_reason(Category.VIOLENCE, "gore") == (
            "Reason: Violence term 'gore' commonly triggers moderation."
        )

    def test_truncated_to_exactly_120(self):
        reason = format_reason(Category.REAL_PERSON, "looks like " + "x" * 200)
        assert len(reason) == REASON_MAX_LENGTH
        assert reason.endswith("...")

    def test_short_reason_untouched(self):
        reason = format_reason(Category.IP_BRANDS, "Lego")
        assert not reason.endswith("...")

    def test_none_below_rating_three(self):
        cleaned = empty_matches()
        cleaned[Category.VIOLENCE] = ["blood"]
        assert build_reason(2, [Category.VIOLENCE], cleaned, []) is None

    def test_none_without_categories(self):
        assert build_reason(5, [], empty_matches(), []) is None

    def test_top_category_first_term(self):
        cleaned = empty_matches()
        cleaned[Category.VIOLENCE] = ["gore", "blood"]
        cleaned[Category.IP_BRANDS] = ["Lego"]
        reason = build_reason(4, [Category.VIOLENCE, Category.IP_BRANDS], cleaned, [])
        assert reason == "Reason: Violence term 'gore' commonly triggers moderation."

    def test_fallback_prefers_heaviest_candidate(self):
        candidates = [
            ReasonCandidate(Category.IP_BRANDS, "Lego", 22, "trigger"),
            ReasonCandidate(Category.VIOLENCE, "gore", 40, "trigger"),
        ]
        reason = build_reason(3, [Category.VIOLENCE], empty_matches(), candidates)
        assert reason == "Reason: Violence term 'gore' commonly triggers moderation."

    def test_fallback_combo_wins_weight_tie(self):
        candidates = [
            ReasonCandidate(Category.VIOLENCE, "blood", 15, "trigger"),
            ReasonCandidate(Category.VIOLENCE, "realistic violent depiction", 15, "combo"),
        ]
        assert best_candidate(candidates).source == "combo"

    def test_fallback_skips_empty_match(self):
        candidates = [
            ReasonCandidate(Category.VIOLENCE, "", 90, "trigger"),
            ReasonCandidate(Category.IP_BRANDS, "Lego", 22, "trigger"),
        ]
        reason = build_reason(3, [Category.VIOLENCE], empty_matches(), candidates)
        assert "'Lego'" in reason

    def test_no_reason_when_nothing_usable(self):
        candidates = [ReasonCandidate(Category.VIOLENCE, "", 90, "trigger")]
        assert build_reason(5, [Category.VIOLENCE], empty_matches(), candidates) is None
