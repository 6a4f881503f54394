"""
The trigger table: static rules the scorer runs against a prompt.

Each trigger has:
* The category it feeds (exactly one).
* A short label used in logs and tests (never shown to end users).
* A case-insensitive regex; every non-overlapping match counts,
  up to three occurrences per trigger.
* A positive weight added per counted occurrence.
* An optional rewrite suggestion offered when the trigger fires.

The table is evaluated top to bottom.  That order fixes the order of
suggestions and breaks ties between equally weighted explanations, so
new rules belong at the end of their category block.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

from .categories import Category


@dataclass(frozen=True)
class Trigger:
    category: Category
    label: str
    pattern: Pattern[str]
    weight: float
    suggestion: Optional[str] = None

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"trigger {self.label!r} needs a positive weight")


# ------------------------------------------------------------------
# Helper: compile patterns once at module load.  ASCII word
# boundaries, so a term glued to an accented or CJK letter still counts.
# ------------------------------------------------------------------

def _p(pattern: str, flags: int = re.IGNORECASE | re.ASCII) -> Pattern[str]:
    return re.compile(pattern, flags)


_RULES: List[Trigger] = []


def _rule(
    category: Category,
    label: str,
    pattern: str,
    weight: float,
    suggestion: Optional[str] = None,
) -> None:
    _RULES.append(Trigger(category, label, _p(pattern), weight, suggestion))


_ADULT = Category.ADULT_SUGGESTIVE
_BODY = Category.BODY_DETAIL
_VIOLENCE = Category.VIOLENCE
_SELF_HARM = Category.SELF_HARM_TERRORISM
_IP = Category.IP_BRANDS
_PERSON = Category.REAL_PERSON
_HATE = Category.HATE_HARASSMENT

_PERFORMER = "a performer on stage (non-identifying)"


# ── Adult / Suggestive ──────────────────────────────────────

_rule(_ADULT, "sexy", r"\bsexy\b", 30, "fashion editorial styling")
_rule(_ADULT, "explicit", r"\b(explicit|nsfw)\b", 34,
      "neutral, professional tone with wardrobe described factually")
_rule(_ADULT, "nude", r"\b(nude|naked|topless)\b", 45, "artful wardrobe with implied form")
_rule(_ADULT, "lingerie", r"\blingerie\b", 32, "runway-inspired wardrobe")
_rule(_ADULT, "kiss", r"\b(kiss|kissing)\b", 26, "quiet, affectionate moment")
# Unbracketed alternation: only "erotic" needs a leading boundary and
# only "provocative" a trailing one, so "seductively" still counts.
_rule(_ADULT, "erotic", r"\berotic|seductive|provocative\b", 38, "subtle, moody tone")


# ── Body detail ─────────────────────────────────────────────

_rule(_BODY, "cleavage", r"\bcleavage\b", 22, "framing that avoids focus on anatomy")
_rule(_BODY, "thighs", r"\b(thigh|thighs)\b", 18, "full-body wardrobe description")
_rule(_BODY, "abs", r"\b(abs|midriff|torso)\b", 18, "athletic wardrobe, action-ready")
_rule(_BODY, "hips", r"\bhips?\b", 16, "balanced, mid-shot framing")


# ── Violence ────────────────────────────────────────────────

_rule(_VIOLENCE, "blood", r"\bblood(y)?\b", 35, "injury implied off-screen")
_rule(_VIOLENCE, "kill", r"\b(kill(ed)?|murder|assault)\b", 32, "conflict framed without graphic harm")
_rule(_VIOLENCE, "gore", r"\bgore|dismember(ed)?\b", 40, "non-graphic aftermath implied")
_rule(_VIOLENCE, "knife", r"\b(knife|blades?)\b", 24, "tools kept off-camera")
_rule(_VIOLENCE, "gun", r"\b(gun|rifle|pistol|shotgun)\b", 26, "unarmed tension, no weapons shown")
_rule(_VIOLENCE, "fight", r"\b(fight|brawl|combat)\b", 22,
      "rapid movement, tense confrontation (non-graphic)")
_rule(_VIOLENCE, "explosion", r"\b(explosion|blast)\b", 24, "distant burst suggested, no debris")


# ── Self-harm / Terrorism ───────────────────────────────────

_rule(_SELF_HARM, "suicide", r"\b(suicide|self-harm|self harm)\b", 75,
      "focus on support resources, no self-harm depiction")
_rule(_SELF_HARM, "terror", r"\b(terror(ist|ism)?|bomb|explosive|hostage|extremist)\b", 55,
      "avoid violent themes; use neutral security briefing tone")


# ── IP / Brands ─────────────────────────────────────────────

_rule(_IP, "Disney", r"\bdisney\b", 28, "family-friendly theme park style (original)")
_rule(_IP, "Marvel", r"\bmarvel\b", 26, "original heroic comic universe")
_rule(_IP, "Star Wars", r"\bstar\s+wars\b", 28, "original galactic adventure setting")
_rule(_IP, "Harry Potter", r"\bharry\s+potter\b", 28, "original magical academy setting")
_rule(_IP, "Mickey Mouse", r"\bmickey\s+mouse\b", 55, "1930s cartoon-style mouse character (original)")
_rule(_IP, "SpongeBob", r"\bspongebob\b", 50, "underwater cartoon world (original)")
_rule(_IP, "Pokemon", r"\bpokemon\b", 26, "original pocket-creature universe")
_rule(_IP, "Lego", r"\blego\b", 22, "modular toy brick world (original)")


# ── Real person ─────────────────────────────────────────────

_rule(_PERSON, "Taylor Swift", r"\btaylor\s+swift\b", 45, _PERFORMER)
_rule(_PERSON, "Beyonce", r"\bbeyonce\b", 45, _PERFORMER)
_rule(_PERSON, "Obama", r"\b(barack\s+)?obama\b", 40, "an elected official (non-identifying)")
_rule(_PERSON, "Elon Musk", r"\belon\s+musk\b", 40, "a tech founder archetype (fictional)")
_rule(_PERSON, "celebrity", r"\bcelebrity\b", 22, _PERFORMER)
# Captures the rest of the clause so the reason names who it resembles.
_rule(_PERSON, "looks like", r"looks\s+like\s+[^,.\n]+", 18, _PERFORMER)


# ── Hate / Harassment ───────────────────────────────────────

_rule(_HATE, "racist",
      r"\bracist|racism|hate\s+speech|slur(s)?|homophobic|misogynistic|harass(ment)?\b", 50,
      "neutral, respectful language; avoid targeted remarks")
_rule(_HATE, "bullying", r"\bbullying|abuse\b", 28, "conflict implied without insults")


TRIGGERS: Tuple[Trigger, ...] = tuple(_RULES)


# ------------------------------------------------------------------
# Production vocabulary.  Whole-word hits in the main prompt earn a
# small discount (see ``TriggerScorer``).
# ------------------------------------------------------------------

PRODUCTION_TERMS: Tuple[str, ...] = (
    "subject",
    "scene",
    "composition",
    "camera movement",
    "lighting",
    "wardrobe",
    "blocking",
    "sound design",
)

PRODUCTION_TERM_PATTERNS: Tuple[Pattern[str], ...] = tuple(
    _p(rf"\b{re.escape(term)}\b") for term in PRODUCTION_TERMS
)


def triggers_for(category: Category) -> List[Trigger]:
    """All triggers feeding *category*, in table order."""
    return [t for t in TRIGGERS if t.category is category]
