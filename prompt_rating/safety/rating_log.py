"""
Structured logging for content assessments.

Every non-empty assessment produces one entry that goes to:

1. The standard ``logging`` module (``prompt_rating.safety.rating_log``).
2. The ``EventBus`` as a ``log_entry`` event, so a live log view can
   show it.

Nothing is written to disk; assessments are not persisted.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from ..events import LOG_ENTRY

logger = logging.getLogger(__name__)

# Ratings at or above this level are reported as "Flagged".
FLAG_RATING = 3


# ------------------------------------------------------------------
# Log entry builder
# ------------------------------------------------------------------

def build_log_entry(
    original_text: str,
    rating: int,
    score: int,
    strictness: str,
    categories: List[str],
    reason: Optional[str] = None,
    matched: Optional[Dict[str, List[str]]] = None,
    fired: Optional[List[str]] = None,
    discount: int = 0,
    store_original: bool = True,
) -> Dict[str, Any]:
    """Build a structured log entry dict."""
    entry: Dict[str, Any] = {
        "id": uuid.uuid4().hex[:12],
        "timestamp": time.time(),
        "timestamp_iso": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime()),
        "rating": rating,
        "score": score,
        "strictness": strictness,
        "categories": categories,
        "reason": reason or "",
        "production_discount": discount,
    }

    if store_original:
        entry["original_text"] = original_text
    else:
        entry["original_text"] = f"[redacted, length={len(original_text)}]"

    if matched:
        entry["matched"] = {cat: terms for cat, terms in matched.items() if terms}

    if fired:
        entry["triggers"] = list(fired)

    return entry


# ------------------------------------------------------------------
# Log writer
# ------------------------------------------------------------------

class RatingLogger:
    """Sends assessment entries to ``logging`` and the event bus."""

    def __init__(self, event_bus: Optional[Any] = None):
        self._bus = event_bus
        self._store_original = True   # can be toggled off for privacy

    @property
    def store_original_text(self) -> bool:
        return self._store_original

    @store_original_text.setter
    def store_original_text(self, val: bool) -> None:
        self._store_original = bool(val)

    def log(self, entry: Dict[str, Any]) -> None:
        rating = entry.get("rating", 1)
        ui_category = "Flagged" if rating >= FLAG_RATING else "Rated"

        summary = f"[RATING {rating}] score={entry.get('score', 0)} ({entry.get('strictness', '?')})"
        reason = entry.get("reason")
        if reason:
            summary += f" {reason}"

        logger.info("%s", summary)

        if self._bus is not None:
            self._bus.publish(LOG_ENTRY, {
                "category": ui_category,
                "text": summary,
                "detail": entry,
            })
