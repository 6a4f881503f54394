"""
Strictness tiers and the providers that look them up.

The preference itself belongs to the caller (a settings screen writes
it into ``Config``).  The rater only reads it, once per assessment,
through a provider: any zero-argument callable returning a
``Strictness``.  Unknown or unreadable values resolve to ``Standard``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

STRICTNESS_KEY = "content_strictness_preference"


class Strictness(str, Enum):
    RELAXED = "Relaxed"
    STANDARD = "Standard"
    STRICT = "Strict"

    @property
    def multiplier(self) -> float:
        return STRICTNESS_MULTIPLIER[self]


STRICTNESS_MULTIPLIER: Dict[Strictness, float] = {
    Strictness.RELAXED: 0.85,
    Strictness.STANDARD: 1.0,
    Strictness.STRICT: 1.2,
}

StrictnessProvider = Callable[[], Strictness]


def resolve_strictness(value: Any) -> Strictness:
    """
    Map a stored preference to a tier.

    Only the exact strings ``"Relaxed"`` and ``"Strict"`` (or the enum
    members themselves) select a non-default tier; case variants,
    padding, and non-strings all give ``Standard``.
    """
    if isinstance(value, Strictness):
        return value
    if value == Strictness.RELAXED.value:
        return Strictness.RELAXED
    if value == Strictness.STRICT.value:
        return Strictness.STRICT
    return Strictness.STANDARD


def fixed_strictness(value: Any) -> StrictnessProvider:
    """Provider that always answers with the tier *value* resolves to."""
    tier = resolve_strictness(value)
    return lambda: tier


class ConfigStrictness:
    """
    Provider reading the preference from a ``Config``-like store on
    every call, so changes made in settings apply to the next
    assessment without rebuilding the engine.
    """

    def __init__(self, config: Any, key: str = STRICTNESS_KEY):
        self._config = config
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def __call__(self) -> Strictness:
        try:
            stored: Optional[Any] = self._config.get(self._key)
        except Exception as exc:  # caller-owned store
            logger.debug("Strictness lookup for %r failed (%s); using Standard", self._key, exc)
            return Strictness.STANDARD
        return resolve_strictness(stored)
