"""
Talent-review taxonomy.

Closed vocabularies used by the assessment engine:
  - ``PerformanceRating`` — annual rating label with a fixed ordinal (0–5).
  - ``NineBoxCategory``   — talent-matrix placement, grouped into ``GridTier``s.
  - ``SkillLevel``        — proficiency signal used to refine recommendations.
  - ``NationalityStatus`` — local / expatriate flag carried for display.
  - ``TrendDirection``    — output of the performance trend analysis.
  - ``PotentialCategory`` — output of the potential classifier.

Every enum that is read from the roster export has a ``from_label()``
classmethod. Source labels are matched loosely (case, spaces, hyphens and
punctuation are ignored) and anything unrecognized maps to "absent":
``None`` for ratings, ``UNKNOWN`` for everything else. Parsing never raises.

This module has NO imports from any other ``talent_assessor`` package.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any, Optional

_NON_ALPHA = re.compile(r"[^a-z]")


def normalize_label(value: Any) -> str:
    """Collapse a source label to lowercase letters only (``"Hi-Lead "`` → ``"hilead"``)."""
    if value is None:
        return ""
    return _NON_ALPHA.sub("", str(value).lower())


class PerformanceRating(StrEnum):
    """Annual performance rating."""

    EXCEPTIONAL = "exceptional"
    EXCEED_TARGET = "exceed_target"
    ACHIEVED_TARGET = "achieved_target"
    NEED_IMPROVEMENT = "need_improvement"
    LOW_PERFORMANCE = "low_performance"
    UNRATED = "unrated"
    """Explicitly not rated for the period. Ordinal 0, never part of a trend."""

    @property
    def ordinal(self) -> int:
        """Numeric score: Exceptional=5 … LowPerformance=1, Unrated=0."""
        if self is PerformanceRating.EXCEPTIONAL:
            return 5
        if self is PerformanceRating.EXCEED_TARGET:
            return 4
        if self is PerformanceRating.ACHIEVED_TARGET:
            return 3
        if self is PerformanceRating.NEED_IMPROVEMENT:
            return 2
        if self is PerformanceRating.LOW_PERFORMANCE:
            return 1
        if self is PerformanceRating.UNRATED:
            return 0
        raise ValueError(f"No ordinal defined for rating {self!r}")

    @property
    def is_rated(self) -> bool:
        return self is not PerformanceRating.UNRATED

    @property
    def label(self) -> str:
        return _RATING_LABELS[self]

    @classmethod
    def from_label(cls, value: Any) -> Optional["PerformanceRating"]:
        """Parse a source label; ``None`` when absent or unrecognized."""
        return _RATING_BY_KEY.get(normalize_label(value))


_RATING_LABELS: dict[PerformanceRating, str] = {
    PerformanceRating.EXCEPTIONAL:      "Exceptional",
    PerformanceRating.EXCEED_TARGET:    "Exceed Target",
    PerformanceRating.ACHIEVED_TARGET:  "Achieved Target",
    PerformanceRating.NEED_IMPROVEMENT: "Need Improvement",
    PerformanceRating.LOW_PERFORMANCE:  "Low Performance",
    PerformanceRating.UNRATED:          "Unrated",
}

_RATING_BY_KEY: dict[str, PerformanceRating] = {
    normalize_label(label): rating for rating, label in _RATING_LABELS.items()
}


class GridTier(StrEnum):
    """Coarse tier of a 9-box placement."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class NineBoxCategory(StrEnum):
    """Talent-matrix (9-box) placement."""

    # ── High tier ─────────────────────────────────────────────────────────────
    HI_POTENTIAL = "hi_potential"
    HI_LEAD = "hi_lead"
    HI_PROFESSIONAL = "hi_professional"
    HIGH_GROW = "high_grow"

    # ── Medium tier ───────────────────────────────────────────────────────────
    PROMISING = "promising"
    SAFE_HAND = "safe_hand"

    # ── Low tier ──────────────────────────────────────────────────────────────
    DILEMMA = "dilemma"
    SHORTFALL = "shortfall"
    CASTING_ERROR = "casting_error"

    UNKNOWN = "unknown"
    """Absent, "Unrated", "#N/A", "not applicable" or unrecognized."""

    @property
    def tier(self) -> GridTier:
        return _NINE_BOX_TIERS.get(self, GridTier.UNKNOWN)

    @property
    def label(self) -> str:
        return _NINE_BOX_LABELS.get(self, "Not yet rated")

    @classmethod
    def from_label(cls, value: Any) -> "NineBoxCategory":
        return _NINE_BOX_BY_KEY.get(normalize_label(value), cls.UNKNOWN)


_NINE_BOX_LABELS: dict[NineBoxCategory, str] = {
    NineBoxCategory.HI_POTENTIAL:    "Hi-Potential",
    NineBoxCategory.HI_LEAD:         "Hi-Lead",
    NineBoxCategory.HI_PROFESSIONAL: "Hi-Professional",
    NineBoxCategory.HIGH_GROW:       "High-Grow",
    NineBoxCategory.PROMISING:       "Promising",
    NineBoxCategory.SAFE_HAND:       "Safe Hand",
    NineBoxCategory.DILEMMA:         "Dilemma",
    NineBoxCategory.SHORTFALL:       "Shortfall",
    NineBoxCategory.CASTING_ERROR:   "Casting Error",
}

_NINE_BOX_BY_KEY: dict[str, NineBoxCategory] = {
    normalize_label(label): box for box, label in _NINE_BOX_LABELS.items()
}

_NINE_BOX_TIERS: dict[NineBoxCategory, GridTier] = {
    NineBoxCategory.HI_POTENTIAL:    GridTier.HIGH,
    NineBoxCategory.HI_LEAD:         GridTier.HIGH,
    NineBoxCategory.HI_PROFESSIONAL: GridTier.HIGH,
    NineBoxCategory.HIGH_GROW:       GridTier.HIGH,
    NineBoxCategory.PROMISING:       GridTier.MEDIUM,
    NineBoxCategory.SAFE_HAND:       GridTier.MEDIUM,
    NineBoxCategory.DILEMMA:         GridTier.LOW,
    NineBoxCategory.SHORTFALL:       GridTier.LOW,
    NineBoxCategory.CASTING_ERROR:   GridTier.LOW,
}


class SkillLevel(StrEnum):
    """Proficiency signal, strongest first."""

    EXPERT = "expert"
    ADVANCED = "advanced"
    INTERMEDIATE = "intermediate"
    BASIC = "basic"
    UNKNOWN = "unknown"

    @property
    def is_known(self) -> bool:
        return self is not SkillLevel.UNKNOWN

    @classmethod
    def from_label(cls, value: Any) -> "SkillLevel":
        return _SKILL_BY_KEY.get(normalize_label(value), cls.UNKNOWN)


_SKILL_BY_KEY: dict[str, SkillLevel] = {
    "expert":       SkillLevel.EXPERT,
    "advanced":     SkillLevel.ADVANCED,
    "intermediate": SkillLevel.INTERMEDIATE,
    "basic":        SkillLevel.BASIC,
    "beginner":     SkillLevel.BASIC,
}


class NationalityStatus(StrEnum):
    """Local national vs. expatriate employee."""

    LOCAL = "local"
    EXPATRIATE = "expatriate"
    UNKNOWN = "unknown"

    @classmethod
    def from_label(cls, value: Any) -> "NationalityStatus":
        return _NATIONALITY_BY_KEY.get(normalize_label(value), cls.UNKNOWN)


_NATIONALITY_BY_KEY: dict[str, NationalityStatus] = {
    "local":      NationalityStatus.LOCAL,
    "omani":      NationalityStatus.LOCAL,
    "national":   NationalityStatus.LOCAL,
    "expat":      NationalityStatus.EXPATRIATE,
    "expatriate": NationalityStatus.EXPATRIATE,
}


class TrendDirection(StrEnum):
    """Direction of change between the two most recent rated periods."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
    INSUFFICIENT_DATA = "insufficient_data"
    """Fewer than two rated periods."""

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()


class PotentialCategory(StrEnum):
    """Business category assigned by the potential classifier."""

    HIGH_POTENTIAL = "high_potential"
    EMERGING_TALENT = "emerging_talent"
    GROWING_TALENT = "growing_talent"
    SOLID_PERFORMER = "solid_performer"
    NEEDS_DEVELOPMENT = "needs_development"
    NEEDS_ASSESSMENT = "needs_assessment"
    UNKNOWN = "unknown"
    """Neutral state when no employee record is selected."""

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()
