"""
Development recommendations keyed off the potential category.

Selection rules
---------------
Without a skill signal (``skill_level`` is None or UNKNOWN):
    The category's three recommendations, capped at ``cap_without_skill``.

With a skill signal:
    The skill tier's three recommendations first, then the first category
    recommendation not already present, capped at ``cap_with_skill``.

Every category (including the neutral UNKNOWN state, which reuses the
NEEDS_ASSESSMENT list) has a non-empty list, so the output is never empty.
Duplicates are dropped before the cap is applied.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from talent_assessor.models.assessment import PotentialAssessment, RecommendationList
from talent_assessor.taxonomy.talent_taxonomy import PotentialCategory, SkillLevel

logger = logging.getLogger(__name__)

DEFAULT_CAP_WITHOUT_SKILL = 3
DEFAULT_CAP_WITH_SKILL = 4

CATEGORY_RECOMMENDATIONS: dict[PotentialCategory, tuple[str, ...]] = {
    PotentialCategory.HIGH_POTENTIAL: (
        "Leadership development program",
        "Executive mentoring",
        "Strategic project assignments",
    ),
    PotentialCategory.EMERGING_TALENT: (
        "Advanced skill development",
        "Increased project responsibility",
        "Mentoring program participation",
    ),
    PotentialCategory.GROWING_TALENT: (
        "Targeted skill development",
        "Stretch assignments",
        "Regular feedback sessions",
    ),
    PotentialCategory.SOLID_PERFORMER: (
        "Maintain current performance",
        "Knowledge sharing opportunities",
        "Process improvement projects",
    ),
    PotentialCategory.NEEDS_DEVELOPMENT: (
        "Performance improvement plan",
        "Regular coaching sessions",
        "Core skill training",
    ),
    PotentialCategory.NEEDS_ASSESSMENT: (
        "Complete 9-box evaluation",
        "Performance review",
        "Career aspiration discussion",
    ),
}

SKILL_RECOMMENDATIONS: dict[SkillLevel, tuple[str, ...]] = {
    SkillLevel.EXPERT: (
        "Mentor junior colleagues",
        "Lead knowledge-sharing sessions",
        "Represent the function in cross-company initiatives",
    ),
    SkillLevel.ADVANCED: (
        "Advanced certification program",
        "Cross-functional project leadership",
        "Coaching skills workshop",
    ),
    SkillLevel.INTERMEDIATE: (
        "Targeted technical training",
        "Job shadowing with senior experts",
        "Stretch assignments",
    ),
    SkillLevel.BASIC: (
        "Foundational skills training",
        "Structured on-the-job learning plan",
        "Peer buddy support",
    ),
}


def category_recommendations(category: PotentialCategory) -> tuple[str, ...]:
    """Ordered base recommendations for ``category``."""
    return CATEGORY_RECOMMENDATIONS.get(
        category, CATEGORY_RECOMMENDATIONS[PotentialCategory.NEEDS_ASSESSMENT]
    )


def recommend(
    assessment: PotentialAssessment,
    skill_level: Optional[SkillLevel] = None,
    cap_without_skill: int = DEFAULT_CAP_WITHOUT_SKILL,
    cap_with_skill: int = DEFAULT_CAP_WITH_SKILL,
) -> RecommendationList:
    """Build the development recommendations for one assessment.

    Args:
        assessment:        Output of ``classify_potential()``.
        skill_level:       Optional proficiency signal; UNKNOWN counts as absent.
        cap_without_skill: Maximum items when no skill signal is available.
        cap_with_skill:    Maximum items when a skill signal is available.

    Returns:
        Non-empty ``RecommendationList`` with no duplicates.

    Raises:
        ValueError: If either cap is below 1.
    """
    if cap_without_skill < 1 or cap_with_skill < 1:
        raise ValueError(
            f"Recommendation caps must be >= 1, got cap_without_skill={cap_without_skill}, "
            f"cap_with_skill={cap_with_skill}."
        )

    base = category_recommendations(assessment.category)

    if skill_level is None or not skill_level.is_known:
        cap = cap_without_skill
        candidates: list[str] = list(base)
    else:
        cap = cap_with_skill
        skill_items = SKILL_RECOMMENDATIONS[skill_level]
        extra = next((item for item in base if item not in skill_items), None)
        candidates = list(skill_items)
        if extra is not None:
            candidates.append(extra)

    items = _dedupe(candidates)[:cap]
    logger.debug(
        "Recommendations for category=%s skill=%s: %d item(s)",
        assessment.category.value,
        skill_level.value if skill_level else None,
        len(items),
    )
    return RecommendationList(items=tuple(items), cap=cap)


def _dedupe(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
