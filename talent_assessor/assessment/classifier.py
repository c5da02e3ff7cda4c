"""
Potential classification: 9-box tier + performance trend → business category.

Decision table (evaluated in order — first match wins)
------------------------------------------------------
    1. HIGH tier   AND latest >= 4        → HIGH_POTENTIAL
    2. HIGH tier   AND latest == 3        → EMERGING_TALENT
    3. MEDIUM tier AND trend IMPROVING    → GROWING_TALENT
    4. MEDIUM tier AND latest >= 3        → SOLID_PERFORMER
    5. LOW tier    OR  latest <= 2        → NEEDS_DEVELOPMENT
    6. UNKNOWN tier                       → NEEDS_ASSESSMENT
    7. anything else                      → NEEDS_ASSESSMENT

The grid placement is the primary signal. Raw rating thresholds only
downgrade an employee once the tier-specific rules above them have failed,
so rule order must not change. Rule 5 deliberately ignores the tier: a HIGH
or UNKNOWN placement with a latest rating of 2 or below (or no ratings at
all) is NEEDS_DEVELOPMENT.

Rule 3 sends a MEDIUM-tier employee with an improving trend to
GROWING_TALENT even when the latest rating is low. Whether "Promising"
without an improving trend belongs in SOLID_PERFORMER is a business rule
that HR has not signed off on yet.
"""

from __future__ import annotations

import logging

from talent_assessor.models.assessment import (
    FocusAreas,
    PotentialAssessment,
    SupportingSignals,
    TrendResult,
)
from talent_assessor.models.employee import EmployeeRecord
from talent_assessor.taxonomy.talent_taxonomy import (
    GridTier,
    PotentialCategory,
    TrendDirection,
)

logger = logging.getLogger(__name__)

SUCCESSOR_CLAUSE = " and identified as a successor"

_HIGH_POTENTIAL_TEMPLATE = (
    "Exceptional performer consistently exceeding targets{successor}. "
    "Recommended for leadership development programs and increased responsibilities."
)

NARRATIVES: dict[PotentialCategory, str] = {
    PotentialCategory.EMERGING_TALENT: (
        "Demonstrates high potential with solid performance. "
        "Focus on challenging assignments to accelerate growth."
    ),
    PotentialCategory.GROWING_TALENT: (
        "Shows consistent improvement and solid potential. "
        "Provide targeted development opportunities."
    ),
    PotentialCategory.SOLID_PERFORMER: (
        "Reliable performer with moderate potential. "
        "Focus on maintaining strengths while developing in key areas."
    ),
    PotentialCategory.NEEDS_DEVELOPMENT: (
        "Requires focused intervention and performance improvement plan. "
        "Consider skills assessment and targeted coaching."
    ),
    PotentialCategory.NEEDS_ASSESSMENT: (
        "Insufficient data for accurate assessment. "
        "Recommend completing 9-box evaluation."
    ),
    PotentialCategory.UNKNOWN: "Insufficient data",
}

_HIGH_POTENTIAL_FOCUS = FocusAreas(
    strengths="Leadership capability and consistent high performance",
    development="Strategic thinking and broader organizational impact",
)
_DEFAULT_FOCUS = FocusAreas(
    strengths="Core technical competencies and reliability",
    development="Performance consistency and technical skill enhancement",
)


def determine_category(
    tier: GridTier,
    direction: TrendDirection,
    latest_rating: int,
) -> PotentialCategory:
    """Apply the decision table to the classifier's three inputs.

    Returns:
        The first matching ``PotentialCategory``.
    """
    if tier is GridTier.HIGH and latest_rating >= 4:
        return PotentialCategory.HIGH_POTENTIAL
    if tier is GridTier.HIGH and latest_rating == 3:
        return PotentialCategory.EMERGING_TALENT
    if tier is GridTier.MEDIUM and direction is TrendDirection.IMPROVING:
        return PotentialCategory.GROWING_TALENT
    if tier is GridTier.MEDIUM and latest_rating >= 3:
        return PotentialCategory.SOLID_PERFORMER
    if tier is GridTier.LOW or latest_rating <= 2:
        return PotentialCategory.NEEDS_DEVELOPMENT
    if tier is GridTier.UNKNOWN:
        return PotentialCategory.NEEDS_ASSESSMENT
    return PotentialCategory.NEEDS_ASSESSMENT


def build_narrative(category: PotentialCategory, is_successor: bool) -> str:
    """Return the display narrative for ``category``."""
    if category is PotentialCategory.HIGH_POTENTIAL:
        return _HIGH_POTENTIAL_TEMPLATE.format(
            successor=SUCCESSOR_CLAUSE if is_successor else ""
        )
    return NARRATIVES[category]


def classify_potential(record: EmployeeRecord, trend: TrendResult) -> PotentialAssessment:
    """Classify one employee from their record and precomputed trend.

    Args:
        record: The employee snapshot (9-box placement, succession flag).
        trend:  Result of ``analyze_trend(record)``.

    Returns:
        ``PotentialAssessment`` with category, narrative and the signals used.
    """
    tier = record.nine_box.tier
    category = determine_category(tier, trend.direction, trend.latest_rating)
    logger.debug(
        "Potential for %s: tier=%s latest=%d direction=%s -> %s",
        record.personnel_id,
        tier.value,
        trend.latest_rating,
        trend.direction.value,
        category.value,
    )
    return PotentialAssessment(
        category=category,
        narrative=build_narrative(category, record.is_successor),
        supporting_signals=SupportingSignals(
            trend=trend.direction,
            grid_tier=tier,
            is_successor=record.is_successor,
        ),
    )


def focus_areas(category: PotentialCategory) -> FocusAreas:
    """Strengths to leverage and areas to develop for ``category``."""
    if category is PotentialCategory.HIGH_POTENTIAL:
        return _HIGH_POTENTIAL_FOCUS
    return _DEFAULT_FOCUS


def succession_status(record: EmployeeRecord) -> str:
    """One-line succession plan summary for display."""
    if not record.is_successor:
        return "Not currently in succession plan"
    target = record.succession_position or "Not specified"
    return f"Identified as successor for position: {target}"
