"""
Performance trend analysis over the three annual rating slots.

Algorithm
---------
1. Build the rating series: ordinals of rated periods, oldest first.
   Absent slots and explicit "Unrated" labels are skipped entirely; they
   are missing data, not a score of 0.
2. Fewer than 2 entries → INSUFFICIENT_DATA.
3. Otherwise compare the last two entries:
       last > previous → IMPROVING
       last < previous → DECLINING
       equal           → STABLE
4. Consistency is only tested when all three periods are rated:
       IMPROVING → series is non-decreasing
       DECLINING → series is non-increasing
       STABLE    → all three equal

   With fewer than three entries there is no third point that could
   contradict the direction, so ``consistent`` is True. This is a chosen
   convention, not something the data proves.

Examples::

    [3, 4, 5] → IMPROVING, consistent
    [3, 5, 2] → DECLINING, not consistent (5 → 2 but 3 → 5 rose)
    [4, 4, 4] → STABLE,    consistent
    [5, 3, 3] → STABLE,    not consistent
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from talent_assessor.models.assessment import TrendResult
from talent_assessor.models.employee import EmployeeRecord
from talent_assessor.taxonomy.talent_taxonomy import PerformanceRating, TrendDirection

logger = logging.getLogger(__name__)


def build_rating_series(
    ratings: Iterable[Optional[PerformanceRating]],
) -> tuple[int, ...]:
    """Map rated periods to ordinals, skipping absent and "Unrated" slots."""
    return tuple(r.ordinal for r in ratings if r is not None and r.is_rated)


def trend_from_series(series: tuple[int, ...]) -> TrendResult:
    """Classify an ordered rating series (oldest first)."""
    latest = series[-1] if series else 0

    if len(series) < 2:
        return TrendResult(
            direction=TrendDirection.INSUFFICIENT_DATA,
            consistent=True,
            rating_series=series,
            latest_rating=latest,
        )

    previous = series[-2]
    if latest > previous:
        direction = TrendDirection.IMPROVING
    elif latest < previous:
        direction = TrendDirection.DECLINING
    else:
        direction = TrendDirection.STABLE

    consistent = True
    if len(series) >= 3:
        first, second, third = series[-3:]
        if direction is TrendDirection.IMPROVING:
            consistent = first <= second <= third
        elif direction is TrendDirection.DECLINING:
            consistent = first >= second >= third
        else:
            consistent = first == second == third

    return TrendResult(
        direction=direction,
        consistent=consistent,
        rating_series=series,
        latest_rating=latest,
    )


def analyze_trend(record: EmployeeRecord) -> TrendResult:
    """Derive the performance trend for one employee record."""
    series = build_rating_series(record.ratings)
    result = trend_from_series(series)
    logger.debug(
        "Trend for %s: series=%s direction=%s consistent=%s",
        record.personnel_id,
        list(series),
        result.direction.value,
        result.consistent,
    )
    return result
