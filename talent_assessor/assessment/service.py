"""
Query surface of the assessment engine.

Presentation code calls any subset of:

    get_trend(record)            -> TrendResult
    get_potential(record)        -> PotentialAssessment
    get_recommendations(record)  -> RecommendationList
    assess_employee(record)      -> EmployeeAssessment   (all of the above)

Each accepts an ``EmployeeRecord``, a raw roster row mapping (parsed on the
fly), or ``None`` when nothing is selected. ``None`` yields a neutral result
instead of an error:

    trend            INSUFFICIENT_DATA, not consistent, empty series
    potential        UNKNOWN, "Insufficient data"
    recommendations  empty list

Anything else (a list, a string, a number …) raises
:class:`RecordValidationError`. Nothing is cached; every call recomputes
from the record and equal inputs give equal outputs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from talent_assessor.assessment.classifier import (
    build_narrative,
    classify_potential,
    focus_areas,
    succession_status,
)
from talent_assessor.assessment.trend import analyze_trend
from talent_assessor.ingestion.record_parser import RecordValidationError, parse_employee_row
from talent_assessor.models.assessment import (
    EmployeeAssessment,
    PotentialAssessment,
    RecommendationList,
    TrendResult,
)
from talent_assessor.models.employee import EmployeeRecord
from talent_assessor.recommendations.engine import (
    DEFAULT_CAP_WITH_SKILL,
    DEFAULT_CAP_WITHOUT_SKILL,
    recommend,
)
from talent_assessor.taxonomy.talent_taxonomy import PotentialCategory, TrendDirection

RecordInput = Union[EmployeeRecord, Mapping[str, Any], None]

NO_RECORD_TREND = TrendResult(
    direction=TrendDirection.INSUFFICIENT_DATA,
    consistent=False,
)
NO_RECORD_POTENTIAL = PotentialAssessment(
    category=PotentialCategory.UNKNOWN,
    narrative=build_narrative(PotentialCategory.UNKNOWN, is_successor=False),
)
NO_RECORD_RECOMMENDATIONS = RecommendationList()


def coerce_record(record: RecordInput) -> Optional[EmployeeRecord]:
    """Return ``record`` as an ``EmployeeRecord`` (or None), parsing raw mappings.

    Raises:
        RecordValidationError: If ``record`` is neither a record, a mapping nor None.
    """
    if record is None or isinstance(record, EmployeeRecord):
        return record
    if isinstance(record, Mapping):
        return parse_employee_row(record)
    raise RecordValidationError(
        f"Expected an EmployeeRecord, a field mapping or None, got {type(record).__name__}."
    )


def get_trend(record: RecordInput) -> TrendResult:
    """Performance trend for the selected record."""
    employee = coerce_record(record)
    if employee is None:
        return NO_RECORD_TREND
    return analyze_trend(employee)


def get_potential(record: RecordInput) -> PotentialAssessment:
    """Potential category for the selected record."""
    employee = coerce_record(record)
    if employee is None:
        return NO_RECORD_POTENTIAL
    return classify_potential(employee, analyze_trend(employee))


def get_recommendations(
    record: RecordInput,
    use_skill_level: bool = True,
    cap_without_skill: int = DEFAULT_CAP_WITHOUT_SKILL,
    cap_with_skill: int = DEFAULT_CAP_WITH_SKILL,
) -> RecommendationList:
    """Development recommendations for the selected record.

    Args:
        record:            Record, raw row mapping, or None.
        use_skill_level:   Refine with the record's skill level when known.
        cap_without_skill: Cap when no skill signal is used.
        cap_with_skill:    Cap when a skill signal is used.
    """
    employee = coerce_record(record)
    if employee is None:
        return NO_RECORD_RECOMMENDATIONS
    return recommend(
        classify_potential(employee, analyze_trend(employee)),
        skill_level=employee.skill_level if use_skill_level else None,
        cap_without_skill=cap_without_skill,
        cap_with_skill=cap_with_skill,
    )


def assess_employee(
    record: Union[EmployeeRecord, Mapping[str, Any]],
    use_skill_level: bool = True,
    cap_without_skill: int = DEFAULT_CAP_WITHOUT_SKILL,
    cap_with_skill: int = DEFAULT_CAP_WITH_SKILL,
) -> EmployeeAssessment:
    """Run the full pipeline once and bundle every derived view of the record.

    Raises:
        RecordValidationError: If ``record`` is missing or not a mapping.
    """
    employee = coerce_record(record)
    if employee is None:
        raise RecordValidationError("assess_employee() requires a record, got None.")

    trend = analyze_trend(employee)
    potential = classify_potential(employee, trend)
    recommendations = recommend(
        potential,
        skill_level=employee.skill_level if use_skill_level else None,
        cap_without_skill=cap_without_skill,
        cap_with_skill=cap_with_skill,
    )
    return EmployeeAssessment(
        personnel_id=employee.personnel_id,
        display_name=employee.display_name,
        trend=trend,
        potential=potential,
        recommendations=recommendations,
        focus_areas=focus_areas(potential.category),
        succession_status=succession_status(employee),
        nine_box_label=employee.nine_box.label,
    )
