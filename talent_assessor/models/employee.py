"""
Employee record model.

``EmployeeRecord`` is the typed, read-only snapshot of one reviewed employee
as supplied by the roster ingestion layer. Every optional field models
absence explicitly (``None`` or an ``UNKNOWN`` enum member) rather than with
sentinel strings such as ``"#N/A"``.

The three annual ratings are stored as a fixed 3-slot tuple in chronological
order, paired with ``rating_years`` for display. A slot is ``None`` when the
period was not rated or the source label was not recognized.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from talent_assessor.taxonomy.talent_taxonomy import (
    NationalityStatus,
    NineBoxCategory,
    PerformanceRating,
    SkillLevel,
)

RatingSlots = tuple[
    Optional[PerformanceRating],
    Optional[PerformanceRating],
    Optional[PerformanceRating],
]

DEFAULT_RATING_YEARS: tuple[int, int, int] = (2021, 2022, 2023)


class EmployeeRecord(BaseModel):
    """One reviewed employee.

    Attributes:
        personnel_id: Personnel number, kept as a string (leading zeros matter).
        display_name: Full name as shown in the roster.
        position: Position / job title.
        department: Organizational department, if known.
        function: Organizational function, if known.
        team: Team, if known.
        grade: Grade code, if known.
        entry_date: Entry date as exported (display only, not parsed).
        tenure_years: Years of service; non-negative.
        nationality_status: Local / expatriate flag.
        nine_box: 9-box placement; ``UNKNOWN`` when absent or unrated.
        skill_level: Proficiency signal; ``UNKNOWN`` when absent.
        is_successor: ``True`` only when the source flag equals "yes"
            (case-insensitive).
        succession_position: Target position for the succession plan.
        ratings: Three chronological annual ratings (``None`` = not rated).
        rating_years: Calendar years of the three rating slots.
    """

    model_config = ConfigDict(frozen=True)

    personnel_id: str
    display_name: str
    position: Optional[str] = None
    department: Optional[str] = None
    function: Optional[str] = None
    team: Optional[str] = None
    grade: Optional[str] = None
    entry_date: Optional[str] = None
    tenure_years: Optional[float] = None
    nationality_status: NationalityStatus = NationalityStatus.UNKNOWN
    nine_box: NineBoxCategory = NineBoxCategory.UNKNOWN
    skill_level: SkillLevel = SkillLevel.UNKNOWN
    is_successor: bool = False
    succession_position: Optional[str] = None
    ratings: RatingSlots = (None, None, None)
    rating_years: tuple[int, int, int] = DEFAULT_RATING_YEARS

    @field_validator("tenure_years")
    @classmethod
    def validate_tenure(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v < 0:
            raise ValueError(f"tenure_years must be non-negative, got {v}.")
        return v

    @model_validator(mode="after")
    def validate_rating_years(self) -> "EmployeeRecord":
        first, second, third = self.rating_years
        if not (second == first + 1 and third == second + 1):
            raise ValueError(
                f"rating_years must be three consecutive years, got {self.rating_years}."
            )
        return self

    def rating_for_year(self, year: int) -> Optional[PerformanceRating]:
        """Return the rating recorded for ``year``, or ``None`` if out of range / unrated."""
        if year not in self.rating_years:
            return None
        return self.ratings[self.rating_years.index(year)]
