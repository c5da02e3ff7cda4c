"""
Derived assessment models.

Everything in this module is computed on demand from an ``EmployeeRecord``
and never stored: ``TrendResult`` (trend analyzer), ``PotentialAssessment``
(potential classifier), ``RecommendationList`` (recommendation engine) and
the ``EmployeeAssessment`` bundle returned to presentation code.

All models are frozen. Recomputing from the same record yields equal
objects, so callers can compare results directly.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from talent_assessor.taxonomy.talent_taxonomy import (
    GridTier,
    PotentialCategory,
    TrendDirection,
)


class TrendResult(BaseModel):
    """Performance trend over up to three rated periods.

    Attributes:
        direction: Change between the two most recent rated periods.
        consistent: Whether all rated periods agree with ``direction``.
        rating_series: Ordinals of the rated periods, oldest first.
        latest_rating: Last entry of ``rating_series``; 0 when empty.
    """

    model_config = ConfigDict(frozen=True)

    direction: TrendDirection
    consistent: bool
    rating_series: tuple[int, ...] = ()
    latest_rating: int = 0

    @property
    def has_data(self) -> bool:
        return len(self.rating_series) > 0

    @property
    def label(self) -> str:
        """Display label, e.g. ``"Improving (Consistent)"``."""
        qualifier = "Consistent" if self.consistent else "Variable"
        return f"{self.direction.label} ({qualifier})"


class SupportingSignals(BaseModel):
    """Inputs the classifier based its decision on."""

    model_config = ConfigDict(frozen=True)

    trend: TrendDirection
    grid_tier: GridTier
    is_successor: bool


class PotentialAssessment(BaseModel):
    """Potential category with its display narrative."""

    model_config = ConfigDict(frozen=True)

    category: PotentialCategory
    narrative: str
    supporting_signals: Optional[SupportingSignals] = None


class RecommendationList(BaseModel):
    """Ordered, de-duplicated, capped development actions."""

    model_config = ConfigDict(frozen=True)

    items: tuple[str, ...] = ()
    cap: int = 0

    @model_validator(mode="after")
    def validate_items(self) -> "RecommendationList":
        if len(self.items) > self.cap:
            raise ValueError(
                f"{len(self.items)} recommendations exceed the cap of {self.cap}."
            )
        if len(set(self.items)) != len(self.items):
            raise ValueError(f"Duplicate recommendations in {list(self.items)}.")
        return self


class FocusAreas(BaseModel):
    """Strengths to leverage and areas to develop."""

    model_config = ConfigDict(frozen=True)

    strengths: str
    development: str


class EmployeeAssessment(BaseModel):
    """Full assessment of one employee, as handed to presentation code."""

    model_config = ConfigDict(frozen=True)

    personnel_id: str
    display_name: str
    trend: TrendResult
    potential: PotentialAssessment
    recommendations: RecommendationList
    focus_areas: FocusAreas
    succession_status: str
    nine_box_label: str
