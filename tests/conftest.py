"""
Shared pytest fixtures for the Talent Assessor test suite.

Provides:
  - ``make_record``: factory building an ``EmployeeRecord`` from keyword
    overrides, with ratings given as a list of ``PerformanceRating | None``.
  - ``sample_row``: a raw roster row exactly as the HR export names its
    columns (trailing spaces and the "perfromance" spelling included).
  - ``roster_csv``: a small roster export written to a temp file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from talent_assessor.models.employee import EmployeeRecord
from talent_assessor.taxonomy.talent_taxonomy import (
    NineBoxCategory,
    PerformanceRating,
    SkillLevel,
)

R = PerformanceRating


@pytest.fixture
def make_record() -> Callable[..., EmployeeRecord]:
    """Return a factory: ``make_record(ratings=[...], nine_box=..., **fields)``."""

    def _make(
        ratings: Optional[list[Optional[PerformanceRating]]] = None,
        nine_box: NineBoxCategory = NineBoxCategory.UNKNOWN,
        skill_level: SkillLevel = SkillLevel.UNKNOWN,
        is_successor: bool = False,
        **fields: Any,
    ) -> EmployeeRecord:
        slots = list(ratings or [])
        slots += [None] * (3 - len(slots))
        fields.setdefault("personnel_id", "100234")
        fields.setdefault("display_name", "Aisha Al-Harthy")
        return EmployeeRecord(
            ratings=tuple(slots),
            nine_box=nine_box,
            skill_level=skill_level,
            is_successor=is_successor,
            **fields,
        )

    return _make


@pytest.fixture
def sample_row() -> dict[str, Any]:
    """A raw roster row keyed by the export's own column names."""
    return {
        "Personnel no.": "100234",
        "Employee(s)": "Aisha Al-Harthy",
        "Positions": "Process Engineer",
        "Department ": "Operations",
        "Grade": "G7",
        "Entry Date": "2016-03-01",
        "Years of experience": "9",
        "Omani/Expat": "Omani",
        "2021 perfromance ": "Achieved Target",
        "2022 perfromance ": "Exceed Target",
        "2023 perfromance ": "Exceptional",
        "9 box matrix": "Hi-Potential",
        "Successor": "YES",
        "succession position": "Operations Superintendent",
    }


ROSTER_CSV = (
    "Personnel no.,Employee(s),Positions,Department ,Grade,Omani/Expat,"
    "2021 perfromance ,2022 perfromance ,2023 perfromance ,9 box matrix,"
    "Skill level,Successor,succession position\n"
    "100234,Aisha Al-Harthy,Process Engineer,Operations,G7,Omani,"
    "Achieved Target,Exceed Target,Exceptional,Hi-Potential,,YES,Operations Superintendent\n"
    "100377,Rahul Menon,Planner,Maintenance,G6,Expat,"
    "Achieved Target,Achieved Target,Exceed Target,Promising,Advanced,no,\n"
    "100412,Salim Al-Busaidi,Technician,Maintenance,G4,Omani,"
    "Need Improvement,Low Performance,Need Improvement,Shortfall,Basic,,\n"
    "\n"
    "100588,Maria Santos,Analyst,Finance,G5,Expat,"
    "#N/A,Unrated,,#N/A,,,\n"
)


@pytest.fixture
def roster_csv(tmp_path: Path) -> Path:
    """A four-employee roster export (with one blank line) on disk."""
    path = tmp_path / "roster.csv"
    path.write_text(ROSTER_CSV, encoding="cp1252")
    return path
