"""
Export helpers for spreadsheet review and downstream analysis.

All functions write to disk and return the written ``Path``.

CSV exports are flat (no nested dicts) so they open directly in Excel or
Power BI. ``flatten_assessment_for_export()`` turns one
``EmployeeAssessment`` into such a row.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from talent_assessor.models.assessment import EmployeeAssessment

EXPORT_FIELDNAMES: list[str] = [
    "personnel_id",
    "display_name",
    "nine_box",
    "trend",
    "consistent",
    "rating_series",
    "latest_rating",
    "category",
    "narrative",
    "recommendations",
    "succession_status",
]


def export_to_csv(
    rows: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write flattened assessment rows as UTF-8 CSV.

    ``fieldnames`` fixes the column order (normally ``EXPORT_FIELDNAMES``);
    without it the first row's keys are used. Keys outside the column list
    are dropped. An empty roster produces an empty file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        if rows:
            writer = csv.DictWriter(
                f, fieldnames=fieldnames or list(rows[0]), extrasaction="ignore"
            )
            writer.writeheader()
            writer.writerows(rows)
    return path


def export_to_json(data: dict | list, path: Path) -> Path:
    """Dump assessments (or any JSON-able payload) with two-space indentation."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


def flatten_assessment_for_export(assessment: EmployeeAssessment) -> dict:
    """One flat row per employee; list fields are joined with ``"; "``."""
    trend = assessment.trend
    return {
        "personnel_id":      assessment.personnel_id,
        "display_name":      assessment.display_name,
        "nine_box":          assessment.nine_box_label,
        "trend":             trend.direction.value,
        "consistent":        trend.consistent,
        "rating_series":     " ".join(str(r) for r in trend.rating_series),
        "latest_rating":     trend.latest_rating,
        "category":          assessment.potential.category.value,
        "narrative":         assessment.potential.narrative,
        "recommendations":   "; ".join(assessment.recommendations.items),
        "succession_status": assessment.succession_status,
    }
