"""Tests for talent_assessor.reporting.export."""

from __future__ import annotations

import csv
import json

from talent_assessor.assessment.service import assess_employee
from talent_assessor.reporting.export import (
    EXPORT_FIELDNAMES,
    export_to_csv,
    export_to_json,
    flatten_assessment_for_export,
)


def test_flatten_has_all_columns(sample_row) -> None:
    row = flatten_assessment_for_export(assess_employee(sample_row))
    assert list(row) == EXPORT_FIELDNAMES
    assert row["category"] == "high_potential"
    assert row["rating_series"] == "3 4 5"
    assert row["recommendations"].startswith("Leadership development program; ")


def test_export_to_csv_round_trip(tmp_path, sample_row) -> None:
    rows = [flatten_assessment_for_export(assess_employee(sample_row))]
    path = export_to_csv(rows, tmp_path / "out" / "assessments.csv", EXPORT_FIELDNAMES)
    with path.open(encoding="utf-8", newline="") as f:
        read_back = list(csv.DictReader(f))
    assert read_back[0]["personnel_id"] == "100234"
    assert read_back[0]["trend"] == "improving"


def test_export_to_csv_empty(tmp_path) -> None:
    path = export_to_csv([], tmp_path / "empty.csv")
    assert path.read_text(encoding="utf-8") == ""


def test_export_to_json(tmp_path, sample_row) -> None:
    data = [assess_employee(sample_row).model_dump(mode="json")]
    path = export_to_json(data, tmp_path / "assessments.json")
    loaded = json.loads(path.read_text(encoding="utf-8"))
    assert loaded[0]["potential"]["category"] == "high_potential"


def test_export_to_csv_drops_columns_outside_fieldnames(tmp_path) -> None:
    rows = [{"personnel_id": "7", "display_name": "Jane Doe", "note": "x"}]
    path = export_to_csv(rows, tmp_path / "subset.csv", ["display_name", "personnel_id"])
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == ["display_name,personnel_id", "Jane Doe,7"]
