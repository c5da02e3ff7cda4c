"""
ASCII terminal formatters for CLI reporting commands.

All formatters accept domain objects and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).
"""

from __future__ import annotations

from talent_assessor.models.assessment import EmployeeAssessment
from talent_assessor.models.employee import EmployeeRecord

NOT_RATED = "Not Rated"


def format_search_results(matches: list[EmployeeRecord], term: str) -> str:
    """One line per match: ``  #<id>  <name>  (<position>)``."""
    if not matches:
        return f"  (no employees match '{term}')"
    lines = []
    for rec in matches:
        position = f"  ({rec.position})" if rec.position else ""
        lines.append(f"  #{rec.personnel_id:<10} {rec.display_name}{position}")
    return "\n".join(lines)


def format_employee_profile(record: EmployeeRecord, assessment: EmployeeAssessment) -> str:
    """Render the profile, performance and assessment sections for one employee.

    Example::

        === Employee Profile ===
          Name:             Aisha Al-Harthy  [local]
          Position:         Process Engineer
          ...
        === Performance Analysis ===
          2021:  Achieved Target
          2022:  Exceed Target
          2023:  Exceptional
          Trend: Improving (Consistent)
        ...
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Employee Profile ===")
    lines.append(f"  Name:             {record.display_name}  [{record.nationality_status.value}]")
    lines.append(f"  Position:         {record.position or '-'}")
    lines.append(f"  Personnel ID:     {record.personnel_id}")
    lines.append(f"  Department:       {record.department or '-'}")
    if record.function:
        lines.append(f"  Function:         {record.function}")
    if record.team:
        lines.append(f"  Team:             {record.team}")
    lines.append(f"  Grade:            {record.grade or '-'}")
    lines.append(f"  Entry date:       {record.entry_date or '-'}")
    tenure = f"{record.tenure_years:g} years" if record.tenure_years is not None else "-"
    lines.append(f"  Years of service: {tenure}")

    lines.append("")
    lines.append("=== Performance Analysis ===")
    for year, rating in zip(record.rating_years, record.ratings):
        lines.append(f"  {year}:  {rating.label if rating else NOT_RATED}")
    lines.append(f"  Trend: {assessment.trend.label}")
    lines.append(f"  9-Box Matrix Position: {assessment.nine_box_label}")
    lines.append(f"  Succession: {assessment.succession_status}")

    lines.append("")
    lines.append("=== Assessment & Recommendations ===")
    lines.append(f"  [{assessment.potential.category.label.upper()}]")
    lines.append(f"  {assessment.potential.narrative}")
    lines.append("")
    lines.append("  Development Recommendations:")
    for item in assessment.recommendations.items:
        lines.append(f"    * {item}")
    lines.append("")
    lines.append("  Key Focus Areas:")
    lines.append(f"    Strengths to Leverage:  {assessment.focus_areas.strengths}")
    lines.append(f"    Areas for Development:  {assessment.focus_areas.development}")
    return "\n".join(lines)


def format_category_summary(assessments: list[EmployeeAssessment]) -> str:
    """Count of employees per potential category, largest first."""
    counts: dict[str, int] = {}
    for a in assessments:
        label = a.potential.category.label
        counts[label] = counts.get(label, 0) + 1

    lines = ["", "=== Potential Categories ==="]
    if not counts:
        lines.append("  (no employees)")
        return "\n".join(lines)
    for label, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])):
        lines.append(f"  {label:<20} {count:>5}")
    lines.append(f"  {'Total':<20} {len(assessments):>5}")
    return "\n".join(lines)
