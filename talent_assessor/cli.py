"""
Talent Assessor — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load the roster file.
  4. Run the assessment engine on the selected record(s).
  5. Report result to stdout.

Install and run::

    pip install -e .
    talent-assessor --help
    talent-assessor validate-config
    talent-assessor search  --roster "Employee profile 2025.csv" --term "al-harthy"
    talent-assessor assess  --roster "Employee profile 2025.csv" --employee 100234
    talent-assessor summary --roster "Employee profile 2025.csv"
    talent-assessor export  --roster "Employee profile 2025.csv" --out reports/assessments.csv
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="talent-assessor",
    help="Talent review assessment — performance trend, potential and development plan.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from talent_assessor.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from talent_assessor.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_roster_or_exit(roster: str, config):
    """Load the roster file, printing a friendly error and exiting on failure."""
    from talent_assessor.ingestion.roster import load_employee_csv

    try:
        return load_employee_csv(
            Path(roster),
            encoding=config.ingestion.encoding,
            rating_years=config.ingestion.rating_years,
        )
    except (FileNotFoundError, ValueError, UnicodeDecodeError) as exc:
        typer.echo(f"[ERROR] Could not read roster: {exc}", err=True)
        raise typer.Exit(code=1)


def _assess(record, config):
    from talent_assessor.assessment.service import assess_employee

    return assess_employee(
        record,
        cap_without_skill=config.recommendations.cap_without_skill,
        cap_with_skill=config.recommendations.cap_with_skill,
    )


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Roster encoding:      {config.ingestion.encoding}")
    typer.echo(f"  Rating years:         {', '.join(str(y) for y in config.ingestion.rating_years)}")
    typer.echo(f"  Recommendation caps:  {config.recommendations.cap_without_skill} "
               f"(no skill) / {config.recommendations.cap_with_skill} (with skill)")
    typer.echo(f"  Search results:       {config.search.max_results}")
    typer.echo(f"  Log level:            {config.logging.level}")
    typer.echo(f"  Debug mode:           {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("search")
def search(
    roster: str = typer.Option(..., "--roster", help="Path to the roster CSV export."),
    term: str = typer.Option(..., "--term", help="Name fragment or personnel id fragment."),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """List employees whose name or personnel id contains TERM."""
    from talent_assessor.ingestion.roster import search_employees
    from talent_assessor.reporting.formatters import format_search_results

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    records = _load_roster_or_exit(roster, config)

    matches = search_employees(records, term, limit=config.search.max_results)
    typer.echo(format_search_results(matches, term))


@app.command("assess")
def assess(
    roster: str = typer.Option(..., "--roster", help="Path to the roster CSV export."),
    employee: str = typer.Option(
        ...,
        "--employee",
        help="Personnel id, or exact full name if unique.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the assessment as JSON."),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Assess one employee: trend, potential category and recommendations."""
    from talent_assessor.ingestion.roster import find_employee
    from talent_assessor.reporting.formatters import format_employee_profile

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    records = _load_roster_or_exit(roster, config)

    record = find_employee(records, employee)
    if record is None:
        typer.echo(f"[ERROR] No unique employee matches '{employee}'.", err=True)
        raise typer.Exit(code=1)

    assessment = _assess(record, config)
    if as_json:
        typer.echo(json.dumps(assessment.model_dump(mode="json"), indent=2))
    else:
        typer.echo(format_employee_profile(record, assessment))


@app.command("summary")
def summary(
    roster: str = typer.Option(..., "--roster", help="Path to the roster CSV export."),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Count employees per potential category across the roster."""
    from talent_assessor.reporting.formatters import format_category_summary

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    records = _load_roster_or_exit(roster, config)

    typer.echo(format_category_summary([_assess(r, config) for r in records]))


@app.command("export")
def export(
    roster: str = typer.Option(..., "--roster", help="Path to the roster CSV export."),
    out: str = typer.Option(..., "--out", help="Destination file (.csv or .json)."),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Assess every employee and write the results to CSV or JSON."""
    from talent_assessor.reporting.export import (
        EXPORT_FIELDNAMES,
        export_to_csv,
        export_to_json,
        flatten_assessment_for_export,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    records = _load_roster_or_exit(roster, config)

    assessments = [_assess(r, config) for r in records]
    out_path = Path(out)
    if out_path.suffix.lower() == ".json":
        written = export_to_json([a.model_dump(mode="json") for a in assessments], out_path)
    elif out_path.suffix.lower() == ".csv":
        rows = [flatten_assessment_for_export(a) for a in assessments]
        written = export_to_csv(rows, out_path, fieldnames=EXPORT_FIELDNAMES)
    else:
        typer.echo(f"[ERROR] Unsupported export format '{out_path.suffix}'. Use .csv or .json.", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"  Assessed {len(assessments)} employee(s).")
    typer.echo(f"[OK] Written to {written}")


if __name__ == "__main__":
    app()
