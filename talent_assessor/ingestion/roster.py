"""
Roster loading and lookup.

``load_employee_csv()`` reads the delimited HR export into :class:`EmployeeRecord`
objects. The delimiter (comma, semicolon or tab) is taken from the header line.
A leading UTF-8 byte-order mark is ignored and blank lines are skipped. A row
the model rejects is logged and skipped so one bad line does not hide the
rest of the roster. Rows without a personnel id are kept but logged.

``search_employees()`` is the autocomplete used by the CLI: case-insensitive
substring match on the display name, or substring match on the personnel id.
"""

from __future__ import annotations

import codecs
import csv
import logging
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from talent_assessor.ingestion.record_parser import parse_employee_row
from talent_assessor.models.employee import DEFAULT_RATING_YEARS, EmployeeRecord

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 5


def load_employee_csv(
    path: Path,
    encoding: str = "cp1252",
    rating_years: Sequence[int] = DEFAULT_RATING_YEARS,
) -> list[EmployeeRecord]:
    """Parse a roster export into employee records.

    Args:
        path:         Path to the delimited file (must exist).
        encoding:     Text encoding of the export.
        rating_years: The three consecutive rating years to read.

    Returns:
        Records in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file has no header row.
    """
    if not path.exists():
        raise FileNotFoundError(f"Roster file not found: {path}")

    if codecs.lookup(encoding).name == "utf-8":
        encoding = "utf-8-sig"

    with open(path, encoding=encoding, newline="") as f:
        header = f.readline()
        f.seek(0)
        reader = csv.DictReader(f, delimiter=_detect_delimiter(header))

        if reader.fieldnames is None:
            raise ValueError(f"Roster file is empty or has no header row: {path}")

        rows = [row for row in reader if not _is_blank(row)]

    records: list[EmployeeRecord] = []
    skipped = 0
    for i, row in enumerate(rows):
        try:
            record = parse_employee_row(row, rating_years=rating_years)
        except ValidationError as exc:
            skipped += 1
            logger.warning("Skipping roster row %d in %s: %s", i + 2, path.name, exc)
            continue
        if not record.personnel_id:
            logger.warning("Roster row %d in %s has no personnel id", i + 2, path.name)
        records.append(record)

    if skipped:
        logger.warning("Skipped %d invalid row(s) in %s", skipped, path.name)
    logger.info("Loaded %d employee record(s) from %s", len(records), path.name)
    return records


def search_employees(
    records: Sequence[EmployeeRecord],
    term: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> list[EmployeeRecord]:
    """Return up to ``limit`` records matching ``term`` by name or id, in roster order."""
    needle = term.strip()
    if not needle:
        return []
    needle_lower = needle.lower()

    matches: list[EmployeeRecord] = []
    for record in records:
        if needle_lower in record.display_name.lower() or needle in record.personnel_id:
            matches.append(record)
            if len(matches) >= limit:
                break
    return matches


def find_employee(records: Sequence[EmployeeRecord], key: str) -> Optional[EmployeeRecord]:
    """Exact lookup by personnel id, else by unique case-insensitive display name."""
    key = key.strip()
    if not key:
        return None

    for record in records:
        if record.personnel_id == key:
            return record

    by_name = [r for r in records if r.display_name.lower() == key.lower()]
    if len(by_name) == 1:
        return by_name[0]
    if len(by_name) > 1:
        logger.warning("Name %r matches %d employees; use the personnel id", key, len(by_name))
    return None


# ── Private helpers ────────────────────────────────────────────────────────────

def _detect_delimiter(header: str) -> str:
    """Pick the most frequent of comma, semicolon and tab in the header line."""
    counts = {d: header.count(d) for d in (",", ";", "\t")}
    best = max(counts, key=lambda d: counts[d])
    return best if counts[best] > 0 else ","


def _is_blank(row: dict) -> bool:
    return all(not (v or "").strip() for v in row.values() if isinstance(v, str) or v is None)
