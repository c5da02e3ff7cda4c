"""
Row parser for the HR roster export.

Converts one source row (a mapping of column name → value, as produced by
``csv.DictReader`` or any other tabular reader) into a typed
:class:`EmployeeRecord`.

Column matching
---------------
Column names are stripped and compared case-insensitively with internal
whitespace collapsed, so ``"Department "`` and ``"department"`` both match.

    Personnel no.          → personnel_id
    Employee(s)            → display_name
    Positions              → position
    Department / Function / Team / Grade / Entry Date
    Years of experience    → tenure_years
    Omani/Expat            → nationality_status
    9 box matrix           → nine_box
    Skill level            → skill_level
    Successor              → is_successor ("yes", any case)
    succession position    → succession_position
    <year> perfromance     → ratings (the export's spelling; "performance"
                             is accepted too)

Missing columns, empty cells and unrecognized labels are treated as absent.
Bad *data* never raises; only a row that is not a mapping at all raises
:class:`RecordValidationError`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Optional, Sequence

from talent_assessor.models.employee import DEFAULT_RATING_YEARS, EmployeeRecord
from talent_assessor.taxonomy.talent_taxonomy import (
    NationalityStatus,
    NineBoxCategory,
    PerformanceRating,
    SkillLevel,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

# UTF-8 byte-order mark, as decoded by utf-8 and by cp1252
_BOM_PREFIXES = ("\ufeff", "\u00ef\u00bb\u00bf")

FIELD_PERSONNEL_ID = "personnel no."
FIELD_DISPLAY_NAME = "employee(s)"
FIELD_POSITION = "positions"
FIELD_DEPARTMENT = "department"
FIELD_FUNCTION = "function"
FIELD_TEAM = "team"
FIELD_GRADE = "grade"
FIELD_ENTRY_DATE = "entry date"
FIELD_TENURE = "years of experience"
FIELD_NATIONALITY = "omani/expat"
FIELD_NINE_BOX = "9 box matrix"
FIELD_SKILL_LEVEL = "skill level"
FIELD_SUCCESSOR = "successor"
FIELD_SUCCESSION_POSITION = "succession position"

RATING_FIELD_SPELLINGS = ("perfromance", "performance")


class RecordValidationError(TypeError):
    """Raised when an input record is not a field → value mapping at all."""


def parse_employee_row(
    row: Mapping[str, Any],
    rating_years: Sequence[int] = DEFAULT_RATING_YEARS,
) -> EmployeeRecord:
    """Convert one roster row into an :class:`EmployeeRecord`.

    Args:
        row:          Column name → cell value.
        rating_years: The three consecutive years whose rating columns to read.

    Returns:
        A frozen ``EmployeeRecord``.

    Raises:
        RecordValidationError: If ``row`` is not a mapping.
        pydantic.ValidationError: If ``rating_years`` is not three consecutive years.
    """
    if not isinstance(row, Mapping):
        raise RecordValidationError(
            f"Employee record must be a mapping of field -> value, got {type(row).__name__}."
        )

    fields = _normalize_keys(row)
    years = tuple(rating_years)

    return EmployeeRecord(
        personnel_id=_text(fields.get(FIELD_PERSONNEL_ID)) or "",
        display_name=_text(fields.get(FIELD_DISPLAY_NAME)) or "",
        position=_text(fields.get(FIELD_POSITION)),
        department=_text(fields.get(FIELD_DEPARTMENT)),
        function=_text(fields.get(FIELD_FUNCTION)),
        team=_text(fields.get(FIELD_TEAM)),
        grade=_text(fields.get(FIELD_GRADE)),
        entry_date=_text(fields.get(FIELD_ENTRY_DATE)),
        tenure_years=_tenure(fields.get(FIELD_TENURE)),
        nationality_status=NationalityStatus.from_label(fields.get(FIELD_NATIONALITY)),
        nine_box=NineBoxCategory.from_label(fields.get(FIELD_NINE_BOX)),
        skill_level=SkillLevel.from_label(fields.get(FIELD_SKILL_LEVEL)),
        is_successor=parse_successor_flag(fields.get(FIELD_SUCCESSOR)),
        succession_position=_text(fields.get(FIELD_SUCCESSION_POSITION)),
        ratings=tuple(_rating(fields, year) for year in years),  # type: ignore[arg-type]
        rating_years=years,  # type: ignore[arg-type]
    )


def parse_successor_flag(value: Any) -> bool:
    """True only for a case-insensitive ``"yes"``; anything else is False."""
    if not isinstance(value, str):
        return False
    return value.strip().upper() == "YES"


# ── Private helpers ────────────────────────────────────────────────────────────

def _normalize_key(key: Any) -> str:
    text = str(key)
    for bom in _BOM_PREFIXES:
        if text.startswith(bom):
            text = text[len(bom):]
            break
    return _WHITESPACE.sub(" ", text.strip().lower())


def _normalize_keys(row: Mapping[str, Any]) -> dict[str, Any]:
    """Re-key ``row`` by normalized column name; the first non-empty value wins."""
    fields: dict[str, Any] = {}
    for key, value in row.items():
        if key is None:
            # csv.DictReader puts surplus cells under a None key
            continue
        norm = _normalize_key(key)
        if fields.get(norm) in (None, ""):
            fields[norm] = value
    return fields


def _text(value: Any) -> Optional[str]:
    """Return a stripped string, or None if absent/empty.

    Whole-number floats (``12345.0`` from a typed reader) lose the ``.0``.
    """
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    v = str(value).strip()
    return v if v else None


def _tenure(value: Any) -> Optional[float]:
    raw = _text(value)
    if raw is None:
        return None
    try:
        years = float(raw)
    except ValueError:
        logger.debug("Ignoring unparseable tenure value %r", raw)
        return None
    if years < 0 or years != years:  # negative or NaN
        logger.debug("Ignoring invalid tenure value %r", raw)
        return None
    return years


def _rating(fields: dict[str, Any], year: int) -> Optional[PerformanceRating]:
    for spelling in RATING_FIELD_SPELLINGS:
        value = fields.get(f"{year} {spelling}")
        if _text(value) is not None:
            rating = PerformanceRating.from_label(value)
            if rating is None:
                logger.debug("Unrecognized %d rating label %r treated as absent", year, value)
            return rating
    return None
