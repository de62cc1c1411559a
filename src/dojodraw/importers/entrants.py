"""Entrant-list provider.

Turns raw tabular records (CSV text, spreadsheet rows or plain dicts) into
validated ``Entrant`` objects. Column headers are matched
case-insensitively against a few common spellings, so registration sheets
exported from different tools can be read without editing.
"""

# Dojo Draw
# Copyright (C) 2025  Dojo Draw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import csv
import io
import zipfile
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from dojodraw.constants import (
    AGE_HEADERS,
    CATEGORY_HEADERS,
    CSV_EXTENSIONS,
    DOB_HEADERS,
    EXCEL_EXTENSIONS,
    NAME_HEADERS,
    SEX_HEADERS,
    WEIGHT_HEADERS,
)
from dojodraw.exceptions import ImportException, InvalidEntrantDataException
from dojodraw.models.entrant import Category, Entrant, Sex
from dojodraw.type_hints import RejectedRow
from dojodraw.utils import setup_logger
from dojodraw.utils.validation import (
    validate_age,
    validate_category,
    validate_name,
    validate_sex,
    validate_weight,
)

logger = setup_logger(__name__)

# Column order assumed when a CSV file has no recognizable header
DEFAULT_CSV_COLUMNS = ("name", "age", "sex", "weight", "category")


@dataclass
class EntrantImport:
    """Entrants read from one source, plus the records that were refused.

    Attributes
    ----------
    entrants : list of Entrant
        Valid entrants in source order.
    rejected : list of tuple
        ``(row_number, reason)`` for every refused record.
    """

    entrants: List[Entrant] = field(default_factory=list)
    rejected: List[RejectedRow] = field(default_factory=list)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)


def _find_field(row: Mapping[str, Any], aliases: Sequence[str]) -> Optional[str]:
    for key in row:
        if key is not None and str(key).strip().lower() in aliases:
            return key
    return None


def _value(row: Mapping[str, Any], aliases: Sequence[str]) -> Any:
    key = _find_field(row, aliases)
    return row[key] if key is not None else None


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise InvalidEntrantDataException(
            f"Date of birth must be YYYY-MM-DD: {value}"
        ) from None


def age_on(date_of_birth: date, reference_date: Optional[date] = None) -> int:
    """Age in completed years on ``reference_date`` (today by default)."""
    reference_date = reference_date or date.today()
    return relativedelta(reference_date, date_of_birth).years


def entrant_from_record(
    row: Mapping[str, Any], reference_date: Optional[date] = None
) -> Entrant:
    """Build one entrant from a record keyed by column header.

    When the record has no age but does have a date of birth, the age is
    worked out on ``reference_date``.

    Raises:
        InvalidEntrantDataException: If any field is missing or invalid
    """
    age = _value(row, AGE_HEADERS)
    if age is None or (isinstance(age, str) and not age.strip()):
        dob = _value(row, DOB_HEADERS)
        if dob not in (None, ""):
            age = age_on(_parse_date(dob), reference_date)

    results = {
        "name": validate_name(_value(row, NAME_HEADERS)),
        "age": validate_age(age),
        "sex": validate_sex(_value(row, SEX_HEADERS)),
        "weight": validate_weight(_value(row, WEIGHT_HEADERS)),
        "category": validate_category(_value(row, CATEGORY_HEADERS)),
    }
    errors = [r.error_message for r in results.values() if not r.is_valid]
    if errors:
        raise InvalidEntrantDataException("; ".join(errors))

    return Entrant(
        name=results["name"].sanitized_value,
        age=results["age"].sanitized_value,
        sex=Sex(results["sex"].sanitized_value),
        weight=results["weight"].sanitized_value,
        category=Category(results["category"].sanitized_value),
    )


def _is_blank(row: Mapping[str, Any]) -> bool:
    return all(v is None or not str(v).strip() for v in row.values())


def entrants_from_records(
    rows: Iterable[Mapping[str, Any]],
    strict: bool = False,
    reference_date: Optional[date] = None,
    first_row_number: int = 1,
) -> EntrantImport:
    """Validate a sequence of records into entrants.

    Blank records are skipped. Invalid records either abort the import
    (``strict``) or are collected in ``EntrantImport.rejected``.

    Args:
        rows: Records keyed by column header
        strict: Raise on the first invalid record instead of collecting it
        reference_date: Date ages are computed on from a date of birth
        first_row_number: Row number reported for the first record

    Raises:
        InvalidEntrantDataException: If ``strict`` and a record is invalid
    """
    result = EntrantImport()
    for row_number, row in enumerate(rows, start=first_row_number):
        if _is_blank(row):
            continue
        try:
            result.entrants.append(entrant_from_record(row, reference_date))
        except InvalidEntrantDataException as e:
            if strict:
                raise InvalidEntrantDataException(f"Row {row_number}: {e}") from e
            logger.warning("Skipping row %s: %s", row_number, e)
            result.rejected.append((row_number, str(e)))

    logger.info(
        "Imported %s entrants (%s rejected)",
        len(result.entrants),
        result.rejected_count,
    )
    return result


def _csv_records(text: str) -> List[Dict[str, Any]]:
    lines = [row for row in csv.reader(io.StringIO(text.strip()))]
    if not lines:
        return []

    header = [h.strip() for h in lines[0]]
    if _find_field(dict.fromkeys(header), NAME_HEADERS) is None:
        # Headers are not ones we know; fall back to positional columns
        header = list(DEFAULT_CSV_COLUMNS)
    return [dict(zip(header, (v.strip() for v in line))) for line in lines[1:]]


def parse_entrants_from_csv(
    text: str, strict: bool = False, reference_date: Optional[date] = None
) -> EntrantImport:
    """Read entrants from CSV text whose first line is a header row."""
    return entrants_from_records(
        _csv_records(text),
        strict=strict,
        reference_date=reference_date,
        first_row_number=2,
    )


def _excel_records(path: Path) -> List[Dict[str, Any]]:
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        # Registration sheets keep entrants on the first worksheet
        sheet = workbook.worksheets[0]
        rows = list(sheet.iter_rows(values_only=True))
    finally:
        workbook.close()

    if not rows:
        return []
    headers = [str(h).strip() if h is not None else None for h in rows[0]]
    return [dict(zip(headers, values)) for values in rows[1:]]


def read_entrants_file(
    path: Union[str, Path],
    strict: bool = False,
    reference_date: Optional[date] = None,
) -> EntrantImport:
    """Read entrants from a CSV or Excel file, chosen by file suffix.

    Raises:
        ImportException: If the file is missing, unreadable or of an
            unsupported type
        InvalidEntrantDataException: If ``strict`` and a record is invalid
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in CSV_EXTENSIONS:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ImportException(f"Cannot read {path}: {e}") from e
        logger.debug("Reading CSV entrant list %s", path)
        return parse_entrants_from_csv(text, strict, reference_date)

    if suffix in EXCEL_EXTENSIONS:
        try:
            records = _excel_records(path)
        except (
            OSError,
            ValueError,
            KeyError,
            zipfile.BadZipFile,
            InvalidFileException,
        ) as e:
            raise ImportException(f"Cannot read {path}: {e}") from e
        logger.debug("Reading Excel entrant list %s", path)
        return entrants_from_records(
            records,
            strict=strict,
            reference_date=reference_date,
            first_row_number=2,
        )

    raise ImportException(f"Unsupported entrant file type: {path.suffix or path.name}")
