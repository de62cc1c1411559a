from datetime import date

import pytest
from openpyxl import Workbook

from dojodraw.exceptions import ImportException, InvalidEntrantDataException
from dojodraw.importers import (
    age_on,
    entrant_from_record,
    entrants_from_records,
    parse_entrants_from_csv,
    read_entrants_file,
)
from dojodraw.models import Category, Sex

CSV_TEXT = """Name,Age,Sex,Weight,Category
John Smith,12,M,45,Kumite
Sarah Johnson, 13 ,F,48,Kata
"""


def test_parse_csv():
    result = parse_entrants_from_csv(CSV_TEXT)

    assert result.rejected == []
    john, sarah = result.entrants
    assert john.name == "John Smith"
    assert john.age == 12
    assert john.sex is Sex.MALE
    assert john.weight == 45.0
    assert john.category is Category.KUMITE
    assert sarah.age == 13
    assert sarah.category is Category.KATA


def test_csv_with_unknown_headers_is_read_positionally():
    text = "a,b,c,d,e\nKen,10,M,30,Kata\n"

    result = parse_entrants_from_csv(text)

    assert [e.name for e in result.entrants] == ["Ken"]


def test_invalid_rows_are_rejected_with_row_numbers():
    text = CSV_TEXT + "Bad Age,ten,M,40,Kata\nNo Category,10,F,30,Judo\n"

    result = parse_entrants_from_csv(text)

    assert len(result.entrants) == 2
    assert [row for row, _ in result.rejected] == [4, 5]
    assert "Age must be a whole number" in result.rejected[0][1]
    assert "Category must be Kata or Kumite" in result.rejected[1][1]
    assert result.rejected_count == 2


def test_non_numeric_weight_is_rejected():
    result = parse_entrants_from_csv("name,age,sex,weight,category\nAiko,10,F,nan,Kumite\n")

    assert result.entrants == []
    assert result.rejected == [(2, "Weight must be a number: nan")]


def test_strict_import_raises():
    with pytest.raises(InvalidEntrantDataException, match="Row 2"):
        parse_entrants_from_csv("name,age,sex,weight,category\nX,10,Q,30,Kata\n", strict=True)


def test_blank_rows_are_skipped():
    result = parse_entrants_from_csv(CSV_TEXT + "\n,,,,\n")

    assert len(result.entrants) == 2
    assert result.rejected == []


def test_header_aliases_and_value_spellings():
    row = {
        "PARTICIPANT": "  Aiko   Tanaka ",
        "age": 11,
        "Gender": "female",
        "WEIGHT": "38,5",
        "Event": "Individual Kumite",
    }

    entrant = entrant_from_record(row)

    assert entrant.name == "Aiko Tanaka"
    assert entrant.sex is Sex.FEMALE
    assert entrant.weight == 38.5
    assert entrant.category is Category.KUMITE


def test_age_from_date_of_birth():
    row = {
        "Name": "Ken",
        "Date of Birth": "2014-06-15",
        "Sex": "M",
        "Weight": 35,
        "Category": "Kata",
    }

    entrant = entrant_from_record(row, reference_date=date(2025, 6, 14))

    assert entrant.age == 10


def test_age_on_birthday():
    assert age_on(date(2014, 6, 15), date(2025, 6, 15)) == 11


def test_bad_date_of_birth():
    row = {"Name": "Ken", "DOB": "15/06/2014", "Sex": "M", "Weight": 35, "Category": "Kata"}

    result = entrants_from_records([row])

    assert result.entrants == []
    assert "YYYY-MM-DD" in result.rejected[0][1]


def test_all_errors_are_reported_together():
    with pytest.raises(InvalidEntrantDataException) as excinfo:
        entrant_from_record({"Name": "", "Age": -1, "Sex": "M", "Weight": 0, "Category": "Kata"})

    message = str(excinfo.value)
    assert "Name is required" in message
    assert "Age must be between" in message
    assert "Weight must be above 0" in message


def test_read_csv_file(tmp_path):
    path = tmp_path / "entrants.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")

    result = read_entrants_file(path)

    assert [e.name for e in result.entrants] == ["John Smith", "Sarah Johnson"]


def test_read_excel_file(tmp_path):
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(["Name", "Age", "Sex", "Weight", "Category"])
    sheet.append(["Michael Chen", 11, "M", 42, "Kumite"])
    sheet.append([None, None, None, None, None])
    sheet.append(["Lisa Garcia", 12, "F", 44.5, "kata"])
    path = tmp_path / "entrants.xlsx"
    workbook.save(path)

    result = read_entrants_file(path)

    assert [e.name for e in result.entrants] == ["Michael Chen", "Lisa Garcia"]
    assert result.entrants[1].weight == 44.5
    assert result.entrants[1].category is Category.KATA


def test_unsupported_file_type(tmp_path):
    path = tmp_path / "entrants.pdf"
    path.write_bytes(b"%PDF")

    with pytest.raises(ImportException):
        read_entrants_file(path)


def test_corrupt_excel_file(tmp_path):
    path = tmp_path / "entrants.xlsx"
    path.write_text("Name,Age,Sex,Weight,Category\n", encoding="utf-8")

    with pytest.raises(ImportException, match="Cannot read"):
        read_entrants_file(path)


def test_missing_csv_file(tmp_path):
    with pytest.raises(ImportException):
        read_entrants_file(tmp_path / "missing.csv")
