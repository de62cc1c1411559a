import pytest

from dojodraw.exceptions import ConfigurationError
from dojodraw.utils.validation import (
    validate_age,
    validate_category,
    validate_interval,
    validate_interval_strict,
    validate_sex,
    validate_weight,
)


@pytest.mark.parametrize("value", [12, "12", " 12 ", "12.0", 12.0])
def test_valid_ages(value):
    result = validate_age(value)
    assert result
    assert result.sanitized_value == 12


@pytest.mark.parametrize(
    "value", [None, "", "twelve", 12.5, -1, 121, True, "nan", "inf"]
)
def test_invalid_ages(value):
    assert not validate_age(value)


def test_weight_accepts_decimal_comma():
    assert validate_weight("45,5").sanitized_value == 45.5


def test_weight_is_returned_as_float():
    assert validate_weight(40).sanitized_value == 40.0


@pytest.mark.parametrize(
    "value", [0, -3, "heavy", None, 301, "nan", "NaN", "inf", float("nan")]
)
def test_invalid_weights(value):
    assert not validate_weight(value)


@pytest.mark.parametrize(
    "value,expected",
    [("M", "M"), ("m", "M"), ("Male", "M"), ("F", "F"), ("female", "F")],
)
def test_sex_spellings(value, expected):
    assert validate_sex(value).sanitized_value == expected


def test_unknown_sex():
    result = validate_sex("X")
    assert not result
    assert "M or F" in result.error_message


@pytest.mark.parametrize(
    "value,expected",
    [("Kata", "Kata"), ("KUMITE", "Kumite"), ("Team Kata", "Kata"), ("kumite -45", "Kumite")],
)
def test_category_spellings(value, expected):
    assert validate_category(value).sanitized_value == expected


def test_unknown_category():
    assert not validate_category("Judo")


def test_intervals():
    assert validate_interval("Band", 8, 8)
    assert not validate_interval("Band", 9, 8)
    assert not validate_interval("Band", -1, 8)
    with pytest.raises(ConfigurationError, match="Band"):
        validate_interval_strict("Band", 40.5, 40.0)
