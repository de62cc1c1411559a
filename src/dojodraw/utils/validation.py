"""Validation utilities for Dojo Draw.

This module provides reusable validation functions with consistent error handling.
"""

import math
import re
from typing import Any, Optional, Union

from dojodraw.constants import (
    CATEGORY_KATA,
    CATEGORY_KUMITE,
    MAX_AGE,
    MAX_WEIGHT,
    SEX_FEMALE,
    SEX_MALE,
)
from dojodraw.exceptions import ConfigurationError


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _invalid(message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, error_message=message)


# ========== Name Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate an entrant's display name.

    Surrounding whitespace is stripped and internal runs collapsed.

    Args:
        name: Name to validate

    Returns:
        ValidationResult with the cleaned name
    """
    if name is None or not str(name).strip():
        return _invalid("Name is required")

    cleaned = re.sub(r"\s+", " ", str(name).strip())
    return ValidationResult(is_valid=True, sanitized_value=cleaned)


# ========== Age Validation ==========


def validate_age(age: Any, max_age: int = MAX_AGE) -> ValidationResult:
    """Validate an age in whole years.

    Accepts ints and numeric strings; ``"12.0"`` style values from
    spreadsheets are accepted when they carry no fractional part.

    Args:
        age: Age value to validate
        max_age: Largest plausible age

    Returns:
        ValidationResult with the age as ``int``
    """
    if age is None or (isinstance(age, str) and not age.strip()):
        return _invalid("Age is required")
    if isinstance(age, bool):
        return _invalid(f"Age must be a whole number: {age}")

    try:
        as_float = float(str(age).strip())
    except ValueError:
        return _invalid(f"Age must be a whole number: {age}")

    if not math.isfinite(as_float) or not as_float.is_integer():
        return _invalid(f"Age must be a whole number: {age}")

    age_int = int(as_float)
    if age_int < 0 or age_int > max_age:
        return _invalid(f"Age must be between 0 and {max_age}: {age_int}")

    return ValidationResult(is_valid=True, sanitized_value=age_int)


# ========== Weight Validation ==========


def validate_weight(weight: Any, max_weight: float = MAX_WEIGHT) -> ValidationResult:
    """Validate a body weight in kilograms.

    Args:
        weight: Weight value to validate, must be positive
        max_weight: Largest plausible weight

    Returns:
        ValidationResult with the weight as ``float``
    """
    if weight is None or (isinstance(weight, str) and not weight.strip()):
        return _invalid("Weight is required")
    if isinstance(weight, bool):
        return _invalid(f"Weight must be a number: {weight}")

    try:
        # Some exports use a decimal comma
        weight_float = float(str(weight).strip().replace(",", "."))
    except ValueError:
        return _invalid(f"Weight must be a number: {weight}")

    if not math.isfinite(weight_float):
        return _invalid(f"Weight must be a number: {weight}")

    if weight_float <= 0 or weight_float > max_weight:
        return _invalid(f"Weight must be above 0 and at most {max_weight}: {weight}")

    return ValidationResult(is_valid=True, sanitized_value=weight_float)


# ========== Sex / Category Validation ==========


def validate_sex(sex: Optional[str]) -> ValidationResult:
    """Validate a sex value, accepting ``M``/``F`` and ``Male``/``Female``.

    Returns:
        ValidationResult with ``"M"`` or ``"F"``
    """
    if sex is None or not str(sex).strip():
        return _invalid("Sex is required")

    value = str(sex).strip().upper()
    if value in ("M", "MALE"):
        return ValidationResult(is_valid=True, sanitized_value=SEX_MALE)
    if value in ("F", "FEMALE"):
        return ValidationResult(is_valid=True, sanitized_value=SEX_FEMALE)
    return _invalid(f"Sex must be M or F: {sex}")


def validate_category(category: Optional[str]) -> ValidationResult:
    """Validate a competition category.

    Matching is by substring so event labels such as ``"Individual Kumite"``
    are understood.

    Returns:
        ValidationResult with ``"Kata"`` or ``"Kumite"``
    """
    if category is None or not str(category).strip():
        return _invalid("Category is required")

    value = str(category).strip().lower()
    if "kumite" in value:
        return ValidationResult(is_valid=True, sanitized_value=CATEGORY_KUMITE)
    if "kata" in value:
        return ValidationResult(is_valid=True, sanitized_value=CATEGORY_KATA)
    return _invalid(f"Category must be Kata or Kumite: {category}")


# ========== Band Interval Validation ==========


def validate_interval(
    label: str,
    minimum: Union[int, float],
    maximum: Union[int, float],
) -> ValidationResult:
    """Validate a closed ``[minimum, maximum]`` band interval.

    Args:
        label: Band description used in the error message
        minimum: Lower bound (inclusive)
        maximum: Upper bound (inclusive)
    """
    if minimum < 0 or maximum < 0:
        return _invalid(f"{label}: bounds must not be negative ({minimum}-{maximum})")
    if minimum > maximum:
        return _invalid(
            f"{label}: minimum {minimum} is greater than maximum {maximum}"
        )
    return ValidationResult(is_valid=True, sanitized_value=(minimum, maximum))


def validate_interval_strict(
    label: str,
    minimum: Union[int, float],
    maximum: Union[int, float],
) -> None:
    """Validate a band interval and raise if it is unusable.

    Raises:
        ConfigurationError: If the interval is inverted or negative
    """
    result = validate_interval(label, minimum, maximum)
    if not result.is_valid:
        raise ConfigurationError(result.error_message)
