"""Validation utilities for Guide Pairing.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Any, Optional, Union

from guidepairing.constants import (
    ACTIVITIES,
    PACE_MAX_MINUTES,
    PACE_MIN_MINUTES,
    PACE_SECOND_STEPS,
    ROLE_ATHLETE,
    ROLE_GUIDE,
    STATUS_MAYBE,
    STATUS_NO,
    STATUS_YES,
)
from guidepairing.exceptions import PaceValidationException
from guidepairing.models.pace import Pace


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


# ========== Pace Validation ==========


def validate_pace(
    pace: Union[str, Pace, None], required: bool = False
) -> ValidationResult:
    """Validate a pace as entered on a sign-up form.

    Minutes must fall between 6 and 20 and seconds must be one of
    0, 15, 30 or 45.

    Args:
        pace: ``M:SS`` text or a Pace
        required: Whether a pace is required (empty = invalid)

    Returns:
        ValidationResult whose sanitized_value is a Pace (or None)

    Example:
        >>> result = validate_pace("8:30")
        >>> if result:
        ...     print(result.sanitized_value.to_decimal())
    """
    if pace is None or (isinstance(pace, str) and not pace.strip()):
        if required:
            return ValidationResult(is_valid=False, error_message="Pace is required")
        return ValidationResult(is_valid=True, sanitized_value=None)

    if isinstance(pace, str):
        try:
            pace = Pace.parse(pace)
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Pace must look like M:SS: {pace}",
            )

    if not (PACE_MIN_MINUTES <= pace.minutes <= PACE_MAX_MINUTES):
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Pace minutes must be between {PACE_MIN_MINUTES} and "
                f"{PACE_MAX_MINUTES}: {pace}"
            ),
        )
    if pace.seconds not in PACE_SECOND_STEPS:
        return ValidationResult(
            is_valid=False,
            error_message=f"Pace seconds must be 00, 15, 30 or 45: {pace}",
        )
    return ValidationResult(is_valid=True, sanitized_value=pace)


def validate_pace_strict(pace: Union[str, Pace]) -> Pace:
    """Validate pace and return it or raise exception.

    Raises:
        PaceValidationException: If pace is invalid
    """
    result = validate_pace(pace, required=True)
    if not result.is_valid:
        raise PaceValidationException(result.error_message)
    return result.sanitized_value


# ========== Sign-up Field Validation ==========


def validate_role(role: Optional[str]) -> ValidationResult:
    if role in (ROLE_ATHLETE, ROLE_GUIDE):
        return ValidationResult(is_valid=True, sanitized_value=role)
    return ValidationResult(
        is_valid=False, error_message=f"Role must be athlete or guide: {role}"
    )


def validate_status(status: Optional[str]) -> ValidationResult:
    if status in (STATUS_YES, STATUS_MAYBE, STATUS_NO):
        return ValidationResult(is_valid=True, sanitized_value=status)
    return ValidationResult(
        is_valid=False, error_message=f"RSVP status must be yes, maybe or no: {status}"
    )


def validate_activity(activity: Optional[str]) -> ValidationResult:
    if activity in ACTIVITIES:
        return ValidationResult(is_valid=True, sanitized_value=activity)
    return ValidationResult(
        is_valid=False,
        error_message=f"Activity must be one of {', '.join(ACTIVITIES)}: {activity}",
    )


# ========== Generic Validation ==========


def validate_non_empty(
    value: Optional[str], field_name: str = "Field"
) -> ValidationResult:
    """Validate that a field is not empty.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with validation status
    """
    if not value or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be empty",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value).strip())
