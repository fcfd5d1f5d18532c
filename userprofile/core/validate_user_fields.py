"""Request Field Validation — explicit checks run by the route layer before the service.

Invariants:
    - All functions are PURE and return list[FieldViolation]; empty list means valid
    - Every failing field is reported, not only the first one
    - Field names in violations are the wire names (UserField values)
    - Pydantic has already parsed types (dates, strings) before these run

Design Decisions:
    - Presence and format rules live here rather than in pydantic validators, so
      the route decides when to raise FieldValidationError and every rule is
      testable without building a request
    - Email syntax delegated to pydantic's EmailStr (email-validator); no DNS or
      deliverability lookup
"""

from datetime import date

from pydantic import EmailStr, TypeAdapter, ValidationError

from userprofile.core.domain_types import UserField
from userprofile.core.errors import FieldViolation

_email_adapter = TypeAdapter(EmailStr)

INVALID_EMAIL = "Invalid email format"
BIRTH_DATE_NOT_PAST = "Birth date must be in the past"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def check_email_format(email: str) -> FieldViolation | None:
    try:
        _email_adapter.validate_python(email)
    except ValidationError:
        return FieldViolation(UserField.EMAIL.value, INVALID_EMAIL)
    return None


def check_birth_date_past(birth_date: date, today: date) -> FieldViolation | None:
    if birth_date >= today:
        return FieldViolation(UserField.BIRTH_DATE.value, BIRTH_DATE_NOT_PAST)
    return None


def validate_user_request(
    email: str | None,
    first_name: str | None,
    last_name: str | None,
    birth_date: date | None,
    today: date,
) -> list[FieldViolation]:
    """Full user payload (create, full update): required fields + formats."""
    violations: list[FieldViolation] = []

    if _is_blank(email):
        violations.append(FieldViolation(UserField.EMAIL.value, "Email is required"))
    else:
        bad_email = check_email_format(email)
        if bad_email:
            violations.append(bad_email)

    if _is_blank(first_name):
        violations.append(
            FieldViolation(UserField.FIRST_NAME.value, "First name is required"),
        )
    if _is_blank(last_name):
        violations.append(
            FieldViolation(UserField.LAST_NAME.value, "Last name is required"),
        )

    if birth_date is None:
        violations.append(
            FieldViolation(UserField.BIRTH_DATE.value, "Birth date is required"),
        )
    else:
        bad_date = check_birth_date_past(birth_date, today)
        if bad_date:
            violations.append(bad_date)

    return violations


def validate_user_fields_update(
    email: str | None, birth_date: date | None, today: date,
) -> list[FieldViolation]:
    """Partial payload: only supplied fields are checked, nothing is required."""
    violations: list[FieldViolation] = []
    if email is not None:
        bad_email = check_email_format(email)
        if bad_email:
            violations.append(bad_email)
    if birth_date is not None:
        bad_date = check_birth_date_past(birth_date, today)
        if bad_date:
            violations.append(bad_date)
    return violations
