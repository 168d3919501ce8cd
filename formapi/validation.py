"""Field rules for form submissions.

``validate_form_data`` works on a plain mapping keyed by the JSON field names
and reports every violated field at once, so callers can render all problems
in a single response.
"""
import re
from typing import Any, List, Mapping, NamedTuple

from email_validator import EmailNotValidError, validate_email

NATIONAL_ID_PATTERN = re.compile(r"[0-9]{12}")

FIELD_LABELS = {
    "name": "Name",
    "email": "Email",
    "password": "Password",
    "contact": "Contact",
    "address": "Address",
    "nationalId": "National ID",
    "dateOfBirth": "Date of birth",
}
REQUIRED_FIELDS = tuple(FIELD_LABELS)


class Violation(NamedTuple):
    field: str
    message: str


def _check_email(value: str) -> str | None:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        return f"Email is not a valid email address: {e}"
    return None


def _check_national_id(value: str) -> str | None:
    if not NATIONAL_ID_PATTERN.fullmatch(value):
        return "National ID must be exactly 12 digits"
    return None


FORMAT_CHECKS = {
    "email": _check_email,
    "nationalId": _check_national_id,
}


def validate_form_data(payload: Mapping[str, Any]) -> List[Violation]:
    violations = []
    for field in REQUIRED_FIELDS:
        label = FIELD_LABELS[field]
        value = payload.get(field)
        if value is None:
            violations.append(Violation(field, f"{label} is required"))
            continue
        if not isinstance(value, str):
            violations.append(Violation(field, f"{label} must be a string"))
            continue
        if not value.strip():
            violations.append(Violation(field, f"{label} is required"))
            continue
        check = FORMAT_CHECKS.get(field)
        if check is not None:
            message = check(value)
            if message:
                violations.append(Violation(field, message))
    return violations
