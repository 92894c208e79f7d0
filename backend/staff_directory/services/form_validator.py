from __future__ import annotations

import re
from collections.abc import Callable, Mapping

Predicate = Callable[[str], bool]
Rule = tuple[Predicate, str]

EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)([A-Za-z0-9_'+\-\.]*)[A-Za-z0-9_+\-]@([A-Za-z0-9][A-Za-z0-9\-]*\.)+[A-Za-z]{2,}$"
)
PHONE_PATTERN = re.compile(r"^[0-9]{10,15}$")


def is_present(value: str) -> bool:
    return len(value) > 0


def is_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_phone_number(value: str) -> bool:
    return PHONE_PATTERN.fullmatch(value) is not None


# Rules run in order; the first failing rule supplies the field's message.
FIELD_RULES: dict[str, list[Rule]] = {
    "firstName": [(is_present, "First name is required")],
    "lastName": [(is_present, "Last name is required")],
    "email": [
        (is_present, "Email is required"),
        (is_email, "Enter a valid email address"),
    ],
    "phoneNumber": [
        (is_present, "Phone number is required"),
        (is_phone_number, "Enter a valid phone number (10-15 digits)"),
    ],
    "employeeID": [(is_present, "Employee ID is required")],
    "city": [(is_present, "City is required")],
    "country": [(is_present, "Country is required")],
    "latitude": [(is_present, "Latitude is required")],
    "longitude": [(is_present, "Longitude is required")],
}


def validate_field(name: str, value: str) -> str | None:
    for predicate, message in FIELD_RULES.get(name, []):
        if not predicate(value):
            return message
    return None


def validate_draft(values: Mapping[str, str]) -> dict[str, str]:
    """Error message per failing field; an empty mapping means the draft is valid."""
    errors: dict[str, str] = {}
    for name in FIELD_RULES:
        message = validate_field(name, values.get(name, "") or "")
        if message is not None:
            errors[name] = message
    return errors
