"""Registration form validation.

Checks run in form order and the first failure is reported, matching what
applicants see on the public form.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .errors import InputValidationError
from .messaging.phone import is_valid_moroccan_phone
from .models import EDUCATION_LEVELS, MAX_AGE, MIN_AGE, ORG_STATUSES

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = ("name", "email", "phone", "extra_info", "photo_url")


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_email(email: str) -> bool:
    return bool(_EMAIL.match(email))


def validate_age(age: Any) -> bool:
    try:
        return MIN_AGE <= int(age) <= MAX_AGE
    except (TypeError, ValueError):
        return False


def validate_registration_fields(data: Mapping[str, Any], *, partial: bool = False) -> None:
    """Validate submitted registration fields.

    Args:
        data: Field values keyed by store field name
        partial: Only validate fields present in ``data`` (admin edits)

    Raises:
        InputValidationError: First failing rule
    """

    def check_required(field: str, message: str) -> None:
        if (not partial or field in data) and is_blank(data.get(field)):
            raise InputValidationError(message)

    check_required("name", "Full name is required")
    check_required("email", "Email is required")
    if not is_blank(data.get("email")) and not validate_email(str(data["email"]).strip()):
        raise InputValidationError("Please enter a valid email address")

    check_required("phone", "Phone number is required")
    if not is_blank(data.get("phone")) and not is_valid_moroccan_phone(str(data["phone"])):
        raise InputValidationError(
            "Invalid Moroccan phone number (example: +212 6 12 34 56 78 or 0612345678)"
        )

    check_required("extra_info", "Additional information is required")
    check_required("photo_url", "Photo is required")

    if data.get("age") is not None and not validate_age(data["age"]):
        raise InputValidationError(f"Age must be between {MIN_AGE} and {MAX_AGE}")
    if not is_blank(data.get("niveau_scolaire")) and data["niveau_scolaire"] not in EDUCATION_LEVELS:
        raise InputValidationError("Invalid educational level")
    if not is_blank(data.get("org_status")) and data["org_status"] not in ORG_STATUSES:
        raise InputValidationError("Invalid organization status")
