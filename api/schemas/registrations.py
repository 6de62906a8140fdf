"""
Pydantic schemas for registration submission and admin management.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from campreg.models import RegistrationStatus, TriState


class RegistrationFields(BaseModel):
    """Applicant-editable fields. Required-ness is enforced by form validation."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    age: int | None = None
    niveau_scolaire: str | None = None
    school: str | None = None
    org_status: str | None = None
    previous_camps: bool | None = None
    can_pay_350dh: bool | None = None
    camp_expectation: str | None = None
    extra_info: str | None = None
    photo_url: str | None = None

    def to_store(self, *, only_set: bool = False) -> dict[str, Any]:
        """Convert to PocketBase field values.

        Args:
            only_set: Include only fields the caller actually sent (PATCH)
        """
        data = self.model_dump(exclude_unset=only_set)
        for field in ("name", "email", "phone"):
            if isinstance(data.get(field), str):
                data[field] = data[field].strip()
        for field in ("previous_camps", "can_pay_350dh"):
            if field in data:
                data[field] = TriState.from_optional_bool(data[field]).to_store()
        return data


class RegistrationCreate(RegistrationFields):
    """Public form submission."""


class RegistrationUpdate(RegistrationFields):
    """Admin edit - only supplied fields change."""


class StatusUpdate(BaseModel):
    status: RegistrationStatus


class RegistrationListResponse(BaseModel):
    items: list[dict[str, Any]]
    total: int
    counts: dict[str, int]
