"""
Registrations Router - public form submission and admin management.

Management endpoints require an admin bearer token; reads and writes go
through a PocketBase client acting with that token.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query

from campreg.errors import InputValidationError
from campreg.models import RegistrationStatus

from ..dependencies import get_admin_service, get_submission_service
from ..schemas import RegistrationCreate, RegistrationListResponse, RegistrationUpdate, StatusUpdate
from ..services.registration_service import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/registrations", tags=["registrations"])


def _parse_status_filter(value: str | None) -> RegistrationStatus | None:
    if not value or value == "all":
        return None
    try:
        return RegistrationStatus(value)
    except ValueError:
        raise InputValidationError(f"Invalid status filter: {value}") from None


@router.post("", status_code=201)
async def submit_registration(
    request: RegistrationCreate,
    service: RegistrationService = Depends(get_submission_service),
) -> dict[str, Any]:
    """Public registration form submission."""
    result = await service.submit(request.to_store())
    response: dict[str, Any] = {"success": True, "registration": result.registration.to_dict()}
    if result.scoring_error:
        response["scoring_error"] = result.scoring_error
    return response


@router.get("", response_model=RegistrationListResponse)
async def list_registrations(
    status: str | None = Query(default="all"),
    search: str | None = Query(default=None),
    service: RegistrationService = Depends(get_admin_service),
) -> RegistrationListResponse:
    """List registrations newest first, filtered by status and search term."""
    listing = await service.list_registrations(_parse_status_filter(status), search)
    return RegistrationListResponse(
        items=[r.to_dict() for r in listing.items],
        total=len(listing.items),
        counts=listing.counts,
    )


@router.get("/{registration_id}")
async def get_registration(
    registration_id: str,
    service: RegistrationService = Depends(get_admin_service),
) -> dict[str, Any]:
    registration = await service.get(registration_id)
    return registration.to_dict()


@router.patch("/{registration_id}")
async def update_registration(
    registration_id: str,
    request: RegistrationUpdate,
    service: RegistrationService = Depends(get_admin_service),
) -> dict[str, Any]:
    """Edit applicant fields; fields not sent are left unchanged."""
    data = request.to_store(only_set=True)
    if not data:
        raise InputValidationError("No fields to update")
    registration = await service.update_fields(registration_id, data)
    return registration.to_dict()


@router.put("/{registration_id}/status")
async def update_registration_status(
    registration_id: str,
    request: StatusUpdate,
    service: RegistrationService = Depends(get_admin_service),
) -> dict[str, Any]:
    registration = await service.set_status(registration_id, request.status)
    return registration.to_dict()


@router.delete("/{registration_id}")
async def delete_registration(
    registration_id: str,
    service: RegistrationService = Depends(get_admin_service),
) -> dict[str, bool]:
    await service.delete(registration_id)
    return {"success": True}
