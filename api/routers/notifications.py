"""
Notifications Router - WhatsApp approval messages.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from campreg.errors import RegistrationError

from ..dependencies import get_notification_service
from ..errors import error_response
from ..schemas import ApprovalNotificationRequest, ApprovalNotificationResponse
from ..services.notification_service import ApprovalNotificationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])


@router.post("/send-approval-whatsapp", response_model=None)
async def send_approval_whatsapp(
    request: ApprovalNotificationRequest,
    service: ApprovalNotificationService = Depends(get_notification_service),
) -> ApprovalNotificationResponse | JSONResponse:
    """Send the one-time approval message for an approved registration.

    ``limit_reached`` (429) tells the dashboard to stop offering sends for
    the rest of the session.
    """
    try:
        message = await service.send_approval(request.registration_id, request.access_token)
    except RegistrationError as e:
        if e.status_code >= 500:
            logger.error(f"Approval notification failed for {request.registration_id}: {e.message}")
        return error_response(e)
    except Exception as e:
        logger.error(f"WhatsApp API error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return ApprovalNotificationResponse(message=message)
