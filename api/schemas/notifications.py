"""
Pydantic schemas for the approval notification endpoint.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ApprovalNotificationRequest(BaseModel):
    """Request to send the WhatsApp approval message for one registration."""

    model_config = ConfigDict(populate_by_name=True)

    registration_id: str | None = Field(default=None, alias="registrationId")
    access_token: str | None = Field(default=None, alias="accessToken")


class ApprovalNotificationResponse(BaseModel):
    success: bool = True
    message: str
