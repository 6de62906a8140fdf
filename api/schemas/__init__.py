"""
Pydantic schemas for the registration API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .notifications import ApprovalNotificationRequest, ApprovalNotificationResponse
from .registrations import (
    RegistrationCreate,
    RegistrationListResponse,
    RegistrationUpdate,
    StatusUpdate,
)
from .scoring import ParticipantScoreRequest, ParticipantScoreResponse

__all__ = [
    # Notifications
    "ApprovalNotificationRequest",
    "ApprovalNotificationResponse",
    # Registrations
    "RegistrationCreate",
    "RegistrationListResponse",
    "RegistrationUpdate",
    "StatusUpdate",
    # Scoring
    "ParticipantScoreRequest",
    "ParticipantScoreResponse",
]
