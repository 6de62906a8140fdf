"""
API Services - Business logic behind the registration API routers.
"""

from .notification_service import SUCCESS_MESSAGE, ApprovalNotificationService
from .registration_service import RegistrationListing, RegistrationService, SubmissionResult, matches_search

__all__ = [
    "SUCCESS_MESSAGE",
    "ApprovalNotificationService",
    "RegistrationListing",
    "RegistrationService",
    "SubmissionResult",
    "matches_search",
]
